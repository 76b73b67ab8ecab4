"""
Тесты для Shape и проверок совместимости размеров

Проверяет:
1. Immutable Pydantic модель Shape
2. require_same_shape / require_conformable / require_same_elem_type
3. Диагностику DimensionMismatch (expected/actual)
"""

import pytest
from pydantic import ValidationError

from fixmat import mat
from fixmat.core.domain.shape import (
    Shape,
    require_conformable,
    require_same_elem_type,
    require_same_shape,
)
from fixmat.core.errors import DimensionMismatch, ElementTypeMismatch


# =============================================================================
# SHAPE MODEL
# =============================================================================


class TestShape:
    """Тесты модели Shape"""

    def test_creation(self) -> None:
        shape = Shape(rows=2, cols=3)
        assert shape.rows == 2
        assert shape.cols == 3
        assert shape.size == 6
        assert shape.as_tuple() == (2, 3)
        assert str(shape) == "2x3"

    def test_transposed(self) -> None:
        """Транспонирование меняет размеры местами"""
        assert Shape(rows=2, cols=3).transposed() == Shape(rows=3, cols=2)

    def test_zero_dimensions_allowed(self) -> None:
        assert Shape(rows=1, cols=0).size == 0

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Shape(rows=-1, cols=2)

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Shape(rows=2.5, cols=2)

    def test_frozen(self) -> None:
        """Размеры неизменяемы"""
        shape = Shape(rows=2, cols=2)
        with pytest.raises(ValidationError):
            shape.rows = 3

    def test_equality_and_hash(self) -> None:
        assert Shape(rows=2, cols=2) == Shape(rows=2, cols=2)
        assert Shape(rows=2, cols=3) != Shape(rows=3, cols=2)
        assert len({Shape(rows=1, cols=1), Shape(rows=1, cols=1)}) == 1


# =============================================================================
# COMPATIBILITY CHECKS
# =============================================================================


class TestCompatibilityChecks:
    """Тесты проверок совместимости операндов"""

    @pytest.fixture
    def a(self):
        return mat([[1, 2, 3], [3, 4, 5]])

    @pytest.fixture
    def b(self):
        return mat([[1, 2], [3, 4], [5, 6]])

    def test_same_shape_passes(self, a) -> None:
        require_same_shape(a, a, "Sum")

    def test_same_shape_mismatch(self, a, b) -> None:
        """2x3 и 3x2 не складываются"""
        with pytest.raises(DimensionMismatch, match=r"2x3 vs 3x2") as exc_info:
            require_same_shape(a, b, "Sum")
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (3, 2)

    def test_conformable_passes(self, a, b) -> None:
        require_conformable(a, b)

    def test_conformable_mismatch(self, a) -> None:
        c = mat([[1, 2], [3, 4]])
        with pytest.raises(DimensionMismatch, match="3 columns but right operand has 2 rows") as exc_info:
            require_conformable(a, c)
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_elem_type_mismatch(self) -> None:
        ints = mat([[1, 2]])
        floats = mat([[1.0, 2.0]])
        with pytest.raises(ElementTypeMismatch, match="int vs float"):
            require_same_elem_type(ints, floats, "Sum")

    def test_dimension_mismatch_is_value_error(self) -> None:
        """DimensionMismatch перехватывается как ValueError"""
        assert issubclass(DimensionMismatch, ValueError)
