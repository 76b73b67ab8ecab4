"""
Tests for matrix literal contracts and the mat() builder

Комплексное тестирование:
- Валидность самой схемы matrix_literal.json
- Валидация правильных литералов
- Детекция нарушений формы (не список, не числа, bool)
- Прямоугольность с диагностикой строки
- Вывод типа элемента и LiteralConfig
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from fixmat import LiteralConfig, mat
from fixmat.core.contracts import (
    ContractValidator,
    MatrixLiteralValidator,
    SchemaLoader,
    get_literal_validator,
    validate_matrix_literal,
)
from fixmat.core.errors import DimensionMismatch, ElementTypeMismatch, LiteralError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schema_is_valid(self) -> None:
        """Схема проходит meta-validation"""
        schema = SchemaLoader().load_schema("matrix_literal")
        Draft202012Validator.check_schema(schema)
        assert schema["type"] == "array"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("matrix_literal") is loader.load_schema("matrix_literal")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_loader(self, tmp_path: Path) -> None:
        (tmp_path / "row.json").write_text(
            json.dumps({"type": "array", "items": {"type": "integer"}}), encoding="utf-8"
        )
        validator = ContractValidator("row", loader=SchemaLoader(tmp_path))
        assert validator.is_valid([1, 2])
        assert not validator.is_valid([1.5])


# =============================================================================
# LITERAL VALIDATOR
# =============================================================================


class TestMatrixLiteralValidator:
    """Тесты валидатора литерала"""

    def test_valid(self) -> None:
        validate_matrix_literal([[1, 2], [3, 4.5]])

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_matrix_literal([])

    def test_non_number_rejected(self) -> None:
        validator = MatrixLiteralValidator()
        assert not validator.is_valid([[1, "2"]])

    def test_bool_rejected(self) -> None:
        assert not MatrixLiteralValidator().is_valid([[True, 1]])

    def test_iter_errors(self) -> None:
        errors = list(MatrixLiteralValidator().iter_errors([[1, "x"], [None, 2]]))
        assert len(errors) == 2

    def test_validator_cached(self) -> None:
        assert get_literal_validator() is get_literal_validator()


# =============================================================================
# mat()
# =============================================================================


class TestMatBuilder:
    """Тесты литерального конструктора"""

    def test_rectangular(self) -> None:
        m = mat([[1, 2, 3], [3, 4, 5]])
        assert m.size() == (2, 3)
        assert m.elem_type is int
        assert m.get(1, 2) == 5

    def test_tuples_accepted(self) -> None:
        m = mat(((1, 2), (3, 4)))
        assert m.to_list() == [[1, 2], [3, 4]]

    def test_single_element(self) -> None:
        assert mat([[7]]).get(0, 0) == 7

    def test_non_rectangular(self) -> None:
        """[[1, 2], [3]] -> DimensionMismatch с номером строки"""
        with pytest.raises(
            DimensionMismatch, match="matrix literal row 1: expected 2 elements, found 1"
        ) as exc_info:
            mat([[1, 2], [3]])
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    def test_longer_row_rejected(self) -> None:
        with pytest.raises(DimensionMismatch, match="row 2: expected 2 elements, found 3"):
            mat([[1, 2], [3, 4], [5, 6, 7]])

    def test_empty_literal(self) -> None:
        with pytest.raises(LiteralError):
            mat([])

    def test_not_a_list(self) -> None:
        with pytest.raises(LiteralError):
            mat(42)

    def test_non_number_element(self) -> None:
        """Путь к ошибочному элементу указан в сообщении"""
        with pytest.raises(LiteralError, match=r"\$\[0\]\[1\]") as exc_info:
            mat([[1, "2"]])
        assert exc_info.value.path == "$[0][1]"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_mixed_promoted_to_float(self) -> None:
        m = mat([[1, 2.5], [3, 4]])
        assert m.elem_type is float
        assert m.get(1, 0) == 3.0
        assert type(m.get(1, 0)) is float

    def test_mixed_rejected_without_promotion(self) -> None:
        with pytest.raises(ElementTypeMismatch):
            mat([[1, 2.5]], config=LiteralConfig(promote_mixed=False))

    def test_explicit_elem_type(self) -> None:
        m = mat([[1, 2]], elem_type=float)
        assert m.elem_type is float
        assert m.get(0, 0) == 1.0

    def test_elem_type_not_a_type(self) -> None:
        """elem_type проверяется до построения, имя типа в виде строки отвергается"""
        with pytest.raises(ElementTypeMismatch, match="Unsupported element type"):
            mat([[1]], elem_type="int")

    def test_unsupported_explicit_elem_type(self) -> None:
        with pytest.raises(ElementTypeMismatch):
            mat([[1]], elem_type=bool)

    def test_zero_columns(self) -> None:
        m = mat([[], []])
        assert m.size() == (2, 0)

    def test_config_frozen(self) -> None:
        config = LiteralConfig()
        with pytest.raises(AttributeError):
            config.promote_mixed = False
