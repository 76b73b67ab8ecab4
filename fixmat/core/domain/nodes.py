"""
Composite Nodes: ленивые узлы дерева выражения

Transpose, Sum и Product оборачивают один или два операнда (любые значения
Matrix) и не хранят элементов. Элемент вычисляется рекурсивно при вызове
get(r, c) у корня дерева; промежуточные матрицы не создаются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Совместимость размеров проверяется в конструкторе узла (DimensionMismatch)
2. Все операнды разделяют один тип элемента (ElementTypeMismatch)
3. Узлы неизменяемы и никогда не изменяют операнды
4. Операнды хранятся по ссылке (изменения Mat видны через дерево)
5. Форма и тип элемента фиксируются в конструкторе: nrows()/ncols()/inner()
   и elem_type не обходят дерево

СТОИМОСТЬ ДОСТУПА:
    Transpose: стоимость операнда
    Sum:       стоимость left + стоимость right
    Product:   k * (стоимость left + стоимость right), k = left.ncols()
Мемоизации нет: повторный get() вычисляет элемент заново.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from fixmat.core.domain.matrix import Matrix
from fixmat.core.domain.shape import (
    Shape,
    require_conformable,
    require_same_elem_type,
    require_same_shape,
)
from fixmat.core.math.scalars import zero_of

logger = logging.getLogger(__name__)


def _require_matrix(value: Any, operation: str) -> None:
    if not isinstance(value, Matrix):
        raise TypeError(
            f"{operation} operand must be a Matrix, got {type(value).__name__}"
        )


def _freeze(node: Matrix, shape: Shape, elem_type: type) -> None:
    # frozen dataclass: запись только через object.__setattr__
    object.__setattr__(node, "_shape", shape)
    object.__setattr__(node, "_elem_type", elem_type)


# =============================================================================
# TRANSPOSE
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class Transpose(Matrix):
    """
    Транспонирование операнда.

    Меняются местами индексы, а не данные:
        nrows() == operand.ncols(), ncols() == operand.nrows()
        (r, c) -> operand(c, r)
    """

    operand: Matrix
    _shape: Shape = field(init=False, repr=False)
    _elem_type: type = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _require_matrix(self.operand, "Transpose")
        # NOTE: размеры меняются местами
        _freeze(
            self,
            Shape(rows=self.operand.ncols(), cols=self.operand.nrows()),
            self.operand.elem_type,
        )
        logger.debug("built Transpose<%s>", self._shape)

    @property
    def elem_type(self) -> type:
        return self._elem_type

    @property
    def shape(self) -> Shape:
        return self._shape

    def nrows(self) -> int:
        return self._shape.rows

    def ncols(self) -> int:
        return self._shape.cols

    def _unchecked_get(self, r: int, c: int) -> Any:
        # NOTE: индексы меняются местами
        return self.operand._unchecked_get(c, r)

    def __repr__(self) -> str:
        return f"Transpose({self.operand._label()})"


# =============================================================================
# SUM
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class Sum(Matrix):
    """
    Поэлементная сумма двух матриц одинаковой формы.

    (r, c) -> left(r, c) + right(r, c)
    """

    left: Matrix
    right: Matrix
    _shape: Shape = field(init=False, repr=False)
    _elem_type: type = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _require_matrix(self.left, "Sum")
        _require_matrix(self.right, "Sum")
        require_same_shape(self.left, self.right, "Sum")
        require_same_elem_type(self.left, self.right, "Sum")
        _freeze(
            self,
            Shape(rows=self.left.nrows(), cols=self.left.ncols()),
            self.left.elem_type,
        )
        logger.debug("built Sum<%s>", self._shape)

    @property
    def elem_type(self) -> type:
        return self._elem_type

    @property
    def shape(self) -> Shape:
        return self._shape

    def nrows(self) -> int:
        return self._shape.rows

    def ncols(self) -> int:
        return self._shape.cols

    def _unchecked_get(self, r: int, c: int) -> Any:
        return self.left._unchecked_get(r, c) + self.right._unchecked_get(r, c)

    def __repr__(self) -> str:
        return f"Sum({self.left._label()}, {self.right._label()})"


# =============================================================================
# PRODUCT
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class Product(Matrix):
    """
    Матричное произведение left * right.

    Требует left.ncols() == right.nrows(); форма результата
    (left.nrows(), right.ncols()).

    (r, c) -> sum_{i<k} left(r, i) * right(i, c), аккумулятор начинается с
    нулевого значения типа элемента. Переполнение и округление следуют
    семантике типа элемента.
    """

    left: Matrix
    right: Matrix
    _shape: Shape = field(init=False, repr=False)
    _elem_type: type = field(init=False, repr=False)
    _inner: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _require_matrix(self.left, "Product")
        _require_matrix(self.right, "Product")
        require_conformable(self.left, self.right)
        require_same_elem_type(self.left, self.right, "Product")
        _freeze(
            self,
            Shape(rows=self.left.nrows(), cols=self.right.ncols()),
            self.left.elem_type,
        )
        object.__setattr__(self, "_inner", self.left.ncols())
        logger.debug(
            "built Product<%s> (inner dimension %d)", self._shape, self._inner
        )

    @property
    def elem_type(self) -> type:
        return self._elem_type

    @property
    def shape(self) -> Shape:
        return self._shape

    def inner(self) -> int:
        """Внутренняя размерность k (left.ncols() == right.nrows())."""
        return self._inner

    def nrows(self) -> int:
        return self._shape.rows

    def ncols(self) -> int:
        return self._shape.cols

    def _unchecked_get(self, r: int, c: int) -> Any:
        left, right = self.left, self.right
        acc = zero_of(self._elem_type)
        for i in range(self._inner):
            acc = acc + left._unchecked_get(r, i) * right._unchecked_get(i, c)
        return acc

    def __repr__(self) -> str:
        return f"Product({self.left._label()}, {self.right._label()})"
