"""
Matrix: контракт матричного значения

Любое матричное значение (плотное хранилище Mat или составной узел
Transpose/Sum/Product) реализует этот контракт:
- nrows()/ncols(): фиксированные размеры
- elem_type: тип элемента
- _unchecked_get(r, c): доступ к элементу БЕЗ проверки границ
- get(r, c): проверка границ + _unchecked_get

_unchecked_get существует только для внутренних рекурсивных вызовов между
реализациями Matrix, индексы которых уже корректны по построению. Публичная
точка входа всегда get().

Арифметика строит ленивое дерево выражения:
    a + b   -> Sum(a, b)
    a * b   -> Product(a, b)
    a.t()   -> Transpose(a)
"""

import operator
from abc import ABC, abstractmethod
from typing import Any, Iterator

from fixmat.core.domain.shape import Shape
from fixmat.core.errors import IndexOutOfBounds


def as_index(value: Any) -> int:
    """
    Индекс строки или столбца как int.

    bool отвергается так же, как при проверке элементов: True не является
    индексом 1.

    Raises:
        TypeError: Если value не целое число или bool
    """
    if isinstance(value, bool):
        raise TypeError(f"bool is not a valid matrix index: {value!r}")
    return operator.index(value)


class Matrix(ABC):
    """Базовый класс всех матричных значений."""

    __slots__ = ()

    # =========================================================================
    # КОНТРАКТ
    # =========================================================================

    @property
    @abstractmethod
    def elem_type(self) -> type:
        """Тип элемента (int или float)."""

    @abstractmethod
    def nrows(self) -> int:
        """Число строк."""

    @abstractmethod
    def ncols(self) -> int:
        """Число столбцов."""

    @abstractmethod
    def _unchecked_get(self, r: int, c: int) -> Any:
        """Элемент (r, c) без проверки границ. Поведение при r >= nrows() или
        c >= ncols() не определено."""

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def get(self, r: int, c: int) -> Any:
        """
        Элемент в строке r и столбце c.

        Args:
            r: Индекс строки, 0 <= r < nrows()
            c: Индекс столбца, 0 <= c < ncols()

        Returns:
            Значение элемента (вычисляется по требованию для составных узлов)

        Raises:
            IndexOutOfBounds: Если r или c выходят за размеры матрицы
            TypeError: Если индекс не целое число (bool тоже отвергается)
        """
        r = as_index(r)
        c = as_index(c)

        nrows = self.nrows()
        if not 0 <= r < nrows:
            raise IndexOutOfBounds("row", r, nrows)

        ncols = self.ncols()
        if not 0 <= c < ncols:
            raise IndexOutOfBounds("column", c, ncols)

        return self._unchecked_get(r, c)

    def size(self) -> tuple[int, int]:
        """Размер матрицы (nrows, ncols)."""
        return (self.nrows(), self.ncols())

    @property
    def shape(self) -> Shape:
        return Shape(rows=self.nrows(), cols=self.ncols())

    def iter_rows(self) -> Iterator[list]:
        """Строки матрицы как списки; каждый элемент вычисляется через get()."""
        for r in range(self.nrows()):
            yield [self.get(r, c) for c in range(self.ncols())]

    def to_list(self) -> list[list]:
        """Все элементы матрицы как вложенный список (по строкам)."""
        return list(self.iter_rows())

    def _label(self) -> str:
        """Короткая метка операнда для repr() составных узлов."""
        return repr(self)

    # =========================================================================
    # ПОСТРОЕНИЕ ВЫРАЖЕНИЙ
    # =========================================================================

    def transpose(self) -> "Matrix":
        """Транспонирование (ленивое, всегда допустимо)."""
        from fixmat.core.domain.nodes import Transpose

        return Transpose(self)

    def t(self) -> "Matrix":
        return self.transpose()

    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented

        from fixmat.core.domain.nodes import Sum

        return Sum(self, other)

    def __mul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented

        from fixmat.core.domain.nodes import Product

        return Product(self, other)

    __matmul__ = __mul__
