"""
Mat: плотное хранилище матрицы (row-major)

Единственное матричное значение, владеющее реальными данными. Все составные
узлы в конечном счёте читают элементы из Mat.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(buffer) == nrows * ncols всегда
2. Элемент (r, c) хранится по смещению r * ncols + c
3. Все элементы имеют тип elem_type
4. Размеры фиксированы на всё время жизни значения

Изменение данных возможно только через строковое представление
(m[r][c] = value). Узлы, ссылающиеся на Mat, видят такие изменения; для
независимой копии используется Mat.copy().
"""

import logging
import operator
from typing import Any, Iterable, Iterator, Optional

from fixmat.core.domain.matrix import Matrix, as_index
from fixmat.core.errors import DimensionMismatch, ElementTypeMismatch, IndexOutOfBounds
from fixmat.core.math.scalars import coerce_element, infer_elem_type, is_elem_type

logger = logging.getLogger(__name__)


# =============================================================================
# DENSE STORAGE
# =============================================================================


class Mat(Matrix):
    """
    Плотная матрица фиксированного размера.

    Обычно создаётся через fixmat.mat([[...], ...]), который проверяет
    прямоугольность литерала. Прямой конструктор принимает уже развёрнутый
    буфер в порядке row-major.
    """

    __slots__ = ("_buffer", "_nrows", "_ncols", "_elem_type")

    def __init__(
        self,
        buffer: Iterable[Any],
        nrows: int,
        ncols: int,
        elem_type: Optional[type] = None,
    ):
        """
        Args:
            buffer: Элементы в порядке row-major (ровно nrows * ncols)
            nrows: Число строк (>= 0)
            ncols: Число столбцов (>= 0)
            elem_type: int или float; по умолчанию выводится из буфера

        Raises:
            DimensionMismatch: Если длина буфера != nrows * ncols
            ElementTypeMismatch: Если элемент нельзя хранить как elem_type
        """
        nrows = operator.index(nrows)
        ncols = operator.index(ncols)
        if nrows < 0 or ncols < 0:
            raise DimensionMismatch(
                f"Matrix dimensions must be non-negative, got {nrows}x{ncols}",
                actual=(nrows, ncols),
            )

        values = list(buffer)
        if len(values) != nrows * ncols:
            raise DimensionMismatch(
                f"Buffer of {len(values)} elements does not fit a "
                f"{nrows}x{ncols} matrix (expected {nrows * ncols})",
                expected=nrows * ncols,
                actual=len(values),
            )

        if elem_type is None:
            elem_type = infer_elem_type(values)
        elif not is_elem_type(elem_type):
            raise ElementTypeMismatch(
                f"Unsupported element type: {elem_type!r}", actual=elem_type
            )

        self._buffer = [coerce_element(v, elem_type) for v in values]
        self._nrows = nrows
        self._ncols = ncols
        self._elem_type = elem_type

        logger.debug("built Mat<%dx%d> of %s", nrows, ncols, elem_type.__name__)

    @classmethod
    def from_matrix(cls, m: Matrix) -> "Mat":
        """
        Материализация любого матричного значения в новое плотное хранилище.

        Каждый элемент вычисляется ровно один раз. Полезно, когда из дорогого
        выражения (например, произведения) нужно много элементов.
        """
        if not isinstance(m, Matrix):
            raise TypeError(f"Expected a Matrix, got {type(m).__name__}")

        nrows, ncols = m.nrows(), m.ncols()
        buffer = [m._unchecked_get(r, c) for r in range(nrows) for c in range(ncols)]
        return cls(buffer, nrows, ncols, elem_type=m.elem_type)

    def copy(self) -> "Mat":
        """Независимая копия хранилища (изменения не разделяются)."""
        return Mat(self._buffer, self._nrows, self._ncols, elem_type=self._elem_type)

    # =========================================================================
    # MATRIX
    # =========================================================================

    @property
    def elem_type(self) -> type:
        return self._elem_type

    def nrows(self) -> int:
        return self._nrows

    def ncols(self) -> int:
        return self._ncols

    def _unchecked_get(self, r: int, c: int) -> Any:
        return self._buffer[r * self._ncols + c]

    # =========================================================================
    # ROW VIEW
    # =========================================================================

    def __getitem__(self, r: int) -> "Row":
        r = as_index(r)
        if not 0 <= r < self._nrows:
            raise IndexOutOfBounds("row", r, self._nrows)
        return Row(self, r)

    def __len__(self) -> int:
        return self._nrows

    def __iter__(self) -> Iterator["Row"]:
        for r in range(self._nrows):
            yield Row(self, r)

    # =========================================================================
    # СРАВНЕНИЕ / ОТЛАДКА
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        return (
            self._nrows == other._nrows
            and self._ncols == other._ncols
            and self._elem_type is other._elem_type
            and self._buffer == other._buffer
        )

    # Mat изменяемый
    __hash__ = None

    def _label(self) -> str:
        return f"Mat<{self._nrows}x{self._ncols}>"

    def __repr__(self) -> str:
        rows = (
            self._buffer[r * self._ncols:(r + 1) * self._ncols]
            for r in range(self._nrows)
        )
        return "[" + ", ".join(repr(row) for row in rows) + "]"

    __str__ = __repr__


# =============================================================================
# ROW VIEW
# =============================================================================


class Row:
    """
    Представление строки плотной матрицы.

    row[c] читает и row[c] = value записывает элемент (r, c) исходной матрицы.
    Индекс столбца проверяется против ncols.
    """

    __slots__ = ("_mat", "_row")

    def __init__(self, mat: Mat, row: int):
        self._mat = mat
        self._row = row

    @property
    def index(self) -> int:
        return self._row

    def _offset(self, c: int) -> int:
        c = as_index(c)
        ncols = self._mat._ncols
        if not 0 <= c < ncols:
            raise IndexOutOfBounds("column", c, ncols)
        return self._row * ncols + c

    def __getitem__(self, c: int) -> Any:
        return self._mat._buffer[self._offset(c)]

    def __setitem__(self, c: int, value: Any) -> None:
        offset = self._offset(c)
        self._mat._buffer[offset] = coerce_element(value, self._mat._elem_type)

    def __len__(self) -> int:
        return self._mat._ncols

    def __iter__(self) -> Iterator[Any]:
        start = self._row * self._mat._ncols
        return iter(self._mat._buffer[start:start + self._mat._ncols])

    def to_list(self) -> list:
        return list(self)

    def __repr__(self) -> str:
        return repr(self.to_list())
