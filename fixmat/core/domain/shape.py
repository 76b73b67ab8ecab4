"""
Shape: размеры матриц и проверки совместимости

Immutable Pydantic модель формы матрицы и проверки, которые выполняются при
конструировании узлов выражения (до любого обращения к элементам):
- Sum: одинаковые формы операндов
- Product: число столбцов левого == число строк правого
- Sum/Product: одинаковый тип элемента

Узел с несовместимыми операндами никогда не создаётся.
"""

import logging

from pydantic import BaseModel, Field

from fixmat.core.errors import DimensionMismatch, ElementTypeMismatch

logger = logging.getLogger(__name__)


# =============================================================================
# SHAPE MODEL
# =============================================================================


class Shape(BaseModel):
    """
    Форма матрицы (rows x cols).

    Immutable модель (frozen=True): размеры фиксируются при создании значения
    и не меняются за время его жизни.
    """

    rows: int = Field(..., ge=0, description="Число строк")
    cols: int = Field(..., ge=0, description="Число столбцов")

    model_config = {"frozen": True, "strict": True}

    @property
    def size(self) -> int:
        """Число элементов (rows * cols)."""
        return self.rows * self.cols

    def transposed(self) -> "Shape":
        """Форма транспонированной матрицы (строки и столбцы меняются местами)."""
        return Shape(rows=self.cols, cols=self.rows)

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def __str__(self) -> str:
        return f"{self.rows}x{self.cols}"


# =============================================================================
# ПРОВЕРКИ СОВМЕСТИМОСТИ
# =============================================================================


def require_same_shape(left, right, operation: str) -> None:
    """
    Проверка одинаковых размеров операндов (Sum).

    Args:
        left: Левый операнд (Matrix)
        right: Правый операнд (Matrix)
        operation: Имя операции для диагностики

    Raises:
        DimensionMismatch: Если формы не совпадают
    """
    if left.nrows() == right.nrows() and left.ncols() == right.ncols():
        return

    message = (
        f"{operation}: operand shapes differ "
        f"({left.nrows()}x{left.ncols()} vs {right.nrows()}x{right.ncols()})"
    )
    logger.debug("rejected node: %s", message)
    raise DimensionMismatch(message, expected=left.size(), actual=right.size())


def require_conformable(left, right) -> None:
    """
    Проверка согласованности для произведения: left.ncols() == right.nrows().

    Raises:
        DimensionMismatch: Если внутренние размеры не совпадают
    """
    if left.ncols() == right.nrows():
        return

    message = (
        f"Product: left operand has {left.ncols()} columns but right operand "
        f"has {right.nrows()} rows "
        f"({left.nrows()}x{left.ncols()} * {right.nrows()}x{right.ncols()})"
    )
    logger.debug("rejected node: %s", message)
    raise DimensionMismatch(message, expected=left.ncols(), actual=right.nrows())


def require_same_elem_type(left, right, operation: str) -> None:
    """
    Проверка одинакового типа элемента у операндов.

    Raises:
        ElementTypeMismatch: Если типы элементов различаются
    """
    if left.elem_type is right.elem_type:
        return

    message = (
        f"{operation}: operand element types differ "
        f"({left.elem_type.__name__} vs {right.elem_type.__name__})"
    )
    logger.debug("rejected node: %s", message)
    raise ElementTypeMismatch(message, expected=left.elem_type, actual=right.elem_type)
