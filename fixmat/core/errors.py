"""
Errors: иерархия исключений fixmat

Два класса ошибок считаются неисправимыми в точке возникновения:
- DimensionMismatch: несовместимые размеры операндов или непрямоугольный литерал
  (возникает при конструировании узла, никогда во время вычисления)
- IndexOutOfBounds: обращение к элементу за пределами фиксированных размеров

Дополнительно:
- ElementTypeMismatch: операнды с разными типами элементов
- LiteralError: литерал матрицы не соответствует JSON Schema
"""

from typing import Any, Optional


# =============================================================================
# BASE
# =============================================================================


class MatrixError(Exception):
    """Базовое исключение для всех ошибок fixmat."""

    pass


# =============================================================================
# CONSTRUCTION-TIME ERRORS
# =============================================================================


class DimensionMismatch(MatrixError, ValueError):
    """
    Несовместимые размеры при построении узла или матрицы.

    Атрибуты expected/actual содержат ожидаемое и фактическое значение
    (число строк/столбцов или пару (rows, cols)).
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ElementTypeMismatch(MatrixError, TypeError):
    """Тип элемента операнда или записываемого значения не совпадает с ожидаемым."""

    def __init__(
        self,
        message: str,
        expected: Optional[type] = None,
        actual: Optional[type] = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class LiteralError(MatrixError, ValueError):
    """Литерал матрицы не является списком строк из чисел."""

    def __init__(self, message: str, path: str = "$"):
        super().__init__(message)
        self.path = path


# =============================================================================
# ACCESS ERRORS
# =============================================================================


class IndexOutOfBounds(MatrixError, IndexError):
    """
    Индекс за пределами фиксированных размеров матрицы.

    Ошибка программиста, а не восстанавливаемое значение: частичного
    результата не существует.
    """

    def __init__(self, axis: str, index: int, bound: int):
        super().__init__(
            f"{axis} index {index} out of bounds for dimension {bound}"
        )
        self.axis = axis
        self.index = index
        self.bound = bound
