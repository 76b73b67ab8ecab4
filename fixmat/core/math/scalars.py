"""
Scalars: типы элементов матриц и их нулевые значения

Модуль определяет, какие скалярные типы могут храниться в матрице и как
значение приводится к типу элемента при записи.

Поддерживаемые типы элементов:
- int (целые, без bool)
- float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все узлы одного дерева выражения разделяют один тип элемента
2. Product требует нулевого значения типа (zero_of) для аккумулятора
3. bool никогда не является элементом матрицы
"""

from typing import Any, Final, Iterable

from fixmat.core.errors import ElementTypeMismatch

# =============================================================================
# ТИПЫ ЭЛЕМЕНТОВ
# =============================================================================

# Нулевые значения поддерживаемых типов элементов
ZERO_VALUES: Final[dict] = {
    int: 0,
    float: 0.0,
}

SUPPORTED_ELEM_TYPES: Final[tuple] = tuple(ZERO_VALUES)


def is_elem_type(elem_type: Any) -> bool:
    """Проверка, является ли тип допустимым типом элемента."""
    return elem_type in ZERO_VALUES


def zero_of(elem_type: type) -> Any:
    """
    Нулевое значение типа элемента.

    Args:
        elem_type: int или float

    Returns:
        0 для int, 0.0 для float

    Raises:
        ElementTypeMismatch: Если тип не поддерживается

    Examples:
        >>> zero_of(int)
        0
        >>> zero_of(float)
        0.0
    """
    try:
        return ZERO_VALUES[elem_type]
    except KeyError:
        raise ElementTypeMismatch(
            f"Unsupported element type: {elem_type!r}", actual=elem_type
        ) from None


def scalar_type(value: Any) -> type:
    """
    Тип элемента для одиночного скаляра.

    Raises:
        ElementTypeMismatch: Для bool и нечисловых значений
    """
    # bool является подклассом int, проверяем точный тип
    value_type = type(value)
    if value_type in ZERO_VALUES:
        return value_type
    raise ElementTypeMismatch(
        f"Value {value!r} of type {value_type.__name__} is not a matrix element",
        actual=value_type,
    )


def infer_elem_type(values: Iterable[Any], promote_mixed: bool = True) -> type:
    """
    Вывод общего типа элемента для набора скаляров.

    Args:
        values: Скаляры (int/float)
        promote_mixed: Смесь int/float приводится к float (default: True)

    Returns:
        int если все значения int, float если есть хотя бы один float.
        Для пустого набора возвращается float.

    Raises:
        ElementTypeMismatch: Для нечисловых значений или смеси при promote_mixed=False
    """
    seen = {scalar_type(v) for v in values}

    if not seen:
        return float
    if len(seen) == 1:
        return seen.pop()
    if not promote_mixed:
        raise ElementTypeMismatch(
            "Mixed int/float elements are not allowed without promotion",
            expected=int,
            actual=float,
        )
    return float


def coerce_element(value: Any, elem_type: type) -> Any:
    """
    Приведение значения к типу элемента матрицы.

    - float матрица принимает int и float (хранится как float)
    - int матрица принимает только int

    Raises:
        ElementTypeMismatch: Если значение нельзя хранить в матрице этого типа
    """
    value_type = scalar_type(value)

    if value_type is elem_type:
        return value
    if elem_type is float and value_type is int:
        return float(value)

    raise ElementTypeMismatch(
        f"Cannot store {value_type.__name__} value {value!r} "
        f"in a matrix of {elem_type.__name__}",
        expected=elem_type,
        actual=value_type,
    )
