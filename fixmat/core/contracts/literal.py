"""
Literal: построение плотной матрицы из литерала

    a = mat([
        [1, 2, 3],
        [3, 4, 5],
    ])

Порядок проверок:
1. Форма литерала по JSON Schema (список строк из чисел)   -> LiteralError
2. Прямоугольность: все строки длины строки 0             -> DimensionMismatch
3. Общий тип элемента (int/float)                         -> ElementTypeMismatch
4. Развёртка строк в row-major буфер и создание Mat

Матрица из некорректного литерала никогда не создаётся.
"""

import logging
from typing import Any, Optional, Sequence

from jsonschema import ValidationError

from fixmat.core.config import DEFAULT_LITERAL_CONFIG, LiteralConfig
from fixmat.core.contracts.validators import get_literal_validator
from fixmat.core.domain.dense import Mat
from fixmat.core.errors import DimensionMismatch, LiteralError
from fixmat.core.math.scalars import infer_elem_type

logger = logging.getLogger(__name__)


def _normalize(rows: Any) -> Any:
    # jsonschema считает массивами только list
    if isinstance(rows, (list, tuple)):
        return [list(row) if isinstance(row, (list, tuple)) else row for row in rows]
    return rows


def mat(
    rows: Sequence[Sequence[Any]],
    *,
    elem_type: Optional[type] = None,
    config: Optional[LiteralConfig] = None,
) -> Mat:
    """
    Построение Mat из прямоугольного литерала.

    Args:
        rows: Непустая последовательность строк, каждая строка из чисел
        elem_type: Явный тип элемента (int/float); по умолчанию выводится
        config: Конфигурация литерала (default: DEFAULT_LITERAL_CONFIG)

    Returns:
        Плотная матрица len(rows) x len(rows[0])

    Raises:
        LiteralError: Если литерал не является списком строк из чисел
        DimensionMismatch: Если строки имеют разную длину
        ElementTypeMismatch: Если элементы нельзя привести к общему типу

    Examples:
        >>> mat([[1, 2], [3, 4]]).get(1, 0)
        3
        >>> mat([[1, 2], [3]])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DimensionMismatch: matrix literal row 1: expected 2 elements, found 1
    """
    config = config or DEFAULT_LITERAL_CONFIG
    data = _normalize(rows)

    try:
        get_literal_validator(config.schema_name).validate(data)
    except ValidationError as e:
        raise LiteralError(
            f"Invalid matrix literal at {e.json_path}: {e.message}", path=e.json_path
        ) from e

    ncols = len(data[0])
    for i, row in enumerate(data):
        if len(row) != ncols:
            raise DimensionMismatch(
                f"matrix literal row {i}: expected {ncols} elements, found {len(row)}",
                expected=ncols,
                actual=len(row),
            )

    buffer = [value for row in data for value in row]
    if elem_type is None:
        elem_type = infer_elem_type(buffer, promote_mixed=config.promote_mixed)

    # Mat проверяет elem_type; логируем уже проверенный тип
    m = Mat(buffer, len(data), ncols, elem_type=elem_type)
    logger.debug("parsed %s literal of %s", m.shape, m.elem_type.__name__)
    return m
