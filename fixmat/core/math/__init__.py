"""
Core math modules для fixmat

Типы элементов и их нулевые значения. Вспомогательные функции для деревьев
выражений находятся в fixmat.core.math.evaluation.
"""

from fixmat.core.math.scalars import (
    SUPPORTED_ELEM_TYPES,
    ZERO_VALUES,
    coerce_element,
    infer_elem_type,
    is_elem_type,
    scalar_type,
    zero_of,
)

__all__ = [
    # Constants
    "SUPPORTED_ELEM_TYPES",
    "ZERO_VALUES",
    # Functions
    "coerce_element",
    "infer_elem_type",
    "is_elem_type",
    "scalar_type",
    "zero_of",
]
