"""
Contract Validation Module

Модуль для валидации литералов матриц (JSON Schema) и построения из них
плотных матриц.
"""

from .validators import (
    ContractValidator,
    MatrixLiteralValidator,
    SchemaLoader,
    get_literal_validator,
    validate_matrix_literal,
)
from .literal import mat

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixLiteralValidator",
    # Functions
    "get_literal_validator",
    "validate_matrix_literal",
    "mat",
]
