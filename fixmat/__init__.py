"""
fixmat: fixed-size matrices with lazy expression trees.

Arithmetic builds an expression tree; ``get`` evaluates one element on demand::

    from fixmat import mat

    a = mat([[1, 2, 3], [3, 4, 5]])    # 2 by 3
    b = mat([[1, 2], [3, 4], [5, 6]])  # 3 by 2

    c = a * b                          # Product node, nothing computed yet
    assert c.get(0, 0) == 22

Shape mismatches are rejected when the node is built, never during evaluation.

Logging: every module logs to a child of the ``fixmat`` logger, which carries
only a ``NullHandler``. Applications that want the DEBUG construction events
on stderr opt in with the console handler from ``fixmat.logging``::

    from fixmat.logging import get_logger, reset_logger

    get_logger(level="DEBUG")   # or FIXMAT_LOG_LEVEL=DEBUG in the environment
    mat([[1, 2]]).t()           # "built Mat<1x2> of int", "built Transpose<2x1>"
    reset_logger()              # detach the handler again

``get_configured_level()`` reports the effective level of the ``fixmat`` logger.
"""

import logging

from fixmat.core.errors import (
    DimensionMismatch,
    ElementTypeMismatch,
    IndexOutOfBounds,
    LiteralError,
    MatrixError,
)
from fixmat.core.config import DEFAULT_LITERAL_CONFIG, LiteralConfig
from fixmat.core.domain import Mat, Matrix, Product, Row, Shape, Sum, Transpose
from fixmat.core.math import zero_of
from fixmat.core.math.evaluation import access_cost, expression_depth, leaves, materialize
from fixmat.core.contracts import mat

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Errors
    "MatrixError",
    "DimensionMismatch",
    "ElementTypeMismatch",
    "IndexOutOfBounds",
    "LiteralError",
    # Config
    "LiteralConfig",
    "DEFAULT_LITERAL_CONFIG",
    # Matrices
    "Matrix",
    "Mat",
    "Row",
    "Shape",
    "Transpose",
    "Sum",
    "Product",
    # Construction / evaluation
    "mat",
    "materialize",
    "expression_depth",
    "access_cost",
    "leaves",
    "zero_of",
]
