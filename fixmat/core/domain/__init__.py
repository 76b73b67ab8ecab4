"""
Domain models and value objects.

Contains the Matrix capability, dense storage (Mat, Row), the lazy expression
nodes (Transpose, Sum, Product) and the Shape value model.
"""

from fixmat.core.domain.shape import (
    Shape,
    require_conformable,
    require_same_elem_type,
    require_same_shape,
)
from fixmat.core.domain.matrix import Matrix
from fixmat.core.domain.dense import Mat, Row
from fixmat.core.domain.nodes import Product, Sum, Transpose

__all__ = [
    # Shape
    "Shape",
    "require_conformable",
    "require_same_elem_type",
    "require_same_shape",
    # Capability
    "Matrix",
    # Dense storage
    "Mat",
    "Row",
    # Expression nodes
    "Product",
    "Sum",
    "Transpose",
]
