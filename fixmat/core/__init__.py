"""
Core domain models, mathematical primitives, and invariants.

This module contains the matrix capability contract, dense storage, the lazy
expression nodes and the literal contracts they are built from.
"""
