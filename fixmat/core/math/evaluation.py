"""
Evaluation: вспомогательные функции для деревьев выражений

Отдельного прохода вычисления нет: элемент вычисляется рекурсивной композицией
_unchecked_get узлов при вызове get(r, c) у корня. Модуль описывает цену такого
доступа и позволяет материализовать дерево в плотное хранилище.

Модель стоимости одного get() (число чтений из плотных листьев):
    Mat:       1
    Transpose: cost(operand)
    Sum:       cost(left) + cost(right)
    Product:   k * (cost(left) + cost(right))

Глубина дерева равна глубине вложенности выражения.
"""

from typing import Iterator

from fixmat.core.domain.dense import Mat
from fixmat.core.domain.matrix import Matrix
from fixmat.core.domain.nodes import Product, Sum, Transpose


def _operands(m: Matrix) -> tuple:
    if isinstance(m, Transpose):
        return (m.operand,)
    if isinstance(m, (Sum, Product)):
        return (m.left, m.right)
    return ()


def materialize(m: Matrix) -> Mat:
    """
    Вычисление всех элементов выражения в новую плотную матрицу.

    Args:
        m: Любое матричное значение

    Returns:
        Новый Mat той же формы и типа элемента
    """
    return Mat.from_matrix(m)


def expression_depth(m: Matrix) -> int:
    """
    Глубина дерева выражения.

    Examples:
        >>> expression_depth(a)                  # doctest: +SKIP
        0
        >>> expression_depth(a.t().t())          # doctest: +SKIP
        2
    """
    operands = _operands(m)
    if not operands:
        return 0
    return 1 + max(expression_depth(op) for op in operands)


def access_cost(m: Matrix) -> int:
    """
    Число чтений из плотных листьев, необходимое для одного get(r, c).

    Examples:
        >>> access_cost(a * b)                   # doctest: +SKIP
        6  # k = 3, по одному чтению из a и b на каждое слагаемое
    """
    if isinstance(m, Transpose):
        return access_cost(m.operand)
    if isinstance(m, Sum):
        return access_cost(m.left) + access_cost(m.right)
    if isinstance(m, Product):
        return m.inner() * (access_cost(m.left) + access_cost(m.right))
    return 1


def leaves(m: Matrix) -> Iterator[Matrix]:
    """Листья дерева (обход в глубину слева направо, повторы сохраняются)."""
    operands = _operands(m)
    if not operands:
        yield m
        return
    for op in operands:
        yield from leaves(op)
