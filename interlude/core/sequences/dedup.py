"""
Dedup — Удаление дубликатов и группировка смежных элементов

nub / nub_by:
    Сохраняет первое вхождение каждого элемента и относительный порядок.
    Кандидат отбрасывается, если он равен одному из УЖЕ ПРИНЯТЫХ элементов
    (а не любому предыдущему сырому элементу). Это важно для нетранзитивных
    предикатов равенства.

group / group_by:
    Разбиение на максимальные непрерывные серии, в которых каждая пара
    соседних элементов удовлетворяет предикату. Это НЕ глобальная группировка
    по классам эквивалентности: равные элементы, разделённые отличающимся,
    попадают в разные группы. Для группировки "по значению" вход должен быть
    предварительно отсортирован.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. nub(nub(xs)) == nub(xs)
2. Каждая группа непуста
3. Конкатенация групп по порядку воспроизводит исходную последовательность
"""

from collections.abc import Sequence
from typing import Any, Callable, TypeVar

from interlude.core.operators import eq2

T = TypeVar("T")


# =============================================================================
# NUB
# =============================================================================


def nub(xs: Sequence[T]) -> list[T]:
    """
    Удаление дубликатов (==) с сохранением первого вхождения.

    Examples:
        >>> nub([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    result: list[T] = []
    for x in xs:
        if x not in result:
            result.append(x)
    return result


def nub_by(eq: Callable[[Any, Any], bool], xs: Sequence[T]) -> list[T]:
    """
    Удаление дубликатов относительно предиката равенства.

    Кандидат x отбрасывается, если eq(accepted, x) для какого-либо уже
    принятого элемента. Сложность O(n * k), k — число принятых элементов.

    Args:
        eq: Предикат равенства (рефлексивный, симметричный)
        xs: Исходная последовательность (не изменяется)

    Returns:
        Новый список уникальных элементов

    Examples:
        >>> nub_by(lambda a, b: a % 3 == b % 3, [1, 2, 4, 3, 5, 6])
        [1, 2, 3]
    """
    result: list[T] = []
    for x in xs:
        if not any(eq(accepted, x) for accepted in result):
            result.append(x)
    return result


# =============================================================================
# GROUP
# =============================================================================


def group(xs: Sequence[T]) -> list[list[T]]:
    """
    Группировка смежных равных (==) элементов.

    Examples:
        >>> group([1, 1, 2, 1])
        [[1, 1], [2], [1]]
    """
    return group_by(eq2, xs)


def group_by(eq: Callable[[Any, Any], bool], xs: Sequence[T]) -> list[list[T]]:
    """
    Разбиение на максимальные серии соседних элементов, связанных предикатом.

    Новая группа начинается, когда eq(previous, current) ложен.

    Args:
        eq: Предикат равенства соседних элементов
        xs: Исходная последовательность (не изменяется)

    Returns:
        Список непустых групп; пустой вход → []

    Examples:
        >>> group_by(lambda a, b: b - a == 1, [1, 2, 3, 7, 8, 10])
        [[1, 2, 3], [7, 8], [10]]
    """
    groups: list[list[T]] = []
    for x in xs:
        if groups and eq(groups[-1][-1], x):
            groups[-1].append(x)
        else:
            groups.append([x])
    return groups
