"""
Set Algebra — Объединение, пересечение и разность последовательностей

Последовательности трактуются как коллекции, параметризованные предикатом
равенства; порядок результата определён точно:

    intersect_by(eq, xs, ys):  элементы xs (порядок и дубликаты xs сохраняются),
                               для которых найдётся y в ys с eq(x, y)
    union_by(eq, xs, ys):      xs ++ (nub_by(eq, ys) без элементов, равных x из xs)
    difference_by(eq, xs, ys): копия xs, из которой для каждого y удалено
                               первое равное ему значение

Формы без суффикса _by используют равенство ==, и ведут себя идентично
*_by формам с предикатом eq2.

Входные последовательности никогда не изменяются.
"""

from collections.abc import Sequence
from typing import Any, Callable, TypeVar

from interlude.core.functional.folds import fold
from interlude.core.operators import eq2
from interlude.core.sequences.dedup import nub_by
from interlude.core.sequences.ordered import delete_by

T = TypeVar("T")

EqualityPredicate = Callable[[Any, Any], bool]


def _delete_each(eq: EqualityPredicate, targets: Sequence[Any], xs: list[T]) -> list[T]:
    # Для каждого target удаляется не более одного совпадения (delete first match)
    return fold(lambda acc, target: delete_by(eq, acc, target), xs)(targets)


# =============================================================================
# INTERSECT
# =============================================================================


def intersect_by(eq: EqualityPredicate, xs: Sequence[T], ys: Sequence[Any]) -> list[T]:
    """
    Пересечение относительно предиката равенства.

    Args:
        eq: Предикат равенства eq(x, y)
        xs: Источник элементов результата
        ys: Множество-фильтр

    Returns:
        Элементы xs, имеющие пару в ys; пустой список если xs или ys пуст

    Examples:
        >>> intersect_by(eq2, [1, 2, 3], [2, 4])
        [2]
    """
    if not xs or not ys:
        return []
    return [x for x in xs if any(eq(x, y) for y in ys)]


def intersect(xs: Sequence[T], ys: Sequence[Any]) -> list[T]:
    """Пересечение по ==."""
    return intersect_by(eq2, xs, ys)


# =============================================================================
# UNION
# =============================================================================


def union_by(eq: EqualityPredicate, xs: Sequence[T], ys: Sequence[T]) -> list[T]:
    """
    Объединение относительно предиката равенства.

    Все элементы xs (включая собственные дубликаты xs), затем элементы ys,
    дедуплицированные между собой (nub_by) и очищенные от элементов,
    равных какому-либо элементу xs.

    Examples:
        >>> union_by(eq2, [1, 2], [2, 3])
        [1, 2, 3]
        >>> union_by(eq2, [1, 1], [3, 3, 1])
        [1, 1, 3]
    """
    return list(xs) + _delete_each(eq, xs, nub_by(eq, ys))


def union(xs: Sequence[T], ys: Sequence[T]) -> list[T]:
    """Объединение по ==."""
    return union_by(eq2, xs, ys)


# =============================================================================
# DIFFERENCE
# =============================================================================


def difference_by(eq: EqualityPredicate, xs: Sequence[T], ys: Sequence[Any]) -> list[T]:
    """
    Разность относительно предиката равенства.

    Для каждого y из ys из копии xs удаляется первое совпадение, то есть
    кратности вычитаются поштучно.

    Examples:
        >>> difference_by(eq2, [1, 2, 3], [2])
        [1, 3]
        >>> difference_by(eq2, [1, 2, 1, 2], [2, 1])
        [1, 2]
    """
    return _delete_each(eq, ys, list(xs))


def difference(xs: Sequence[T], ys: Sequence[Any]) -> list[T]:
    """Разность по ==."""
    return difference_by(eq2, xs, ys)


# =============================================================================
# PARTITION
# =============================================================================


def partition(pred: Callable[[T], bool], xs: Sequence[T]) -> list[list[T]]:
    """
    Разбиение на [удовлетворяющие pred, остальные] с сохранением порядка.

    Examples:
        >>> partition(lambda x: x % 2 == 0, [1, 2, 3, 4])
        [[2, 4], [1, 3]]
    """
    matching: list[T] = []
    rest: list[T] = []
    for x in xs:
        (matching if pred(x) else rest).append(x)
    return [matching, rest]
