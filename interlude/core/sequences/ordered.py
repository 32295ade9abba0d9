"""
Ordered — Операции над упорядоченными последовательностями

Модуль содержит:
- Сортированную вставку (insert_by, insert) с сохранением инварианта порядка
- Удаление первого совпадения (delete_by, delete)
- Сортировку по компаратору (sort_by)
- Экстремумы (maximum, minimum, maximum_by, minimum_by)

ВАЖНО: insert_by/insert/delete_by/delete изменяют переданный список на месте
и возвращают тот же объект (не копию). Это документированный side effect.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Если xs отсортирован по cmp до insert_by, он отсортирован и после
2. При нарушении предусловия insert_by не бросает исключений (best-effort вставка)
3. delete_by удаляет не более одного элемента
"""

import math
from collections.abc import MutableSequence, Sequence
from functools import cmp_to_key
from typing import Any, Callable, TypeVar

from interlude.core.operators import eq2
from interlude.core.sequences.comparators import Comparator, compare

T = TypeVar("T")


# =============================================================================
# СОРТИРОВАННАЯ ВСТАВКА
# =============================================================================


def insert_by(cmp: Comparator, xs: MutableSequence[T], x: T) -> MutableSequence[T]:
    """
    Вставка элемента в отсортированный список с сохранением порядка.

    Предусловие: xs отсортирован по возрастанию относительно cmp.
    Элемент вставляется перед первым e, для которого cmp(e, x) >= 0,
    либо добавляется в конец.

    Args:
        cmp: Компаратор (total order)
        xs: Отсортированный список (изменяется на месте)
        x: Вставляемый элемент

    Returns:
        Тот же список xs

    Examples:
        >>> insert_by(compare(), [1, 3, 5], 4)
        [1, 3, 4, 5]
        >>> insert_by(compare(), [], 4)
        [4]
    """
    for i, existing in enumerate(xs):
        if cmp(existing, x) >= 0:
            xs.insert(i, x)
            return xs
    xs.append(x)
    return xs


def insert(xs: MutableSequence[T], x: T) -> MutableSequence[T]:
    """Сортированная вставка по естественному порядку (compare())."""
    return insert_by(compare(), xs, x)


# =============================================================================
# УДАЛЕНИЕ
# =============================================================================


def delete_by(
    eq: Callable[[Any, Any], bool],
    xs: MutableSequence[T],
    x: T,
) -> MutableSequence[T]:
    """
    Удаление первого элемента e, для которого eq(e, x).

    Args:
        eq: Предикат равенства
        xs: Список (изменяется на месте)
        x: Образец для поиска

    Returns:
        Тот же список xs (без изменений, если совпадений нет)

    Examples:
        >>> delete_by(lambda a, b: a % 3 == b % 3, [1, 4, 7], 10)
        [4, 7]
    """
    for i, existing in enumerate(xs):
        if eq(existing, x):
            del xs[i]
            return xs
    return xs


def delete(xs: MutableSequence[T], x: T) -> MutableSequence[T]:
    """Удаление первого элемента, равного x (==)."""
    return delete_by(eq2, xs, x)


# =============================================================================
# СОРТИРОВКА
# =============================================================================


def sort_by(cmp: Comparator, xs: Sequence[T]) -> list[T]:
    """
    Стабильная сортировка копии xs по компаратору.

    Args:
        cmp: Компаратор, например результат comparing()
        xs: Исходная последовательность (не изменяется)

    Returns:
        Новый отсортированный список
    """
    return sorted(xs, key=cmp_to_key(cmp))


# =============================================================================
# ЭКСТРЕМУМЫ
# =============================================================================


def maximum(xs: Sequence[Any]) -> Any:
    """
    Максимум последовательности.

    Пустая последовательность → -inf (нейтральный элемент max).
    """
    if not xs:
        return -math.inf
    return max(xs)


def minimum(xs: Sequence[Any]) -> Any:
    """
    Минимум последовательности.

    Пустая последовательность → +inf (нейтральный элемент min).
    """
    if not xs:
        return math.inf
    return min(xs)


def maximum_by(cmp: Comparator, xs: Sequence[T]) -> T | None:
    """
    Максимум по компаратору.

    При равенстве сохраняется первый из максимальных элементов.
    Пустая последовательность → None.
    """
    if not xs:
        return None
    best = xs[0]
    for x in xs[1:]:
        if cmp(x, best) > 0:
            best = x
    return best


def minimum_by(cmp: Comparator, xs: Sequence[T]) -> T | None:
    """
    Минимум по компаратору.

    При равенстве сохраняется первый из минимальных элементов.
    Пустая последовательность → None.
    """
    if not xs:
        return None
    best = xs[0]
    for x in xs[1:]:
        if cmp(x, best) < 0:
            best = x
    return best
