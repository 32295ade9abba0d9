"""
Zipping — Вариадическое объединение параллельных последовательностей

zip_with(fn, xs1, ..., xsN) и zip_(xs1, ..., xsN) работают с любым числом
последовательностей (zip, zip3, zip4... одной функцией).

Длина результата = минимальная длина входов (без дополнения).
Ноль последовательностей → пустой результат.
"""

from collections.abc import Sequence
from typing import Any, Callable, TypeVar

from interlude.core.sequences.ordered import minimum

U = TypeVar("U")


def zip_with(fn: Callable[..., U], *seqs: Sequence[Any]) -> list[U]:
    """
    Применение fn к каждой позиционной группе элементов.

    Арность fn должна совпадать с числом последовательностей.

    Args:
        fn: Функция от N аргументов
        *seqs: N последовательностей

    Returns:
        [fn(xs1[i], ..., xsN[i]) for i in range(min_len)]

    Examples:
        >>> zip_with(lambda a, b, c: a + b + c, [1, 2], [10, 20], [100, 200, 300])
        [111, 222]
    """
    if not seqs:
        return []
    length = minimum([len(s) for s in seqs])
    return [fn(*(s[i] for s in seqs)) for i in range(length)]


def zip_(*seqs: Sequence[Any]) -> list[list[Any]]:
    """
    Позиционные группы элементов в виде списков.

    Examples:
        >>> zip_([1, 2, 3], [10, 20])
        [[1, 10], [2, 20]]
    """
    return zip_with(lambda *group: list(group), *seqs)
