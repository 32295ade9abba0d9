"""
Ranges — Генерация последовательностей

- range_inclusive: 1-индексированный включающий диапазон
- replicate: n копий значения
- iterate: траектория повторного применения функции
"""

import math
from typing import Callable, TypeVar

T = TypeVar("T")


def range_inclusive(start: int = 1, stop: int | None = None, step: int = 1) -> list[int]:
    """
    Включающий диапазон [start, stop] с шагом step.

    С одним аргументом n возвращает 1..n (в отличие от встроенного range,
    который 0-индексирован и исключает stop).

    Длина: max(floor((stop - start) / step) + 1, 0).

    Args:
        start: Начало (или stop, если stop не задан)
        stop: Конец, включительно (optional)
        step: Шаг, может быть отрицательным (default: 1)

    Returns:
        Список значений диапазона

    Raises:
        ValueError: Если step == 0

    Examples:
        >>> range_inclusive(5)
        [1, 2, 3, 4, 5]
        >>> range_inclusive(1, 10, 3)
        [1, 4, 7, 10]
        >>> range_inclusive(5, 1, -2)
        [5, 3, 1]
        >>> range_inclusive(3, 1)
        []
    """
    if step == 0:
        raise ValueError("step must be non-zero")

    if stop is None:
        stop = start
        start = 1

    length = max(math.floor((stop - start) / step) + 1, 0)
    return [start + i * step for i in range(length)]


def replicate(n: int, value: T) -> list[T]:
    """
    Список из n одинаковых элементов (ссылки на один объект).

    Examples:
        >>> replicate(3, "a")
        ['a', 'a', 'a']
    """
    return [value] * max(n, 0)


def iterate(times: int, initial: T, fn: Callable[[T], T]) -> list[T]:
    """
    Траектория [initial, fn(initial), fn(fn(initial)), ...] длины times.

    times <= 0 → пустой список.

    Examples:
        >>> iterate(4, 1, lambda x: x * 2)
        [1, 2, 4, 8]
    """
    if times <= 0:
        return []
    result = [initial]
    for _ in range(times - 1):
        result.append(fn(result[-1]))
    return result
