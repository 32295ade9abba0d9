"""
Operators — Скалярные операторы для point-free композиции

Бинарные операторы (суффикс 2) передаются в fold/scan/zip_with/*_by:
    fold(plus2, 0)([1, 2, 3]) == 6
    intersect_by(eq2, xs, ys) == intersect(xs, ys)

Каррированные предикаты сравнения фиксируют правый операнд:
    filter_(gt(2))([1, 2, 3, 4]) == [3, 4]    # x > 2

Вариадические формы (plus, times, append) получены через unlift(fold(...)).
"""

from typing import Any, Callable

from interlude.core.functional.folds import fold, unlift


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def plus2(a: Any, b: Any) -> Any:
    return a + b


def minus2(a: Any, b: Any) -> Any:
    return a - b


def times2(a: Any, b: Any) -> Any:
    return a * b


def divide2(a: Any, b: Any) -> Any:
    return a / b


def append2(xs: list, ys: list) -> list:
    """Конкатенация двух списков (новый список)."""
    return list(xs) + list(ys)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def eq2(a: Any, b: Any) -> bool:
    return a == b


def neq2(a: Any, b: Any) -> bool:
    return a != b


def lt2(a: Any, b: Any) -> bool:
    return a < b


def lte2(a: Any, b: Any) -> bool:
    return a <= b


def gt2(a: Any, b: Any) -> bool:
    return a > b


def gte2(a: Any, b: Any) -> bool:
    return a >= b


def eq(y: Any) -> Callable[[Any], bool]:
    return lambda x: x == y


def neq(y: Any) -> Callable[[Any], bool]:
    return lambda x: x != y


def lt(y: Any) -> Callable[[Any], bool]:
    return lambda x: x < y


def lte(y: Any) -> Callable[[Any], bool]:
    return lambda x: x <= y


def gt(y: Any) -> Callable[[Any], bool]:
    return lambda x: x > y


def gte(y: Any) -> Callable[[Any], bool]:
    return lambda x: x >= y


# =============================================================================
# ВАРИАДИЧЕСКИЕ ФОРМЫ
# =============================================================================

# plus(1, 2, 3) == 6; plus() == 0
plus = unlift(fold(plus2, 0))

# times(2, 3, 4) == 24; times() == 1
times = unlift(fold(times2, 1))

# append([1], [2], [3]) == [1, 2, 3]; append() == [] (новый список на каждый вызов)
append = unlift(lambda xss: fold(append2, [])(xss))
