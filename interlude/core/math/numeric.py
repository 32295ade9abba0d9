"""
Numeric — Скалярные числовые помощники

Модуль содержит простые числовые функции для композиции с комбинаторами:
- gcd / lcm: наибольший общий делитель и наименьшее общее кратное
- power / log_base: каррированные степень и логарифм по основанию
- even / odd: предикаты чётности

Гарантии точности ограничены семантикой float хоста: log_base точен
настолько, насколько точен math.log.
"""

import math
from typing import Callable


# =============================================================================
# ДЕЛИМОСТЬ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Результат всегда неотрицательный; gcd(0, 0) == 0.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(0, 5)
        5
    """
    a = abs(a)
    b = abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное.

    Если любой аргумент равен нулю, возвращает 0.

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(0, 6)
        0
    """
    if not a or not b:
        return 0
    return abs(a * b) // gcd(a, b)


# =============================================================================
# СТЕПЕНЬ И ЛОГАРИФМ
# =============================================================================


def power(exponent: float) -> Callable[[float], float]:
    """
    Каррированная степень: power(e)(x) == x ** e.

    Examples:
        >>> power(2)(3)
        9
    """
    return lambda x: x ** exponent


def log_base(base: float) -> Callable[[float], float]:
    """
    Каррированный логарифм по основанию: log_base(b)(x) == log(x) / log(b).

    Ошибки домена math.log (x <= 0) и деление на log(1) == 0
    пропагируют к вызывающему коду.

    Examples:
        >>> round(log_base(2)(8), 12)
        3.0
    """
    log_b = math.log(base)
    return lambda x: math.log(x) / log_b


# =============================================================================
# ЧЁТНОСТЬ
# =============================================================================


def even(n: int) -> bool:
    return n % 2 == 0


def odd(n: int) -> bool:
    return n % 2 == 1
