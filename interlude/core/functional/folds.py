"""
Folds — Свёртки и преобразования арности

Обобщает бинарные операторы до свёрток последовательностей и переводит
функции между скалярной (n-арной) и последовательной (один список) формой:

    fold(op, z)([x1, x2, ...])  == op(op(z, x1), x2) ...
    scan(op, z)([x1, x2, ...])  == [z, op(z, x1), op(op(z, x1), x2), ...]
    lift(f)([a, b, c])          == f(a, b, c)
    unlift(g)(a, b, c)          == g([a, b, c])

Законы round-trip:
    unlift(lift(f))(*args) == f(*args)   для любой фиксированной арности
    lift(unlift(g))(xs)    == g(list(xs)) для любой длины xs
"""

from collections.abc import Iterable, Sequence
from functools import reduce
from typing import Any, Callable, TypeVar

A = TypeVar("A")
T = TypeVar("T")
U = TypeVar("U")


def fold(op: Callable[[A, T], A], initial: A) -> Callable[[Iterable[T]], A]:
    """
    Строгая левая свёртка (каррированная).

    Args:
        op: Бинарный оператор op(accumulator, element)
        initial: Начальное значение аккумулятора

    Returns:
        Функция xs -> результат свёртки

    Examples:
        >>> fold(lambda a, b: a + b, 0)([1, 2, 3])
        6
        >>> fold(lambda a, b: a + b, 0)([])
        0
    """
    def folder(xs: Iterable[T]) -> A:
        return reduce(op, xs, initial)

    return folder


def scan(op: Callable[[A, T], A], initial: A) -> Callable[[Iterable[T]], list[A]]:
    """
    Левое сканирование: все промежуточные значения аккумулятора.

    Результат начинается с initial; длина результата = len(xs) + 1.
    Последний элемент scan(op, z)(xs) равен fold(op, z)(xs).

    Examples:
        >>> scan(lambda a, b: a + b, 0)([1, 2, 3])
        [0, 1, 3, 6]
    """
    def scanner(xs: Iterable[T]) -> list[A]:
        result = [initial]
        for x in xs:
            result.append(op(result[-1], x))
        return result

    return scanner


def lift(fn: Callable[..., U]) -> Callable[[Sequence[Any]], U]:
    """
    n-арная функция → функция от одной последовательности аргументов.

    Examples:
        >>> lift(max)([3, 9, 4])
        9
    """
    def lifted(xs: Sequence[Any]) -> U:
        return fn(*xs)

    return lifted


def unlift(fn: Callable[[list[Any]], U]) -> Callable[..., U]:
    """
    Функция от последовательности → вариадическая функция.

    Аргументы собираются в список перед вызовом fn.

    Examples:
        >>> unlift(sum)(1, 2, 3)
        6
    """
    def unlifted(*args: Any) -> U:
        return fn(list(args))

    return unlifted


def map_(fn: Callable[[T], U]) -> Callable[[Iterable[T]], list[U]]:
    """Каррированный map, возвращающий список."""
    return lambda xs: [fn(x) for x in xs]


def filter_(pred: Callable[[T], bool]) -> Callable[[Iterable[T]], list[T]]:
    """Каррированный filter, возвращающий список."""
    return lambda xs: [x for x in xs if pred(x)]
