"""
Composition — Последовательная композиция и функции-обёртки

Композиция:
    seq(f1, f2, ..., fn)(*args)     == fn(...f2(f1(*args)))
    compose(fn, ..., f2, f1)(*args) == fn(...f2(f1(*args)))

Частичное применение (явные замыкания, без неявного контекста):
    curry(f, a, b)(c)   == f(a, b, c)
    rcurry(f, b, c)(a)  == f(a, b, c)

Обёртки:
    guard / either   — условное применение и fallback
    memoize          — кэш результатов в явном dict (key -> result)
    trace            — логирование вызова и результата
"""

import logging
from collections.abc import Hashable
from functools import wraps
from typing import Any, Callable, TypeVar

from interlude.logger import logger

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# КОМПОЗИЦИЯ
# =============================================================================


def seq(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """
    Композиция слева направо.

    Первая функция получает исходные аргументы, каждая следующая —
    результат предыдущей.

    Raises:
        ValueError: Если функции не переданы

    Examples:
        >>> seq(lambda a, b: a + b, lambda x: x * 10)(1, 2)
        30
    """
    if not fns:
        raise ValueError("seq() requires at least one function")

    first, rest = fns[0], fns[1:]

    def sequenced(*args: Any, **kwargs: Any) -> Any:
        result = first(*args, **kwargs)
        for fn in rest:
            result = fn(result)
        return result

    return sequenced


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """
    Композиция справа налево: compose(f, g)(x) == f(g(x)).

    Raises:
        ValueError: Если функции не переданы
    """
    if not fns:
        raise ValueError("compose() requires at least one function")
    return seq(*reversed(fns))


# =============================================================================
# ЧАСТИЧНОЕ ПРИМЕНЕНИЕ
# =============================================================================


def curry(fn: Callable[..., U], *bound: Any) -> Callable[..., U]:
    """
    Фиксация первых аргументов.

    Examples:
        >>> curry(pow, 2)(10)
        1024
    """
    def curried(*args: Any) -> U:
        return fn(*bound, *args)

    return curried


def rcurry(fn: Callable[..., U], *bound: Any) -> Callable[..., U]:
    """
    Фиксация последних аргументов.

    Examples:
        >>> rcurry(pow, 2)(10)
        100
    """
    def curried(*args: Any) -> U:
        return fn(*args, *bound)

    return curried


# =============================================================================
# УСЛОВНЫЕ ОБЁРТКИ
# =============================================================================


def guard(fn: Callable[[T], U], cond: Callable[[T], bool]) -> Callable[[T], U | None]:
    """
    Применение fn только если cond(x) истинно, иначе None.

    Examples:
        >>> small_square = guard(lambda x: x * x, lambda x: x < 10)
        >>> small_square(3), small_square(30)
        (9, None)
    """
    def guarded(x: T) -> U | None:
        return fn(x) if cond(x) else None

    return guarded


def either(guarded_fn: Callable[[T], U | None], error_fn: Callable[[], U]) -> Callable[[T], U]:
    """
    Fallback для guard: если guarded_fn вернул None, результат error_fn().
    """
    def wrapped(x: T) -> U:
        result = guarded_fn(x)
        return error_fn() if result is None else result

    return wrapped


# =============================================================================
# MEMOIZE / TRACE
# =============================================================================


def memoize(
    fn: Callable[..., U],
    hasher: Callable[..., Hashable] | None = None,
) -> Callable[..., U]:
    """
    Кэширование результатов в явном словаре key -> result.

    Ключ по умолчанию — кортеж позиционных аргументов (должны быть hashable).
    Ложные результаты (0, "", None) тоже кэшируются. Кэш доступен как
    атрибут wrapper.cache.

    Args:
        fn: Чистая функция
        hasher: Функция аргументов -> ключ кэша (optional)

    Returns:
        Обёртка с атрибутом cache
    """
    cache: dict[Hashable, U] = {}

    @wraps(fn)
    def memoized(*args: Any) -> U:
        key = hasher(*args) if hasher is not None else args
        if key not in cache:
            cache[key] = fn(*args)
        return cache[key]

    memoized.cache = cache
    return memoized


def trace(
    fn: Callable[..., U],
    name: str | None = None,
    level: int = logging.DEBUG,
) -> Callable[..., U]:
    """
    Логирование каждого вызова: [name(arg1, arg2) -> result].

    Удобно в связке с iterate/scan для отладки промежуточных значений.

    Args:
        fn: Оборачиваемая функция
        name: Имя в логе (default: fn.__name__ или "fn")
        level: Уровень логирования (default: DEBUG)
    """
    label = name or getattr(fn, "__name__", None) or "fn"

    @wraps(fn)
    def traced(*args: Any) -> U:
        result = fn(*args)
        if logger.isEnabledFor(level):
            logger.log(level, "[%s(%s) -> %r]", label, ", ".join(map(repr, args)), result)
        return result

    return traced
