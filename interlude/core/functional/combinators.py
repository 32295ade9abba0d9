"""
Combinators — Базовые функциональные помощники

Мелкие функции для point-free композиции: identity/constant, отрицание
предикатов, кванторы по последовательностям, проверка принадлежности,
accessor-функции для полей и вызов методов.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable, Final, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# Разделитель пути для get_deep("a.b.c")
FIELD_PATH_SEPARATOR: Final[str] = "."


# =============================================================================
# ТОЖДЕСТВО И КОНСТАНТЫ
# =============================================================================


def identity(x: T) -> T:
    return x


def noop(*args: Any, **kwargs: Any) -> None:
    return None


def constant(value: T) -> Callable[..., T]:
    """Функция, игнорирующая аргументы и всегда возвращающая value."""
    return lambda *args, **kwargs: value


def has(obj: Any, key: Any) -> bool:
    """
    Проверка наличия собственного ключа (Mapping) или атрибута (объект).

    Examples:
        >>> has({"a": 1}, "a")
        True
        >>> has({"a": 1}, "items")
        False
    """
    if isinstance(obj, Mapping):
        return key in obj
    return hasattr(obj, key)


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def not_(pred: Callable[..., bool]) -> Callable[..., bool]:
    return lambda *args: not pred(*args)


def all_(pred: Callable[[T], bool]) -> Callable[[Iterable[T]], bool]:
    """all_(pred)(xs) == все элементы удовлетворяют pred (True для пустой)."""
    return lambda xs: all(pred(x) for x in xs)


def any_(pred: Callable[[T], bool]) -> Callable[[Iterable[T]], bool]:
    """any_(pred)(xs) == хотя бы один элемент удовлетворяет pred."""
    return lambda xs: any(pred(x) for x in xs)


def none(pred: Callable[[T], bool]) -> Callable[[Iterable[T]], bool]:
    """none(pred)(xs) == ни один элемент не удовлетворяет pred."""
    return lambda xs: not any(pred(x) for x in xs)


def elem(xs: Sequence[T]) -> Callable[[T], bool]:
    """elem(xs)(x) == x входит в xs."""
    return lambda x: x in xs


def not_elem(xs: Sequence[T]) -> Callable[[T], bool]:
    return lambda x: x not in xs


def find(xs: Iterable[T], pred: Callable[[T], bool], default: U = None) -> T | U:
    """
    Первый элемент, удовлетворяющий pred.

    Args:
        xs: Последовательность
        pred: Предикат
        default: Значение при отсутствии совпадения (default: None)

    Returns:
        Найденный элемент или default
    """
    for x in xs:
        if pred(x):
            return x
    return default


# =============================================================================
# ACCESSORS
# =============================================================================


def _lookup(obj: Any, key: Any) -> Any:
    if isinstance(obj, Mapping):
        return obj[key]
    if isinstance(key, int) and isinstance(obj, Sequence):
        return obj[key]
    return getattr(obj, key)


def get(key: Any) -> Callable[[Any], Any]:
    """
    Accessor для ключа, индекса или атрибута.

    Examples:
        >>> get("name")({"name": "ada"})
        'ada'
        >>> get(1)(["a", "b"])
        'b'
    """
    return lambda obj: _lookup(obj, key)


def get_deep(path: str) -> Callable[[Any], Any]:
    """
    Accessor для вложенного пути "a.b.c".

    Возвращает None, если любое звено пути отсутствует.

    Examples:
        >>> get_deep("user.address.city")({"user": {"address": {"city": "Oslo"}}})
        'Oslo'
        >>> get_deep("user.phone")({"user": {}}) is None
        True
    """
    keys = path.split(FIELD_PATH_SEPARATOR)

    def getter(obj: Any) -> Any:
        position = obj
        for key in keys:
            if isinstance(position, Mapping):
                position = position.get(key)
            else:
                position = getattr(position, key, None)
            if position is None:
                return None
        return position

    return getter


def pluck(key: Any, xs: Iterable[Any]) -> list[Any]:
    """
    Значения поля key для каждого элемента xs.

    Examples:
        >>> pluck("x", [{"x": 1}, {"x": 2}])
        [1, 2]
    """
    accessor = get(key)
    return [accessor(x) for x in xs]


def invoke(method: str, *args: Any, **kwargs: Any) -> Callable[[Any], Any]:
    """
    Вызов метода объекта с заранее зафиксированными аргументами.

    Examples:
        >>> invoke("split", ",")("a,b")
        ['a', 'b']
    """
    return lambda obj: getattr(obj, method)(*args, **kwargs)
