"""
Comparators — Комбинаторы равенства и порядка

Модуль строит переиспользуемые предикаты равенства и компараторы из списков полей:
- equality(*fields): предикат равенства по всем перечисленным полям
- compare(direction): скалярный компаратор с направлением
- comparing(field, dir, ...): составной лексикографический компаратор

Знаковая конвенция компаратора cmp(x, y):
    < 0  если x упорядочен раньше y
    = 0  если x и y равны по порядку
    > 0  если x упорядочен позже y

Результат comparing() совместим с functools.cmp_to_key.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. equality() истинен только если совпадают ВСЕ поля (проверяются по порядку)
2. comparing() останавливается на первом поле с различающимися значениями
3. Пустой список полей → ComparatorSpecError (вырожденный предикат не строится)
4. Несравнимые значения → TypeError пропагирует к вызывающему коду без изменений
"""

from numbers import Number
from typing import Any, Callable

from interlude.core.domain.sort_key import (
    DEFAULT_DIRECTION,
    ComparatorSpecError,
    FieldRef,
    SortDirection,
    SortSpec,
)
from interlude.core.functional.combinators import get

Comparator = Callable[[Any, Any], Any]
EqualityPredicate = Callable[[Any, Any], bool]


# =============================================================================
# ДОСТУП К ПОЛЯМ
# =============================================================================


def field_getter(field: FieldRef) -> Callable[[Any], Any]:
    """
    Преобразование описания поля в accessor-функцию.

    Разрешение выполняется один раз при построении предиката:
    - callable: используется как есть
    - ключ для Mapping: obj[field]
    - int для Sequence: obj[field]
    - иначе: getattr(obj, field)

    Args:
        field: Ключ, индекс, имя атрибута или accessor

    Returns:
        Функция obj -> значение поля

    Examples:
        >>> field_getter("age")({"age": 30})
        30
        >>> field_getter(0)([7, 8])
        7
    """
    if callable(field):
        return field
    return get(field)


def signed_difference(a: Any, b: Any) -> Any:
    """
    Знаковая разница двух значений.

    Для чисел: a - b (величина сохраняется, как в классическом компараторе).
    Для остальных упорядочиваемых значений (строки, кортежи, даты): -1 / 0 / +1.

    Raises:
        TypeError: Если значения несравнимы
    """
    if isinstance(a, Number) and isinstance(b, Number):
        return a - b
    return (a > b) - (a < b)


# =============================================================================
# РАВЕНСТВО
# =============================================================================


def equality(*fields: FieldRef) -> EqualityPredicate:
    """
    Предикат равенства по списку полей.

    Истинен только если все перечисленные поля равны (==). Поля проверяются
    по порядку; первое несовпадение даёт False.

    Args:
        *fields: Поля для сравнения (минимум одно)

    Returns:
        Предикат (x, y) -> bool

    Raises:
        ComparatorSpecError: Если поля не переданы

    Examples:
        >>> eq = equality("a", "b")
        >>> eq({"a": 1, "b": 2}, {"a": 1, "b": 2})
        True
        >>> eq({"a": 1, "b": 2}, {"a": 1, "b": 3})
        False
    """
    if not fields:
        raise ComparatorSpecError("equality() requires at least one field")

    getters = tuple(field_getter(f) for f in fields)

    def predicate(x: Any, y: Any) -> bool:
        for get in getters:
            if get(x) != get(y):
                return False
        return True

    return predicate


# =============================================================================
# ПОРЯДОК
# =============================================================================


def compare(direction: SortDirection | str | int | None = DEFAULT_DIRECTION) -> Comparator:
    """
    Скалярный компаратор с направлением.

    Args:
        direction: "+" / 1 / None по возрастанию (default), "-" / -1 по убыванию

    Returns:
        Компаратор (x, y) -> factor * (x - y)

    Raises:
        ValueError: Если направление невалидно

    Examples:
        >>> compare()(1, 3)
        -2
        >>> compare("-")(1, 3)
        2
    """
    factor = SortDirection.coerce(direction).factor

    def comparator(x: Any, y: Any) -> Any:
        return factor * signed_difference(x, y)

    return comparator


def comparing_by(spec: SortSpec) -> Comparator:
    """
    Составной компаратор из SortSpec.

    Для каждого ключа по порядку: если значения поля различаются, возвращает
    их знаковую разницу, умноженную на множитель направления. Если все поля
    равны, возвращает 0.

    Args:
        spec: Валидированная спецификация ключей

    Returns:
        Компаратор (x, y) -> число
    """
    keys = tuple((field_getter(key.field), key.factor) for key in spec.keys)

    def comparator(x: Any, y: Any) -> Any:
        for get, factor in keys:
            a = get(x)
            b = get(y)
            if a != b:
                return factor * signed_difference(a, b)
        return 0

    return comparator


def comparing(*args: Any) -> Comparator:
    """
    Составной компаратор из чередующихся полей и направлений.

    comparing(field1, dir1, field2, dir2, ...). Направление последнего поля
    можно опустить, а None вместо направления означает "+".

    Args:
        *args: Поля и направления

    Returns:
        Компаратор (x, y) -> число

    Raises:
        ComparatorSpecError: Если поля не переданы
        pydantic.ValidationError: Если направление невалидно

    Examples:
        >>> from functools import cmp_to_key
        >>> people = [{"age": 30, "name": "b"}, {"age": 20, "name": "z"},
        ...           {"age": 30, "name": "c"}]
        >>> [p["name"] for p in sorted(people, key=cmp_to_key(
        ...     comparing("age", "+", "name", "-")))]
        ['z', 'c', 'b']
    """
    return comparing_by(SortSpec.from_pairs(*args))
