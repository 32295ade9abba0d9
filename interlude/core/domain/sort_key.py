"""SortKey — Модели ключей сортировки для составных компараторов

Составной компаратор строится из упорядоченного списка пар (field, direction):
- field: ключ mapping, индекс последовательности, имя атрибута или accessor-функция
- direction: "+" (по возрастанию) или "-" (по убыванию)

Immutable Pydantic модели; валидация направления выполняется один раз при
построении компаратора, а не при каждом сравнении.
"""

from enum import Enum
from typing import Any, Callable, Final, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComparatorSpecError(ValueError):
    """
    Невалидная конфигурация компаратора или предиката равенства.

    Возникает при попытке построить equality()/comparing() без полей:
    такой предикат вырожден ("всё равно всему") и почти всегда является ошибкой
    вызывающего кода.
    """
    pass


# =============================================================================
# ENUMS
# =============================================================================


class SortDirection(str, Enum):
    """Направление сортировки по полю.

    Множитель направления применяется к знаковой разнице значений поля.
    """

    ASC = "+"
    DESC = "-"

    @property
    def factor(self) -> int:
        """Множитель знака: +1 для ASC, -1 для DESC."""
        return DIRECTION_FACTORS[self]

    @classmethod
    def coerce(cls, value: Any) -> "SortDirection":
        """
        Нормализация направления: "+" / "-" / 1 / -1 / SortDirection.

        None (направление не задано) → DEFAULT_DIRECTION.

        Raises:
            ValueError: Если значение не является направлением
        """
        if value is None:
            return DEFAULT_DIRECTION
        if isinstance(value, int) and not isinstance(value, bool):
            value = {1: "+", -1: "-"}.get(value, value)
        return cls(value)


DIRECTION_FACTORS: Final[dict[SortDirection, int]] = {
    SortDirection.ASC: 1,
    SortDirection.DESC: -1,
}

DEFAULT_DIRECTION: Final[SortDirection] = SortDirection.ASC

# Поле задаётся ключом/индексом/именем атрибута или accessor-функцией
FieldRef = Union[StrictStr, StrictInt, Callable[[Any], Any]]


# =============================================================================
# MODELS
# =============================================================================


class SortKey(BaseModel):
    """Одна пара (field, direction) составного компаратора.

    Примеры:
        SortKey(field="age")                       # по возрастанию
        SortKey(field="name", direction="-")       # по убыванию
        SortKey(field=lambda p: p.age, direction=-1)
    """

    field: FieldRef = Field(..., description="Ключ, индекс, атрибут или accessor")
    direction: SortDirection = Field(DEFAULT_DIRECTION, description="'+' или '-'")

    model_config = {"frozen": True}

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, value: Any) -> SortDirection:
        return SortDirection.coerce(value)

    @property
    def factor(self) -> int:
        return self.direction.factor


class SortSpec(BaseModel):
    """Упорядоченный непустой набор ключей составного компаратора.

    Сравнение лексикографическое: первый ключ с различающимися значениями
    определяет результат, остальные ключи не вычисляются.
    """

    keys: tuple[SortKey, ...] = Field(..., min_length=1, description="Ключи по приоритету")

    model_config = {"frozen": True}

    @classmethod
    def from_pairs(cls, *args: Any) -> "SortSpec":
        """
        Построение из плоского списка аргументов field1, dir1, field2, dir2, ...

        Направление последнего поля можно опустить (default: ASC).

        Args:
            *args: Чередующиеся поля и направления

        Returns:
            SortSpec

        Raises:
            ComparatorSpecError: Если не передано ни одного поля
            pydantic.ValidationError: Если направление невалидно

        Examples:
            >>> SortSpec.from_pairs("age", "+", "name", "-").keys[1].direction
            <SortDirection.DESC: '-'>
        """
        if not args:
            raise ComparatorSpecError("comparing() requires at least one field")

        keys = []
        for i in range(0, len(args), 2):
            if i + 1 < len(args):
                keys.append(SortKey(field=args[i], direction=args[i + 1]))
            else:
                keys.append(SortKey(field=args[i]))
        return cls(keys=tuple(keys))
