"""
Тесты для модуля Comparators

Проверяет:
1. equality(): совпадение ВСЕХ полей, а не только первого
2. compare(): знаковая конвенция и направление
3. comparing(): лексикографический порядок, короткое замыкание, направления
4. Вырожденные конфигурации (без полей) → ComparatorSpecError
5. Accessor-функции вместо строковых ключей
6. Пропагацию TypeError для несравнимых значений
"""

from dataclasses import dataclass
from functools import cmp_to_key

import pytest
from pydantic import ValidationError

from interlude.core.domain import ComparatorSpecError, SortDirection, SortKey, SortSpec
from interlude.core.sequences.comparators import (
    compare,
    comparing,
    comparing_by,
    equality,
    field_getter,
    signed_difference,
)


# =============================================================================
# FIXTURES
# =============================================================================


@dataclass(frozen=True)
class Person:
    name: str
    age: int


@pytest.fixture
def people():
    """Записи с повторяющимся возрастом для проверки tie-breaking."""
    return [
        {"name": "bob", "age": 30},
        {"name": "ann", "age": 25},
        {"name": "cat", "age": 30},
        {"name": "dan", "age": 25},
        {"name": "eve", "age": 40},
    ]


# =============================================================================
# ТЕСТЫ ДОСТУПА К ПОЛЯМ
# =============================================================================


class TestFieldGetter:
    """Тесты для field_getter"""

    def test_mapping_key(self) -> None:
        """Строковый ключ читается из dict"""
        assert field_getter("age")({"age": 3}) == 3

    def test_sequence_index(self) -> None:
        """Целое число индексирует последовательность"""
        assert field_getter(1)(("a", "b")) == "b"

    def test_attribute(self) -> None:
        """Для объектов используется getattr"""
        assert field_getter("name")(Person("ann", 25)) == "ann"

    def test_callable_passthrough(self) -> None:
        """Accessor-функция используется как есть"""
        accessor = lambda p: p.age * 2  # noqa: E731
        assert field_getter(accessor) is accessor

    def test_missing_key_propagates(self) -> None:
        """Отсутствующий ключ → KeyError без перехвата"""
        with pytest.raises(KeyError):
            field_getter("missing")({"age": 1})


class TestSignedDifference:
    """Тесты для signed_difference"""

    def test_numbers_keep_magnitude(self) -> None:
        assert signed_difference(10, 3) == 7
        assert signed_difference(3, 10) == -7
        assert signed_difference(1.5, 1.5) == 0

    def test_strings_use_sign(self) -> None:
        assert signed_difference("b", "a") == 1
        assert signed_difference("a", "b") == -1
        assert signed_difference("a", "a") == 0

    def test_incomparable_raises_type_error(self) -> None:
        """Несравнимые значения → TypeError пропагирует"""
        with pytest.raises(TypeError):
            signed_difference("a", 1)


# =============================================================================
# ТЕСТЫ EQUALITY
# =============================================================================


class TestEquality:
    """Тесты для equality"""

    def test_single_field(self) -> None:
        eq = equality("age")
        assert eq({"age": 1, "x": 1}, {"age": 1, "x": 2}) is True
        assert eq({"age": 1}, {"age": 2}) is False

    def test_all_fields_checked(self) -> None:
        """Совпадение первого поля недостаточно: проверяются все поля"""
        eq = equality("a", "b", "c")
        base = {"a": 1, "b": 2, "c": 3}
        assert eq(base, dict(base)) is True
        assert eq(base, {"a": 1, "b": 2, "c": 4}) is False
        assert eq(base, {"a": 1, "b": 9, "c": 3}) is False

    def test_stops_at_first_mismatch(self) -> None:
        """После первого несовпадения следующие поля не читаются"""
        calls = []

        def tracked(obj):
            calls.append(obj["id"])
            return obj["v"]

        eq = equality("a", tracked)
        assert eq({"a": 1, "id": "x", "v": 0}, {"a": 2, "id": "y", "v": 0}) is False
        assert calls == []

    def test_index_fields(self) -> None:
        """Индексы работают для списков"""
        eq = equality(0)
        assert eq([2, "a"], [2, "b"]) is True
        assert eq([1], [2]) is False

    def test_accessor_fields(self) -> None:
        eq = equality(lambda p: p.name.lower())
        assert eq(Person("Ann", 1), Person("ann", 2)) is True

    def test_no_fields_rejected(self) -> None:
        """Пустой список полей → ComparatorSpecError"""
        with pytest.raises(ComparatorSpecError, match="at least one field"):
            equality()

    def test_spec_error_is_value_error(self) -> None:
        assert issubclass(ComparatorSpecError, ValueError)


# =============================================================================
# ТЕСТЫ COMPARE
# =============================================================================


class TestCompare:
    """Тесты для compare"""

    def test_ascending_default(self) -> None:
        cmp = compare()
        assert cmp(1, 3) < 0
        assert cmp(3, 1) > 0
        assert cmp(2, 2) == 0

    def test_descending(self) -> None:
        cmp = compare("-")
        assert cmp(1, 3) > 0
        assert cmp(3, 1) < 0

    def test_numeric_directions(self) -> None:
        """1 / -1 эквивалентны '+' / '-'"""
        assert compare(1)(1, 3) == compare("+")(1, 3)
        assert compare(-1)(1, 3) == compare("-")(1, 3)
        assert compare(SortDirection.DESC)(1, 3) == 2

    def test_signed_difference_value(self) -> None:
        assert compare()(10, 4) == 6

    def test_sorting_with_cmp_to_key(self) -> None:
        assert sorted([3, 1, 2], key=cmp_to_key(compare("-"))) == [3, 2, 1]

    def test_none_direction_is_ascending(self) -> None:
        assert compare(None)(1, 2) == -1
        assert compare(None)(2, 1) == compare()(2, 1)

    def test_invalid_direction_raises(self) -> None:
        with pytest.raises(ValueError):
            compare("up")


# =============================================================================
# ТЕСТЫ COMPARING
# =============================================================================


class TestComparing:
    """Тесты для comparing / comparing_by"""

    def test_age_asc_name_desc(self, people) -> None:
        """Возраст по возрастанию, имя по убыванию при равном возрасте"""
        ordered = sorted(people, key=cmp_to_key(comparing("age", "+", "name", "-")))
        assert [p["name"] for p in ordered] == ["dan", "ann", "cat", "bob", "eve"]

    def test_age_desc_name_asc(self, people) -> None:
        ordered = sorted(people, key=cmp_to_key(comparing("age", "-", "name", "+")))
        assert [p["name"] for p in ordered] == ["eve", "bob", "cat", "ann", "dan"]

    def test_trailing_direction_defaults_to_ascending(self, people) -> None:
        """Направление последнего поля можно опустить"""
        explicit = comparing("age", "-", "name", "+")
        implicit = comparing("age", "-", "name")
        for a in people:
            for b in people:
                assert explicit(a, b) == implicit(a, b)

    def test_none_direction_is_ascending(self, people) -> None:
        """None на месте направления означает '+'"""
        ordered = sorted(people, key=cmp_to_key(comparing("age", None, "name", "-")))
        assert [p["name"] for p in ordered] == ["dan", "ann", "cat", "bob", "eve"]

    def test_returns_scaled_difference_of_first_differing_field(self) -> None:
        cmp = comparing("a", "+", "b", "-")
        assert cmp({"a": 1, "b": 5}, {"a": 4, "b": 0}) == -3
        assert cmp({"a": 1, "b": 5}, {"a": 1, "b": 2}) == -3
        assert cmp({"a": 1, "b": 2}, {"a": 1, "b": 2}) == 0

    def test_short_circuits_after_first_difference(self) -> None:
        """Поля после первого различающегося не вычисляются"""
        def exploding(_):
            raise AssertionError("must not be evaluated")

        cmp = comparing("a", "+", exploding, "+")
        assert cmp({"a": 1}, {"a": 2}) == -1

    def test_all_fields_equal_returns_zero(self) -> None:
        cmp = comparing("a", "+", "b", "+")
        assert cmp({"a": 1, "b": 2}, {"a": 1, "b": 2}) == 0

    def test_accessor_fields(self) -> None:
        cmp = comparing(lambda p: p.age, "-")
        assert cmp(Person("a", 20), Person("b", 30)) == 10

    def test_no_fields_rejected(self) -> None:
        with pytest.raises(ComparatorSpecError):
            comparing()

    def test_invalid_direction_rejected(self) -> None:
        """Невалидное направление → pydantic ValidationError"""
        with pytest.raises(ValidationError):
            comparing("age", "name")

    def test_comparing_by_spec(self) -> None:
        spec = SortSpec(keys=(SortKey(field="x", direction="-"),))
        assert comparing_by(spec)({"x": 1}, {"x": 2}) == 1

    def test_incomparable_values_propagate(self) -> None:
        """Несравнимые значения полей → TypeError без перехвата"""
        cmp = comparing("v")
        with pytest.raises(TypeError):
            cmp({"v": "a"}, {"v": 1})
