"""
Тесты для модуля Set Algebra

Проверяет:
1. intersect_by: порядок и дубликаты xs, пустые входы
2. union_by: xs ++ (nub(ys) − элементы, равные xs)
3. difference_by: поштучное вычитание, неизменность входа
4. Эквивалентность форм без _by и *_by с eq2
5. partition: порядок и полнота разбиения
"""

import pytest

from interlude.core.operators import eq2
from interlude.core.sequences.comparators import equality
from interlude.core.sequences.set_algebra import (
    difference,
    difference_by,
    intersect,
    intersect_by,
    partition,
    union,
    union_by,
)

PAIRS = [
    ([], []),
    ([1, 2, 3], []),
    ([], [1, 2]),
    ([1, 2], [2, 3]),
    ([1, 1, 2, 3], [3, 3, 4, 1]),
    (["a", "b", "a"], ["b", "c", "c"]),
]


@pytest.fixture
def by_id():
    return equality("id")


# =============================================================================
# ТЕСТЫ INTERSECT
# =============================================================================


class TestIntersect:
    """Тесты для intersect_by / intersect"""

    def test_basic(self) -> None:
        assert intersect_by(eq2, [1, 2, 3], [2, 4]) == [2]

    def test_keeps_order_and_duplicates_of_xs(self) -> None:
        assert intersect([3, 1, 3, 2], [3, 2]) == [3, 3, 2]

    def test_empty_inputs(self) -> None:
        assert intersect([], [1]) == []
        assert intersect([1], []) == []

    def test_no_overlap(self) -> None:
        assert intersect([1, 2], [3, 4]) == []

    def test_field_equality_returns_xs_elements(self, by_id) -> None:
        xs = [{"id": 1, "src": "x"}, {"id": 2, "src": "x"}]
        ys = [{"id": 2, "src": "y"}]
        assert intersect_by(by_id, xs, ys) == [{"id": 2, "src": "x"}]

    def test_inputs_not_mutated(self) -> None:
        xs, ys = [1, 2, 3], [2]
        intersect(xs, ys)
        assert xs == [1, 2, 3] and ys == [2]


# =============================================================================
# ТЕСТЫ UNION
# =============================================================================


class TestUnion:
    """Тесты для union_by / union"""

    def test_basic(self) -> None:
        assert union_by(eq2, [1, 2], [2, 3]) == [1, 2, 3]

    def test_keeps_duplicates_of_xs(self) -> None:
        """Дубликаты xs сохраняются как есть"""
        assert union([1, 1], [2]) == [1, 1, 2]

    def test_dedups_ys(self) -> None:
        """ys дедуплицируется перед добавлением"""
        assert union([1], [3, 3, 2, 2]) == [1, 3, 2]

    def test_removes_ys_equal_to_xs(self) -> None:
        assert union([1, 1], [3, 3, 1]) == [1, 1, 3]

    def test_empty_inputs(self) -> None:
        assert union([], [2, 2, 1]) == [2, 1]
        assert union([1, 2], []) == [1, 2]
        assert union([], []) == []

    def test_field_equality(self, by_id) -> None:
        xs = [{"id": 1, "src": "x"}]
        ys = [{"id": 1, "src": "y"}, {"id": 2, "src": "y"}, {"id": 2, "src": "z"}]
        result = union_by(by_id, xs, ys)
        assert result == [{"id": 1, "src": "x"}, {"id": 2, "src": "y"}]

    def test_inputs_not_mutated(self) -> None:
        xs, ys = [1, 2], [2, 3, 3]
        union(xs, ys)
        assert xs == [1, 2] and ys == [2, 3, 3]


# =============================================================================
# ТЕСТЫ DIFFERENCE
# =============================================================================


class TestDifference:
    """Тесты для difference_by / difference"""

    def test_basic(self) -> None:
        assert difference_by(eq2, [1, 2, 3], [2]) == [1, 3]

    def test_removes_once_per_ys_element(self) -> None:
        """Кратности вычитаются поштучно"""
        assert difference([1, 2, 1, 2], [2, 1]) == [1, 2]
        assert difference([1, 1, 1], [1, 1]) == [1]

    def test_missing_elements_ignored(self) -> None:
        assert difference([1, 2], [9]) == [1, 2]

    def test_empty_inputs(self) -> None:
        assert difference([], [1]) == []
        assert difference([1, 2], []) == [1, 2]

    def test_returns_copy(self) -> None:
        """xs не изменяется, результат — новый список"""
        xs = [1, 2, 3]
        result = difference(xs, [])
        assert result == xs
        assert result is not xs
        difference(xs, [1, 2])
        assert xs == [1, 2, 3]

    def test_field_equality(self, by_id) -> None:
        xs = [{"id": 1}, {"id": 2}, {"id": 1}]
        assert difference_by(by_id, xs, [{"id": 1, "extra": True}]) == [{"id": 2}, {"id": 1}]


# =============================================================================
# ТЕСТЫ ЭКВИВАЛЕНТНОСТИ
# =============================================================================


class TestIdentitySpecializations:
    """Формы без _by совпадают с *_by(eq2, ...)"""

    @pytest.mark.parametrize("xs,ys", PAIRS)
    def test_intersect(self, xs, ys) -> None:
        assert intersect(xs, ys) == intersect_by(eq2, xs, ys)

    @pytest.mark.parametrize("xs,ys", PAIRS)
    def test_union(self, xs, ys) -> None:
        assert union(xs, ys) == union_by(eq2, xs, ys)

    @pytest.mark.parametrize("xs,ys", PAIRS)
    def test_difference(self, xs, ys) -> None:
        assert difference(xs, ys) == difference_by(eq2, xs, ys)

    @pytest.mark.parametrize("xs,ys", PAIRS)
    def test_union_contains_every_element(self, xs, ys) -> None:
        result = union(xs, ys)
        assert result[: len(xs)] == xs
        for y in ys:
            assert y in result


# =============================================================================
# ТЕСТЫ PARTITION
# =============================================================================


class TestPartition:
    """Тесты для partition"""

    def test_basic(self) -> None:
        assert partition(lambda x: x % 2 == 0, [1, 2, 3, 4]) == [[2, 4], [1, 3]]

    def test_empty(self) -> None:
        assert partition(lambda x: True, []) == [[], []]

    def test_complete_and_disjoint(self) -> None:
        xs = list(range(10))
        matching, rest = partition(lambda x: x > 6, xs)
        assert sorted(matching + rest) == xs
        assert not set(matching) & set(rest)
