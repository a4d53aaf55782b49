"""Tests for the search / type-filter / sort pipeline."""

from __future__ import annotations

import pytest

from flavortown.domain.selection import (
    SelectionOptions,
    SortMode,
    matches_search,
    matches_type,
    name_collation_key,
    order_items,
    select_items,
    sort_key_for,
)
from tests.conftest import make_item


def _ids(items: list) -> list:
    return [item.id for item in items]


class TestSearch:
    def test_matches_name_case_insensitive(self) -> None:
        assert matches_search(make_item(1, name="Desk Lamp"), "LAMP")

    def test_matches_description(self) -> None:
        item = make_item(1, name="Widget", description="A bright LAMP shade")
        assert matches_search(item, "lamp")

    def test_missing_description_never_matches(self) -> None:
        assert not matches_search(make_item(1, name="Widget"), "lamp")

    def test_select_keeps_either_match(self) -> None:
        items = [
            make_item(1, name="Lamp"),
            make_item(2, name="Chair", description="goes with the lamp"),
            make_item(3, name="Rug"),
        ]
        assert _ids(select_items(items, SelectionOptions(search="lamp"))) == [1, 2]

    def test_no_match_returns_empty(self) -> None:
        items = [make_item(1, name="Lamp"), make_item(2, name="Rug")]
        assert select_items(items, SelectionOptions(search="zeppelin")) == []


class TestTypeFilter:
    def test_exact_case_insensitive(self) -> None:
        item = make_item(1, type="ShopItem::Accessory")
        assert matches_type(item, "shopitem::accessory")
        assert not matches_type(item, "Accessory")

    def test_missing_type_never_matches(self) -> None:
        assert not matches_type(make_item(1), "Gadget")

    def test_combined_with_search(self) -> None:
        items = [
            make_item(1, name="Lamp", type="Furniture"),
            make_item(2, name="Lampshade", type="Accessory"),
            make_item(3, name="Shade cloth", type="Accessory"),
        ]
        options = SelectionOptions(search="lamp", type_filter="ACCESSORY")
        assert _ids(select_items(items, options)) == [2]


class TestOrdering:
    def test_default_is_cost_ascending(self) -> None:
        items = [make_item(1, cost=30), make_item(2, cost=10), make_item(3, cost=20)]
        assert _ids(select_items(items, SelectionOptions())) == [2, 3, 1]

    def test_cost_descending(self) -> None:
        items = [make_item(1, cost=30), make_item(2, cost=10), make_item(3, cost=20)]
        assert _ids(order_items(items, SortMode.COST_DESC)) == [1, 3, 2]

    def test_missing_cost_sorts_as_zero(self) -> None:
        items = [make_item(1, cost=5), make_item(2), make_item(3, cost=0)]
        assert _ids(order_items(items, SortMode.COST_ASC)) == [2, 3, 1]

    def test_name_ordering_is_case_and_accent_aware(self) -> None:
        items = [
            make_item(1, name="banana"),
            make_item(2, name="Apple"),
            make_item(3, name="éclair"),
            make_item(4, name="apple"),
            make_item(5, name="Zebra"),
        ]
        assert _ids(order_items(items, SortMode.NAME)) == [4, 2, 1, 3, 5]

    @pytest.mark.parametrize("mode", list(SortMode))
    def test_sort_is_stable(self, mode: SortMode) -> None:
        items = [make_item(i, name="Same", cost=10) for i in (5, 1, 4, 2, 3)]
        assert _ids(order_items(items, mode)) == [5, 1, 4, 2, 3]

    def test_sort_key_is_reusable(self) -> None:
        key = sort_key_for(SortMode.COST_DESC)
        first = sorted([make_item(1, cost=1), make_item(2, cost=2)], key=key)
        second = sorted([make_item(3, cost=3), make_item(4, cost=4)], key=key)
        assert _ids(first) == [2, 1]
        assert _ids(second) == [4, 3]

    def test_punctuation_and_digits_before_letters(self) -> None:
        items = [
            make_item(1, name="apple"),
            make_item(2, name="~tilde"),
            make_item(3, name="3D Print"),
            make_item(4, name="Zine"),
            make_item(5, name="_underscore"),
        ]
        assert _ids(order_items(items, SortMode.NAME)) == [5, 2, 3, 1, 4]

    def test_collation_key_lowercase_first(self) -> None:
        assert name_collation_key("a") < name_collation_key("A") < name_collation_key("b")

    def test_input_is_not_mutated(self) -> None:
        items = [make_item(1, cost=3), make_item(2, cost=1)]
        select_items(items, SelectionOptions())
        assert _ids(items) == [1, 2]


class TestSortModeValues:
    def test_cli_spellings(self) -> None:
        assert SortMode("price-asc") is SortMode.COST_ASC
        assert SortMode("price-desc") is SortMode.COST_DESC
        assert SortMode("name") is SortMode.NAME
