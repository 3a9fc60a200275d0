"""Unit tests for dot-path and alias field resolution."""

import copy

import pytest

from grid_gateway.services.grid.fields import (
    ALIASES,
    coerce_price,
    coerce_text,
    resolve,
    resolve_by_alias,
    resolve_field,
)


class TestResolve:
    """Tests for explicit dot-path resolution."""

    def test_nested_path(self) -> None:
        assert resolve({"a": {"b": {"c": 5}}}, "a.b.c") == 5

    def test_missing_leaf_is_none(self) -> None:
        assert resolve({"a": {"b": {}}}, "a.b.c") is None

    def test_missing_intermediate_is_none(self) -> None:
        assert resolve({"a": 1}, "a.b.c") is None

    def test_top_level_key(self) -> None:
        assert resolve({"price": 10}, "price") == 10

    def test_numeric_segment_indexes_list(self) -> None:
        assert resolve({"data": [{"id": "x"}, {"id": "y"}]}, "data.1.id") == "y"
        assert resolve({"data": [{"id": "x"}]}, "data.5.id") is None

    @pytest.mark.parametrize("record", [None, {}, [], "text", 3])
    def test_never_raises(self, record: object) -> None:
        assert resolve(record, "a.b") is None

    def test_no_path_is_none(self) -> None:
        assert resolve({"a": 1}, None) is None
        assert resolve({"a": 1}, "") is None

    def test_does_not_mutate(self) -> None:
        record = {"a": {"b": [1, 2]}}
        before = copy.deepcopy(record)
        resolve(record, "a.b.0")
        assert record == before


class TestResolveByAlias:
    """Tests for ranked alias guessing."""

    def test_first_alias_in_list_wins(self) -> None:
        assert resolve_by_alias({"title": "X", "name": "Y"}, ["name", "title"]) == "Y"

    def test_order_of_list_not_record(self) -> None:
        assert resolve_by_alias({"name": "Y", "title": "X"}, ["title", "name"]) == "X"

    def test_top_level_only(self) -> None:
        assert resolve_by_alias({"meta": {"name": "deep"}}, ["name"]) is None

    def test_none_value_is_skipped(self) -> None:
        assert resolve_by_alias({"name": None, "title": "T"}, ALIASES["name"]) == "T"

    def test_falsy_values_still_match(self) -> None:
        assert resolve_by_alias({"price": 0, "amount": 9}, ALIASES["price"]) == 0

    def test_non_mapping_is_none(self) -> None:
        assert resolve_by_alias(["name"], ["name"]) is None


class TestResolveField:
    """Explicit path takes priority over aliases."""

    def test_explicit_path_wins(self) -> None:
        record = {"name": "alias", "attrs": {"label": "explicit"}}
        assert resolve_field(record, "attrs.label", ALIASES["name"]) == "explicit"

    def test_falls_back_when_path_finds_nothing(self) -> None:
        assert resolve_field({"title": "T"}, "attrs.label", ALIASES["name"]) == "T"

    def test_falls_back_when_no_path(self) -> None:
        assert resolve_field({"uuid": "u-1"}, None, ALIASES["id"]) == "u-1"

    def test_nothing_found(self) -> None:
        assert resolve_field({}, "x.y", ALIASES["url"]) is None


class TestAliasTables:
    """The alias tables are part of the tenant-facing contract."""

    def test_exact_tables(self) -> None:
        assert ALIASES == {
            "id": ("id", "_id", "uuid", "pk", "uId"),
            "name": ("name", "title", "label", "display_name", "fileName", "carName"),
            "image": ("image", "img", "photo", "thumbnail", "pic", "carImage"),
            "url": ("url", "link", "href", "website"),
            "price": ("price", "amount", "cost", "rate", "value"),
            "startDate": ("startDate", "start", "from", "reservationDate", "checkIn"),
            "endDate": ("endDate", "end", "to", "checkOut"),
            "unitId": ("unitId", "resourceId", "itemId", "carId", "refId"),
            "status": ("status", "state", "availability", "confirmed"),
        }


class TestCoercion:
    """Tests for per-record default coercion."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(None, 0.0), ("12.5", 12.5), (40, 40.0), ("abc", 0.0), ({"amount": 1}, 0.0), (-3, 0.0), ("nan", 0.0)],
    )
    def test_coerce_price(self, raw: object, expected: float) -> None:
        assert coerce_price(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(None, None), ("", None), ("x", "x"), (7, "7"), ({"src": "a"}, None), (["a"], None)],
    )
    def test_coerce_text(self, raw: object, expected: str | None) -> None:
        assert coerce_text(raw) == expected
