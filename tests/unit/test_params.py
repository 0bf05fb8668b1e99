"""Unit tests for parameter keys and ParameterStore."""

import pytest

from snowbind.statement.params import (
    BoundParam,
    ParameterStore,
    ParamType,
    ParamVar,
    normalize_key,
    sort_key,
)


class TestNormalizeKey:
    """Tests for normalize_key."""

    def test_int_key_is_positional(self):
        assert normalize_key(0) == 0
        assert normalize_key(3) == 3

    def test_digit_string_is_positional(self):
        assert normalize_key("2") == 2

    def test_leading_colon_is_stripped(self):
        assert normalize_key(":name") == "name"
        assert normalize_key("name") == "name"

    def test_colon_digit_key_stays_named(self):
        assert normalize_key(":1") == "1"

    def test_digit_key_with_and_without_colon_are_distinct(self):
        store = ParameterStore()
        store.bind("1", "a")
        store.bind(":1", "b")

        assert list(store.snapshot()) == [1, "1"]

    def test_bool_key_rejected(self):
        with pytest.raises(TypeError):
            normalize_key(True)

    def test_non_string_key_rejected(self):
        with pytest.raises(TypeError):
            normalize_key(1.5)  # type: ignore[arg-type]

    def test_positional_sorts_before_named(self):
        keys = sorted(["b", 10, "a", 2], key=sort_key)
        assert keys == [2, 10, "a", "b"]


class TestParameterStore:
    """Tests for ParameterStore binding and snapshots."""

    def test_new_store_is_empty(self):
        store = ParameterStore()

        assert len(store) == 0
        assert not store
        assert store.snapshot() == {}

    def test_bind_records_value_and_datatype(self):
        store = ParameterStore()
        store.bind(0, 5, ParamType.INT)

        assert store.snapshot() == {0: BoundParam(5, ParamType.INT)}

    def test_rebinding_keeps_last_value(self):
        """Last bind wins and no duplicate entry appears."""
        store = ParameterStore()
        store.bind("id", 1)
        store.bind(":id", 2, ParamType.INT)

        assert len(store) == 1
        assert store.snapshot() == {"id": BoundParam(2, ParamType.INT)}

    def test_snapshot_is_ordered_by_key(self):
        """Integer keys sort numerically, not as strings."""
        store = ParameterStore()
        store.bind(10, "ten")
        store.bind(2, "two")
        store.bind(0, "zero")

        assert list(store.snapshot()) == [0, 2, 10]

    def test_named_keys_sort_lexicographically(self):
        store = ParameterStore()
        store.bind("zeta", 1)
        store.bind(":alpha", 2)

        assert list(store.snapshot()) == ["alpha", "zeta"]
        assert store.keys() == ["alpha", "zeta"]

    def test_contains_normalizes_key(self):
        store = ParameterStore()
        store.bind(":name", "x")

        assert "name" in store
        assert ":name" in store
        assert "other" not in store
        assert 1.5 not in store

    def test_bind_ref_reads_value_at_snapshot_time(self):
        store = ParameterStore()
        var = ParamVar("before")
        store.bind_ref(0, var, ParamType.STR)

        var.value = "after"

        assert store.snapshot()[0] == BoundParam("after", ParamType.STR)

    def test_bind_ref_requires_holder(self):
        store = ParameterStore()

        with pytest.raises(TypeError, match="ParamVar"):
            store.bind_ref(0, "plain string")

    def test_bind_value_overwrites_reference(self):
        store = ParameterStore()
        var = ParamVar(1)
        store.bind_ref("id", var)
        store.bind("id", 2)

        var.value = 3

        assert store.snapshot()["id"].value == 2


class TestParamVar:
    """Tests for ParamVar holder."""

    def test_default_value_is_none(self):
        assert ParamVar().value is None

    def test_repr(self):
        assert repr(ParamVar("x")) == "ParamVar('x')"
