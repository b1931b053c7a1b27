"""Tests for store key canonicalization."""

from gqlcache.store.keys import store_key_name


class TestStoreKeyName:
    """Tests for store_key_name."""

    def test_no_arguments(self):
        assert store_key_name("name") == "name"
        assert store_key_name("name", None) == "name"

    def test_empty_arguments_use_bare_field_name(self):
        assert store_key_name("name", {}) == "name"

    def test_arguments_are_serialized_compactly(self):
        assert store_key_name("user", {"id": "2"}) == 'user({"id":"2"})'

    def test_argument_order_does_not_matter(self):
        assert store_key_name("search", {"a": 1, "b": 2}) == store_key_name(
            "search", {"b": 2, "a": 1}
        )
        assert store_key_name("search", {"a": 1, "b": 2}) == 'search({"a":1,"b":2})'

    def test_nested_argument_objects_are_sorted(self):
        first = store_key_name("search", {"filter": {"z": True, "a": [1, 2]}})
        second = store_key_name("search", {"filter": {"a": [1, 2], "z": True}})

        assert first == second
        assert first == 'search({"filter":{"a":[1,2],"z":true}})'

    def test_different_arguments_give_different_keys(self):
        assert store_key_name("user", {"id": "1"}) != store_key_name("user", {"id": "2"})

    def test_null_argument_value(self):
        assert store_key_name("user", {"id": None}) == 'user({"id":null})'
