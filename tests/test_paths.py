"""Tests for nested-path helpers."""

import pytest

from endb.paths import get_path, has_path, set_path, to_path, unset_path


@pytest.mark.parametrize(
    "path, expected",
    [
        ("a", ["a"]),
        ("a.b.c", ["a", "b", "c"]),
        ("a.b[0].c", ["a", "b", "0", "c"]),
        ("[2]", ["2"]),
        ('a["x.y"].z', ["a", "x.y", "z"]),
        ("a['k']", ["a", "k"]),
        ("", []),
    ],
)
def test_to_path(path, expected):
    assert to_path(path) == expected


class TestGetPath:
    data = {"a": {"b": [{"c": 1}, {"c": 2}]}, "n": None}

    def test_nested(self):
        assert get_path(self.data, "a.b[1].c") == 2

    def test_dotted_index(self):
        assert get_path(self.data, "a.b.0.c") == 1

    def test_missing_segment(self):
        assert get_path(self.data, "a.x.c") is None
        assert get_path(self.data, "a.b[5].c") is None

    def test_default(self):
        assert get_path(self.data, "nope", "fallback") == "fallback"

    def test_stored_none_is_returned(self):
        assert get_path(self.data, "n", "fallback") is None

    def test_traversal_through_scalar(self):
        assert get_path({"a": 5}, "a.b") is None


class TestHasPath:
    def test_present(self):
        assert has_path({"a": {"b": None}}, "a.b")

    def test_missing(self):
        assert not has_path({"a": {}}, "a.b")
        assert not has_path({"a": [1]}, "a[1]")

    def test_empty_path(self):
        assert not has_path({"a": 1}, "")


class TestSetPath:
    def test_creates_dicts(self):
        assert set_path({}, "a.b", 1) == {"a": {"b": 1}}

    def test_creates_lists_for_index_segments(self):
        assert set_path({}, "a[0]", "x") == {"a": ["x"]}

    def test_pads_lists(self):
        assert set_path({"a": [1]}, "a[3]", 4) == {"a": [1, None, None, 4]}

    def test_mutates_in_place(self):
        data = {"keep": True}
        result = set_path(data, "new", 1)
        assert result is data
        assert data == {"keep": True, "new": 1}

    def test_replaces_scalar_intermediate(self):
        assert set_path({"a": 5}, "a.b", 1) == {"a": {"b": 1}}

    def test_non_container_root_is_returned_unchanged(self):
        assert set_path(5, "a", 1) == 5

    def test_non_index_segment_in_list_is_ignored(self):
        assert set_path({"a": [1]}, "a.b", 5) == {"a": [1]}
        assert set_path({"a": [{"c": 1}]}, "a.b.c", 5) == {"a": [{"c": 1}]}
        assert set_path([1], "b", 5) == [1]


class TestUnsetPath:
    def test_removes_key(self):
        data = {"a": {"b": 1, "c": 2}}
        assert unset_path(data, "a.b")
        assert data == {"a": {"c": 2}}

    def test_list_item_leaves_a_hole(self):
        data = {"a": [1, 2, 3]}
        assert unset_path(data, "a[0]")
        assert data == {"a": [None, 2, 3]}

    def test_missing_path_is_noop(self):
        data = {"a": 1}
        assert unset_path(data, "x.y.z")
        assert data == {"a": 1}

    def test_empty_path(self):
        assert unset_path({"a": 1}, "") is False
