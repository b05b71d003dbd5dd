"""
Unit tests for the case-insensitive view.
"""

import pytest

from strkit.runtime.bounds import NotFound
from strkit.utils.errors import ArgumentError, RangeError


@pytest.fixture
def view(view_factory):
    return view_factory("Hello World")


class TestSearch:
    """Tests for case-insensitive search."""

    def test_index_of(self, view):
        assert view.index_of("world") == 6
        assert view.index_of("L") == 2
        assert view.index_of("l", 4) == 9
        assert view.index_of("") == 0
        assert view.index_of("z") is NotFound

    def test_last_index_of(self, view):
        assert view.last_index_of("L") == 9
        assert view.last_index_of("O", 5) == 4
        assert view.last_index_of("") == 11
        assert view.last_index_of("xyz") is NotFound

    def test_last_index_of_match_may_cross_offset(self, view_factory):
        assert view_factory("HELLO").last_index_of("lo", 3) == 3
        assert view_factory("HELLO").last_index_of("lo", 2) is NotFound

    def test_predicates(self, view):
        assert view.contains("WORLD")
        assert view.starts_with("hello")
        assert view.ends_with("WORLD")
        assert view.ends_with("")
        assert not view.starts_with("world")

    def test_offset_out_of_range(self, view):
        with pytest.raises(RangeError):
            view.index_of("l", 100)

    def test_count(self, view):
        assert view.count("L") == 3
        assert view.count("o", 5) == 1
        assert view.count("") == 12

    def test_count_within_window(self, view):
        assert view.count("o", 0, 5) == 1
        assert view.count("L", 2, 2) == 2
        assert view.count("l", -5, 3) == 0

    def test_subject_is_not_modified(self, view):
        view.replace("hello", "bye")
        assert view.subject == "Hello World"


class TestReplace:
    """Tests for case-insensitive replace."""

    def test_single_pair(self, view):
        assert view.replace("HELLO", "Hi") == "Hi World"

    def test_mapping(self, view):
        assert view.replace({"hello": "a", "WORLD": "b"}) == "a b"

    def test_swap_in_one_pass(self, view_factory):
        assert view_factory("Foo bar").replace({"foo": "bar", "bar": "foo"}) == "bar foo"

    def test_limit(self, view_factory):
        assert view_factory("aAaA").replace("a", "b", 2) == "bbaA"
        assert view_factory("aAaA").replace({"A": "b"}, 3) == "bbbA"

    def test_mapping_accepts_limit_keyword(self, view_factory):
        assert view_factory("aAaA").replace({"a": "b"}, limit=2) == "bbaA"
        with pytest.raises(ArgumentError, match="Limit given twice"):
            view_factory("aAaA").replace({"a": "b"}, 1, 2)

    def test_validation(self, view):
        with pytest.raises(ArgumentError):
            view.replace("", "x")
        with pytest.raises(ArgumentError):
            view.replace({"": "x"})
        with pytest.raises(ArgumentError):
            view.replace("l", "x", 0)


class TestSplit:
    """Tests for case-insensitive split."""

    def test_split(self, view_factory):
        assert view_factory("aXbxc").split("x") == ["a", "b", "c"]

    def test_split_keeps_original_casing(self, view_factory):
        assert view_factory("OneANDtwoandThree").split("and") == ["One", "two", "Three"]

    def test_split_limits(self, view_factory):
        view = view_factory("aXbxc")
        assert view.split("x", 2) == ["a", "bxc"]
        assert view.split("x", 0) == ["aXbxc"]
        assert view.split("x", -1) == ["a", "b"]

    def test_split_empty_separator_rejected(self, view):
        with pytest.raises(ArgumentError, match="Separator"):
            view.split("")
