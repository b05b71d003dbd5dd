"""
Unit tests for any_of / none_of search queries.
"""

import pytest

from strkit.runtime.bounds import NotFound
from strkit.runtime.queries import (
    AnyOfChars,
    AnyOfStrings,
    NoneOfChars,
    NoneOfStrings,
    Query,
    any_of,
    none_of,
)
from strkit.utils.errors import RangeError

DIGITS = "0123456789"


class TestFactories:
    """Tests for the any_of / none_of factories."""

    def test_string_selects_char_query(self):
        assert isinstance(any_of("abc"), AnyOfChars)
        assert isinstance(none_of("abc"), NoneOfChars)

    def test_iterable_selects_string_query(self):
        assert isinstance(any_of(["foo", "bar"]), AnyOfStrings)
        assert isinstance(none_of(("foo",)), NoneOfStrings)

    def test_strings_are_frozen_into_tuple(self):
        query = any_of(["foo", "bar"])
        assert query.strings == ("foo", "bar")
        assert repr(query) == "AnyOfStrings(strings=('foo', 'bar'))"

    def test_queries_compare_by_value(self):
        assert any_of("ab") == AnyOfChars("ab")
        assert any_of("ab") != none_of("ab")

    def test_all_variants_are_queries(self):
        for query in (any_of("a"), none_of("a"), any_of(["a"]), none_of(["a"])):
            assert isinstance(query, Query)

    def test_rejects_non_iterable(self):
        with pytest.raises(TypeError, match="any_of"):
            any_of(123)
        with pytest.raises(TypeError, match="none_of"):
            none_of(None)


class TestAnyOfChars:
    """Tests for AnyOfChars."""

    def test_first_index(self):
        assert any_of(DIGITS).first_index_in("abc123") == 3

    def test_first_index_from_offset(self):
        assert any_of("12").first_index_in("a1b2", 2) == 3
        assert any_of("12").first_index_in("a1b2", -3) == 1

    def test_last_index(self):
        assert any_of(DIGITS).last_index_in("abc123x") == 5

    def test_last_index_up_to_offset(self):
        assert any_of(DIGITS).last_index_in("a1b2c", 2) == 1

    def test_not_found(self):
        assert any_of(DIGITS).first_index_in("abc") is NotFound
        assert any_of(DIGITS).last_index_in("abc") is NotFound
        assert any_of("").first_index_in("abc") is NotFound

    def test_non_ascii_characters(self):
        assert any_of("é").first_index_in("café") == 3

    def test_predicates(self):
        query = any_of("xyz")
        assert query.is_contained_in("abxc")
        assert not query.is_contained_in("abc")
        assert query.is_start_of("xab")
        assert not query.is_start_of("abx")
        assert query.is_end_of("abz")

    def test_empty_subject(self):
        query = any_of("xyz")
        assert not query.is_start_of("")
        assert not query.is_end_of("")
        assert not query.is_contained_in("")

    def test_offset_out_of_range(self):
        with pytest.raises(RangeError):
            any_of("a").first_index_in("abc", 4)


class TestNoneOfChars:
    """Tests for NoneOfChars."""

    def test_first_index(self):
        assert none_of(" ").first_index_in("  hi ") == 2

    def test_last_index(self):
        assert none_of(" ").last_index_in("  hi  ") == 3

    def test_all_characters_masked(self):
        assert none_of(" ").first_index_in("   ") is NotFound
        assert not none_of("abc").is_contained_in("cab")

    def test_predicates(self):
        query = none_of("xyz")
        assert query.is_start_of("abc")
        assert not query.is_start_of("xbc")
        assert query.is_end_of("abc")
        assert not query.is_end_of("abz")

    def test_empty_subject_is_vacuously_true(self):
        query = none_of("xyz")
        assert query.is_start_of("")
        assert query.is_end_of("")
        assert query.is_contained_in("")


class TestAnyOfStrings:
    """Tests for AnyOfStrings."""

    def test_first_index_is_earliest_candidate(self):
        assert any_of(["foo", "bar"]).first_index_in("xxbarfoo") == 2

    def test_last_index_is_latest_candidate(self):
        assert any_of(["foo", "bar"]).last_index_in("foo bar foo") == 8

    def test_not_found(self):
        assert any_of(["foo", "bar"]).first_index_in("baz") is NotFound
        assert any_of(["foo", "bar"]).last_index_in("baz") is NotFound
        assert any_of([]).first_index_in("baz") is NotFound

    def test_predicates(self):
        query = any_of(["foo", "bar"])
        assert query.is_contained_in("a bar")
        assert not query.is_contained_in("baz")
        assert query.is_start_of("barfly")
        assert query.is_end_of("unfoo")
        assert not query.is_end_of("foobar!")

    @pytest.mark.parametrize("subject", ["cab", "bca", "aaa", "ccc"])
    def test_single_char_candidates_match_char_query(self, subject):
        strings = any_of(["a", "b", "c"])
        chars = any_of("abc")
        assert strings.first_index_in(subject) == chars.first_index_in(subject)
        assert strings.is_contained_in(subject) == chars.is_contained_in(subject)


class TestNoneOfStrings:
    """Tests for NoneOfStrings."""

    def test_first_uncovered_index(self):
        assert none_of(["a", "b"]).first_index_in("abc") == 2

    def test_only_first_occurrence_covers(self):
        """Later occurrences of a candidate do not count as covered."""
        assert none_of(["ab"]).first_index_in("abab") == 1
        assert none_of(["a"]).first_index_in("aa") == 1

    def test_last_uncovered_index(self):
        assert none_of(["c"]).last_index_in("abc") == 1

    def test_last_uncovered_index_up_to_offset(self):
        assert none_of(["c"]).last_index_in("abcab", 3) == 3
        assert none_of(["b"]).last_index_in("abcb", 1) == 0
        assert none_of(["a"]).last_index_in("ab", 0) is NotFound

    def test_everything_covered(self):
        assert none_of(["a"]).first_index_in("a") is NotFound
        assert none_of(["a"]).first_index_in("") is NotFound
        assert none_of(["a"]).last_index_in("") is NotFound

    def test_empty_candidate_covers_search_start(self):
        assert none_of([""]).first_index_in("abc") == 1

    def test_predicates(self):
        query = none_of([".c", ".h"])
        assert query.is_end_of("main.py")
        assert not query.is_end_of("main.c")
        assert query.is_start_of("main.c")
        assert not query.is_contained_in("x.h.y")
        assert query.is_contained_in("")
