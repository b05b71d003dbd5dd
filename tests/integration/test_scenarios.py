"""
End-to-end scenarios through the public ``strkit`` package.

These exercise the layers together: bounds normalization, the core
operations, the replacement engine, query dispatch and the
case-insensitive view, all through the top-level functions.
"""

import pytest

import strkit
from strkit import NotFound, any_of, none_of


class TestDocumentedScenarios:
    """Concrete behaviors every layer has to agree on."""

    def test_negative_offset_slice(self):
        assert strkit.slice("hello world", -5) == "world"

    def test_map_replace(self):
        assert strkit.replace("hello world", {"hello": "hi", "world": "earth"}) == "hi earth"

    def test_empty_needle(self):
        assert strkit.index_of("hello", "") == 0

    def test_first_and_last_index(self):
        assert strkit.index_of("hello", "l") == 2
        assert strkit.last_index_of("hello", "l") == 3

    def test_query_predicates_on_empty_subject(self):
        assert strkit.starts_with("", none_of("xyz"))
        assert not strkit.starts_with("", any_of("xyz"))

    def test_pad(self):
        assert strkit.pad_left("7", 3, "0") == "007"

    def test_longest_match_first(self):
        assert strkit.replace("abc", {"ab": "X", "a": "Y"}) == "Xc"

    def test_bounded_replace(self):
        assert strkit.replace("aaaa", "a", "b", 2) == "bbaa"


class TestWorkflows:
    """Multi-step uses of the API."""

    def test_extract_number_after_label(self):
        text = "order: 4711 shipped"
        start = strkit.index_of(text, any_of("0123456789"))
        end = strkit.index_of(text, none_of("0123456789"), start)
        assert strkit.slice(text, start, end - start) == "4711"

    def test_strip_known_suffix_case_insensitively(self):
        name = "REPORT.TXT"
        view = strkit.case_insensitive(name)
        assert view.ends_with(".txt")
        cut = view.last_index_of(".txt")
        assert strkit.slice(name, 0, cut) == "REPORT"

    def test_not_found_is_falsy_but_zero_is_not(self):
        assert not strkit.index_of("abc", "z")
        assert strkit.index_of("abc", "a") == 0
        assert strkit.index_of("abc", "a") is not NotFound

    def test_split_then_pad_columns(self):
        row = strkit.split("1,22,333", ",")
        assert [strkit.pad_left(cell, 3, "0") for cell in row] == ["001", "022", "333"]

    def test_swap_words_in_one_pass(self):
        assert strkit.replace("cat chases dog", {"cat": "dog", "dog": "cat"}) == "dog chases cat"

    @pytest.mark.parametrize(
        "subject,expected",
        [("int main.c", True), ("header.h", True), ("script.py", False)],
    )
    def test_source_file_filter(self, subject, expected):
        assert strkit.ends_with(subject, any_of([".c", ".h"])) is expected

    def test_errors_share_base_class(self):
        with pytest.raises(strkit.StrKitError):
            strkit.slice("abc", 10)
        with pytest.raises(strkit.StrKitError):
            strkit.chunk("abc", 0)
