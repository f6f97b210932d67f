"""Tests for greedy word-wrap primitives."""

from collections.abc import Iterator

from helptext.wrapping import split_words, word_wrap_lines, wrap_hanging


def test_short_input_is_one_line_joined_by_single_spaces() -> None:
    assert list(word_wrap_lines(["a", "bb", "ccc"], 20)) == ["a bb ccc"]


def test_exact_fit_stays_on_one_line() -> None:
    assert list(word_wrap_lines(["abc", "de"], 6)) == ["abc de"]


def test_breaks_when_next_token_would_exceed_width() -> None:
    assert list(word_wrap_lines(["aa", "bb", "cc"], 5)) == ["aa bb", "cc"]
    assert list(word_wrap_lines(["aa", "bb", "cc"], 4)) == ["aa", "bb", "cc"]


def test_overlong_token_is_kept_whole_on_its_own_line() -> None:
    lines = list(word_wrap_lines(["averyverylongtoken", "x"], 8))

    assert lines == ["averyverylongtoken", "x"]


def test_overlong_token_after_content_starts_a_new_line() -> None:
    lines = list(word_wrap_lines(["short", "averyverylongtoken", "x"], 8))

    assert lines == ["short", "averyverylongtoken", "x"]


def test_no_tokens_yields_no_lines() -> None:
    assert list(word_wrap_lines([], 10)) == []


def test_word_wrap_is_lazy_and_restartable() -> None:
    tokens = ["one", "two", "three", "four"]

    lines = word_wrap_lines(tokens, 9)

    assert isinstance(lines, Iterator)
    assert list(lines) == ["one two", "three", "four"]
    assert list(word_wrap_lines(tokens, 9)) == ["one two", "three", "four"]


def test_wrap_hanging_indents_continuation_lines_only() -> None:
    assert wrap_hanging(["aa", "bb"], 3, 2) == ["aa", "   bb"]


def test_wrap_hanging_without_tokens_returns_one_empty_line() -> None:
    assert wrap_hanging([], 4, 10) == [""]


def test_split_words_collapses_whitespace() -> None:
    assert split_words("  a  b\tc \n") == ["a", "b", "c"]
    assert split_words("") == []
