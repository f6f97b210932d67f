"""Greedy word-wrap primitives shared by the usage line and the rows table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def word_wrap_lines(tokens: Iterable[str], max_width: int) -> Iterator[str]:
    """Pack tokens into lines no wider than max_width, joined by single spaces.

    A token that is wider than max_width on its own is yielded as its own
    line, unmodified.
    """
    line = ""
    for token in tokens:
        new_length = len(token) if not line else len(line) + 1 + len(token)

        if new_length > max_width:
            if not line:
                yield token
                continue
            yield line
            line = ""

        line = f"{line} {token}" if line else token

    if line:
        yield line


def wrap_hanging(tokens: Iterable[str], indent: int, max_width: int) -> list[str]:
    """Word-wrap tokens with continuation lines re-indented to `indent`.

    The first line carries no indent: the caller has already written the
    text leading up to that column. Always returns at least one line, which
    is empty when there are no tokens.
    """
    lines = list(word_wrap_lines(tokens, max_width))
    if not lines:
        return [""]
    padding = " " * indent
    return [lines[0], *(f"{padding}{line}" for line in lines[1:])]


def split_words(text: str) -> list[str]:
    return text.split()
