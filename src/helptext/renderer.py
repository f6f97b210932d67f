"""Render help pages to text.

Output layout:
- Usage line, wrapped with continuation lines aligned under the first token.
- When rows exist: one blank line, the aligned rows table, one trailing blank.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import INDENT_UNIT, USAGE_HEADER_TEMPLATE
from .layout import HelpPage, HelpRow, select_page
from .models import ArgumentSyntax
from .snapshot import HelpInfo, build_help_info
from .wrapping import split_words, wrap_hanging


def render_help(syntax: ArgumentSyntax, max_width: int) -> str:
    return generate_help_text(build_help_info(syntax), max_width)


def generate_help_text(info: HelpInfo, max_width: int) -> str:
    """Render the help page for a snapshot at the given maximum width."""
    lines = render_page(select_page(info), max_width)
    return "".join(f"{line}\n" for line in lines)


def render_page(page: HelpPage, max_width: int) -> list[str]:
    lines = render_usage(page.application_name, page.syntax_tokens, max_width)
    if not page.rows:
        return lines
    return [*lines, "", *render_rows(page.rows, max_width), ""]


def render_usage(application_name: str, syntax_tokens: Sequence[str], max_width: int) -> list[str]:
    header = USAGE_HEADER_TEMPLATE.format(application_name=application_name)
    lead = f"{header} " if syntax_tokens else header

    syntax_indent = len(header) + 1
    syntax_max_width = max_width - syntax_indent

    wrapped = wrap_hanging(syntax_tokens, syntax_indent, syntax_max_width)
    return [lead + wrapped[0], *wrapped[1:]]


def render_rows(rows: Sequence[HelpRow], max_width: int) -> list[str]:
    """Render rows as a two-column table with help text aligned in one column.

    When the header column alone is wider than max_width, help text wraps
    at the full max_width instead and alignment is no longer kept.
    """
    header_column_width = max(len(row.header) for row in rows)
    help_start_column = header_column_width + 2 * INDENT_UNIT

    max_help_width = max_width - help_start_column
    if max_help_width < 0:
        max_help_width = max_width

    lines: list[str] = []
    for row in rows:
        lead = f"{' ' * INDENT_UNIT}{row.header}".ljust(help_start_column)
        wrapped = wrap_hanging(split_words(row.text), help_start_column, max_help_width)
        lines.append(lead + wrapped[0])
        lines.extend(wrapped[1:])
    return lines
