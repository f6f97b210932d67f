"""Literal constants used by helptext."""

from __future__ import annotations

APP_NAME = "helptext"

# Usage line
USAGE_HEADER_TEMPLATE = "Usage: {application_name}"
GLOBAL_SYNTAX_TOKENS = ("<command>", "[<args>]")
END_OF_OPTIONS_TOKEN = "[--]"
VALUE_REQUIRED_SUFFIX = " <arg>"
VALUE_OPTIONAL_SUFFIX = " [arg]"
LIST_SUFFIX = "..."
DISPLAY_NAME_SEPARATOR = ", "

# Rows table
INDENT_UNIT = 4

# Display names
SHORT_OPTION_PREFIX = "-"
LONG_OPTION_PREFIX = "--"
PARAMETER_NAME_TEMPLATE = "<{name}>"

# CLI
DEFAULT_MAX_WIDTH = 80
ERROR_PREFIX = "ERROR:"
CLI_HELP_HINT = "Run 'helptext --help' for usage."
