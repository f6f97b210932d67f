"""Help-page layout engine for command-line applications."""

from .argparse_source import syntax_from_argparse
from .errors import HelpTextError, SchemaLoadError, StartupValidationError
from .models import (
    ArgumentSyntax,
    CommandDefinition,
    OptionDefinition,
    ParameterDefinition,
)
from .renderer import generate_help_text, render_help
from .snapshot import (
    ArgumentInfo,
    CommandInfo,
    HelpInfo,
    OperationInfo,
    OptionInfo,
    ParameterInfo,
    build_help_info,
)
from .store import load_syntax, save_syntax

__all__ = [
    "ArgumentInfo",
    "ArgumentSyntax",
    "CommandDefinition",
    "CommandInfo",
    "HelpInfo",
    "HelpTextError",
    "OperationInfo",
    "OptionDefinition",
    "OptionInfo",
    "ParameterDefinition",
    "ParameterInfo",
    "SchemaLoadError",
    "StartupValidationError",
    "build_help_info",
    "generate_help_text",
    "load_syntax",
    "render_help",
    "save_syntax",
    "syntax_from_argparse",
]
