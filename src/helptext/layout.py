"""Help page selection plus usage-token and row derivation."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DISPLAY_NAME_SEPARATOR,
    END_OF_OPTIONS_TOKEN,
    GLOBAL_SYNTAX_TOKENS,
    LIST_SUFFIX,
    VALUE_OPTIONAL_SUFFIX,
    VALUE_REQUIRED_SUFFIX,
)
from .snapshot import ArgumentInfo, CommandInfo, HelpInfo, OperationInfo, OptionInfo, ParameterInfo


@dataclass(frozen=True)
class HelpRow:
    header: str
    text: str


@dataclass(frozen=True)
class HelpPage:
    application_name: str
    syntax_tokens: tuple[str, ...]
    rows: tuple[HelpRow, ...]


def select_page(info: HelpInfo) -> HelpPage:
    """Pick the command list or the detail page for the active operation."""
    if not info.active_command_name and info.commands:
        return command_list_page(info)
    return command_page(info, info.active_command_name)


def command_list_page(info: HelpInfo) -> HelpPage:
    return HelpPage(
        application_name=info.application_name,
        syntax_tokens=GLOBAL_SYNTAX_TOKENS,
        rows=command_rows(info),
    )


def command_page(info: HelpInfo, command_name: str | None) -> HelpPage:
    """Detail page for the named command, or for the root when it is unknown."""
    operation = find_operation(info, command_name)
    return HelpPage(
        application_name=info.application_name,
        syntax_tokens=command_syntax(operation),
        rows=argument_rows(operation),
    )


def find_operation(info: HelpInfo, command_name: str | None) -> OperationInfo:
    for command in info.commands:
        if command.name == command_name:
            return command
    return info


def command_syntax(operation: OperationInfo) -> tuple[str, ...]:
    tokens: list[str] = []
    if isinstance(operation, CommandInfo):
        tokens.append(operation.name)

    tokens.extend(option_syntax(option) for option in operation.options)

    if operation.options and operation.parameters:
        tokens.append(END_OF_OPTIONS_TOKEN)

    tokens.extend(parameter_syntax(parameter) for parameter in operation.parameters)
    return tuple(tokens)


def option_syntax(option: OptionInfo) -> str:
    """Usage token for an option, e.g. `[--count <arg>]` or `[-v]`."""
    token = option.display_name
    if not option.is_flag:
        token += VALUE_REQUIRED_SUFFIX if option.is_value_required else VALUE_OPTIONAL_SUFFIX
    if option.is_list:
        token += LIST_SUFFIX
    return f"[{token}]"


def parameter_syntax(parameter: ParameterInfo) -> str:
    if parameter.is_list:
        return parameter.display_name + LIST_SUFFIX
    return parameter.display_name


def command_rows(info: HelpInfo) -> tuple[HelpRow, ...]:
    return tuple(HelpRow(header=command.name, text=command.help) for command in info.commands)


def argument_rows(operation: OperationInfo) -> tuple[HelpRow, ...]:
    arguments: list[ArgumentInfo] = [*operation.options, *operation.parameters]
    return tuple(
        HelpRow(header=argument_row_header(argument), text=argument.help)
        for argument in arguments
    )


def argument_row_header(argument: ArgumentInfo) -> str:
    """Row header listing every spelling, e.g. `--count, -c <arg>`."""
    header = DISPLAY_NAME_SEPARATOR.join(argument.display_names)
    if isinstance(argument, OptionInfo) and not argument.is_flag:
        header += VALUE_REQUIRED_SUFFIX if argument.is_value_required else VALUE_OPTIONAL_SUFFIX
    if argument.is_list:
        header += LIST_SUFFIX
    return header
