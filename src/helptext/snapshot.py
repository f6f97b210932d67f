"""Read-only help metadata built from an argument schema."""

from __future__ import annotations

from dataclasses import dataclass

from .models import ArgumentSyntax, CommandDefinition, OptionDefinition, ParameterDefinition


@dataclass(frozen=True)
class ArgumentInfo:
    display_names: tuple[str, ...]
    help: str
    is_list: bool

    @property
    def display_name(self) -> str:
        return self.display_names[0]


@dataclass(frozen=True)
class OptionInfo(ArgumentInfo):
    is_flag: bool
    is_value_required: bool


@dataclass(frozen=True)
class ParameterInfo(ArgumentInfo):
    pass


@dataclass(frozen=True)
class OperationInfo:
    options: tuple[OptionInfo, ...]
    parameters: tuple[ParameterInfo, ...]


@dataclass(frozen=True)
class CommandInfo(OperationInfo):
    name: str
    help: str


@dataclass(frozen=True)
class HelpInfo(OperationInfo):
    application_name: str
    active_command_name: str | None
    commands: tuple[CommandInfo, ...]


def build_help_info(syntax: ArgumentSyntax) -> HelpInfo:
    """Project the schema into a snapshot, dropping hidden items.

    Declaration order is kept for commands, options and parameters.
    """
    return HelpInfo(
        options=_visible_options(syntax.options),
        parameters=_visible_parameters(syntax.parameters),
        application_name=syntax.application_name,
        active_command_name=syntax.active_command,
        commands=tuple(
            _command_info(command) for command in syntax.commands if not command.is_hidden
        ),
    )


def _command_info(command: CommandDefinition) -> CommandInfo:
    return CommandInfo(
        options=_visible_options(command.options),
        parameters=_visible_parameters(command.parameters),
        name=command.name,
        help=command.help,
    )


def _visible_options(options: list[OptionDefinition]) -> tuple[OptionInfo, ...]:
    return tuple(
        OptionInfo(
            display_names=tuple(option.display_names),
            help=option.help,
            is_list=option.is_list,
            is_flag=option.is_flag,
            is_value_required=option.is_value_required,
        )
        for option in options
        if not option.is_hidden
    )


def _visible_parameters(parameters: list[ParameterDefinition]) -> tuple[ParameterInfo, ...]:
    return tuple(
        ParameterInfo(
            display_names=tuple(parameter.display_names),
            help=parameter.help,
            is_list=parameter.is_list,
        )
        for parameter in parameters
        if not parameter.is_hidden
    )
