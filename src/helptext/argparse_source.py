"""Derive an argument schema from an argparse parser.

Mapping:
- Optional actions become options. Zero-nargs actions (store_true, count,
  help, ...) are flags; `nargs="?"` makes the value optional.
- Positional actions become parameters.
- A subparsers action becomes commands, one per distinct sub-parser.
- Help set to argparse.SUPPRESS hides the item.
"""

from __future__ import annotations

import argparse
from typing import Any

from .models import ArgumentSyntax, CommandDefinition, OptionDefinition, ParameterDefinition

_LIST_NARGS = frozenset({argparse.ZERO_OR_MORE, argparse.ONE_OR_MORE, argparse.REMAINDER})


def syntax_from_argparse(
    parser: argparse.ArgumentParser,
    active_command: str | None = None,
) -> ArgumentSyntax:
    options, parameters = _arguments_of(parser)
    return ArgumentSyntax(
        application_name=parser.prog,
        active_command=active_command,
        options=options,
        parameters=parameters,
        commands=_commands_of(parser),
    )


def _arguments_of(
    parser: argparse.ArgumentParser,
) -> tuple[list[OptionDefinition], list[ParameterDefinition]]:
    options: list[OptionDefinition] = []
    parameters: list[ParameterDefinition] = []

    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            continue
        if action.option_strings:
            options.append(_option_of(parser, action))
        else:
            parameters.append(_parameter_of(parser, action))

    return options, parameters


def _option_of(parser: argparse.ArgumentParser, action: argparse.Action) -> OptionDefinition:
    return OptionDefinition(
        names=list(action.option_strings),
        help=_help_text(parser, action),
        is_flag=action.nargs == 0,
        is_value_required=action.nargs != argparse.OPTIONAL,
        is_list=_is_list(action),
        is_hidden=action.help == argparse.SUPPRESS,
    )


def _parameter_of(parser: argparse.ArgumentParser, action: argparse.Action) -> ParameterDefinition:
    name = action.metavar if isinstance(action.metavar, str) else action.dest
    return ParameterDefinition(
        name=name,
        help=_help_text(parser, action),
        is_list=_is_list(action),
        is_hidden=action.help == argparse.SUPPRESS,
    )


def _commands_of(parser: argparse.ArgumentParser) -> list[CommandDefinition]:
    commands: list[CommandDefinition] = []
    seen_parsers: set[int] = set()

    for action in parser._actions:
        if not isinstance(action, argparse._SubParsersAction):
            continue

        help_by_name = {choice.dest: choice.help for choice in action._choices_actions}
        for name, subparser in action.choices.items():
            # Aliases map to the same parser object.
            if id(subparser) in seen_parsers:
                continue
            seen_parsers.add(id(subparser))

            options, parameters = _arguments_of(subparser)
            command_help = help_by_name.get(name) or ""
            is_hidden = command_help == argparse.SUPPRESS
            commands.append(
                CommandDefinition(
                    name=name,
                    help="" if is_hidden else command_help,
                    options=options,
                    parameters=parameters,
                    is_hidden=is_hidden,
                )
            )

    return commands


def _is_list(action: argparse.Action) -> bool:
    if isinstance(action, argparse._AppendAction):
        return True
    if action.nargs in _LIST_NARGS:
        return True
    return isinstance(action.nargs, int) and action.nargs > 1


def _help_text(parser: argparse.ArgumentParser, action: argparse.Action) -> str:
    """Expand %-style placeholders the way argparse does for its own help."""
    if not action.help or action.help == argparse.SUPPRESS:
        return ""

    params: dict[str, Any] = {
        key: value for key, value in vars(action).items() if value is not argparse.SUPPRESS
    }
    params["prog"] = parser.prog
    if params.get("choices") is not None:
        params["choices"] = ", ".join(str(choice) for choice in params["choices"])

    try:
        return action.help % params
    except (KeyError, TypeError, ValueError):
        return action.help
