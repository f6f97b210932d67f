"""Argument schema models.

These describe an application's arguments the way a parser would define
them. Help rendering never reads them directly; it works from the
immutable snapshot built in snapshot.py.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import LONG_OPTION_PREFIX, PARAMETER_NAME_TEMPLATE, SHORT_OPTION_PREFIX


class OptionDefinition(BaseModel):
    names: list[str] = Field(min_length=1)
    help: str = ""
    is_flag: bool = False
    is_value_required: bool = True
    is_list: bool = False
    is_hidden: bool = False

    @field_validator("names")
    @classmethod
    def _names_not_blank(cls, names: list[str]) -> list[str]:
        for name in names:
            if not name.strip():
                raise ValueError("option names must not be blank")
        return names

    @property
    def display_names(self) -> list[str]:
        return [option_display_name(name) for name in self.names]


class ParameterDefinition(BaseModel):
    name: str = Field(min_length=1)
    help: str = ""
    is_list: bool = False
    is_hidden: bool = False

    @property
    def display_names(self) -> list[str]:
        return [PARAMETER_NAME_TEMPLATE.format(name=self.name)]


class CommandDefinition(BaseModel):
    name: str = Field(min_length=1)
    help: str = ""
    options: list[OptionDefinition] = []
    parameters: list[ParameterDefinition] = []
    is_hidden: bool = False


class ArgumentSyntax(BaseModel):
    application_name: str = Field(min_length=1)
    # None = no command selected
    active_command: str | None = None
    options: list[OptionDefinition] = []
    parameters: list[ParameterDefinition] = []
    commands: list[CommandDefinition] = []

    @model_validator(mode="after")
    def _command_names_unique(self) -> ArgumentSyntax:
        seen: set[str] = set()
        for command in self.commands:
            if command.name in seen:
                raise ValueError(f"duplicate command name '{command.name}'")
            seen.add(command.name)
        return self


def option_display_name(name: str) -> str:
    """Return the spelling shown for an option name.

    Names already carrying a dash are kept; otherwise one-letter names get
    a single dash and longer ones a double dash.
    """
    if name.startswith(SHORT_OPTION_PREFIX):
        return name
    if len(name) == 1:
        return f"{SHORT_OPTION_PREFIX}{name}"
    return f"{LONG_OPTION_PREFIX}{name}"
