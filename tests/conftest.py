"""Pytest configuration and fixtures for helptext tests."""

import logging

import pytest

from helptext.models import (
    ArgumentSyntax,
    CommandDefinition,
    OptionDefinition,
    ParameterDefinition,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging() side effects between tests."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def tool_syntax() -> ArgumentSyntax:
    """Two-command application with no command selected."""
    return ArgumentSyntax(
        application_name="tool",
        commands=[
            CommandDefinition(name="build", help="Builds the project"),
            CommandDefinition(name="test", help="Runs tests"),
        ],
    )


@pytest.fixture
def run_syntax() -> ArgumentSyntax:
    """Application with a `run` command taking options and a list parameter."""
    return ArgumentSyntax(
        application_name="tool",
        active_command="run",
        commands=[
            CommandDefinition(
                name="run",
                help="Runs the given files",
                options=[
                    OptionDefinition(names=["verbose"], help="Show more output", is_flag=True),
                    OptionDefinition(
                        names=["count", "c"],
                        help="Number of runs to perform before stopping",
                    ),
                ],
                parameters=[
                    ParameterDefinition(name="files", help="Input files", is_list=True),
                ],
            ),
        ],
    )
