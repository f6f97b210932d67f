"""Tests for the helptext command-line entry point."""

import os
from pathlib import Path

import pytest

import helptext.cli as cli_module
from helptext.models import ArgumentSyntax
from helptext.store import save_syntax


def _schema(tmp_path: Path, syntax: ArgumentSyntax) -> Path:
    path = tmp_path / "schema.json"
    save_syntax(syntax, path)
    return path


def test_main_prints_command_list(
    tmp_path: Path,
    tool_syntax: ArgumentSyntax,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = _schema(tmp_path, tool_syntax)

    code = cli_module.main(["--schema", str(path), "--width", "80"])

    assert code == 0
    assert capsys.readouterr().out == (
        "Usage: tool <command> [<args>]\n"
        "\n"
        "    build    Builds the project\n"
        "    test     Runs tests\n"
        "\n"
    )


def test_main_command_option_selects_detail_page(
    tmp_path: Path,
    tool_syntax: ArgumentSyntax,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = _schema(tmp_path, tool_syntax)

    code = cli_module.main(["--schema", str(path), "--command", "build", "--width", "80"])

    assert code == 0
    assert capsys.readouterr().out == "Usage: tool build\n"


def test_main_defaults_to_terminal_width(
    tmp_path: Path,
    run_syntax: ArgumentSyntax,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = _schema(tmp_path, run_syntax)
    monkeypatch.setattr(
        cli_module.shutil,
        "get_terminal_size",
        lambda fallback=(80, 24): os.terminal_size((40, 24)),
    )

    code = cli_module.main(["--schema", str(path)])

    assert code == 0
    assert capsys.readouterr().out.split("\n")[0] == "Usage: tool run [--verbose]"


def test_main_reports_missing_schema(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_module.main(["--schema", str(tmp_path / "missing.json"), "--width", "80"])

    assert code == 1
    err = capsys.readouterr().err
    assert err.startswith("ERROR: Could not read schema file")


def test_main_rejects_non_positive_width(
    tmp_path: Path,
    tool_syntax: ArgumentSyntax,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = _schema(tmp_path, tool_syntax)

    code = cli_module.main(["--schema", str(path), "--width", "0"])

    assert code == 1
    err = capsys.readouterr().err
    assert "ERROR: --width must be at least 1, got 0." in err
    assert "Run 'helptext --help' for usage." in err


def test_main_requires_schema(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli_module.main([])

    assert exc_info.value.code == 2
    assert "--schema" in capsys.readouterr().err


def test_main_writes_log_file(tmp_path: Path, tool_syntax: ArgumentSyntax) -> None:
    path = _schema(tmp_path, tool_syntax)
    log_path = tmp_path / "logs" / "helptext.log"

    code = cli_module.main(["--schema", str(path), "--width", "80", "--log", str(log_path)])

    assert code == 0
    content = log_path.read_text(encoding="utf-8")
    assert "=== help_render ===" in content
    assert "application: tool" in content
    assert "width: 80" in content
