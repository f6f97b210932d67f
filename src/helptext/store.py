"""JSON schema file persistence."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .errors import SchemaLoadError
from .models import ArgumentSyntax


def load_syntax(path: Path) -> ArgumentSyntax:
    """Load and validate an argument schema from a JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Could not read schema file {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"Schema file {path} is not valid JSON: {exc}") from exc

    try:
        return ArgumentSyntax.model_validate(data)
    except ValidationError as exc:
        raise SchemaLoadError(f"Schema file {path} is invalid: {exc}") from exc


def save_syntax(syntax: ArgumentSyntax, path: Path) -> None:
    """Serialize the schema to JSON and write to path.

    Uses indent=2 and preserves field declaration order.
    Creates parent directories if needed.
    Appends a trailing newline.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = syntax.model_dump(mode="json")
    text = json.dumps(data, indent=2, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")
