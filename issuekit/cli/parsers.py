"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from ..core.errors import IssueKitError
from ..data import load_yaml, normalize
from ..filesystem import read_file


def parse_data_file(value: Path | None) -> Any:
    """Load template data from a YAML or JSON file (JSON is valid YAML)."""
    if value is None:
        return {}
    try:
        return normalize(load_yaml(read_file(value))) or {}
    except IssueKitError as e:
        raise typer.BadParameter(str(e), param_hint="--data") from e
