"""Interactive yes/no prompt."""

from __future__ import annotations

import sys
from typing import IO

import typer


def prompt_yes_no(message: str, default_yes: bool, *, stdin: IO[str] | None = None) -> bool:
    """Ask a yes/no question on the terminal.

    An empty answer (or end of input) selects the default; any answer starting
    with ``y`` or ``Y`` means yes, anything else means no.
    """
    suffix = "[Y/n]" if default_yes else "[y/N]"
    typer.echo(f"{message} {suffix}: ", nl=False)

    line = (stdin or sys.stdin).readline()
    answer = line.rstrip("\r\n").lower()
    if answer == "":
        return default_yes
    return answer.startswith("y")
