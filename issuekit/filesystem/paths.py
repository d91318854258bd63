"""Locate configuration files in the current directory and its ancestors."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..core.errors import NotFoundError
from ..core.models import ParentPaths
from ..settings import get_settings

logger = logging.getLogger(__name__)


def home_dir() -> Path:
    """Return the user's home directory.

    ``ISSUEKIT_HOME_DIR`` wins, then ``USERPROFILE`` on Windows or ``HOME``
    elsewhere.
    """
    configured = get_settings().home_dir
    if configured is not None:
        return configured
    env_var = "USERPROFILE" if sys.platform == "win32" else "HOME"
    value = os.environ.get(env_var)
    return Path(value) if value else Path.home()


def search_parent_paths(file_name: str, *, cwd: Path | None = None) -> ParentPaths:
    """Collect every directory from ``cwd`` up to the root that holds ``file_name``.

    The home directory is checked first when it is not part of the cwd
    hierarchy, then cwd itself, then each ancestor nearest to farthest.
    """
    cwd = Path(cwd).absolute() if cwd is not None else Path.cwd()
    found: list[Path] = []
    home_match: Path | None = None

    home = home_dir()
    if not cwd.is_relative_to(home):
        candidate = home / file_name
        if candidate.exists():
            home_match = candidate
            found.append(candidate)

    for directory in (cwd, *cwd.parents):
        candidate = directory / file_name
        if candidate.exists():
            found.append(candidate)

    logger.debug(f"Found {len(found)} match(es) for {file_name!r} from {cwd}")
    return ParentPaths(file_name=file_name, cwd=cwd, paths=found, home_match=home_match)


def find_parent_paths(file_name: str, *, cwd: Path | None = None) -> list[Path]:
    """Return every match for ``file_name`` in discovery order."""
    return search_parent_paths(file_name, cwd=cwd).paths


def find_closest_parent_path(
    file_name: str,
    *,
    cwd: Path | None = None,
    log: logging.Logger | None = None,
) -> Path:
    """Return the match for ``file_name`` nearest to ``cwd``.

    Raises:
        NotFoundError: if no directory in the hierarchy holds ``file_name``
    """
    try:
        return search_parent_paths(file_name, cwd=cwd).closest
    except NotFoundError as e:
        (log or logger).error(str(e))
        raise
