"""File I/O helpers: reads, copies, private writes and ``mkdir -p``."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from ..core.errors import FilesystemError
from ..settings import get_settings

logger = logging.getLogger(__name__)


def read_file(path: Path | str, *, log: logging.Logger | None = None) -> str:
    """Read a UTF-8 text file.

    Args:
        path: File to read
        log: Logger to report through (module logger when omitted)

    Returns:
        File contents
    """
    log = log or logger
    path = Path(path)
    log.debug(f"read_file: reading {str(path)!r}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        log.error(f"Failed to read file {path}: {e}")
        raise FilesystemError(path, f"Failed to read file {path}: {e}") from e


def copy_file(src: Path | str, dst: Path | str, *, log: logging.Logger | None = None) -> None:
    """Copy the bytes of ``src`` into ``dst``, creating or truncating ``dst``."""
    log = log or logger
    try:
        with open(src, "rb") as s, open(dst, "wb") as d:
            shutil.copyfileobj(s, d)
    except OSError as e:
        log.error(f"Failed to copy {src} to {dst}: {e}")
        raise FilesystemError(dst, f"Failed to copy {src} to {dst}: {e}") from e


def mkdir(path: Path | str, *, log: logging.Logger | None = None) -> None:
    """Create ``path`` and any missing parents, like ``mkdir -p``.

    An existing directory is left alone. An existing non-directory, or a path
    that cannot be inspected, is an error.
    """
    log = log or logger
    path = Path(path)
    try:
        st = path.stat()
    except FileNotFoundError:
        st = None
    except OSError as e:
        log.error(f"Failed to stat {path}: {e}")
        raise FilesystemError(path, f"Failed to stat {path}: {e}") from e

    if st is not None:
        if path.is_dir():
            return
        message = f"{path} exists and is not a directory"
        log.error(message)
        raise FilesystemError(path, message)

    try:
        path.mkdir(mode=get_settings().dir_mode, parents=True, exist_ok=True)
    except OSError as e:
        log.error(f"Failed to mkdir -p {path}: {e}")
        raise FilesystemError(path, f"Failed to mkdir -p {path}: {e}") from e


def write_private(
    path: Path | str,
    data: str | bytes,
    mode: int | None = None,
    *,
    log: logging.Logger | None = None,
) -> None:
    """Write data to a file atomically using a temporary file.

    The temporary file is created owner-only, so the content is never
    readable by others, even before the final ``chmod``.

    Args:
        path: Destination file path
        data: Text or bytes to write
        mode: File permissions (octal), defaults to the configured file mode
        log: Logger to report through (module logger when omitted)
    """
    log = log or logger
    path = Path(path)
    if mode is None:
        mode = get_settings().file_mode
    payload = data.encode("utf-8") if isinstance(data, str) else data

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as e:
        log.error(f"Failed to open {path}: {e}")
        raise FilesystemError(path, f"Failed to open {path}: {e}") from e

    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(payload)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError as e:
        log.error(f"Failed to write {path}: {e}")
        raise FilesystemError(path, f"Failed to write {path}: {e}") from e
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
