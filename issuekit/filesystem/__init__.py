"""Filesystem helpers: parent-path lookup and file I/O."""

from .io import copy_file, mkdir, read_file, write_private
from .paths import find_closest_parent_path, find_parent_paths, home_dir, search_parent_paths

__all__ = [
    "copy_file",
    "find_closest_parent_path",
    "find_parent_paths",
    "home_dir",
    "mkdir",
    "read_file",
    "search_parent_paths",
    "write_private",
]
