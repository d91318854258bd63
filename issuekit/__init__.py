"""issuekit - support utilities for an issue tracker command-line client.

Config-file discovery, template rendering, JSON/YAML helpers and
YAML normalization.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .cli import main, prompt_yes_no
from .core.errors import (
    FilesystemError,
    InvalidTimestampError,
    IssueKitError,
    NotFoundError,
    SerializationError,
    TemplateExecError,
    TemplateParseError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from .data import json_decode, json_encode, json_write, normalize, response_to_json, yaml_write
from .filesystem import copy_file, find_closest_parent_path, find_parent_paths, mkdir, read_file
from .rendering import render, render_file

__all__ = [
    "FilesystemError",
    "InvalidTimestampError",
    "IssueKitError",
    "NotFoundError",
    "SerializationError",
    "TemplateExecError",
    "TemplateParseError",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "copy_file",
    "find_closest_parent_path",
    "find_parent_paths",
    "json_decode",
    "json_encode",
    "json_write",
    "main",
    "mkdir",
    "normalize",
    "prompt_yes_no",
    "read_file",
    "render",
    "render_file",
    "response_to_json",
    "yaml_write",
]
