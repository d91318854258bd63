"""Error types raised by issuekit."""

from __future__ import annotations

from pathlib import Path


class IssueKitError(Exception):
    """Base class for all issuekit errors."""


class NotFoundError(IssueKitError, FileNotFoundError):
    """Raised when a file is not found anywhere in the parent hierarchy."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"{file_name} not found in parent directory hierarchy")


class TypeMismatchError(IssueKitError, TypeError):
    """Raised when a decoded YAML mapping has a non-string key."""

    def __init__(self, key: object) -> None:
        self.key = key
        self.key_type = type(key).__name__
        super().__init__(f"YAML: key {key!r} is type '{self.key_type}', require 'str'")


class UnsupportedTypeError(IssueKitError, TypeError):
    """Raised when a template function receives a value of an unexpected type."""


class TemplateParseError(IssueKitError):
    """Raised when a template cannot be compiled."""


class TemplateExecError(IssueKitError):
    """Raised when a compiled template fails during execution."""


class SerializationError(IssueKitError, ValueError):
    """Raised when JSON or YAML cannot be encoded or decoded."""


class InvalidTimestampError(IssueKitError, ValueError):
    """Raised when a timestamp does not match the tracker timestamp layout."""


class FilesystemError(IssueKitError, OSError):
    """Raised when a file or directory cannot be read, created or copied."""

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)
