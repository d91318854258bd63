"""Core types shared across issuekit."""

from .errors import (
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
from .values import Value

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
    "Value",
]
