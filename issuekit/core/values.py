"""Dynamic value model shared by the renderer, codec and normalizer."""

from __future__ import annotations

from typing import Union

from typing_extensions import TypeAlias

Scalar: TypeAlias = Union[str, bytes, int, float, bool, None]

# Decoded JSON/YAML documents and template data are trees of these.
Value: TypeAlias = Union[Scalar, list["Value"], dict[str, "Value"]]

SEQUENCE_TYPES = (list, tuple)


def type_name(value: object) -> str:
    """Return a short, user-facing name for the runtime type of ``value``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if isinstance(value, SEQUENCE_TYPES):
        return "sequence"
    if isinstance(value, dict):
        return "mapping"
    return type(value).__name__
