"""Normalization of decoded YAML into JSON-safe values."""

from __future__ import annotations

import logging
from typing import IO, Any

import yaml

from ..core.errors import SerializationError, TypeMismatchError
from ..core.values import SEQUENCE_TYPES, Value

logger = logging.getLogger(__name__)

_BLANK_STRINGS = frozenset({"", "\n"})

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ConfigLoader(yaml.SafeLoader):
    """SafeLoader that keeps date and timestamp scalars as plain strings."""


ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _normalize(value: Any) -> Value:
    if isinstance(value, dict):
        result: dict[str, Value] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeMismatchError(key)
            fixed = _normalize(item)
            if fixed is not None:
                result[key] = fixed
        return result or None

    if isinstance(value, SEQUENCE_TYPES):
        items = [fixed for fixed in map(_normalize, value) if fixed is not None]
        return items or None

    if isinstance(value, str):
        return None if value in _BLANK_STRINGS else value

    return value


def normalize(value: Any, *, log: logging.Logger | None = None) -> Value:
    """Convert a decoded YAML value tree into a JSON-safe tree.

    Blank strings (``""`` or a lone newline) are dropped, and so is every
    mapping or sequence left empty once its blank entries are gone. Mapping
    keys must be strings.

    Args:
        value: Value tree as produced by a YAML loader
        log: Logger to report through (module logger when omitted)

    Returns:
        Normalized tree, or None when nothing survives

    Raises:
        TypeMismatchError: if any mapping key is not a string
    """
    try:
        return _normalize(value)
    except TypeMismatchError as e:
        (log or logger).error(str(e))
        raise


def load_yaml(source: str | bytes | IO[Any], *, log: logging.Logger | None = None) -> Any:
    """Decode a YAML document with the safe loader, leaving dates as strings."""
    try:
        return yaml.load(source, Loader=ConfigLoader)
    except yaml.YAMLError as e:
        (log or logger).error(f"YAML Parse Error: {e}")
        raise SerializationError(f"YAML Parse Error: {e}") from e


def yaml_to_json_safe(
    source: str | bytes | IO[Any], *, log: logging.Logger | None = None
) -> Value:
    """Decode a YAML document and normalize it for JSON serialization."""
    return normalize(load_yaml(source, log=log), log=log)
