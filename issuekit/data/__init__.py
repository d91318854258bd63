"""Decoding, encoding and normalization of JSON/YAML data."""

from .codec import (
    json_decode,
    json_encode,
    json_loads,
    json_write,
    response_to_json,
    yaml_dump,
    yaml_write,
)
from .normalize import load_yaml, normalize, yaml_to_json_safe

__all__ = [
    "json_decode",
    "json_encode",
    "json_loads",
    "json_write",
    "load_yaml",
    "normalize",
    "response_to_json",
    "yaml_dump",
    "yaml_to_json_safe",
    "yaml_write",
]
