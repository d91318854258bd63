"""JSON and YAML encode/decode helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any

import requests
import yaml

from ..core.errors import SerializationError
from ..core.values import Value
from ..filesystem.io import write_private

logger = logging.getLogger(__name__)

BAD_REQUEST = 400


def json_decode(stream: IO[Any], *, log: logging.Logger | None = None) -> Value:
    """Read everything from ``stream`` and decode it as JSON.

    Raises:
        SerializationError: if the content is not valid JSON
    """
    content = stream.read()
    return json_loads(content, log=log)


def json_loads(content: str | bytes, *, log: logging.Logger | None = None) -> Value:
    try:
        return json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        (log or logger).error(f"JSON Parse Error: {e} from {content!r}")
        raise SerializationError(f"JSON Parse Error: {e}") from e


def json_encode(data: Any, *, log: logging.Logger | None = None) -> str:
    """Encode ``data`` as compact JSON terminated by a newline."""
    try:
        return json.dumps(
            data, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False
        ) + "\n"
    except (TypeError, ValueError) as e:
        (log or logger).error(f"Failed to encode data {data!r}: {e}")
        raise SerializationError(f"Failed to encode data: {e}") from e


def json_write(path: Path | str, data: Any, *, log: logging.Logger | None = None) -> None:
    """Write ``data`` as JSON to ``path`` with owner-only permissions."""
    write_private(path, json_encode(data, log=log), log=log)


def yaml_dump(data: Any, *, log: logging.Logger | None = None) -> str:
    try:
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        (log or logger).error(f"Failed to marshal yaml {data!r}: {e}")
        raise SerializationError(f"Failed to marshal yaml: {e}") from e


def yaml_write(path: Path | str, data: Any, *, log: logging.Logger | None = None) -> None:
    """Write ``data`` as YAML to ``path`` with owner-only permissions."""
    write_private(path, yaml_dump(data, log=log), log=log)


def response_to_json(
    response: requests.Response, *, log: logging.Logger | None = None
) -> Value:
    """Decode a tracker API response body as JSON.

    A 400 response carrying an ``errorMessages`` list has each message logged
    as an error. The decoded body is returned whatever the status code.
    """
    log = log or logger
    data = json_loads(response.content, log=log)
    if response.status_code == BAD_REQUEST and isinstance(data, dict):
        messages = data.get("errorMessages")
        if isinstance(messages, list):
            for message in messages:
                log.error(f"{message}")
    return data
