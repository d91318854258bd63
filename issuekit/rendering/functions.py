"""Function library available to templates.

Names and argument order are part of the template contract. Each function is
also registered as a filter, in which case the piped value is passed as the
last argument: ``{{ summary | abbrev(20) }}`` is ``{{ abbrev(20, summary) }}``.
"""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from typing import Any, Callable

from ..core.errors import InvalidTimestampError, SerializationError, UnsupportedTypeError
from ..core.values import SEQUENCE_TYPES, Value, type_name
from ..settings import Settings, get_settings
from .colors import color_code

# Tracker API timestamps, e.g. 2024-03-01T09:15:42.123-0500
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
_TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}[+-]\d{4}$")

LINE_SEPARATORS = ("\n", "\u0085", "\u2028", "\u2029")


def parse_timestamp(value: str) -> datetime:
    """Parse a tracker timestamp (``YYYY-MM-DDTHH:MM:SS.mmm±HHMM``)."""
    if not isinstance(value, str) or not _TIMESTAMP_PATTERN.match(value):
        raise InvalidTimestampError(f"Timestamp {value!r} does not match YYYY-MM-DDTHH:MM:SS.mmm±HHMM")
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise InvalidTimestampError(f"Invalid timestamp {value!r}: {e}") from e


def to_json(value: Value, indent: int = 4) -> str:
    try:
        return json.dumps(value, indent=indent, sort_keys=True, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot serialize {type_name(value)} to JSON: {e}") from e


def append(suffix: str, content: Value) -> str:
    if isinstance(content, str):
        return content + suffix
    if isinstance(content, (bytes, bytearray)):
        return content.decode("utf-8") + suffix
    raise UnsupportedTypeError(f"append: unsupported type {type_name(content)}")


def indent(spaces: int, content: str) -> str:
    padding = " " * spaces
    for sep in LINE_SEPARATORS:
        content = content.replace(sep, sep + padding)
    return content


def comment(content: str) -> str:
    for sep in LINE_SEPARATORS:
        content = content.replace(sep, sep + "# ")
    return content


def split(sep: str, content: str) -> list[str]:
    if sep == "":
        return list(content)
    return content.split(sep)


def join(sep: str, content: Value) -> str:
    if not isinstance(content, SEQUENCE_TYPES):
        raise UnsupportedTypeError(f"join: expected a sequence, got {type_name(content)}")
    for item in content:
        if not isinstance(item, str):
            raise UnsupportedTypeError(f"join: element {item!r} is {type_name(item)}, require string")
    return sep.join(content)


def abbrev(max_len: int, content: str) -> str:
    if len(content) <= max_len:
        return content
    if max_len <= 3:
        return content[: max(max_len, 0)]
    return content[: max_len - 3] + "..."


def rep(count: int, content: str) -> str:
    return content * count


def fuzzy_age(start: str, now: datetime | None = None) -> str:
    """Render how long ago ``start`` was, e.g. ``"3 hours"``."""
    then = parse_timestamp(start)
    now = now or datetime.now(timezone.utc)
    minutes = (now - then).total_seconds() / 60
    if minutes < 2:
        return "a minute"
    if minutes < 45:
        return f"{int(minutes)} minutes"
    if minutes < 90:
        return "an hour"
    hours = minutes / 60
    if hours < 24:
        return f"{int(hours)} hours"
    if hours < 48:
        return "a day"
    return f"{int(hours / 24)} days"


def date_format(layout: str, content: str) -> str:
    return parse_timestamp(content).strftime(layout)


def template_functions(settings: Settings | None = None) -> dict[str, Callable[..., Any]]:
    """Build the name → function table exposed to templates."""
    settings = settings or get_settings()
    return {
        "toJson": lambda value: to_json(value, indent=settings.json_indent),
        "append": append,
        "indent": indent,
        "comment": comment,
        "color": lambda name: color_code(name, plain=settings.plain),
        "split": split,
        "join": join,
        "abbrev": abbrev,
        "rep": rep,
        "age": lambda content: fuzzy_age(content),
        "dateFormat": date_format,
    }


def as_filter(func: Callable[..., Any]) -> Callable[..., Any]:
    """Adapt a template function so a piped value becomes its last argument."""

    def _filter(value: Any, *args: Any) -> Any:
        return func(*args, value)

    _filter.__name__ = getattr(func, "__name__", "filter")
    return _filter
