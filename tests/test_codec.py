"""Tests for JSON/YAML encode and decode helpers."""

from __future__ import annotations

import io
import json
import logging
import stat

import pytest
import requests
import yaml

from issuekit.core.errors import FilesystemError, SerializationError
from issuekit.data import (
    json_decode,
    json_encode,
    json_write,
    response_to_json,
    yaml_write,
)


def _response(status_code: int, body: bytes) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    return response


def test_json_decode_bytes_stream():
    assert json_decode(io.BytesIO(b'{"key": "ABC-1", "fields": [1, 2]}')) == {
        "key": "ABC-1",
        "fields": [1, 2],
    }


def test_json_decode_text_stream():
    assert json_decode(io.StringIO("[true, null]")) == [True, None]


def test_json_decode_invalid_logs_and_raises(caplog):
    with pytest.raises(SerializationError):
        json_decode(io.BytesIO(b"<html>oops</html>"))

    assert "JSON Parse Error" in caplog.text
    assert "oops" in caplog.text


def test_json_encode_is_compact_sorted_and_newline_terminated():
    assert json_encode({"b": 1, "a": [1, "x"]}) == '{"a":[1,"x"],"b":1}\n'


def test_json_encode_failure_raises(caplog):
    with pytest.raises(SerializationError):
        json_encode({"when": object()})

    assert "Failed to encode data" in caplog.text


def test_json_write(tmp_path):
    target = tmp_path / "cache.json"

    json_write(target, {"token": "abc"})

    assert json.loads(target.read_text()) == {"token": "abc"}
    assert stat.S_IMODE(target.stat().st_mode) == 0o600


def test_yaml_write(tmp_path):
    target = tmp_path / "config.yml"

    yaml_write(target, {"project": "ABC", "labels": ["a", "b"]})

    assert yaml.safe_load(target.read_text()) == {"project": "ABC", "labels": ["a", "b"]}
    assert stat.S_IMODE(target.stat().st_mode) == 0o600


def test_yaml_write_unrepresentable_raises(tmp_path):
    target = tmp_path / "config.yml"

    with pytest.raises(SerializationError):
        yaml_write(target, {"value": object()})
    assert not target.exists()


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(FilesystemError):
        json_write(tmp_path / "missing" / "cache.json", {})


def test_response_to_json_success():
    assert response_to_json(_response(200, b'{"key": "ABC-1"}')) == {"key": "ABC-1"}


def test_response_to_json_logs_error_messages_on_400(caplog):
    body = b'{"errorMessages": ["Field summary is required", "Bad project"], "errors": {}}'

    data = response_to_json(_response(400, body))

    assert data["errorMessages"] == ["Field summary is required", "Bad project"]
    messages = [r.getMessage() for r in caplog.records if r.levelname == "ERROR"]
    assert messages == ["Field summary is required", "Bad project"]


def test_response_to_json_ignores_error_messages_on_other_status(caplog):
    body = b'{"errorMessages": ["ignored"]}'

    data = response_to_json(_response(404, body))

    assert data == {"errorMessages": ["ignored"]}
    assert "ignored" not in caplog.text


def test_response_to_json_400_without_mapping(caplog):
    assert response_to_json(_response(400, b'["plain", "list"]')) == ["plain", "list"]
    assert not [r for r in caplog.records if r.levelname == "ERROR"]


def test_response_to_json_uses_injected_logger(caplog):
    log = logging.getLogger("tracker.client")

    response_to_json(_response(400, b'{"errorMessages": ["boom"]}'), log=log)

    assert [r.name for r in caplog.records] == ["tracker.client"]


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_json_encode_rejects_non_finite_numbers(value):
    with pytest.raises(SerializationError):
        json_encode({"x": value})
