# ABOUTME: Tests for success/error result normalization.
# ABOUTME: Verifies payload wrapping and the error message precedence of API payloads.

from __future__ import annotations

import pytest

from assemblyFlow.exceptions import RemoteApiError
from assemblyFlow.normalizer import (
    GENERIC_ERROR_MESSAGE,
    Err,
    Ok,
    extract_error,
    extract_error_message,
    normalize_error,
    normalize_payload,
    normalize_success,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"id": "abc"}, {"id": "abc"}),
        ([{"id": "a"}, {"id": "b"}], [{"id": "a"}, {"id": "b"}]),
        ('{"id": "abc"}', {"id": "abc"}),
        ("WEBVTT\n\n00:00.000 --> 00:01.000\nHi", {"data": "WEBVTT\n\n00:00.000 --> 00:01.000\nHi"}),
        (42, {"data": 42}),
        (None, {"data": None}),
    ],
)
def test_normalize_payload(raw, expected):
    assert normalize_payload(raw) == expected


def test_normalize_success_keeps_item_index():
    result = normalize_success({"id": "abc"}, 3)
    assert isinstance(result, Ok)
    assert result.ok
    assert result.to_item() == {"json": {"id": "abc"}, "paired_item": 3}


def test_extract_error_string_error_wins():
    payload = {"error": "Transcript not found", "message": "ignored"}
    assert extract_error(payload) == ("Transcript not found", payload)


def test_extract_error_nested_error_message():
    payload = {"error": {"message": "Invalid model", "code": "bad_request"}}
    assert extract_error(payload) == ("Invalid model", {"message": "Invalid model", "code": "bad_request"})


def test_extract_error_top_level_message():
    assert extract_error({"message": "Rate limited"}) == ("Rate limited", {"message": "Rate limited"})


def test_extract_error_from_json_text():
    message, _ = extract_error('{"error": "Bad audio"}')
    assert message == "Bad audio"


def test_extract_error_message_falls_back_to_generic():
    assert extract_error_message({"status": 500}) == GENERIC_ERROR_MESSAGE
    assert extract_error_message("<html>502</html>") == GENERIC_ERROR_MESSAGE
    assert extract_error_message(None) == GENERIC_ERROR_MESSAGE


def test_normalize_error_from_remote_error():
    exc = RemoteApiError("Transcript not found", status_code=404, details={"error": "Transcript not found"})
    result = normalize_error(exc, 2)

    assert isinstance(result, Err)
    assert not result.ok
    assert result.json == {"error": "Transcript not found", "details": {"error": "Transcript not found"}}
    assert result.to_item()["paired_item"] == 2


def test_normalize_error_from_plain_exception():
    assert normalize_error(TypeError("bad payload")).message == "bad payload"
    assert normalize_error(ValueError()).message == GENERIC_ERROR_MESSAGE
