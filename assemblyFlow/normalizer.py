# ABOUTME: Uniform success/error results for each processed input item.
# ABOUTME: Parses JSON text bodies and extracts readable messages from API error payloads.

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from assemblyFlow.exceptions import AssemblyFlowError

GENERIC_ERROR_MESSAGE = "Unknown error occurred"


@dataclass(frozen=True)
class Ok:
    json: Any
    item_index: int = 0

    @property
    def ok(self) -> bool:
        return True

    def to_item(self) -> Dict[str, Any]:
        return {"json": self.json, "paired_item": self.item_index}


@dataclass(frozen=True)
class Err:
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    item_index: int = 0

    @property
    def ok(self) -> bool:
        return False

    @property
    def json(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}

    def to_item(self) -> Dict[str, Any]:
        return {"json": self.json, "paired_item": self.item_index}


NormalizedResult = Union[Ok, Err]


def normalize_payload(raw: Any) -> Any:
    """Parse JSON text and wrap scalar payloads as ``{"data": value}``."""
    value = raw
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            pass  # not JSON, e.g. SRT subtitles
    if isinstance(value, (dict, list)):
        return value
    return {"data": value}


def normalize_success(raw: Any, item_index: int = 0) -> Ok:
    return Ok(json=normalize_payload(raw), item_index=item_index)


def extract_error(payload: Any) -> Tuple[Optional[str], Dict[str, Any]]:
    """Return ``(message, details)`` from an AssemblyAI error payload.

    Checked in order: a string ``error``, an object ``error.message``, a string
    ``message``. The message is None when none of them is present.
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError:
            return None, {}
    if not isinstance(payload, dict):
        return None, {}

    error = payload.get("error")
    if isinstance(error, str):
        return error, dict(payload)
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"], dict(error)
    if isinstance(payload.get("message"), str):
        return payload["message"], dict(payload)
    return None, dict(payload)


def extract_error_message(payload: Any) -> str:
    message, _ = extract_error(payload)
    return message or GENERIC_ERROR_MESSAGE


def normalize_error(exc: BaseException, item_index: int = 0) -> Err:
    if isinstance(exc, AssemblyFlowError):
        return Err(
            message=exc.message or GENERIC_ERROR_MESSAGE,
            details=dict(exc.details),
            item_index=item_index,
        )
    return Err(message=str(exc) or GENERIC_ERROR_MESSAGE, item_index=item_index)
