# ABOUTME: Validation functions for operation parameter fields.
# ABOUTME: Each validator returns None if valid, or a warning message string.

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlparse


def validate_url(value: Any) -> Optional[str]:
    """Validate that value looks like an http(s) URL.

    Args:
        value: URL string (e.g., "https://example.com/audio.mp3")

    Returns:
        None if valid, warning message if the URL has no http(s) scheme or host
    """
    if not isinstance(value, str) or not value.strip():
        return None  # Empty is valid

    parsed = urlparse(value.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return f"'{value}' is not an http(s) URL"

    return None


def validate_comma_list(value: Any) -> Optional[str]:
    """Validate that a comma-separated list has no empty entries.

    Args:
        value: Comma-separated string (e.g., "en, es, fr")

    Returns:
        None if valid, warning message if an entry is empty
    """
    if not isinstance(value, str) or not value.strip():
        return None  # Empty is valid

    if any(not part.strip() for part in value.split(",")):
        return f"'{value}' contains an empty entry"

    return None


def validate_json(value: Any) -> Optional[str]:
    """Validate that value is a JSON document.

    Args:
        value: JSON text

    Returns:
        None if valid, warning message with the parser error otherwise
    """
    if not isinstance(value, str) or not value.strip():
        return None  # Empty is valid

    try:
        json.loads(value)
    except ValueError as exc:
        return f"Invalid JSON: {exc}"

    return None


def validate_file_exists(value: Any) -> Optional[str]:
    """Validate that file exists.

    Args:
        value: File path

    Returns:
        None if valid, warning message if file not found
    """
    if not value or not str(value).strip():
        return None  # Empty is valid

    if not Path(value).is_file():
        return f"File not found: {value}"

    return None
