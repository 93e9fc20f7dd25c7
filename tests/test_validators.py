# ABOUTME: Tests for validation functions used in parameter fields.
# ABOUTME: Each test verifies validators return None for valid input or warning messages for invalid input.

from __future__ import annotations

import os
import tempfile


def test_validate_url_with_valid_urls():
    """Test validate_url returns None for http(s) URLs."""
    from assemblyFlow.validators import validate_url

    assert validate_url("https://example.com/audio.mp3") is None
    assert validate_url("http://localhost:8080/a.wav") is None


def test_validate_url_with_invalid_urls():
    """Test validate_url returns warning for URLs without scheme or host."""
    from assemblyFlow.validators import validate_url

    result = validate_url("example.com/audio.mp3")
    assert result is not None
    assert "not an http(s) URL" in result

    assert validate_url("ftp://example.com/a.mp3") is not None
    assert validate_url("https://") is not None


def test_validate_url_with_empty_values():
    """Test validate_url returns None for empty or unset values."""
    from assemblyFlow.validators import validate_url

    assert validate_url("") is None
    assert validate_url("   ") is None
    assert validate_url(None) is None


def test_validate_comma_list():
    """Test validate_comma_list flags empty entries only."""
    from assemblyFlow.validators import validate_comma_list

    assert validate_comma_list("en, es, fr") is None
    assert validate_comma_list("") is None
    assert validate_comma_list(None) is None

    result = validate_comma_list("en,,es")
    assert result is not None
    assert "empty entry" in result


def test_validate_json():
    """Test validate_json returns the parser error for malformed JSON."""
    from assemblyFlow.validators import validate_json

    assert validate_json('[{"type": "function"}]') is None
    assert validate_json("") is None

    result = validate_json("[{")
    assert result is not None
    assert result.startswith("Invalid JSON")


def test_validate_file_exists_with_existing_file():
    """Test validate_file_exists returns None for existing files."""
    from assemblyFlow.validators import validate_file_exists

    # Create a temporary file
    with tempfile.NamedTemporaryFile(delete=False) as tmp:
        tmp_path = tmp.name

    try:
        result = validate_file_exists(tmp_path)
        assert result is None
    finally:
        os.unlink(tmp_path)


def test_validate_file_exists_with_nonexistent_file():
    """Test validate_file_exists returns warning for missing files."""
    from assemblyFlow.validators import validate_file_exists

    result = validate_file_exists("/nonexistent/path/to/audio.wav")
    assert result is not None
    assert "File not found" in result


def test_validate_file_exists_with_empty_string():
    """Test validate_file_exists returns None for empty string."""
    from assemblyFlow.validators import validate_file_exists

    assert validate_file_exists("") is None
    assert validate_file_exists("   ") is None
