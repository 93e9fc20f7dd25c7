# ABOUTME: Tests for OperationParams construction from raw host mappings.
# ABOUTME: Verifies required fields, show conditions, type checks and form descriptions.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from assemblyFlow.base_params import OperationParams
from assemblyFlow.exceptions import ValidationError


@dataclass
class SampleParams(OperationParams):
    name: str = field(default="", metadata={"label": "Name", "widget": "text", "required": True})
    mode: str = field(default="a", metadata={"label": "Mode", "widget": "dropdown", "options": ["a", "b"]})
    detail: str = field(
        default="",
        metadata={"label": "Detail", "widget": "text", "required": True, "show": {"mode": ["b"]}},
    )
    count: Optional[int] = field(default=None, metadata={"label": "Count", "widget": "number"})
    enabled: bool = field(default=False, metadata={"label": "Enabled", "widget": "checkbox"})
    tags: List[str] = field(default_factory=list, metadata={"label": "Tags", "widget": "multi", "options": ["x", "y"]})
    homepage: str = field(
        default="",
        metadata={"label": "Homepage", "widget": "text", "validate": "assemblyFlow.validators:validate_url"},
    )


def test_from_mapping_uses_defaults():
    params = SampleParams.from_mapping({"name": "job"})
    assert params.mode == "a"
    assert params.count is None
    assert params.tags == []


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValidationError, match="Unknown parameter"):
        SampleParams.from_mapping({"name": "job", "colour": "red"})


def test_from_mapping_required_field():
    with pytest.raises(ValidationError, match="Parameter 'Name' is required"):
        SampleParams.from_mapping({"name": "   "})


def test_hidden_required_field_is_not_checked():
    SampleParams.from_mapping({"name": "job", "mode": "a"})
    with pytest.raises(ValidationError, match="Detail"):
        SampleParams.from_mapping({"name": "job", "mode": "b"})


def test_from_mapping_type_checks():
    with pytest.raises(ValidationError, match="must be a number"):
        SampleParams.from_mapping({"name": "job", "count": "3"})
    with pytest.raises(ValidationError, match="must be a number"):
        SampleParams.from_mapping({"name": "job", "count": True})
    with pytest.raises(ValidationError, match="must be a boolean"):
        SampleParams.from_mapping({"name": "job", "enabled": 1})


def test_from_mapping_checks_options():
    with pytest.raises(ValidationError, match="Expected one of: a, b"):
        SampleParams.from_mapping({"name": "job", "mode": "c"})
    with pytest.raises(ValidationError, match="'z'"):
        SampleParams.from_mapping({"name": "job", "tags": ["x", "z"]})


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        SampleParams.from_mapping({})


def test_warnings_run_field_validators():
    params = SampleParams.from_mapping({"name": "job", "homepage": "example.com"})
    assert params.warnings() == ["Homepage: 'example.com' is not an http(s) URL"]
    assert SampleParams(name="job", homepage="https://example.com").warnings() == []


def test_describe_lists_input_fields():
    description = {entry["name"]: entry for entry in SampleParams.describe()}

    assert list(description) == ["name", "mode", "detail", "count", "enabled", "tags", "homepage"]
    assert description["name"]["required"] is True
    assert description["mode"]["options"] == ["a", "b"]
    assert description["detail"]["show"] == {"mode": ["b"]}
    assert description["tags"]["default"] == []


def test_is_visible():
    assert SampleParams.is_visible("detail", {"mode": "b"})
    assert not SampleParams.is_visible("detail", {"mode": "a"})
    assert not SampleParams.is_visible("missing", {})


def test_from_mapping_checks_text_and_collection_shapes():
    @dataclass
    class ShapeParams(OperationParams):
        title: str = field(default="", metadata={"label": "Title", "widget": "text"})
        extra: dict = field(default_factory=dict, metadata={"label": "Extra", "widget": "collection"})

    with pytest.raises(ValidationError, match="Parameter 'Title' must be a string"):
        ShapeParams.from_mapping({"title": ["a", "b"]})
    with pytest.raises(ValidationError, match="Parameter 'Extra' must be a mapping"):
        ShapeParams.from_mapping({"extra": "en"})
    assert ShapeParams.from_mapping({"title": "a", "extra": {"k": 1}}).extra == {"k": 1}
