# ABOUTME: Base dataclass for per-operation parameter schemas.
# ABOUTME: Builds typed parameters from a raw host mapping and exposes field metadata for forms.

from __future__ import annotations

import dataclasses
import importlib
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar

from assemblyFlow.exceptions import ValidationError

ParamsT = TypeVar("ParamsT", bound="OperationParams")

_NUMBER_WIDGETS = ("number",)
_BOOL_WIDGETS = ("checkbox",)
_TEXT_WIDGETS = ("text",)
_COLLECTION_WIDGETS = ("collection",)


def _load_function_from_string(function_path: str) -> Callable:
    """Load a callable from a "module:function" (or "module.function") path."""
    if ":" in function_path:
        module_path, function_name = function_path.split(":", 1)
    else:
        parts = function_path.rsplit(".", 1)
        if len(parts) != 2:
            raise ValueError(f"Invalid function path: {function_path}")
        module_path, function_name = parts
    module = importlib.import_module(module_path)
    return getattr(module, function_name)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _field_default(field: dataclasses.Field) -> Any:
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
        return field.default_factory()  # type: ignore[misc]
    return None


@dataclasses.dataclass
class OperationParams:
    """Base class for the parameters of one resource/operation.

    Subclasses declare their fields with metadata describing the form field
    (label, widget, tooltip, options, required, validate, show). The ``show``
    entry maps another field name to the values for which this field applies.
    """

    @classmethod
    def input_fields(cls) -> List[dataclasses.Field]:
        return [f for f in dataclasses.fields(cls) if f.init]

    @classmethod
    def from_mapping(cls: Type[ParamsT], raw: Optional[Mapping[str, Any]]) -> ParamsT:
        """Create the parameters from a raw mapping supplied by the host.

        Raises:
            ValidationError: unknown keys, missing required values, values
                outside the declared options or of the wrong kind.
        """
        raw = dict(raw or {})
        declared = {f.name: f for f in cls.input_fields()}

        unknown = sorted(set(raw) - set(declared))
        if unknown:
            raise ValidationError(
                f"Unknown parameter(s) for {cls.__name__}: {', '.join(unknown)}"
            )

        effective = {name: raw.get(name, _field_default(f)) for name, f in declared.items()}

        for name, field in declared.items():
            if not cls.is_visible(name, effective):
                continue
            value = effective[name]
            metadata = field.metadata
            label = metadata.get("label", name)

            if metadata.get("required") and _is_blank(value):
                raise ValidationError(f"Parameter '{label}' is required")
            if value is None:
                continue

            widget = metadata.get("widget", "text")
            if widget in _BOOL_WIDGETS and not isinstance(value, bool):
                raise ValidationError(f"Parameter '{label}' must be a boolean")
            if widget in _NUMBER_WIDGETS and (
                isinstance(value, bool) or not isinstance(value, (int, float))
            ):
                raise ValidationError(f"Parameter '{label}' must be a number")
            if widget in _TEXT_WIDGETS and not isinstance(value, str):
                raise ValidationError(f"Parameter '{label}' must be a string")
            if widget in _COLLECTION_WIDGETS and not isinstance(value, Mapping):
                raise ValidationError(f"Parameter '{label}' must be a mapping")

            options = metadata.get("options")
            if options:
                values = value if isinstance(value, (list, tuple)) else [value]
                invalid = [v for v in values if v not in options]
                if invalid:
                    raise ValidationError(
                        f"Invalid value {invalid[0]!r} for parameter '{label}'. "
                        f"Expected one of: {', '.join(map(str, options))}"
                    )

        return cls(**raw)

    @classmethod
    def is_visible(cls, name: str, values: Mapping[str, Any]) -> bool:
        """Return True if the field applies given the other field values."""
        field = next((f for f in cls.input_fields() if f.name == name), None)
        if field is None:
            return False
        show = field.metadata.get("show")
        if not show:
            return True
        return all(values.get(key) in allowed for key, allowed in show.items())

    @classmethod
    def describe(cls) -> List[Dict[str, Any]]:
        """Return a description of every input field for form rendering."""
        description = []
        for field in cls.input_fields():
            metadata = field.metadata
            entry: Dict[str, Any] = {
                "name": field.name,
                "label": metadata.get("label", field.name),
                "widget": metadata.get("widget", "text"),
                "default": _field_default(field),
                "required": bool(metadata.get("required", False)),
            }
            for key in ("options", "tooltip", "show"):
                if key in metadata:
                    entry[key] = metadata[key]
            description.append(entry)
        return description

    def warnings(self) -> List[str]:
        """Run the non-fatal field validators and return their messages."""
        messages = []
        values = self.to_dict()
        for field in self.input_fields():
            validator_path = field.metadata.get("validate")
            if not validator_path or not self.is_visible(field.name, values):
                continue
            try:
                validator = _load_function_from_string(validator_path)
            except (ImportError, AttributeError, ValueError) as exc:
                logging.error("Cannot load validator %s: %s", validator_path, exc)
                continue
            message = validator(getattr(self, field.name))
            if message:
                messages.append(f"{field.metadata.get('label', field.name)}: {message}")
        return messages

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in self.input_fields()}
