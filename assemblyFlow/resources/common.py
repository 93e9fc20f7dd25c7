# ABOUTME: Transforms shared by the resource request builders.
# ABOUTME: Comma splitting, collection flattening, option unwrapping and speaker identification.

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from assemblyFlow.exceptions import ValidationError

KNOWN_VALUES_REQUIRED = "Known Speaker Values are required when Speaker Type is role"


def split_csv(value: str) -> List[str]:
    """Split a comma-separated string and trim each entry.

    Empty entries are kept; the API ignores them.
    """
    return [part.strip() for part in value.split(",")]


def has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    """Return value as a mapping, treating None as empty.

    Raises:
        ValidationError: value is set but is not a mapping.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError(f"Parameter '{label}' must be a mapping, got {type(value).__name__}")
    return value


def collection_entries(
    collection: Optional[Mapping[str, Any]],
    group: str,
    label: Optional[str] = None,
) -> List[Mapping[str, Any]]:
    """Return the entries of a fixed collection, e.g. ``{"term": [{...}, ...]}``.

    Raises:
        ValidationError: the collection or one of its entries is not a mapping.
    """
    label = label or group
    entries = require_mapping(collection, label).get(group) or []
    if isinstance(entries, Mapping):
        entries = [entries]
    if not isinstance(entries, (list, tuple)):
        raise ValidationError(f"Parameter '{label}' must be a list of entries, got {type(entries).__name__}")
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ValidationError(f"Parameter '{label}' entries must be mappings, got {type(entry).__name__}")
    return list(entries)


def flatten_collection(
    collection: Optional[Mapping[str, Any]],
    group: str,
    key: str,
    label: Optional[str] = None,
) -> List[Any]:
    """Flatten a list of single-field records into a plain list of values."""
    return [entry.get(key) for entry in collection_entries(collection, group, label)]


def unwrap_options(
    wrapper: Optional[Mapping[str, Any]],
    keys: Iterable[str],
    *,
    group: str = "options",
    label: Optional[str] = None,
) -> Dict[str, Any]:
    """Copy the subfields set inside a one-level option wrapper.

    Returns an empty dict when nothing was set, so callers can skip the key.
    """
    label = label or group
    options = require_mapping(require_mapping(wrapper, label).get(group), label)
    return {key: options[key] for key in keys if is_set(options.get(key))}


def is_set(value: Any) -> bool:
    """Return True for values the user actually filled in."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def speaker_identification(speaker_type: str, known_values: Optional[str]) -> Dict[str, Any]:
    """Build a speaker identification request.

    Raises:
        ValidationError: speaker type is "role" and no known values are given.
    """
    request: Dict[str, Any] = {"speaker_type": speaker_type}
    if has_text(known_values):
        request["known_values"] = split_csv(known_values)
    elif speaker_type == "role":
        raise ValidationError(KNOWN_VALUES_REQUIRED)
    return request
