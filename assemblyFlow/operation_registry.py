# ABOUTME: Registry helpers over every (resource, operation) pair of the loaded plugins.
# ABOUTME: Provides the dispatch table plus lookups for parameter schemas and display names.

from __future__ import annotations

from typing import Dict, Optional, Tuple, Type

from assemblyFlow.base_params import OperationParams
from assemblyFlow.request import Resource
from assemblyFlow.resource_plugin import (
    OperationSpec,
    get_plugin,
    iter_plugins,
    normalize_resource_name,
)

# Ensure built-in resources are registered on import
from assemblyFlow import resources as _builtin_resources  # noqa: F401

DispatchKey = Tuple[Resource, str]


def build_dispatch_table() -> Dict[DispatchKey, OperationSpec]:
    """Return a mapping of (Resource, operation) to its operation spec."""
    table: Dict[DispatchKey, OperationSpec] = {}
    for plugin in iter_plugins():
        resource = Resource(plugin.name)
        for name, spec in plugin.get_operations().items():
            table[(resource, name)] = spec
    return table


def resolve_key(resource: str, operation: str) -> Optional[DispatchKey]:
    """Resolve a resource name (or alias) and operation into a dispatch key.

    Returns:
        The key, or None if the resource is unknown
    """
    try:
        return Resource(normalize_resource_name(resource)), operation
    except ValueError:
        return None


def get_operation_spec(resource: str, operation: str) -> Optional[OperationSpec]:
    """Get the spec for an operation, or None if not found."""
    try:
        plugin = get_plugin(resource)
    except ValueError:
        return None
    return plugin.get_operations().get(operation)


def get_params_class(resource: str, operation: str) -> Optional[Type[OperationParams]]:
    """Get the parameter dataclass for an operation.

    Args:
        resource: Resource identifier (e.g., "transcript")
        operation: Operation identifier (e.g., "create")

    Returns:
        Parameter dataclass type, or None if not found
    """
    spec = get_operation_spec(resource, operation)
    return spec.params_class if spec else None


def get_all_operation_ids() -> list[str]:
    """Get list of all registered "resource/operation" identifiers.

    Returns:
        List of operation IDs
    """
    return [f"{resource.value}/{operation}" for resource, operation in build_dispatch_table()]


def get_operation_display_name(operation_id: str) -> str:
    """Get the display name for a "resource/operation" identifier.

    Args:
        operation_id: Operation identifier

    Returns:
        Human-readable display name, or the identifier itself if unknown
    """
    resource, _, operation = operation_id.partition("/")
    spec = get_operation_spec(resource, operation)
    if spec is None:
        return operation_id
    return f"{get_plugin(resource).display_name}: {spec.display_name}"


def get_operation_choices() -> list[tuple[str, str]]:
    """Get list of (operation_id, display_name) tuples for dropdown widgets.

    Returns:
        List of tuples: [(operation_id, display_name), ...]
    """
    return [(op_id, get_operation_display_name(op_id)) for op_id in get_all_operation_ids()]
