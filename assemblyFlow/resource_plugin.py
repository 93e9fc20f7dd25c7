"""Plugin interface and registry for AssemblyAI resources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Type

from assemblyFlow.base_params import OperationParams
from assemblyFlow.client_config import ClientConfig
from assemblyFlow.request import HttpRequestDescriptor

Builder = Callable[[Any, ClientConfig, Mapping[str, Any]], HttpRequestDescriptor]


@dataclass(frozen=True)
class OperationSpec:
    """One operation of a resource: its parameter schema and request builder."""

    name: str
    display_name: str
    params_class: Type[OperationParams]
    builder: Builder
    description: str = ""

    def build(
        self,
        params: OperationParams,
        config: ClientConfig,
        binary: Mapping[str, Any] = None,
    ) -> HttpRequestDescriptor:
        return self.builder(params, config, binary or {})


class ResourcePlugin(ABC):
    """Abstract base class for resource plugins."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique identifier for the resource."""

    @property
    def display_name(self) -> str:
        """Return human-friendly resource name for UI contexts."""
        return self.name

    @abstractmethod
    def get_operations(self) -> Dict[str, OperationSpec]:
        """Return the operations of this resource keyed by operation name."""

    def get_operation(self, operation: str) -> OperationSpec:
        try:
            return self.get_operations()[operation]
        except KeyError as exc:
            raise ValueError(
                f"The operation '{operation}' is not supported for resource '{self.name}'"
            ) from exc


_PLUGINS: Dict[str, ResourcePlugin] = {}
_ALIASES: Dict[str, str] = {}


def normalize_resource_name(name: str) -> str:
    """Map aliases to their canonical resource name."""
    return _ALIASES.get(name, name)


def register_plugin(plugin: ResourcePlugin) -> None:
    """Register a new resource plugin."""
    canonical_name = normalize_resource_name(plugin.name)
    if canonical_name in _PLUGINS:
        raise ValueError(f"Resource plugin '{plugin.name}' already registered")
    _PLUGINS[canonical_name] = plugin


def register_plugin_alias(alias: str, target: str) -> None:
    """Register an alias that maps to an existing resource plugin."""
    target_canonical = normalize_resource_name(target)
    if target_canonical not in _PLUGINS:
        raise ValueError(f"Cannot create alias '{alias}' for unknown plugin '{target}'")
    _ALIASES[alias] = target_canonical


def get_plugin(name: str) -> ResourcePlugin:
    """Retrieve plugin by name, resolving aliases."""
    canonical_name = normalize_resource_name(name)
    try:
        return _PLUGINS[canonical_name]
    except KeyError as exc:
        raise ValueError(f"Unsupported resource: {name}") from exc


def iter_plugins() -> Iterable[ResourcePlugin]:
    """Iterate over registered plugins."""
    return _PLUGINS.values()


def list_plugin_names() -> Iterable[str]:
    """Return registered plugin names in registration order."""
    return _PLUGINS.keys()
