from __future__ import annotations

from dataclasses import dataclass
from typing import Dict
from unittest.mock import MagicMock

import pytest

from assemblyFlow import resource_plugin
from assemblyFlow.base_params import OperationParams
from assemblyFlow.client_config import ClientConfig
from assemblyFlow.resource_plugin import (
    OperationSpec,
    ResourcePlugin,
    get_plugin,
    list_plugin_names,
    register_plugin,
    register_plugin_alias,
)


@dataclass
class EmptyParams(OperationParams):
    pass


class DummyPlugin(ResourcePlugin):
    @property
    def name(self) -> str:
        return "dummy"

    def get_operations(self) -> Dict[str, OperationSpec]:
        return {"ping": OperationSpec("ping", "Ping", EmptyParams, MagicMock())}


@pytest.fixture
def isolated_registry(monkeypatch):
    monkeypatch.setattr(resource_plugin, "_PLUGINS", dict(resource_plugin._PLUGINS))
    monkeypatch.setattr(resource_plugin, "_ALIASES", dict(resource_plugin._ALIASES))


def test_builtin_plugins_registered():
    import assemblyFlow.resources  # noqa: F401

    assert list(list_plugin_names())[:4] == ["file", "transcript", "lemur", "llm_gateway"]
    assert get_plugin("LeMUR").name == "lemur"


def test_register_and_alias(isolated_registry):
    plugin = DummyPlugin()
    register_plugin(plugin)
    register_plugin_alias("dummy-alias", "dummy")

    assert get_plugin("dummy") is plugin
    assert get_plugin("dummy-alias") is plugin
    assert plugin.display_name == "dummy"


def test_register_duplicate_raises(isolated_registry):
    register_plugin(DummyPlugin())
    with pytest.raises(ValueError, match="already registered"):
        register_plugin(DummyPlugin())


def test_alias_to_unknown_plugin_raises(isolated_registry):
    with pytest.raises(ValueError, match="unknown plugin"):
        register_plugin_alias("nope", "missing")


def test_get_unknown_plugin_raises():
    with pytest.raises(ValueError, match="Unsupported resource"):
        get_plugin("audio")


def test_get_operation():
    plugin = DummyPlugin()
    assert plugin.get_operation("ping").display_name == "Ping"
    with pytest.raises(ValueError, match="not supported"):
        plugin.get_operation("pong")


def test_operation_spec_build_passes_empty_binary():
    builder = MagicMock(return_value="descriptor")
    spec = OperationSpec("ping", "Ping", EmptyParams, builder)
    params = EmptyParams()
    config = ClientConfig()

    assert spec.build(params, config) == "descriptor"
    builder.assert_called_once_with(params, config, {})
