# Centralized test helpers and fake objects
from __future__ import annotations

from typing import Any, List, Optional

from assemblyFlow.client_config import ClientConfig
from assemblyFlow.credentials import StaticCredentials
from assemblyFlow.dispatcher import Dispatcher
from assemblyFlow.request import HttpRequestDescriptor

TEST_API_KEY = "test-key"


class FakeTransport:
    """Records sent descriptors and replays queued responses or exceptions."""

    def __init__(self, responses: Optional[List[Any]] = None) -> None:
        self.responses: List[Any] = list(responses or [])
        self.sent: List[HttpRequestDescriptor] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def send(self, descriptor: HttpRequestDescriptor) -> Any:
        self.sent.append(descriptor)
        if not self.responses:
            return {}
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    def close(self) -> None:
        pass


def make_dispatcher(*responses: Any, **config_overrides: Any):
    """Return (dispatcher, transport) wired to a FakeTransport with no polling delay."""
    config_values = {"poll_interval": 0}
    config_values.update(config_overrides)
    transport = FakeTransport(list(responses))
    dispatcher = Dispatcher(
        StaticCredentials(TEST_API_KEY),
        config=ClientConfig(**config_values),
        transport=transport,
    )
    return dispatcher, transport
