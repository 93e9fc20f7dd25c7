"""Credential providers supplying the AssemblyAI API key."""

from __future__ import annotations

from abc import ABC, abstractmethod

from assemblyFlow.client_config import ClientConfig
from assemblyFlow.request import HttpRequestDescriptor


class CredentialProvider(ABC):
    """Source of the API key; storage is owned by the host."""

    @abstractmethod
    def get_api_key(self) -> str:
        """Return the raw AssemblyAI API key."""

    def auth_headers(self) -> dict:
        # AssemblyAI expects the raw key, not a Bearer token.
        return {"Authorization": self.get_api_key()}


class StaticCredentials(CredentialProvider):
    """Provider wrapping a key already known to the caller."""

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    def get_api_key(self) -> str:
        return self._api_key

    def __repr__(self) -> str:
        return "StaticCredentials(api_key='***')"


def build_credential_test_request(config: ClientConfig) -> HttpRequestDescriptor:
    """Return the cheap request used to check that a key is accepted."""
    return HttpRequestDescriptor(
        method="GET",
        url=config.api_url("/v2/transcript"),
        query={"limit": 1},
    )
