"""Request-scoped value objects shared by builders, dispatcher and transport."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse


class Resource(str, Enum):
    FILE = "file"
    TRANSCRIPT = "transcript"
    LEMUR = "lemur"
    LLM_GATEWAY = "llm_gateway"


@dataclass(frozen=True)
class OperationRequest:
    """One input item: which operation to run and with which raw values."""

    resource: str
    operation: str
    raw_params: Mapping[str, Any] = field(default_factory=dict)
    binary: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpRequestDescriptor:
    """A fully built HTTP request, consumed once by the transport.

    ``body`` is None, a JSON value (dict or list), bytes, or a lazy iterable of
    byte chunks for streamed uploads.
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    query: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Any] = None

    @property
    def path(self) -> str:
        return urlparse(self.url).path

    @property
    def has_json_body(self) -> bool:
        return isinstance(self.body, (dict, list))

    def with_headers(self, **headers: str) -> "HttpRequestDescriptor":
        merged = dict(self.headers)
        merged.update(headers)
        return replace(self, headers=merged)
