# ABOUTME: Connection settings shared by every request of a dispatcher.
# ABOUTME: Holds the API base URLs, timeout, polling cadence and client tag.

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlparse

from assemblyFlow import USER_AGENT

DEFAULT_API_BASE_URL = "https://api.assemblyai.com"
DEFAULT_LLM_GATEWAY_URL = "https://llm-gateway.assemblyai.com"


@dataclass
class ClientConfig:
    """Settings for talking to the AssemblyAI API."""

    api_base_url: str = field(
        default=DEFAULT_API_BASE_URL,
        metadata={"label": "API base URL", "widget": "text"},
    )
    llm_gateway_url: str = field(
        default=DEFAULT_LLM_GATEWAY_URL,
        metadata={"label": "LLM gateway base URL", "widget": "text"},
    )
    timeout: float = field(
        default=60.0,
        metadata={
            "label": "Request timeout",
            "widget": "number",
            "tooltip": "Seconds to wait for each HTTP response",
        },
    )
    poll_interval: float = field(
        default=3.0,
        metadata={
            "label": "Polling interval",
            "widget": "number",
            "tooltip": "Seconds between transcript status checks",
        },
    )
    poll_max_attempts: int = field(
        default=600,
        metadata={
            "label": "Maximum polling attempts",
            "widget": "number",
            "tooltip": "Status checks before giving up (600 x 3s = 30 minutes)",
        },
    )
    user_agent: str = field(
        default=USER_AGENT,
        metadata={"label": "User agent", "widget": "text", "readonly": True},
    )

    def __post_init__(self):
        """Validate URLs and positive timings."""
        for name in ("api_base_url", "llm_gateway_url"):
            parsed = urlparse(getattr(self, name))
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ValueError(f"Invalid {name}: {getattr(self, name)}")
        self.api_base_url = self.api_base_url.rstrip("/")
        self.llm_gateway_url = self.llm_gateway_url.rstrip("/")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
        if self.poll_interval < 0:
            raise ValueError(f"Polling interval must not be negative, got {self.poll_interval}")
        if self.poll_max_attempts < 1:
            raise ValueError(f"Polling attempts must be at least 1, got {self.poll_max_attempts}")

    def api_url(self, path: str) -> str:
        return f"{self.api_base_url}{path}"

    def llm_gateway(self, path: str) -> str:
        return f"{self.llm_gateway_url}{path}"
