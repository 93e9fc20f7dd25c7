# ABOUTME: HTTP transport executing request descriptors with requests.
# ABOUTME: Converts non-2xx responses and connection failures into RemoteApiError.

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from assemblyFlow.exceptions import RemoteApiError
from assemblyFlow.normalizer import extract_error
from assemblyFlow.request import HttpRequestDescriptor


class HttpTransport:
    """Sends one descriptor per call; no retries."""

    def __init__(self, *, timeout: float = 60.0, session: Optional[requests.Session] = None) -> None:
        self._timeout = timeout
        self._session = session or requests.Session()

    def send(self, descriptor: HttpRequestDescriptor) -> Any:
        kwargs = {
            "headers": descriptor.headers,
            "params": descriptor.query or None,
            "timeout": self._timeout,
        }
        if descriptor.has_json_body:
            kwargs["json"] = descriptor.body
        elif descriptor.body is not None:
            kwargs["data"] = descriptor.body

        logging.debug("%s %s", descriptor.method, descriptor.url)
        try:
            response = self._session.request(descriptor.method, descriptor.url, **kwargs)
        except requests.RequestException as exc:
            logging.error("Failed to reach AssemblyAI at %s: %s", descriptor.url, exc)
            raise RemoteApiError(f"Failed to reach AssemblyAI: {exc}") from exc

        if response.status_code >= 400:
            payload = _response_payload(response)
            message, details = extract_error(payload)
            if message is None:
                message = f"Request failed with status code {response.status_code}"
            logging.error(
                "AssemblyAI request %s %s failed (%s): %s",
                descriptor.method,
                descriptor.path,
                response.status_code,
                message,
            )
            raise RemoteApiError(message, status_code=response.status_code, details=details)

        return _response_payload(response)

    def close(self) -> None:
        self._session.close()


def _response_payload(response: requests.Response) -> Any:
    if not response.content:
        return {}
    content_type = response.headers.get("Content-Type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    if content_type.startswith(("text/", "application/x-subrip")) or not content_type:
        return response.text
    return response.content
