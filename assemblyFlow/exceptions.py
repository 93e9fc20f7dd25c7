"""Typed exceptions for assemblyflow.

Hierarchy:
    AssemblyFlowError (base)
    +-- ValidationError (bad or missing parameter, raised before dispatch)
    |   +-- InvalidToolsJson
    +-- MissingBinaryData
    +-- UnsupportedOperation
    +-- RemoteApiError (non-2xx response or transport failure)
    +-- PollTimeout
    +-- PollCancelled
    +-- ItemProcessingError (batch aborted on an item)
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AssemblyFlowError(Exception):
    """Base for all assemblyflow exceptions."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        super().__init__(message)


class ValidationError(AssemblyFlowError, ValueError):
    """User supplied parameters are malformed or incomplete."""


class InvalidToolsJson(ValidationError):
    """The LLM gateway tools field is not valid JSON."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("Invalid JSON in Tools field")


class MissingBinaryData(AssemblyFlowError):
    """No binary payload resolved to bytes for an upload."""

    def __init__(self, property_name: str) -> None:
        self.property_name = property_name
        super().__init__(
            f"No binary data found in property '{property_name}'. "
            "Read the file into the item before uploading it."
        )


class UnsupportedOperation(AssemblyFlowError):
    """No builder is registered for a resource/operation pair."""

    def __init__(self, resource: str, operation: str) -> None:
        self.resource = resource
        self.operation = operation
        super().__init__(f"The operation '{operation}' is not supported for resource '{resource}'")


class RemoteApiError(AssemblyFlowError):
    """The AssemblyAI API answered with an error, or could not be reached.

    status_code is 0 when no response was received.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 0,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, details)


class PollTimeout(AssemblyFlowError):
    """A transcript did not reach a terminal status within the attempt ceiling."""

    def __init__(self, transcript_id: str, attempts: int) -> None:
        self.transcript_id = transcript_id
        self.attempts = attempts
        super().__init__(
            f"Transcript '{transcript_id}' did not complete after {attempts} polling attempts",
            {"transcript_id": transcript_id, "attempts": attempts},
        )


class PollCancelled(AssemblyFlowError):
    """Polling was cancelled by the host."""

    def __init__(self, transcript_id: str) -> None:
        self.transcript_id = transcript_id
        super().__init__(f"Polling for transcript '{transcript_id}' was cancelled")


class ItemProcessingError(AssemblyFlowError):
    """A batch was aborted because one item failed and halting is enabled."""

    def __init__(
        self,
        item_index: int,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.item_index = item_index
        super().__init__(message, details)

    def __str__(self) -> str:
        return f"Item {self.item_index}: {self.message}"
