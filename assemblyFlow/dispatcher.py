# ABOUTME: Batch dispatcher resolving each input item to its operation and sending it.
# ABOUTME: Keeps a 1:1, order-preserving mapping between input items and normalized results.

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from assemblyFlow.base_params import OperationParams
from assemblyFlow.client_config import ClientConfig
from assemblyFlow.credentials import CredentialProvider, build_credential_test_request
from assemblyFlow.exceptions import (
    AssemblyFlowError,
    ItemProcessingError,
    PollCancelled,
    RemoteApiError,
    UnsupportedOperation,
)
from assemblyFlow.normalizer import NormalizedResult, normalize_error, normalize_success
from assemblyFlow.operation_registry import build_dispatch_table, resolve_key
from assemblyFlow.polling import TranscriptPoller
from assemblyFlow.request import HttpRequestDescriptor, OperationRequest
from assemblyFlow.resource_plugin import OperationSpec
from assemblyFlow.resources.transcript.builder import build_get
from assemblyFlow.resources.transcript.settings import CreateTranscriptParams, TranscriptIdParams
from assemblyFlow.transport import HttpTransport

_ITEM_ERRORS = (AssemblyFlowError, ValueError, TypeError)


class Dispatcher:
    """Runs batches of AssemblyAI operations for a host."""

    def __init__(
        self,
        credentials: CredentialProvider,
        config: Optional[ClientConfig] = None,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        self._credentials = credentials
        self._config = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport = transport or HttpTransport(timeout=self._config.timeout)
        self._table = build_dispatch_table()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        """Close the HTTP transport if this dispatcher created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "Dispatcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Batch entry points
    # ------------------------------------------------------------------

    def execute(
        self,
        requests: Sequence[OperationRequest],
        *,
        continue_on_fail: bool = False,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[NormalizedResult]:
        """Process items in order and return one result per item.

        Raises:
            ItemProcessingError: an item failed and continue_on_fail is off.
            PollCancelled: the host cancelled while waiting for a transcript.
        """
        results: List[NormalizedResult] = []
        for index, request in enumerate(requests):
            try:
                payload = self.process_item(request, index=index, cancel_event=cancel_event)
            except PollCancelled:
                raise
            except _ITEM_ERRORS as exc:
                error = normalize_error(exc, index)
                if not continue_on_fail:
                    raise ItemProcessingError(index, error.message, error.details) from exc
                logging.warning("Item %d failed, continuing: %s", index, error.message)
                results.append(error)
                continue
            results.append(normalize_success(payload, index))
        return results

    def run(
        self,
        resource: str,
        operation: str,
        params_list: Iterable[Mapping[str, Any]],
        *,
        binaries: Optional[Sequence[Mapping[str, Any]]] = None,
        continue_on_fail: bool = False,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[NormalizedResult]:
        """Run one resource/operation over a batch of parameter mappings."""
        params_list = list(params_list)
        binaries = list(binaries or [{} for _ in params_list])
        if len(binaries) != len(params_list):
            raise ValueError("binaries must have one entry per parameter mapping")
        requests = [
            OperationRequest(resource, operation, params, binary)
            for params, binary in zip(params_list, binaries)
        ]
        return self.execute(requests, continue_on_fail=continue_on_fail, cancel_event=cancel_event)

    # ------------------------------------------------------------------
    # Single item
    # ------------------------------------------------------------------

    def resolve(self, request: OperationRequest) -> OperationSpec:
        key = resolve_key(request.resource, request.operation)
        spec = self._table.get(key) if key else None
        if spec is None:
            raise UnsupportedOperation(request.resource, request.operation)
        return spec

    def build_request(
        self, request: OperationRequest
    ) -> Tuple[OperationSpec, OperationParams, HttpRequestDescriptor]:
        """Validate parameters and build the unauthenticated descriptor."""
        spec = self.resolve(request)
        params = spec.params_class.from_mapping(request.raw_params)
        for warning in params.warnings():
            logging.warning("%s/%s: %s", request.resource, request.operation, warning)
        descriptor = spec.build(params, self._config, request.binary)
        return spec, params, descriptor

    def process_item(
        self,
        request: OperationRequest,
        *,
        index: int = 0,
        cancel_event: Optional[threading.Event] = None,
    ) -> Any:
        """Build and send one item's request and return the raw response payload."""
        _, params, descriptor = self.build_request(request)
        logging.info("Item %d: %s %s", index, descriptor.method, descriptor.path)
        response = self._send(descriptor)

        if isinstance(params, CreateTranscriptParams) and params.wait_for_completion:
            response = self.wait_for_transcript(_transcript_id(response), cancel_event=cancel_event)
        return response

    def wait_for_transcript(
        self,
        transcript_id: str,
        *,
        cancel_event: Optional[threading.Event] = None,
    ) -> Any:
        """Poll a transcript until it is completed or failed."""
        descriptor = build_get(TranscriptIdParams(transcript_id=transcript_id), self._config, {})
        poller = TranscriptPoller(
            transcript_id,
            lambda: self._send(descriptor),
            interval=self._config.poll_interval,
            max_attempts=self._config.poll_max_attempts,
            cancel_event=cancel_event,
        )
        return poller.run()

    def check_credentials(self) -> Tuple[bool, str]:
        """Return (valid, reason) after sending a cheap authenticated request."""
        try:
            self._send(build_credential_test_request(self._config))
        except RemoteApiError as exc:
            return False, exc.message
        return True, ""

    def _send(self, descriptor: HttpRequestDescriptor) -> Any:
        headers = self._credentials.auth_headers()
        headers["User-Agent"] = self._config.user_agent
        return self._transport.send(descriptor.with_headers(**headers))


def _transcript_id(response: Any) -> str:
    transcript_id = response.get("id") if isinstance(response, dict) else None
    if not transcript_id:
        raise RemoteApiError("Transcript creation response did not include an id", details={"response": response})
    return transcript_id
