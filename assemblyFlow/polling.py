"""Wait for a transcript to reach a terminal status."""

from __future__ import annotations

import logging
import threading
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional

from assemblyFlow.exceptions import PollCancelled, PollTimeout

TERMINAL_STATUSES = ("completed", "error")
DEFAULT_INTERVAL = 3.0
DEFAULT_MAX_ATTEMPTS = 600


class PollState(Enum):
    POLLING = auto()
    COMPLETED = auto()
    FAILED = auto()
    TIMED_OUT = auto()
    CANCELLED = auto()


STATE_MAP = {
    "completed": PollState.COMPLETED,
    "error": PollState.FAILED,
}

StateListener = Callable[[PollState], None]


class TranscriptPoller:
    """Bounded polling loop over a transcript status endpoint.

    ``fetch`` performs one GET of the transcript and returns its payload. Each
    iteration blocks on ``cancel_event`` for the full interval, so setting the
    event interrupts the wait and ends polling.
    """

    def __init__(
        self,
        transcript_id: str,
        fetch: Callable[[], Any],
        *,
        interval: float = DEFAULT_INTERVAL,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self._transcript_id = transcript_id
        self._fetch = fetch
        self._interval = interval
        self._max_attempts = max_attempts
        self._cancel_event = cancel_event or threading.Event()
        self._state = PollState.POLLING
        self._attempts = 0
        self._state_listeners: List[StateListener] = []

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def attempts(self) -> int:
        return self._attempts

    def add_state_listener(self, callback: StateListener) -> None:
        self._state_listeners.append(callback)

    def cancel(self) -> None:
        self._cancel_event.set()

    def run(self) -> Dict[str, Any]:
        """Poll until completed or error and return the final payload.

        Raises:
            PollTimeout: no terminal status after ``max_attempts`` requests.
            PollCancelled: the cancel event was set.
        """
        self._transition(PollState.POLLING)
        self._attempts = 0

        while True:
            if self._cancel_event.is_set():
                self._transition(PollState.CANCELLED)
                raise PollCancelled(self._transcript_id)

            payload = self._fetch()
            self._attempts += 1
            status = payload.get("status") if isinstance(payload, dict) else None
            logging.debug(
                "Transcript %s status %s (attempt %d/%d)",
                self._transcript_id,
                status,
                self._attempts,
                self._max_attempts,
            )

            if status in TERMINAL_STATUSES:
                self._transition(STATE_MAP[status])
                return payload

            if self._attempts >= self._max_attempts:
                self._transition(PollState.TIMED_OUT)
                raise PollTimeout(self._transcript_id, self._attempts)

            if self._cancel_event.wait(self._interval):
                self._transition(PollState.CANCELLED)
                raise PollCancelled(self._transcript_id)

    def _transition(self, state: PollState) -> None:
        if state == self._state and state != PollState.POLLING:
            return
        self._state = state
        if state == PollState.TIMED_OUT:
            logging.error("Transcript %s timed out after %d attempts", self._transcript_id, self._attempts)
        elif state != PollState.POLLING:
            logging.info("Transcript %s polling finished: %s", self._transcript_id, state.name.lower())
        for listener in list(self._state_listeners):
            listener(state)
