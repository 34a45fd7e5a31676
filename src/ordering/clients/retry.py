"""Bounded retry for HTTP collaborator calls.

Only transport failures and HTTP 503 are retried. Every other response is
handed back to the adapter untouched. When the attempts run out the call
fails with a single CollaboratorUnavailable; it never returns None.
"""

import time

import httpx
import structlog

from shared.errors import CollaboratorUnavailable

logger = structlog.get_logger(__name__)

RETRYABLE_STATUS_CODES = frozenset({503})


class RetryPolicy:
    def __init__(self, attempts: int = 3, delay: float = 0.5, backoff: float = 2.0, sleep=time.sleep) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self.attempts = attempts
        self.delay = delay
        self.backoff = backoff
        self._sleep = sleep

    def delays(self) -> list[float]:
        """Pause before each retry: 0.5s, then 1.0s with the defaults."""
        return [self.delay * self.backoff**n for n in range(self.attempts - 1)]

    def call(self, collaborator: str, send) -> httpx.Response:
        """Run `send()` until it yields a non-retryable response."""
        delays = self.delays()
        reason = ""
        for attempt in range(1, self.attempts + 1):
            try:
                response = send()
            except httpx.TransportError as exc:
                reason = f"{type(exc).__name__}: {exc}"
            else:
                if response.status_code not in RETRYABLE_STATUS_CODES:
                    return response
                reason = f"HTTP {response.status_code}"

            if attempt < self.attempts:
                logger.warning(
                    "Collaborator call failed, retrying",
                    collaborator=collaborator,
                    attempt=attempt,
                    reason=reason,
                )
                self._sleep(delays[attempt - 1])

        logger.error(
            "Collaborator unavailable",
            collaborator=collaborator,
            attempts=self.attempts,
            reason=reason,
        )
        raise CollaboratorUnavailable(collaborator, reason, attempts=self.attempts)
