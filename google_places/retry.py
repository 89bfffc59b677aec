"""
Retry policy for API statuses the caller has declared transient.

The policy only bounds attempts. It never raises on its own: once retries
are exhausted the last envelope is handed back and status checking is left
to the caller.
"""

import logging
import time
from collections.abc import Callable, Iterable

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_result,
    stop_after_attempt,
    stop_after_delay,
    wait_fixed,
)

from google_places.options import RetryOptions
from google_places.status import StatusOutcome, classify
from google_places.types import ResponseEnvelope

logger = logging.getLogger(__name__)

Sleep = Callable[[float], None]


class RetryPolicy:
    """
    Re-issue a request while its status is in the retryable set.

    Example:
        ```python
        policy = RetryPolicy(
            max_retries=2,
            retry_delay=5,
            retryable_statuses=["OVER_QUERY_LIMIT"],
        )
        envelope = policy.execute(lambda: request.get(endpoint, params))
        ```
    """

    def __init__(
        self,
        max_retries: int = 0,
        retry_delay: float = 5.0,
        retryable_statuses: Iterable[str] = (),
        timeout: float | None = None,
        sleep: Sleep = time.sleep,
    ):
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.retryable_statuses = frozenset(retryable_statuses)
        self.timeout = timeout
        self._sleep = sleep

    @classmethod
    def from_options(
        cls, options: RetryOptions, sleep: Sleep = time.sleep
    ) -> "RetryPolicy":
        """Build a policy from the ``retry_options`` of a search."""
        return cls(
            max_retries=options.max,
            retry_delay=options.delay,
            retryable_statuses=options.status,
            timeout=options.timeout,
            sleep=sleep,
        )

    def _is_retryable(self, envelope: ResponseEnvelope) -> bool:
        outcome = classify(envelope.status, self.retryable_statuses)
        return outcome is StatusOutcome.RETRYABLE

    def _log_retry(self, retry_state: RetryCallState) -> None:
        envelope = retry_state.outcome.result() if retry_state.outcome else None
        logger.warning(
            "Retrying Places API request after status %s (attempt %d/%d, delay=%ss)",
            envelope.status if envelope else "?",
            retry_state.attempt_number,
            self.max_retries + 1,
            self.retry_delay,
        )

    def execute(
        self, request_fn: Callable[[], ResponseEnvelope]
    ) -> ResponseEnvelope:
        """
        Call ``request_fn`` and retry while the status is retryable.

        Exceptions raised by ``request_fn`` are not retried here; they
        propagate on first occurrence.

        Args:
            request_fn: Zero-argument callable issuing one request

        Returns:
            The first non-retryable envelope, or the last one on exhaustion
        """
        stop = stop_after_attempt(self.max_retries + 1)
        if self.timeout is not None:
            stop = stop | stop_after_delay(self.timeout)

        retrying = Retrying(
            retry=retry_if_result(self._is_retryable),
            stop=stop,
            wait=wait_fixed(self.retry_delay),
            sleep=self._sleep,
            before_sleep=self._log_retry,
            retry_error_callback=lambda state: state.outcome.result(),
        )
        return retrying(request_fn)
