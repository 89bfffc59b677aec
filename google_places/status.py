"""
Classification of the ``status`` field returned by the Places API.

Every legacy Places endpoint wraps its payload in an envelope with a textual
status. This module maps that text to a fixed set of outcomes and turns the
fatal ones into exceptions.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from google_places.errors import (
    ApiStatusError,
    InvalidRequestError,
    NotFoundError,
    OverQueryLimitError,
    RequestDeniedError,
    UnknownError,
)
from google_places.types import ResponseEnvelope

logger = logging.getLogger(__name__)


class ResponseStatus(str, Enum):
    """Status strings documented by the Places API."""

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @classmethod
    def parse(cls, value: "str | ResponseStatus | None") -> "ResponseStatus":
        """Parse a raw status, treating anything unrecognised as UNKNOWN_ERROR."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unrecognised API status %r", value)
            return cls.UNKNOWN_ERROR


class StatusOutcome(str, Enum):
    """What a caller should do with a response."""

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    RETRYABLE = "RETRYABLE"
    FATAL = "FATAL"


_STATUS_ERRORS: dict[ResponseStatus, type[ApiStatusError]] = {
    ResponseStatus.OVER_QUERY_LIMIT: OverQueryLimitError,
    ResponseStatus.REQUEST_DENIED: RequestDeniedError,
    ResponseStatus.INVALID_REQUEST: InvalidRequestError,
    ResponseStatus.NOT_FOUND: NotFoundError,
    ResponseStatus.UNKNOWN_ERROR: UnknownError,
}


def classify(
    status: "str | ResponseStatus | None",
    retryable_statuses: Iterable["str | ResponseStatus"] = (),
) -> StatusOutcome:
    """
    Classify a status string.

    Args:
        status: Raw status from the response envelope
        retryable_statuses: Statuses the caller opted into retrying.
            Nothing is retried unless it is listed here.

    Returns:
        The outcome for this status
    """
    parsed = ResponseStatus.parse(status)
    if parsed is ResponseStatus.OK:
        return StatusOutcome.OK
    if parsed is ResponseStatus.ZERO_RESULTS:
        return StatusOutcome.ZERO_RESULTS

    retryable = {ResponseStatus.parse(s) for s in retryable_statuses}
    if parsed in retryable:
        return StatusOutcome.RETRYABLE
    return StatusOutcome.FATAL


def raise_for_status(envelope: ResponseEnvelope) -> None:
    """
    Raise the matching ApiStatusError unless the envelope is OK or ZERO_RESULTS.

    Args:
        envelope: Decoded response envelope

    Raises:
        ApiStatusError: A subclass matching the status
    """
    parsed = ResponseStatus.parse(envelope.status)
    if parsed in (ResponseStatus.OK, ResponseStatus.ZERO_RESULTS):
        return

    msg = f"Places API error: status={envelope.status}"
    if envelope.error_message:
        msg += f", message={envelope.error_message}"
    logger.warning("%s", msg)
    raise _STATUS_ERRORS[parsed](
        msg, status=envelope.status, error_message=envelope.error_message
    )
