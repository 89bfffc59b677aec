"""
Parsers for Google Places API (Legacy) responses.

Turns raw JSON payloads into the response envelope and typed spots, with
proper error handling.
"""

import logging
from typing import Any

from pydantic import ValidationError

from google_places.errors import MalformedResponseError
from google_places.types import DetailedSpot, DetailsFetcher, ResponseEnvelope, Spot
from google_places.validators import validate_spot_complete

logger = logging.getLogger(__name__)


def parse_envelope(payload: Any) -> ResponseEnvelope:
    """
    Parse any legacy endpoint body into a ResponseEnvelope.

    Args:
        payload: Decoded JSON body

    Returns:
        ResponseEnvelope, whatever its status

    Raises:
        MalformedResponseError: If the body is not an object with a status
    """
    try:
        return ResponseEnvelope.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Failed to parse response envelope: {e}"
        ) from e


def parse_spot(
    result: dict[str, Any],
    fetch_details: DetailsFetcher | None = None,
) -> Spot:
    """
    Parse one search result into a summary Spot.

    Args:
        result: One item of the ``results`` array
        fetch_details: Capability used later by ``Spot.fetch_details()``

    Returns:
        Validated Spot

    Raises:
        MalformedResponseError: If required fields are missing or invalid
    """
    try:
        spot = Spot.from_result(result, fetch_details)
    except ValidationError as e:
        raise MalformedResponseError(f"Failed to parse Spot from result: {e}") from e

    validate_spot_complete(spot)
    return spot


def parse_detailed_spot(
    envelope: ResponseEnvelope,
    fetch_details: DetailsFetcher | None = None,
) -> DetailedSpot:
    """
    Parse a details/json envelope into a DetailedSpot.

    Raises:
        MalformedResponseError: If the envelope has no result or it is invalid
    """
    if not envelope.result:
        raise MalformedResponseError("Places API returned OK but no result dict")

    try:
        spot = DetailedSpot.from_result(envelope.result, fetch_details)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Failed to parse DetailedSpot from result: {e}"
        ) from e

    try:
        validate_spot_complete(spot)
    except MalformedResponseError as e:
        logger.error("Spot details validation failed: %s", e)
        raise

    return spot
