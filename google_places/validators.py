"""
Validators for search options and parsed spots.

These validators enforce that:
1. Search options satisfy the API's parameter rules before any request is made
2. Spot values make sense (sanity checks)
3. Critical identifiers exist
"""

import logging

from google_places.errors import MalformedResponseError, OptionsValidationError
from google_places.options import SearchOptions
from google_places.types import DetailedSpot, Spot

logger = logging.getLogger(__name__)


def _has_search_term(options: SearchOptions) -> bool:
    return bool(options.keyword or options.name or options.types)


def validate_nearby_options(options: SearchOptions) -> None:
    """
    Check the radius / rankby rules of a nearby search.

    Without ``rankby="distance"`` a radius is mandatory. Ranking by distance
    implies a fixed 50km radius, so radius must then be absent and at least
    one of keyword, name or types must narrow the search.

    Args:
        options: Merged search options

    Raises:
        OptionsValidationError: If the rules are violated
    """
    if options.rankby == "distance":
        if options.radius is not None:
            raise OptionsValidationError(
                "radius must not be included when rankby is 'distance'"
            )
        if not _has_search_term(options):
            raise OptionsValidationError(
                "rankby 'distance' requires one of keyword, name or types"
            )
        return

    if options.radius is None:
        raise OptionsValidationError(
            "radius is required unless rankby is 'distance'"
        )


def validate_radar_options(options: SearchOptions) -> None:
    """
    Check a radar search: radius plus at least one of keyword, name or types.

    Raises:
        OptionsValidationError: If the rules are violated
    """
    if options.rankby is not None:
        raise OptionsValidationError("rankby is not supported by radar search")
    if options.radius is None:
        raise OptionsValidationError("radius is required for radar search")
    if not _has_search_term(options):
        raise OptionsValidationError(
            "radar search requires one of keyword, name or types"
        )


def validate_spot_sanity(spot: Spot | DetailedSpot) -> None:
    """
    Value sanity checks: ensure numeric fields make sense.

    Args:
        spot: The parsed spot

    Raises:
        MalformedResponseError: If any value fails sanity checks
    """
    errors = []

    if spot.rating is not None and not (0.0 <= spot.rating <= 5.0):
        errors.append(f"rating {spot.rating} is outside [0.0, 5.0] range")

    if spot.price_level is not None and not (0 <= spot.price_level <= 4):
        errors.append(f"price_level {spot.price_level} is outside [0, 4] range")

    if errors:
        error_msg = "; ".join(errors)
        raise MalformedResponseError(
            f"Spot failed sanity checks: {error_msg}"
        )


def validate_has_identifier(spot: Spot | DetailedSpot) -> None:
    """
    Critical identifier check: a spot needs a reference or place_id.

    Without one the spot can never be looked up again, details included.

    Raises:
        MalformedResponseError: If both reference and place_id are missing
    """
    if not spot.reference and not spot.place_id:
        raise MalformedResponseError(
            "Spot must have at least a reference or place_id"
        )


def validate_spot_complete(spot: Spot | DetailedSpot) -> None:
    """
    Run all spot validators in sequence.

    Raises:
        MalformedResponseError: If any validation fails
    """
    validate_spot_sanity(spot)
    validate_has_identifier(spot)
