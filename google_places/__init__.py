"""
Google Places - client for the legacy Google Places web API.

Searches by coordinates, text query, reference, page token or radar scan
return typed spots. Transient API statuses can be retried, and searches
follow next page tokens with the delay the API requires.

Example:
    ```python
    from google_places import create_places_client

    client = create_places_client(api_key="your-api-key")

    spots = client.search_nearby(
        -33.8670522, 151.1957362, radius=500, types="restaurant"
    )
    details = spots[0].fetch_details()
    ```
"""

from google_places.client import PlacesClient, create_places_client
from google_places.config import PlacesConfig
from google_places.errors import (
    ApiStatusError,
    InvalidRequestError,
    MalformedResponseError,
    NotFoundError,
    OptionsValidationError,
    OverQueryLimitError,
    PlacesError,
    RequestDeniedError,
    TransportError,
    UnknownError,
)
from google_places.listing import SpotListing
from google_places.options import RetryOptions, SearchOptions, merge_options
from google_places.request import Endpoint, PlacesRequest, build_query
from google_places.retry import RetryPolicy
from google_places.status import ResponseStatus, StatusOutcome, classify
from google_places.types import (
    AddressComponent,
    DayTime,
    DetailedSpot,
    Event,
    Geometry,
    Location,
    OpeningHours,
    Period,
    Photo,
    ResponseEnvelope,
    Review,
    ReviewAspect,
    Spot,
    Viewport,
)
from google_places.version import __version__

__all__ = [
    # Core client & config (use create_places_client() for flexibility)
    "create_places_client",
    "PlacesClient",
    "PlacesConfig",
    # Pipeline
    "Endpoint",
    "PlacesRequest",
    "build_query",
    "ResponseStatus",
    "StatusOutcome",
    "classify",
    "RetryPolicy",
    "SpotListing",
    "SearchOptions",
    "RetryOptions",
    "merge_options",
    # Typed models
    "Spot",
    "DetailedSpot",
    "Location",
    "Geometry",
    "Viewport",
    "OpeningHours",
    "Period",
    "DayTime",
    "Review",
    "ReviewAspect",
    "Event",
    "Photo",
    "AddressComponent",
    "ResponseEnvelope",
    # Errors
    "PlacesError",
    "TransportError",
    "MalformedResponseError",
    "OptionsValidationError",
    "ApiStatusError",
    "OverQueryLimitError",
    "RequestDeniedError",
    "InvalidRequestError",
    "NotFoundError",
    "UnknownError",
    "__version__",
]
