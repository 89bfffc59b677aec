"""
HTTP layer for the legacy Places API.

Builds the canonical query string for an endpoint and performs one GET.
Only connection timeouts are retried at this level; status retries are the
job of RetryPolicy.
"""

import logging
import time
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

import requests  # type: ignore[import-untyped]  # types-requests in dev dependencies
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from google_places.errors import MalformedResponseError, TransportError
from google_places.parsers import parse_envelope
from google_places.types import Location, ResponseEnvelope

logger = logging.getLogger(__name__)

BASE_URL = "https://maps.googleapis.com/maps/api/place"

# Separator the API expects between values of list parameters
LIST_DELIMITER = "|"

_REDIRECT_CODES = (301, 302, 303, 307, 308)


class Endpoint(str, Enum):
    """Places API endpoints used by this package."""

    NEARBY_SEARCH = "nearbysearch"
    TEXT_SEARCH = "textsearch"
    DETAILS = "details"
    RADAR_SEARCH = "radarsearch"
    PHOTO = "photo"

    @property
    def url(self) -> str:
        if self is Endpoint.PHOTO:
            return f"{BASE_URL}/photo"
        return f"{BASE_URL}/{self.value}/json"


def _render(value: Any) -> Any:
    """Render one option value the way the API expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Location):
        return value.format()
    if isinstance(value, (list, tuple, set, frozenset)):
        return LIST_DELIMITER.join(str(v) for v in value)
    return value


def build_query(
    params: Mapping[str, Any],
    api_key: str,
    sensor: bool = False,
) -> dict[str, Any]:
    """
    Build the canonical query for one request.

    ``None`` values are dropped, lists are pipe-joined and booleans become
    ``true``/``false``. ``sensor`` and ``key`` are always written last, so a
    caller-supplied value for either never reaches the wire.

    Args:
        params: Endpoint parameters
        api_key: Google Places API key
        sensor: Whether the request comes from a device with a location sensor

    Returns:
        Query parameter dict ready for requests
    """
    query = {
        name: _render(value)
        for name, value in params.items()
        if value is not None and name not in ("key", "sensor")
    }
    query["sensor"] = _render(bool(sensor))
    query["key"] = api_key
    return query


class PlacesRequest:
    """
    Issues single GET requests against the Places API.

    Example:
        ```python
        request = PlacesRequest(api_key="your-api-key")
        envelope = request.get(
            Endpoint.NEARBY_SEARCH,
            {"location": "48.85,2.29", "radius": 500},
        )
        ```
    """

    def __init__(
        self,
        api_key: str,
        sensor: bool = False,
        timeout: int = 30,
        timeout_attempts: int = 3,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not api_key:
            raise ValueError("Google Places API key required")
        self._api_key = api_key
        self._sensor = sensor
        self._timeout = timeout
        self._timeout_attempts = timeout_attempts
        self._session = session or requests.Session()
        self._sleep = sleep

    def _send(
        self,
        url: str,
        query: dict[str, Any],
        allow_redirects: bool = True,
    ) -> requests.Response:
        """
        Send the GET with automatic retries on timeout.

        Retries on timeout exceptions with exponential backoff. Other
        connection errors and HTTP errors are not retried.
        """
        retrying = Retrying(
            retry=retry_if_exception_type(requests.exceptions.Timeout),
            stop=stop_after_attempt(self._timeout_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            sleep=self._sleep,
            reraise=True,
        )
        try:
            response = retrying(
                self._session.get,
                url,
                params=query,
                timeout=self._timeout,
                allow_redirects=allow_redirects,
            )
            if response.status_code not in _REDIRECT_CODES:
                response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise TransportError(
                f"Places API returned HTTP {status_code}", status_code=status_code
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Places API request failed: {e}") from e
        return response

    def get(
        self, endpoint: Endpoint, params: Mapping[str, Any]
    ) -> ResponseEnvelope:
        """
        Perform one request and decode its envelope.

        Args:
            endpoint: Endpoint to call
            params: Endpoint parameters (key and sensor are injected)

        Returns:
            Decoded ResponseEnvelope, whatever its status

        Raises:
            TransportError: On network failure or non-2xx HTTP status
            MalformedResponseError: If the body is not a valid envelope
        """
        query = build_query(params, self._api_key, self._sensor)
        logger.debug(
            "GET %s (params=%s, timeout=%s)",
            endpoint.value,
            ",".join(sorted(k for k in query if k != "key")),
            self._timeout,
        )

        response = self._send(endpoint.url, query)
        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Places API returned a non-JSON body for {endpoint.value}"
            ) from e

        return parse_envelope(payload)

    def photo_url(
        self,
        photo_reference: str,
        max_width: int | None = None,
        max_height: int | None = None,
    ) -> str:
        """
        Resolve a photo reference to the URL of the image.

        The photo endpoint answers with a redirect to the image; the
        redirect is not followed, its target is returned instead.

        Raises:
            TransportError: On network failure or HTTP error
            MalformedResponseError: If the endpoint did not redirect
        """
        query = build_query(
            {
                "photoreference": photo_reference,
                "maxwidth": max_width,
                "maxheight": max_height,
            },
            self._api_key,
            self._sensor,
        )
        response = self._send(Endpoint.PHOTO.url, query, allow_redirects=False)
        location = response.headers.get("Location")
        if response.status_code not in _REDIRECT_CODES or not location:
            raise MalformedResponseError(
                f"Photo endpoint did not redirect (HTTP {response.status_code})"
            )
        return location
