"""
Google Places API client.

This module provides the entry points of the package: nearby, text, radar
and page-token searches returning lists of spots, plus single spot lookups.
"""

import logging
import time
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

import requests  # type: ignore[import-untyped]  # types-requests in dev dependencies
from pydantic import ValidationError

from google_places.config import PlacesConfig, get_config
from google_places.errors import NotFoundError, OptionsValidationError
from google_places.listing import SpotListing
from google_places.options import RetryOptions, SearchOptions, merge_options
from google_places.parsers import parse_detailed_spot, parse_spot
from google_places.request import Endpoint, PlacesRequest
from google_places.retry import RetryPolicy
from google_places.status import ResponseStatus, raise_for_status
from google_places.types import DetailedSpot, Location, ResponseEnvelope, Spot
from google_places.validators import validate_nearby_options, validate_radar_options

logger = logging.getLogger(__name__)

# Bounds of the photo endpoint's maxwidth / maxheight
_MAX_PHOTO_SIZE = 1600


def _location(lat: float, lng: float) -> Location:
    try:
        return Location(lat=lat, lng=lng)
    except ValidationError as e:
        raise OptionsValidationError(f"Invalid location: {e}") from e


class PlacesClient:
    """
    Google Places API client.

    Client-wide options given at construction are merged under the keyword
    options of each call.

    Example:
        ```python
        from google_places import PlacesClient

        client = PlacesClient(api_key="your-api-key", options={"language": "en"})

        # Everything within 500m, bars left out
        spots = client.search_nearby(48.8584, 2.2945, radius=500, exclude="bar")

        # Lazy details, fetched once
        detailed = spots[0].fetch_details()

        # Direct lookup
        spot = client.find("CmRYAAAA...")
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        sensor: bool | None = None,
        options: SearchOptions | Mapping[str, Any] | None = None,
        config: PlacesConfig | None = None,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the Places client.

        Args:
            api_key: Google Places API key (defaults to config)
            sensor: Location sensor flag sent with every request (defaults to config)
            options: Default search options for every call
            config: Configuration settings
            session: Optional pre-configured requests session
            sleep: Delay primitive used between retries and pages
        """
        self._config = config or get_config()
        self._api_key = api_key or self._config.api_key.get_secret_value()

        if not self._api_key:
            raise ValueError(
                "Google Places API key required. "
                "Set GOOGLE_PLACES_API_KEY environment variable."
            )

        self._sensor = self._config.sensor if sensor is None else sensor
        self._sleep = sleep
        self._page_delay = self._config.page_delay

        self._request = PlacesRequest(
            api_key=self._api_key,
            sensor=self._sensor,
            timeout=self._config.request_timeout,
            timeout_attempts=self._config.timeout_attempts,
            session=session,
            sleep=sleep,
        )

        config_defaults = {
            "retry_options": {
                "max": self._config.retry_max,
                "delay": self._config.retry_delay,
                "status": self._config.retry_statuses,
            }
        }
        self._options = merge_options(config_defaults, options)

        logger.info(
            "PlacesClient initialized (sensor=%s, retries=%d)",
            self._sensor,
            self._options.retry_options.max,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def sensor(self) -> bool:
        return self._sensor

    @property
    def options(self) -> SearchOptions:
        """Client-wide default options."""
        return self._options

    def _merge(self, options: Mapping[str, Any]) -> SearchOptions:
        return merge_options(self._options, options)

    def _fetch(
        self,
        endpoint: Endpoint,
        params: Mapping[str, Any],
        retry_options: RetryOptions,
    ) -> ResponseEnvelope:
        """One request under the retry policy, with fatal statuses raised."""
        policy = RetryPolicy.from_options(retry_options, sleep=self._sleep)
        envelope = policy.execute(lambda: self._request.get(endpoint, params))
        raise_for_status(envelope)
        return envelope

    def _fetch_details(
        self,
        reference: str,
        language: str | None = None,
        retry_options: RetryOptions | None = None,
    ) -> DetailedSpot:
        envelope = self._fetch(
            Endpoint.DETAILS,
            {"reference": reference, "language": language},
            retry_options if retry_options is not None else RetryOptions(),
        )
        if ResponseStatus.parse(envelope.status) is ResponseStatus.ZERO_RESULTS:
            raise NotFoundError(
                f"No place found for reference {reference[:20]}",
                status=envelope.status,
            )
        fetcher = partial(
            self._fetch_details, language=language, retry_options=retry_options
        )
        return parse_detailed_spot(envelope, fetcher)

    def _list(
        self,
        endpoint: Endpoint,
        params: Mapping[str, Any],
        options: SearchOptions,
        single_shot: bool = False,
    ) -> list[Spot]:
        """Run a listing for a search whose first page uses ``params``."""

        def fetch_page(pagetoken: str | None) -> ResponseEnvelope:
            page_params = params if pagetoken is None else {"pagetoken": pagetoken}
            return self._fetch(endpoint, page_params, options.retry_options)

        fetcher = partial(
            self._fetch_details,
            language=options.language,
            retry_options=options.retry_options,
        )
        listing = SpotListing(
            fetch_page,
            lambda result: parse_spot(result, fetcher),
            exclude=options.exclude,
            multipage=options.multipage,
            single_shot=single_shot,
            page_delay=self._page_delay,
            sleep=self._sleep,
        )
        return listing.run()

    def search_nearby(self, lat: float, lng: float, **options: Any) -> list[Spot]:
        """
        Search for spots around a location.

        Args:
            lat: Latitude
            lng: Longitude
            **options: Search options (radius, rankby, types, exclude,
                keyword, name, language, multipage, retry_options)

        Returns:
            Spots from every page, excluded types left out

        Raises:
            OptionsValidationError: If the options are invalid
            PlacesError: If any page fails
        """
        opts = self._merge(options)
        validate_nearby_options(opts)
        location = _location(lat, lng)

        logger.info(
            "Places API: search_nearby(%.4f, %.4f, r=%s)",
            lat,
            lng,
            opts.radius,
        )
        params = {"location": location, **opts.query_params()}
        return self._list(Endpoint.NEARBY_SEARCH, params, opts)

    def find(self, reference: str, **options: Any) -> DetailedSpot:
        """
        Look up a single spot by its reference.

        Args:
            reference: Reference of the spot
            **options: language, retry_options

        Returns:
            The detailed spot

        Raises:
            NotFoundError: If the reference matches no place
            PlacesError: If the request fails
        """
        if not reference:
            raise OptionsValidationError("reference is required")
        opts = self._merge(options)

        logger.info("Places API: find(%s)", reference[:20])
        return self._fetch_details(
            reference,
            language=opts.language,
            retry_options=opts.retry_options,
        )

    def search_by_query(
        self,
        query: str,
        lat: float | None = None,
        lng: float | None = None,
        **options: Any,
    ) -> list[Spot]:
        """
        Search for spots matching free-form text.

        A location bias is applied when both ``lat`` and ``lng`` are given;
        radius only applies together with a location.

        Args:
            query: Search query
            lat: Optional latitude for location bias
            lng: Optional longitude for location bias
            **options: Search options

        Returns:
            Spots from every page, excluded types left out
        """
        if not query:
            raise OptionsValidationError("query is required")
        if (lat is None) != (lng is None):
            raise OptionsValidationError("lat and lng must be given together")
        opts = self._merge(options)

        params: dict[str, Any] = {"query": query, **opts.query_params()}
        if lat is not None and lng is not None:
            params["location"] = _location(lat, lng)
        else:
            params.pop("radius", None)

        logger.info("Places API: search_by_query(%s)", query[:50])
        return self._list(Endpoint.TEXT_SEARCH, params, opts)

    def search_by_page_token(self, pagetoken: str, **options: Any) -> list[Spot]:
        """
        Continue a search from a next page token.

        Args:
            pagetoken: Token left on the last spot of a single page search
            **options: exclude, multipage, retry_options

        Returns:
            Spots from this page on
        """
        if not pagetoken:
            raise OptionsValidationError("pagetoken is required")
        opts = self._merge(options)

        logger.info("Places API: search_by_page_token(%s)", pagetoken[:20])
        return self._list(Endpoint.NEARBY_SEARCH, {"pagetoken": pagetoken}, opts)

    def search_radar(self, lat: float, lng: float, **options: Any) -> list[Spot]:
        """
        Scan up to 200 lightweight spots around a location.

        Radar results come in one response and are never paginated. Without
        keyword, name or types every known place type is requested.

        Args:
            lat: Latitude
            lng: Longitude
            **options: radius, types, keyword, name, exclude, retry_options

        Returns:
            Spots carrying little more than location and identifiers
        """
        opts = self._merge(options).with_radar_defaults()
        validate_radar_options(opts)
        location = _location(lat, lng)

        logger.info(
            "Places API: search_radar(%.4f, %.4f, r=%s)",
            lat,
            lng,
            opts.radius,
        )
        params = {"location": location, **opts.query_params()}
        return self._list(Endpoint.RADAR_SEARCH, params, opts, single_shot=True)

    def photo_url(
        self,
        photo_reference: str,
        max_width: int | None = None,
        max_height: int | None = None,
    ) -> str:
        """
        Get the image URL for a photo reference of a spot.

        Args:
            photo_reference: ``Photo.photo_reference``
            max_width: Maximum width in pixels (1-1600)
            max_height: Maximum height in pixels (1-1600)

        Returns:
            URL of the image
        """
        if not photo_reference:
            raise OptionsValidationError("photo_reference is required")
        if max_width is None and max_height is None:
            raise OptionsValidationError("max_width or max_height is required")
        for size in (max_width, max_height):
            if size is not None and not 1 <= size <= _MAX_PHOTO_SIZE:
                raise OptionsValidationError(
                    f"photo size must be within [1, {_MAX_PHOTO_SIZE}], got {size}"
                )

        return self._request.photo_url(photo_reference, max_width, max_height)


def create_places_client(
    api_key: str | None = None,
    config: PlacesConfig | None = None,
    **kwargs: Any,
) -> PlacesClient:
    """
    Factory function to create a Places client.

    Args:
        api_key: Google Places API key (optional, defaults to config)
        config: Configuration object (optional, defaults to environment config)
        **kwargs: Forwarded to PlacesClient (sensor, options, session, sleep)

    Returns:
        Configured PlacesClient
    """
    config = config or get_config()
    return PlacesClient(api_key=api_key, config=config, **kwargs)
