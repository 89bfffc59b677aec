"""
Typed models for Google Places API (Legacy) responses.

Search endpoints return spots in summary form. A summary ``Spot`` can be
turned into a ``DetailedSpot`` once, through the details fetcher it was
built with; the detailed instance is cached on the summary.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


class Location(BaseModel):
    """Geographic point: latitude and longitude."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    @field_validator("lat")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        """Validate latitude is within valid geographic range.

        Ensures latitude value is between -90.0 (South Pole) and 90.0 (North Pole).

        Args:
            v: Latitude value to validate

        Returns:
            Validated latitude value

        Raises:
            ValueError: If latitude is outside [-90.0, 90.0] range
        """
        if not -90.0 <= v <= 90.0:
            raise ValueError(f"latitude out of range: {v}")
        return v

    @field_validator("lng")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        """Validate longitude is within valid geographic range."""
        if not -180.0 <= v <= 180.0:
            raise ValueError(f"longitude out of range: {v}")
        return v

    def format(self) -> str:
        """Render as the ``lat,lng`` pair the API expects."""
        return f"{self.lat},{self.lng}"


class Viewport(BaseModel):
    """Geographic viewport defined by southwest and northeast corners."""

    model_config = ConfigDict(frozen=True)

    northeast: Location | None = None
    southwest: Location | None = None


class Geometry(BaseModel):
    """Location geometry including coordinates and viewport."""

    model_config = ConfigDict(frozen=True)

    location: Location
    viewport: Viewport | None = None


class DayTime(BaseModel):
    """One end of an opening period: day of week (0 = Sunday) and HHMM time."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(..., ge=0, le=6)
    time: str = Field(..., pattern=r"^\d{4}$")


class Period(BaseModel):
    """Single period of opening hours."""

    model_config = ConfigDict(frozen=True)

    open: DayTime
    close: DayTime | None = None

    @property
    def always_open(self) -> bool:
        """A lone Sunday 0000 opening with no close means open 24/7."""
        return (
            self.close is None
            and self.open.day == 0
            and self.open.time == "0000"
        )


class OpeningHours(BaseModel):
    """Business opening hours."""

    model_config = ConfigDict(frozen=True)

    open_now: bool | None = None
    periods: list[Period] = Field(default_factory=list)
    weekday_text: list[str] = Field(default_factory=list)


class ReviewAspect(BaseModel):
    """Rating of one aspect of a place (food, service, ...)."""

    model_config = ConfigDict(frozen=True)

    type: str | None = None
    rating: int | None = None


class Review(BaseModel):
    """A user review attached to a spot."""

    model_config = ConfigDict(frozen=True)

    author_name: str | None = None
    author_url: str | None = None
    rating: float | None = None
    text: str | None = None
    time: int | None = None
    language: str | None = None
    aspects: list[ReviewAspect] = Field(default_factory=list)


class Event(BaseModel):
    """An event happening at a spot."""

    model_config = ConfigDict(frozen=True)

    event_id: str | None = None
    start_time: int | None = None
    summary: str | None = None
    url: str | None = None


class Photo(BaseModel):
    """Photo metadata from Google Places."""

    model_config = ConfigDict(frozen=True)

    height: int | None = None
    width: int | None = None
    photo_reference: str | None = None
    html_attributions: list[str] = Field(default_factory=list)


class AddressComponent(BaseModel):
    """One part of a structured address."""

    model_config = ConfigDict(frozen=True)

    long_name: str | None = None
    short_name: str | None = None
    types: list[str] = Field(default_factory=list)


DetailsFetcher = Callable[[str], "DetailedSpot"]


class _SpotBase(BaseModel):
    """Fields shared by summary and detailed spots."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Identifiers
    reference: str | None = None
    place_id: str | None = None
    id: str | None = None
    name: str | None = None

    # Geo
    geometry: Geometry
    vicinity: str | None = None
    icon: str | None = None

    # Classification
    types: list[str] = Field(default_factory=list)
    rating: float | None = None
    price_level: int | None = None

    # Business info
    opening_hours: OpeningHours | None = None
    photos: list[Photo] = Field(default_factory=list)
    reviews: list[Review] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)

    # Set on the last spot of a single page listing
    next_page_token: str | None = None

    _fetch_details: DetailsFetcher | None = PrivateAttr(default=None)

    @classmethod
    def from_result(
        cls,
        result: dict[str, Any],
        fetch_details: DetailsFetcher | None = None,
    ):
        """Validate a raw API result and bind the details fetcher to it."""
        spot = cls.model_validate(result)
        spot._fetch_details = fetch_details
        return spot

    @property
    def location(self) -> Location:
        return self.geometry.location

    @property
    def lat(self) -> float:
        return self.geometry.location.lat

    @property
    def lng(self) -> float:
        return self.geometry.location.lng

    @property
    def periods(self) -> list[Period]:
        if self.opening_hours is None:
            return []
        return self.opening_hours.periods


class Spot(_SpotBase):
    """
    A place in summary form, as returned by the search endpoints.

    Reviews, events and the full set of periods and photos are usually
    missing until ``fetch_details()`` is called.
    """

    detailed: Literal[False] = False

    _details: DetailedSpot | None = PrivateAttr(default=None)

    def fetch_details(self) -> DetailedSpot:
        """
        Fetch the detailed form of this spot.

        The details request is issued at most once: the resulting
        DetailedSpot is cached on this instance and returned by later
        calls. If the request fails the error propagates and nothing
        is cached, so this summary stays as it was.

        Returns:
            DetailedSpot holding the summary fields overlaid with the details

        Raises:
            ValueError: If the spot has no fetcher or no identifier
            PlacesError: If the details request fails
        """
        if self._details is not None:
            return self._details

        if self._fetch_details is None:
            raise ValueError("Spot was built without a details fetcher")
        key = self.reference or self.place_id
        if not key:
            raise ValueError("Spot has neither reference nor place_id")

        fetched = self._fetch_details(key)

        merged = DetailedSpot.model_validate(
            {
                **self.model_dump(
                    exclude_unset=True, exclude={"detailed", "next_page_token"}
                ),
                **fetched.model_dump(exclude_unset=True, exclude={"detailed"}),
            }
        )
        merged._fetch_details = self._fetch_details
        self._details = merged
        return merged


class DetailedSpot(_SpotBase):
    """A place with the extended fields of the details endpoint."""

    detailed: Literal[True] = True

    formatted_address: str | None = None
    address_components: list[AddressComponent] = Field(default_factory=list)
    formatted_phone_number: str | None = None
    international_phone_number: str | None = None
    website: str | None = None
    url: str | None = None
    utc_offset: int | None = None

    def fetch_details(self) -> DetailedSpot:
        """Already detailed; returns itself."""
        return self

    def _address_component(self, component_type: str, name: str = "long_name") -> str | None:
        for component in self.address_components:
            if component_type in component.types:
                return getattr(component, name)
        return None

    @property
    def street_number(self) -> str | None:
        return self._address_component("street_number", "short_name")

    @property
    def street(self) -> str | None:
        return self._address_component("route")

    @property
    def city(self) -> str | None:
        return self._address_component("locality")

    @property
    def region(self) -> str | None:
        return self._address_component("administrative_area_level_1")

    @property
    def postal_code(self) -> str | None:
        return self._address_component("postal_code")

    @property
    def country(self) -> str | None:
        return self._address_component("country")


class ResponseEnvelope(BaseModel):
    """Decoded body of any legacy Places endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    results: list[dict[str, Any]] | None = None
    result: dict[str, Any] | None = None
    next_page_token: str | None = None
    error_message: str | None = None
    html_attributions: list[str] = Field(default_factory=list)
