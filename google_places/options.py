"""
Typed search options.

Options are merged from client-wide defaults and per-call keyword arguments
into one immutable SearchOptions per call. Unknown keys are rejected.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from google_places.errors import OptionsValidationError

# Place types sent by a radar search that names no keyword, name or types
RADAR_DEFAULT_TYPES = (
    "accounting airport amusement_park aquarium art_gallery atm bakery bank bar "
    "beauty_salon bicycle_store book_store bowling_alley bus_station cafe "
    "campground car_dealer car_rental car_repair car_wash casino cemetery church "
    "city_hall clothing_store convenience_store courthouse dentist "
    "department_store doctor electrician electronics_store embassy establishment "
    "finance fire_station florist food funeral_home furniture_store gas_station "
    "general_contractor grocery_or_supermarket gym hair_care hardware_store "
    "health hindu_temple home_goods_store hospital insurance_agency "
    "jewelry_store laundry lawyer library liquor_store local_government_office "
    "locksmith lodging meal_delivery meal_takeaway mosque movie_rental "
    "movie_theater moving_company museum night_club painter park parking "
    "pet_store pharmacy physiotherapist place_of_worship plumber police "
    "post_office real_estate_agency restaurant roofing_contractor rv_park school "
    "shoe_store shopping_mall spa stadium storage store subway_station synagogue "
    "taxi_stand train_station travel_agency university veterinary_care zoo "
    "administrative_area_level_1 administrative_area_level_2 "
    "administrative_area_level_3 colloquial_area country floor geocode "
    "intersection locality natural_feature neighborhood political "
    "point_of_interest post_box postal_code postal_code_prefix postal_town "
    "premise room route street_address street_number sublocality "
    "sublocality_level_4 sublocality_level_5 sublocality_level_3 "
    "sublocality_level_2 sublocality_level_1 subpremise transit_station"
).split()


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class RetryOptions(BaseModel):
    """Retry parameters for API statuses the caller considers transient."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max: int = Field(default=0, ge=0, description="Maximum retries")
    delay: float = Field(
        default=5.0, ge=0.0, description="Seconds between retries"
    )
    status: list[str] = Field(
        default_factory=list,
        description="Statuses to retry, e.g. ['OVER_QUERY_LIMIT']",
    )
    timeout: float | None = Field(
        default=None,
        gt=0.0,
        description="Stop retrying once this many seconds have passed",
    )

    @field_validator("status", mode="before")
    @classmethod
    def wrap_status(cls, v: Any) -> Any:
        """Accept a single status string."""
        return _as_list(v)


class SearchOptions(BaseModel):
    """Options for one API call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    radius: int | None = Field(default=None, gt=0, le=50_000)
    rankby: Literal["prominence", "distance"] | None = None
    types: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    keyword: str | None = None
    name: str | None = None
    language: str | None = None
    multipage: bool = True
    retry_options: RetryOptions = Field(default_factory=RetryOptions)

    @field_validator("types", "exclude", mode="before")
    @classmethod
    def wrap_lists(cls, v: Any) -> Any:
        """Accept a single type string as well as a list."""
        return _as_list(v)

    def query_params(self) -> dict[str, Any]:
        """Options that travel as query parameters (exclude is client side)."""
        params: dict[str, Any] = {
            "radius": self.radius,
            "rankby": self.rankby,
            "types": self.types or None,
            "keyword": self.keyword,
            "name": self.name,
            "language": self.language,
        }
        return {k: v for k, v in params.items() if v is not None}

    def with_radar_defaults(self) -> "SearchOptions":
        """Fill in every known place type when no search term is given."""
        if self.keyword or self.name or self.types:
            return self
        return self.model_copy(update={"types": list(RADAR_DEFAULT_TYPES)})


def _as_dict(options: "SearchOptions | Mapping[str, Any] | None") -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, SearchOptions):
        return options.model_dump(exclude_unset=True)
    data = dict(options)
    retry = data.get("retry_options")
    if isinstance(retry, RetryOptions):
        data["retry_options"] = retry.model_dump(exclude_unset=True)
    return data


def merge_options(
    defaults: "SearchOptions | Mapping[str, Any] | None",
    overrides: "SearchOptions | Mapping[str, Any] | None" = None,
) -> SearchOptions:
    """
    Merge per-call overrides on top of defaults.

    Top level keys are replaced; ``retry_options`` is merged key by key so a
    call can change the delay without dropping the client's retry statuses.

    Args:
        defaults: Client-wide defaults
        overrides: Per-call options

    Returns:
        Validated SearchOptions

    Raises:
        OptionsValidationError: On unknown keys or invalid values
    """
    base = _as_dict(defaults)
    extra = _as_dict(overrides)

    merged = {**base, **extra}
    base_retry = base.get("retry_options")
    extra_retry = extra.get("retry_options")
    if isinstance(base_retry, Mapping) and isinstance(extra_retry, Mapping):
        merged["retry_options"] = {**base_retry, **extra_retry}

    try:
        return SearchOptions.model_validate(merged)
    except ValidationError as e:
        raise OptionsValidationError(f"Invalid search options: {e}") from e
