"""Unit tests for option rules and spot data validation."""

# pylint: disable=redefined-outer-name,unused-variable

import pytest

from google_places.errors import MalformedResponseError, OptionsValidationError
from google_places.options import RADAR_DEFAULT_TYPES, SearchOptions
from google_places.types import Geometry, Location, Spot
from google_places.validators import (
    validate_has_identifier,
    validate_nearby_options,
    validate_radar_options,
    validate_spot_complete,
    validate_spot_sanity,
)


# === FIXTURES ===


@pytest.fixture
def geometry():
    """Geometry at the Eiffel Tower."""
    return Geometry(location=Location(lat=48.8584, lng=2.2945))


@pytest.fixture
def valid_spot(geometry):
    """Valid Spot with identifiers and sane values."""
    return Spot(
        place_id="ChIJ1234567890",
        reference="CnR123",
        name="Test Restaurant",
        geometry=geometry,
        rating=4.5,
        price_level=2,
    )


# === VALIDATE_NEARBY_OPTIONS ===


@pytest.mark.unit
def test_nearby_requires_radius():
    """Test radius is mandatory without rankby=distance."""
    with pytest.raises(OptionsValidationError, match="radius is required"):
        validate_nearby_options(SearchOptions())


@pytest.mark.unit
def test_nearby_requires_radius_with_prominence():
    """Test rankby=prominence still needs a radius."""
    with pytest.raises(OptionsValidationError):
        validate_nearby_options(SearchOptions(rankby="prominence", keyword="x"))


@pytest.mark.unit
def test_nearby_with_radius_passes():
    """Test a plain radius search is valid."""
    validate_nearby_options(SearchOptions(radius=500))


@pytest.mark.unit
def test_rankby_distance_rejects_radius():
    """Test radius must be absent when ranking by distance."""
    with pytest.raises(OptionsValidationError, match="must not be included"):
        validate_nearby_options(
            SearchOptions(rankby="distance", radius=500, keyword="pizza")
        )


@pytest.mark.unit
def test_rankby_distance_requires_search_term():
    """Test ranking by distance needs keyword, name or types."""
    with pytest.raises(OptionsValidationError, match="keyword, name or types"):
        validate_nearby_options(SearchOptions(rankby="distance"))


@pytest.mark.unit
@pytest.mark.parametrize(
    "term",
    [{"keyword": "pizza"}, {"name": "Luigi"}, {"types": ["restaurant"]}],
)
def test_rankby_distance_with_any_term_passes(term):
    """Test each of keyword, name and types satisfies the rule."""
    validate_nearby_options(SearchOptions(rankby="distance", **term))


# === VALIDATE_RADAR_OPTIONS ===


@pytest.mark.unit
def test_radar_requires_radius():
    """Test radar search needs a radius."""
    with pytest.raises(OptionsValidationError, match="radius"):
        validate_radar_options(SearchOptions(types=["cafe"]))


@pytest.mark.unit
def test_radar_without_defaults_requires_search_term():
    """Test options that skipped the type defaults still need a search term."""
    with pytest.raises(OptionsValidationError):
        validate_radar_options(SearchOptions(radius=500))


@pytest.mark.unit
def test_radar_defaults_fill_types():
    """Test a radius-only radar search gets every known type."""
    options = SearchOptions(radius=500).with_radar_defaults()

    validate_radar_options(options)
    assert options.types == list(RADAR_DEFAULT_TYPES)
    assert "restaurant" in options.types


@pytest.mark.unit
@pytest.mark.parametrize(
    "term",
    [{"keyword": "museum"}, {"name": "Louvre"}, {"types": ["cafe"]}],
)
def test_radar_defaults_keep_given_terms(term):
    """Test defaults are not applied when a search term is present."""
    options = SearchOptions(radius=500, **term)
    assert options.with_radar_defaults() is options


@pytest.mark.unit
def test_radar_rejects_rankby():
    """Test rankby is not a radar option."""
    with pytest.raises(OptionsValidationError, match="rankby"):
        validate_radar_options(
            SearchOptions(radius=500, types=["cafe"], rankby="prominence")
        )


@pytest.mark.unit
def test_radar_valid():
    """Test a complete radar option set."""
    validate_radar_options(SearchOptions(radius=500, keyword="museum"))


# === SPOT VALIDATION ===


@pytest.mark.unit
def test_valid_spot_passes(valid_spot):
    """Test a sane spot passes every gate."""
    validate_spot_complete(valid_spot)


@pytest.mark.unit
def test_rating_out_of_range(geometry):
    """Test ratings above 5 fail sanity."""
    spot = Spot(place_id="x", geometry=geometry, rating=7.0)
    with pytest.raises(MalformedResponseError, match="rating"):
        validate_spot_sanity(spot)


@pytest.mark.unit
def test_price_level_out_of_range(geometry):
    """Test price levels above 4 fail sanity."""
    spot = Spot(place_id="x", geometry=geometry, price_level=9)
    with pytest.raises(MalformedResponseError, match="price_level"):
        validate_spot_sanity(spot)


@pytest.mark.unit
def test_multiple_errors_reported_together(geometry):
    """Test every failed check appears in the message."""
    spot = Spot(place_id="x", geometry=geometry, rating=-1.0, price_level=-1)
    with pytest.raises(MalformedResponseError) as exc_info:
        validate_spot_sanity(spot)
    assert "rating" in str(exc_info.value)
    assert "price_level" in str(exc_info.value)


@pytest.mark.unit
def test_missing_identifier(geometry):
    """Test a spot without reference or place_id is rejected."""
    spot = Spot(name="Anonymous", geometry=geometry)
    with pytest.raises(MalformedResponseError, match="reference or place_id"):
        validate_has_identifier(spot)


@pytest.mark.unit
def test_reference_alone_is_enough(geometry):
    """Test a reference without place_id identifies the spot."""
    validate_has_identifier(Spot(reference="CnR1", geometry=geometry))
