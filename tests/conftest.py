"""
Pytest fixtures for google_places tests.

Uses responses to mock HTTP requests and a recording sleep so nothing
waits on the wall clock.
"""

from typing import Any, Generator

import pytest
import responses

from google_places.client import PlacesClient
from google_places.config import PlacesConfig

BASE_URL = "https://maps.googleapis.com/maps/api/place"
NEARBY_URL = f"{BASE_URL}/nearbysearch/json"
TEXT_URL = f"{BASE_URL}/textsearch/json"
DETAILS_URL = f"{BASE_URL}/details/json"
RADAR_URL = f"{BASE_URL}/radarsearch/json"
PHOTO_URL = f"{BASE_URL}/photo"


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without HTTP")


class SleepRecorder:
    """Stand-in for time.sleep that records every delay."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper() -> SleepRecorder:
    """Recording sleep shared by the client under test."""
    return SleepRecorder()


@pytest.fixture
def test_config() -> PlacesConfig:
    """Create test configuration."""
    return PlacesConfig(
        api_key="test-api-key",
        sensor=False,
        request_timeout=10,
        timeout_attempts=3,
        page_delay=2.0,
    )


@pytest.fixture
def places_client(test_config: PlacesConfig, sleeper: SleepRecorder) -> PlacesClient:
    """Create a PlacesClient with a recording sleep."""
    return PlacesClient(api_key="test-api-key", config=test_config, sleep=sleeper)


@pytest.fixture
def mock_places_api() -> Generator[responses.RequestsMock, None, None]:
    """Mock Google Places API responses."""
    with responses.RequestsMock() as rsps:
        yield rsps


def make_result(
    place_id: str,
    types: list[str] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build one search result the way nearbysearch returns it."""
    result: dict[str, Any] = {
        "place_id": place_id,
        "reference": f"ref-{place_id}",
        "name": f"Place {place_id}",
        "geometry": {"location": {"lat": 48.8584, "lng": 2.2945}},
        "types": types if types is not None else ["establishment"],
    }
    result.update(extra)
    return result


# Sample response data for tests
SAMPLE_SEARCH_RESULT = {
    "place_id": "ChIJtest123",
    "reference": "CnRtest123",
    "id": "abc123",
    "name": "Test Bistro",
    "vicinity": "1 Test Street, Paris",
    "icon": "https://maps.gstatic.com/mapfiles/place_api/icons/restaurant-71.png",
    "geometry": {
        "location": {"lat": 48.8584, "lng": 2.2945},
        "viewport": {
            "northeast": {"lat": 48.8597, "lng": 2.2958},
            "southwest": {"lat": 48.8570, "lng": 2.2931},
        },
    },
    "types": ["restaurant", "food", "establishment"],
    "rating": 4.3,
    "price_level": 2,
    "opening_hours": {"open_now": True},
    "photos": [
        {
            "height": 1200,
            "width": 1600,
            "photo_reference": "photo-ref-1",
            "html_attributions": ["<a>Someone</a>"],
        }
    ],
}

SAMPLE_DETAILS_RESULT = {
    **SAMPLE_SEARCH_RESULT,
    "formatted_address": "1 Test Street, 75007 Paris, France",
    "formatted_phone_number": "01 23 45 67 89",
    "international_phone_number": "+33 1 23 45 67 89",
    "website": "https://bistro.example.com",
    "url": "https://maps.google.com/?cid=123",
    "utc_offset": 60,
    "address_components": [
        {"long_name": "1", "short_name": "1", "types": ["street_number"]},
        {"long_name": "Test Street", "short_name": "Test St", "types": ["route"]},
        {"long_name": "Paris", "short_name": "Paris", "types": ["locality", "political"]},
        {
            "long_name": "Ile-de-France",
            "short_name": "IDF",
            "types": ["administrative_area_level_1", "political"],
        },
        {"long_name": "75007", "short_name": "75007", "types": ["postal_code"]},
        {"long_name": "France", "short_name": "FR", "types": ["country", "political"]},
    ],
    "opening_hours": {
        "open_now": True,
        "periods": [
            {"open": {"day": 1, "time": "0900"}, "close": {"day": 1, "time": "2200"}},
            {"open": {"day": 2, "time": "0900"}, "close": {"day": 2, "time": "2200"}},
        ],
        "weekday_text": ["Monday: 9:00 AM - 10:00 PM"],
    },
    "reviews": [
        {
            "author_name": "Jane Doe",
            "author_url": "https://plus.google.com/123",
            "rating": 5,
            "text": "Great food.",
            "time": 1355227200,
            "language": "en",
            "aspects": [{"type": "food", "rating": 3}],
        }
    ],
    "events": [
        {
            "event_id": "evt-1",
            "start_time": 1355227200,
            "summary": "Wine tasting",
            "url": "https://bistro.example.com/events/1",
        }
    ],
    "photos": [
        {"height": 1200, "width": 1600, "photo_reference": "photo-ref-1"},
        {"height": 800, "width": 600, "photo_reference": "photo-ref-2"},
    ],
}

SAMPLE_NEARBY_RESPONSE = {
    "status": "OK",
    "html_attributions": [],
    "results": [SAMPLE_SEARCH_RESULT],
}

SAMPLE_DETAILS_RESPONSE = {
    "status": "OK",
    "html_attributions": [],
    "result": SAMPLE_DETAILS_RESULT,
}
