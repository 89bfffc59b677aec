"""
Page-token driven listing of search results.

A listing issues the first search request, then follows ``next_page_token``
while the API hands one out, waiting before each follow-up request because a
fresh token is not valid right away. Results tagged with an excluded type are
dropped before they are parsed.

Errors on any page abort the whole listing; no partial list is returned.
"""

import logging
import time
from collections.abc import Callable, Iterable
from typing import Any

from google_places.types import ResponseEnvelope, Spot

logger = logging.getLogger(__name__)

# Google documents a short delay before a next_page_token becomes valid
DEFAULT_PAGE_DELAY = 2.0

PageFetcher = Callable[[str | None], ResponseEnvelope]
ItemParser = Callable[[dict[str, Any]], Spot]


class SpotListing:
    """
    Collects the spots of one search across its pages.

    ``fetch_page`` receives ``None`` for the first page and the page token
    for every later one. It is expected to apply the retry policy and raise
    on fatal statuses.

    Example:
        ```python
        listing = SpotListing(fetch_page, parse_item, exclude=["bar"])
        spots = listing.run()
        ```
    """

    def __init__(
        self,
        fetch_page: PageFetcher,
        parse_item: ItemParser,
        exclude: Iterable[str] = (),
        multipage: bool = True,
        single_shot: bool = False,
        page_delay: float = DEFAULT_PAGE_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._fetch_page = fetch_page
        self._parse_item = parse_item
        self._exclude = frozenset(exclude)
        self._multipage = multipage
        self._single_shot = single_shot
        self._page_delay = page_delay
        self._sleep = sleep
        self.pages_fetched = 0
        self.next_page_token: str | None = None

    def is_excluded(self, result: dict[str, Any]) -> bool:
        """True when any of the result's types is in the exclude set."""
        types = result.get("types") or ()
        if isinstance(types, str):
            types = (types,)
        return not self._exclude.isdisjoint(types)

    def run(self) -> list[Spot]:
        """
        Fetch every page and return the kept spots in page order.

        Returns:
            Spots from all pages (empty on ZERO_RESULTS)

        Raises:
            PlacesError: Whatever the page fetcher or item parser raised
        """
        spots: list[Spot] = []
        token: str | None = None

        while True:
            envelope = self._fetch_page(token)
            self.pages_fetched += 1

            results = envelope.results or []
            kept = [r for r in results if not self.is_excluded(r)]
            next_token = None if self._single_shot else envelope.next_page_token

            if next_token and not self._multipage and kept:
                # Leave the token on the last spot so the caller can go on
                kept[-1] = {**kept[-1], "next_page_token": next_token}

            spots.extend(self._parse_item(result) for result in kept)
            logger.debug(
                "Page %d: %d results, %d kept, next page %s",
                self.pages_fetched,
                len(results),
                len(kept),
                "available" if next_token else "none",
            )

            self.next_page_token = next_token
            if not next_token:
                break
            # A single page listing moves past pages that were fully excluded,
            # so the token always ends up on a returned spot
            if not self._multipage and kept:
                break

            self._sleep(self._page_delay)
            token = next_token

        logger.info(
            "Listing done: %d spots over %d page(s)",
            len(spots),
            self.pages_fetched,
        )
        return spots
