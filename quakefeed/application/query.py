"""Earthquake query - the one operation callers use."""

import httpx
import logfire

from quakefeed.config import FeedSettings
from quakefeed.domain.earthquake.model.value import Earthquake
from quakefeed.domain.earthquake.service.extract import extract_earthquakes
from quakefeed.infrastructure.http.feed_client import perform_request
from quakefeed.infrastructure.http.url import build_url


def fetch_earthquake_data(
    request_url: str,
    *,
    settings: FeedSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> list[Earthquake] | None:
    """Query the feed once and return its earthquakes.

    Blocks for the duration of one HTTP exchange; do not call it from a thread
    that must stay responsive. Never raises: every failure is logged on the
    `quakefeed.query` logger and degrades the return value.

    Args:
        request_url: Full HTTP(S) URL of a feed document.
        settings: Timeouts to use instead of the defaults.
        transport: Optional httpx transport, mainly for tests.

    Returns:
        The earthquakes in feed order. None when the URL was malformed or no
        text came back; a partial list when parsing stopped partway.
    """
    with logfire.span("FetchEarthquakeData", request_url=request_url):
        url = build_url(request_url)
        response = perform_request(url.value, settings=settings, transport=transport)
        extracted = extract_earthquakes(response.value)

        earthquakes = extracted.value
        logfire.info(
            "Earthquake query finished",
            count=None if earthquakes is None else len(earthquakes),
            url_ok=url.ok,
            request_ok=response.ok,
            parse_ok=extracted.ok,
        )
        return earthquakes
