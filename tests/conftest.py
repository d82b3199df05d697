"""Global test fixtures."""

import json
from collections.abc import Callable
from typing import Any

import logfire
import pytest

# Keep spans local; must run before any test exercises the query pipeline
logfire.configure(send_to_logfire=False, console=False)


def make_feature(
    mag: Any = 6.7,
    place: Any = "10km SSE of Example",
    time: Any = 1609459200000,
    url: Any = "https://example.com/event/1",
    **overrides: Any,
) -> dict[str, Any]:
    """Build one feature entry shaped like the USGS GeoJSON feed."""
    properties = {"mag": mag, "place": place, "time": time, "url": url, "tsunami": 0}
    properties.update(overrides)
    return {
        "type": "Feature",
        "properties": properties,
        "geometry": {"type": "Point", "coordinates": [-117.6, 35.8, 8.0]},
        "id": "ci00000001",
    }


@pytest.fixture
def feature() -> Callable[..., dict[str, Any]]:
    return make_feature


@pytest.fixture
def feed_document() -> Callable[[list[dict[str, Any]]], str]:
    """Serialize features into a full feed document."""

    def _build(features: list[dict[str, Any]]) -> str:
        return json.dumps(
            {
                "type": "FeatureCollection",
                "metadata": {"status": 200, "count": len(features)},
                "features": features,
            },
            indent=2,
        )

    return _build
