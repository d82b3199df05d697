"""quakefeed - fetch recent earthquakes from a USGS-style GeoJSON feed."""

from quakefeed.application.query import fetch_earthquake_data
from quakefeed.domain.earthquake.model.value import Earthquake

__all__ = ["Earthquake", "fetch_earthquake_data"]
