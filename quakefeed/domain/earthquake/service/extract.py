"""Extraction of earthquakes from a feed document.

The feed document is a JSON object with a `features` array. Each feature
carries a `properties` object holding `mag`, `place`, `time` and `url`.

Extraction is all-or-prefix: the first feature that cannot be read stops the
whole pass, and the earthquakes built before it are returned as they are.
"""

import json
import math
from typing import Any

from quakefeed.domain.earthquake.model.value import Earthquake
from quakefeed.domain.shared.diagnostics import report
from quakefeed.domain.shared.error import ParseError
from quakefeed.domain.shared.result import Result

FEATURES_KEY = "features"
PROPERTIES_KEY = "properties"
MAGNITUDE_KEY = "mag"
PLACE_KEY = "place"
TIME_KEY = "time"
URL_KEY = "url"

REQUIRED_KEYS = (MAGNITUDE_KEY, PLACE_KEY, TIME_KEY, URL_KEY)

PARSE_PROBLEM = "Problem parsing the earthquake JSON results"

_INVALID = object()


def extract_earthquakes(text: str | None) -> Result[list[Earthquake] | None]:
    """Build earthquakes from a feed document.

    Args:
        text: Raw feed document. Empty or None means nothing was fetched.

    Returns:
        Result whose value is None when there was nothing to parse, otherwise
        the earthquakes in feature order. On a ParseError the value holds the
        earthquakes read before the failing feature.
    """
    if not text:
        return Result.success(None)

    earthquakes: list[Earthquake] = []

    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as e:
        return _abort(earthquakes, ParseError(f"{PARSE_PROBLEM}: invalid JSON ({e})", cause=e))

    if not isinstance(document, dict):
        return _abort(
            earthquakes,
            ParseError(f"{PARSE_PROBLEM}: document root is not a JSON object"),
        )

    features = document.get(FEATURES_KEY)
    if not isinstance(features, list):
        return _abort(
            earthquakes,
            ParseError(f"{PARSE_PROBLEM}: no '{FEATURES_KEY}' array at the document root"),
        )

    for index, feature in enumerate(features):
        built = _build_earthquake(index, feature)
        if isinstance(built, ParseError):
            return _abort(earthquakes, built)
        earthquakes.append(built)

    return Result.success(earthquakes)


def _abort(
    earthquakes: list[Earthquake], error: ParseError
) -> Result[list[Earthquake] | None]:
    report(error)
    return Result.failure(earthquakes, error)


def _build_earthquake(index: int, feature: Any) -> Earthquake | ParseError:
    """Read one feature entry, or describe why it cannot be read."""
    if not isinstance(feature, dict):
        return _entry_error(index, "is not a JSON object")

    properties = feature.get(PROPERTIES_KEY)
    if not isinstance(properties, dict):
        return _entry_error(index, f"has no '{PROPERTIES_KEY}' object")

    missing = [key for key in REQUIRED_KEYS if key not in properties]
    if missing:
        return _entry_error(index, f"is missing required key(s): {', '.join(missing)}")

    magnitude = _read_magnitude(properties[MAGNITUDE_KEY])
    if magnitude is _INVALID:
        return _wrong_type(index, MAGNITUDE_KEY, "a number", properties[MAGNITUDE_KEY])

    location = properties[PLACE_KEY]
    if not isinstance(location, str):
        return _wrong_type(index, PLACE_KEY, "a string", location)

    time_millis = _read_time(properties[TIME_KEY])
    if time_millis is _INVALID:
        return _wrong_type(index, TIME_KEY, "an integer", properties[TIME_KEY])

    detail_url = properties[URL_KEY]
    if not isinstance(detail_url, str):
        return _wrong_type(index, URL_KEY, "a string", detail_url)

    return Earthquake(
        magnitude=magnitude,
        location=location,
        time_millis=time_millis,
        detail_url=detail_url,
    )


def _read_magnitude(raw: Any) -> Any:
    """Magnitude as float, None for JSON null, _INVALID otherwise."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        return _INVALID
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except (ValueError, OverflowError):
            return _INVALID
    return _INVALID


def _read_time(raw: Any) -> Any:
    """Timestamp as int; integral floats and integer strings are accepted."""
    if isinstance(raw, bool):
        return _INVALID
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) and raw.is_integer() else _INVALID
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return _INVALID
    return _INVALID


def _entry_error(index: int, problem: str) -> ParseError:
    return ParseError(f"{PARSE_PROBLEM}: feature {index} {problem}", feature_index=index)


def _wrong_type(index: int, key: str, expected: str, raw: Any) -> ParseError:
    return _entry_error(
        index,
        f"has '{key}' of type {type(raw).__name__}, expected {expected}",
    )
