"""Earthquake domain value objects."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class Earthquake:
    """One seismic event as reported by the upstream feed.

    Holds the values exactly as extracted. Presence and type checks happen
    during extraction, not here.

    Example:
        Earthquake(
            magnitude=6.7,
            location="10km SSE of Example",
            time_millis=1609459200000,
            detail_url="https://example.com/event/1",
        )
    """

    magnitude: float | None  # None when the feed reports a null magnitude
    location: str
    time_millis: int  # Milliseconds since the Unix epoch, as reported
    detail_url: str

    @property
    def occurred_at(self) -> datetime | None:
        """Event time as an aware UTC datetime, or None outside datetime's range."""
        try:
            return _EPOCH + timedelta(milliseconds=self.time_millis)
        except OverflowError:
            return None

    def as_dict(self) -> dict[str, Any]:
        """The four reported fields as a plain mapping."""
        return asdict(self)
