"""Error kinds for the earthquake query pipeline.

Error layers:
- FetchError: Base value for every pipeline failure
- MalformedUrlError: The request text could not be turned into an HTTP(S) URL
- NetworkError: Connection failure, non-200 status, or I/O failure while reading
- ParseError: Malformed JSON, missing required key, or wrong value type

Stages never raise these. Each one is returned inside a Result next to the
degraded value the stage falls back to, and logged once where it is created.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    MALFORMED_URL = "malformed_url"
    NETWORK = "network"
    PARSE = "parse"


@dataclass(frozen=True)
class FetchError:
    """Base value for all pipeline failures."""

    kind: ClassVar[ErrorKind]

    message: str
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    @property
    def code(self) -> str:
        return self.__class__.__name__

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MalformedUrlError(FetchError):
    """Request text is not a usable HTTP(S) URL."""

    kind = ErrorKind.MALFORMED_URL


@dataclass(frozen=True)
class NetworkError(FetchError):
    """The HTTP exchange failed or returned something other than 200."""

    kind = ErrorKind.NETWORK

    status_code: int | None = None  # Set when the server answered with a non-200 status


@dataclass(frozen=True)
class ParseError(FetchError):
    """The feed document could not be read into earthquakes."""

    kind = ErrorKind.PARSE

    feature_index: int | None = None  # Position in `features` where extraction stopped
