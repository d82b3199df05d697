"""Shared pipeline types: error kinds and stage results."""

from quakefeed.domain.shared.error import (
    ErrorKind,
    FetchError,
    MalformedUrlError,
    NetworkError,
    ParseError,
)
from quakefeed.domain.shared.result import Result

__all__ = [
    "ErrorKind",
    "FetchError",
    "MalformedUrlError",
    "NetworkError",
    "ParseError",
    "Result",
]
