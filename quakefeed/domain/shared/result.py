"""Fallible result threaded through the pipeline stages."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from quakefeed.domain.shared.error import ErrorKind, FetchError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one pipeline stage.

    `value` is always usable: on failure it holds the degraded value the stage
    falls back to (None, "" or a partial list) so the next stage can run
    unchanged.
    """

    value: T
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, value: T, error: FetchError) -> "Result[T]":
        return cls(value=value, error=error)
