"""Diagnostic log entries for pipeline failures."""

import logging

from quakefeed.domain.shared.error import FetchError

# Fixed tag shared by every stage so callers can filter one logger
QUERY_LOGGER_NAME = "quakefeed.query"

logger = logging.getLogger(QUERY_LOGGER_NAME)


def report(error: FetchError) -> None:
    """Emit the single ERROR entry for a pipeline failure."""
    logger.error(
        "%s",
        error.message,
        exc_info=error.cause,
        extra={"error_kind": error.kind.value, "error_code": error.code},
    )
