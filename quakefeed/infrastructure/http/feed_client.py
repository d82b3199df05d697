"""HTTP adapter that fetches the raw feed document."""

import codecs
from collections.abc import Iterable

import httpx

from quakefeed.config import FeedSettings
from quakefeed.domain.shared.diagnostics import report
from quakefeed.domain.shared.error import NetworkError
from quakefeed.domain.shared.result import Result

FEED_ENCODING = "utf-8"
SUCCESS_STATUS = 200


def perform_request(
    url: httpx.URL | None,
    *,
    settings: FeedSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Result[str]:
    """GET the feed and return its body as text.

    The client and the response stream live only for this call and are
    closed on every path out of it.

    Args:
        url: Parsed request URL. None skips the request entirely.
        settings: Timeouts to apply; defaults to FeedSettings().
        transport: Optional httpx transport (e.g. httpx.MockTransport).

    Returns:
        Result holding the body text, or "" with a NetworkError.
    """
    if url is None:
        return Result.success("")

    settings = settings or FeedSettings()
    timeout = httpx.Timeout(
        None,
        connect=settings.connect_timeout,
        read=settings.read_timeout,
    )

    try:
        with httpx.Client(timeout=timeout, transport=transport, follow_redirects=True) as client:
            with client.stream("GET", url) as response:
                if response.status_code != SUCCESS_STATUS:
                    return _network_failure(
                        NetworkError(
                            f"Error response code: {response.status_code}",
                            status_code=response.status_code,
                        )
                    )
                text = decode_to_text(response.iter_bytes())
    except httpx.HTTPError as e:
        return _network_failure(
            NetworkError(f"Problem retrieving the earthquake JSON result: {e!r}", cause=e)
        )

    return Result.success(text)


def decode_to_text(chunks: Iterable[bytes]) -> str:
    """Decode a UTF-8 body delivered in arbitrary chunks.

    Multi-byte sequences split across chunks decode the same as when
    delivered whole. Line breaks are kept; invalid bytes become U+FFFD.
    """
    decoder = codecs.getincrementaldecoder(FEED_ENCODING)(errors="replace")
    parts = [decoder.decode(chunk) for chunk in chunks]
    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)


def _network_failure(error: NetworkError) -> Result[str]:
    report(error)
    return Result.failure("", error)
