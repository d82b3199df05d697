"""Request URL construction."""

import httpx

from quakefeed.domain.shared.diagnostics import report
from quakefeed.domain.shared.error import MalformedUrlError
from quakefeed.domain.shared.result import Result

SUPPORTED_SCHEMES = ("http", "https")


def build_url(text: str | None) -> Result[httpx.URL | None]:
    """Parse request text into an absolute HTTP(S) URL.

    Returns:
        Result holding the parsed URL, or None with a MalformedUrlError.
    """
    if not text or not text.strip():
        return _malformed(MalformedUrlError("Problem building the URL: empty request URL"))

    try:
        url = httpx.URL(text.strip())
    except httpx.InvalidURL as e:
        return _malformed(MalformedUrlError(f"Problem building the URL: {e}", cause=e))

    if url.scheme not in SUPPORTED_SCHEMES:
        return _malformed(
            MalformedUrlError(f"Problem building the URL: unsupported scheme in {text!r}")
        )
    if not url.host:
        return _malformed(MalformedUrlError(f"Problem building the URL: no host in {text!r}"))

    return Result.success(url)


def _malformed(error: MalformedUrlError) -> Result[httpx.URL | None]:
    report(error)
    return Result.failure(None, error)
