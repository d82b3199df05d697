"""Unit tests for the feed HTTP adapter."""

import logging
from collections.abc import Callable, Iterator

import httpx
import pytest

from quakefeed.config import FeedSettings
from quakefeed.domain.shared.diagnostics import QUERY_LOGGER_NAME
from quakefeed.domain.shared.error import ErrorKind, NetworkError
from quakefeed.infrastructure.http.feed_client import decode_to_text, perform_request

FEED_URL = httpx.URL("https://example.com/feed.json")


class ChunkedStream(httpx.SyncByteStream):
    """Response body delivered in fixed chunks; records whether it was closed."""

    def __init__(self, chunks: list[bytes], fail_after: int | None = None) -> None:
        self._chunks = chunks
        self._fail_after = fail_after
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        for i, chunk in enumerate(self._chunks):
            if self._fail_after is not None and i >= self._fail_after:
                raise httpx.ReadError("connection reset mid-body")
            yield chunk

    def close(self) -> None:
        self.closed = True


def transport_for(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


class TestPerformRequest:
    def test_returns_body_on_200(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, content=b'{"features": []}')

        result = perform_request(FEED_URL, transport=transport_for(handler))

        assert result.ok is True
        assert result.value == '{"features": []}'
        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert requests[0].url == FEED_URL
        assert requests[0].content == b""
        assert "authorization" not in requests[0].headers

    def test_applies_default_timeouts(self) -> None:
        seen: dict[str, float | None] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.extensions["timeout"])
            return httpx.Response(200, content=b"{}")

        perform_request(FEED_URL, transport=transport_for(handler))

        assert seen["connect"] == 15.0
        assert seen["read"] == 10.0

    def test_applies_configured_timeouts(self) -> None:
        seen: dict[str, float | None] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.extensions["timeout"])
            return httpx.Response(200, content=b"{}")

        settings = FeedSettings(connect_timeout=2.5, read_timeout=1.5)
        perform_request(FEED_URL, settings=settings, transport=transport_for(handler))

        assert seen["connect"] == 2.5
        assert seen["read"] == 1.5

    def test_none_url_skips_request(self, caplog: pytest.LogCaptureFixture) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        result = perform_request(None, transport=transport_for(handler))

        assert result.value == ""
        assert caplog.records == []

    @pytest.mark.parametrize("status", [201, 204, 301, 404, 500, 503])
    def test_non_200_yields_empty_text(self, status, caplog: pytest.LogCaptureFixture) -> None:
        stream = ChunkedStream([b'{"features": []}'])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, stream=stream)

        with caplog.at_level(logging.ERROR, logger=QUERY_LOGGER_NAME):
            result = perform_request(FEED_URL, transport=transport_for(handler))

        assert result.value == ""
        assert isinstance(result.error, NetworkError)
        assert result.error.status_code == status
        assert stream.closed is True
        assert len(caplog.records) == 1
        assert str(status) in caplog.records[0].getMessage()

    @pytest.mark.parametrize(
        "exc",
        [
            httpx.ConnectError("connection refused"),
            httpx.ConnectTimeout("connect timed out"),
            httpx.ReadTimeout("read timed out"),
        ],
    )
    def test_transport_failure_yields_empty_text(self, exc, caplog: pytest.LogCaptureFixture) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        with caplog.at_level(logging.ERROR, logger=QUERY_LOGGER_NAME):
            result = perform_request(FEED_URL, transport=transport_for(handler))

        assert result.value == ""
        assert result.error_kind is ErrorKind.NETWORK
        assert result.error.cause is exc
        assert len(caplog.records) == 1

    def test_read_failure_mid_body_closes_stream(self) -> None:
        stream = ChunkedStream([b'{"features": ', b"[]}"], fail_after=1)

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, stream=stream)

        result = perform_request(FEED_URL, transport=transport_for(handler))

        assert result.value == ""
        assert result.error_kind is ErrorKind.NETWORK
        assert stream.closed is True

    def test_success_closes_stream(self) -> None:
        stream = ChunkedStream([b'{"features": ', b"[]}"])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, stream=stream)

        result = perform_request(FEED_URL, transport=transport_for(handler))

        assert result.value == '{"features": []}'
        assert stream.closed is True

    def test_body_split_across_reads_matches_single_read(self) -> None:
        body = '{"features": [{"properties": {"place": "Ōkawa, 日本"}}]}\n'.encode()
        chunked = ChunkedStream([body[i : i + 3] for i in range(0, len(body), 3)])

        result_chunked = perform_request(
            FEED_URL,
            transport=transport_for(lambda request: httpx.Response(200, stream=chunked)),
        )
        result_whole = perform_request(
            FEED_URL,
            transport=transport_for(lambda request: httpx.Response(200, content=body)),
        )

        assert result_chunked.value == result_whole.value == body.decode("utf-8")


class TestDecodeToText:
    def test_multibyte_sequence_split_between_chunks(self) -> None:
        encoded = "Ōkawa".encode()  # "Ō" is two bytes

        assert decode_to_text([encoded[:1], encoded[1:]]) == "Ōkawa"

    def test_chunking_independent(self) -> None:
        text = "línea uno\r\nlínea dos\nлиния три\n地震"
        body = text.encode("utf-8")

        single = decode_to_text([body])
        for size in (1, 2, 3, 5, 7):
            assert decode_to_text([body[i : i + size] for i in range(0, len(body), size)]) == single

        assert single == text

    def test_preserves_line_breaks(self) -> None:
        assert decode_to_text([b"line one\n", b"line two\r\n", b"line three"]) == (
            "line one\nline two\r\nline three"
        )

    def test_empty_body(self) -> None:
        assert decode_to_text([]) == ""

    def test_invalid_bytes_are_replaced(self) -> None:
        assert decode_to_text([b"ok \xff end"]) == "ok � end"

    def test_truncated_sequence_at_end_is_replaced(self) -> None:
        assert decode_to_text(["Ō".encode()[:1]]) == "�"
