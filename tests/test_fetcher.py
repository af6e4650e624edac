"""Tests for the release fetcher."""

import httpx
import pytest

from wp_update_handler.core.fetcher import FetchError, FetchResult, ReleaseFetcher


URL = "https://api.acme.test/acme-widgets.json"


def make_fetcher(handler):
    return ReleaseFetcher(client=httpx.Client(transport=httpx.MockTransport(handler)))


# ═══════════════════════════════════════════
# Success
# ═══════════════════════════════════════════


class TestSuccess:
    def test_decodes_json_object(self):
        fetcher = make_fetcher(lambda request: httpx.Response(200, json={"version": "2.0.0"}))
        result = fetcher.fetch(URL)
        assert result.ok is True
        assert result.data == {"version": "2.0.0"}
        assert result.error is None
        assert result.status_code == 200

    def test_empty_object_is_success(self):
        fetcher = make_fetcher(lambda request: httpx.Response(200, text="{}"))
        result = fetcher.fetch(URL)
        assert result.ok is True
        assert result.data == {}

    def test_requests_given_url(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={})

        make_fetcher(handler).fetch(URL)
        assert seen == [URL]


# ═══════════════════════════════════════════
# Failure Classification
# ═══════════════════════════════════════════


class TestFailures:
    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = make_fetcher(handler).fetch(URL)
        assert result.ok is False
        assert result.error is FetchError.TRANSPORT
        assert result.data is None

    def test_timeout_is_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        assert make_fetcher(handler).fetch(URL).error is FetchError.TRANSPORT

    @pytest.mark.parametrize("status", [301, 404, 500, 503])
    def test_bad_status(self, status):
        fetcher = make_fetcher(lambda request: httpx.Response(status, json={"version": "2.0.0"}))
        result = fetcher.fetch(URL)
        assert result.error is FetchError.BAD_STATUS
        assert result.status_code == status
        assert result.data is None

    @pytest.mark.parametrize("body", ["", "   \n"])
    def test_empty_body(self, body):
        result = make_fetcher(lambda request: httpx.Response(200, text=body)).fetch(URL)
        assert result.error is FetchError.EMPTY_BODY

    def test_invalid_json(self):
        result = make_fetcher(lambda request: httpx.Response(200, text="<html>oops</html>")).fetch(URL)
        assert result.error is FetchError.INVALID_JSON

    @pytest.mark.parametrize(
        "body",
        [
            '{"version": ' + "1" * 5000 + "}",
            "[" * 100000 + "]" * 100000,
        ],
        ids=["oversized-integer", "deep-nesting"],
    )
    def test_undecodable_json_is_invalid(self, body):
        result = make_fetcher(lambda request: httpx.Response(200, text=body)).fetch(URL)
        assert result.error is FetchError.INVALID_JSON
        assert result.data is None

    @pytest.mark.parametrize("body", ["null", "42", '"2.0.0"', "[1, 2]"])
    def test_non_object_json(self, body):
        result = make_fetcher(lambda request: httpx.Response(200, text=body)).fetch(URL)
        assert result.error is FetchError.INVALID_JSON
        assert result.ok is False


class TestFetchResult:
    def test_failure_constructor(self):
        result = FetchResult.failure(FetchError.BAD_STATUS, status_code=404, detail="HTTP 404")
        assert result.ok is False
        assert result.status_code == 404
        assert result.detail == "HTTP 404"
