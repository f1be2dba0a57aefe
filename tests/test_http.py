"""Tests for the request dispatcher."""

import json

import httpx
import pytest

from bank_of_thailand.core.errors import BOTError, ErrorKind
from bank_of_thailand.core.http import (
    Failure,
    HttpClient,
    RequestSpec,
    Success,
    classify_response,
    decode_json,
    parse_retry_after,
    resolve_url,
    unwrap,
)

BASE_URL = "https://gateway.api.bot.or.th"
URL = f"{BASE_URL}/test/path"


def make_http(handler, timeout=5):
    return HttpClient(base_url=BASE_URL, timeout=timeout, transport=httpx.MockTransport(handler))


class TestRequestSpec:
    def test_method_is_normalized(self):
        assert RequestSpec("get", "/x").method == "GET"

    def test_unsupported_method(self):
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            RequestSpec("DELETE", "/x")


class TestResolveUrl:
    def test_relative_path_uses_base(self):
        assert resolve_url("/test/path", BASE_URL) == URL

    def test_absolute_url_is_verbatim(self):
        assert resolve_url("https://custom.api.example.com/endpoint", BASE_URL) == (
            "https://custom.api.example.com/endpoint"
        )
        assert resolve_url("http://plain.example.com/x", BASE_URL) == "http://plain.example.com/x"

    def test_missing_base_url(self):
        with pytest.raises(BOTError) as exc_info:
            resolve_url("/test", "")
        assert exc_info.value.kind == ErrorKind.CONFIGURATION


class TestDecoding:
    def test_empty_body_is_empty_object(self):
        assert decode_json("") == {}
        assert decode_json(None) == {}

    def test_list_body(self):
        assert decode_json('[{"a": 1}]') == [{"a": 1}]

    def test_malformed_body_raises(self):
        with pytest.raises(ValueError):
            decode_json("{not json")

    @pytest.mark.parametrize(
        "header,expected",
        [(None, None), ("30", 30), (" 7 ", 7), ("Wed, 21 Oct 2015 07:28:00 GMT", None)],
    )
    def test_parse_retry_after(self, header, expected):
        assert parse_retry_after(header) == expected


class TestClassifyResponse:
    """Status code to outcome kind."""

    def test_success(self):
        outcome = classify_response(httpx.Response(200, json={"data": "test"}), URL)
        assert outcome == Success({"data": "test"}, status_code=200)
        assert outcome.ok is True

    def test_success_with_empty_body(self):
        outcome = classify_response(httpx.Response(204), URL)
        assert isinstance(outcome, Success)
        assert outcome.json == {}

    def test_success_with_invalid_json(self):
        outcome = classify_response(httpx.Response(200, content=b"<html>"), URL)

        assert isinstance(outcome, Failure)
        assert outcome.kind == ErrorKind.REQUEST
        assert outcome.message.startswith("Invalid JSON response")

    @pytest.mark.parametrize(
        "status,kind,text",
        [
            (401, ErrorKind.AUTHENTICATION, "Check your API token"),
            (403, ErrorKind.AUTHENTICATION, "Access forbidden"),
            (404, ErrorKind.NOT_FOUND, URL),
            (500, ErrorKind.SERVER, "500"),
            (503, ErrorKind.SERVER, "503"),
            (418, ErrorKind.REQUEST, "418"),
            (302, ErrorKind.REQUEST, "302"),
        ],
    )
    def test_failures(self, status, kind, text):
        outcome = classify_response(httpx.Response(status, text="nope"), URL)

        assert isinstance(outcome, Failure)
        assert outcome.ok is False
        assert outcome.kind == kind
        assert outcome.status_code == status
        assert text in outcome.message

    def test_rate_limited_with_retry_after(self):
        response = httpx.Response(429, headers={"Retry-After": "60"})
        outcome = classify_response(response, URL)

        assert outcome.kind == ErrorKind.RATE_LIMITED
        assert outcome.retry_after == 60

    def test_rate_limited_without_retry_after(self):
        outcome = classify_response(httpx.Response(429), URL)

        assert outcome.kind == ErrorKind.RATE_LIMITED
        assert outcome.retry_after is None


class TestUnwrap:
    def test_success(self):
        assert unwrap(Success([1, 2])) == [1, 2]

    def test_failure_raises_error_with_metadata(self):
        failure = Failure(ErrorKind.RATE_LIMITED, "Rate limit exceeded", status_code=429, retry_after=5, url=URL)

        with pytest.raises(BOTError) as exc_info:
            unwrap(failure)

        error = exc_info.value
        assert error.kind == ErrorKind.RATE_LIMITED
        assert error.retry_after == 5
        assert error.status_code == 429
        assert error.to_dict()["error"] == "rate_limited"


class TestHttpClientExecute:
    """Tests for HttpClient.execute over a mock transport."""

    def test_sends_headers_and_query(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        outcome = make_http(handler).execute(
            RequestSpec("GET", "/test/path", {"date": "2025-01-01"}),
            token="test_token_123",
        )

        assert outcome == Success({"ok": True}, status_code=200)
        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/test/path"
        assert request.url.params["date"] == "2025-01-01"
        assert request.headers["Authorization"] == "test_token_123"
        assert request.headers["Content-Type"] == "application/json"

    def test_empty_query_is_not_attached(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        make_http(handler).execute(RequestSpec("GET", "/test/path"), token="t")

        assert str(seen[0].url) == URL

    def test_post_serializes_body(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"created": True})

        make_http(handler).execute(
            RequestSpec("POST", "/test/path", body={"keyword": "debt"}),
            token="t",
        )

        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"keyword": "debt"}

    def test_not_found_message_includes_url(self):
        outcome = make_http(lambda request: httpx.Response(404)).execute(
            RequestSpec("GET", "/missing", {"a": "1"}),
            token="t",
        )

        assert outcome.kind == ErrorKind.NOT_FOUND
        assert f"{BASE_URL}/missing?a=1" in outcome.message

    def test_timeout_is_request_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        outcome = make_http(handler).execute(RequestSpec("GET", "/slow"), token="t")

        assert isinstance(outcome, Failure)
        assert outcome.kind == ErrorKind.REQUEST
        assert outcome.message == "Request timeout: timed out"

    def test_connection_failure_is_request_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        outcome = make_http(handler).execute(RequestSpec("GET", "/down"), token="t")

        assert outcome.kind == ErrorKind.REQUEST
        assert "connection refused" in outcome.message

    def test_missing_token_fails_before_network(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200)

        with pytest.raises(BOTError) as exc_info:
            make_http(handler).execute(RequestSpec("GET", "/x"), token="")

        assert exc_info.value.kind == ErrorKind.CONFIGURATION
        assert calls == []

    def test_single_attempt_per_execute(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        outcome = make_http(handler).execute(RequestSpec("GET", "/x"), token="t")

        assert outcome.kind == ErrorKind.SERVER
        assert len(calls) == 1

    def test_timeout_applies_to_request(self):
        seen = []

        def handler(request):
            seen.append(request.extensions["timeout"])
            return httpx.Response(200, json={})

        make_http(handler, timeout=30).execute(RequestSpec("GET", "/x"), token="t", timeout=2)

        assert seen[0]["connect"] == 2
        assert seen[0]["read"] == 2

    def test_context_manager_closes_client(self):
        with make_http(lambda request: httpx.Response(200, json={})) as http:
            http.execute(RequestSpec("GET", "/x"), token="t")
            assert http._client is not None
        assert http._client is None
