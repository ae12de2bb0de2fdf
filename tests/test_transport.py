"""
Property-based tests for HTTP Transport retry behavior and error mapping.

Feature: github remote
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from mergegate.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from mergegate.transport import HTTPTransport, RetryConfig

# Test strategies
backoff_factor_strategy = st.floats(min_value=1.1, max_value=5.0)
attempt_strategy = st.integers(min_value=0, max_value=5)
retry_after_strategy = st.integers(min_value=1, max_value=120)


def make_transport(config: RetryConfig | None = None) -> HTTPTransport:
    return HTTPTransport(
        base_url="https://api.github.com",
        token="test-token",
        retry_config=config,
    )


def make_response(status_code: int, data: object = None, headers: dict[str, str] | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = data if data is not None else {}
    response.headers = headers or {}
    response.links = {}
    return response


@given(
    backoff_factor=backoff_factor_strategy,
    attempt=attempt_strategy,
)
@settings(max_examples=100)
def test_exponential_backoff_timing(backoff_factor: float, attempt: int) -> None:
    """
    For any retry configuration with backoff_factor B and attempt number N,
    the wait time before attempt N is approximately B^N seconds (with jitter).
    """
    config = RetryConfig(
        backoff_factor=backoff_factor,
        jitter=0.1,
        max_backoff=1000.0,
    )
    transport = make_transport(config)

    expected_base = backoff_factor ** attempt
    actual = transport._get_backoff_time(attempt, None)

    max_expected = min(expected_base * 1.1, config.max_backoff)
    min_expected = min(expected_base * 0.9, config.max_backoff)

    assert min_expected <= actual <= max_expected, (
        f"Backoff time {actual} not in expected range [{min_expected}, {max_expected}] "
        f"for attempt {attempt} with factor {backoff_factor}"
    )
    transport.close()


@given(retry_after=retry_after_strategy)
@settings(max_examples=100)
def test_retry_after_header_respected(retry_after: int) -> None:
    """A Retry-After header of T seconds makes the transport wait exactly T seconds."""
    transport = make_transport(RetryConfig(respect_retry_after=True))

    actual = transport._get_backoff_time(0, str(retry_after))

    assert actual == float(retry_after)
    transport.close()


@given(
    status_code=st.sampled_from([400, 401, 403, 404, 405, 409, 422]),
    attempt=st.integers(min_value=0, max_value=2),
)
@settings(max_examples=100)
def test_no_retry_on_non_retryable_errors(status_code: int, attempt: int) -> None:
    """Client errors other than 429 are never retried."""
    transport = make_transport(RetryConfig(max_retries=3))

    assert not transport._should_retry(status_code, attempt)
    transport.close()


@given(
    status_code=st.sampled_from([429, 500, 502, 503]),
    attempt=st.integers(min_value=0, max_value=2),
)
@settings(max_examples=100)
def test_retry_on_retryable_errors(status_code: int, attempt: int) -> None:
    """Retryable status codes trigger a retry while under max_retries."""
    transport = make_transport(RetryConfig(max_retries=3))

    assert transport._should_retry(status_code, attempt)
    transport.close()


def test_max_retries_exceeded() -> None:
    """Retries stop after max_retries is reached."""
    transport = make_transport(RetryConfig(max_retries=2))

    assert transport._should_retry(503, 0)
    assert transport._should_retry(503, 1)
    assert not transport._should_retry(503, 2)
    transport.close()


class TestExecution:
    """Request execution against a patched HTTP client."""

    def test_retries_then_succeeds(self) -> None:
        transport = make_transport(RetryConfig(max_retries=3))
        responses = [make_response(502), make_response(200, {"ok": True})]

        with patch.object(transport._client, "request", side_effect=responses) as request, \
                patch("mergegate.transport.time.sleep") as sleep:
            assert transport.request("GET", "/rate_limit") == {"ok": True}

        assert request.call_count == 2
        sleep.assert_called_once()

    def test_retry_disabled_sends_once(self) -> None:
        transport = make_transport(RetryConfig(max_retries=3))

        with patch.object(transport._client, "request", return_value=make_response(503)) as request, \
                patch("mergegate.transport.time.sleep") as sleep:
            with pytest.raises(ServerError):
                transport.request("PUT", "/repos/octo/demo/pulls/1/merge", body={}, retry=False)

        assert request.call_count == 1
        sleep.assert_not_called()

    def test_connection_errors_become_server_errors(self) -> None:
        transport = make_transport(RetryConfig(max_retries=1))
        error = httpx.ConnectError("connection refused")

        with patch.object(transport._client, "request", side_effect=error) as request, \
                patch("mergegate.transport.time.sleep"):
            with pytest.raises(ServerError) as exc_info:
                transport.request("GET", "/user")

        assert request.call_count == 2
        assert exc_info.value.code == "CONNECTION_ERROR"

    def test_no_content(self) -> None:
        transport = make_transport()

        with patch.object(transport._client, "request", return_value=make_response(204)):
            assert transport.request("DELETE", "/repos/octo/demo/git/refs/heads/x") is None


@pytest.mark.parametrize(
    "status_code, headers, expected",
    [
        (401, {}, AuthenticationError),
        (403, {}, AuthorizationError),
        (403, {"X-RateLimit-Remaining": "0", "Retry-After": "30"}, RateLimitedError),
        (404, {}, NotFoundError),
        (405, {}, ConflictError),
        (409, {}, ConflictError),
        (422, {}, ValidationError),
        (429, {"Retry-After": "12"}, RateLimitedError),
        (500, {}, ServerError),
        (502, {}, ServerError),
    ],
)
def test_error_mapping(status_code: int, headers: dict[str, str], expected: type) -> None:
    transport = make_transport()
    response = make_response(
        status_code,
        {"message": "Something went wrong"},
        {**headers, "X-GitHub-Request-Id": "ABCD:1234"},
    )

    error = transport._parse_error_response(response)

    assert type(error) is expected
    assert error.message == "Something went wrong"
    assert error.request_id == "ABCD:1234"
    if isinstance(error, RateLimitedError):
        assert error.retry_after == int(headers["Retry-After"])
    transport.close()


def test_error_without_json_body() -> None:
    transport = make_transport()
    response = make_response(500)
    response.json.side_effect = ValueError("not json")

    error = transport._parse_error_response(response)

    assert isinstance(error, ServerError)
    assert error.message == "HTTP 500"
    transport.close()
