"""
HTTP Transport for the GitHub REST API.

Handles HTTP communication with token authentication, automatic retry logic,
pagination and error handling.
"""

import random
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import httpx

from mergegate.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    MergeGateError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from mergegate.logging import log_http_request, log_http_response


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class HTTPTransport:
    """
    HTTP transport layer with token authentication and retry logic.

    Handles:
    - Bearer token authentication
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Link header pagination
    - Error response parsing into typed exceptions
    """

    API_VERSION = "2022-11-28"

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: API token sent as a bearer token
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": self.API_VERSION,
                "User-Agent": "mergegate",
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        retry: bool = True,
    ) -> Any:
        """
        Make a request.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/octo/demo/pulls/1")
            params: Query parameters
            body: JSON request body (for POST/PUT/PATCH)
            retry: Whether retryable failures are retried

        Returns:
            Parsed JSON response, or None for an empty response

        Raises:
            MergeGateError: On API errors
        """
        response = self._send(method, path, params=params, body=body, retry=retry)
        if response.status_code == 204:
            return None
        return response.json()

    def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        per_page: int = 100,
    ) -> Iterator[Any]:
        """
        Iterate over the items of a paginated list endpoint.

        Pages are fetched lazily, following the ``next`` link of each
        response.

        Args:
            path: API path of the list endpoint
            params: Extra query parameters for the first page
            per_page: Page size requested from the server

        Yields:
            Items of each page in order
        """
        url: str | None = path
        page_params: dict[str, Any] | None = {**(params or {}), "per_page": per_page}
        while url is not None:
            response = self._send("GET", url, params=page_params)
            yield from response.json()
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string
            page_params = None

    def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        retry: bool = True,
    ) -> httpx.Response:
        def make_request() -> httpx.Response:
            log_http_request(method, path, body=body)
            start = time.monotonic()
            response = self._client.request(method, path, params=params, json=body)
            log_http_response(
                response.status_code, path, (time.monotonic() - start) * 1000
            )
            return response

        return self._execute_with_retry(make_request, retry=retry)

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response], retry: bool = True
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request
            retry: When False the request is attempted exactly once

        Returns:
            Successful HTTP response

        Raises:
            MergeGateError: On non-retryable errors or after max retries
        """
        max_retries = self.retry_config.max_retries if retry else 0
        last_error: Exception | None = None

        for attempt in range(max_retries + 1):
            try:
                response = request_fn()

                if response.status_code < 400:
                    return response

                error = self._parse_error_response(response)

                if attempt >= max_retries or not self._should_retry(
                    response.status_code, attempt
                ):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                time.sleep(self._get_backoff_time(attempt, retry_after))

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                time.sleep(self._get_backoff_time(attempt, None))

        if last_error:
            if isinstance(last_error, MergeGateError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _parse_error_response(self, response: httpx.Response) -> MergeGateError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate MergeGateError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403:
            if response.headers.get("X-RateLimit-Remaining") == "0":
                return RateLimitedError(
                    "RATE_LIMITED", message, self._retry_after(response), request_id
                )
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code in (405, 409):
            return ConflictError("CONFLICT", message, request_id)
        elif status_code == 429:
            return RateLimitedError(
                "RATE_LIMITED", message, self._retry_after(response), request_id
            )
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ValidationError("VALIDATION_FAILED", message, request_id)

    @staticmethod
    def _retry_after(response: httpx.Response) -> int:
        try:
            return int(response.headers.get("Retry-After", "60"))
        except ValueError:
            return 60
