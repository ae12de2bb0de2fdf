"""mergegate exception classes."""


class MergeGateError(Exception):
    """Base exception for all mergegate errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(MergeGateError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class PullRequestNotFoundError(MergeGateError):
    """Raised when the tracked pull request has no cached snapshot."""

    def __init__(self, pull_id: int) -> None:
        super().__init__(
            "PULL_REQUEST_NOT_FOUND", f"Pull request is null for ID: {pull_id}"
        )
        self.pull_id = pull_id


class AuthenticationError(MergeGateError):
    """Raised when the API token is rejected."""

    pass


class AuthorizationError(MergeGateError):
    """Raised when access is denied."""

    pass


class NotFoundError(MergeGateError):
    """Raised when a resource is not found."""

    pass


class ConflictError(MergeGateError):
    """Raised on conflicts (not mergeable, head branch moved, etc.)."""

    pass


class RateLimitedError(MergeGateError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(MergeGateError):
    """Raised on validation errors."""

    pass


class ServerError(MergeGateError):
    """Raised on server errors (5xx) and connection failures."""

    pass
