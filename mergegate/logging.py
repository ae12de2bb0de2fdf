"""
mergegate logging utilities.

Provides configurable logging for HTTP requests/responses and gate decisions,
plus the build log sink the merge gate reports to. Ensures API tokens never
reach a log record.
"""

import logging
import re
import traceback
from typing import Any, TextIO

# Create package loggers
_pkg_logger = logging.getLogger("mergegate")
_http_logger = logging.getLogger("mergegate.http")
_gate_logger = logging.getLogger("mergegate.gate")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"(?i)authorization['\"]?\s*[:=]\s*['\"]?(bearer|token)\s+[^\s'\",;]+"), "Authorization: [REDACTED]"),
    # GitHub personal access / app / oauth tokens
    (re.compile(r"\b(gh[pousr]_[A-Za-z0-9]{20,}|github_pat_[A-Za-z0-9_]{20,})\b"), "[TOKEN_REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    gate_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure mergegate logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        gate_level: Log level for gate decisions (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from mergegate.logging import configure_logging

        # Enable debug logging for HTTP requests
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _pkg_logger.setLevel(level)
    _pkg_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _gate_logger.setLevel(gate_level if gate_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a mergegate logger.

    Args:
        name: Logger name suffix (e.g., "http", "gate"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _pkg_logger
    return logging.getLogger(f"mergegate.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces API tokens, authorization headers and other secrets with
    redacted placeholders.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: authorization, secret, token, password)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = {"authorization", "secret", "token", "password", "api_key"}

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: dict[str, Any] | None = None,
) -> None:
    """Log an HTTP request at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    if body:
        log_parts.append(f"body={safe_log_dict(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
) -> None:
    """Log an HTTP response at DEBUG level."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    _http_logger.debug(" | ".join(log_parts))


class BuildLog:
    """
    Build log sink supplied by the build host.

    Every line is written to the host's text stream (if any) and mirrored to
    the ``mergegate.gate`` logger. Exceptions are printed with their stack
    trace, the way a build console shows them.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.stream = stream
        self.logger = logger or _gate_logger
        self.lines: list[str] = []

    def println(self, message: str) -> None:
        """Write one line to the build log."""
        message = mask_sensitive_data(message)
        self._write(message)
        self.logger.info(message)

    def print_exception(self, message: str, exc: BaseException) -> None:
        """Write a message followed by the exception's stack trace."""
        message = mask_sensitive_data(message)
        self._write(message)
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        trace = mask_sensitive_data(trace).rstrip("\n")
        for line in trace.splitlines():
            self._write(line)
        self.logger.warning("%s\n%s", message, trace)

    def _write(self, line: str) -> None:
        self.lines.append(line)
        if self.stream is not None:
            self.stream.write(line + "\n")


__all__ = [
    "BuildLog",
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
