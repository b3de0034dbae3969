"""LLM-specific error hierarchy.

Every LLM error carries an explicit ``kind`` tag assigned where the HTTP
call is made.  Retry classification reads the tag, never the exception
type of the HTTP library.
"""

from __future__ import annotations

import enum

from clausegate.exceptions import ClauseGateError


class ErrorKind(str, enum.Enum):
    """Closed set of generation failure kinds."""

    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    AUTH = "auth"
    BAD_REQUEST = "bad_request"
    QUOTA = "quota"
    CONNECTION = "connection"
    EMPTY_RESPONSE = "empty_response"
    CONFIG = "config"
    OTHER = "other"


RETRYABLE_KINDS: frozenset[ErrorKind] = frozenset({
    ErrorKind.RATE_LIMIT,
    ErrorKind.TIMEOUT,
    ErrorKind.SERVER_ERROR,
})


class LLMClientError(ClauseGateError):
    """Base for all LLM client errors."""

    default_kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, *, kind: ErrorKind | None = None) -> None:
        self.kind = kind or self.default_kind
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_KINDS


class LLMConfigError(LLMClientError):
    """Missing or invalid LLM configuration (e.g., no API key)."""

    default_kind = ErrorKind.CONFIG


class LLMRateLimitError(LLMClientError):
    """Rate limited by the API (429).

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header),
            or None if not provided.
    """

    default_kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str = "Rate limited", retry_after: float | None = None) -> None:
        self.retry_after = retry_after
        if retry_after is not None:
            message = f"{message} (retry after {retry_after}s)"
        super().__init__(message)


class LLMAuthError(LLMClientError):
    """Authentication failed (401/403)."""

    default_kind = ErrorKind.AUTH


class LLMTimeoutError(LLMClientError):
    """A single attempt exceeded the client's network timeout."""

    default_kind = ErrorKind.TIMEOUT


class LLMServerError(LLMClientError):
    """Upstream server fault (5xx)."""

    default_kind = ErrorKind.SERVER_ERROR


class LLMResponseError(LLMClientError):
    """Unexpected or empty response from the LLM API."""


class GenerationError(LLMClientError):
    """Generation gave up, either on a permanent error or after the retry budget.

    Attributes:
        attempts: Number of attempts made before giving up.
        cause: The last underlying LLMClientError.
    """

    def __init__(self, attempts: int, cause: LLMClientError) -> None:
        self.attempts = attempts
        self.cause = cause
        super().__init__(
            f"LLM call failed after {attempts} attempt(s): {cause}",
            kind=cause.kind,
        )
