"""Custom exception hierarchy for newsreel.

Exception Hierarchy:
    NewsreelError (base)
    ├── ApiError - NewsAPI calls
    │   ├── ApiConnectionError (retryable)
    │   ├── ApiRateLimitError (retryable)
    │   ├── ApiAuthenticationError
    │   └── ApiResponseError
    └── ConfigurationError - Settings/configuration issues

Usage:
    from newsreel.exceptions import ApiConnectionError

    try:
        response = session.get(url, timeout=10)
    except requests.ConnectionError as e:
        raise ApiConnectionError("NewsAPI unreachable", service="newsapi") from e
"""

from typing import Any, Optional


class NewsreelError(Exception):
    """Base exception for all newsreel errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., query, status code)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# API Errors
# =============================================================================


class ApiError(NewsreelError):
    """Base exception for external API calls."""

    pass


class ApiConnectionError(ApiError):
    """Failed to connect to an external API - typically retryable."""

    def __init__(
        self,
        message: str = "API connection failed",
        *,
        service: Optional[str] = None,
        **context: Any,
    ) -> None:
        if service:
            context["service"] = service
        super().__init__(message, retryable=True, **context)


class ApiRateLimitError(ApiError):
    """Hit rate limit on an external API - retryable with backoff."""

    def __init__(
        self,
        message: str = "API rate limit exceeded",
        *,
        service: Optional[str] = None,
        retry_after: Optional[float] = None,
        **context: Any,
    ) -> None:
        if service:
            context["service"] = service
        if retry_after is not None:
            context["retry_after"] = retry_after
        super().__init__(message, retryable=True, **context)


class ApiAuthenticationError(ApiError):
    """Authentication with an external API failed."""

    def __init__(
        self,
        message: str = "API authentication failed",
        *,
        service: Optional[str] = None,
        **context: Any,
    ) -> None:
        if service:
            context["service"] = service
        super().__init__(message, retryable=False, **context)


class ApiResponseError(ApiError):
    """The API answered, but with an error status or an unreadable body."""

    def __init__(
        self,
        message: str = "API returned an error",
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        **context: Any,
    ) -> None:
        if status_code is not None:
            context["status_code"] = status_code
        if code:
            context["code"] = code
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NewsreelError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
