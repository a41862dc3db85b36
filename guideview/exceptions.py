"""Exception hierarchy for guideview.

Exception Hierarchy:
    GuideviewError (base)
    ├── FetchError - a guide could not be retrieved
    └── ConfigurationError - invalid environment settings

Rendering never raises: unknown markdown nodes and unknown code languages
degrade to plain text instead.

Usage:
    from guideview.exceptions import FetchError

    try:
        text = await fetcher.fetch("textguide")
    except FetchError as e:
        logger.warning("Guide unavailable: %s", e)
"""

from typing import Any, Optional


class GuideviewError(Exception):
    """Base exception for all guideview errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., identifiers, URLs)
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
# Fetch Errors
# =============================================================================


class FetchError(GuideviewError):
    """A guide could not be fetched.

    Covers both non-success HTTP responses and transport failures. The two
    are only distinguished by ``reason`` and ``status_code``; callers treat
    them identically. Transport failures are flagged retryable, but nothing
    in guideview retries automatically.
    """

    def __init__(
        self,
        reason: str = "Guide fetch failed",
        *,
        identifier: Optional[str] = None,
        status_code: Optional[int] = None,
        **context: Any,
    ) -> None:
        self.reason = reason
        self.status_code = status_code
        if identifier is not None:
            context["identifier"] = identifier
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(reason, retryable=status_code is None, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GuideviewError):
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
