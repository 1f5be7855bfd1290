"""
Custom exceptions for the Equity Exchange core.

Provides:
- Typed exception hierarchy for different failure modes
- Error context preservation for debugging
- Wrapping of OpenAI SDK exceptions into the hierarchy
"""

from typing import Any


class EquityExchangeError(Exception):
    """Base exception for all equity exchange errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# =============================================================================
# Client Errors
# =============================================================================


class ClientError(EquityExchangeError):
    """Base class for client-related errors."""

    pass


class OpenAIError(ClientError):
    """Error from OpenAI API calls."""

    pass


class OpenAIRateLimitError(OpenAIError):
    """Rate limit exceeded on OpenAI API."""

    pass


class OpenAIModelError(OpenAIError):
    """Model refused request or returned an empty/invalid response."""

    pass


# =============================================================================
# Scoring Errors
# =============================================================================


class ScoringError(EquityExchangeError):
    """Base class for match scoring errors.

    Never escapes MatchScorer.score_match; used internally to trigger the
    heuristic fallback with a logged reason.
    """

    pass


class MatchResponseError(ScoringError):
    """Model response could not be parsed into a match result."""

    pass


# =============================================================================
# Template / Document Errors
# =============================================================================


class TemplateError(EquityExchangeError):
    """Base class for SAFE template errors."""

    pass


class UnresolvedPlaceholderError(TemplateError):
    """Strict rendering found placeholders with no value."""

    def __init__(self, placeholders: list[str], context: dict[str, Any] | None = None):
        ctx = context or {}
        ctx['placeholders'] = placeholders
        super().__init__(
            f"Unresolved template placeholders: {', '.join(placeholders)}",
            context=ctx,
        )
        self.placeholders = placeholders


class UnknownTemplateError(TemplateError):
    """Requested SAFE template name is not recognised."""

    pass


class SigningError(EquityExchangeError):
    """A SAFE document cannot accept the requested signature."""

    pass


# =============================================================================
# Error Handling Utilities
# =============================================================================


def wrap_openai_error(exc: Exception, context: dict[str, Any] | None = None) -> OpenAIError:
    """
    Wrap an OpenAI exception in our typed error hierarchy.

    Args:
        exc: The original exception
        context: Additional context for debugging

    Returns:
        Typed OpenAIError subclass
    """
    error_str = str(exc).lower()
    ctx = context or {}
    ctx['original_error'] = str(exc)
    ctx['error_type'] = type(exc).__name__

    if 'rate limit' in error_str or 'rate_limit' in error_str:
        return OpenAIRateLimitError(
            f"OpenAI rate limit exceeded: {exc}",
            context=ctx,
        )
    elif 'content policy' in error_str or 'refused' in error_str:
        return OpenAIModelError(
            f"OpenAI model refused request: {exc}",
            context=ctx,
        )
    else:
        return OpenAIError(
            f"OpenAI API error: {exc}",
            context=ctx,
        )
