"""
Tests for the errors module.
"""

from equity_exchange.errors import (
    ClientError,
    EquityExchangeError,
    MatchResponseError,
    OpenAIError,
    OpenAIModelError,
    OpenAIRateLimitError,
    ScoringError,
    SigningError,
    TemplateError,
    UnknownTemplateError,
    UnresolvedPlaceholderError,
    wrap_openai_error,
)


class TestErrorHierarchy:
    """Test error class hierarchy."""

    def test_base_error_with_context(self):
        """Test that base error captures context."""
        error = EquityExchangeError(
            "Something went wrong",
            context={"key": "value", "count": 42},
        )

        assert error.message == "Something went wrong"
        assert error.context == {"key": "value", "count": 42}
        assert "context=" in str(error)
        assert "key" in str(error)

    def test_base_error_without_context(self):
        """Test error without context."""
        error = EquityExchangeError("Simple error")

        assert error.message == "Simple error"
        assert error.context == {}
        assert str(error) == "Simple error"

    def test_client_error_inheritance(self):
        """Test client error hierarchy."""
        assert issubclass(OpenAIError, ClientError)
        assert issubclass(OpenAIRateLimitError, OpenAIError)
        assert issubclass(OpenAIModelError, OpenAIError)
        assert issubclass(ClientError, EquityExchangeError)

    def test_domain_error_inheritance(self):
        """Test scoring, template and signing errors."""
        assert isinstance(MatchResponseError("bad"), ScoringError)
        assert isinstance(UnknownTemplateError("nope"), TemplateError)
        assert isinstance(UnresolvedPlaceholderError(["a"]), TemplateError)
        assert isinstance(SigningError("no"), EquityExchangeError)

    def test_unresolved_placeholder_error(self):
        """Test placeholder names are kept on the error and in context."""
        error = UnresolvedPlaceholderError(["company_name", "date"])

        assert error.placeholders == ["company_name", "date"]
        assert error.message == "Unresolved template placeholders: company_name, date"
        assert error.context["placeholders"] == ["company_name", "date"]


class TestErrorWrapping:
    """Test error wrapping utilities."""

    def test_wrap_openai_rate_limit(self):
        """Test wrapping rate limit errors."""
        wrapped = wrap_openai_error(Exception("Rate limit exceeded"))

        assert isinstance(wrapped, OpenAIRateLimitError)
        assert "rate limit" in wrapped.message.lower()

    def test_wrap_openai_content_policy(self):
        """Test wrapping content policy errors."""
        wrapped = wrap_openai_error(Exception("Content policy violation: refused to process"))

        assert isinstance(wrapped, OpenAIModelError)
        assert wrapped.context.get("error_type") == "Exception"

    def test_wrap_openai_generic(self):
        """Test wrapping generic OpenAI errors."""
        original = ConnectionError("Unknown API error")
        wrapped = wrap_openai_error(original, context={"model": "gpt-4o-mini"})

        assert type(wrapped) is OpenAIError
        assert wrapped.context["model"] == "gpt-4o-mini"
        assert wrapped.context["original_error"] == "Unknown API error"
        assert wrapped.context["error_type"] == "ConnectionError"
