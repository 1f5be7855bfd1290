"""
Equity Exchange core

SAFE document rendering and signing, and startup/talent match scoring for an
equity-for-talent marketplace, with OpenAI-assisted scoring and a local
heuristic fallback.
"""

__version__ = '0.1.0'

# Re-export key classes for convenience
from .matching import (
    MatchScorer,
    score_match,
    suggest_equity_range,
)
from .safe import (
    RenderedSafe,
    build_template_vars,
    find_unresolved_placeholders,
    generate_safe_document,
    render_safe_document,
    render_template,
    sign_safe_document,
)
from .models import (
    Deal,
    DealStatus,
    MatchResult,
    MatchSource,
    OpenRole,
    SafeDocument,
    SafeTemplate,
    SafeTerms,
    Startup,
    TalentProfile,
)
from .logging import (
    configure_logging,
    get_logger,
    logging_context,
    StageTimer,
)
from .errors import (
    EquityExchangeError,
    OpenAIError,
    ScoringError,
    MatchResponseError,
    TemplateError,
    UnresolvedPlaceholderError,
    UnknownTemplateError,
    SigningError,
)

__all__ = [
    # Version
    '__version__',
    # Matching
    'MatchScorer',
    'score_match',
    'suggest_equity_range',
    # SAFE
    'RenderedSafe',
    'build_template_vars',
    'find_unresolved_placeholders',
    'generate_safe_document',
    'render_safe_document',
    'render_template',
    'sign_safe_document',
    # Models
    'Deal',
    'DealStatus',
    'MatchResult',
    'MatchSource',
    'OpenRole',
    'SafeDocument',
    'SafeTemplate',
    'SafeTerms',
    'Startup',
    'TalentProfile',
    # Logging
    'configure_logging',
    'get_logger',
    'logging_context',
    'StageTimer',
    # Errors
    'EquityExchangeError',
    'OpenAIError',
    'ScoringError',
    'MatchResponseError',
    'TemplateError',
    'UnresolvedPlaceholderError',
    'UnknownTemplateError',
    'SigningError',
]
