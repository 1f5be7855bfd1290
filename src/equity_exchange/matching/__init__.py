"""
Startup/talent matching: model-backed scoring with a heuristic fallback,
equity range suggestion, and profile embeddings.
"""

from .embeddings import (
    SimilarItem,
    build_startup_embedding_text,
    build_talent_embedding_text,
    find_similar,
    generate_embedding,
)
from .equity import (
    CATEGORY_EQUITY_RANGES,
    DEFAULT_EQUITY_RANGE,
    parse_equity_range,
    suggest_equity_range,
)
from .heuristic import STAGE_FACTORS, generate_heuristic_match, stage_factor
from .scorer import MatchScorer, parse_match_response, score_match

__all__ = [
    # Scoring
    'MatchScorer',
    'parse_match_response',
    'score_match',
    # Heuristic
    'STAGE_FACTORS',
    'generate_heuristic_match',
    'stage_factor',
    # Equity
    'CATEGORY_EQUITY_RANGES',
    'DEFAULT_EQUITY_RANGE',
    'parse_equity_range',
    'suggest_equity_range',
    # Embeddings
    'SimilarItem',
    'build_startup_embedding_text',
    'build_talent_embedding_text',
    'find_similar',
    'generate_embedding',
]
