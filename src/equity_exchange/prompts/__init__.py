"""
LLM prompts for the Equity Exchange core.
"""

from .match_prompts import (
    MATCH_SYSTEM_PROMPT,
    build_match_prompt,
    build_match_user_prompt,
)

__all__ = [
    'MATCH_SYSTEM_PROMPT',
    'build_match_prompt',
    'build_match_user_prompt',
]
