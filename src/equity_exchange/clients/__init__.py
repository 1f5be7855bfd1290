"""
External service clients for the Equity Exchange core.
"""

from .openai_client import OpenAIClient

__all__ = [
    'OpenAIClient',
]
