"""
Configuration management for the Equity Exchange core.

Loads settings from environment variables with sensible defaults. The OpenAI
key is optional: without it, match scoring runs on the local heuristic.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / '.env'
if _env_file.exists():
    load_dotenv(_env_file)


class Config:
    """Configuration settings loaded from environment."""

    # OpenAI
    OPENAI_API_KEY: str = os.getenv('OPENAI_API_KEY', '')
    OPENAI_CHAT_MODEL: str = os.getenv('OPENAI_CHAT_MODEL', 'gpt-4o-mini')
    OPENAI_EMBEDDING_MODEL: str = os.getenv('OPENAI_EMBEDDING_MODEL', 'text-embedding-3-small')

    # Match scoring
    MATCH_TEMPERATURE: float = float(os.getenv('MATCH_TEMPERATURE', '0.4'))
    MATCH_MAX_TOKENS: int = int(os.getenv('MATCH_MAX_TOKENS', '800'))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def has_openai(cls) -> bool:
        """True when model-backed scoring and embeddings are available."""
        return bool(cls.OPENAI_API_KEY)

    @classmethod
    def validate(cls) -> list[str]:
        """
        List optional configuration that is missing.

        Nothing here is required to run; a missing key only switches the
        scorer to its heuristic path.

        Returns:
            List of missing configuration keys
        """
        missing = []
        if not cls.OPENAI_API_KEY:
            missing.append('OPENAI_API_KEY')
        return missing


# Singleton config instance
config = Config()
