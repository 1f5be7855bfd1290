"""
OpenAI client wrapper for the Equity Exchange core.

Handles:
- JSON-object chat completions for match scoring (single attempt)
- Embedding generation for profile similarity (retried with backoff)
- Translation of SDK failures into the errors hierarchy
"""

import os

from openai import AsyncOpenAI
from tenacity import retry, stop_after_attempt, wait_exponential

from ..errors import OpenAIModelError, wrap_openai_error

# text-embedding-3-small input limit, with headroom
MAX_EMBEDDING_CHARS = 8000


class OpenAIClient:
    """
    Async OpenAI client for scoring and embeddings.

    Configuration via environment variables:
    - OPENAI_API_KEY: Required API key
    - OPENAI_CHAT_MODEL: Chat model (default: gpt-4o-mini)
    - OPENAI_EMBEDDING_MODEL: Embedding model (default: text-embedding-3-small)
    """

    def __init__(
        self,
        api_key: str | None = None,
        chat_model: str | None = None,
        embedding_model: str | None = None,
    ):
        """
        Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key (defaults to OPENAI_API_KEY env var)
            chat_model: Model for chat completions (defaults to OPENAI_CHAT_MODEL or gpt-4o-mini)
            embedding_model: Model for embeddings (defaults to OPENAI_EMBEDDING_MODEL
                or text-embedding-3-small)
        """
        self.api_key = api_key or os.getenv('OPENAI_API_KEY')
        if not self.api_key:
            raise ValueError('OPENAI_API_KEY environment variable is required')

        self.chat_model = chat_model or os.getenv('OPENAI_CHAT_MODEL', 'gpt-4o-mini')
        self.embedding_model = embedding_model or os.getenv(
            'OPENAI_EMBEDDING_MODEL', 'text-embedding-3-small'
        )

        self._client = AsyncOpenAI(api_key=self.api_key)

    async def chat_completion_json(
        self,
        messages: list[dict[str, str]],
        model: str | None = None,
        temperature: float = 0.4,
        max_tokens: int | None = 800,
    ) -> str:
        """
        Get a chat completion constrained to a single JSON object.

        No retry: callers treat any failure as final.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Override the default chat model
            temperature: Sampling temperature
            max_tokens: Maximum tokens in response

        Returns:
            The raw JSON text of the assistant's response

        Raises:
            OpenAIError: API call failed
            OpenAIModelError: Response had no content
        """
        try:
            response = await self._client.chat.completions.create(
                model=model or self.chat_model,
                messages=messages,  # type: ignore
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={'type': 'json_object'},
            )
        except Exception as e:
            raise wrap_openai_error(e, context={'model': model or self.chat_model}) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise OpenAIModelError(
                'Empty response from OpenAI',
                context={'model': model or self.chat_model},
            )
        return content

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
    )
    async def create_embedding(self, text: str) -> list[float]:
        """
        Create an embedding for a single text.

        Args:
            text: Text to embed

        Returns:
            Embedding vector as list of floats
        """
        cleaned_text = ' '.join(text.split())[:MAX_EMBEDDING_CHARS]

        response = await self._client.embeddings.create(
            model=self.embedding_model,
            input=cleaned_text,
        )
        return response.data[0].embedding

    async def health_check(self) -> dict[str, bool | str]:
        """
        Verify API connectivity with a minimal request.

        Returns:
            Dict with 'healthy' bool and optional 'error' message
        """
        try:
            await self._client.models.retrieve(self.chat_model)
            return {
                'healthy': True,
                'chat_model': self.chat_model,
                'embedding_model': self.embedding_model,
            }
        except Exception as e:
            return {'healthy': False, 'error': str(e)}

    async def close(self):
        """Close the client connection."""
        await self._client.close()
