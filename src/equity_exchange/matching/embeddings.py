"""
Profile embeddings for similarity search.

Builds the text that represents a startup or talent profile, embeds it
through OpenAI, and ranks candidate vectors by cosine similarity. Without a
client (or on failure) embedding degrades to an empty vector, which ranks
nothing.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..clients.openai_client import OpenAIClient
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass
class SimilarItem:
    """A ranked candidate."""

    id: str
    similarity: float


def _get(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def build_startup_embedding_text(startup: Any) -> str:
    """Join name, tagline, description, industry and stage into one passage."""
    industry = _get(startup, 'industry')
    stage = _get(startup, 'stage')
    parts = [
        _get(startup, 'name') or '',
        _get(startup, 'tagline') or '',
        _get(startup, 'description') or '',
        f'Industry: {industry}' if industry else '',
        f'Stage: {stage}' if stage else '',
    ]
    return '. '.join(p for p in parts if p).strip()


def build_talent_embedding_text(talent: Any) -> str:
    """Join title, bio, skills and category into one passage."""
    skills = _get(talent, 'skills') or []
    category = _get(talent, 'category')
    parts = [
        _get(talent, 'title') or '',
        _get(talent, 'bio') or '',
        f'Skills: {", ".join(skills)}' if skills else '',
        f'Category: {category}' if category else '',
    ]
    return '. '.join(p for p in parts if p).strip()


async def generate_embedding(text: str, client: OpenAIClient | None = None) -> list[float]:
    """
    Embed text, or return [] when no client is configured or the call fails.

    Args:
        text: Passage to embed
        client: OpenAI client; None disables embedding

    Returns:
        Embedding vector, possibly empty
    """
    if client is None:
        logger.warning('embeddings.disabled', reason='no_api_key')
        return []
    if not text.strip():
        return []
    try:
        return await client.create_embedding(text)
    except Exception as e:
        logger.error('embeddings.failed', error=str(e), error_type=type(e).__name__)
        return []


def find_similar(
    embedding: list[float],
    candidates: Iterable[tuple[str, list[float]]],
    limit: int = 10,
) -> list[SimilarItem]:
    """
    Rank candidate vectors by cosine similarity to an embedding.

    Candidates with empty, zero or mismatched-dimension vectors are skipped.

    Args:
        embedding: Query vector
        candidates: (id, vector) pairs
        limit: Maximum results

    Returns:
        SimilarItem list, most similar first
    """
    if not embedding or limit <= 0:
        return []

    query = np.asarray(embedding, dtype=float)
    query_norm = np.linalg.norm(query)
    if query_norm == 0:
        return []

    ids: list[str] = []
    vectors: list[list[float]] = []
    for item_id, vector in candidates:
        if vector and len(vector) == len(query):
            ids.append(item_id)
            vectors.append(vector)
    if not vectors:
        return []

    matrix = np.asarray(vectors, dtype=float)
    norms = np.linalg.norm(matrix, axis=1)
    valid = norms > 0
    scores = np.zeros(len(ids))
    scores[valid] = matrix[valid] @ query / (norms[valid] * query_norm)

    order = [i for i in np.argsort(-scores, kind='stable') if valid[i]]
    return [SimilarItem(id=ids[i], similarity=float(scores[i])) for i in order[:limit]]
