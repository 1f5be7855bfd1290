"""
Startup/talent match scoring.

Scores a startup (optionally a specific open role) against a talent profile.
With an OpenAI key the model produces the assessment; without one, or when
the call or its reply fails in any way, a local heuristic answers instead.
score_match therefore always returns a MatchResult, and the result's
`source` says which path produced it.

There is no retry, cache or timeout here: one failed model call goes
straight to the heuristic, and timeouts are the HTTP client's.
"""

import json
import math
import random
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..clients.openai_client import OpenAIClient
from ..config import config
from ..errors import MatchResponseError
from ..logging import StageTimer, get_logger
from ..models.match import MatchResult, MatchSource
from ..models.profiles import OpenRole, Startup, TalentProfile
from ..prompts.match_prompts import build_match_prompt
from .equity import suggest_equity_range
from .heuristic import generate_heuristic_match

logger = get_logger(__name__)

M = TypeVar('M', bound=BaseModel)

DEFAULT_SCORE = 50
DEFAULT_REASON = 'Match analysis completed'
DEFAULT_DEAL_STRUCTURE = 'Standard equity vesting'
MAX_REASONS = 5
MAX_RISK_FACTORS = 4


class MatchScorer:
    """
    Scores startup/talent compatibility.

    Pipeline:
    1. Build the scoring prompt and ask the chat model for a JSON object
    2. Validate and clamp the reply into a MatchResult
    3. On any failure in 1-2 (or with no client), fall back to the heuristic
    """

    def __init__(
        self,
        openai_client: OpenAIClient | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the scorer.

        Args:
            openai_client: Client for model scoring; None means heuristic only
            model: Override the client's chat model
            temperature: Sampling temperature (defaults to config.MATCH_TEMPERATURE)
            max_tokens: Response token cap (defaults to config.MATCH_MAX_TOKENS)
            rng: Random source for the heuristic (tests pass a seeded one)
        """
        self.openai_client = openai_client
        self.model = model
        self.temperature = config.MATCH_TEMPERATURE if temperature is None else temperature
        self.max_tokens = config.MATCH_MAX_TOKENS if max_tokens is None else max_tokens
        self.rng = rng

    @property
    def model_enabled(self) -> bool:
        return self.openai_client is not None

    async def score_match(
        self,
        startup: Startup | Mapping[str, Any],
        talent: TalentProfile | Mapping[str, Any],
        role: OpenRole | Mapping[str, Any] | None = None,
    ) -> MatchResult:
        """
        Score a startup/talent pair. Never raises.

        Args:
            startup: Startup model or raw record
            talent: TalentProfile model or raw record
            role: Optional OpenRole model or raw record

        Returns:
            MatchResult (source=MODEL or source=HEURISTIC)
        """
        startup_m = _coerce(Startup, startup)
        talent_m = _coerce(TalentProfile, talent)
        role_m = _coerce(OpenRole, role) if role is not None else None

        if self.openai_client is None:
            logger.info('match.fallback', reason='no_api_key')
            return self._heuristic(startup_m, talent_m, role_m)

        timer = StageTimer()
        try:
            messages = build_match_prompt(startup_m, talent_m, role_m)
            with timer.stage('model_call'):
                raw = await self.openai_client.chat_completion_json(
                    messages=messages,
                    model=self.model,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                )
            with timer.stage('parse'):
                result = parse_match_response(raw, role_m)
        except Exception as e:
            # Always-answer contract: any model or parse failure degrades
            logger.warning(
                'match.fallback',
                reason='model_error',
                error=str(e),
                error_type=type(e).__name__,
            )
            return self._heuristic(startup_m, talent_m, role_m)

        logger.info(
            'match.model_scored',
            score=result.score,
            success_probability=result.success_probability,
            **timer.summary(),
        )
        return result

    def _heuristic(
        self,
        startup: Startup,
        talent: TalentProfile,
        role: OpenRole | None,
    ) -> MatchResult:
        return generate_heuristic_match(startup, talent, role, rng=self.rng)


async def score_match(
    startup: Startup | Mapping[str, Any],
    talent: TalentProfile | Mapping[str, Any],
    role: OpenRole | Mapping[str, Any] | None = None,
) -> MatchResult:
    """
    Score one pair using process configuration.

    Model scoring is used when OPENAI_API_KEY is set; otherwise the heuristic.
    """
    client = None
    if config.has_openai():
        client = OpenAIClient(api_key=config.OPENAI_API_KEY, chat_model=config.OPENAI_CHAT_MODEL)
    try:
        return await MatchScorer(openai_client=client).score_match(startup, talent, role)
    finally:
        if client is not None:
            try:
                await client.close()
            except Exception as e:
                logger.warning(
                    'match.client_close_failed',
                    error=str(e),
                    error_type=type(e).__name__,
                )


# =============================================================================
# Response validation
# =============================================================================


def parse_match_response(raw: str, role: OpenRole | None = None) -> MatchResult:
    """
    Validate a model reply into a MatchResult.

    score and success_probability are clamped to [0, 100] (50 when absent);
    reasons keep at most 5 entries and risk_factors at most 4; a malformed
    suggested_equity is replaced by suggest_equity_range(role).

    Raises:
        MatchResponseError: reply is not a JSON object
    """
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MatchResponseError(
            'Model reply is not valid JSON',
            context={'reply_preview': str(raw)[:200]},
        ) from e
    if not isinstance(parsed, dict):
        raise MatchResponseError(
            'Model reply is not a JSON object',
            context={'reply_type': type(parsed).__name__},
        )

    reasons = _string_list(parsed.get('reasons'), MAX_REASONS) or [DEFAULT_REASON]
    risk_factors = _string_list(parsed.get('risk_factors'), MAX_RISK_FACTORS)
    deal_structure = parsed.get('deal_structure')
    if not isinstance(deal_structure, str) or not deal_structure.strip():
        deal_structure = DEFAULT_DEAL_STRUCTURE

    return MatchResult(
        score=_clamp_percent(parsed.get('score')),
        reasons=reasons,
        suggested_equity=_equity_pair(parsed.get('suggested_equity'), role),
        success_probability=_clamp_percent(parsed.get('success_probability')),
        deal_structure=deal_structure,
        risk_factors=risk_factors,
        source=MatchSource.MODEL,
    )


def _clamp_percent(value: Any) -> int:
    number = _number(value)
    if number is None:
        number = DEFAULT_SCORE
    return int(max(0, min(100, math.floor(number + 0.5))))


def _string_list(value: Any, limit: int) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None][:limit]


def _equity_pair(value: Any, role: OpenRole | None) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or not value:
        return suggest_equity_range(role)

    low = _number(value[0])
    high = _number(value[1]) if len(value) > 1 else 1.5
    if low is None or high is None:
        return suggest_equity_range(role)

    low, high = (max(0.0, min(100.0, v)) for v in (low, high))
    return (low, high) if low <= high else (high, low)


def _number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _coerce(model_cls: type[M], value: Any) -> M:
    """
    Validate a raw record into model_cls.

    Fields that fail validation fall back to their defaults; the rest of the
    record is kept. A record that still does not validate becomes model_cls().
    """
    if isinstance(value, model_cls):
        return value
    if value is None:
        return model_cls()
    try:
        return model_cls.model_validate(value)
    except ValidationError as e:
        invalid = {err['loc'][0] for err in e.errors() if err['loc']}
        logger.warning(
            'match.invalid_input',
            model=model_cls.__name__,
            errors=e.error_count(),
            fields=sorted(str(name) for name in invalid),
        )
        if not isinstance(value, Mapping) or not invalid:
            return model_cls()

    remaining = {key: item for key, item in value.items() if key not in invalid}
    try:
        return model_cls.model_validate(remaining)
    except ValidationError:
        return model_cls()
