"""
Local heuristic match estimate.

Used whenever model scoring is unavailable. The result is randomized around
a favourable band and built from canned phrases; it is marked
source=heuristic so callers can tell it apart from a model judgment.
"""

import math
import random

from ..models.match import MatchResult, MatchSource
from ..models.profiles import OpenRole, Startup, TalentProfile
from ..utils import format_plain_number
from .equity import suggest_equity_range

BASE_SCORE_RANGE = (75, 95)
SUCCESS_PROBABILITY_CAP = 98

STAGE_FACTORS: dict[str, float] = {
    'pre-seed': 0.70,
    'seed': 0.75,
    'series-a': 0.80,
    'series-b': 0.85,
    'growth': 0.90,
}
DEFAULT_STAGE_FACTOR = 0.75


def stage_factor(stage: str | None) -> float:
    """Success multiplier for a startup stage."""
    return STAGE_FACTORS.get((stage or '').lower(), DEFAULT_STAGE_FACTOR)


def _reason_pool(startup: Startup, talent: TalentProfile) -> list[str]:
    name = talent.display_name
    years = format_plain_number(talent.experience_years)
    return [
        f"{name}'s {talent.category or 'professional'} expertise aligns well with "
        f"{startup.name or 'the startup'}'s {startup.stage} needs",
        f'{years} years of experience is ideal for a {startup.stage} startup',
        f"Strong skill overlap: {' and '.join(talent.skills[:2])} are directly relevant "
        f"to {startup.industry or 'the industry'}",
        f"{talent.title or 'Their'} background complements the team's growth trajectory",
        f'{startup.industry or "Industry"} domain experience increases onboarding speed '
        'and early impact',
        f'Availability as {talent.availability or "flexible"} aligns with current project timelines',
    ]


def _risk_pool(startup: Startup) -> list[str]:
    return [
        'Equity-only compensation may limit commitment if personal runway is short',
        f'Stage mismatch: talent may prefer more stability than a {startup.stage} startup offers',
        'Skill gaps in emerging technologies may require additional training investment',
        'Vesting cliff period creates retention risk in the first 12 months',
        f'Market conditions in {startup.industry or "this market"} could affect '
        'long-term equity value',
    ]


def _deal_structures(equity: tuple[float, float]) -> list[str]:
    low, high = (format_plain_number(v) for v in equity)
    spread = f'{equity[1] - equity[0]:.1f}'
    return [
        f'{low}-{high}% equity over 4-year vesting with 1-year cliff, '
        'milestone-based unlocks tied to product delivery',
        f'{low}% base equity + {spread}% performance bonus, '
        '3-year vesting with quarterly milestones',
        f'Blended compensation: {low}% equity + reduced cash retainer, '
        '4-year vesting with 6-month cliff and bi-annual reviews',
    ]


def generate_heuristic_match(
    startup: Startup,
    talent: TalentProfile,
    role: OpenRole | None = None,
    rng: random.Random | None = None,
) -> MatchResult:
    """
    Produce a randomized local match estimate.

    score is uniform in [75, 95]; success_probability is
    round(score * stage_factor + U[0, 5)) capped at 98.

    Args:
        startup: Startup being matched
        talent: Talent being matched
        role: Optional role, used for the equity range
        rng: Random source (defaults to a fresh, OS-seeded random.Random)

    Returns:
        MatchResult with source=HEURISTIC
    """
    rng = rng or random.Random()

    base_score = rng.randint(*BASE_SCORE_RANGE)

    reasons = _reason_pool(startup, talent)
    rng.shuffle(reasons)
    reasons = reasons[: 3 + rng.randint(0, 1)]

    risks = _risk_pool(startup)
    rng.shuffle(risks)
    risks = risks[: 2 + rng.randint(0, 1)]

    equity = suggest_equity_range(role)

    probability = math.floor(base_score * stage_factor(startup.stage) + rng.random() * 5 + 0.5)

    return MatchResult(
        score=base_score,
        reasons=reasons,
        suggested_equity=equity,
        success_probability=min(probability, SUCCESS_PROBABILITY_CAP),
        deal_structure=rng.choice(_deal_structures(equity)),
        risk_factors=risks,
        source=MatchSource.HEURISTIC,
    )
