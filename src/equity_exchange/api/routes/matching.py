"""Match scoring and equity range suggestion endpoints."""

import structlog
from fastapi import APIRouter, HTTPException, Request

from equity_exchange.matching.equity import suggest_equity_range
from equity_exchange.models import Startup, TalentProfile

from ..schemas import EquityRangeRequest, ScoreMatchRequest

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/matching")

# Stand-ins for the side of the pair the caller did not supply
DEFAULT_STARTUP = Startup(
    name="Unknown Startup",
    stage="seed",
    industry="Technology",
    description="",
)
DEFAULT_TALENT = TalentProfile(
    name="Unknown Talent",
    title="Professional",
    skills=[],
    experience_years=0,
    category="engineering",
)


@router.post("/score")
async def score(body: ScoreMatchRequest, request: Request):
    """Score a startup (and optional role) against a talent profile."""
    if body.startup is None and body.talent is None:
        raise HTTPException(status_code=400, detail="Either startup or talent is required")

    result = await request.app.state.scorer.score_match(
        body.startup or DEFAULT_STARTUP,
        body.talent or DEFAULT_TALENT,
        body.role,
    )
    logger.info(
        "matching.scored",
        source=result.source.value,
        score=result.score,
        startup_id=body.startup.id if body.startup else None,
        talent_id=body.talent.id if body.talent else None,
    )
    return {"data": result.model_dump(mode="json")}


@router.post("/equity-range")
async def equity_range(body: EquityRangeRequest):
    """Suggest an equity range (percent) for a role."""
    low, high = suggest_equity_range(body.role)
    return {"data": {"min": low, "max": high}}
