"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Report liveness and whether model scoring is available.

    A failing OpenAI check degrades rather than fails: scoring still answers
    through the heuristic.
    """
    openai = getattr(request.app.state, "openai", None)
    if openai is None:
        return {"status": "ok", "model_scoring": False}

    check = await openai.health_check()
    if not check.get("healthy"):
        return {"status": "degraded", "model_scoring": False, "error": check.get("error")}
    return {"status": "ok", "model_scoring": True}
