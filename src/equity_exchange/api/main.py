"""FastAPI application for the Equity Exchange core."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from equity_exchange.clients.openai_client import OpenAIClient
from equity_exchange.logging import configure_logging
from equity_exchange.matching.scorer import MatchScorer

from .config import get_settings
from .routes.health import router as health_router
from .routes.matching import router as matching_router
from .routes.safe import router as safe_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize shared clients at startup, clean up at shutdown."""
    settings = get_settings()
    configure_logging(json_output=settings.LOG_JSON, log_level=settings.LOG_LEVEL)

    openai: OpenAIClient | None = None
    if settings.OPENAI_API_KEY:
        openai = OpenAIClient(
            api_key=settings.OPENAI_API_KEY,
            chat_model=settings.OPENAI_CHAT_MODEL,
        )
        logger.info("lifespan.openai_ready", chat_model=openai.chat_model)
    else:
        logger.warning("lifespan.openai_disabled", reason="OPENAI_API_KEY not set")

    # Store on app.state for request handlers
    app.state.openai = openai
    app.state.scorer = MatchScorer(openai_client=openai)
    app.state.strict_rendering = settings.STRICT_SAFE_RENDERING

    logger.info("lifespan.ready")
    yield

    logger.info("lifespan.shutdown")
    if openai is not None:
        await openai.close()


app = FastAPI(
    title="equity-exchange",
    description="SAFE document rendering and startup/talent match scoring",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(matching_router)
app.include_router(safe_router)
