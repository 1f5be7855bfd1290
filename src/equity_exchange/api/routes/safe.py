"""SAFE rendering, generation and signing endpoints."""

import structlog
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from equity_exchange.errors import SigningError, UnresolvedPlaceholderError
from equity_exchange.logging import logging_context
from equity_exchange.safe import (
    deal_status_after,
    generate_safe_document,
    render_safe_document,
    sign_safe_document,
    signing_message,
)

from ..schemas import GenerateSafeRequest, RenderSafeRequest, SignSafeRequest

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/safe")


@router.post("/render")
async def render(body: RenderSafeRequest, request: Request):
    """Render the SAFE text for a deal."""
    strict = body.strict
    if strict is None:
        strict = getattr(request.app.state, "strict_rendering", False)

    with logging_context(deal_id=body.deal.id):
        try:
            rendered = render_safe_document(
                body.deal,
                body.startup,
                body.talent,
                template=body.template,
                strict=strict,
            )
        except UnresolvedPlaceholderError as e:
            return JSONResponse(
                status_code=422,
                content={"error": e.message, "placeholders": e.placeholders},
            )

    return {"data": rendered.to_dict()}


@router.post("/generate", status_code=201)
async def generate(body: GenerateSafeRequest):
    """Create a pending-signature SAFE document from deal terms."""
    if not body.deal.id:
        raise HTTPException(status_code=400, detail="deal.id is required")

    with logging_context(deal_id=body.deal.id, user_id=body.actor_id):
        document = generate_safe_document(body.deal, actor_id=body.actor_id)

    return {
        "data": document.to_dict(),
        "deal_status": deal_status_after(document).value,
    }


@router.post("/sign")
async def sign(body: SignSafeRequest):
    """Record one party's signature on a SAFE document."""
    with logging_context(deal_id=body.document.deal_id, user_id=body.actor_id):
        try:
            document = sign_safe_document(
                body.document,
                party=body.party,
                signer_name=body.signer_name,
                signer_title=body.signer_title,
                actor_id=body.actor_id,
            )
        except SigningError as e:
            logger.warning("safe.sign_rejected", error=e.message)
            raise HTTPException(status_code=400, detail=e.message)

    return {
        "data": document.to_dict(),
        "deal_status": deal_status_after(document).value,
        "message": signing_message(document, body.party),
    }
