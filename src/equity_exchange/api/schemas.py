"""Request bodies for the API routes."""

from pydantic import BaseModel, Field

from equity_exchange.models import (
    Deal,
    OpenRole,
    SafeDocument,
    SafeTemplate,
    SigningParty,
    Startup,
    TalentProfile,
)


class ScoreMatchRequest(BaseModel):
    """Records to score; at least one of startup or talent is required."""

    startup: Startup | None = None
    talent: TalentProfile | None = None
    role: OpenRole | None = None


class EquityRangeRequest(BaseModel):
    role: OpenRole | None = None


class RenderSafeRequest(BaseModel):
    deal: Deal
    startup: Startup = Field(default_factory=Startup)
    talent: TalentProfile = Field(default_factory=TalentProfile)
    template: SafeTemplate | None = Field(
        default=None, description="Overrides deal.safe_terms.template"
    )
    strict: bool | None = Field(
        default=None, description="Fail on unresolved placeholders (defaults to service setting)"
    )


class GenerateSafeRequest(BaseModel):
    deal: Deal
    actor_id: str = Field(..., min_length=1)


class SignSafeRequest(BaseModel):
    document: SafeDocument
    party: SigningParty
    signer_name: str = Field(..., min_length=1)
    signer_title: str = ""
    actor_id: str = Field(..., min_length=1)
