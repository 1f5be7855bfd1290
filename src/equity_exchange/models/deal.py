"""
Deal and SafeTerms models.

A Deal links a startup, a talent profile and (optionally) an open role, and
carries the negotiated equity terms. Persistence owns and mutates deals; the
core only reads the fields it needs for SAFE rendering.

Lifecycle:
    proposed -> negotiating -> terms-agreed -> safe-generated -> signed
    -> active -> completed, with cancelled reachable from any open state.
"""

import json
from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class DealStatus(str, Enum):
    """Deal lifecycle status."""

    PROPOSED = 'proposed'
    NEGOTIATING = 'negotiating'
    TERMS_AGREED = 'terms-agreed'
    SAFE_GENERATED = 'safe-generated'
    SIGNED = 'signed'
    ACTIVE = 'active'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


class SafeTemplate(str, Enum):
    """Built-in SAFE template choices."""

    YC_STANDARD = 'yc-standard'
    YC_MFN = 'yc-mfn'
    CUSTOM = 'custom'


class SafeTerms(BaseModel):
    """SAFE terms negotiated on a deal. Every field is optional at the core boundary."""

    type: Literal['post-money', 'pre-money'] = Field(
        default='post-money', description='Valuation basis of the SAFE'
    )
    valuation_cap: float | None = Field(default=None, ge=0, description='Valuation cap in USD')
    discount: float | None = Field(
        default=None, ge=0, le=100, description='Discount rate as a percentage'
    )
    equity_percent: float | None = Field(default=None, ge=0, le=100)
    investment_amount: float | None = Field(
        default=None, description='Purchase amount, when the deal records one explicitly'
    )
    vesting_schedule: int | str | None = Field(default=None, description='Vesting months')
    cliff_period: int | str | None = Field(default=None, description='Cliff months')
    pro_rata: bool = False
    mfn_clause: bool = False
    board_seat: bool = False
    template: SafeTemplate = SafeTemplate.YC_STANDARD


class Deal(BaseModel):
    """A proposed or agreed equity-for-talent deal."""

    id: str | None = None
    startup_id: str | None = None
    talent_id: str | None = None
    role_id: str | None = None
    status: DealStatus = DealStatus.PROPOSED

    equity_percent: float | None = Field(default=None, ge=0, le=100)
    discount: float | None = Field(
        default=None, description='Top-level discount, used when safe_terms has none'
    )
    vesting_months: int = Field(default=48, ge=1, le=60)
    cliff_months: int = Field(default=12, ge=0, le=24)
    safe_terms: SafeTerms | None = None
    match_score: float | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator('safe_terms', mode='before')
    @classmethod
    def _decode_safe_terms(cls, value: Any) -> Any:
        # Some writers store safe_terms as a JSON string column
        if isinstance(value, str):
            return json.loads(value) if value.strip() else None
        return value

    @property
    def template(self) -> SafeTemplate:
        """Template chosen for this deal's SAFE (standard when unset)."""
        if self.safe_terms is None:
            return SafeTemplate.YC_STANDARD
        return self.safe_terms.template
