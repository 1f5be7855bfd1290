"""
SafeDocument model: a generated SAFE and its signature state.

A document starts in pending-signature with both signature slots empty and
becomes signed once the company and the provider (the talent) have both
signed. Version history and audit trail are append-only.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from ..utils import uuid7
from .deal import SafeTemplate, SafeTerms


class SafeDocumentStatus(str, Enum):
    """Status of a generated SAFE document."""

    DRAFT = 'draft'
    PENDING_SIGNATURE = 'pending-signature'
    SIGNED = 'signed'
    VOIDED = 'voided'


class SigningParty(str, Enum):
    """Parties that sign a SAFE."""

    COMPANY = 'company'
    PROVIDER = 'provider'


class Signature(BaseModel):
    """Signature slot for one party."""

    signed: bool = False
    signer_name: str = ''
    signer_title: str = ''
    signed_at: datetime | None = None


class VersionEntry(BaseModel):
    version: int
    date: datetime
    description: str
    author: str


class AuditEntry(BaseModel):
    action: str
    timestamp: datetime
    actor: str


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SafeDocument(BaseModel):
    """A SAFE generated for a deal."""

    id: UUID = Field(default_factory=uuid7, description='UUIDv7 document identifier')
    deal_id: str
    template: SafeTemplate = SafeTemplate.YC_STANDARD
    status: SafeDocumentStatus = SafeDocumentStatus.DRAFT
    terms: SafeTerms | None = None
    document_url: str | None = None
    version_history: list[VersionEntry] = Field(default_factory=list)
    audit_trail: list[AuditEntry] = Field(default_factory=list)
    signatures: dict[SigningParty, Signature] = Field(
        default_factory=lambda: {party: Signature() for party in SigningParty}
    )
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    @property
    def fully_signed(self) -> bool:
        return all(self.signatures.get(party, Signature()).signed for party in SigningParty)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation for API responses and persistence."""
        return self.model_dump(mode='json')
