"""
SAFE document generation and e-signature state transitions.

These functions build and update SafeDocument values; storing them (and
moving the deal to the returned status) is the caller's job.
"""

from datetime import datetime, timezone
from typing import Any

from ..errors import SigningError
from ..logging import get_logger
from ..models.deal import Deal, DealStatus, SafeTerms
from ..models.safe_document import (
    AuditEntry,
    SafeDocument,
    SafeDocumentStatus,
    Signature,
    SigningParty,
    VersionEntry,
)

logger = get_logger(__name__)


def generate_safe_document(deal: Deal | dict[str, Any], actor_id: str) -> SafeDocument:
    """
    Create a pending-signature SAFE document from a deal's terms.

    Args:
        deal: Deal model or raw deal row
        actor_id: User generating the document (recorded in history and audit)

    Returns:
        New SafeDocument with version 1 and empty signature slots
    """
    if not isinstance(deal, Deal):
        deal = Deal.model_validate(deal)
    if not deal.id:
        raise ValueError('deal.id is required to generate a SAFE document')

    now = datetime.now(timezone.utc)
    document = SafeDocument(
        deal_id=deal.id,
        template=deal.template,
        status=SafeDocumentStatus.PENDING_SIGNATURE,
        terms=deal.safe_terms or SafeTerms(),
        version_history=[
            VersionEntry(
                version=1,
                date=now,
                description='SAFE document generated from deal terms',
                author=actor_id,
            )
        ],
        audit_trail=[AuditEntry(action='Document generated', timestamp=now, actor=actor_id)],
        created_at=now,
        updated_at=now,
    )

    logger.info(
        'safe.document_generated',
        deal_id=deal.id,
        document_id=str(document.id),
        template=document.template.value,
    )
    return document


def sign_safe_document(
    document: SafeDocument,
    party: SigningParty | str,
    signer_name: str,
    actor_id: str,
    signer_title: str = '',
) -> SafeDocument:
    """
    Record one party's signature.

    The document becomes signed once both company and provider have signed.
    A party may re-sign while the other signature is outstanding; the later
    signature replaces the earlier one.

    Args:
        document: Current document state (not modified)
        party: "company" or "provider"
        signer_name: Name of the person signing
        actor_id: User performing the action
        signer_title: Optional title of the signer

    Returns:
        Updated copy of the document

    Raises:
        SigningError: invalid party, missing signer name, or document
            already signed / voided
    """
    try:
        signing_party = SigningParty(party)
    except ValueError as e:
        raise SigningError(
            'party must be either "company" or "provider"',
            context={'party': str(party)},
        ) from e

    if not signer_name or not signer_name.strip():
        raise SigningError('signer_name is required', context={'party': signing_party.value})

    if document.status == SafeDocumentStatus.SIGNED:
        raise SigningError(
            'Document has already been fully signed',
            context={'document_id': str(document.id)},
        )
    if document.status == SafeDocumentStatus.VOIDED:
        raise SigningError(
            'Document has been voided',
            context={'document_id': str(document.id)},
        )

    now = datetime.now(timezone.utc)
    signatures = dict(document.signatures)
    signatures[signing_party] = Signature(
        signed=True,
        signer_name=signer_name,
        signer_title=signer_title or '',
        signed_at=now,
    )

    audit_trail = [
        *document.audit_trail,
        AuditEntry(
            action=f'Document signed by {signing_party.value} ({signer_name})',
            timestamp=now,
            actor=actor_id,
        ),
    ]

    updated = document.model_copy(
        update={
            'signatures': signatures,
            'audit_trail': audit_trail,
            'updated_at': now,
        }
    )
    if updated.fully_signed:
        updated.status = SafeDocumentStatus.SIGNED
        updated.audit_trail.append(
            AuditEntry(
                action='All parties have signed. Document is now fully executed.',
                timestamp=now,
                actor='system',
            )
        )
    else:
        updated.status = SafeDocumentStatus.PENDING_SIGNATURE

    logger.info(
        'safe.document_signed',
        deal_id=document.deal_id,
        document_id=str(document.id),
        party=signing_party.value,
        fully_signed=updated.fully_signed,
    )
    return updated


def deal_status_after(document: SafeDocument) -> DealStatus:
    """Deal status to persist alongside the document's current state."""
    if document.status == SafeDocumentStatus.SIGNED:
        return DealStatus.SIGNED
    return DealStatus.SAFE_GENERATED


def signing_message(document: SafeDocument, party: SigningParty | str) -> str:
    """Human-readable outcome of a signature for API responses."""
    if document.status == SafeDocumentStatus.SIGNED:
        return 'SAFE document fully executed - both parties have signed'
    return f'SAFE document signed by {SigningParty(party).value} successfully'
