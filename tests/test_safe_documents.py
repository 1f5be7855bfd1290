"""
Tests for SAFE document generation and signing.
"""

import pytest

from equity_exchange.errors import SigningError
from equity_exchange.models import DealStatus, SafeDocumentStatus, SafeTemplate, SigningParty
from equity_exchange.safe.documents import (
    deal_status_after,
    generate_safe_document,
    sign_safe_document,
    signing_message,
)


@pytest.fixture
def document(sample_deal):
    return generate_safe_document(sample_deal, actor_id="user_f1")


class TestGenerateSafeDocument:
    """Test document creation from a deal."""

    def test_generated_document(self, document):
        assert document.deal_id == "deal_001"
        assert document.status == SafeDocumentStatus.PENDING_SIGNATURE
        assert document.template == SafeTemplate.YC_STANDARD
        assert document.terms.valuation_cap == 1000000
        assert document.id.version == 7

    def test_history_and_audit(self, document):
        assert len(document.version_history) == 1
        assert document.version_history[0].version == 1
        assert document.version_history[0].author == "user_f1"
        assert [a.action for a in document.audit_trail] == ["Document generated"]

    def test_signature_slots_empty(self, document):
        assert set(document.signatures) == {SigningParty.COMPANY, SigningParty.PROVIDER}
        assert not any(s.signed for s in document.signatures.values())
        assert document.fully_signed is False

    def test_mfn_template(self, sample_deal):
        sample_deal["safe_terms"]["template"] = "yc-mfn"
        assert generate_safe_document(sample_deal, "u").template == SafeTemplate.YC_MFN

    def test_deal_without_terms(self):
        document = generate_safe_document({"id": "deal_002"}, "u")
        assert document.template == SafeTemplate.YC_STANDARD
        assert document.terms is not None

    def test_deal_without_id(self):
        with pytest.raises(ValueError):
            generate_safe_document({"safe_terms": {}}, "u")

    def test_to_dict_is_json_ready(self, document):
        data = document.to_dict()
        assert data["status"] == "pending-signature"
        assert set(data["signatures"]) == {"company", "provider"}
        assert isinstance(data["id"], str)


class TestSignSafeDocument:
    """Test the two-party signing flow."""

    def test_first_signature(self, document):
        signed = sign_safe_document(document, "company", "Sam Founder", "user_f1", "CEO")

        assert signed.status == SafeDocumentStatus.PENDING_SIGNATURE
        assert signed.signatures[SigningParty.COMPANY].signed is True
        assert signed.signatures[SigningParty.COMPANY].signer_title == "CEO"
        assert signed.signatures[SigningParty.COMPANY].signed_at is not None
        assert signed.signatures[SigningParty.PROVIDER].signed is False
        assert signed.audit_trail[-1].action == "Document signed by company (Sam Founder)"
        assert deal_status_after(signed) == DealStatus.SAFE_GENERATED
        assert signing_message(signed, "company") == "SAFE document signed by company successfully"

    def test_original_not_modified(self, document):
        sign_safe_document(document, "company", "Sam Founder", "user_f1")
        assert document.signatures[SigningParty.COMPANY].signed is False
        assert len(document.audit_trail) == 1

    def test_both_signatures_execute_document(self, document):
        once = sign_safe_document(document, SigningParty.COMPANY, "Sam Founder", "user_f1")
        twice = sign_safe_document(once, SigningParty.PROVIDER, "Jane Doe", "user_t1")

        assert twice.status == SafeDocumentStatus.SIGNED
        assert twice.fully_signed is True
        assert [a.actor for a in twice.audit_trail] == ["user_f1", "user_f1", "user_t1", "system"]
        assert twice.audit_trail[-1].action.startswith("All parties have signed")
        assert deal_status_after(twice) == DealStatus.SIGNED
        assert signing_message(twice, "provider") == (
            "SAFE document fully executed - both parties have signed"
        )

    def test_resign_replaces_signature(self, document):
        once = sign_safe_document(document, "company", "Sam Founder", "user_f1")
        again = sign_safe_document(once, "company", "Sam F.", "user_f1")

        assert again.status == SafeDocumentStatus.PENDING_SIGNATURE
        assert again.signatures[SigningParty.COMPANY].signer_name == "Sam F."

    def test_invalid_party(self, document):
        with pytest.raises(SigningError) as exc_info:
            sign_safe_document(document, "investor", "Someone", "u")
        assert exc_info.value.context["party"] == "investor"

    def test_blank_signer_name(self, document):
        with pytest.raises(SigningError):
            sign_safe_document(document, "provider", "   ", "u")

    def test_already_signed(self, document):
        done = sign_safe_document(
            sign_safe_document(document, "company", "A", "u1"), "provider", "B", "u2"
        )
        with pytest.raises(SigningError):
            sign_safe_document(done, "company", "A", "u1")

    def test_voided(self, document):
        voided = document.model_copy(update={"status": SafeDocumentStatus.VOIDED})
        with pytest.raises(SigningError):
            sign_safe_document(voided, "company", "A", "u1")
