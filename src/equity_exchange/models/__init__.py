"""
Data models for the Equity Exchange core.
"""

from .deal import Deal, DealStatus, SafeTemplate, SafeTerms
from .match import MatchResult, MatchSource
from .profiles import (
    Availability,
    OpenRole,
    PersonRef,
    SkillCategory,
    Startup,
    StartupStage,
    TalentProfile,
)
from .safe_document import (
    AuditEntry,
    SafeDocument,
    SafeDocumentStatus,
    Signature,
    SigningParty,
    VersionEntry,
)

__all__ = [
    # Deals
    'Deal',
    'DealStatus',
    'SafeTemplate',
    'SafeTerms',
    # Profiles
    'Availability',
    'OpenRole',
    'PersonRef',
    'SkillCategory',
    'Startup',
    'StartupStage',
    'TalentProfile',
    # Matching
    'MatchResult',
    'MatchSource',
    # SAFE documents
    'AuditEntry',
    'SafeDocument',
    'SafeDocumentStatus',
    'Signature',
    'SigningParty',
    'VersionEntry',
]
