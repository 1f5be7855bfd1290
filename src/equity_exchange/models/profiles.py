"""
Startup, talent and open role models.

These mirror the rows route handlers fetch from the database. Only the
fields used by matching and SAFE rendering are declared; extra columns are
ignored on validation.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..utils import format_plain_number


class StartupStage(str, Enum):
    """Funding stage of a startup."""

    PRE_SEED = 'pre-seed'
    SEED = 'seed'
    SERIES_A = 'series-a'
    SERIES_B = 'series-b'
    GROWTH = 'growth'


class SkillCategory(str, Enum):
    """Talent / role skill categories."""

    ENGINEERING = 'engineering'
    DESIGN = 'design'
    LEGAL = 'legal'
    FINANCE = 'finance'
    MARKETING = 'marketing'
    CONSULTING = 'consulting'
    MEDIA = 'media'
    OPERATIONS = 'operations'


class Availability(str, Enum):
    """Talent availability."""

    FULL_TIME = 'full-time'
    PART_TIME = 'part-time'
    CONTRACT = 'contract'


class ProfileRecord(BaseModel):
    """Base for database-row models: null columns take the field default."""

    @model_validator(mode='before')
    @classmethod
    def _drop_null_columns(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data


class PersonRef(ProfileRecord):
    """Embedded profile reference (founder of a startup, user behind a talent profile)."""

    id: str | None = None
    full_name: str | None = None


class Startup(ProfileRecord):
    """A startup listed on the marketplace."""

    id: str | None = None
    name: str | None = None
    tagline: str | None = None
    description: str | None = None
    stage: str = Field(default='seed', description='One of StartupStage values')
    industry: str | None = None
    location: str | None = Field(
        default=None, description='Free text, e.g. "San Francisco, California"'
    )
    founder: PersonRef | None = None


class TalentProfile(ProfileRecord):
    """A talent professional's marketplace profile."""

    id: str | None = None
    user: PersonRef | None = None
    name: str | None = Field(default=None, description='Display name when no user is embedded')
    title: str | None = None
    bio: str | None = None
    skills: list[str] = Field(default_factory=list)
    experience_years: float = Field(default=0, ge=0)
    category: str | None = None
    availability: str | None = None

    @property
    def display_name(self) -> str:
        if self.user and self.user.full_name:
            return self.user.full_name
        return self.name or 'Unknown'


class OpenRole(ProfileRecord):
    """An open role posted by a startup.

    ``equity_range`` is the "min-max%" string used by matching. When a row
    only has numeric ``equity_min``/``equity_max`` columns, the range string
    is derived from them.
    """

    id: str | None = None
    title: str = ''
    category: str | None = None
    requirements: list[str] = Field(default_factory=list)
    equity_range: str | None = None
    equity_min: float | None = None
    equity_max: float | None = None
    cash_equivalent: str | None = None

    @model_validator(mode='after')
    def _derive_equity_range(self) -> 'OpenRole':
        if self.equity_range is None and (
            self.equity_min is not None or self.equity_max is not None
        ):
            low = format_plain_number(self.equity_min or 0)
            high = format_plain_number(self.equity_max or 0)
            self.equity_range = f'{low}-{high}%'
        return self

