"""
Match scoring result model.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class MatchSource(str, Enum):
    """Which path produced a match result."""

    MODEL = 'model'
    HEURISTIC = 'heuristic'


class MatchResult(BaseModel):
    """
    Compatibility assessment between a startup (optionally a role) and a talent.

    Results with source=HEURISTIC are randomized local estimates, not a model
    judgment; reasons and risk_factors are illustrative in that case.
    """

    score: int = Field(..., ge=0, le=100, description='Compatibility score 0-100')
    reasons: list[str] = Field(..., min_length=1, max_length=5)
    suggested_equity: tuple[float, float] = Field(
        ..., description='Suggested equity range (min, max) in percent'
    )
    success_probability: int = Field(..., ge=0, le=100)
    deal_structure: str
    risk_factors: list[str] = Field(default_factory=list, max_length=4)
    source: MatchSource

    @model_validator(mode='after')
    def _check_equity_range(self) -> 'MatchResult':
        low, high = self.suggested_equity
        if not (0 <= low <= high <= 100):
            raise ValueError(f'invalid suggested_equity range: {self.suggested_equity}')
        return self
