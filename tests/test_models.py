"""
Tests for the domain models.
"""

import pytest
from pydantic import ValidationError

from equity_exchange.models import (
    Deal,
    MatchResult,
    MatchSource,
    OpenRole,
    SafeTemplate,
    Startup,
    TalentProfile,
)


class TestDeal:
    def test_safe_terms_from_json_string(self):
        deal = Deal.model_validate(
            {'id': 'd1', 'safe_terms': '{"valuation_cap": 5000000, "template": "yc-mfn"}'}
        )
        assert deal.safe_terms.valuation_cap == 5000000
        assert deal.template == SafeTemplate.YC_MFN

    def test_defaults(self):
        deal = Deal()
        assert deal.vesting_months == 48
        assert deal.cliff_months == 12
        assert deal.safe_terms is None
        assert deal.template == SafeTemplate.YC_STANDARD

    def test_rejects_out_of_range_equity(self):
        with pytest.raises(ValidationError):
            Deal(equity_percent=120)


class TestProfiles:
    def test_display_name_prefers_user(self):
        talent = TalentProfile(name='Handle', user={'full_name': 'Jane Doe'})
        assert talent.display_name == 'Jane Doe'

    def test_display_name_fallbacks(self):
        assert TalentProfile(name='Handle').display_name == 'Handle'
        assert TalentProfile().display_name == 'Unknown'

    def test_role_range_from_numeric_columns(self):
        assert OpenRole(equity_min=0.5, equity_max=2).equity_range == '0.5-2%'

    def test_role_explicit_range_kept(self):
        role = OpenRole(equity_range='1-3%', equity_min=0.5, equity_max=2)
        assert role.equity_range == '1-3%'

    def test_role_extra_columns_ignored(self):
        role = OpenRole.model_validate({'title': 'CTO', 'startup_id': 's1', 'is_active': True})
        assert role.title == 'CTO'


class TestMatchResult:
    def _kwargs(self, **overrides):
        values = {
            'score': 80,
            'reasons': ['fit'],
            'suggested_equity': (0.5, 1.0),
            'success_probability': 60,
            'deal_structure': 'vesting',
            'source': MatchSource.MODEL,
        }
        values.update(overrides)
        return values

    def test_valid(self):
        result = MatchResult(**self._kwargs())
        assert result.risk_factors == []
        assert result.model_dump(mode='json')['suggested_equity'] == [0.5, 1.0]

    @pytest.mark.parametrize(
        'overrides',
        [
            {'score': 101},
            {'success_probability': -1},
            {'reasons': []},
            {'reasons': ['r'] * 6},
            {'risk_factors': ['k'] * 5},
            {'suggested_equity': (2.0, 1.0)},
            {'suggested_equity': (-1.0, 1.0)},
        ],
    )
    def test_invariants(self, overrides):
        with pytest.raises(ValidationError):
            MatchResult(**self._kwargs(**overrides))


class TestNullColumns:
    def test_talent_null_columns_take_defaults(self):
        talent = TalentProfile.model_validate(
            {'user': {'full_name': 'Jane Doe'}, 'skills': None, 'experience_years': None}
        )
        assert talent.skills == []
        assert talent.experience_years == 0
        assert talent.display_name == 'Jane Doe'

    def test_role_null_columns_take_defaults(self):
        role = OpenRole.model_validate(
            {'title': None, 'requirements': None, 'equity_range': '3-6%'}
        )
        assert role.title == ''
        assert role.requirements == []
        assert role.equity_range == '3-6%'

    def test_startup_null_stage(self):
        assert Startup.model_validate({'name': 'Acme', 'stage': None}).stage == 'seed'
