"""
Pytest configuration and shared fixtures.

Key fixtures:
- openai_api_key: OpenAI API key from environment (live tests skip without it)
- sample_deal / sample_startup / sample_talent / sample_role: raw records as
  route handlers receive them from the database
- mock_openai: AsyncMock standing in for OpenAIClient
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

# Load environment variables
from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)


@pytest.fixture
def openai_api_key() -> str:
    """Get OpenAI API key from environment."""
    key = os.getenv('OPENAI_API_KEY')
    if not key:
        pytest.skip('OPENAI_API_KEY not set')
    return key


@pytest.fixture
def sample_deal() -> dict:
    """Deal row with SAFE terms, as stored by the deals table."""
    return {
        'id': 'deal_001',
        'startup_id': 'startup_001',
        'talent_id': 'talent_001',
        'status': 'terms-agreed',
        'equity_percent': 1.5,
        'vesting_months': 48,
        'cliff_months': 12,
        'safe_terms': {
            'type': 'post-money',
            'valuation_cap': 1000000,
            'discount': 20,
            'equity_percent': 1.5,
            'pro_rata': False,
            'mfn_clause': False,
            'board_seat': False,
            'template': 'yc-standard',
        },
        'created_at': '2025-09-15T00:00:00Z',
    }


@pytest.fixture
def sample_startup() -> dict:
    """Startup row with embedded founder profile."""
    return {
        'id': 'startup_001',
        'name': 'Acme',
        'tagline': 'Robots for warehouses',
        'description': 'Autonomous picking robots for mid-size warehouses.',
        'stage': 'seed',
        'industry': 'Robotics',
        'location': 'San Francisco, California',
        'founder': {'id': 'user_f1', 'full_name': 'Sam Founder'},
    }


@pytest.fixture
def sample_talent() -> dict:
    """Talent profile row with embedded user profile."""
    return {
        'id': 'talent_001',
        'user': {'id': 'user_t1', 'full_name': 'Jane Doe'},
        'title': 'Engineer',
        'bio': 'Backend engineer with robotics background.',
        'skills': ['Python', 'ROS', 'Kubernetes'],
        'experience_years': 7,
        'category': 'engineering',
        'availability': 'part-time',
    }


@pytest.fixture
def sample_role() -> dict:
    """Open role with an explicit equity range."""
    return {
        'id': 'role_001',
        'title': 'Founding Engineer',
        'category': 'engineering',
        'requirements': ['Python', 'Robotics'],
        'equity_range': '0.5-2%',
        'cash_equivalent': '$120k',
    }


@pytest.fixture
def mock_openai():
    """Create a mocked OpenAI client."""
    client = AsyncMock()
    client.chat_completion_json = AsyncMock()
    return client
