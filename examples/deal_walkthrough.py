#!/usr/bin/env python3
"""
Example: Walk a startup/talent pair from match to executed SAFE.

This script demonstrates:
1. Scoring the pair for an open role (model-backed when OPENAI_API_KEY is set,
   heuristic otherwise)
2. Rendering the SAFE text from the agreed deal terms
3. Generating the SAFE document and collecting both signatures

Prerequisites:
    - Optional: OPENAI_API_KEY=your_key (without it, scoring uses the heuristic)

Usage:
    python examples/deal_walkthrough.py
"""

import asyncio
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from dotenv import load_dotenv

# Load environment variables
env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

from equity_exchange.matching import score_match
from equity_exchange.safe import (
    deal_status_after,
    generate_safe_document,
    render_safe_document,
    sign_safe_document,
    signing_message,
)


STARTUP = {
    'id': 'startup_demo',
    'name': 'Acme Robotics',
    'tagline': 'Robots for warehouses',
    'description': 'Autonomous picking robots for mid-size warehouses.',
    'stage': 'seed',
    'industry': 'Robotics',
    'location': 'San Francisco, California',
    'founder': {'id': 'user_founder', 'full_name': 'Sam Founder'},
}

TALENT = {
    'id': 'talent_demo',
    'user': {'id': 'user_talent', 'full_name': 'Jane Doe'},
    'title': 'Senior Backend Engineer',
    'bio': 'Eight years building distributed systems, three in robotics.',
    'skills': ['Python', 'ROS', 'Kubernetes'],
    'experience_years': 8,
    'category': 'engineering',
    'availability': 'part-time',
}

ROLE = {
    'id': 'role_demo',
    'title': 'Founding Engineer',
    'category': 'engineering',
    'requirements': ['Python', 'Robotics'],
    'equity_range': '0.5-2%',
    'cash_equivalent': '$120k',
}


async def main():
    """Run the walkthrough."""
    print("=" * 60)
    print("Equity Exchange Walkthrough")
    print("=" * 60)

    # =====================================================================
    # Match
    # =====================================================================
    print("\n" + "-" * 60)
    print("Scoring match...")
    print("-" * 60)

    match = await score_match(STARTUP, TALENT, ROLE)

    print(f"\n  Source: {match.source.value}")
    print(f"  Score: {match.score}")
    print(f"  Success probability: {match.success_probability}%")
    print(f"  Suggested equity: {match.suggested_equity[0]}-{match.suggested_equity[1]}%")
    print(f"  Deal structure: {match.deal_structure}")
    for reason in match.reasons:
        print(f"    + {reason}")
    for risk in match.risk_factors:
        print(f"    - {risk}")

    # =====================================================================
    # Render SAFE
    # =====================================================================
    deal = {
        'id': 'deal_demo',
        'startup_id': STARTUP['id'],
        'talent_id': TALENT['id'],
        'role_id': ROLE['id'],
        'status': 'terms-agreed',
        'equity_percent': match.suggested_equity[0],
        'match_score': match.score,
        'safe_terms': {
            'valuation_cap': 8000000,
            'discount': 20,
            'equity_percent': match.suggested_equity[0],
            'template': 'yc-standard',
        },
    }

    print("\n" + "-" * 60)
    print("Rendering SAFE...")
    print("-" * 60)

    rendered = render_safe_document(deal, STARTUP, TALENT)
    print(f"\n  Template: {rendered.template.value}")
    print(f"  Purchase amount: {rendered.variables['investment_amount']}")
    print(f"  Unresolved placeholders: {rendered.unresolved or 'none'}")
    print("\n" + "\n".join(rendered.document.splitlines()[:6]))

    # =====================================================================
    # Generate and sign
    # =====================================================================
    print("\n" + "-" * 60)
    print("Signing...")
    print("-" * 60)

    document = generate_safe_document(deal, actor_id='user_founder')
    print(f"\n  Document {document.id}: {document.status.value}")

    for party, name, actor in (
        ('company', 'Sam Founder', 'user_founder'),
        ('provider', 'Jane Doe', 'user_talent'),
    ):
        document = sign_safe_document(document, party, name, actor)
        print(f"  {signing_message(document, party)}")

    print(f"\n  Deal status: {deal_status_after(document).value}")
    print("  Audit trail:")
    for entry in document.audit_trail:
        print(f"    [{entry.actor}] {entry.action}")


if __name__ == "__main__":
    asyncio.run(main())
