"""
Startup/talent match scoring prompts.

The model is asked for a single JSON object (response_format=json_object)
rather than a structured-output schema, and the reply is validated and
clamped by the scorer.
"""

from ..models.profiles import OpenRole, Startup, TalentProfile
from ..utils import format_plain_number

# =============================================================================
# Prompt Templates
# =============================================================================

MATCH_SYSTEM_PROMPT = """You are an expert startup-talent matching engine for an equity marketplace.
Given a startup profile and a talent profile (and optionally a specific role),
score how well they match and provide actionable insights.

Respond ONLY with valid JSON in this exact format:
{
  "score": <number 0-100>,
  "reasons": ["reason1", "reason2", "reason3"],
  "suggested_equity": [<min_percent>, <max_percent>],
  "success_probability": <number 0-100>,
  "deal_structure": "<brief recommended deal structure>",
  "risk_factors": ["risk1", "risk2"]
}

Scoring guidelines:
- 90-100: Exceptional fit - skills, experience, and industry perfectly aligned
- 75-89: Strong fit - most requirements met with complementary strengths
- 60-74: Moderate fit - partial skill overlap, may need upskilling
- 40-59: Weak fit - significant gaps but some transferable skills
- 0-39: Poor fit - fundamental misalignment

Consider: skill match, experience level vs. stage, industry relevance,
availability alignment, equity expectations, and cultural fit signals."""


def build_match_user_prompt(
    startup: Startup,
    talent: TalentProfile,
    role: OpenRole | None = None,
) -> str:
    """Render the startup, talent and optional role as markdown sections."""
    lines = [
        '## Startup',
        f'- Name: {startup.name or "Unknown Startup"}',
        f'- Stage: {startup.stage}',
        f'- Industry: {startup.industry or ""}',
        f'- Description: {startup.description or ""}',
        '',
        '## Talent',
        f'- Name: {talent.display_name}',
        f'- Title: {talent.title or ""}',
        f'- Skills: {", ".join(talent.skills)}',
        f'- Experience: {format_plain_number(talent.experience_years)} years',
        f'- Category: {talent.category or ""}',
    ]
    if talent.availability:
        lines.append(f'- Availability: {talent.availability}')

    if role is not None:
        lines.extend(
            [
                '',
                '## Open Role',
                f'- Title: {role.title}',
                f'- Category: {role.category or ""}',
                f'- Requirements: {", ".join(role.requirements)}',
                f'- Equity Range: {role.equity_range or ""}',
            ]
        )
        if role.cash_equivalent:
            lines.append(f'- Cash Equivalent: {role.cash_equivalent}')

    return '\n'.join(lines)


def build_match_prompt(
    startup: Startup,
    talent: TalentProfile,
    role: OpenRole | None = None,
) -> list[dict[str, str]]:
    """
    Build the messages for a match scoring call.

    Args:
        startup: Startup being matched
        talent: Talent being matched
        role: Specific open role, if the match is for one

    Returns:
        List of messages for OpenAI API
    """
    return [
        {'role': 'system', 'content': MATCH_SYSTEM_PROMPT},
        {'role': 'user', 'content': build_match_user_prompt(startup, talent, role)},
    ]
