"""
Equity range suggestion for a role.
"""

import re
from collections.abc import Mapping
from typing import Any

from ..models.profiles import OpenRole

CATEGORY_EQUITY_RANGES: dict[str, tuple[float, float]] = {
    'engineering': (0.5, 2.0),
    'design': (0.3, 1.5),
    'legal': (0.25, 1.0),
    'finance': (0.25, 1.0),
    'marketing': (0.3, 1.5),
    'consulting': (0.2, 1.0),
    'media': (0.2, 0.8),
    'operations': (0.3, 1.2),
}

DEFAULT_EQUITY_RANGE: tuple[float, float] = (0.25, 1.5)

# Leading decimal number; trailing text is ignored ("2%" -> 2, "1.5x" -> 1.5)
_LEADING_NUMBER = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_equity_range(text: str | None) -> tuple[float, float] | None:
    """
    Parse a "min-max" range such as "0.5-2%".

    Percent signs are ignored. Returns None unless the text splits into
    exactly two numeric halves with 0 <= min <= max <= 100.
    """
    if not text:
        return None
    parts = text.replace('%', '').split('-')
    if len(parts) != 2:
        return None
    low, high = (_parse_leading_number(part) for part in parts)
    if low is None or high is None:
        return None
    if not 0 <= low <= high <= 100:
        return None
    return low, high


def suggest_equity_range(role: OpenRole | Mapping[str, Any] | None = None) -> tuple[float, float]:
    """
    Suggest an equity range (min, max) in percent for a role.

    The role's own equity_range wins when it parses; otherwise the default
    for its category, otherwise (0.25, 1.5).
    """
    if role is None:
        return DEFAULT_EQUITY_RANGE

    if isinstance(role, OpenRole):
        equity_range, category = role.equity_range, role.category
    else:
        equity_range, category = role.get('equity_range'), role.get('category')

    parsed = parse_equity_range(equity_range if isinstance(equity_range, str) else None)
    if parsed is not None:
        return parsed

    key = category.lower() if isinstance(category, str) else ''
    return CATEGORY_EQUITY_RANGES.get(key, DEFAULT_EQUITY_RANGE)


def _parse_leading_number(text: str) -> float | None:
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    return float(match.group(1))
