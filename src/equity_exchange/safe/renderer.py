"""
SAFE document rendering.

Substitutes {{placeholder}} tokens in a template body with values derived
from a deal, its startup and its talent. Rendering is lenient by default:
a token with no value is left verbatim so one missing field never blocks a
document. Pass strict=True to refuse such output instead.

Inputs may be pydantic models or plain dicts (raw rows); missing or
malformed fields degrade to defaults rather than raising.
"""

import json
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

from ..errors import UnresolvedPlaceholderError
from ..logging import get_logger
from ..models.deal import SafeTemplate
from ..utils import format_plain_number
from .templates import get_template

logger = get_logger(__name__)

# \w restricted to ASCII word characters
PLACEHOLDER_PATTERN = re.compile(r'\{\{(\w+)\}\}', re.ASCII)

DEFAULT_STATE = 'Delaware'
DEFAULT_FOUNDER_TITLE = 'CEO & Founder'


# =============================================================================
# Rendering
# =============================================================================


def render_template(
    template: str,
    variables: Mapping[str, str],
    strict: bool = False,
) -> str:
    """
    Replace every {{key}} in template with variables[key].

    Tokens whose key is absent (or maps to None) are left unchanged.

    Args:
        template: Template body
        variables: Placeholder name -> rendered value
        strict: Raise instead of leaving unresolved tokens in the output

    Returns:
        Rendered text

    Raises:
        UnresolvedPlaceholderError: strict is set and some tokens have no value
    """
    if strict:
        missing = [
            name
            for name in _unique(PLACEHOLDER_PATTERN.findall(template))
            if variables.get(name) is None
        ]
        if missing:
            raise UnresolvedPlaceholderError(missing)

    def _substitute(match: re.Match) -> str:
        value = variables.get(match.group(1))
        return match.group(0) if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def find_unresolved_placeholders(text: str) -> list[str]:
    """Names of {{...}} tokens left in text, in order of first appearance."""
    return _unique(PLACEHOLDER_PATTERN.findall(text))


def _unique(names: list[str]) -> list[str]:
    return list(dict.fromkeys(names))


# =============================================================================
# Template variables
# =============================================================================


def build_template_vars(deal: Any, startup: Any, talent: Any) -> dict[str, str]:
    """
    Derive the placeholder values for a SAFE from deal, startup and talent.

    investment_amount is approximated as valuation_cap * equity_percent / 100:
    the template inputs carry no separately negotiated purchase amount, so the
    figure is indicative and callers should not treat it as the amount paid.

    Args:
        deal: Deal model or dict with equity_percent, discount, safe_terms, created_at
        startup: Startup model or dict with name, location, founder.full_name
        talent: TalentProfile model or dict with title, user.full_name

    Returns:
        Mapping for every placeholder of the built-in templates
    """
    terms = _safe_terms_of(deal)

    valuation_cap = _as_number(_field(terms, 'valuation_cap'), 0.0)
    discount = _as_number(
        _first_present(_field(terms, 'discount'), _field(deal, 'discount')), 0.0
    )
    equity_percent = _as_number(
        _first_present(_field(terms, 'equity_percent'), _field(deal, 'equity_percent')), 0.0
    )

    if valuation_cap > 0:
        investment_amount = format_currency(_round_half_up(valuation_cap * (equity_percent / 100)))
    else:
        investment_amount = '$0'

    return {
        'company_name': _text(_field(startup, 'name')) or 'Company',
        'investor_name': _text(_field(talent, 'user', 'full_name')) or 'Investor',
        'investor_title': _text(_field(talent, 'title')) or 'Contributor',
        'founder_name': _text(_field(startup, 'founder', 'full_name')) or 'Founder',
        'founder_title': DEFAULT_FOUNDER_TITLE,
        'investment_amount': investment_amount,
        'valuation_cap': format_currency(valuation_cap),
        'discount_rate': format_plain_number(discount),
        'equity_percent': f'{equity_percent:.2f}',
        'state': state_from_location(_text(_field(startup, 'location'))),
        'date': format_long_date(_field(deal, 'created_at')),
    }


def format_currency(amount: float) -> str:
    """Format as whole US dollars with thousands separators: 1000000 -> "$1,000,000"."""
    whole = _round_half_up(amount)
    sign = '-' if whole < 0 else ''
    return f'{sign}${abs(whole):,}'


def format_long_date(value: Any = None) -> str:
    """
    Format an ISO timestamp (or datetime) as "September 15, 2025".

    The calendar date of the timestamp's own offset is used. Missing or
    unparsable values fall back to today (UTC).
    """
    moment = _parse_datetime(value) or datetime.now(timezone.utc)
    return f'{moment:%B} {moment.day}, {moment.year}'


def state_from_location(location: str | None) -> str:
    """Text after the last comma of a free-text location, else Delaware."""
    if not location:
        return DEFAULT_STATE
    return location.rsplit(',', 1)[-1].strip() or DEFAULT_STATE


# =============================================================================
# Document rendering
# =============================================================================


@dataclass
class RenderedSafe:
    """A rendered SAFE and the inputs that produced it."""

    template: SafeTemplate
    document: str
    variables: dict[str, str]
    unresolved: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            'template': self.template.value,
            'document': self.document,
            'variables': self.variables,
            'unresolved': self.unresolved,
        }


def render_safe_document(
    deal: Any,
    startup: Any,
    talent: Any,
    template: SafeTemplate | str | None = None,
    strict: bool = False,
) -> RenderedSafe:
    """
    Render the SAFE for a deal.

    Args:
        deal: Deal model or dict
        startup: Startup model or dict
        talent: TalentProfile model or dict
        template: Template override; defaults to deal.safe_terms.template
        strict: Raise on unresolved placeholders instead of leaving them

    Returns:
        RenderedSafe with the document text and the variables used

    Raises:
        UnknownTemplateError: template name is not recognised
        UnresolvedPlaceholderError: strict is set and tokens are unresolved
    """
    if template is None:
        template = _field(_safe_terms_of(deal), 'template') or SafeTemplate.YC_STANDARD
    body = get_template(template)
    template_name = SafeTemplate(template)

    variables = build_template_vars(deal, startup, talent)
    document = render_template(body, variables, strict=strict)
    unresolved = find_unresolved_placeholders(document)

    if unresolved:
        logger.warning(
            'safe.unresolved_placeholders',
            template=template_name.value,
            placeholders=unresolved,
        )
    logger.info(
        'safe.rendered',
        template=template_name.value,
        length=len(document),
        unresolved_count=len(unresolved),
    )

    return RenderedSafe(
        template=template_name,
        document=document,
        variables=variables,
        unresolved=unresolved,
    )


# =============================================================================
# Field access helpers
# =============================================================================


def _field(obj: Any, *path: str) -> Any:
    """Walk a path through dicts / models, returning None on any gap."""
    current = obj
    for key in path:
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(key)
        elif isinstance(current, BaseModel):
            current = getattr(current, key, None)
        else:
            return None
    return current


def _safe_terms_of(deal: Any) -> Any:
    terms = _field(deal, 'safe_terms')
    if isinstance(terms, str):
        try:
            terms = json.loads(terms)
        except ValueError:
            return None
    return terms


def _first_present(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _as_number(value: Any, default: float) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _round_half_up(value: float) -> int:
    # Half up, not banker's rounding
    return math.floor(value + 0.5)


def _parse_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
