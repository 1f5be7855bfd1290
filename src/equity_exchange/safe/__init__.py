"""
SAFE (Simple Agreement for Future Equity) templates, rendering and signing.
"""

from .documents import (
    deal_status_after,
    generate_safe_document,
    sign_safe_document,
    signing_message,
)
from .renderer import (
    RenderedSafe,
    build_template_vars,
    find_unresolved_placeholders,
    render_safe_document,
    render_template,
)
from .templates import YC_MFN_SAFE, YC_POST_MONEY_SAFE, get_template

__all__ = [
    # Rendering
    'RenderedSafe',
    'build_template_vars',
    'find_unresolved_placeholders',
    'render_safe_document',
    'render_template',
    # Templates
    'YC_MFN_SAFE',
    'YC_POST_MONEY_SAFE',
    'get_template',
    # Documents
    'deal_status_after',
    'generate_safe_document',
    'sign_safe_document',
    'signing_message',
]
