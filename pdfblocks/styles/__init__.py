"""Style shorthand resolution (lengths, spacing, borders, colors, page sizes)."""

from .style_resolver import (
    LEGACY_PAGE_SIZES,
    parse_border,
    parse_color,
    parse_length,
    parse_spacing,
    resolve_page_size,
    resolve_styles,
)

__all__ = [
    "LEGACY_PAGE_SIZES",
    "parse_border",
    "parse_color",
    "parse_length",
    "parse_spacing",
    "resolve_page_size",
    "resolve_styles",
]
