"""
Style resolver - converts CSS-like shorthand into values in points.

Parsing is permissive: malformed or absent input degrades to the
caller-supplied default and never raises.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional, Tuple

from ..engine.layout_primitives import BorderSpec, ComputedStyle
from ..models.block import Block
from ..utils.color_utils import named_color, rgb_to_hex
from ..utils.units import PX_TO_PT

logger = logging.getLogger(__name__)

Spacing = Tuple[float, float, float, float]

BORDER_STYLES = ("solid", "dashed", "dotted")

# Legacy page sizes in points.
LEGACY_PAGE_SIZES = {
    "A4": (595.28, 841.89),
    "LETTER": (612.0, 792.0),
    "LEGAL": (612.0, 1008.0),
}

_LENGTH_RE = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)(pt|px)$")
_RGB_RE = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$", re.IGNORECASE)


def parse_length(value: Any, default: float = 0.0) -> float:
    """
    Parse a length such as ``"12pt"`` or ``"16px"`` into points.

    Args:
        value: Length string; ``auto`` and anything unparseable yield ``default``
        default: Value returned when parsing fails

    Returns:
        Length in points
    """
    if not value or not isinstance(value, str):
        return default

    token = value.strip()
    if token == "auto":
        return default

    match = _LENGTH_RE.match(token)
    if not match:
        return default

    number, unit = match.groups()
    if unit == "px":
        return float(number) * PX_TO_PT
    return float(number)


def parse_spacing(value: Any) -> Spacing:
    """
    Expand margin/padding shorthand to ``(top, right, bottom, left)``.

    1 token -> all sides; 2 -> vertical, horizontal; 3 -> top,
    horizontal, bottom; 4 -> explicit. Any other count -> all zero.
    """
    if not value or not isinstance(value, str):
        return (0.0, 0.0, 0.0, 0.0)

    parts = [parse_length(token, 0.0) for token in value.split()]

    if len(parts) == 1:
        return (parts[0], parts[0], parts[0], parts[0])
    if len(parts) == 2:
        return (parts[0], parts[1], parts[0], parts[1])
    if len(parts) == 3:
        return (parts[0], parts[1], parts[2], parts[1])
    if len(parts) == 4:
        return (parts[0], parts[1], parts[2], parts[3])
    return (0.0, 0.0, 0.0, 0.0)


def parse_border(value: Any) -> Optional[BorderSpec]:
    """
    Parse ``"<width> <style> <color>"``; fewer than three tokens means no border.

    Unknown line styles fall back to ``solid``. Everything after the
    style token is the color, so ``rgb(0, 0, 0)`` with spaces is kept whole.
    """
    if not value or not isinstance(value, str):
        return None

    parts = value.split()
    if len(parts) < 3:
        return None

    width = parse_length(parts[0], 1.0)
    style = parts[1].lower()
    if style not in BORDER_STYLES:
        logger.debug(f"Unknown border style {parts[1]!r}, using solid")
        style = "solid"
    color = " ".join(parts[2:])
    return BorderSpec(width=width, style=style, color=color)


def parse_color(value: Any, default: str = "#000000") -> str:
    """
    Normalize a color to a hex string.

    Named colors (black, white, red, green, blue, gray, grey) resolve
    case-insensitively; ``#...`` values pass through unchanged;
    ``rgb(r, g, b)`` becomes lowercase ``#rrggbb``. Anything else
    returns ``default``.
    """
    if not value or not isinstance(value, str):
        return default

    token = value.strip()
    named = named_color(token)
    if named:
        return named

    if token.startswith("#"):
        return token

    match = _RGB_RE.match(token)
    if match:
        return rgb_to_hex([int(channel) for channel in match.groups()]) or default

    return default


def resolve_styles(block: Block) -> ComputedStyle:
    """
    Resolve a block's margin, padding and border shorthand.

    The single ``border`` shorthand is applied to all four edges.
    """
    style: Mapping[str, Any] = block.style or {}
    margin_top, margin_right, margin_bottom, margin_left = parse_spacing(style.get("margin"))
    padding_top, padding_right, padding_bottom, padding_left = parse_spacing(style.get("padding"))
    border = parse_border(style.get("border"))

    return ComputedStyle(
        margin_top=margin_top,
        margin_right=margin_right,
        margin_bottom=margin_bottom,
        margin_left=margin_left,
        padding_top=padding_top,
        padding_right=padding_right,
        padding_bottom=padding_bottom,
        padding_left=padding_left,
        border_top=border,
        border_right=border,
        border_bottom=border,
        border_left=border,
    )


def resolve_page_size(size: Any) -> Tuple[float, float]:
    """
    Map a legacy page size to ``(width, height)`` in points.

    Accepts "A4", "Letter", "Legal" (case-insensitive) or a two-number
    pair; anything else falls back to A4.
    """
    if isinstance(size, str):
        preset = LEGACY_PAGE_SIZES.get(size.strip().upper())
        if preset:
            return preset
        logger.warning(f"Unknown page size {size!r}, using A4")
        return LEGACY_PAGE_SIZES["A4"]

    if isinstance(size, (list, tuple)) and len(size) == 2:
        try:
            return (float(size[0]), float(size[1]))
        except (TypeError, ValueError):
            logger.warning(f"Invalid page size {size!r}, using A4")

    return LEGACY_PAGE_SIZES["A4"]
