"""Color utilities shared by the style resolver and the renderer."""

from typing import Optional, Sequence, Tuple

RGBFloat = Tuple[float, float, float]

NAMED_COLORS = {
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
    "gray": "#808080",
    "grey": "#808080",
}

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def named_color(name: Optional[str]) -> Optional[str]:
    """Return the hex value of a named color (case-insensitive) or None."""
    if not name or not isinstance(name, str):
        return None
    return NAMED_COLORS.get(name.strip().lower())


def rgb_to_hex(rgb_color: Sequence[int]) -> Optional[str]:
    """Convert an (r, g, b) triple in 0-255 to ``#rrggbb``; channels are clamped."""
    if not isinstance(rgb_color, (tuple, list)) or len(rgb_color) != 3:
        return None

    try:
        r, g, b = [max(0, min(255, int(c))) for c in rgb_color]
    except (ValueError, TypeError):
        return None
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color: Optional[str], default: RGBFloat = (0.0, 0.0, 0.0)) -> RGBFloat:
    """Convert HEX color (#RRGGBB or #RGB) to RGB tuple (0-1 scale).

    Args:
        hex_color: Color in HEX format (e.g., "#FF0000" or "#F00")
        default: Default color to return if conversion fails

    Returns:
        Tuple of (r, g, b) values in 0-1 scale
    """
    if not hex_color or not isinstance(hex_color, str):
        return default

    digits = hex_color.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    if len(digits) != 6 or not set(digits) <= _HEX_DIGITS:
        return default

    r = int(digits[0:2], 16) / 255.0
    g = int(digits[2:4], 16) / 255.0
    b = int(digits[4:6], 16) / 255.0
    return (r, g, b)
