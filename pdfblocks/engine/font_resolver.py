from __future__ import annotations

from typing import Optional


def _normalize_family(font_family: Optional[str]) -> str:
    if not font_family or not isinstance(font_family, str):
        return "helvetica"
    return font_family.strip().lower()


def resolve_standard_font(font_family: Optional[str], bold: bool = False) -> str:
    """
    Map a CSS-like family to one of the standard PDF fonts.

    Families containing "times" use Times, families containing
    "courier" use Courier, everything else is Helvetica.
    """
    family = _normalize_family(font_family)

    if "times" in family:
        return "Times-Bold" if bold else "Times-Roman"
    if "courier" in family:
        return "Courier-Bold" if bold else "Courier"
    return "Helvetica-Bold" if bold else "Helvetica"
