"""Text measurement backed by ReportLab font metrics."""

from __future__ import annotations

import logging
from typing import List

from reportlab.pdfbase import pdfmetrics

from ..models.text_block import TextBlock
from .font_resolver import resolve_standard_font

logger = logging.getLogger(__name__)


def measure_text(text: str, font_name: str, font_size: float) -> float:
    """Width of ``text`` in points for a registered font."""
    if not text:
        return 0.0
    return pdfmetrics.stringWidth(text, font_name, font_size)


def measure_lines(block: TextBlock) -> List[float]:
    """Per-line widths of a text block using its resolved standard font."""
    font_name = resolve_standard_font(block.style.get("fontFamily"), block.is_bold)
    widths = [measure_text(line, font_name, block.font_size) for line in block.lines()]
    logger.debug(f"Measured {len(widths)} lines of block {block.id or '?'} with {font_name}")
    return widths


def text_block_content_height(block: TextBlock) -> float:
    """Height taken by all explicit lines at the block's line height."""
    return len(block.lines()) * block.line_height
