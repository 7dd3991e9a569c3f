"""
Renderer - paints computed boxes onto a PdfPage.

Boxes are painted in list order, so later boxes paint over earlier
ones. Each block type has a painter in ``BLOCK_PAINTERS``; types with
no painter are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.pdfmetrics import Font

from ...models.block import BLOCK_TYPES
from ...models.text_block import DEFAULT_TEXT_COLOR, TextBlock
from ...styles.style_resolver import parse_color, resolve_styles
from ...utils.color_utils import hex_to_rgb
from ..font_resolver import resolve_standard_font
from ..layout_primitives import BorderSpec, ComputedBox, ComputedStyle
from ..text_alignment import TextAlignmentEngine
from .page import PdfPage

logger = logging.getLogger(__name__)


@dataclass
class RendererContext:
    """
    Per-document render state.

    Holds the font cache keyed by (family, bold). A context belongs to a
    single generation call and is never shared between documents.
    """

    document: Optional[Any] = None
    fonts: Dict[Tuple[str, bool], Font] = field(default_factory=dict)

    def get_font(self, family: Optional[str], bold: bool = False) -> Font:
        if not isinstance(family, str):
            family = None
        key = ((family or "").strip().lower(), bool(bold))
        font = self.fonts.get(key)
        if font is None:
            font_name = resolve_standard_font(family, bold)
            font = pdfmetrics.getFont(font_name)
            self.fonts[key] = font
            logger.debug(f"Font {font_name} loaded for family={family!r} bold={bold}")
        return font


def to_pdf_y(page_height: float, y: float) -> float:
    """Convert a top-left-origin Y to the page's bottom-left origin."""
    return page_height - y


def paint_text_block(page: PdfPage, box: ComputedBox, style: ComputedStyle, ctx: RendererContext) -> None:
    block: TextBlock = box.block
    font = ctx.get_font(block.style.get("fontFamily"), block.is_bold)
    font_size = block.font_size
    line_height = block.line_height
    color = hex_to_rgb(parse_color(block.style.get("color"), DEFAULT_TEXT_COLOR))
    alignment = block.text_align

    first_baseline = to_pdf_y(page.height, box.y + style.padding_top + font_size)

    for index, line in enumerate(block.lines()):
        if not line:
            continue

        text_width = font.stringWidth(line, font_size)
        x = TextAlignmentEngine.calculate_x(
            box.x,
            box.width,
            text_width,
            alignment,
            padding_left=style.padding_left,
            padding_right=style.padding_right,
        )
        y = first_baseline - index * line_height
        page.draw_text(line, x=x, y=y, size=font_size, font=font.fontName, color=color)


def paint_borders(page: PdfPage, box: ComputedBox, style: ComputedStyle) -> None:
    """Stroke the four box edges that carry a border."""
    top = to_pdf_y(page.height, box.y)
    bottom = to_pdf_y(page.height, box.y + box.height)
    left = box.x
    right = box.x + box.width

    edges = (
        (style.border_top, (left, top), (right, top)),
        (style.border_right, (right, top), (right, bottom)),
        (style.border_bottom, (left, bottom), (right, bottom)),
        (style.border_left, (left, top), (left, bottom)),
    )
    for border, start, end in edges:
        if border is None:
            continue
        _stroke_edge(page, border, start, end)


def _stroke_edge(page: PdfPage, border: BorderSpec, start, end) -> None:
    color = hex_to_rgb(parse_color(border.color))
    page.draw_line(start, end, thickness=border.width, color=color, style=border.style)


Painter = Callable[[PdfPage, ComputedBox, ComputedStyle, RendererContext], None]

BLOCK_PAINTERS: Dict[str, Painter] = {
    "text": paint_text_block,
}


def render_box(page: PdfPage, box: ComputedBox, ctx: RendererContext) -> bool:
    """Paint one box; returns False when its block has no painter for its variant."""
    block = box.block
    painter = BLOCK_PAINTERS.get(block.type)
    if painter is None:
        logger.debug(f"Skipping block of unsupported type {block.type!r}")
        return False

    variant = BLOCK_TYPES.get(block.type)
    if variant is None or not isinstance(block, variant):
        logger.debug(f"Skipping {type(block).__name__} tagged {block.type!r}: not a registered variant")
        return False

    style = resolve_styles(box.block)
    painter(page, box, style, ctx)
    if style.has_border:
        paint_borders(page, box, style)
    return True


def render_page(page: PdfPage, boxes: Sequence[ComputedBox], ctx: RendererContext) -> None:
    """
    Paint every box onto ``page`` in order.

    Args:
        page: Paint surface
        boxes: Boxes from compute_layout, already in page coordinates
        ctx: Render context owning the font cache
    """
    painted = sum(1 for box in boxes if render_box(page, box, ctx))
    logger.debug(f"Rendered {painted}/{len(boxes)} boxes")
