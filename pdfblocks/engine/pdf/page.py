"""Paint surface for a single PDF page backed by a ReportLab canvas."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from reportlab.pdfgen import canvas as rl_canvas

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
RGB = Sequence[float]


class PdfPage:
    """
    Thin wrapper over ``reportlab.pdfgen.canvas.Canvas``.

    Coordinates are PDF user space: origin bottom-left, Y grows upward.
    The renderer only talks to this class, never to the canvas.
    """

    def __init__(self, canvas: rl_canvas.Canvas, width: float, height: float):
        self.canvas = canvas
        self.width = float(width)
        self.height = float(height)
        canvas.setPageSize((self.width, self.height))

    def draw_text(
        self,
        text: str,
        *,
        x: float,
        y: float,
        size: float,
        font: str,
        color: RGB = (0.0, 0.0, 0.0),
    ) -> None:
        """Draw a single run with its baseline at (x, y)."""
        c = self.canvas
        c.saveState()
        c.setFont(font, size)
        c.setFillColorRGB(*color)
        c.drawString(x, y, text)
        c.restoreState()

    def draw_line(
        self,
        start: Point,
        end: Point,
        *,
        thickness: float = 1.0,
        color: RGB = (0.0, 0.0, 0.0),
        style: str = "solid",
    ) -> None:
        """Stroke a straight segment; ``dashed`` and ``dotted`` set a dash pattern."""
        c = self.canvas
        c.saveState()
        c.setLineWidth(max(thickness, 0.01))
        c.setStrokeColorRGB(*color)
        if style == "dashed":
            c.setDash(6, 3)
        elif style == "dotted":
            c.setDash(1, 2)
        c.line(start[0], start[1], end[0], end[1])
        c.restoreState()

    def finish(self) -> None:
        """Close the page on the canvas."""
        self.canvas.showPage()
