"""
Data structures passed from the layout step to the renderer.

All lengths are in points. ComputedBox coordinates use the authoring
space (top-left origin, Y grows downward); conversion to the PDF
bottom-left space happens only at paint time.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, Optional, Tuple

from ..models.block import Block

BorderLineStyle = Literal["solid", "dashed", "dotted"]


@dataclass(frozen=True, slots=True)
class BorderSpec:
    """Single border edge: width in points, line style and color string."""

    width: float
    style: BorderLineStyle
    color: str


@dataclass(frozen=True, slots=True)
class ComputedStyle:
    """Spacing and borders resolved from a block's style shorthand."""

    margin_top: float = 0.0
    margin_right: float = 0.0
    margin_bottom: float = 0.0
    margin_left: float = 0.0
    padding_top: float = 0.0
    padding_right: float = 0.0
    padding_bottom: float = 0.0
    padding_left: float = 0.0
    border_top: Optional[BorderSpec] = None
    border_right: Optional[BorderSpec] = None
    border_bottom: Optional[BorderSpec] = None
    border_left: Optional[BorderSpec] = None

    @property
    def padding(self) -> Tuple[float, float, float, float]:
        return (self.padding_top, self.padding_right, self.padding_bottom, self.padding_left)

    @property
    def margin(self) -> Tuple[float, float, float, float]:
        return (self.margin_top, self.margin_right, self.margin_bottom, self.margin_left)

    @property
    def has_border(self) -> bool:
        return any((self.border_top, self.border_right, self.border_bottom, self.border_left))


@dataclass(frozen=True, slots=True)
class ComputedBox:
    """Paint box for one block, index-aligned with the input block list."""

    x: float
    y: float
    width: float
    height: float
    block: Block

    def offset(self, dx: float, dy: float) -> "ComputedBox":
        """Return a copy moved by (dx, dy) in authoring space."""
        return replace(self, x=self.x + dx, y=self.y + dy)
