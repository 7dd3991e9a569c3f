"""Text block variant."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..exceptions import ParsingError
from .block import Block, BlockLayout, coerce_layout, read_common_fields, register_block_type

OVERFLOW_POLICIES = ("clip", "ellipsis", "shrinkToFit", "expand")
TEXT_ALIGNMENTS = ("left", "center", "right", "justify")

DEFAULT_FONT_SIZE = 12.0
DEFAULT_LINE_HEIGHT = 1.2
DEFAULT_TEXT_COLOR = "#000000"


def _style_number(value: Any, default: float) -> float:
    """Read a numeric style value; anything not a finite number yields ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


@register_block_type("text")
@dataclass(frozen=True, kw_only=True)
class TextBlock(Block):
    """
    Literal text painted inside its layout box.

    ``text`` may contain ``\\n`` as explicit line breaks; there is no
    automatic wrapping. Only the ``expand`` overflow policy has paint
    semantics, the other tags are stored and round-tripped.
    """

    type: str = field(default="text", init=False)
    text: str
    overflow: str = "expand"

    @property
    def font_size(self) -> float:
        return _style_number(self.style.get("fontSize"), DEFAULT_FONT_SIZE) or DEFAULT_FONT_SIZE

    @property
    def line_height(self) -> float:
        """Line advance in points: fontSize * lineHeight multiplier."""
        return self.font_size * _style_number(self.style.get("lineHeight"), DEFAULT_LINE_HEIGHT)

    @property
    def is_bold(self) -> bool:
        weight = self.style.get("fontWeight")
        if weight == "bold":
            return True
        return isinstance(weight, (int, float)) and not isinstance(weight, bool) and weight >= 700

    @property
    def text_align(self) -> str:
        align = self.style.get("textAlign") or "left"
        return align if align in TEXT_ALIGNMENTS else "left"

    def lines(self):
        """Explicit lines; ``\\n`` is the only break."""
        return self.text.split("\n")

    def to_dict(self) -> Dict[str, Any]:
        data = Block.to_dict(self)
        data["text"] = self.text
        data["overflow"] = self.overflow
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextBlock":
        fields = read_common_fields(data)

        text = data.get("text")
        if not isinstance(text, str):
            raise ParsingError("Text block 'text' must be a string", repr(text), value=text)

        overflow = data.get("overflow")
        if overflow is None:
            overflow = "expand"
        if overflow not in OVERFLOW_POLICIES:
            raise ParsingError("Unknown overflow policy", repr(overflow), value=overflow)

        return cls(text=text, overflow=overflow, **fields)


def create_text_block(
    text: str,
    layout: Any,
    id: Optional[str] = None,
    style: Optional[Mapping[str, Any]] = None,
    overflow: str = "expand",
) -> TextBlock:
    """
    Create a TextBlock from options.

    Args:
        text: Literal text, ``\\n`` separates lines
        layout: BlockLayout or mapping with x/y/width/height in points
        id: Optional identifier
        style: Optional style mapping (fontSize, color, textAlign, ...)
        overflow: One of clip, ellipsis, shrinkToFit, expand

    Returns:
        New TextBlock with a normalized layout
    """
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(f"Unknown overflow policy: {overflow!r}")
    block_layout: BlockLayout = coerce_layout(layout)
    return TextBlock(
        text=text,
        layout=block_layout,
        id=id,
        style=dict(style or {}),
        overflow=overflow,
    )
