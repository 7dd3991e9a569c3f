"""Layout engine: computed boxes, alignment, fonts and validation."""

from .layout_engine import compute_box, compute_layout
from .layout_primitives import BorderSpec, ComputedBox, ComputedStyle
from .layout_validator import LayoutValidator
from .text_alignment import TextAlignmentEngine

__all__ = [
    "compute_box",
    "compute_layout",
    "BorderSpec",
    "ComputedBox",
    "ComputedStyle",
    "LayoutValidator",
    "TextAlignmentEngine",
]
