"""
TextAlignmentEngine - computes the X position of a text run inside a box.

Supports:
- left: box x plus left padding (default)
- center: centered on the full box width
- right: right edge minus right padding
- justify: drawn as left, no word spacing is applied
"""

from typing import Any, Mapping


class TextAlignmentEngine:
    """
    Engine computing the X start of a text run from its alignment.
    """

    @staticmethod
    def calculate_x(
        box_x: float,
        box_width: float,
        text_width: float,
        alignment: str = "left",
        padding_left: float = 0.0,
        padding_right: float = 0.0,
    ) -> float:
        """
        Compute the X start for a run.

        Centering ignores padding. The result is not clamped, so text
        wider than the box may start left of the box edge.

        Args:
            box_x: Box left edge in points
            box_width: Box width in points
            text_width: Measured run width in points
            alignment: "left", "center", "right" or "justify"
            padding_left: Left padding in points
            padding_right: Right padding in points

        Returns:
            X position for the run
        """
        alignment = alignment.lower() if alignment else "left"

        if alignment == "center":
            return box_x + (box_width - text_width) / 2

        elif alignment == "right":
            return box_x + box_width - text_width - padding_right

        else:  # "left", "justify" or unknown
            return box_x + padding_left

    @staticmethod
    def get_alignment_from_style(style: Mapping[str, Any]) -> str:
        """
        Read ``textAlign`` from a style mapping.

        Returns:
            "left", "center", "right" or "justify"; anything else is "left"
        """
        alignment = str(style.get("textAlign") or "left").lower()
        if alignment in ("left", "center", "right", "justify"):
            return alignment
        return "left"
