"""
Layout validator - checks computed boxes against the page.

Checks:
- whether geometry is finite
- whether width/height are non-negative (errors) or zero (warnings)
- whether boxes stay inside the page (warnings)
- whether text lines fit their box (warnings)

The generator never enforces these findings; callers decide.
"""

import math
from typing import List, Sequence, Tuple

from ..exceptions import LayoutError
from ..models.text_block import TextBlock
from .layout_primitives import ComputedBox
from .text_metrics import measure_lines, text_block_content_height


class LayoutValidator:
    """Layout validator - checks ComputedBox integrity."""

    def __init__(self, boxes: Sequence[ComputedBox], page_width: float, page_height: float):
        """
        Args:
            boxes: Boxes produced by compute_layout
            page_width: Page width in points
            page_height: Page height in points
        """
        self.boxes = list(boxes)
        self.page_width = page_width
        self.page_height = page_height
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate(self) -> Tuple[bool, List[str], List[str]]:
        """
        Performs full layout validation.

        Returns:
            Tuple (is_valid, errors, warnings)
        """
        self.errors.clear()
        self.warnings.clear()

        for index, box in enumerate(self.boxes):
            label = self._label(index, box)
            if not self._validate_finite(label, box):
                continue
            self._validate_dimensions(label, box)
            self._validate_in_bounds(label, box)
            if isinstance(box.block, TextBlock):
                self._validate_text_fit(label, box)

        return not self.errors, self.errors.copy(), self.warnings.copy()

    def raise_for_errors(self) -> None:
        """Raise LayoutError when validation finds errors."""
        is_valid, errors, _ = self.validate()
        if not is_valid:
            raise LayoutError("Invalid layout", "; ".join(errors))

    @staticmethod
    def _label(index: int, box: ComputedBox) -> str:
        block = box.block
        name = f"#{index} ({block.type}"
        if block.id:
            name += f", id={block.id}"
        return name + ")"

    def _validate_finite(self, label: str, box: ComputedBox) -> bool:
        values = (box.x, box.y, box.width, box.height)
        if all(math.isfinite(v) for v in values):
            return True
        self.errors.append(f"Block {label} has non-finite geometry {values}")
        return False

    def _validate_dimensions(self, label: str, box: ComputedBox) -> None:
        if box.width < 0:
            self.errors.append(f"Block {label} has negative width: {box.width}")
        elif box.width == 0:
            self.warnings.append(f"Block {label} has zero width")

        if box.height < 0:
            self.errors.append(f"Block {label} has negative height: {box.height}")
        elif box.height == 0:
            self.warnings.append(f"Block {label} has zero height")

    def _validate_in_bounds(self, label: str, box: ComputedBox) -> None:
        if box.x < 0 or box.x + box.width > self.page_width:
            self.warnings.append(
                f"Block {label} extends past the horizontal page edges "
                f"(x={box.x}, width={box.width}, page_width={self.page_width})"
            )
        if box.y < 0 or box.y + box.height > self.page_height:
            self.warnings.append(
                f"Block {label} extends past the vertical page edges "
                f"(y={box.y}, height={box.height}, page_height={self.page_height})"
            )

    def _validate_text_fit(self, label: str, box: ComputedBox) -> None:
        block = box.block
        widest = max(measure_lines(block), default=0.0)
        if box.width >= 0 and widest > box.width:
            self.warnings.append(f"Block {label} has a line wider than its box ({widest:.2f} > {box.width})")

        content_height = text_block_content_height(block)
        if box.height >= 0 and content_height > box.height:
            self.warnings.append(
                f"Block {label} text is taller than its box ({content_height:.2f} > {box.height})"
            )
