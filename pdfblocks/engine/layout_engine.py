"""
Layout engine - absolute model.

Authors supply complete geometry on every block; the engine only
normalizes it and associates each block with its paint box. There is
no flow, no reflow, no collision detection and no implicit stacking.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..models.block import Block, normalize_block_layout
from .layout_primitives import ComputedBox

logger = logging.getLogger(__name__)


def compute_box(block: Block) -> ComputedBox:
    """Map one block to its ComputedBox; zero/negative sizes pass through."""
    layout = normalize_block_layout(block.layout_hint())
    return ComputedBox(
        x=layout.x,
        y=layout.y,
        width=layout.width,
        height=layout.height,
        block=block,
    )


def compute_layout(blocks: Sequence[Block], container_width: Optional[float] = None) -> List[ComputedBox]:
    """
    Compute paint boxes for a list of blocks.

    Args:
        blocks: Blocks in paint order
        container_width: Content width in points; accepted for interface
            stability, the absolute model does not use it

    Returns:
        One ComputedBox per block, index-aligned with ``blocks``
    """
    boxes = [compute_box(block) for block in blocks]
    logger.debug(f"Layout computed for {len(boxes)} boxes (container width={container_width})")
    return boxes
