"""Tests for the absolute layout engine and page geometry."""

import pytest

from pdfblocks.engine import ComputedBox, compute_layout
from pdfblocks.engine.geometry import A4_SIZE, Margins, resolve_page_geometry
from pdfblocks.models import Block, BlockLayout, PageConfig, create_text_block


def _block(x, y, width, height, **kwargs):
    return create_text_block("text", {"x": x, "y": y, "width": width, "height": height}, **kwargs)


@pytest.mark.unit
class TestComputeLayout:
    """Test suite for compute_layout."""

    def test_empty_input(self):
        assert compute_layout([], 500) == []

    def test_boxes_are_index_aligned(self):
        blocks = [_block(0, 0, 10, 10, id="a"), _block(5, 5, 20, 20, id="b"), _block(1, 2, 3, 4, id="c")]

        boxes = compute_layout(blocks, 500)

        assert len(boxes) == len(blocks)
        for block, box in zip(blocks, boxes):
            assert box.block is block
            assert (box.x, box.y, box.width, box.height) == (
                block.layout.x,
                block.layout.y,
                block.layout.width,
                block.layout.height,
            )

    def test_geometry_is_rounded(self):
        block = Block(type="text", layout=BlockLayout(x=1.234, y=5.678, width=10.005, height=3.3333))

        box = compute_layout([block], 100)[0]

        assert box.x == 1.23
        assert box.y == 5.68
        assert box.height == 3.33

    def test_idempotent(self):
        blocks = [_block(12.5, 30, 200, 20), _block(40, 80.25, 100, 0)]

        first = compute_layout(blocks, 500)
        second = compute_layout(blocks, 500)

        assert first == second

    def test_container_width_does_not_change_boxes(self):
        blocks = [_block(10, 10, 600, 20)]

        assert compute_layout(blocks, 100) == compute_layout(blocks, 1000)

    def test_zero_and_negative_sizes_pass_through(self):
        block = Block(type="text", layout=BlockLayout(x=0, y=0, width=0, height=-5))

        box = compute_layout([block], 500)[0]

        assert box.width == 0
        assert box.height == -5

    def test_overlapping_blocks_are_not_moved(self):
        blocks = [_block(10, 10, 100, 100), _block(20, 20, 100, 100)]

        boxes = compute_layout(blocks, 500)

        assert (boxes[1].x, boxes[1].y) == (20, 20)

    def test_offset_returns_moved_copy(self):
        box = compute_layout([_block(10, 20, 30, 40)], 500)[0]

        moved = box.offset(5, 7)

        assert isinstance(moved, ComputedBox)
        assert (moved.x, moved.y, moved.width, moved.height) == (15, 27, 30, 40)
        assert (box.x, box.y) == (10, 20)


@pytest.mark.unit
class TestResolvePageGeometry:
    """Test suite for resolve_page_geometry."""

    def test_no_page_uses_default(self):
        geometry = resolve_page_geometry(None)

        assert (geometry.width, geometry.height) == A4_SIZE
        assert geometry.margins == Margins()

    def test_absolute_points(self):
        geometry = resolve_page_geometry(PageConfig(width=300, height=400))

        assert (geometry.width, geometry.height) == (300, 400)
        assert geometry.content_width == 300

    def test_inches(self):
        geometry = resolve_page_geometry(PageConfig(width=8.5, height=11, unit="in"))

        assert (geometry.width, geometry.height) == (612, 792)

    def test_millimetres(self):
        geometry = resolve_page_geometry(PageConfig(width=210, height=297, unit="mm"))

        assert geometry.width == pytest.approx(595.28, abs=0.01)
        assert geometry.height == pytest.approx(841.89, abs=0.01)

    def test_centimetres(self):
        geometry = resolve_page_geometry(PageConfig(width=2.54, height=5.08, unit="cm"))

        assert geometry.width == pytest.approx(72)
        assert geometry.height == pytest.approx(144)

    def test_unknown_unit_is_points(self):
        geometry = resolve_page_geometry(PageConfig(width=100, height=200, unit="furlong"))

        assert (geometry.width, geometry.height) == (100, 200)

    def test_legacy_size_with_margins(self):
        geometry = resolve_page_geometry(PageConfig(size="Letter", margins="36pt 72pt"))

        assert (geometry.width, geometry.height) == (612, 792)
        assert geometry.margins == Margins(top=36, right=72, bottom=36, left=72)
        assert geometry.content_width == 612 - 144
        assert geometry.content_height == 792 - 72

    def test_landscape_swaps_dimensions(self):
        geometry = resolve_page_geometry(PageConfig(size="A4", orientation="landscape"))

        assert geometry.width > geometry.height
        assert (geometry.width, geometry.height) == (A4_SIZE[1], A4_SIZE[0])

    def test_portrait_swaps_wide_page(self):
        geometry = resolve_page_geometry(PageConfig(width=800, height=600, orientation="portrait"))

        assert (geometry.width, geometry.height) == (600, 800)
