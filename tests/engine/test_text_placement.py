"""Tests for text alignment, font resolution and text metrics."""

import pytest
from reportlab.pdfbase import pdfmetrics

from pdfblocks.engine.font_resolver import resolve_standard_font
from pdfblocks.engine.text_alignment import TextAlignmentEngine
from pdfblocks.engine.text_metrics import measure_lines, measure_text, text_block_content_height
from pdfblocks.models import create_text_block


@pytest.mark.unit
class TestTextAlignmentEngine:
    """Test cases for TextAlignmentEngine.calculate_x."""

    def test_left(self):
        assert TextAlignmentEngine.calculate_x(0, 200, 50, "left") == 0

    def test_left_uses_padding(self):
        assert TextAlignmentEngine.calculate_x(10, 200, 50, "left", padding_left=5) == 15

    def test_center(self):
        assert TextAlignmentEngine.calculate_x(0, 200, 50, "center") == 75

    def test_center_ignores_padding(self):
        assert TextAlignmentEngine.calculate_x(0, 200, 50, "center", padding_left=20, padding_right=20) == 75

    def test_right(self):
        assert TextAlignmentEngine.calculate_x(0, 200, 50, "right") == 150

    def test_right_subtracts_padding(self):
        assert TextAlignmentEngine.calculate_x(0, 200, 50, "right", padding_right=10) == 140

    def test_justify_is_left(self):
        assert TextAlignmentEngine.calculate_x(0, 200, 50, "justify", padding_left=3) == 3

    def test_no_clamping_for_wide_text(self):
        assert TextAlignmentEngine.calculate_x(0, 100, 300, "center") == -100

    def test_alignment_from_style(self):
        assert TextAlignmentEngine.get_alignment_from_style({"textAlign": "Right"}) == "right"
        assert TextAlignmentEngine.get_alignment_from_style({"textAlign": "middle"}) == "left"
        assert TextAlignmentEngine.get_alignment_from_style({}) == "left"


@pytest.mark.unit
class TestResolveStandardFont:
    """Test cases for resolve_standard_font."""

    @pytest.mark.parametrize(
        "family,bold,expected",
        [
            ("Times New Roman", False, "Times-Roman"),
            ("times", True, "Times-Bold"),
            ("Courier New", False, "Courier"),
            ("courier", True, "Courier-Bold"),
            ("Arial", False, "Helvetica"),
            ("Arial", True, "Helvetica-Bold"),
            (None, False, "Helvetica"),
            ("", True, "Helvetica-Bold"),
        ],
    )
    def test_mapping(self, family, bold, expected):
        assert resolve_standard_font(family, bold) == expected


@pytest.mark.unit
class TestTextMetrics:
    """Test cases for text measurement."""

    def test_measure_matches_reportlab(self):
        expected = pdfmetrics.stringWidth("Hello", "Helvetica", 12)

        assert measure_text("Hello", "Helvetica", 12) == expected
        assert expected > 0

    def test_empty_text_has_zero_width(self):
        assert measure_text("", "Helvetica", 12) == 0.0

    def test_measure_lines_uses_block_font(self):
        block = create_text_block(
            "ab\nabcd",
            {"x": 0, "y": 0, "width": 100, "height": 40},
            style={"fontFamily": "Courier", "fontSize": 10},
        )

        widths = measure_lines(block)

        # Courier glyphs are 600/1000 em wide.
        assert widths == [pytest.approx(12.0), pytest.approx(24.0)]

    def test_content_height(self):
        block = create_text_block(
            "a\nb\nc",
            {"x": 0, "y": 0, "width": 100, "height": 40},
            style={"fontSize": 10, "lineHeight": 1.5},
        )

        assert text_block_content_height(block) == pytest.approx(45.0)
