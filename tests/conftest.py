"""
Pytest configuration for pdfblocks
"""

import logging
import sys

import pytest

from pdfblocks.models import DocumentMetadata, PageConfig, create_text_block
from pdfblocks.tree import create_pdf_tree


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def a4_page():
    """Absolute A4 page in points."""
    return PageConfig(width=595.28, height=841.89, unit="pt")


@pytest.fixture
def hello_block():
    """Single text block used by the end-to-end scenario."""
    return create_text_block(
        "Hello",
        {"x": 40, "y": 40, "width": 200, "height": 20},
        id="hello",
        style={"fontSize": 12, "color": "#000000"},
    )


@pytest.fixture
def hello_tree(a4_page, hello_block):
    """One A4 page, one text block and a title."""
    return create_pdf_tree(
        pages=[a4_page],
        elements=[hello_block],
        metadata=DocumentMetadata(title="Hello document"),
    )


@pytest.fixture
def three_block_tree(a4_page):
    """Tree with three text blocks a, b, c."""
    blocks = [
        create_text_block(name.upper(), {"x": 10, "y": 10 + i * 30, "width": 100, "height": 20}, id=name)
        for i, name in enumerate("abc")
    ]
    return create_pdf_tree(pages=[a4_page], elements=blocks)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
