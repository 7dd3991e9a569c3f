"""PDFTree factory functions."""

from typing import Iterable, Optional

from ..models.block import Block
from ..models.tree import DEFAULT_PAGE, DocumentMetadata, PageConfig, PDFTree


def create_pdf_tree(
    pages: Optional[Iterable[PageConfig]] = None,
    elements: Optional[Iterable[Block]] = None,
    metadata: Optional[DocumentMetadata] = None,
) -> PDFTree:
    """
    Create a new PDFTree with default values.

    Args:
        pages: Page configurations (defaults to a single A4 page)
        elements: Initial blocks
        metadata: Document metadata

    Returns:
        New PDFTree instance
    """
    return PDFTree(
        pages=tuple(pages) if pages is not None else (DEFAULT_PAGE,),
        elements=tuple(elements or ()),
        metadata=metadata or DocumentMetadata(),
    )


def create_empty_pdf_tree() -> PDFTree:
    """Create a PDFTree with no pages, elements or metadata."""
    return PDFTree()
