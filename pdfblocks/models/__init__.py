"""Immutable document models: blocks, pages, metadata and the tree root."""

from .block import (
    BLOCK_TYPES,
    Block,
    BlockLayout,
    block_class_for,
    normalize_block_layout,
    register_block_type,
)
from .text_block import OVERFLOW_POLICIES, TEXT_ALIGNMENTS, TextBlock, create_text_block
from .tree import DEFAULT_PAGE, DocumentMetadata, PageConfig, PDFTree

__all__ = [
    "BLOCK_TYPES",
    "Block",
    "BlockLayout",
    "block_class_for",
    "normalize_block_layout",
    "register_block_type",
    "OVERFLOW_POLICIES",
    "TEXT_ALIGNMENTS",
    "TextBlock",
    "create_text_block",
    "DEFAULT_PAGE",
    "DocumentMetadata",
    "PageConfig",
    "PDFTree",
]
