"""
pdfblocks - absolute-layout PDF generation from block trees.

A document is an immutable PDFTree: page configuration, metadata and an
ordered list of blocks, each carrying its own box in points. Rendering
is a fixed pipeline:

- Style resolver: CSS-like shorthand (lengths, spacing, borders, colors)
- Layout engine: block -> ComputedBox, index-aligned
- Renderer: paints boxes onto a page through ReportLab
- Generator: metadata, page size, layout, render, bytes

Main Components:
- models: Block, TextBlock, PageConfig, DocumentMetadata, PDFTree
- tree: immutable tree operations and JSON serialization
- styles: shorthand parsing
- engine: layout, alignment, validation and PDF output
- utils: units, colors and logging setup
"""

from .engine.layout_engine import compute_layout
from .engine.layout_validator import LayoutValidator
from .engine.pdf import (
    GeneratorConfig,
    PDFGenerator,
    PdfPage,
    RendererContext,
    generate_pdf,
    generate_pdf_file,
    generate_pdf_from_json,
    generate_pdf_from_object,
    render_page,
)
from .exceptions import (
    LayoutError,
    ParsingError,
    PDFBlocksError,
    RenderingError,
    UnsupportedBlockTypeError,
)
from .models import (
    Block,
    BlockLayout,
    DocumentMetadata,
    PageConfig,
    PDFTree,
    TextBlock,
    create_text_block,
)
from .styles import parse_border, parse_color, parse_length, parse_spacing, resolve_styles
from .tree import (
    create_empty_pdf_tree,
    create_pdf_tree,
    deserialize_pdf_tree,
    pdf_tree_from_string,
    pdf_tree_to_string,
    serialize_pdf_tree,
)
from .version import __version__

__all__ = [
    "__version__",
    "compute_layout",
    "LayoutValidator",
    "GeneratorConfig",
    "PDFGenerator",
    "PdfPage",
    "RendererContext",
    "generate_pdf",
    "generate_pdf_file",
    "generate_pdf_from_json",
    "generate_pdf_from_object",
    "render_page",
    "LayoutError",
    "ParsingError",
    "PDFBlocksError",
    "RenderingError",
    "UnsupportedBlockTypeError",
    "Block",
    "BlockLayout",
    "DocumentMetadata",
    "PageConfig",
    "PDFTree",
    "TextBlock",
    "create_text_block",
    "parse_border",
    "parse_color",
    "parse_length",
    "parse_spacing",
    "resolve_styles",
    "create_empty_pdf_tree",
    "create_pdf_tree",
    "deserialize_pdf_tree",
    "pdf_tree_from_string",
    "pdf_tree_to_string",
    "serialize_pdf_tree",
]
