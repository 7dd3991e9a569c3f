"""PDF output: ReportLab page wrapper, renderer and generator."""

from .generator import (
    GeneratorConfig,
    PDFGenerator,
    generate_pdf,
    generate_pdf_file,
    generate_pdf_from_json,
    generate_pdf_from_object,
)
from .page import PdfPage
from .renderer import BLOCK_PAINTERS, RendererContext, render_box, render_page

__all__ = [
    "GeneratorConfig",
    "PDFGenerator",
    "generate_pdf",
    "generate_pdf_file",
    "generate_pdf_from_json",
    "generate_pdf_from_object",
    "PdfPage",
    "BLOCK_PAINTERS",
    "RendererContext",
    "render_box",
    "render_page",
]
