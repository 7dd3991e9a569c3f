"""
PDFGenerator - turns a PDFTree into PDF bytes
---------------------------------------------
Pipeline: metadata -> page size -> layout -> one page -> render -> bytes.
ReportLab is the document writer; the renderer paints through PdfPage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from reportlab.pdfgen import canvas

from ...exceptions import RenderingError
from ...models.tree import DocumentMetadata, PDFTree
from ...tree.serializer import deserialize_pdf_tree, pdf_tree_from_string
from ...version import __version__
from ..geometry import A4_SIZE, PageGeometry, resolve_page_geometry
from ..layout_engine import compute_layout
from ..layout_primitives import ComputedBox
from ..layout_validator import LayoutValidator
from .page import PdfPage
from .renderer import RendererContext, render_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Generator configuration.

    Attributes:
        default_page_size: Page size in points used when the tree has no pages.
        producer: Value of the PDF ``Producer`` field.
        invariant: Produce byte-identical output for identical input.
        page_compression: Compress page content streams.
        validate_layout: Log LayoutValidator findings before painting.
    """

    default_page_size: Tuple[float, float] = A4_SIZE
    producer: str = f"pdfblocks {__version__}"
    invariant: bool = False
    page_compression: bool = False
    validate_layout: bool = False


class PDFGenerator:
    """Single-page PDF generator for block trees."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def generate(self, tree: PDFTree) -> bytes:
        """
        Generate PDF bytes for ``tree``.

        Args:
            tree: Document tree to render

        Returns:
            Serialized PDF document
        """
        buffer = BytesIO()
        geometry = resolve_page_geometry(tree.pages[0] if tree.pages else None, self.config.default_page_size)

        document = canvas.Canvas(
            buffer,
            pagesize=(geometry.width, geometry.height),
            invariant=1 if self.config.invariant else 0,
            pageCompression=1 if self.config.page_compression else 0,
        )
        document.setProducer(self.config.producer)
        logger.debug("PDF document created")

        self._apply_metadata(document, tree.metadata)
        logger.debug(f"Page size: {geometry.width:.2f}x{geometry.height:.2f}pt")

        boxes = self._layout(tree, geometry)
        if self.config.validate_layout:
            self._log_validation(boxes, geometry)

        page = PdfPage(document, geometry.width, geometry.height)
        render_page(page, boxes, RendererContext(document=document))
        page.finish()

        try:
            document.save()
        except Exception as exc:
            raise RenderingError("Failed to serialize PDF document", str(exc)) from exc

        data = buffer.getvalue()
        logger.info(f"Generated PDF: {len(boxes)} boxes, {len(data)} bytes")
        return data

    def write(self, tree: PDFTree, output_path: Union[str, Path]) -> Path:
        """Generate ``tree`` and write it to ``output_path``; parent dirs are created."""
        target = Path(output_path)
        data = self.generate(tree)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.info(f"PDF saved as {target}")
        return target

    @staticmethod
    def _apply_metadata(document: canvas.Canvas, metadata: DocumentMetadata) -> None:
        # Absent fields are left as ReportLab's defaults.
        if metadata.title is not None:
            document.setTitle(metadata.title)
        if metadata.author is not None:
            document.setAuthor(metadata.author)
        if metadata.subject is not None:
            document.setSubject(metadata.subject)
        if metadata.keywords is not None:
            document.setKeywords(", ".join(metadata.keywords))
        if metadata.creator is not None:
            document.setCreator(metadata.creator)

    @staticmethod
    def _layout(tree: PDFTree, geometry: PageGeometry) -> List[ComputedBox]:
        boxes = compute_layout(tree.elements, geometry.content_width)
        margins = geometry.margins
        if margins.left or margins.top:
            boxes = [box.offset(margins.left, margins.top) for box in boxes]
        return boxes

    @staticmethod
    def _log_validation(boxes: List[ComputedBox], geometry: PageGeometry) -> None:
        _, errors, warnings = LayoutValidator(boxes, geometry.width, geometry.height).validate()
        for message in errors + warnings:
            logger.warning(message)


def generate_pdf(tree: PDFTree, config: Optional[GeneratorConfig] = None) -> bytes:
    """Generate a single-page PDF for ``tree`` and return its bytes."""
    return PDFGenerator(config).generate(tree)


def generate_pdf_file(
    tree: PDFTree,
    output_path: Union[str, Path],
    config: Optional[GeneratorConfig] = None,
) -> Path:
    """Generate ``tree`` and write the PDF to ``output_path``."""
    return PDFGenerator(config).write(tree, output_path)


def generate_pdf_from_json(json_string: str, config: Optional[GeneratorConfig] = None) -> bytes:
    """Parse a JSON tree and generate it; parse failures raise ParsingError."""
    return generate_pdf(pdf_tree_from_string(json_string), config)


def generate_pdf_from_object(data: Any, config: Optional[GeneratorConfig] = None) -> bytes:
    """Deserialize a JSON object tree and generate it; parse failures raise ParsingError."""
    return generate_pdf(deserialize_pdf_tree(data), config)
