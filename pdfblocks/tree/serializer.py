"""
PDFTree serialization.

JSON shape::

    {"pages": [...], "elements": [{"type": "text", "layout": {...}, ...}],
     "metadata": {...}}

Unknown block types and wrong field types raise; nothing is silently
dropped on the way in.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

from ..exceptions import ParsingError
from ..models.block import Block, block_class_for
from ..models.tree import DEFAULT_PAGE, DocumentMetadata, PageConfig, PDFTree

logger = logging.getLogger(__name__)


def serialize_block(block: Block) -> Dict[str, Any]:
    """Serialize a registered block variant to a JSON-ready dict."""
    block_class_for(block.type)
    return block.to_dict()


def deserialize_block(data: Any) -> Block:
    """Build a block from JSON; raises UnsupportedBlockTypeError for unknown types."""
    if not isinstance(data, Mapping):
        raise ParsingError("Block must be an object", value=data)
    cls = block_class_for(data.get("type"))
    return cls.from_dict(data)


def serialize_pdf_tree(tree: PDFTree) -> Dict[str, Any]:
    """Convert a PDFTree to a JSON-ready dict."""
    return {
        "pages": [page.to_dict() for page in tree.pages],
        "elements": [serialize_block(element) for element in tree.elements],
        "metadata": tree.metadata.to_dict(),
    }


def pdf_tree_to_string(tree: PDFTree, pretty: bool = True) -> str:
    """Convert a PDFTree to a JSON string."""
    return json.dumps(serialize_pdf_tree(tree), indent=2 if pretty else None)


def deserialize_pdf_tree(data: Any) -> PDFTree:
    """
    Create a PDFTree from a JSON object.

    Missing ``pages`` yields one default A4 page (an explicit empty list
    stays empty); missing ``elements`` and ``metadata`` yield empty values.
    """
    if not isinstance(data, Mapping):
        raise ParsingError("Tree must be a JSON object", value=data)

    raw_pages = data.get("pages")
    raw_elements = data.get("elements")
    if raw_pages is not None and not isinstance(raw_pages, list):
        raise ParsingError("Tree 'pages' must be a list", repr(raw_pages), value=raw_pages)
    if raw_elements is not None and not isinstance(raw_elements, list):
        raise ParsingError("Tree 'elements' must be a list", repr(raw_elements), value=raw_elements)

    if raw_pages is None:
        pages = (DEFAULT_PAGE,)
    else:
        pages = tuple(PageConfig.from_dict(page) for page in raw_pages)
    elements = tuple(deserialize_block(element) for element in raw_elements or ())
    metadata = DocumentMetadata.from_dict(data.get("metadata"))

    logger.debug(f"Deserialized tree: {len(pages)} page(s), {len(elements)} element(s)")
    return PDFTree(pages=pages, elements=elements, metadata=metadata)


def pdf_tree_from_string(json_string: str) -> PDFTree:
    """Create a PDFTree from a JSON string; malformed JSON raises ParsingError."""
    try:
        data = json.loads(json_string)
    except (TypeError, ValueError) as exc:
        raise ParsingError("Malformed tree JSON", str(exc), value=json_string) from exc
    return deserialize_pdf_tree(data)


def clone_pdf_tree(tree: PDFTree) -> PDFTree:
    """Deep copy through a serialize/deserialize round trip."""
    return deserialize_pdf_tree(serialize_pdf_tree(tree))
