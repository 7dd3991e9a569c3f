"""Metadata operations; pages and elements are shared with the input tree."""

from dataclasses import replace
from typing import Any, Iterable

from ..models.tree import DocumentMetadata, PDFTree


def set_metadata(tree: PDFTree, **fields: Any) -> PDFTree:
    """
    Merge metadata fields into the existing metadata.

    Args:
        tree: Current PDFTree
        **fields: title, author, subject, keywords or creator

    Returns:
        New PDFTree with metadata updated
    """
    if "keywords" in fields and fields["keywords"] is not None:
        fields["keywords"] = tuple(fields["keywords"])
    return replace(tree, metadata=replace(tree.metadata, **fields))


def replace_metadata(tree: PDFTree, metadata: DocumentMetadata) -> PDFTree:
    return replace(tree, metadata=metadata)


def set_title(tree: PDFTree, title: str) -> PDFTree:
    return set_metadata(tree, title=title)


def set_author(tree: PDFTree, author: str) -> PDFTree:
    return set_metadata(tree, author=author)


def set_subject(tree: PDFTree, subject: str) -> PDFTree:
    return set_metadata(tree, subject=subject)


def set_keywords(tree: PDFTree, keywords: Iterable[str]) -> PDFTree:
    return set_metadata(tree, keywords=keywords)


def add_keyword(tree: PDFTree, keyword: str) -> PDFTree:
    current = tree.metadata.keywords or ()
    return set_metadata(tree, keywords=current + (keyword,))


def remove_keyword(tree: PDFTree, keyword: str) -> PDFTree:
    current = tree.metadata.keywords or ()
    return set_metadata(tree, keywords=tuple(k for k in current if k != keyword))


def set_creator(tree: PDFTree, creator: str) -> PDFTree:
    return set_metadata(tree, creator=creator)


def clear_metadata(tree: PDFTree) -> PDFTree:
    return replace(tree, metadata=DocumentMetadata())
