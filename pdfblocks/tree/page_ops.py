"""Page operations; elements and metadata are shared with the input tree."""

from dataclasses import replace
from typing import Callable, Iterable

from ..models.tree import PageConfig, PDFTree


def _in_range(tree: PDFTree, index: int) -> bool:
    return 0 <= index < len(tree.pages)


def add_page(tree: PDFTree, page: PageConfig) -> PDFTree:
    return replace(tree, pages=tree.pages + (page,))


def add_page_at(tree: PDFTree, page: PageConfig, index: int) -> PDFTree:
    pages = list(tree.pages)
    pages.insert(index, page)
    return replace(tree, pages=tuple(pages))


def remove_page_at(tree: PDFTree, index: int) -> PDFTree:
    if not _in_range(tree, index):
        return tree
    return replace(tree, pages=tree.pages[:index] + tree.pages[index + 1:])


def update_page_at(tree: PDFTree, index: int, page: PageConfig) -> PDFTree:
    if not _in_range(tree, index):
        return tree
    return replace(tree, pages=tree.pages[:index] + (page,) + tree.pages[index + 1:])


def update_page_at_with(
    tree: PDFTree,
    index: int,
    update_fn: Callable[[PageConfig], PageConfig],
) -> PDFTree:
    if not _in_range(tree, index):
        return tree
    return update_page_at(tree, index, update_fn(tree.pages[index]))


def set_pages(tree: PDFTree, pages: Iterable[PageConfig]) -> PDFTree:
    """Replace all pages."""
    return replace(tree, pages=tuple(pages))
