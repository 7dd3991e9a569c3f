"""Non-mutating queries over a PDFTree."""

from typing import Callable, List, Optional

from ..models.block import Block
from ..models.tree import PageConfig, PDFTree


def find_element_by_id(tree: PDFTree, element_id: str) -> Optional[Block]:
    """First element carrying ``element_id``, or None."""
    return next((el for el in tree.elements if el.id == element_id), None)


def find_element_index_by_id(tree: PDFTree, element_id: str) -> int:
    """Index of the first element carrying ``element_id``, or -1."""
    for index, element in enumerate(tree.elements):
        if element.id == element_id:
            return index
    return -1


def find_element_index(tree: PDFTree, element: Block) -> int:
    """Index of ``element`` by identity, or -1."""
    for index, candidate in enumerate(tree.elements):
        if candidate is element:
            return index
    return -1


def find_elements_by_type(tree: PDFTree, block_type: str) -> List[Block]:
    return [el for el in tree.elements if el.type == block_type]


def find_elements(tree: PDFTree, predicate: Callable[[Block], bool]) -> List[Block]:
    return [el for el in tree.elements if predicate(el)]


def get_element_at(tree: PDFTree, index: int) -> Optional[Block]:
    if 0 <= index < len(tree.elements):
        return tree.elements[index]
    return None


def get_element_count(tree: PDFTree) -> int:
    return len(tree.elements)


def get_page_count(tree: PDFTree) -> int:
    return len(tree.pages)


def get_page_at(tree: PDFTree, index: int) -> Optional[PageConfig]:
    if 0 <= index < len(tree.pages):
        return tree.pages[index]
    return None


def has_elements(tree: PDFTree) -> bool:
    return len(tree.elements) > 0


def has_element_by_id(tree: PDFTree, element_id: str) -> bool:
    return any(el.id == element_id for el in tree.elements)
