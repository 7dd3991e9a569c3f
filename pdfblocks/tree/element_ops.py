"""
Element operations.

Each function returns a new PDFTree; ``pages`` and ``metadata`` are
shared with the input tree. Out-of-range indices return the input tree.
"""

from dataclasses import replace
from typing import Callable, Iterable

from ..models.block import Block
from ..models.tree import PDFTree

BlockUpdate = Callable[[Block], Block]


def _in_range(tree: PDFTree, index: int) -> bool:
    return 0 <= index < len(tree.elements)


def add_element(tree: PDFTree, element: Block) -> PDFTree:
    """Append an element."""
    return replace(tree, elements=tree.elements + (element,))


def add_element_at(tree: PDFTree, element: Block, index: int) -> PDFTree:
    """Insert an element before ``index`` (list.insert semantics)."""
    elements = list(tree.elements)
    elements.insert(index, element)
    return replace(tree, elements=tuple(elements))


def add_elements(tree: PDFTree, elements: Iterable[Block]) -> PDFTree:
    return replace(tree, elements=tree.elements + tuple(elements))


def remove_element_at(tree: PDFTree, index: int) -> PDFTree:
    if not _in_range(tree, index):
        return tree
    return replace(tree, elements=tree.elements[:index] + tree.elements[index + 1:])


def remove_element(tree: PDFTree, element: Block) -> PDFTree:
    """Remove every occurrence of ``element`` (identity comparison)."""
    return replace(tree, elements=tuple(el for el in tree.elements if el is not element))


def remove_element_by_id(tree: PDFTree, element_id: str) -> PDFTree:
    return replace(tree, elements=tuple(el for el in tree.elements if el.id != element_id))


def clear_elements(tree: PDFTree) -> PDFTree:
    return replace(tree, elements=())


def update_element_at(tree: PDFTree, index: int, element: Block) -> PDFTree:
    if not _in_range(tree, index):
        return tree
    return replace(tree, elements=tree.elements[:index] + (element,) + tree.elements[index + 1:])


def update_element_by_id(tree: PDFTree, element_id: str, element: Block) -> PDFTree:
    """Replace every element carrying ``element_id``."""
    return replace(
        tree,
        elements=tuple(element if el.id == element_id else el for el in tree.elements),
    )


def update_element_at_with(tree: PDFTree, index: int, update_fn: BlockUpdate) -> PDFTree:
    if not _in_range(tree, index):
        return tree
    return update_element_at(tree, index, update_fn(tree.elements[index]))


def update_element_by_id_with(tree: PDFTree, element_id: str, update_fn: BlockUpdate) -> PDFTree:
    return replace(
        tree,
        elements=tuple(update_fn(el) if el.id == element_id else el for el in tree.elements),
    )


def move_element(tree: PDFTree, from_index: int, to_index: int) -> PDFTree:
    """Move an element; invalid or equal indices return the input tree."""
    if not _in_range(tree, from_index) or not _in_range(tree, to_index) or from_index == to_index:
        return tree
    elements = list(tree.elements)
    element = elements.pop(from_index)
    elements.insert(to_index, element)
    return replace(tree, elements=tuple(elements))


def move_element_up(tree: PDFTree, index: int) -> PDFTree:
    if index <= 0:
        return tree
    return move_element(tree, index, index - 1)


def move_element_down(tree: PDFTree, index: int) -> PDFTree:
    if index >= len(tree.elements) - 1:
        return tree
    return move_element(tree, index, index + 1)


def move_element_to_start(tree: PDFTree, index: int) -> PDFTree:
    return move_element(tree, index, 0)


def move_element_to_end(tree: PDFTree, index: int) -> PDFTree:
    return move_element(tree, index, len(tree.elements) - 1)
