"""
Immutable tree helpers.

Usage::

    from pdfblocks import tree as Tree

    doc = Tree.create_pdf_tree()
    doc = Tree.add_element(doc, block)
    doc = Tree.set_title(doc, "Invoice")
"""

from .element_ops import (
    add_element,
    add_element_at,
    add_elements,
    clear_elements,
    move_element,
    move_element_down,
    move_element_to_end,
    move_element_to_start,
    move_element_up,
    remove_element,
    remove_element_at,
    remove_element_by_id,
    update_element_at,
    update_element_at_with,
    update_element_by_id,
    update_element_by_id_with,
)
from .factory import create_empty_pdf_tree, create_pdf_tree
from .metadata_ops import (
    add_keyword,
    clear_metadata,
    remove_keyword,
    replace_metadata,
    set_author,
    set_creator,
    set_keywords,
    set_metadata,
    set_subject,
    set_title,
)
from .page_ops import add_page, add_page_at, remove_page_at, set_pages, update_page_at, update_page_at_with
from .query_ops import (
    find_element_by_id,
    find_element_index,
    find_element_index_by_id,
    find_elements,
    find_elements_by_type,
    get_element_at,
    get_element_count,
    get_page_at,
    get_page_count,
    has_element_by_id,
    has_elements,
)
from .serializer import (
    clone_pdf_tree,
    deserialize_block,
    deserialize_pdf_tree,
    pdf_tree_from_string,
    pdf_tree_to_string,
    serialize_block,
    serialize_pdf_tree,
)
