"""Tests for immutable PDFTree operations."""

from dataclasses import FrozenInstanceError, replace

import pytest

from pdfblocks import tree as Tree
from pdfblocks.models import DEFAULT_PAGE, DocumentMetadata, PageConfig, create_text_block


def _ids(tree):
    return [el.id for el in tree.elements]


@pytest.mark.unit
class TestFactory:
    """Test cases for tree factories."""

    def test_default_tree_has_one_a4_page(self):
        tree = Tree.create_pdf_tree()

        assert tree.pages == (DEFAULT_PAGE,)
        assert tree.elements == ()
        assert tree.metadata == DocumentMetadata()

    def test_explicit_empty_pages_stay_empty(self):
        assert Tree.create_pdf_tree(pages=[]).pages == ()

    def test_empty_tree(self):
        tree = Tree.create_empty_pdf_tree()

        assert tree.pages == ()
        assert not Tree.has_elements(tree)

    def test_tree_is_frozen(self):
        tree = Tree.create_pdf_tree()

        with pytest.raises(FrozenInstanceError):
            tree.elements = ()


@pytest.mark.unit
class TestElementOperations:
    """Test cases for element operations."""

    def test_add_element_returns_new_tree(self, three_block_tree):
        block = create_text_block("D", {"x": 0, "y": 0, "width": 10, "height": 10}, id="d")

        updated = Tree.add_element(three_block_tree, block)

        assert _ids(updated) == ["a", "b", "c", "d"]
        assert _ids(three_block_tree) == ["a", "b", "c"]
        assert updated.pages is three_block_tree.pages
        assert updated.metadata is three_block_tree.metadata

    def test_add_element_at(self, three_block_tree):
        block = create_text_block("D", {"x": 0, "y": 0, "width": 10, "height": 10}, id="d")

        assert _ids(Tree.add_element_at(three_block_tree, block, 1)) == ["a", "d", "b", "c"]

    def test_add_elements(self, three_block_tree):
        extra = [create_text_block(t, {"x": 0, "y": 0, "width": 1, "height": 1}, id=t) for t in "xy"]

        assert _ids(Tree.add_elements(three_block_tree, extra)) == ["a", "b", "c", "x", "y"]

    def test_remove_element_at(self, three_block_tree):
        assert _ids(Tree.remove_element_at(three_block_tree, 1)) == ["a", "c"]

    def test_remove_element_at_out_of_range(self, three_block_tree):
        assert Tree.remove_element_at(three_block_tree, 7) is three_block_tree
        assert Tree.remove_element_at(three_block_tree, -1) is three_block_tree

    def test_remove_element_by_identity(self, three_block_tree):
        target = three_block_tree.elements[2]

        assert _ids(Tree.remove_element(three_block_tree, target)) == ["a", "b"]

    def test_remove_element_by_id(self, three_block_tree):
        assert _ids(Tree.remove_element_by_id(three_block_tree, "a")) == ["b", "c"]

    def test_clear_elements(self, three_block_tree):
        assert Tree.clear_elements(three_block_tree).elements == ()

    def test_update_element_at_shares_untouched_elements(self, three_block_tree):
        block = create_text_block("B2", {"x": 0, "y": 0, "width": 10, "height": 10}, id="b2")

        updated = Tree.update_element_at(three_block_tree, 1, block)

        assert _ids(updated) == ["a", "b2", "c"]
        assert updated.elements[0] is three_block_tree.elements[0]
        assert updated.elements[2] is three_block_tree.elements[2]

    def test_update_element_by_id_with(self, three_block_tree):
        updated = Tree.update_element_by_id_with(three_block_tree, "c", lambda el: replace(el, text="changed"))

        assert Tree.find_element_by_id(updated, "c").text == "changed"
        assert Tree.find_element_by_id(three_block_tree, "c").text == "C"

    def test_update_element_at_with_out_of_range(self, three_block_tree):
        assert Tree.update_element_at_with(three_block_tree, 5, lambda el: el) is three_block_tree

    def test_update_element_by_id(self, three_block_tree):
        block = create_text_block("Z", {"x": 0, "y": 0, "width": 10, "height": 10}, id="z")

        assert _ids(Tree.update_element_by_id(three_block_tree, "a", block)) == ["z", "b", "c"]

    def test_move_element(self, three_block_tree):
        assert _ids(Tree.move_element(three_block_tree, 0, 2)) == ["b", "c", "a"]

    def test_move_element_invalid(self, three_block_tree):
        assert Tree.move_element(three_block_tree, 0, 9) is three_block_tree
        assert Tree.move_element(three_block_tree, 1, 1) is three_block_tree

    def test_move_up_and_down(self, three_block_tree):
        assert _ids(Tree.move_element_up(three_block_tree, 1)) == ["b", "a", "c"]
        assert _ids(Tree.move_element_down(three_block_tree, 1)) == ["a", "c", "b"]
        assert Tree.move_element_up(three_block_tree, 0) is three_block_tree
        assert Tree.move_element_down(three_block_tree, 2) is three_block_tree

    def test_move_to_start_and_end(self, three_block_tree):
        assert _ids(Tree.move_element_to_start(three_block_tree, 2)) == ["c", "a", "b"]
        assert _ids(Tree.move_element_to_end(three_block_tree, 0)) == ["b", "c", "a"]


@pytest.mark.unit
class TestPageOperations:
    """Test cases for page operations."""

    def test_add_and_remove_pages(self):
        tree = Tree.create_pdf_tree()
        letter = PageConfig(size="Letter")

        updated = Tree.add_page(tree, letter)

        assert Tree.get_page_count(updated) == 2
        assert Tree.get_page_at(updated, 1) is letter
        assert Tree.get_page_count(Tree.remove_page_at(updated, 0)) == 1
        assert updated.elements is tree.elements

    def test_add_page_at(self):
        tree = Tree.create_pdf_tree()
        first = PageConfig(width=100, height=100)

        assert Tree.add_page_at(tree, first, 0).pages[0] is first

    def test_update_page_at_with(self):
        tree = Tree.create_pdf_tree()

        updated = Tree.update_page_at_with(tree, 0, lambda page: replace(page, orientation="landscape"))

        assert updated.pages[0].orientation == "landscape"
        assert tree.pages[0].orientation is None

    def test_update_page_out_of_range(self):
        tree = Tree.create_pdf_tree()

        assert Tree.update_page_at(tree, 3, PageConfig(size="A4")) is tree

    def test_set_pages(self):
        pages = [PageConfig(width=1, height=2), PageConfig(width=3, height=4)]

        assert Tree.set_pages(Tree.create_pdf_tree(), pages).pages == tuple(pages)


@pytest.mark.unit
class TestMetadataOperations:
    """Test cases for metadata operations."""

    def test_set_title_keeps_other_fields(self):
        tree = Tree.set_author(Tree.create_pdf_tree(), "Ada")

        updated = Tree.set_title(tree, "Report")

        assert updated.metadata.title == "Report"
        assert updated.metadata.author == "Ada"
        assert tree.metadata.title is None
        assert updated.elements is tree.elements

    def test_set_metadata_merges(self):
        tree = Tree.set_metadata(Tree.create_pdf_tree(), subject="Q3", creator="script")

        assert tree.metadata.subject == "Q3"
        assert tree.metadata.creator == "script"

    def test_keywords(self):
        tree = Tree.set_keywords(Tree.create_pdf_tree(), ["pdf", "blocks"])
        tree = Tree.add_keyword(tree, "layout")
        tree = Tree.remove_keyword(tree, "pdf")

        assert tree.metadata.keywords == ("blocks", "layout")

    def test_add_keyword_to_empty(self):
        assert Tree.add_keyword(Tree.create_pdf_tree(), "one").metadata.keywords == ("one",)

    def test_replace_and_clear(self):
        metadata = DocumentMetadata(title="T")
        tree = Tree.replace_metadata(Tree.create_pdf_tree(), metadata)

        assert tree.metadata is metadata
        assert Tree.clear_metadata(tree).metadata == DocumentMetadata()


@pytest.mark.unit
class TestQueries:
    """Test cases for tree queries."""

    def test_find_by_id(self, three_block_tree):
        assert Tree.find_element_by_id(three_block_tree, "b") is three_block_tree.elements[1]
        assert Tree.find_element_by_id(three_block_tree, "missing") is None

    def test_find_index_by_id(self, three_block_tree):
        assert Tree.find_element_index_by_id(three_block_tree, "c") == 2
        assert Tree.find_element_index_by_id(three_block_tree, "missing") == -1

    def test_find_index_by_identity(self, three_block_tree):
        block = three_block_tree.elements[1]
        lookalike = replace(block)

        assert Tree.find_element_index(three_block_tree, block) == 1
        assert Tree.find_element_index(three_block_tree, lookalike) == -1

    def test_find_by_type_and_predicate(self, three_block_tree):
        assert len(Tree.find_elements_by_type(three_block_tree, "text")) == 3
        assert Tree.find_elements_by_type(three_block_tree, "image") == []
        assert [el.id for el in Tree.find_elements(three_block_tree, lambda el: el.layout.y > 20)] == ["b", "c"]

    def test_counts_and_access(self, three_block_tree):
        assert Tree.get_element_count(three_block_tree) == 3
        assert Tree.get_element_at(three_block_tree, 0).id == "a"
        assert Tree.get_element_at(three_block_tree, 3) is None
        assert Tree.get_page_at(three_block_tree, 1) is None
        assert Tree.has_element_by_id(three_block_tree, "a")
        assert not Tree.has_element_by_id(three_block_tree, "zz")
