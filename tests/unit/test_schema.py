"""Unit tests for the content schemas."""

import pytest

from blockpaste.handler.dom import parse_fragment
from blockpaste.handler.schema import (
    LIST_NESTING_DEPTH,
    PASSTHROUGH_TAG,
    get_block_content_schema,
    get_content_schema,
    get_embedded_content_schema,
    get_list_content_schema,
    get_phrasing_content_schema,
    is_block_content,
    is_embedded,
    is_inline,
    is_inline_for_tag,
    is_phrasing_content,
)


class TestPhrasingSchema:
    """Test the phrasing content schema."""

    def test_contains_formatting_and_text(self) -> None:
        """Test the permitted inline tags."""
        schema = get_phrasing_content_schema()
        for tag in ("strong", "em", "del", "ins", "a", "code", "abbr", "sub", "sup", "br", "#text"):
            assert tag in schema
        assert "p" not in schema
        assert "span" not in schema

    def test_attributes(self) -> None:
        """Test the allowed attributes of links and abbreviations."""
        schema = get_phrasing_content_schema()
        assert schema["a"].attributes == frozenset({"href"})
        assert schema["abbr"].attributes == frozenset({"title"})
        assert schema["strong"].attributes == frozenset()

    def test_formatting_does_not_nest_in_itself(self) -> None:
        """Test strong > em > strong is possible but strong > strong is not."""
        strong_children = get_phrasing_content_schema()["strong"].children
        assert "strong" not in strong_children
        assert "em" in strong_children
        assert "strong" in strong_children["em"].children

    def test_br_and_text_are_childless(self) -> None:
        """Test that line breaks and text have no children scope."""
        schema = get_phrasing_content_schema()
        assert schema["br"].children is None
        assert schema["#text"].children is None

    def test_schema_is_immutable(self) -> None:
        """Test that schemas cannot be modified."""
        with pytest.raises(TypeError):
            get_phrasing_content_schema()["p"] = get_phrasing_content_schema()["em"]  # type: ignore[index]

    def test_schema_is_computed_once(self) -> None:
        """Test that the same value is returned on every call."""
        assert get_phrasing_content_schema() is get_phrasing_content_schema()


class TestListSchema:
    """Test the list content schema."""

    def test_lists_nest_through_items(self) -> None:
        """Test ul > li > ul is possible but ul > ul is not."""
        schema = get_list_content_schema()
        ul_children = schema["ul"].children
        assert set(ul_children) == {"li"}
        li_children = ul_children["li"].children
        assert "ul" in li_children
        assert "ol" in li_children
        assert "strong" in li_children

    def test_ordered_list_type(self) -> None:
        """Test that ordered lists keep their numbering type."""
        assert get_list_content_schema()["ol"].attributes == frozenset({"type"})

    def test_word_processor_nesting_depth(self) -> None:
        """Test lists nest as deep as word processor outlines."""
        assert LIST_NESTING_DEPTH >= 9

        scope = get_list_content_schema()
        for _ in range(LIST_NESTING_DEPTH - 1):
            scope = scope["ul"].children["li"].children
        assert "ul" in scope
        assert "ul" not in scope["ul"].children["li"].children


class TestBlockSchema:
    """Test block and content schemas."""

    def test_block_tags(self) -> None:
        """Test the permitted block tags."""
        schema = get_block_content_schema()
        for tag in ("p", "h1", "h6", "ul", "ol", "pre", "figure", "blockquote", "hr", "table"):
            assert tag in schema
        assert schema[PASSTHROUGH_TAG].attributes == frozenset(
            {"data-block", "data-custom-text", "data-no-teaser"}
        )

    def test_blockquote_does_not_contain_itself(self) -> None:
        """Test that the blockquote recursion is broken after one level."""
        children = get_block_content_schema()["blockquote"].children
        assert "blockquote" not in children
        assert "p" in children
        assert "figure" in children

    def test_blockquote_citation(self) -> None:
        """Test a quote may carry its citation."""
        children = get_block_content_schema()["blockquote"].children
        assert "cite" in children
        assert "em" in children["cite"].children
        assert "cite" not in get_block_content_schema()

    def test_table_structure(self) -> None:
        """Test table sections, rows and cells."""
        table = get_block_content_schema()["table"].children
        assert set(table) == {"thead", "tbody", "tfoot"}
        row = table["tbody"].children["tr"]
        assert set(row.children) == {"th", "td"}
        assert "strong" in row.children["td"].children

    def test_embedded_schema(self) -> None:
        """Test media leaves and their allowed classes."""
        schema = get_embedded_content_schema()
        assert schema["img"].attributes == frozenset({"src", "alt"})
        assert "alignleft" in schema["img"].classes
        assert schema["img"].children is None

    def test_content_schema_merges_phrasing_and_blocks(self) -> None:
        """Test that the content schema holds both categories."""
        schema = get_content_schema()
        assert "strong" in schema
        assert "p" in schema
        assert "#text" in schema

    def test_iframe_permission(self) -> None:
        """Test that figures only hold frames when permitted."""
        assert "iframe" not in get_content_schema()["figure"].children
        assert "iframe" not in get_content_schema(allow_embedded_frames=False)["figure"].children
        assert "iframe" in get_content_schema(allow_embedded_frames=True)["figure"].children
        assert "img" in get_content_schema()["figure"].children


class TestCategories:
    """Test node category predicates."""

    def test_is_inline(self) -> None:
        """Test phrasing tags and tag groups of the target."""
        soup = parse_fragment("<em>a</em><li>b</li><h3>c</h3><p>d</p>")
        em, li, h3, p = soup.contents
        assert is_inline(em)
        assert not is_inline(li)
        assert is_inline(li, "ul")
        assert is_inline(h3, "h2")
        assert not is_inline(p, "p")

    def test_is_inline_for_tag(self) -> None:
        """Test tag group membership."""
        assert is_inline_for_tag("ol", "li")
        assert not is_inline_for_tag("ol", None)
        assert not is_inline_for_tag("p", "div")

    def test_phrasing_block_and_embedded(self) -> None:
        """Test the remaining category predicates."""
        soup = parse_fragment("<span>a</span><p>b</p><img>")
        span, p, img = soup.contents
        assert is_phrasing_content(span)
        assert not is_phrasing_content(p)
        assert is_block_content(p)
        assert not is_block_content(span)
        assert is_embedded(img)
