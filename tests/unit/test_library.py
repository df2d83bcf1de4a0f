"""Unit tests for the core block types."""

import pytest

from blockpaste.blocks.library import create_default_registry
from blockpaste.blocks.models import Block
from blockpaste.blocks.registry import BlockTypeRegistry
from blockpaste.blocks.serializer import get_block_content, serialize
from blockpaste.config import Settings
from blockpaste.handler.raw_handler import Mode, RawHandler

CORE_BLOCK_NAMES = [
    "core/paragraph",
    "core/heading",
    "core/list",
    "core/quote",
    "core/image",
    "core/html",
    "core/table",
    "core/separator",
    "core/preformatted",
    "core/more",
    "core/nextpage",
    "core/gallery",
    "core/freeform",
]


class TestDefaultRegistry:
    """Test the registered core block types."""

    def test_core_types(self, registry: BlockTypeRegistry) -> None:
        """Test every core type is registered."""
        assert [block_type.name for block_type in registry.get_all()] == CORE_BLOCK_NAMES

    def test_fallback_type_follows_settings(self) -> None:
        """Test the fallback type is registered under the configured name."""
        registry = create_default_registry(Settings(unknown_block_name="cms/classic"))
        assert registry.get("cms/classic") is not None
        assert registry.get("core/freeform") is None

    def test_gallery_is_a_shortcode(self, registry: BlockTypeRegistry) -> None:
        """Test the gallery is created from shortcodes only."""
        transforms = registry.shortcode_transforms()
        assert [transform.block_name for transform in transforms] == ["core/gallery"]
        assert transforms[0].tags == ("gallery",)


class TestRawTransforms:
    """Test blocks created from pasted markup."""

    def _convert(self, handler: RawHandler, html: str, **kwargs: object) -> list[Block]:
        blocks = handler.convert(html, mode=Mode.BLOCKS, **kwargs)
        assert isinstance(blocks, list)
        return blocks

    def test_paragraph(self, handler: RawHandler) -> None:
        """Test paragraphs keep their inline markup."""
        assert self._convert(handler, '<p>a <a href="#x">b</a></p>') == [
            Block(name="core/paragraph", attributes={"content": 'a <a href="#x">b</a>'})
        ]

    @pytest.mark.parametrize("level", [1, 2, 4, 6])
    def test_heading(self, handler: RawHandler, level: int) -> None:
        """Test the heading level comes from the tag."""
        assert self._convert(handler, f"<h{level}>T</h{level}>") == [
            Block(name="core/heading", attributes={"content": "T", "level": level})
        ]

    def test_lists(self, handler: RawHandler) -> None:
        """Test ordered and unordered lists."""
        assert self._convert(handler, "<ul><li>a</li></ul><ol><li>b</li></ol>") == [
            Block(name="core/list", attributes={"ordered": False, "values": "<li>a</li>"}),
            Block(name="core/list", attributes={"ordered": True, "values": "<li>b</li>"}),
        ]

    def test_quote(self, handler: RawHandler) -> None:
        """Test quote content becomes inner blocks."""
        assert self._convert(handler, "<blockquote>a<h2>b</h2></blockquote>") == [
            Block(
                name="core/quote",
                inner_blocks=[
                    Block(name="core/paragraph", attributes={"content": "a"}),
                    Block(name="core/heading", attributes={"content": "b", "level": 2}),
                ],
            )
        ]

    def test_quote_citation(self, handler: RawHandler, registry: BlockTypeRegistry) -> None:
        """Test the citation is read from the quote and survives serialization."""
        html = "<blockquote><p>a</p><cite>Ann <em>B</em></cite></blockquote>"
        blocks = self._convert(handler, html)

        assert blocks == [
            Block(
                name="core/quote",
                attributes={"citation": "Ann <em>B</em>"},
                inner_blocks=[Block(name="core/paragraph", attributes={"content": "a"})],
            )
        ]
        assert registry.parse_serialized(serialize(blocks, registry)) == blocks

    def test_table_without_body(self, handler: RawHandler) -> None:
        """Test rows written directly under the table keep their content."""
        assert self._convert(handler, "<table><tr><td>keep me</td></tr></table>") == [
            Block(
                name="core/table",
                attributes={"content": "<tbody><tr><td>keep me</td></tr></tbody>"},
            )
        ]

    def test_image(self, handler: RawHandler) -> None:
        """Test image attributes are read from the figure."""
        html = '<figure><a href="/x"><img src="a.png" alt="A"></a><figcaption>Cap</figcaption></figure>'
        assert self._convert(handler, html) == [
            Block(
                name="core/image",
                attributes={"url": "a.png", "alt": "A", "caption": "Cap", "href": "/x"},
            )
        ]

    def test_image_in_paragraph(self, handler: RawHandler) -> None:
        """Test images are hoisted out of paragraphs into their own block."""
        blocks = self._convert(handler, '<p>text<img src="a.png"></p>')
        assert [block.name for block in blocks] == ["core/image", "core/paragraph"]
        assert blocks[0].attributes == {"url": "a.png", "alt": ""}

    def test_frames_need_permission(self, handler: RawHandler) -> None:
        """Test iframes are dropped unless permitted."""
        html = '<iframe src="https://example.com/v"></iframe>'
        assert self._convert(handler, html) == []
        assert self._convert(handler, html, allow_embedded_frames=True) == [
            Block(
                name="core/html",
                attributes={"content": '<iframe src="https://example.com/v"></iframe>'},
            )
        ]

    def test_table_separator_and_preformatted(self, handler: RawHandler) -> None:
        """Test the remaining block tags."""
        html = "<table><tbody><tr><td>a</td></tr></tbody></table><hr><pre>x = 1</pre>"
        assert self._convert(handler, html) == [
            Block(name="core/table", attributes={"content": "<tbody><tr><td>a</td></tr></tbody>"}),
            Block(name="core/separator"),
            Block(name="core/preformatted", attributes={"content": "x = 1"}),
        ]

    def test_more_and_nextpage(self, handler: RawHandler) -> None:
        """Test directive comments become their blocks."""
        html = "<p>a</p><!--more Go on--><!--noteaser--><p>b</p><!--nextpage--><p>c</p>"
        blocks = self._convert(handler, html)
        assert [block.name for block in blocks] == [
            "core/paragraph",
            "core/more",
            "core/paragraph",
            "core/nextpage",
            "core/paragraph",
        ]
        assert blocks[1].attributes == {"customText": "Go on", "noTeaser": True}

    def test_unmatched_element_falls_back(self, handler: RawHandler) -> None:
        """Test elements without a transform keep their markup."""
        assert self._convert(handler, "<figure><figcaption>c</figcaption></figure>") == [
            Block(
                name="core/freeform",
                attributes={"content": "<figure><figcaption>c</figcaption></figure>"},
            )
        ]


class TestSave:
    """Test rendering of core blocks."""

    @pytest.mark.parametrize(
        ("block", "expected"),
        [
            (Block(name="core/paragraph", attributes={"content": "a", "align": "center"}),
             '<p style="text-align:center">a</p>'),
            (Block(name="core/heading", attributes={"content": "T", "level": 4}), "<h4>T</h4>"),
            (Block(name="core/image", attributes={"url": 'a"b.png', "alt": "<A>"}),
             '<figure><img src="a&quot;b.png" alt="&lt;A&gt;"></figure>'),
            (Block(name="core/more", attributes={"noTeaser": False}), "<!--more-->"),
            (Block(name="core/nextpage"), "<!--nextpage-->"),
            (Block(name="core/gallery", attributes={"ids": [1, 2], "columns": 2}),
             '<ul class="gallery columns-2"><li data-id="1"></li><li data-id="2"></li></ul>'),
            (Block(name="core/separator"), "<hr>"),
        ],
    )
    def test_save(self, registry: BlockTypeRegistry, block: Block, expected: str) -> None:
        """Test block markup."""
        assert get_block_content(block, registry) == expected
