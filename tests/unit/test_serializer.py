"""Unit tests for block serialization."""

import pytest

from blockpaste.blocks.models import Block, BlockType
from blockpaste.blocks.registry import BlockTypeRegistry
from blockpaste.blocks.serializer import (
    get_block_content,
    get_comment_attributes,
    serialize,
    serialize_block,
)
from blockpaste.config import Settings
from blockpaste.handler.raw_handler import Mode, RawHandler


class TestGetBlockContent:
    """Test rendering block markup."""

    def test_save_function(self, registry: BlockTypeRegistry) -> None:
        """Test the type's save function renders the block."""
        block = Block(name="core/list", attributes={"ordered": True, "values": "<li>a</li>"})
        assert get_block_content(block, registry) == "<ol><li>a</li></ol>"

    def test_without_save_function(self, registry: BlockTypeRegistry) -> None:
        """Test types without save render their content attribute."""
        registry.register(BlockType(name="acme/raw"))
        block = Block(name="acme/raw", attributes={"content": "<div>x</div>"})
        assert get_block_content(block, registry) == "<div>x</div>"

    def test_inner_blocks_are_passed_to_save(self, registry: BlockTypeRegistry) -> None:
        """Test the quote wraps its serialized inner blocks."""
        block = Block(
            name="core/quote",
            inner_blocks=[Block(name="core/paragraph", attributes={"content": "a"})],
        )
        assert get_block_content(block, registry) == (
            "<blockquote><!-- wp:paragraph --><p>a</p><!-- /wp:paragraph --></blockquote>"
        )


class TestSerializeBlock:
    """Test wrapping blocks in delimiter comments."""

    def test_block_without_comment_attributes(self, registry: BlockTypeRegistry) -> None:
        """Test sourced attributes stay in the markup."""
        block = Block(name="core/paragraph", attributes={"content": "a"})
        assert serialize_block(block, registry) == "<!-- wp:paragraph --><p>a</p><!-- /wp:paragraph -->"

    def test_comment_attributes(self, registry: BlockTypeRegistry) -> None:
        """Test attributes differing from their defaults are stored as JSON."""
        heading = Block(name="core/heading", attributes={"content": "T", "level": 3})
        assert get_comment_attributes(heading, registry) == {"level": 3}
        assert serialize_block(heading, registry) == (
            '<!-- wp:heading {"level":3} --><h3>T</h3><!-- /wp:heading -->'
        )

        default_heading = Block(name="core/heading", attributes={"content": "T", "level": 2})
        assert get_comment_attributes(default_heading, registry) == {}

    def test_freeform_is_written_bare(self, registry: BlockTypeRegistry) -> None:
        """Test the fallback type has no delimiters."""
        block = Block(name="core/freeform", attributes={"content": "<div>x</div>"})
        assert serialize_block(block, registry) == "<div>x</div>"

    def test_void_block(self, registry: BlockTypeRegistry) -> None:
        """Test blocks without content use a void delimiter."""
        registry.register(BlockType(name="acme/spacer"))
        assert serialize_block(Block(name="acme/spacer"), registry) == "<!-- wp:acme/spacer /-->"

    def test_custom_namespace(self) -> None:
        """Test the delimiter namespace comes from settings."""
        registry = BlockTypeRegistry(Settings(block_comment_namespace="cms"))
        registry.register(BlockType(name="core/spacer"))
        assert serialize_block(Block(name="core/spacer"), registry) == "<!-- cms:spacer /-->"


class TestRoundTrip:
    """Test serialized blocks parse back into equal blocks."""

    @pytest.mark.parametrize(
        "html",
        [
            "<h3>Title</h3><p>Some <em>text</em></p><ul><li>a</li></ul><hr>",
            "<ol><li>one<ul><li>two</li></ul></li></ol><pre>code</pre>",
            '<figure><a href="/x"><img src="a.png" alt="A"></a><figcaption>Cap</figcaption></figure>',
            "<p>Intro</p><!--more Read on--><!--noteaser--><p>Rest</p><!--nextpage-->",
            "<blockquote><p>a</p><p>b</p></blockquote>",
            "<table><tbody><tr><td>a</td></tr></tbody></table>",
        ],
    )
    def test_round_trip(self, handler: RawHandler, registry: BlockTypeRegistry, html: str) -> None:
        """Test pasted content survives serialization."""
        blocks = handler.convert(html, mode=Mode.BLOCKS)
        assert blocks
        assert registry.parse_serialized(serialize(blocks, registry)) == blocks
