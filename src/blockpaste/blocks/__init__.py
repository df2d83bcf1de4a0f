"""Block types, the block registry and block serialization."""

from blockpaste.blocks.grammar import BlockGrammarParser, ParsedBlock
from blockpaste.blocks.models import (
    AttributeSpec,
    Block,
    BlockType,
    RawTransform,
    ShortcodeTransform,
)
from blockpaste.blocks.registry import BlockTypeRegistry
from blockpaste.blocks.serializer import get_block_content, serialize, serialize_block

__all__ = [
    "AttributeSpec",
    "Block",
    "BlockGrammarParser",
    "BlockType",
    "BlockTypeRegistry",
    "ParsedBlock",
    "RawTransform",
    "ShortcodeTransform",
    "get_block_content",
    "serialize",
    "serialize_block",
]
