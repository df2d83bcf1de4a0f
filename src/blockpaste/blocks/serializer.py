"""Serialization of blocks to markup with block delimiter comments."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blockpaste.blocks.models import Block
    from blockpaste.blocks.registry import BlockTypeRegistry


def get_block_content(block: Block, registry: BlockTypeRegistry) -> str:
    """Render a block's markup without delimiter comments.

    Inner blocks are serialized with their delimiters and handed to the
    type's ``save`` function. Types without ``save`` render their
    ``content`` attribute.

    Args:
        block: The block to render.
        registry: Registry holding the block's type.

    Returns:
        The block's markup.

    """
    block_type = registry.get(block.name)
    inner = serialize(block.inner_blocks, registry)

    if block_type is None or block_type.save is None:
        return str(block.attributes.get("content", "")) + inner
    return block_type.save(block.attributes, inner)


def get_comment_attributes(block: Block, registry: BlockTypeRegistry) -> dict[str, Any]:
    """Return the attributes stored in the delimiter comment.

    Attributes read from markup and attributes equal to their default are
    left out.
    """
    block_type = registry.get(block.name)
    specs = block_type.attributes if block_type is not None else {}

    stored: dict[str, Any] = {}
    for name, value in block.attributes.items():
        spec = specs.get(name)
        if spec is not None and (spec.source is not None or value == spec.default):
            continue
        stored[name] = value
    return stored


def _delimiter_name(name: str) -> str:
    return name.removeprefix("core/")


def serialize_block(block: Block, registry: BlockTypeRegistry) -> str:
    """Serialize one block, wrapped in its delimiter comments.

    Blocks of the fallback type are written as their bare content so that
    freeform markup stays freeform.
    """
    content = get_block_content(block, registry)
    if block.name == registry.unknown_type_name:
        return content

    opener = f"<!-- {registry.namespace}:{_delimiter_name(block.name)} "
    attributes = get_comment_attributes(block, registry)
    if attributes:
        opener += json.dumps(attributes, separators=(",", ":")) + " "

    if not content:
        return opener + "/-->"
    closer = f"<!-- /{registry.namespace}:{_delimiter_name(block.name)} -->"
    return f"{opener}-->{content}{closer}"


def serialize(blocks: Iterable[Block], registry: BlockTypeRegistry) -> str:
    """Serialize blocks in order."""
    return "".join(serialize_block(block, registry) for block in blocks)
