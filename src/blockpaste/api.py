"""Convenience entry points bound to the default block registry."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from blockpaste.blocks.library import create_default_registry
from blockpaste.blocks.serializer import serialize
from blockpaste.config import get_settings
from blockpaste.handler.raw_handler import Mode, RawHandler

if TYPE_CHECKING:
    from blockpaste.blocks.models import Block
    from blockpaste.blocks.registry import BlockTypeRegistry


@lru_cache
def get_default_registry() -> BlockTypeRegistry:
    """Return the cached registry holding the core block types."""
    return create_default_registry(get_settings())


def raw_handler(
    html: str,
    plain_text: str = "",
    mode: Mode | str = Mode.AUTO,
    tag_name: str | None = None,
    allow_embedded_frames: bool | None = None,
) -> str | list[Block]:
    """Convert pasted content with the default registry.

    See ``RawHandler.convert`` for the arguments.
    """
    handler = RawHandler(get_settings(), get_default_registry())
    return handler.convert(
        html,
        plain_text=plain_text,
        mode=mode,
        tag_name=tag_name,
        allow_embedded_frames=allow_embedded_frames,
    )


def serialize_blocks(blocks: list[Block]) -> str:
    """Serialize blocks with the default registry."""
    return serialize(blocks, get_default_registry())
