"""In-memory block type registry."""

from __future__ import annotations

import copy
from typing import Any

from blockpaste.blocks.attributes import get_block_attributes
from blockpaste.blocks.grammar import BlockGrammarParser, ParsedBlock, normalize_block_name
from blockpaste.blocks.models import Block, BlockType, RawTransform, ShortcodeTransform
from blockpaste.config import Settings
from blockpaste.exceptions import BlockTypeRegistrationError, UnknownBlockTypeError
from blockpaste.logger import logger


class BlockTypeRegistry:
    """Holds registered block types and builds blocks from them.

    Transforms are collected from the registered types on every query, so
    registering or unregistering a type takes effect on the next lookup.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize an empty registry.

        Args:
            settings: Application settings with the fallback block name and
                the delimiter namespace.

        """
        self._settings = settings
        self._block_types: dict[str, BlockType] = {}
        self._parser = BlockGrammarParser(settings.block_comment_namespace)

    @property
    def unknown_type_name(self) -> str:
        """Name of the block type that receives unmatched markup."""
        return self._settings.unknown_block_name

    @property
    def namespace(self) -> str:
        """Namespace of the block delimiter comments."""
        return self._settings.block_comment_namespace

    @property
    def marker(self) -> str:
        """Text whose presence means markup holds serialized blocks."""
        return self._parser.marker

    def register(self, block_type: BlockType) -> BlockType:
        """Register a block type.

        Raises:
            BlockTypeRegistrationError: If the name is not namespaced or is
                already registered.

        """
        name = block_type.name
        if "/" not in name or name.startswith("/") or name.endswith("/"):
            msg = f"Block type names must be namespaced, e.g. 'my-plugin/my-block': {name!r}"
            raise BlockTypeRegistrationError(msg)
        if name in self._block_types:
            msg = f"Block type {name!r} is already registered"
            raise BlockTypeRegistrationError(msg)

        self._block_types[name] = block_type
        logger.debug("Registered block type %s", name)
        return block_type

    def unregister(self, name: str) -> BlockType:
        """Remove a block type.

        Raises:
            UnknownBlockTypeError: If the type is not registered.

        """
        try:
            return self._block_types.pop(name)
        except KeyError:
            msg = f"Block type {name!r} is not registered"
            raise UnknownBlockTypeError(msg) from None

    def get(self, name: str) -> BlockType | None:
        """Return a registered block type, or None."""
        return self._block_types.get(name)

    def get_all(self) -> list[BlockType]:
        """Return all registered block types in registration order."""
        return list(self._block_types.values())

    def raw_transforms(self) -> list[RawTransform]:
        """Return raw transforms of all block types, by ascending priority."""
        transforms = [
            transform
            for block_type in self._block_types.values()
            for transform in block_type.transforms
            if isinstance(transform, RawTransform)
        ]
        return sorted(transforms, key=lambda transform: transform.priority)

    def shortcode_transforms(self) -> list[ShortcodeTransform]:
        """Return shortcode transforms of all block types, by ascending priority."""
        transforms = [
            transform
            for block_type in self._block_types.values()
            for transform in block_type.transforms
            if isinstance(transform, ShortcodeTransform)
        ]
        return sorted(transforms, key=lambda transform: transform.priority)

    def _require(self, name: str) -> BlockType:
        block_type = self._block_types.get(name)
        if block_type is None:
            msg = f"Block type {name!r} is not registered"
            raise UnknownBlockTypeError(msg)
        return block_type

    def get_block_attributes(
        self, block_name: str, html: str, attributes: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Extract a block type's attributes from markup.

        Args:
            block_name: Registered block type name.
            html: The block's markup.
            attributes: Values of attributes that are not stored in markup.

        Returns:
            Attribute values keyed by name.

        Raises:
            UnknownBlockTypeError: If the type is not registered.

        """
        return get_block_attributes(self._require(block_name).attributes, html, attributes)

    def create_block(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
        inner_blocks: list[Block] | None = None,
    ) -> Block:
        """Create a block, filling in attribute defaults.

        Raises:
            UnknownBlockTypeError: If the type is not registered.

        """
        block_type = self._require(name)
        values = dict(attributes or {})
        for attribute_name, spec in block_type.attributes.items():
            if attribute_name not in values and spec.default is not None:
                values[attribute_name] = copy.deepcopy(spec.default)

        return Block(name=name, attributes=values, inner_blocks=list(inner_blocks or []))

    def parse_serialized(self, html: str) -> list[Block]:
        """Parse markup holding block delimiter comments into blocks.

        Unregistered types and freeform content become fallback blocks that
        keep their markup.
        """
        return [self._create_block_with_fallback(parsed) for parsed in self._parser.parse(html)]

    def _create_block_with_fallback(self, parsed: ParsedBlock) -> Block:
        inner_blocks = [self._create_block_with_fallback(inner) for inner in parsed.inner_blocks]

        name = normalize_block_name(parsed.name) if parsed.name else None
        if name is None or name not in self._block_types:
            if name is not None:
                logger.debug("Block type %s is not registered, using %s", name, self.unknown_type_name)
            return self.create_block(
                self.unknown_type_name, {"content": parsed.inner_html}, inner_blocks
            )

        return self.create_block(
            name, self.get_block_attributes(name, parsed.inner_html, parsed.attrs), inner_blocks
        )
