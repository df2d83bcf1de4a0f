"""Block materializer: turns sanitized top-level elements into blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blockpaste.handler.dom import element_children, outer_html, parse_fragment
from blockpaste.logger import logger

if TYPE_CHECKING:
    from bs4.element import Tag

    from blockpaste.blocks.models import Block, RawTransform
    from blockpaste.handler.protocols import BlockRegistry


class BlockMaterializer:
    """Maps every top-level element of sanitized markup onto one block."""

    def __init__(self, registry: BlockRegistry) -> None:
        """Initialize the materializer.

        Args:
            registry: Registry supplying raw transforms and creating blocks.

        """
        self._registry = registry

    def materialize(self, html: str) -> list[Block]:
        """Convert sanitized markup into blocks.

        Transforms are looked up afresh on every call.

        Args:
            html: Sanitized, normalised markup.

        Returns:
            One block per top-level element, in document order.

        """
        transforms = self._registry.raw_transforms()
        soup = parse_fragment(html)
        return [self._materialize_node(node, transforms) for node in element_children(soup)]

    def _materialize_node(self, node: Tag, transforms: list[RawTransform]) -> Block:
        transform = next((t for t in transforms if t.is_match(node)), None)

        if transform is None:
            logger.debug("No raw transform for <%s>, using %s", node.name, self._registry.unknown_type_name)
            return self._registry.create_block(
                self._registry.unknown_type_name, {"content": outer_html(node)}
            )

        if transform.transform is not None:
            return transform.transform(node)

        return self._registry.create_block(
            transform.block_name,
            self._registry.get_block_attributes(transform.block_name, outer_html(node)),
        )
