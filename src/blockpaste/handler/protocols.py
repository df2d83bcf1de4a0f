"""Protocol definitions for the handler package.

Contains structural typing protocols for the two seams of the pipeline:
node filters run by the deep filter engine and the block type registry
consulted by the materializer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import PageElement

    from blockpaste.blocks.models import Block, RawTransform, ShortcodeTransform


class NodeFilter(Protocol):
    """Protocol defining the interface for node filters.

    Filters are run in post-order: every child of a node has been filtered
    before the node itself.

    Implementations should:
    - Mutate or detach ``node`` in place
    - Return the replacement when ``node`` was swapped for a new element
    - Return None otherwise
    """

    def __call__(self, node: PageElement, soup: BeautifulSoup) -> PageElement | None:
        """Apply the filter to a single node.

        Args:
            node: The node to filter.
            soup: The document owning the node.

        Returns:
            The replacement node, or None if ``node`` was kept or removed.

        """
        ...


class BlockRegistry(Protocol):
    """Protocol for the content-type registry used to build blocks.

    The handler treats the registry as read-only and queries it afresh on
    every call.
    """

    @property
    def unknown_type_name(self) -> str:
        """Name of the block type that receives unmatched markup."""
        ...

    @property
    def marker(self) -> str:
        """Text whose presence means markup holds serialized blocks."""
        ...

    def raw_transforms(self) -> list[RawTransform]:
        """Return raw transforms of all block types, by ascending priority."""
        ...

    def shortcode_transforms(self) -> list[ShortcodeTransform]:
        """Return shortcode transforms of all block types, by ascending priority."""
        ...

    def get_block_attributes(
        self, block_name: str, html: str, attributes: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Extract a block type's attributes from markup."""
        ...

    def create_block(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
        inner_blocks: list[Block] | None = None,
    ) -> Block:
        """Create a block of a registered type."""
        ...

    def parse_serialized(self, html: str) -> list[Block]:
        """Parse markup holding serialized block delimiters."""
        ...
