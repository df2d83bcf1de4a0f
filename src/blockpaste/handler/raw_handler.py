"""Raw handler: converts pasted markup into inline markup or blocks.

Pasted content arrives as an HTML flavour plus, optionally, its plain-text
counterpart. Depending on the mode and on what the content looks like, it
is either sanitized down to phrasing content and returned as markup, or
run through the structural filters, the content schema and the block
materializer.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING

from blockpaste.handler.cleaner import remove_invalid_html
from blockpaste.handler.content import is_plain
from blockpaste.handler.deep_filter import deep_filter_html
from blockpaste.handler.filters import BLOCK_FILTERS, INLINE_FILTERS
from blockpaste.handler.inline import is_inline_content
from blockpaste.handler.markdown_bridge import MarkdownConverter
from blockpaste.handler.materializer import BlockMaterializer
from blockpaste.handler.normalise import normalise_blocks
from blockpaste.handler.schema import get_content_schema, get_phrasing_content_schema
from blockpaste.handler.shortcode import segment_html_to_shortcode_blocks
from blockpaste.logger import logger
from blockpaste.timing import timeit, timer

if TYPE_CHECKING:
    from blockpaste.blocks.models import Block
    from blockpaste.config import Settings
    from blockpaste.handler.protocols import BlockRegistry

_META_TAG = re.compile(r"<meta[^>]+>", re.IGNORECASE)


class Mode(str, Enum):
    """How pasted content is handled."""

    AUTO = "AUTO"
    INLINE = "INLINE"
    BLOCKS = "BLOCKS"


class RawHandler:
    """Converts pasted markup using a block registry."""

    def __init__(self, settings: Settings, registry: BlockRegistry) -> None:
        """Initialize the handler.

        Args:
            settings: Application settings.
            registry: Registry used to build blocks.

        """
        self._settings = settings
        self._registry = registry
        self._markdown = MarkdownConverter(settings)
        self._materializer = BlockMaterializer(registry)

    @timeit("Raw handling", logging.DEBUG)
    def convert(
        self,
        html: str,
        plain_text: str = "",
        mode: Mode | str = Mode.AUTO,
        tag_name: str | None = None,
        allow_embedded_frames: bool | None = None,
    ) -> str | list[Block]:
        """Convert pasted content.

        Args:
            html: The HTML flavour of the pasted content.
            plain_text: The plain-text flavour, if any.
            mode: ``AUTO`` decides from the content, ``INLINE`` always
                returns markup and ``BLOCKS`` always returns blocks. Names
                are case-insensitive.
            tag_name: Tag the content will be inserted into, if known.
            allow_embedded_frames: Whether figures may hold iframes. Falls
                back to the ``allow_embedded_frames`` setting.

        Returns:
            Sanitized inline markup, or a list of blocks.

        """
        mode = Mode(mode.upper())
        if allow_embedded_frames is None:
            allow_embedded_frames = self._settings.allow_embedded_frames

        html = _META_TAG.sub("", html)

        # Delimiter comments mean the content already is serialized blocks.
        if mode is not Mode.INLINE and self._registry.marker in html:
            return self._registry.parse_serialized(html)

        # Markup without any formatting: the plain text may be Markdown.
        if plain_text and is_plain(html):
            html = self._markdown.convert(plain_text)

            # A single line of text that Markdown wrapped in a paragraph.
            if (
                mode is Mode.AUTO
                and "\n" not in plain_text
                and not plain_text.startswith("<p>")
                and html.startswith("<p>")
            ):
                mode = Mode.INLINE

        pieces = segment_html_to_shortcode_blocks(html, self._registry)
        has_shortcodes = len(pieces) > 1

        if mode is Mode.INLINE or (
            mode is Mode.AUTO and not has_shortcodes and is_inline_content(html, tag_name)
        ):
            return self._convert_inline(html)

        blocks: list[Block] = []
        for piece in pieces:
            if not isinstance(piece, str):
                blocks.append(piece)
                continue
            blocks.extend(self._convert_piece(piece, allow_embedded_frames=allow_embedded_frames))
        return blocks

    def _convert_inline(self, html: str) -> str:
        html = deep_filter_html(html, INLINE_FILTERS)
        html = remove_invalid_html(html, get_phrasing_content_schema())

        if self._settings.log_processed_html:
            logger.debug("Processed inline HTML:\n\n%s", html)
        return html

    def _convert_piece(self, piece: str, *, allow_embedded_frames: bool) -> list[Block]:
        piece = deep_filter_html(piece, BLOCK_FILTERS)
        piece = remove_invalid_html(
            piece, get_content_schema(allow_embedded_frames=allow_embedded_frames)
        )
        piece = normalise_blocks(piece)

        if self._settings.log_processed_html:
            logger.debug("Processed HTML piece:\n\n%s", piece)

        with timer("Piece materialization", logging.DEBUG):
            return self._materializer.materialize(piece)
