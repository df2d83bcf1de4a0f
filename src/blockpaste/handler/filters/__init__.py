"""Node filters for the deep filter engine.

``BLOCK_FILTERS`` is the full structural pipeline used when converting to
blocks; ``INLINE_FILTERS`` is the phrasing-only pipeline used for inline
content. Order matters: filters run in sequence on every node.
"""

from blockpaste.handler.filters.blockquote import blockquote_normaliser
from blockpaste.handler.filters.embedded_content import embedded_content_reducer
from blockpaste.handler.filters.image_corrector import image_corrector
from blockpaste.handler.filters.list_reducer import list_reducer
from blockpaste.handler.filters.ms_list import ms_list_converter
from blockpaste.handler.filters.nested_paragraph import nested_paragraph_splitter
from blockpaste.handler.filters.phrasing_content import phrasing_content_reducer
from blockpaste.handler.filters.special_comment import special_comment_converter
from blockpaste.handler.filters.table_body import table_body_inserter
from blockpaste.handler.protocols import NodeFilter

BLOCK_FILTERS: tuple[NodeFilter, ...] = (
    nested_paragraph_splitter,
    table_body_inserter,
    ms_list_converter,
    list_reducer,
    image_corrector,
    phrasing_content_reducer,
    special_comment_converter,
    embedded_content_reducer,
    blockquote_normaliser,
)

INLINE_FILTERS: tuple[NodeFilter, ...] = (phrasing_content_reducer,)

__all__ = [
    "BLOCK_FILTERS",
    "INLINE_FILTERS",
    "blockquote_normaliser",
    "embedded_content_reducer",
    "image_corrector",
    "list_reducer",
    "ms_list_converter",
    "nested_paragraph_splitter",
    "phrasing_content_reducer",
    "special_comment_converter",
    "table_body_inserter",
]
