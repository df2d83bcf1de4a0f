"""Raw handling pipeline for pasted content.

This package sanitizes pasted markup with a schema-driven filter pipeline
and converts the result into inline markup or blocks.
"""

from blockpaste.handler.cleaner import remove_invalid_html
from blockpaste.handler.deep_filter import deep_filter_html
from blockpaste.handler.materializer import BlockMaterializer
from blockpaste.handler.protocols import BlockRegistry, NodeFilter
from blockpaste.handler.raw_handler import Mode, RawHandler

__all__ = [
    "BlockMaterializer",
    "BlockRegistry",
    "Mode",
    "NodeFilter",
    "RawHandler",
    "deep_filter_html",
    "remove_invalid_html",
]
