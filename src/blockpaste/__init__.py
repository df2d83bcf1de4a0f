"""blockpaste - pasted HTML to inline markup or structured blocks.

Sanitizes untrusted HTML (and its plain-text flavour) from word processors,
web pages and chat apps against a content schema and maps the result onto
a registry of block types.
"""

from blockpaste.api import get_default_registry, raw_handler, serialize_blocks
from blockpaste.blocks.library import create_default_registry
from blockpaste.blocks.models import Block
from blockpaste.blocks.registry import BlockTypeRegistry
from blockpaste.config import Settings, settings
from blockpaste.handler.raw_handler import Mode, RawHandler
from blockpaste.logger import setup_logging

__version__ = "0.1.0"

__all__ = [
    "Block",
    "BlockTypeRegistry",
    "Mode",
    "RawHandler",
    "Settings",
    "__version__",
    "create_default_registry",
    "get_default_registry",
    "raw_handler",
    "serialize_blocks",
    "settings",
    "setup_logging",
]
