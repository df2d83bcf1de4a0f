"""Shared fixtures for unit tests."""

import pytest

from blockpaste.blocks.library import create_default_registry
from blockpaste.blocks.registry import BlockTypeRegistry
from blockpaste.config import Settings
from blockpaste.handler.raw_handler import RawHandler


@pytest.fixture
def settings() -> Settings:
    """Provide default settings."""
    return Settings(
        blockpaste_debug=False,
        log_processed_html=True,
        block_comment_namespace="wp",
        unknown_block_name="core/freeform",
        allow_embedded_frames=False,
    )


@pytest.fixture
def registry(settings: Settings) -> BlockTypeRegistry:
    """Provide a fresh registry holding the core block types."""
    return create_default_registry(settings)


@pytest.fixture
def handler(settings: Settings, registry: BlockTypeRegistry) -> RawHandler:
    """Provide a raw handler bound to the fresh registry."""
    return RawHandler(settings, registry)
