"""blockpaste custom exceptions."""

class BlockPasteError(Exception):
    """Base exception for all blockpaste errors."""


class RegistryError(BlockPasteError):
    """Errors from the block type registry."""


class BlockTypeRegistrationError(RegistryError):
    """Invalid or duplicate block type registration."""


class UnknownBlockTypeError(RegistryError):
    """A block was requested for a type that is not registered."""
