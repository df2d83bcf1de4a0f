"""Data types describing blocks and block types."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, NamedTuple

if TYPE_CHECKING:
    from bs4.element import Tag

AttributeSourceType = Literal["html", "text", "attribute"]

DEFAULT_TRANSFORM_PRIORITY = 10


@dataclass(slots=True, kw_only=True)
class Block:
    """A structured content unit.

    Attributes:
        name: Namespaced block type name, e.g. ``core/paragraph``
        attributes: Attribute values of the block
        inner_blocks: Nested blocks, in order

    """

    name: str
    attributes: dict[str, Any] = field(default_factory=dict)
    inner_blocks: list[Block] = field(default_factory=list)


@dataclass(frozen=True, slots=True, kw_only=True)
class AttributeSpec:
    """How a block attribute is read from markup.

    Attributes without a ``source`` are not stored in the markup; their
    values come from delimiter comments, shortcodes or transforms.

    Attributes:
        source: ``html`` (inner markup), ``text`` or ``attribute``
        selector: CSS selector of the element to read, relative to the block
        attribute: Element attribute to read for the ``attribute`` source
        default: Value used when nothing is found

    """

    source: AttributeSourceType | None = None
    selector: str | None = None
    attribute: str | None = None
    default: Any = None


class ShortcodeAttributes(NamedTuple):
    """Attributes of a parsed shortcode."""

    named: dict[str, str]
    numeric: list[str]


class Shortcode(NamedTuple):
    """A shortcode tag such as ``[gallery ids="1,2"]``."""

    tag: str
    attrs: ShortcodeAttributes
    type: Literal["single", "self-closing", "closed"]
    content: str | None


class ShortcodeMatch(NamedTuple):
    """A shortcode found in markup."""

    index: int
    content: str
    shortcode: Shortcode


@dataclass(frozen=True, slots=True, kw_only=True)
class RawTransform:
    """Turns a sanitized top-level element into a block.

    If ``transform`` is set it builds the block itself; otherwise the block
    is created from ``block_name`` with attributes read from the element.
    """

    block_name: str
    is_match: Callable[[Tag], bool]
    transform: Callable[[Tag], Block] | None = None
    priority: int = DEFAULT_TRANSFORM_PRIORITY


@dataclass(frozen=True, slots=True, kw_only=True)
class ShortcodeTransform:
    """Turns a shortcode into a block.

    ``attributes`` maps block attribute names to functions computing the
    value from the shortcode attributes and the match.
    """

    block_name: str
    tags: tuple[str, ...]
    attributes: Mapping[str, Callable[[ShortcodeAttributes, ShortcodeMatch], Any]] = field(
        default_factory=dict
    )
    priority: int = DEFAULT_TRANSFORM_PRIORITY


Transform = RawTransform | ShortcodeTransform


@dataclass(frozen=True, slots=True, kw_only=True)
class BlockType:
    """A registered content type.

    Attributes:
        name: Namespaced name, e.g. ``core/paragraph``
        title: Human readable title
        attributes: Attribute specs by attribute name
        transforms: Ways to create this block from raw markup or shortcodes
        save: Renders attribute values and serialized inner blocks to markup

    """

    name: str
    title: str = ""
    attributes: Mapping[str, AttributeSpec] = field(default_factory=dict)
    transforms: tuple[Transform, ...] = ()
    save: Callable[[dict[str, Any], str], str] | None = None
