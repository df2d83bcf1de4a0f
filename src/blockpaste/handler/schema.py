"""Content schemas describing which markup survives sanitization.

A schema maps a lowercase tag name (or ``#text``) to a ``SchemaNode``. A
node without ``children`` must be childless: its subtree is discarded
wholesale. A tag missing from a schema is invalid in that scope.

Nesting is self-referential (``strong > em > strong``, ``ul > li > ul``).
Schemas are immutable values, so the recursion is unrolled to a fixed depth
instead of building a cyclic graph; the innermost level falls back to a
non-recursive variant.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING

from blockpaste.handler.dom import TEXT_NODE_NAME, node_name

if TYPE_CHECKING:
    from bs4.element import PageElement

Schema = Mapping[str, "SchemaNode"]

# Tag that carries an already-serialized block through sanitization.
PASSTHROUGH_TAG = "x-block"

# Levels of formatting that may nest inside each other (a > strong > em > code).
PHRASING_NESTING_DEPTH = 4

# Levels of lists that may nest inside list items; word processors use nine.
LIST_NESTING_DEPTH = 9

_FORMATTING_TAGS = ("strong", "em", "del", "ins", "a", "code", "abbr", "sub", "sup")

_PHRASING_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "a": ("href",),
    "abbr": ("title",),
}

_HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

# If a node and the target tag share a group, the node counts as inline there.
_PHRASING_CONTENT_TAG_GROUPS: tuple[frozenset[str], ...] = (
    frozenset(("ul", "li", "ol")),
    frozenset(_HEADING_TAGS),
)


@dataclass(frozen=True, slots=True)
class SchemaNode:
    """Permissions for one tag inside a schema scope."""

    attributes: frozenset[str] = field(default_factory=frozenset)
    classes: frozenset[str] = field(default_factory=frozenset)
    children: Schema | None = None


def _freeze(entries: dict[str, SchemaNode]) -> Schema:
    return MappingProxyType(entries)


def _omit(schema: Schema, *tags: str) -> dict[str, SchemaNode]:
    return {tag: node for tag, node in schema.items() if tag not in tags}


def _build_phrasing(depth: int) -> Schema:
    leaves = {
        tag: SchemaNode(attributes=frozenset(_PHRASING_ATTRIBUTES.get(tag, ())))
        for tag in _FORMATTING_TAGS
    }
    leaves["br"] = SchemaNode()
    leaves[TEXT_NODE_NAME] = SchemaNode()

    # Innermost level: formatting tags hold text and breaks only.
    inner: Schema = _freeze(
        {
            tag: SchemaNode(
                attributes=node.attributes,
                children=_freeze({"br": leaves["br"], TEXT_NODE_NAME: leaves[TEXT_NODE_NAME]}),
            )
            if tag in _FORMATTING_TAGS
            else node
            for tag, node in leaves.items()
        }
    )

    for _ in range(depth - 1):
        level = dict(leaves)
        for tag in _FORMATTING_TAGS:
            # Possible: strong > em > strong. Impossible: strong > strong.
            level[tag] = SchemaNode(
                attributes=leaves[tag].attributes,
                children=_freeze(_omit(inner, tag)),
            )
        inner = _freeze(level)
    return inner


def _build_list(phrasing: Schema, depth: int) -> Schema:
    inner: Schema = phrasing
    for _ in range(depth):
        item = SchemaNode(children=inner)
        # Possible: ul > li > ul. Impossible: ul > ul.
        inner = _freeze(
            {
                **phrasing,
                "ul": SchemaNode(children=_freeze({"li": item})),
                "ol": SchemaNode(attributes=frozenset(("type",)), children=_freeze({"li": item})),
            }
        )
    return inner


def _table_section(phrasing: Schema) -> SchemaNode:
    cell = SchemaNode(children=phrasing)
    row = SchemaNode(children=_freeze({"th": cell, "td": cell}))
    return SchemaNode(children=_freeze({"tr": row}))


@lru_cache(maxsize=1)
def get_phrasing_content_schema() -> Schema:
    """Return the schema of inline (phrasing) content."""
    return _build_phrasing(PHRASING_NESTING_DEPTH)


@lru_cache(maxsize=1)
def get_list_content_schema() -> Schema:
    """Return phrasing content plus nestable ``ul``/``ol`` lists."""
    return _build_list(get_phrasing_content_schema(), LIST_NESTING_DEPTH)


@lru_cache(maxsize=1)
def get_embedded_content_schema() -> Schema:
    """Return the schema of embedded media leaves."""
    return _freeze(
        {
            "img": SchemaNode(
                attributes=frozenset(("src", "alt")),
                classes=frozenset(("alignleft", "aligncenter", "alignright", "alignnone")),
            ),
            "iframe": SchemaNode(
                attributes=frozenset(("src", "allowfullscreen", "height", "width")),
            ),
        }
    )


@lru_cache(maxsize=1)
def get_block_content_schema() -> Schema:
    """Return the schema of block-level content.

    A blockquote may hold any other block content and a ``cite``, but
    not another blockquote.
    """
    phrasing = get_phrasing_content_schema()
    lists = get_list_content_schema()
    embedded = get_embedded_content_schema()
    section = _table_section(phrasing)

    blocks: dict[str, SchemaNode] = {
        PASSTHROUGH_TAG: SchemaNode(
            attributes=frozenset(("data-block", "data-custom-text", "data-no-teaser")),
        ),
        "ol": lists["ol"],
        "ul": lists["ul"],
        **{heading: SchemaNode(children=phrasing) for heading in _HEADING_TAGS},
        "p": SchemaNode(children=phrasing),
        "pre": SchemaNode(children=phrasing),
        "figure": SchemaNode(
            children=_freeze(
                {
                    # A linked image keeps its link.
                    "a": SchemaNode(
                        attributes=frozenset(("href",)),
                        children=_freeze({"img": embedded["img"]}),
                    ),
                    **embedded,
                    "figcaption": SchemaNode(children=phrasing),
                }
            )
        ),
        "hr": SchemaNode(),
        "table": SchemaNode(
            children=_freeze({"thead": section, "tfoot": section, "tbody": section})
        ),
    }
    blocks["blockquote"] = SchemaNode(
        children=_freeze({**blocks, "cite": SchemaNode(children=phrasing)})
    )
    return _freeze(blocks)


@lru_cache(maxsize=2)
def get_content_schema(*, allow_embedded_frames: bool = False) -> Schema:
    """Return phrasing and block content merged into one schema.

    Args:
        allow_embedded_frames: Whether figures may contain iframes.

    Returns:
        The full content schema.

    """
    content = {**get_phrasing_content_schema(), **get_block_content_schema()}
    figure = content["figure"]
    figure_children = figure.children or {}
    if not allow_embedded_frames:
        figure_children = _omit(figure_children, "iframe")
    content["figure"] = SchemaNode(
        attributes=figure.attributes,
        classes=figure.classes,
        children=_freeze(dict(figure_children)),
    )
    return _freeze(content)


def is_inline_for_tag(name: str | None, tag_name: str | None) -> bool:
    """Check if ``name`` should be treated as inline when inserted into ``tag_name``."""
    if not name or not tag_name:
        return False
    return any(name in group and tag_name in group for group in _PHRASING_CONTENT_TAG_GROUPS)


def is_inline(node: PageElement, tag_name: str | None = None) -> bool:
    """Return True if ``node`` is phrasing content, or inline in ``tag_name``."""
    name = node_name(node)
    return name in get_phrasing_content_schema() or is_inline_for_tag(name, tag_name)


def is_phrasing_content(node: PageElement) -> bool:
    """Return True for phrasing tags, including presentational spans."""
    name = node_name(node)
    return name in get_phrasing_content_schema() or name == "span"


def is_block_content(node: PageElement) -> bool:
    """Return True for block-level tags."""
    return node_name(node) in get_block_content_schema()


def is_embedded(node: PageElement) -> bool:
    """Return True for embedded media (images, frames)."""
    return node_name(node) in get_embedded_content_schema()
