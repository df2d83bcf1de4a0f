"""Shortcode parsing and extraction of shortcode blocks from markup.

Shortcodes look like ``[tag]``, ``[tag attr="value" /]`` or
``[tag attr=value]content[/tag]``; doubled brackets (``[[tag]]``) escape
them. Shortcodes registered with a block type are cut out of the markup
before sanitization so their content is not mangled.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING

from blockpaste.blocks.models import Block, Shortcode, ShortcodeAttributes, ShortcodeMatch
from blockpaste.logger import logger

if TYPE_CHECKING:
    from blockpaste.blocks.models import ShortcodeTransform
    from blockpaste.handler.protocols import BlockRegistry

Piece = str | Block

_ATTRIBUTE_PATTERN = re.compile(
    r"""([\w-]+)\s*=\s*"([^"]*)"(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*'([^']*)'(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*([^\s'"]+)(?:\s|$)"""
    r'''|"([^"]*)"(?:\s|$)'''
    r"""|(\S+)(?:\s|$)"""
)

_INVISIBLE_SPACES = re.compile("[\u00a0\u200b]")

# A shortcode preceded by one of these starts its own block.
_BLOCK_START = re.compile(r"(^|\n|<p>)\s*$")


@lru_cache(maxsize=64)
def shortcode_regexp(tag: str) -> re.Pattern[str]:
    """Build the regular expression matching shortcodes named ``tag``.

    ``tag`` may itself be a regular expression fragment. Groups: 1 opening
    escape bracket, 2 tag, 3 attributes, 4 self-closing slash, 5 content,
    6 closing tag, 7 closing escape bracket.
    """
    return re.compile(
        r"\[(\[?)(" + tag + r")(?![\w-])"
        r"([^\]/]*(?:/(?!\])[^\]/]*)*?)"
        r"(?:(/)\]|\](?:([^\[]*(?:\[(?!/\2\])[^\[]*)*)(\[/\2\]))?)"
        r"(\]?)"
    )


def parse_shortcode_attributes(text: str) -> ShortcodeAttributes:
    """Parse a shortcode's attribute string.

    Args:
        text: The raw attributes, e.g. ``ids="1,2" link=file large``.

    Returns:
        Named attributes (lowercase keys) and positional values.

    """
    named: dict[str, str] = {}
    numeric: list[str] = []

    for match in _ATTRIBUTE_PATTERN.finditer(_INVISIBLE_SPACES.sub(" ", text)):
        if match.group(1):
            named[match.group(1).lower()] = match.group(2)
        elif match.group(3):
            named[match.group(3).lower()] = match.group(4)
        elif match.group(5):
            named[match.group(5).lower()] = match.group(6)
        elif match.group(7) is not None:
            numeric.append(match.group(7))
        elif match.group(8):
            numeric.append(match.group(8))

    return ShortcodeAttributes(named=named, numeric=numeric)


def _shortcode_from_match(match: re.Match[str]) -> Shortcode:
    if match.group(4):
        kind = "self-closing"
    elif match.group(6):
        kind = "closed"
    else:
        kind = "single"

    return Shortcode(
        tag=match.group(2),
        attrs=parse_shortcode_attributes(match.group(3)),
        type=kind,
        content=match.group(5),
    )


def next_shortcode(tag: str, text: str, index: int = 0) -> ShortcodeMatch | None:
    """Find the next unescaped shortcode named ``tag`` at or after ``index``.

    Args:
        tag: Shortcode name (or name pattern).
        text: Text to search.
        index: Position to start searching from.

    Returns:
        The match, or None if there is none.

    """
    pattern = shortcode_regexp(tag)
    position = index

    while (match := pattern.search(text, position)) is not None:
        # Escaped shortcode, keep looking.
        if match.group(1) == "[" and match.group(7) == "]":
            position = match.end()
            continue

        content = match.group(0)
        start = match.start()

        # A lone leading or trailing bracket is not part of the shortcode.
        if match.group(1):
            content = content[1:]
            start += 1
        if match.group(7):
            content = content[:-1]

        return ShortcodeMatch(index=start, content=content, shortcode=_shortcode_from_match(match))

    return None


def _find_shortcode_transform(
    registry: BlockRegistry, html: str
) -> tuple[ShortcodeTransform, str] | None:
    for transform in registry.shortcode_transforms():
        for tag in transform.tags:
            if shortcode_regexp(tag).search(html):
                return transform, tag
    return None


def segment_html_to_shortcode_blocks(
    html: str, registry: BlockRegistry, last_index: int = 0
) -> list[Piece]:
    """Split markup into markup strings and blocks built from shortcodes.

    A shortcode without markup in its content that does not start a line or
    paragraph is inline text and stays in the markup.

    Args:
        html: The markup to segment.
        registry: Registry supplying shortcode transforms and blocks.
        last_index: Position to resume searching from.

    Returns:
        Pieces in document order. More than one piece means shortcode blocks
        were found.

    """
    found = _find_shortcode_transform(registry, html)
    if found is None:
        return [html]

    transform, tag = found
    match = next_shortcode(tag, html, last_index)
    if match is None:
        return [html]

    before = html[: match.index]
    last_index = match.index + len(match.content)
    content = match.shortcode.content or ""

    if "<" not in content and not _BLOCK_START.search(before):
        return segment_html_to_shortcode_blocks(html, registry, last_index)

    attributes = {
        name: compute(match.shortcode.attrs, match)
        for name, compute in transform.attributes.items()
    }
    block = registry.create_block(
        transform.block_name,
        registry.get_block_attributes(transform.block_name, content, attributes),
    )
    logger.debug("Converted [%s] shortcode to %s block", match.shortcode.tag, block.name)

    return [before, block, *segment_html_to_shortcode_blocks(html[last_index:], registry)]
