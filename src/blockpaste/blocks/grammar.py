"""Parser for serialized blocks delimited by HTML comments.

A serialized block looks like::

    <!-- wp:heading {"level":3} --><h3>Title</h3><!-- /wp:heading -->
    <!-- wp:separator /-->

Block names without a namespace belong to ``core``. Markup between
top-level blocks becomes freeform content. The parser never fails: stray
closing delimiters are ignored and unclosed blocks end with the document.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from blockpaste.logger import logger

_NAME = r"[a-z][a-z0-9_-]*"


class ParsedBlock(NamedTuple):
    """A block as found in serialized markup.

    ``name`` is None for freeform content between blocks.
    """

    name: str | None
    attrs: dict[str, Any]
    inner_blocks: list[ParsedBlock]
    inner_html: str


@dataclass(slots=True)
class _Frame:
    name: str
    attrs: dict[str, Any]
    html_parts: list[str] = field(default_factory=list)
    inner_blocks: list[ParsedBlock] = field(default_factory=list)

    def finish(self) -> ParsedBlock:
        return ParsedBlock(self.name, self.attrs, self.inner_blocks, "".join(self.html_parts))


def normalize_block_name(name: str) -> str:
    """Prefix names without a namespace with ``core/``."""
    return name if "/" in name else f"core/{name}"


class BlockGrammarParser:
    """Parses block delimiter comments of a given namespace."""

    def __init__(self, namespace: str) -> None:
        """Initialize the parser.

        Args:
            namespace: Delimiter namespace, e.g. ``wp`` for ``<!-- wp:... -->``.

        """
        self._namespace = namespace
        self._delimiter = re.compile(
            r"<!--\s+(?P<closer>/)?" + re.escape(namespace) + r":"
            r"(?P<name>" + _NAME + r"(?:/" + _NAME + r")?)\s+"
            r"(?P<attrs>\{(?:(?!-->).)*?\}\s+)?"
            r"(?P<void>/)?-->",
            re.DOTALL,
        )

    @property
    def marker(self) -> str:
        """Text whose presence means markup holds serialized blocks."""
        return f"<!-- {self._namespace}:"

    def parse(self, document: str) -> list[ParsedBlock]:
        """Parse a document into a tree of parsed blocks.

        Args:
            document: Serialized block markup.

        Returns:
            Top-level blocks and freeform runs in document order.

        """
        output: list[ParsedBlock] = []
        stack: list[_Frame] = []
        offset = 0

        def add_block(block: ParsedBlock) -> None:
            if stack:
                stack[-1].inner_blocks.append(block)
            else:
                output.append(block)

        def add_html(html: str) -> None:
            if stack:
                stack[-1].html_parts.append(html)
            elif html.strip():
                output.append(ParsedBlock(None, {}, [], html))

        for match in self._delimiter.finditer(document):
            add_html(document[offset : match.start()])
            offset = match.end()

            name = normalize_block_name(match.group("name"))

            if match.group("closer"):
                if not stack:
                    logger.debug("Ignoring stray closing delimiter for %s", name)
                    continue
                add_block(stack.pop().finish())
                continue

            attrs = self._parse_attrs(name, match.group("attrs"))
            if match.group("void"):
                add_block(ParsedBlock(name, attrs, [], ""))
            else:
                stack.append(_Frame(name, attrs))

        add_html(document[offset:])
        while stack:
            logger.debug("Closing unterminated block %s", stack[-1].name)
            add_block(stack.pop().finish())

        return output

    @staticmethod
    def _parse_attrs(name: str, raw: str | None) -> dict[str, Any]:
        if not raw:
            return {}
        try:
            attrs = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Invalid attributes JSON in %s delimiter: %s", name, raw.strip())
            return {}
        return attrs if isinstance(attrs, dict) else {}
