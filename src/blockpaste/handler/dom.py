"""Mutable tree helpers on top of BeautifulSoup.

Every stage of the handler parses markup into a transient soup, mutates it
in place with the helpers below and serializes it back. The serializer
mirrors a browser's ``innerHTML``: void elements carry no closing slash,
attributes keep their source order and only ``& < >`` and NBSP are escaped.
"""

import warnings
from typing import Any

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.dammit import EntitySubstitution
from bs4.element import Comment, NavigableString, PageElement, PreformattedString, Tag
from bs4.formatter import HTMLFormatter

# Short fragments such as "test" or "a.png" are markup here, never file names.
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

TEXT_NODE_NAME = "#text"
COMMENT_NODE_NAME = "#comment"


def _substitute_entities(value: str) -> str:
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


class InnerHTMLFormatter(HTMLFormatter):
    """HTML formatter producing browser-like ``innerHTML`` output."""

    def __init__(self) -> None:
        super().__init__(
            entity_substitution=_substitute_entities,
            void_element_close_prefix=None,
        )

    def attributes(self, tag: Tag) -> list[tuple[str, Any]]:
        """Keep attributes in source order instead of sorting them."""
        if not tag.attrs:
            return []
        return list(tag.attrs.items())


FORMATTER = InnerHTMLFormatter()


def parse_fragment(html: str) -> BeautifulSoup:
    """Parse an HTML fragment into a mutable tree.

    Malformed markup is recovered by the ``html.parser`` tree builder.
    """
    return BeautifulSoup(html, "html.parser")


def to_html(soup: BeautifulSoup) -> str:
    """Serialize a whole fragment back to markup."""
    return soup.decode(formatter=FORMATTER)


def outer_html(node: PageElement) -> str:
    """Serialize a node including its own tag."""
    if isinstance(node, Tag):
        return node.decode(formatter=FORMATTER)
    return node.output_ready(formatter=FORMATTER)


def inner_html(node: Tag) -> str:
    """Serialize the children of a node."""
    return node.decode_contents(formatter=FORMATTER)


def set_inner_html(node: Tag, html: str) -> None:
    """Replace the children of ``node`` with the parsed ``html``."""
    node.clear()
    fragment = parse_fragment(html)
    for child in list(fragment.contents):
        node.append(child)


def is_text(node: PageElement) -> bool:
    """Return True for plain text nodes (not comments, CDATA or declarations)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_comment(node: PageElement) -> bool:
    """Return True for HTML comment nodes."""
    return isinstance(node, Comment)


def node_name(node: PageElement) -> str:
    """Return the lowercase tag name, or a ``#``-prefixed name for non-elements."""
    if isinstance(node, Tag):
        return node.name.lower()
    if is_comment(node):
        return COMMENT_NODE_NAME
    if isinstance(node, PreformattedString):
        return "#" + type(node).__name__.lower()
    return TEXT_NODE_NAME


def is_attached(node: PageElement, root: BeautifulSoup) -> bool:
    """Check whether ``node`` is still reachable from ``root``.

    A node whose ancestor was extracted keeps its parent pointer, so the
    whole parent chain is walked.
    """
    if node is root:
        return True
    return any(parent is root for parent in node.parents)


def element_children(node: Tag) -> list[Tag]:
    """Return the element children of ``node`` in document order."""
    return [child for child in node.contents if isinstance(child, Tag)]


def last_element_child(node: Tag) -> Tag | None:
    """Return the last element child of ``node``, if any."""
    for child in reversed(node.contents):
        if isinstance(child, Tag):
            return child
    return None


def unwrap(node: PageElement) -> None:
    """Replace ``node`` with its children, keeping their order and position."""
    if isinstance(node, Tag):
        node.unwrap()
    else:
        node.extract()


def replace_tag(node: Tag, tag_name: str, soup: BeautifulSoup) -> Tag:
    """Replace ``node`` with a new ``tag_name`` element holding its children.

    Attributes of the old element are not carried over.

    Returns:
        The new element, now attached in place of ``node``.

    """
    replacement = soup.new_tag(tag_name)
    for child in list(node.contents):
        replacement.append(child)
    node.replace_with(replacement)
    return replacement


def insert_after(new_node: PageElement, reference: PageElement) -> None:
    """Insert ``new_node`` right after ``reference``."""
    reference.insert_after(new_node)


def remove(node: PageElement) -> None:
    """Detach ``node`` from its tree."""
    node.extract()


def parse_style(style: str) -> dict[str, str]:
    """Parse an inline ``style`` attribute into lowercase property names."""
    declarations: dict[str, str] = {}
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        if sep and name.strip():
            declarations[name.strip().lower()] = value.strip()
    return declarations
