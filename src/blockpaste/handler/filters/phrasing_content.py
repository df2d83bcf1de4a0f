"""Phrasing content reducer: presentational markup to semantic markup."""

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.dom import parse_style, replace_tag, unwrap
from blockpaste.handler.schema import is_block_content, is_phrasing_content

_BOLD_WEIGHTS = frozenset(("bold", "700"))

_SEMANTIC_TAGS = {
    "b": "strong",
    "i": "em",
}


def phrasing_content_reducer(node: PageElement, soup: BeautifulSoup) -> PageElement | None:
    """Normalize inline formatting on a single node.

    Bold or italic spans become ``strong``/``em``, legacy ``b``/``i`` become
    their semantic equivalents, and an inline element holding block content
    is unwrapped.

    Returns:
        The replacement element if the tag was swapped, otherwise None.

    """
    if not isinstance(node, Tag):
        return None

    original = node

    if node.name == "span":
        style = parse_style(node.get("style") or "")
        if style.get("font-weight", "").lower() in _BOLD_WEIGHTS:
            node = replace_tag(node, "strong", soup)
        elif style.get("font-style", "").lower() == "italic":
            node = replace_tag(node, "em", soup)

    if node.name in _SEMANTIC_TAGS:
        node = replace_tag(node, _SEMANTIC_TAGS[node.name], soup)

    # Inline elements must not contain block content.
    if is_phrasing_content(node) and any(is_block_content(child) for child in node.contents):
        unwrap(node)
        return None

    return node if node is not original else None
