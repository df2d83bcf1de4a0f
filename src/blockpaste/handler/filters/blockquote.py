"""Blockquote normaliser."""

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.dom import inner_html, set_inner_html
from blockpaste.handler.normalise import normalise_blocks


def blockquote_normaliser(node: PageElement, soup: BeautifulSoup) -> None:
    """Wrap loose quote content in paragraphs, as for top-level content."""
    if not isinstance(node, Tag) or node.name != "blockquote":
        return

    set_inner_html(node, normalise_blocks(inner_html(node)))
