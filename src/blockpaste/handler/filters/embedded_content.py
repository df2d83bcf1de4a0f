"""Embedded content reducer: hoist media out of inline flow into figures."""

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.schema import is_embedded


def embedded_content_reducer(node: PageElement, soup: BeautifulSoup) -> None:
    """Move embedded media into its own ``figure`` before the enclosing paragraph.

    An anchor whose only child is the image moves together with it. Without
    a paragraph ancestor the figure is placed where the media was.
    """
    if not isinstance(node, Tag) or not is_embedded(node):
        return

    node_to_insert: Tag = node
    parent = node.parent

    # Take the anchor out instead of just the image.
    if (
        node.name == "img"
        and isinstance(parent, Tag)
        and parent.name == "a"
        and len(parent.contents) == 1
    ):
        node_to_insert = parent

    wrapper: Tag | None = node_to_insert
    while wrapper is not None and wrapper.name != "p":
        wrapper = wrapper.parent

    figure = soup.new_tag("figure")
    if wrapper is not None:
        wrapper.insert_before(figure)
    else:
        node_to_insert.insert_before(figure)

    figure.append(node_to_insert)
