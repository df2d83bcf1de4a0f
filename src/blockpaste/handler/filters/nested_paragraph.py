"""Nested paragraph splitter.

An unclosed ``<p>`` implicitly ends at the next ``<p>`` in a browser. The
``html.parser`` tree builder nests the second paragraph inside the first
instead, which would merge both once the inner one is unwrapped.
"""

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag


def nested_paragraph_splitter(node: PageElement, soup: BeautifulSoup) -> None:
    """Move a paragraph nested in a paragraph, and what follows it, after its parent."""
    parent = node.parent
    if (
        not isinstance(node, Tag)
        or node.name != "p"
        or not isinstance(parent, Tag)
        or parent.name != "p"
    ):
        return

    anchor: PageElement = parent
    for sibling in [node, *node.next_siblings]:
        anchor.insert_after(sibling)
        anchor = sibling
