"""Table body inserter.

Browsers put rows written directly under ``table`` into an implied
``tbody``; the ``html.parser`` tree builder keeps them where they are.
"""

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag


def table_body_inserter(node: PageElement, soup: BeautifulSoup) -> None:
    """Move each run of direct ``tr`` children of a table into a ``tbody``."""
    if not isinstance(node, Tag) or node.name != "table":
        return

    body: Tag | None = None
    for child in list(node.contents):
        if not isinstance(child, Tag):
            continue
        if child.name != "tr":
            body = None
            continue
        if body is None:
            body = soup.new_tag("tbody")
            child.insert_before(body)
        body.append(child)
