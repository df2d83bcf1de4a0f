"""Image corrector: drop unusable sources and tracking pixels."""

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.dom import remove

_TRACKER_SIZE = "1"


def image_corrector(node: PageElement, soup: BeautifulSoup) -> None:
    """Clean up a pasted image.

    Local ``file:`` sources cannot be resolved by anyone else, so they are
    cleared. Images one pixel wide or high are trackers and are removed.
    """
    if not isinstance(node, Tag) or node.name != "img":
        return

    src = node.get("src") or ""
    if src.startswith("file:"):
        node["src"] = ""

    if node.get("height", "").strip() == _TRACKER_SIZE or node.get("width", "").strip() == _TRACKER_SIZE:
        remove(node)
