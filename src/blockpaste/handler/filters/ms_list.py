"""Word processor list converter.

Office applications paste list items as paragraphs styled with
``mso-list: l0 level2 lfo1`` whose first child is the rendered bullet.
Those paragraphs are rebuilt into real (nested) ``ul``/``ol`` lists.
"""

import re

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.dom import last_element_child

_MSO_LEVEL = re.compile(r"mso-list\s*:[^;]+level([0-9]+)", re.IGNORECASE)

# Bullet glyphs that map onto an ``ol[type]`` value.
_ORDERED_MARKERS = re.compile(r"[1iIaA]")


def _is_list(node: PageElement | None) -> bool:
    return isinstance(node, Tag) and node.name in ("ul", "ol")


def ms_list_converter(node: PageElement, soup: BeautifulSoup) -> None:
    """Turn an ``mso-list`` paragraph into an item of the preceding list."""
    if not isinstance(node, Tag) or node.name != "p":
        return

    style = node.get("style") or ""
    if "mso-list" not in style:
        return

    matches = _MSO_LEVEL.search(style)
    if not matches:
        return

    level = max(int(matches.group(1)) - 1, 0)

    previous = node.find_previous_sibling()
    if not _is_list(previous):
        marker = node.get_text().strip()[:1]
        is_ordered = bool(marker) and _ORDERED_MARKERS.fullmatch(marker) is not None
        new_list = soup.new_tag("ol" if is_ordered else "ul")
        if is_ordered:
            new_list["type"] = marker
        node.insert_before(new_list)
        previous = new_list

    list_node: Tag = previous
    list_item = soup.new_tag("li")

    # The first element holds the rendered bullet.
    marker_element = node.find(True, recursive=False)
    if marker_element is not None:
        marker_element.extract()

    for child in list(node.contents):
        list_item.append(child)

    receiving = list_node
    for _ in range(level):
        receiving = last_element_child(receiving) or receiving
        if _is_list(receiving):
            receiving = last_element_child(receiving) or receiving

    # Items of the same level share one nested list.
    if level and not _is_list(receiving) and _is_list(last_element_child(receiving)):
        receiving = last_element_child(receiving)

    if not _is_list(receiving):
        nested = soup.new_tag(list_node.name)
        receiving.append(nested)
        receiving = nested

    receiving.append(list_item)
    node.extract()
