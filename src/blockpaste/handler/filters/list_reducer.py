"""List reducer: repair list structures produced by copy and paste."""

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.dom import element_children, is_text, unwrap


def _is_list(node: PageElement | None) -> bool:
    return isinstance(node, Tag) and node.name in ("ul", "ol")


def _shallow_text_content(element: Tag) -> str:
    return "".join(str(child) for child in element.contents if is_text(child))


def list_reducer(node: PageElement, soup: BeautifulSoup) -> None:
    """Merge, lift and re-nest lists.

    - A single-item list right after a list of the same kind is merged into it.
    - A nested list whose parent item has no other content moves into the
      previous item, or takes the empty item's place.
    - A list directly inside a list moves into the previous item, or is
      unwrapped.
    """
    if not _is_list(node):
        return

    list_node: Tag = node
    previous = list_node.find_previous_sibling()

    if (
        isinstance(previous, Tag)
        and previous.name == list_node.name
        and len(element_children(list_node)) == 1
    ):
        for child in list(list_node.contents):
            previous.append(child)
        list_node.extract()

    parent = list_node.parent

    # Nested list with an empty parent item.
    if (
        isinstance(parent, Tag)
        and parent.name == "li"
        and len(element_children(parent)) == 1
        and not _shallow_text_content(parent).strip()
    ):
        previous_item = parent.find_previous_sibling()
        if previous_item is not None:
            previous_item.append(list_node)
        else:
            for item in list(list_node.contents):
                parent.insert_before(item)
            list_node.extract()
        parent.extract()

    # Invalid: ol/ul > ol/ul.
    if _is_list(parent) and list_node.parent is parent:
        previous_item = list_node.find_previous_sibling()
        if previous_item is not None:
            previous_item.append(list_node)
        else:
            unwrap(list_node)
