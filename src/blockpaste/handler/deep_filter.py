"""Post-order tree walker applying an ordered list of node filters."""

from collections.abc import Iterable, Iterator, Sequence

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.dom import is_attached, parse_fragment, to_html
from blockpaste.handler.protocols import NodeFilter


def _apply_filters(node: PageElement, filters: Sequence[NodeFilter], soup: BeautifulSoup) -> None:
    current = node
    for node_filter in filters:
        # An earlier filter may have removed the node.
        if not is_attached(current, soup):
            continue
        replacement = node_filter(current, soup)
        if replacement is not None:
            current = replacement


def deep_filter_node_list(
    nodes: Iterable[PageElement], filters: Sequence[NodeFilter], soup: BeautifulSoup
) -> None:
    """Deeply filter and mutate a list of sibling nodes.

    Each node's children are filtered before the node itself. A sibling
    list is snapshotted when its parent is entered, so nodes inserted by a
    filter are not visited in the same pass. The walk uses an explicit
    stack and does not recurse, whatever the nesting depth of the markup.

    Args:
        nodes: The nodes to filter.
        filters: Filters applied to every node, in order.
        soup: The document owning the nodes.

    """
    stack: list[tuple[PageElement | None, Iterator[PageElement]]] = [(None, iter(list(nodes)))]
    while stack:
        parent, children = stack[-1]
        node = next(children, None)

        if node is None:
            stack.pop()
            if parent is not None:
                _apply_filters(parent, filters, soup)
        elif isinstance(node, Tag):
            stack.append((node, iter(list(node.contents))))
        else:
            _apply_filters(node, filters, soup)


def deep_filter_html(html: str, filters: Sequence[NodeFilter] = ()) -> str:
    """Deeply filter markup with the given node filters.

    Args:
        html: The markup to filter.
        filters: Filters applied to every node, in order.

    Returns:
        The filtered markup.

    """
    soup = parse_fragment(html)
    deep_filter_node_list(soup.contents, filters, soup)
    return to_html(soup)
