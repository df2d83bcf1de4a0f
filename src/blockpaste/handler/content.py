"""Content inspection helpers shared by the filters and the cleaner."""

from bs4.element import PageElement, Tag

from blockpaste.handler.dom import is_text, parse_fragment
from blockpaste.handler.schema import is_embedded


def is_empty(element: Tag) -> bool:
    """Check whether an element has no meaningful content.

    Whitespace (including NBSP) and line breaks do not count, nor do
    attribute-less child elements that are themselves empty. A child with
    attributes or an embedded media child always counts as content.
    """
    for child in element.contents:
        if is_text(child):
            if child.strip():
                return False
        elif isinstance(child, Tag):
            if child.name == "br":
                continue
            if child.attrs or is_embedded(child):
                return False
            if not is_empty(child):
                return False
    return True


def is_plain(html: str) -> bool:
    """Check whether markup carries no formatting at all.

    Line breaks are treated as newlines; what is left must collapse into a
    single text node.
    """
    soup = parse_fragment(html)
    for br in soup.find_all("br"):
        br.replace_with("\n")
    soup.smooth()
    return len(soup.contents) == 1 and is_text(soup.contents[0])


def is_double_br(node: PageElement | None) -> bool:
    """Return True for a ``br`` directly preceded by another ``br``."""
    if not isinstance(node, Tag) or node.name != "br":
        return False
    previous = node.previous_sibling
    return isinstance(previous, Tag) and previous.name == "br"
