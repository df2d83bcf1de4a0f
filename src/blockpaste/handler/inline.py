"""Detection of markup that can be inserted as inline content."""

from blockpaste.handler.content import is_double_br
from blockpaste.handler.dom import element_children, parse_fragment
from blockpaste.handler.schema import is_inline


def is_inline_content(html: str, tag_name: str | None = None) -> bool:
    """Check whether markup is inline content for the target tag.

    Every element at every depth must be phrasing content (or share a tag
    group with ``tag_name``, e.g. ``li`` into ``ul``), and there must be no
    double line break at the top level.

    Args:
        html: The markup to check.
        tag_name: Tag the content will be inserted into, if known.

    Returns:
        True if the markup is inline content.

    """
    soup = parse_fragment(html)
    if any(is_double_br(node) for node in element_children(soup)):
        return False
    return all(is_inline(node, tag_name) for node in soup.find_all(True))
