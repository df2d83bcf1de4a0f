"""Schema enforcement: strip or unwrap everything a schema does not permit."""

from collections.abc import Iterable, Iterator

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.content import is_empty
from blockpaste.handler.dom import insert_after, is_text, node_name, parse_fragment, to_html, unwrap
from blockpaste.handler.schema import Schema, SchemaNode, is_block_content

# Elements whose content is never meant to be read. Document-level wrappers
# (html, body) are unwrapped as usual.
DROPPED_CONTENT_TAGS = frozenset(("head", "noscript", "script", "style", "template", "title"))


def _clean_attributes(node: Tag, entry: SchemaNode) -> None:
    for name in list(node.attrs):
        if name == "class" or name in entry.attributes:
            continue
        del node[name]

    classes = node.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    allowed = [name for name in classes if name in entry.classes]
    if allowed:
        node["class"] = allowed
    elif "class" in node.attrs:
        del node["class"]


def _is_separated(node: Tag) -> bool:
    # Break lines only between passages, never before list items or tables.
    return is_block_content(node) or node.name == "li"


def _has_content_before(node: Tag) -> bool:
    previous = node.previous_sibling
    if previous is None:
        return False
    if is_text(previous):
        return bool(previous.strip())
    return not (isinstance(previous, Tag) and previous.name == "br")


def _finish(node: Tag, schema: Schema, soup: BeautifulSoup) -> None:
    """Complete an element whose children were cleaned.

    ``schema`` is the scope the element itself was validated against.
    """
    if node_name(node) in schema:
        # A wrapper with nothing left inside is noise.
        if is_empty(node):
            node.extract()
        return

    # Keep two passages from running into one line.
    if "br" in schema and _is_separated(node):
        if _has_content_before(node):
            node.insert_before(soup.new_tag("br"))
        if node.find_next_sibling() is not None:
            insert_after(soup.new_tag("br"), node)

    unwrap(node)


def clean_node_list(nodes: Iterable[PageElement], schema: Schema, soup: BeautifulSoup) -> None:
    """Validate sibling nodes against a schema scope, mutating them in place.

    Permitted elements keep only allowed attributes and classes and are
    validated recursively against their ``children`` scope; elements that
    may hold children but end up empty are removed. Scripts, styles and
    the document head are removed with their content. Anything else is
    unwrapped after its own children were cleaned against the same scope.

    The tree is walked with an explicit stack, so arbitrarily deep markup
    is handled.

    Args:
        nodes: The nodes to clean.
        schema: The schema scope governing these nodes.
        soup: The document owning the nodes.

    """
    # Each frame: the element being cleaned, the scope of its children and
    # the children still to visit.
    stack: list[tuple[Tag | None, Schema, Iterator[PageElement]]] = [
        (None, schema, iter(list(nodes)))
    ]
    while stack:
        parent, scope, children = stack[-1]
        node = next(children, None)

        if node is None:
            stack.pop()
            if parent is not None:
                _finish(parent, stack[-1][1], soup)
            continue

        name = node_name(node)

        if name in scope:
            if not isinstance(node, Tag):
                continue

            entry = scope[name]
            _clean_attributes(node, entry)

            if entry.children is None:
                node.clear()
                continue

            stack.append((node, entry.children, iter(list(node.contents))))
        elif isinstance(node, Tag):
            if name in DROPPED_CONTENT_TAGS:
                node.decompose()
                continue
            stack.append((node, scope, iter(list(node.contents))))
        else:
            unwrap(node)


def remove_invalid_html(html: str, schema: Schema) -> str:
    """Remove markup not permitted by ``schema``, keeping its content.

    Args:
        html: The markup to clean.
        schema: The schema to enforce.

    Returns:
        The cleaned markup.

    """
    soup = parse_fragment(html)
    clean_node_list(soup.contents, schema, soup)
    return to_html(soup)
