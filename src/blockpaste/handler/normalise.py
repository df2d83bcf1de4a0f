"""Block normalisation: give loose top-level content a paragraph to live in."""

from bs4.element import Tag

from blockpaste.handler.content import is_double_br, is_empty
from blockpaste.handler.dom import is_text, parse_fragment, to_html
from blockpaste.handler.schema import is_inline


def normalise_blocks(html: str) -> str:
    """Wrap top-level text and inline elements in paragraphs.

    Consecutive inline content shares one paragraph; a double line break
    starts a new one. Empty paragraphs, whitespace-only text, stray breaks
    and comments are dropped, block elements are kept as they are.

    Args:
        html: Sanitized markup.

    Returns:
        Markup whose top level consists of block elements only.

    """
    source = parse_fragment(html)
    target = parse_fragment("")

    def current_paragraph() -> Tag:
        last = target.contents[-1] if target.contents else None
        if isinstance(last, Tag) and last.name == "p":
            return last
        paragraph = target.new_tag("p")
        target.append(paragraph)
        return paragraph

    while source.contents:
        node = source.contents[0]

        if is_text(node):
            if node.strip():
                current_paragraph().append(node)
            else:
                node.extract()
        elif isinstance(node, Tag):
            if node.name == "br":
                following = node.next_sibling
                if is_double_br(following):
                    target.append(target.new_tag("p"))
                    following.extract()

                last = target.contents[-1] if target.contents else None
                # Don't append to an empty paragraph.
                if isinstance(last, Tag) and last.name == "p" and last.contents:
                    last.append(node)
                else:
                    node.extract()
            elif node.name == "p":
                if is_empty(node):
                    node.extract()
                else:
                    target.append(node)
            elif is_inline(node):
                current_paragraph().append(node)
            else:
                target.append(node)
        else:
            node.extract()

    return to_html(target)
