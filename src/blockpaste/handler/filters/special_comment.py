"""Special comment converter: editorial directives hidden in HTML comments.

``<!--more-->`` (optionally with custom link text and a following
``<!--noteaser-->``) and ``<!--nextpage-->`` are replaced by passthrough
elements that the materializer turns into their blocks.
"""

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from blockpaste.handler.dom import is_comment
from blockpaste.handler.schema import PASSTHROUGH_TAG

MORE_BLOCK_NAME = "core/more"
NEXTPAGE_BLOCK_NAME = "core/nextpage"


def _create_more(custom_text: str, no_teaser: bool, soup: BeautifulSoup) -> Tag:
    node = soup.new_tag(PASSTHROUGH_TAG)
    node["data-block"] = MORE_BLOCK_NAME
    if custom_text:
        node["data-custom-text"] = custom_text
    if no_teaser:
        node["data-no-teaser"] = ""
    return node


def _create_nextpage(soup: BeautifulSoup) -> Tag:
    node = soup.new_tag(PASSTHROUGH_TAG)
    node["data-block"] = NEXTPAGE_BLOCK_NAME
    return node


def special_comment_converter(node: PageElement, soup: BeautifulSoup) -> Tag | None:
    """Replace a directive comment with its passthrough element.

    Returns:
        The passthrough element, or None if ``node`` is not a directive.

    """
    if not is_comment(node):
        return None

    value = node.strip()

    if value == "nextpage":
        replacement = _create_nextpage(soup)
        node.replace_with(replacement)
        return replacement

    if value.startswith("more"):
        custom_text = value[4:].strip()

        # The noteaser marker need not be a direct sibling.
        no_teaser = False
        for sibling in node.next_siblings:
            if is_comment(sibling) and sibling.strip() == "noteaser":
                no_teaser = True
                sibling.extract()
                break

        replacement = _create_more(custom_text, no_teaser, soup)
        node.replace_with(replacement)
        return replacement

    return None
