"""Reading block attribute values out of markup with CSS selectors."""

import copy
from collections.abc import Mapping
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Tag

from blockpaste.blocks.models import AttributeSpec
from blockpaste.handler.dom import inner_html, parse_fragment


def _select(root: BeautifulSoup, selector: str | None) -> Tag | None:
    if not selector:
        return root
    return root.select_one(selector)


def parse_attribute(root: BeautifulSoup, spec: AttributeSpec) -> Any:
    """Read one sourced attribute value.

    Args:
        root: Parsed block markup.
        spec: The attribute spec; must have a ``source``.

    Returns:
        The value, or None if the selector matched nothing.

    """
    element = _select(root, spec.selector)
    if element is None:
        return None

    if spec.source == "html":
        return inner_html(element)
    if spec.source == "text":
        return element.get_text()
    if spec.source == "attribute" and spec.attribute:
        value = element.get(spec.attribute)
        if isinstance(value, list):
            return " ".join(value)
        return value
    return None


def get_block_attributes(
    specs: Mapping[str, AttributeSpec],
    html: str,
    attributes: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Compute all attribute values of a block.

    Sourced attributes are read from ``html``; the rest are taken from
    ``attributes``. Missing values fall back to the attribute default, and
    attributes without a value or default are left out.

    Args:
        specs: Attribute specs of the block type.
        html: The block's markup.
        attributes: Values not stored in markup (comment or shortcode data).

    Returns:
        Attribute values keyed by name.

    """
    attributes = attributes or {}
    root = parse_fragment(html)

    values: dict[str, Any] = {}
    for name, spec in specs.items():
        value = parse_attribute(root, spec) if spec.source else attributes.get(name)
        if value is None:
            value = copy.deepcopy(spec.default)
        if value is not None:
            values[name] = value
    return values
