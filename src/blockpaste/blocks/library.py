"""Core block types.

Each block type declares how its attributes are read from markup, how it
is created from pasted markup or shortcodes and how it is saved back.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING, Any

from blockpaste.blocks.models import AttributeSpec, BlockType, RawTransform, ShortcodeTransform
from blockpaste.blocks.registry import BlockTypeRegistry
from blockpaste.config import Settings, get_settings
from blockpaste.handler.dom import inner_html
from blockpaste.handler.filters.special_comment import MORE_BLOCK_NAME, NEXTPAGE_BLOCK_NAME
from blockpaste.handler.raw_handler import Mode, RawHandler
from blockpaste.handler.schema import PASSTHROUGH_TAG

if TYPE_CHECKING:
    from collections.abc import Callable

    from bs4.element import Tag

    from blockpaste.blocks.models import Block, ShortcodeAttributes, ShortcodeMatch

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

DEFAULT_GALLERY_COLUMNS = 3


def _is_tag(*names: str) -> Callable[[Tag], bool]:
    def is_match(node: Tag) -> bool:
        return node.name in names

    return is_match


def _is_passthrough(block_name: str) -> Callable[[Tag], bool]:
    def is_match(node: Tag) -> bool:
        return node.name == PASSTHROUGH_TAG and node.get("data-block") == block_name

    return is_match


def _is_figure_with(child: str) -> Callable[[Tag], bool]:
    def is_match(node: Tag) -> bool:
        return node.name == "figure" and node.find(child) is not None

    return is_match


def _save_paragraph(attributes: dict[str, Any], inner: str) -> str:
    align = attributes.get("align")
    style = f' style="text-align:{escape(align)}"' if align else ""
    return f"<p{style}>{attributes.get('content', '')}</p>"


def _save_heading(attributes: dict[str, Any], inner: str) -> str:
    tag = f"h{attributes.get('level', 2)}"
    return f"<{tag}>{attributes.get('content', '')}</{tag}>"


def _save_list(attributes: dict[str, Any], inner: str) -> str:
    tag = "ol" if attributes.get("ordered") else "ul"
    return f"<{tag}>{attributes.get('values', '')}</{tag}>"


def _save_quote(attributes: dict[str, Any], inner: str) -> str:
    citation = attributes.get("citation")
    cite = f"<cite>{citation}</cite>" if citation else ""
    return f"<blockquote>{inner}{cite}</blockquote>"


def _save_image(attributes: dict[str, Any], inner: str) -> str:
    image = f'<img src="{escape(attributes.get("url", ""))}" alt="{escape(attributes.get("alt", ""))}">'
    if attributes.get("href"):
        image = f'<a href="{escape(attributes["href"])}">{image}</a>'
    caption = attributes.get("caption")
    if caption:
        image += f"<figcaption>{caption}</figcaption>"
    return f"<figure>{image}</figure>"


def _save_table(attributes: dict[str, Any], inner: str) -> str:
    return f"<table>{attributes.get('content', '')}</table>"


def _save_preformatted(attributes: dict[str, Any], inner: str) -> str:
    return f"<pre>{attributes.get('content', '')}</pre>"


def _save_raw(attributes: dict[str, Any], inner: str) -> str:
    return str(attributes.get("content", ""))


def _save_more(attributes: dict[str, Any], inner: str) -> str:
    custom_text = attributes.get("customText")
    more = f"<!--more {custom_text}-->" if custom_text else "<!--more-->"
    if attributes.get("noTeaser"):
        more += "<!--noteaser-->"
    return more


def _save_gallery(attributes: dict[str, Any], inner: str) -> str:
    columns = attributes.get("columns", DEFAULT_GALLERY_COLUMNS)
    items = "".join(f'<li data-id="{image_id}"></li>' for image_id in attributes.get("ids", []))
    return f'<ul class="gallery columns-{columns}">{items}</ul>'


def _gallery_ids(attrs: ShortcodeAttributes, match: ShortcodeMatch) -> list[int] | None:
    ids = attrs.named.get("ids")
    if not ids:
        return None
    return [int(value) for value in ids.split(",") if value.strip().isdigit()]


def _gallery_columns(attrs: ShortcodeAttributes, match: ShortcodeMatch) -> int | None:
    columns = attrs.named.get("columns", "")
    return int(columns) if columns.isdigit() else None


def register_core_block_types(registry: BlockTypeRegistry, settings: Settings) -> None:
    """Register the core block types with ``registry``.

    The quote transform converts the quote's content to inner blocks with a
    handler bound to the same registry.

    Args:
        registry: The registry to populate.
        settings: Application settings; name the fallback block type.

    """
    handler = RawHandler(settings, registry)

    def heading_from_node(node: Tag) -> Block:
        return registry.create_block(
            "core/heading", {"content": inner_html(node), "level": int(node.name[1])}
        )

    def list_from_node(node: Tag) -> Block:
        return registry.create_block(
            "core/list", {"ordered": node.name == "ol", "values": inner_html(node)}
        )

    def quote_from_node(node: Tag) -> Block:
        attributes: dict[str, Any] = {}
        cite = node.find("cite", recursive=False)
        if cite is not None:
            attributes["citation"] = inner_html(cite)
            cite.extract()
        inner_blocks = handler.convert(inner_html(node), mode=Mode.BLOCKS)
        return registry.create_block("core/quote", attributes, list(inner_blocks))

    def html_from_node(node: Tag) -> Block:
        return registry.create_block("core/html", {"content": inner_html(node)})

    def more_from_node(node: Tag) -> Block:
        attributes: dict[str, Any] = {"noTeaser": node.has_attr("data-no-teaser")}
        if node.get("data-custom-text"):
            attributes["customText"] = node["data-custom-text"]
        return registry.create_block(MORE_BLOCK_NAME, attributes)

    def nextpage_from_node(node: Tag) -> Block:
        return registry.create_block(NEXTPAGE_BLOCK_NAME)

    block_types = (
        BlockType(
            name="core/paragraph",
            title="Paragraph",
            attributes={
                "content": AttributeSpec(source="html", selector="p"),
                "align": AttributeSpec(),
            },
            transforms=(RawTransform(block_name="core/paragraph", is_match=_is_tag("p")),),
            save=_save_paragraph,
        ),
        BlockType(
            name="core/heading",
            title="Heading",
            attributes={
                "content": AttributeSpec(source="html", selector=",".join(HEADING_TAGS)),
                "level": AttributeSpec(default=2),
            },
            transforms=(
                RawTransform(
                    block_name="core/heading",
                    is_match=_is_tag(*HEADING_TAGS),
                    transform=heading_from_node,
                ),
            ),
            save=_save_heading,
        ),
        BlockType(
            name="core/list",
            title="List",
            attributes={
                "ordered": AttributeSpec(default=False),
                "values": AttributeSpec(source="html", selector="ol,ul"),
            },
            transforms=(
                RawTransform(
                    block_name="core/list", is_match=_is_tag("ol", "ul"), transform=list_from_node
                ),
            ),
            save=_save_list,
        ),
        BlockType(
            name="core/quote",
            title="Quote",
            attributes={"citation": AttributeSpec(source="html", selector="cite")},
            transforms=(
                RawTransform(
                    block_name="core/quote",
                    is_match=_is_tag("blockquote"),
                    transform=quote_from_node,
                ),
            ),
            save=_save_quote,
        ),
        BlockType(
            name="core/image",
            title="Image",
            attributes={
                "url": AttributeSpec(source="attribute", selector="img", attribute="src"),
                "alt": AttributeSpec(
                    source="attribute", selector="img", attribute="alt", default=""
                ),
                "caption": AttributeSpec(source="html", selector="figcaption"),
                "href": AttributeSpec(source="attribute", selector="a", attribute="href"),
            },
            transforms=(RawTransform(block_name="core/image", is_match=_is_figure_with("img")),),
            save=_save_image,
        ),
        BlockType(
            name="core/html",
            title="Custom HTML",
            attributes={"content": AttributeSpec(source="html")},
            transforms=(
                RawTransform(
                    block_name="core/html",
                    is_match=_is_figure_with("iframe"),
                    transform=html_from_node,
                ),
            ),
            save=_save_raw,
        ),
        BlockType(
            name="core/table",
            title="Table",
            attributes={"content": AttributeSpec(source="html", selector="table")},
            transforms=(RawTransform(block_name="core/table", is_match=_is_tag("table")),),
            save=_save_table,
        ),
        BlockType(
            name="core/separator",
            title="Separator",
            transforms=(RawTransform(block_name="core/separator", is_match=_is_tag("hr")),),
            save=lambda attributes, inner: "<hr>",
        ),
        BlockType(
            name="core/preformatted",
            title="Preformatted",
            attributes={"content": AttributeSpec(source="html", selector="pre")},
            transforms=(RawTransform(block_name="core/preformatted", is_match=_is_tag("pre")),),
            save=_save_preformatted,
        ),
        BlockType(
            name=MORE_BLOCK_NAME,
            title="More",
            attributes={
                "customText": AttributeSpec(),
                "noTeaser": AttributeSpec(default=False),
            },
            transforms=(
                RawTransform(
                    block_name=MORE_BLOCK_NAME,
                    is_match=_is_passthrough(MORE_BLOCK_NAME),
                    transform=more_from_node,
                ),
            ),
            save=_save_more,
        ),
        BlockType(
            name=NEXTPAGE_BLOCK_NAME,
            title="Page break",
            transforms=(
                RawTransform(
                    block_name=NEXTPAGE_BLOCK_NAME,
                    is_match=_is_passthrough(NEXTPAGE_BLOCK_NAME),
                    transform=nextpage_from_node,
                ),
            ),
            save=lambda attributes, inner: "<!--nextpage-->",
        ),
        BlockType(
            name="core/gallery",
            title="Gallery",
            attributes={
                "ids": AttributeSpec(default=[]),
                "columns": AttributeSpec(default=DEFAULT_GALLERY_COLUMNS),
            },
            transforms=(
                ShortcodeTransform(
                    block_name="core/gallery",
                    tags=("gallery",),
                    attributes={"ids": _gallery_ids, "columns": _gallery_columns},
                ),
            ),
            save=_save_gallery,
        ),
        BlockType(
            name=settings.unknown_block_name,
            title="Classic",
            attributes={"content": AttributeSpec(source="html")},
            save=_save_raw,
        ),
    )

    for block_type in block_types:
        registry.register(block_type)


def create_default_registry(settings: Settings | None = None) -> BlockTypeRegistry:
    """Create a registry holding the core block types.

    Args:
        settings: Application settings (default: the cached settings).

    Returns:
        A populated registry.

    """
    settings = settings or get_settings()
    registry = BlockTypeRegistry(settings)
    register_core_block_types(registry, settings)
    return registry
