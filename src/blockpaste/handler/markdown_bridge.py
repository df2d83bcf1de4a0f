"""Markdown to HTML conversion for plain-text pastes, using Python-Markdown."""

import re

import markdown

from blockpaste.config import Settings

# Chat clients send ```code``` on a single line, which is not a valid fence.
_INLINE_FENCE = re.compile(r"((?:^|\n)```)([^\n`]+)(```(?:$|\n))")


def correct_chat_markdown(text: str) -> str:
    """Rewrite chat-client Markdown quirks into standard Markdown.

    Args:
        text: Markdown source as pasted.

    Returns:
        Markdown source with single-line code fences split over three lines.

    """
    return _INLINE_FENCE.sub(lambda m: f"{m.group(1)}\n{m.group(2)}\n{m.group(3)}", text)


class MarkdownConverter:
    """Converts plain-text Markdown to HTML with Python-Markdown."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the converter with settings.

        Args:
            settings: Application settings containing the Markdown extensions.

        """
        self._settings = settings

    def convert(self, text: str) -> str:
        """Convert Markdown source to HTML.

        Tables, fenced code and single newlines as line breaks are enabled by
        default. Mid-word underscores stay literal and no header ids are
        generated.

        Args:
            text: Markdown source.

        Returns:
            String containing HTML markup.

        """
        return markdown.markdown(
            correct_chat_markdown(text),
            extensions=self._settings.markdown_extension_list(),
        )
