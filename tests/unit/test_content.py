"""Unit tests for content inspection helpers."""

import pytest

from blockpaste.handler.content import is_double_br, is_empty, is_plain
from blockpaste.handler.dom import parse_fragment


class TestIsEmpty:
    """Test detection of empty elements."""

    @pytest.mark.parametrize(
        "html",
        [
            "<p></p>",
            "<p> \n </p>",
            "<p>&nbsp;</p>",
            "<p><br></p>",
            "<p><span> <em></em></span></p>",
        ],
    )
    def test_empty(self, html: str) -> None:
        """Test content that does not count."""
        assert is_empty(parse_fragment(html).p)

    @pytest.mark.parametrize(
        "html",
        [
            "<p>a</p>",
            "<p><span><em>a</em></span></p>",
            '<p><span class="x"></span></p>',
            "<p><img></p>",
        ],
    )
    def test_not_empty(self, html: str) -> None:
        """Test text, attributes and media count as content."""
        assert not is_empty(parse_fragment(html).p)


class TestIsPlain:
    """Test detection of plain text."""

    def test_text_is_plain(self) -> None:
        """Test a bare text node."""
        assert is_plain("test")

    def test_line_breaks_are_plain(self) -> None:
        """Test that line breaks count as newlines."""
        assert is_plain("test<br>test")

    def test_formatting_is_not_plain(self) -> None:
        """Test that inline formatting is detected."""
        assert not is_plain("<strong>test</strong>")

    def test_escaped_markup_is_plain(self) -> None:
        """Test that entity-escaped markup is just text."""
        assert is_plain("&lt;p&gt;test&lt;/p&gt;")


class TestIsDoubleBr:
    """Test detection of double line breaks."""

    def test_second_break_is_double(self) -> None:
        """Test a break directly preceded by another break."""
        soup = parse_fragment("a<br><br>b")
        first, second = soup.find_all("br")
        assert not is_double_br(first)
        assert is_double_br(second)

    def test_non_break(self) -> None:
        """Test other nodes and None."""
        assert not is_double_br(None)
        assert not is_double_br(parse_fragment("<em>a</em>").em)
