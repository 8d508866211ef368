"""Tests for parser/xprop.py"""

import pytest

from windowbar.errors import LineSyntaxError
from windowbar.parser import parse_xprop_line


class TestParseXpropLine:
    """Tests for parse_xprop_line."""

    def test_parse_line(self):
        """Test the standard xprop output."""
        actual = parse_xprop_line("_NET_ACTIVE_WINDOW(WINDOW): window id # 0x1e00003")
        assert actual == "0x1e00003"

    def test_extra_whitespace(self):
        """Test that runs of whitespace between literals are accepted."""
        actual = parse_xprop_line("_NET_ACTIVE_WINDOW(WINDOW):  window\tid  #   0x0")
        assert actual == "0x0"

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "_NET_ACTIVE_WINDOW(WINDOW): window # id 0x1e00003",
            "_NET_ACTIVE_WINDOW(WINDOW): window id 0x1e00003",
            "_NET_CLIENT_LIST(WINDOW): window id # 0x1e00003",
            "_NET_ACTIVE_WINDOW: window id # 0x1e00003",
            "_NET_ACTIVE_WINDOW(WINDOW):window id # 0x1e00003",
            "_NET_ACTIVE_WINDOW:  not found.",
        ],
    )
    def test_malformed_lines(self, line):
        """Test that any literal mismatch is a syntax error."""
        with pytest.raises(LineSyntaxError):
            parse_xprop_line(line)
