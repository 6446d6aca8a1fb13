"""Tests for formatter output post-processing."""

import pytest

from hledger_fmt.core.output import trim_trailing_blank_lines


class TestTrimTrailingBlankLines:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("a\n\n\n", "a\n"),
            ("a\n", "a\n"),
            ("a", "a"),
            ("", ""),
            ("a\n\nb\n\n", "a\n\nb\n"),
            ("\n\n", "\n"),
        ],
    )
    def test_collapses_trailing_newlines(self, text, expected):
        assert trim_trailing_blank_lines(text) == expected
