"""Tests for preamble commenting."""

from hledger_fmt.core.preamble import commentize


def run(lines, **kwargs):
    return list(commentize(lines, **kwargs))


class TestCommentize:
    def test_plain_lines_pass_through(self):
        lines = ["; a comment", "D 10,00 €", "account expenses", "", "commodity 1.000,00 EUR"]
        assert run(lines) == lines

    def test_include_is_commented(self):
        assert run(["include expenses.journal"]) == ["; include expenses.journal"]

    def test_transaction_block_is_commented(self):
        lines = [
            "2021-01-01 Pre-transaction",
            "    expense          7,90",
            "    income                -7,90",
        ]
        assert run(lines) == [
            "; 2021-01-01 Pre-transaction",
            ";     expense          7,90",
            ";     income                -7,90",
        ]

    def test_blank_line_ends_block(self):
        lines = ["2021-01-01 Pre", "    expense  1", "", "    stray indented"]
        assert run(lines) == ["; 2021-01-01 Pre", ";     expense  1", "", "    stray indented"]

    def test_indented_lines_outside_block_untouched(self):
        lines = ["account expenses", "    ; note:food"]
        assert run(lines) == lines

    def test_directive_inside_block_ends_nothing(self):
        # Only blank lines reset the block; unindented lines pass through
        lines = ["2021-01-01 Pre", "D 1,00 €", "    expense  1"]
        assert run(lines) == ["; 2021-01-01 Pre", "D 1,00 €", ";     expense  1"]

    def test_include_inside_block_keeps_block_open(self):
        lines = ["2021-01-01 Pre", "include x.journal", "    expense  1"]
        assert run(lines) == ["; 2021-01-01 Pre", "; include x.journal", ";     expense  1"]

    def test_consecutive_headers(self):
        lines = ["2021-01-01 A", "    a  1", "2021-01-02 B", "    b  2"]
        assert run(lines) == ["; 2021-01-01 A", ";     a  1", "; 2021-01-02 B", ";     b  2"]

    def test_blank_with_whitespace_resets(self):
        lines = ["2021-01-01 A", "   ", "    a  1"]
        assert run(lines) == ["; 2021-01-01 A", "   ", "    a  1"]

    def test_strict_dates(self):
        lines = ["2021/01/01 A", "    a  1"]
        assert run(lines, strict_dates=True) == lines
        assert run(lines) == ["; 2021/01/01 A", ";     a  1"]

    def test_blank_lines_preserved(self):
        assert run(["", ""]) == ["", ""]
