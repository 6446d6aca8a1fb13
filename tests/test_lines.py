"""Tests for line classification."""

import pytest

from hledger_fmt.core.lines import (
    SEPARATOR,
    LineKind,
    classify,
    is_include,
    is_posting,
    is_transaction_header,
)


class TestClassify:
    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t "])
    def test_blank(self, line):
        assert classify(line) == LineKind.BLANK

    @pytest.mark.parametrize("line", ["2021-01-03 Groceries", "2021/01/03", "1 odd header"])
    def test_transaction_header_starts_with_digit(self, line):
        assert classify(line) == LineKind.TRANSACTION_HEADER

    @pytest.mark.parametrize("line", ["    expense  7,90", "\tincome", "  ; posting comment"])
    def test_posting_is_indented(self, line):
        assert classify(line) == LineKind.POSTING

    def test_include(self):
        assert classify("include expenses.journal") == LineKind.INCLUDE

    def test_include_needs_trailing_space(self):
        assert classify("include") == LineKind.OTHER

    def test_no_break_space_is_not_indentation(self):
        assert classify("\xa0Expenses 1") == LineKind.OTHER

    def test_non_ascii_digit_does_not_start_header(self):
        assert classify("\u0662\u0660\u0662\u0661 x") == LineKind.OTHER

    @pytest.mark.parametrize(
        "line",
        ["; comment", "D 10,00 €", "account expenses", "commodity 1.000,00 EUR", SEPARATOR, "~ monthly"],
    )
    def test_other(self, line):
        assert classify(line) == LineKind.OTHER


class TestStrictDates:
    def test_full_date_with_space(self):
        assert is_transaction_header("2021-01-03 Groceries", strict_dates=True)

    def test_rejects_other_date_formats(self):
        assert not is_transaction_header("2021/01/03 Groceries", strict_dates=True)
        assert not is_transaction_header("1 odd header", strict_dates=True)

    def test_rejects_date_without_description(self):
        assert not is_transaction_header("2021-01-03", strict_dates=True)

    def test_classify_uses_strict_mode(self):
        assert classify("2021/01/03 Groceries", strict_dates=True) == LineKind.OTHER
        assert classify("2021/01/03 Groceries") == LineKind.TRANSACTION_HEADER


class TestHelpers:
    def test_whitespace_only_is_not_a_posting(self):
        assert not is_posting("    ")

    def test_unindented_is_not_a_posting(self):
        assert not is_posting("expense 7,90")

    def test_include_must_start_line(self):
        assert not is_include("  include other.journal")
