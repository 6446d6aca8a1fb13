"""Line classification for hledger journals - pure, no I/O."""

import re
from enum import Enum

# Anything below this line is replaced by the formatter's output
SEPARATOR = "; :::Transactions:::"
COMMENT = "; "

_TRANSACTION = re.compile(r"\d", re.ASCII)
_STRICT_TRANSACTION = re.compile(r"\d{4}-\d{2}-\d{2} ", re.ASCII)
_POSTING = re.compile(r"\s+\S", re.ASCII)
_INCLUDE = re.compile(r"include ")


class LineKind(Enum):
    BLANK = "blank"
    TRANSACTION_HEADER = "transaction_header"
    POSTING = "posting"
    INCLUDE = "include"
    OTHER = "other"


def is_blank(line: str) -> bool:
    return not line.strip()


def is_transaction_header(line: str, strict_dates: bool = False) -> bool:
    """A line opening a transaction.

    By default any line starting with a digit (a date) counts. With
    strict_dates the line must start with a full YYYY-MM-DD date followed by
    a space.
    """
    pattern = _STRICT_TRANSACTION if strict_dates else _TRANSACTION
    return pattern.match(line) is not None


def is_posting(line: str) -> bool:
    """Indented line with some content after the indentation."""
    return _POSTING.match(line) is not None


def is_include(line: str) -> bool:
    return _INCLUDE.match(line) is not None


def classify(line: str, strict_dates: bool = False) -> LineKind:
    """Classify a single journal line. Never fails; OTHER is the catch-all."""
    if is_blank(line):
        return LineKind.BLANK
    if is_transaction_header(line, strict_dates):
        return LineKind.TRANSACTION_HEADER
    if is_posting(line):
        return LineKind.POSTING
    if is_include(line):
        return LineKind.INCLUDE
    return LineKind.OTHER
