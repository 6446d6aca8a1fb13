"""Functional core - pure journal logic with no I/O."""

from .lines import COMMENT, SEPARATOR, LineKind, classify
from .journal import Journal, formatter_input, render_journal, split_journal
from .preamble import commentize
from .output import trim_trailing_blank_lines

__all__ = [
    # Lines
    "SEPARATOR",
    "COMMENT",
    "LineKind",
    "classify",
    # Journal
    "Journal",
    "split_journal",
    "formatter_input",
    "render_journal",
    # Preamble
    "commentize",
    # Output
    "trim_trailing_blank_lines",
]
