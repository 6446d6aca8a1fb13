"""Adapters - I/O implementations of ports."""

from .hledger_cli import HledgerFormatter
from .journal_file import JournalFile

__all__ = [
    "HledgerFormatter",
    "JournalFile",
]
