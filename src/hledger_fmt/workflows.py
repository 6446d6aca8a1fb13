"""Workflow layer between the CLI and the core.

format_journal reads, splits, formats and atomically rewrites a journal
file. format_lines does the same in memory and returns the new content.
"""

import logging
from pathlib import Path
from typing import Iterable

from .adapters.hledger_cli import HledgerFormatter
from .adapters.journal_file import JournalFile
from .config import Config
from .core.journal import formatter_input, render_journal, split_journal
from .ports.formatter import JournalFormatter

logger = logging.getLogger(__name__)


def get_formatter(config: Config) -> HledgerFormatter:
    """Build the hledger adapter from config."""
    return HledgerFormatter(
        binary=config.hledger_binary,
        ignore_assertions=config.ignore_assertions,
        timeout=config.timeout or None,
    )


def format_lines(lines: Iterable[str], formatter: JournalFormatter, strict_dates: bool = False) -> str:
    """Return the reformatted journal for the given lines."""
    journal = split_journal(lines, strict_dates)
    logger.debug(
        f"Split journal at line {journal.separator_line}: "
        f"{len(journal.preamble)} preamble lines, {len(journal.transactions)} transaction lines"
    )
    formatted = formatter.format(formatter_input(journal, strict_dates))
    return render_journal(journal.preamble, formatted)


def format_journal(
    path: Path | str,
    formatter: JournalFormatter,
    strict_dates: bool = False,
    dry_run: bool = False,
) -> str:
    """
    Format the transactions of the journal at path.

    The file is replaced only after the formatter succeeded; any error
    leaves it untouched. With dry_run nothing is written. Returns the new
    journal content.
    """
    journal_file = JournalFile(path)
    content = format_lines(journal_file.read_lines(), formatter, strict_dates)
    if dry_run:
        logger.debug(f"Dry run, not writing {journal_file.path}")
    else:
        journal_file.rewrite(content)
    return content
