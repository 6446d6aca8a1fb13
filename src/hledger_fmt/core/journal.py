"""Split a journal into preamble and transactions, and put it back together."""

from dataclasses import dataclass, field
from typing import Iterable

from hledger_fmt.errors import DuplicateSeparator, InvalidTransactionLine, MissingSeparator

from .lines import SEPARATOR, LineKind, classify
from .preamble import commentize


@dataclass
class Journal:
    """A journal split at its separator line.

    `separator_line` is the 1-based line number of the separator.
    """

    preamble: list[str] = field(default_factory=list)
    transactions: list[str] = field(default_factory=list)
    separator_line: int = 0

    def lines(self) -> list[str]:
        """The original line sequence, separator included."""
        return [*self.preamble, SEPARATOR, *self.transactions]


def split_journal(lines: Iterable[str], strict_dates: bool = False) -> Journal:
    """
    Split journal lines into preamble and transactions.

    Lines are consumed in order, so a lazily read file is never buffered
    beyond the two resulting lists. Raises:
    - MissingSeparator if no separator line exists
    - DuplicateSeparator if a second separator line follows the first
    - InvalidTransactionLine for any line after the separator that is not
      blank, a transaction header or a posting
    """
    journal = Journal()
    line_iter = iter(lines)
    line_nr = 0

    for line in line_iter:
        line_nr += 1
        if line == SEPARATOR:
            journal.separator_line = line_nr
            break
        journal.preamble.append(line)
    else:
        raise MissingSeparator()

    # Postings without a preceding header are accepted
    for line in line_iter:
        line_nr += 1
        if line == SEPARATOR:
            raise DuplicateSeparator(line_nr)
        if classify(line, strict_dates) not in (LineKind.BLANK, LineKind.TRANSACTION_HEADER, LineKind.POSTING):
            raise InvalidTransactionLine(line_nr, line)
        journal.transactions.append(line)

    return journal


def formatter_input(journal: Journal, strict_dates: bool = False) -> Iterable[str]:
    """Lines to feed the formatter: commented preamble, separator, raw transactions."""
    yield from commentize(journal.preamble, strict_dates)
    yield SEPARATOR
    yield from journal.transactions


def render_journal(preamble: list[str], formatted: str) -> str:
    """Preamble verbatim, the separator, a blank line, then the formatted transactions."""
    return "\n".join(preamble) + "\n" + SEPARATOR + "\n\n" + formatted
