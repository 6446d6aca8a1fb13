"""Comment out preamble content the formatter must not emit or resolve."""

from typing import Iterable, Iterator

from .lines import COMMENT, is_blank, is_include, is_posting, is_transaction_header


def commentize(preamble: Iterable[str], strict_dates: bool = False) -> Iterator[str]:
    """
    Rewrite preamble lines for the formatter.

    hledger prints every transaction it parses and follows include
    directives, so both are commented out here. A transaction block is a
    header plus the postings directly below it; a blank line ends it.
    Directives such as commodity or account declarations pass through
    unchanged and still shape the formatted output.
    """
    in_transaction = False
    for line in preamble:
        if is_include(line):
            yield COMMENT + line
        elif is_transaction_header(line, strict_dates):
            in_transaction = True
            yield COMMENT + line
        elif in_transaction and is_posting(line):
            yield COMMENT + line
        else:
            if is_blank(line):
                in_transaction = False
            yield line
