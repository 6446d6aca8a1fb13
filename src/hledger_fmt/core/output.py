"""Post-processing of formatter output."""

import re

_TRAILING_NEWLINES = re.compile(r"\n+\Z")


def trim_trailing_blank_lines(text: str) -> str:
    """Collapse any run of trailing newlines to exactly one."""
    return _TRAILING_NEWLINES.sub("\n", text)
