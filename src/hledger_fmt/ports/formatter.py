"""Journal formatter interface."""

from typing import Iterable, Protocol


class JournalFormatter(Protocol):
    """Interface for the engine that pretty-prints a journal."""

    def format(self, lines: Iterable[str]) -> str:
        """Format a journal given as lines. Returns the formatted transactions."""
        ...
