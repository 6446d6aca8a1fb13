"""Ports - interfaces/protocols for external dependencies."""

from .formatter import JournalFormatter

__all__ = [
    "JournalFormatter",
]
