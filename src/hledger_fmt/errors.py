"""Errors raised while formatting a journal.

Every error is terminal for a run. The CLI prints the message and exits 1.
"""

from pathlib import Path


class HledgerFmtError(Exception):
    """Base exception for all hledger-fmt errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class JournalParseError(HledgerFmtError):
    """The journal could not be split into preamble and transactions."""


class MissingSeparator(JournalParseError):
    def __init__(self):
        super().__init__("ledger file contains no transaction separator")


class DuplicateSeparator(JournalParseError):
    def __init__(self, line_number: int):
        super().__init__("ledger file contains multiple transaction separators")
        self.line_number = line_number


class InvalidTransactionLine(JournalParseError):
    """A line below the separator is not blank, a header or a posting."""

    def __init__(self, line_number: int, text: str):
        printable = text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        super().__init__(f"ledger file contains unexpected line {line_number} in transactions: {printable}")
        self.line_number = line_number
        self.text = text


class FormatterError(HledgerFmtError):
    """The external formatter could not produce output."""


class FormatterNotFound(FormatterError):
    def __init__(self, binary: str):
        super().__init__(f"formatter '{binary}' not found - install hledger or set HLEDGER_BINARY")
        self.binary = binary


class FormatterFailed(FormatterError):
    def __init__(self, returncode: int, stderr: str = ""):
        detail = stderr.strip().splitlines()[-1] if stderr.strip() else "no diagnostics"
        super().__init__(f"formatter exited with status {returncode}: {detail}")
        self.returncode = returncode
        self.stderr = stderr


class FormatterTimeout(FormatterError):
    def __init__(self, timeout: float):
        super().__init__(f"formatter timed out after {timeout}s")
        self.timeout = timeout


class JournalIOError(HledgerFmtError):
    """A filesystem operation on the journal or its temp file failed."""

    def __init__(self, operation: str, path: Path | str, error: OSError):
        super().__init__(f"cannot {operation} {path}: {error.strerror or error}")
        self.operation = operation
        self.path = Path(path)
        self.error = error
