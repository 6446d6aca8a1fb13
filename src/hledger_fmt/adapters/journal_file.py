"""File-based journal adapter with atomic rewrite."""

import logging
import os
import stat
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Iterator

from hledger_fmt.errors import JournalIOError

logger = logging.getLogger(__name__)


class JournalFile:
    """
    A journal on disk.

    Reading is line by line. Writing goes to a temp file in the same
    directory, which then replaces the journal in a single rename. Readers
    of the journal see either the old or the new content, never a mix.
    No lock is taken: concurrent runs against one file are not coordinated.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def read_lines(self) -> Iterator[str]:
        """Yield lines without their line endings.

        Only LF ends a line; a CR right before it is dropped. Bytes that are
        not valid UTF-8 are carried as surrogates and written back unchanged.
        """
        try:
            with self.path.open(encoding="utf-8", errors="surrogateescape", newline="\n") as f:
                for line in f:
                    yield line.removesuffix("\n").removesuffix("\r")
        except OSError as e:
            raise JournalIOError("read", self.path, e) from e

    def rewrite(self, content: str) -> None:
        """Atomically replace the journal with content."""
        tmp_name = None
        try:
            with NamedTemporaryFile(
                "w",
                encoding="utf-8",
                errors="surrogateescape",
                newline="\n",
                dir=self.path.parent,
                prefix=f"{self.path.name}.tmp_",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            self._copy_mode(Path(tmp_name))
        except OSError as e:
            self._discard(tmp_name)
            raise JournalIOError("write temporary file for", self.path, e) from e

        try:
            os.replace(tmp_name, self.path)
        except OSError as e:
            self._discard(tmp_name)
            raise JournalIOError("replace", self.path, e) from e

        logger.debug(f"Rewrote {self.path} ({len(content)} characters)")

    def _copy_mode(self, tmp_path: Path) -> None:
        """Give the temp file the journal's permission bits (temp files default to 0600)."""
        try:
            mode = stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            return
        tmp_path.chmod(mode)

    @staticmethod
    def _discard(tmp_name: str | None) -> None:
        if not tmp_name:
            return
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove temporary file {tmp_name}: {e}")
