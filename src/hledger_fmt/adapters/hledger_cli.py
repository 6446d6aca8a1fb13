"""hledger CLI adapter - subprocess wrapper around `hledger print`."""

import io
import logging
import signal
import subprocess
import sys
import threading
from typing import IO, Iterable, TextIO

from hledger_fmt.core.output import trim_trailing_blank_lines
from hledger_fmt.errors import FormatterError, FormatterFailed, FormatterNotFound, FormatterTimeout

logger = logging.getLogger(__name__)


class HledgerFormatter:
    """
    hledger subprocess adapter.

    Implements JournalFormatter protocol. Pipes a journal into
    `hledger -f - print` and returns what it prints.

    Input is fed from a separate thread while the calling thread drains
    stdout, so neither pipe can fill up and stall the other. stderr is
    copied to our own stderr as it arrives and kept for error reporting.
    """

    def __init__(
        self,
        binary: str = "hledger",
        ignore_assertions: bool = True,
        timeout: float | None = 60,
        stderr: TextIO | None = None,
    ):
        """
        Initialize the hledger adapter.

        Args:
            binary: hledger executable name or path.
            ignore_assertions: Pass --ignore-assertions. Balance assertions
                checked against a single file of a multi-file journal are
                usually wrong.
            timeout: Seconds before the process is killed. None or 0 waits forever.
            stderr: Where to forward hledger's diagnostics (default: sys.stderr).
        """
        self.binary = binary
        self.ignore_assertions = ignore_assertions
        self.timeout = timeout
        self.stderr = stderr

    def command(self) -> list[str]:
        cmd = [self.binary, "-f", "-"]
        if self.ignore_assertions:
            cmd.append("--ignore-assertions")
        cmd.append("print")
        return cmd

    def format(self, lines: Iterable[str]) -> str:
        """Format a journal given as lines. Returns the formatted transactions."""
        cmd = self.command()
        logger.debug(f"Running formatter: {' '.join(cmd)}")
        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except FileNotFoundError:
            raise FormatterNotFound(self.binary)
        except OSError as e:
            raise FormatterError(f"cannot run formatter '{self.binary}': {e}") from e

        # Undecodable journal bytes round-trip; diagnostics only need to be readable
        stdin = io.TextIOWrapper(proc.stdin, encoding="utf-8", errors="surrogateescape", newline="\n")
        stdout = io.TextIOWrapper(proc.stdout, encoding="utf-8", errors="surrogateescape")
        stderr = io.TextIOWrapper(proc.stderr, encoding="utf-8", errors="replace")

        feed_errors: list[Exception] = []
        stderr_lines: list[str] = []
        feeder = threading.Thread(target=self._feed, args=(stdin, lines, feed_errors), daemon=True)
        tee = threading.Thread(
            target=self._tee,
            args=(stderr, self.stderr or sys.stderr, stderr_lines),
            daemon=True,
        )

        timed_out = threading.Event()
        timer = None
        if self.timeout:

            def kill():
                timed_out.set()
                proc.kill()

            timer = threading.Timer(self.timeout, kill)
            timer.start()

        feeder.start()
        tee.start()
        try:
            output = stdout.read()
            stdout.close()
            returncode = proc.wait()
        finally:
            if timer:
                timer.cancel()
            feeder.join()
            tee.join()

        # A kill that lands after the process exited changes nothing
        if timed_out.is_set() and returncode == -signal.SIGKILL:
            logger.error(f"Formatter killed after {self.timeout}s")
            raise FormatterTimeout(self.timeout)
        if returncode != 0:
            logger.error(f"Formatter failed with status {returncode}")
            raise FormatterFailed(returncode, "".join(stderr_lines))
        if feed_errors:
            raise feed_errors[0]

        logger.debug(f"Formatter produced {len(output)} characters")
        return trim_trailing_blank_lines(output)

    @staticmethod
    def _feed(stdin: IO[str], lines: Iterable[str], errors: list[Exception]) -> None:
        """Write all lines to the formatter, then close its input."""
        try:
            for line in lines:
                stdin.write(line + "\n")
        except BrokenPipeError:
            # Formatter exited before reading everything; its exit status tells why
            logger.warning("Formatter closed its input early")
        except Exception as e:
            errors.append(e)
        finally:
            try:
                stdin.close()
            except BrokenPipeError:
                pass

    @staticmethod
    def _tee(stream: IO[str], sink: TextIO, captured: list[str]) -> None:
        """Forward formatter diagnostics live while keeping a copy."""
        for line in stream:
            captured.append(line)
            sink.write(line)
            sink.flush()
        stream.close()
