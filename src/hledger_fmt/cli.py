"""hledger-fmt CLI - format journal transactions in place."""

import logging
import sys

import click

from .config import load_config, resolve_journal_path
from .errors import HledgerFmtError
from .workflows import format_journal, get_formatter


@click.command()
@click.version_option(package_name="hledger-fmt")
@click.option("-f", "--file", "journal_path", default=None, help="hledger journal file (default: $LEDGER_FILE or ~/.hledger.journal)")
@click.option("--strict-dates", is_flag=True, help="Require transaction headers to start with YYYY-MM-DD")
@click.option("--check-assertions", is_flag=True, help="Let hledger fail on balance assertions")
@click.option("--timeout", type=int, default=None, help="Seconds to wait for hledger (0 = no limit)")
@click.option("--dry-run", is_flag=True, help="Print the formatted journal instead of writing it")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(
    journal_path: str | None,
    strict_dates: bool,
    check_assertions: bool,
    timeout: int | None,
    dry_run: bool,
    debug: bool,
):
    """Format the transactions below the '; :::Transactions:::' line of an hledger journal."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if strict_dates:
        config.strict_dates = True
    if check_assertions:
        config.ignore_assertions = False
    if timeout is not None:
        config.timeout = timeout

    path = resolve_journal_path(config, journal_path)
    try:
        content = format_journal(path, get_formatter(config), config.strict_dates, dry_run)
    except HledgerFmtError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    if dry_run:
        # Bytes, so undecodable journal content reaches stdout unchanged
        click.echo(content.encode("utf-8", "surrogateescape"), nl=False)


if __name__ == "__main__":
    main()
