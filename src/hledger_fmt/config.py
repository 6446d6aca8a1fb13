"""Configuration management for hledger-fmt."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

HLEDGER_FMT_HOME = Path(os.environ.get("HLEDGER_FMT_HOME", Path.home() / ".config" / "hledger-fmt"))
CONFIG_FILE = HLEDGER_FMT_HOME / "hledger-fmt.conf"
DEFAULT_JOURNAL = Path.home() / ".hledger.journal"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """hledger-fmt configuration."""

    hledger_binary: str = "hledger"
    timeout: int = 60
    strict_dates: bool = False
    ignore_assertions: bool = True
    ledger_file: str = ""


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def load_config() -> Config:
    """Load configuration from hledger-fmt.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            end_quote = value.find(value[0], 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "hledger_binary":
                config.hledger_binary = value or config.hledger_binary
            case "timeout":
                try:
                    config.timeout = int(value)
                except ValueError:
                    logger.warning(f"Invalid TIMEOUT {value!r}, using {config.timeout}")
            case "strict_dates":
                config.strict_dates = _parse_bool(key, value, config.strict_dates)
            case "ignore_assertions":
                config.ignore_assertions = _parse_bool(key, value, config.ignore_assertions)
            case "ledger_file":
                config.ledger_file = value

    return config


def resolve_journal_path(config: Config, option: str | None = None) -> Path:
    """Pick the journal: explicit option, then $LEDGER_FILE, then config, then ~/.hledger.journal."""
    if option:
        return Path(option).expanduser()
    env_file = os.environ.get("LEDGER_FILE")
    if env_file:
        return Path(env_file).expanduser()
    if config.ledger_file:
        return Path(config.ledger_file).expanduser()
    return DEFAULT_JOURNAL
