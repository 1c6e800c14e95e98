"""Configuration management for Diaryx."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DIARYX_HOME = Path(os.environ.get("DIARYX_HOME", Path.home() / "Documents" / "Diaryx"))
CONFIG_FILE = DIARYX_HOME / "diaryx.conf"
DEFAULT_ENTRIES_DIR = DIARYX_HOME / "entries"


@dataclass
class Config:
    """Diaryx configuration."""

    entries_dir: str = ""
    preview_length: int = 150
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                return value[1:end_quote]
            return value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from diaryx.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "entries_dir":
                config.entries_dir = value
            case "preview_length":
                try:
                    length = int(value)
                except ValueError:
                    logger.warning(f"Invalid PREVIEW_LENGTH {value!r}, using {config.preview_length}")
                    continue
                if length <= 0:
                    logger.warning(f"PREVIEW_LENGTH must be positive, got {length}")
                    continue
                config.preview_length = length
            case "log_level":
                config.log_level = value.upper()
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
