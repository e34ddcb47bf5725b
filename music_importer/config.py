"""Configuration management for Music Catalog Importer."""

import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

SETTINGS_SECTION = "AppSettings"
CONN_STRING_KEY = "ConnString"
CONN_STRING_ENV = "CONN_STRING"


def eprint(*args, **kwargs):
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def _load_settings_file(settings_file: str) -> dict:
    """Read the optional JSON settings file, returning {} when absent."""
    settings_path = Path(settings_file)
    if not settings_path.exists():
        eprint(f"Warning: settings file not found at {settings_path.resolve()}")
        return {}

    try:
        with settings_path.open(encoding="utf-8") as f:
            settings = json.load(f)
    except json.JSONDecodeError as e:
        eprint(f"Warning: cannot parse {settings_path.resolve()} ({e}) - ignoring it.")
        return {}

    if not isinstance(settings, dict):
        eprint(f"Warning: {settings_path.resolve()} is not a JSON object - ignoring it.")
        return {}

    eprint(f"Loaded settings from {settings_path.resolve()}")
    return settings


def load_config(env_file: Optional[str] = None,
                settings_file: Optional[str] = None) -> dict:
    """
    Load configuration from .env file and appsettings.json.

    The environment (after .env loading) wins over the JSON settings file.

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.
        settings_file: Path to JSON settings file. Defaults to appsettings.json.

    Returns:
        Dictionary of configuration values.
    """
    if env_file is None:
        env_file = ".env"
    if settings_file is None:
        settings_file = "appsettings.json"

    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
        eprint(f"Loaded environment from {env_path.resolve()}")
    else:
        eprint(
            f"Warning: .env file not found at {env_path.resolve()} "
            "- falling back to process env."
        )

    settings = _load_settings_file(settings_file)
    app_settings = settings.get(SETTINGS_SECTION) or {}

    return {
        "conn_string": os.getenv(CONN_STRING_ENV) or app_settings.get(CONN_STRING_KEY),
    }


def validate_config(config: dict) -> List[str]:
    """
    Validate configuration and return list of missing settings.

    Args:
        config: Configuration dictionary from load_config()

    Returns:
        List of missing setting names (empty if all present).
    """
    missing = []
    if not config.get("conn_string"):
        missing.append(f"{SETTINGS_SECTION}:{CONN_STRING_KEY}")
    return missing


def get_conn_string_instructions() -> str:
    """Return instructions for configuring the catalog connection string."""
    return f"""
To configure the catalog database, do one of:
1. Add to your .env file:
   {CONN_STRING_ENV}=/path/to/catalog.db
2. Create appsettings.json next to where you run the importer:
   {{"{SETTINGS_SECTION}": {{"{CONN_STRING_KEY}": "/path/to/catalog.db"}}}}
3. Pass --conn-string /path/to/catalog.db
"""


def setup_logging(verbose: bool = False,
                  log_file: Optional[str] = None) -> logging.Logger:
    """Configure the importer logger with console and optional file handlers."""
    logger = logging.getLogger("music_importer")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    return logger
