"""Shared utility functions for the lead report package."""
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


def first_present(record: Mapping[str, Any], aliases: Sequence[str], default: Any = None) -> Any:
    """Return the value of the first alias holding a usable value.

    CRM exports spell the same field several ways (``Lead_Source``,
    ``Lead Source``, ``lead_source``). Missing keys, ``None``, and empty
    strings are skipped so the next spelling gets a chance.
    """

    for key in aliases:
        value = record.get(key)
        if value is None or value == "":
            continue
        return value
    return default


def get_config_value(key: str, default: str = "") -> str:
    """Get configuration value from Streamlit secrets or environment variables.

    Checks Streamlit secrets first (for cloud deployment), then falls back
    to environment variables (for local development and the CLI).
    """
    try:
        import streamlit as st
        if st.runtime.exists() and key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass

    return os.getenv(key, default)


def get_int_config(key: str, default: int) -> int:
    """Read an integer setting, naming the variable when it is malformed."""

    raw = get_config_value(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc


def split_list(raw: Optional[str]) -> list[str]:
    """Split a comma separated setting into trimmed, non-empty values."""

    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_env_file(path: Path) -> None:
    """Load environment variables from a file if it exists."""
    if not path.exists():
        return

    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                if not key or key in os.environ:
                    continue
                os.environ[key] = value.strip().strip('"').strip("'")
    except OSError as exc:
        logger.debug("Could not load env file %s: %s", path, exc)
