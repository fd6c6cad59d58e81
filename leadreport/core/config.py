"""Runtime settings resolved from secrets files, Streamlit secrets, and the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from leadreport.core.models import DEFAULT_LEAD_SOURCES, DEFAULT_SERVICES, FilterCriteria
from leadreport.core.utils import get_config_value, get_int_config, load_env_file, split_list

DEFAULT_ENV_FILE = Path("secrets/zoho.env")
DEFAULT_API_BASE = "https://www.zohoapis.com/crm/v2"
_ENV_LOADED = False


def _ensure_report_env() -> None:
    """Load Zoho credentials and report defaults from a local env file once per process."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True

    env_path = Path(os.getenv("LEAD_REPORT_ENV_FILE", DEFAULT_ENV_FILE)).expanduser()
    load_env_file(env_path)


@dataclass(frozen=True)
class ReportSettings:
    year: int = 2025
    entity: str = "Leads"
    page_size: int = 200
    max_pages: int = 100
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    api_base: str = DEFAULT_API_BASE
    access_token: str = ""
    timeout: int = 30

    @classmethod
    def from_env(cls) -> "ReportSettings":
        _ensure_report_env()
        sources = split_list(get_config_value("LEAD_REPORT_SOURCES")) or list(DEFAULT_LEAD_SOURCES)
        services = split_list(get_config_value("LEAD_REPORT_SERVICES")) or list(DEFAULT_SERVICES)

        settings = cls(
            year=get_int_config("LEAD_REPORT_YEAR", 2025),
            entity=get_config_value("LEAD_REPORT_ENTITY", "Leads") or "Leads",
            page_size=get_int_config("LEAD_REPORT_PAGE_SIZE", 200),
            max_pages=get_int_config("LEAD_REPORT_MAX_PAGES", 100),
            criteria=FilterCriteria(sources=frozenset(sources), services=frozenset(services)),
            api_base=get_config_value("ZOHO_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            access_token=get_config_value("ZOHO_ACCESS_TOKEN"),
            timeout=get_int_config("ZOHO_TIMEOUT", 30),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.page_size <= 0:
            raise ValueError("LEAD_REPORT_PAGE_SIZE must be positive")
        if self.max_pages <= 0:
            raise ValueError("LEAD_REPORT_MAX_PAGES must be positive")
        if not 1 <= self.year <= 9999:
            raise ValueError(f"LEAD_REPORT_YEAR is out of range: {self.year}")


def load_settings() -> ReportSettings:
    """Return settings for the current process environment."""

    return ReportSettings.from_env()
