"""Allow-list filter applied to every fetched lead."""
from __future__ import annotations

from typing import Iterable, List

from leadreport.core.models import FilterCriteria, Record
from leadreport.core.utils import first_present

LEAD_SOURCE_ALIASES = ("Lead_Source", "Lead Source", "lead_source")
SERVICE_ALIASES = ("Zoho_Service", "Zoho Service", "zoho_service")


def lead_source(record: Record) -> str:
    return first_present(record, LEAD_SOURCE_ALIASES, default="")


def service(record: Record) -> str:
    return first_present(record, SERVICE_ALIASES, default="")


def matches(record: Record, criteria: FilterCriteria) -> bool:
    """Return True when both the lead source and the service are allowed."""

    return lead_source(record) in criteria.sources and service(record) in criteria.services


def filter_records(records: Iterable[Record], criteria: FilterCriteria) -> List[Record]:
    """Keep the records that pass ``matches``, preserving their order."""

    return [record for record in records if matches(record, criteria)]
