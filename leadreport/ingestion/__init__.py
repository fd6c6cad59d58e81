"""Data ingestion package for pulling paginated CRM records."""
from leadreport.ingestion.fetcher import fetch_records
from leadreport.ingestion.sources import JsonExportSource, RecordSource, ZohoCRMSource

__all__ = [
    "JsonExportSource",
    "RecordSource",
    "ZohoCRMSource",
    "fetch_records",
]
