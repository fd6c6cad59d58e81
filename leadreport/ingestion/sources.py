"""Paginated record sources the fetch loop can drive."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

import requests

from leadreport.core.config import ReportSettings
from leadreport.core.errors import SourceRequestError
from leadreport.core.models import Record

logger = logging.getLogger(__name__)


class RecordSource(Protocol):
    """Anything that can return one page of CRM records.

    ``get_page`` returns ``None`` or an empty list once the entity is
    exhausted and raises when the page cannot be retrieved.
    """

    async def get_page(self, entity: str, per_page: int, page: int) -> Optional[List[Record]]:
        ...


class ZohoCRMSource:
    """Zoho CRM REST API source (``GET /crm/v2/{module}``)."""

    def __init__(
        self,
        access_token: str,
        api_base: str = "https://www.zohoapis.com/crm/v2",
        timeout: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        if not access_token:
            raise ValueError("ZOHO_ACCESS_TOKEN is required to fetch leads from Zoho CRM")
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Zoho-oauthtoken {access_token}"})

    @classmethod
    def from_settings(cls, settings: ReportSettings, session: requests.Session | None = None) -> "ZohoCRMSource":
        return cls(
            access_token=settings.access_token,
            api_base=settings.api_base,
            timeout=settings.timeout,
            session=session,
        )

    async def get_page(self, entity: str, per_page: int, page: int) -> Optional[List[Record]]:
        return await asyncio.to_thread(self._request_page, entity, per_page, page)

    def _request_page(self, entity: str, per_page: int, page: int) -> Optional[List[Record]]:
        url = f"{self.api_base}/{entity}"
        try:
            response = self.session.get(
                url,
                params={"page": page, "per_page": per_page},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise SourceRequestError(f"Request for {entity} page {page} failed: {exc}", page=page) from exc

        # Zoho answers 204 with an empty body once the module is exhausted.
        if response.status_code == 204:
            return None
        if response.status_code >= 400:
            raise SourceRequestError(
                f"Zoho CRM returned HTTP {response.status_code} for {entity} page {page}",
                page=page,
            )

        try:
            payload: Dict[str, Any] = response.json()
        except ValueError as exc:
            raise SourceRequestError(f"Invalid JSON for {entity} page {page}", page=page) from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        if not data:
            return None
        return list(data)


class JsonExportSource:
    """Serve pages from a JSON export of CRM records.

    The file holds either a list of records or an object with a ``data`` list,
    which is the shape the Zoho API and its bulk export both produce.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._records: List[Record] | None = None

    def _load(self) -> List[Record]:
        if self._records is None:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            if isinstance(payload, dict):
                payload = payload.get("data") or []
            if not isinstance(payload, list):
                raise ValueError(f"{self.path} does not contain a list of records")
            self._records = [record for record in payload if isinstance(record, dict)]
            logger.info("Loaded %d records from %s", len(self._records), self.path)
        return self._records

    async def get_page(self, entity: str, per_page: int, page: int) -> Optional[List[Record]]:
        try:
            records = await asyncio.to_thread(self._load)
        except (OSError, ValueError) as exc:
            raise SourceRequestError(f"Could not read {self.path}: {exc}", page=page) from exc
        start = (page - 1) * per_page
        return records[start:start + per_page] or None
