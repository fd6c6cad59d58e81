"""Sequential page loop that pulls every record of a CRM module."""
from __future__ import annotations

import logging

from leadreport.core.models import FetchResult
from leadreport.ingestion.sources import RecordSource

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 200
MAX_PAGES = 100


async def fetch_records(
    source: RecordSource,
    entity: str = "Leads",
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int = MAX_PAGES,
) -> FetchResult:
    """Request pages from 1 upward until the source runs dry.

    The loop ends on an empty page, on a page shorter than ``page_size``, or
    after ``max_pages`` requests. A failing page ends the loop too: the
    records gathered so far are returned with ``complete=False`` and are not
    retried.
    """

    if page_size <= 0:
        raise ValueError("page_size must be positive")
    if max_pages <= 0:
        raise ValueError("max_pages must be positive")

    result = FetchResult()
    page = 1
    has_more = True

    while has_more:
        try:
            batch = await source.get_page(entity, page_size, page)
        except Exception as exc:
            logger.exception("Error fetching %s page %d", entity, page)
            result.complete = False
            result.error = str(exc) or exc.__class__.__name__
            break

        if not batch:
            break

        result.records.extend(batch)
        result.pages_fetched = page
        logger.debug("Fetched %d %s records from page %d", len(batch), entity, page)

        has_more = len(batch) >= page_size
        page += 1
        if page > max_pages:
            if has_more:
                logger.warning("Stopped fetching %s after the %d page ceiling", entity, max_pages)
            break

    logger.info(
        "Fetched %d %s records across %d page(s)", result.total_fetched, entity, result.pages_fetched
    )
    return result
