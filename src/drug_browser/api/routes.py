"""HTTP routes: drug list, drug detail, liveness."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, Response

from drug_browser import __version__
from drug_browser.api.deps import get_fda_client
from drug_browser.api.errors import InvalidInputError, NotFoundError, UpstreamFetchError
from drug_browser.constants import DETAIL_CACHE_CONTROL, LIST_CACHE_CONTROL
from drug_browser.data_sources.base_client import DataSourceError
from drug_browser.data_sources.fda import DrugsFDAClient
from drug_browser.models.model_drug import DrugDetail, DrugListPage, SearchQuery
from drug_browser.services import drug_normalizer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ping")
async def ping() -> dict[str, str]:
    """Liveness probe."""
    return {"message": "pong", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@router.get("/drugs", response_model=DrugListPage)
async def list_drugs(
    response: Response,
    search: str | None = None,
    page: str | None = None,
    page_size: str | None = Query(default=None, alias="pageSize"),
    client: DrugsFDAClient = Depends(get_fda_client),
) -> DrugListPage:
    """One page of applications, optionally filtered by free text.

    page and pageSize are taken as raw strings and clamped rather than
    rejected, so malformed values fall back to defaults.
    """
    query = SearchQuery.from_params(search=search, page=page, page_size=page_size)

    try:
        result = await client.search_drugs(query)
    except DataSourceError as e:
        logger.error("Error fetching FDA drugs: %s", e, exc_info=True)
        raise UpstreamFetchError("Failed to fetch FDA data") from e

    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return drug_normalizer.to_list_page(result, query)


@router.get("/drugs/{application_number}", response_model=DrugDetail)
async def get_drug(
    application_number: str,
    response: Response,
    client: DrugsFDAClient = Depends(get_fda_client),
) -> DrugDetail:
    """Detail view of one application, looked up through the same search."""
    application_number = application_number.strip()
    if not application_number:
        raise InvalidInputError("applicationNumber is required")

    query = SearchQuery(search=application_number, page=1, page_size=1)
    try:
        result = await client.search_drugs(query)
    except DataSourceError as e:
        logger.error("Error fetching FDA drug detail: %s", e, exc_info=True)
        raise UpstreamFetchError("Failed to fetch FDA detail") from e

    detail = drug_normalizer.normalize_detail(result, application_number)
    if detail is None:
        raise NotFoundError("Drug not found")

    response.headers["Cache-Control"] = DETAIL_CACHE_CONTROL
    return detail
