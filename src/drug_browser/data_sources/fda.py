"""
openFDA drugs@FDA client.

One method:
  search_drugs — Paged application search, optionally filtered by free text
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from drug_browser.config import get_settings
from drug_browser.constants import DRUGSFDA_SEARCH_FIELDS
from drug_browser.data_sources.base_client import (
    BaseClient,
    DataSourceError,
    RequestContext,
)
from drug_browser.models.model_drug import SearchQuery
from drug_browser.models.model_fda import DrugApplication, DrugsFDASearch, SearchOutcome

logger = logging.getLogger("drug_browser.data_sources.fda")


def build_search_expression(search: str | None) -> str | None:
    """OR-combine exact-phrase matches of *search* over the searchable fields.

    Returns None for a missing or blank search, meaning an unfiltered listing.
    """
    if search is None or not search.strip():
        return None
    text = search.strip()
    clauses = [f'{field}:"{text}"' for field in DRUGSFDA_SEARCH_FIELDS]
    return f"({' OR '.join(clauses)})"


class DrugsFDAClient(BaseClient):
    """Client for querying the openFDA drugs@FDA API."""

    def __init__(self, api_key: str | None = None, base_url: str | None = None) -> None:
        super().__init__()
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.openfda_api_key
        self._base_url = base_url or settings.openfda_drugsfda_url

    @property
    def _source_name(self) -> str:
        return "openfda"

    # -- Public methods -------------------------------------------------------

    async def search_drugs(self, query: SearchQuery) -> DrugsFDASearch:
        """Return one page of applications matching the query.

        An upstream 404 is the API's way of saying "no hits" and comes back as
        a NO_MATCH result. Every other failure raises DataSourceError.
        """
        params = self._build_params(query)
        context = RequestContext(
            source=self._source_name, method="search_drugs", params=params
        )

        data = await self._rest_get(
            self._base_url, params, not_found_ok=True, context=context
        )
        if data is None:
            return DrugsFDASearch.no_match()

        return self._parse_search(data)

    # -- Private helpers ------------------------------------------------------

    def _build_params(self, query: SearchQuery) -> dict[str, str]:
        """Build query parameters for the drugs@FDA endpoint."""
        params: dict[str, str] = {
            "skip": str(query.skip),
            "limit": str(query.limit),
        }
        expression = build_search_expression(query.search)
        if expression is not None:
            params["search"] = expression
        if self._api_key:
            params["api_key"] = self._api_key
        return params

    def _parse_search(self, raw: Any) -> DrugsFDASearch:
        """Validate a successful payload into a MATCHED search result."""
        if not isinstance(raw, dict):
            raise DataSourceError(self._source_name, "Unexpected response shape")

        try:
            results = [
                DrugApplication.model_validate(r) for r in raw.get("results") or []
            ]
        except ValidationError as e:
            raise DataSourceError(
                self._source_name, f"Malformed application record: {e}"
            ) from e

        meta_results = (raw.get("meta") or {}).get("results") or {}
        total = meta_results.get("total")
        if not isinstance(total, int):
            total = len(results)

        return DrugsFDASearch(
            outcome=SearchOutcome.MATCHED, results=results, total=total
        )
