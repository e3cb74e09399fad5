"""
Base client for external data source clients.

Provides: lazy aiohttp session management, a single-shot REST GET with
structured logging, and the DataSourceError raised for upstream failures.
Each call is exactly one round trip: no retry, rate limiting or caching.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

logger = logging.getLogger("drug_browser.data_sources")


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "openfda"
    method: str  # e.g. "search_drugs"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for upstream API clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get()`.
    """

    def __init__(self) -> None:
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'openfda'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request ----------------------------------------------------------

    async def _rest_get(
        self,
        url: str,
        params: dict[str, Any],
        *,
        not_found_ok: bool = False,
        context: RequestContext | None = None,
    ) -> Any | None:
        """
        Issue one GET request and return the decoded JSON body.

        Parameters
        ----------
        url : str
            Full URL.
        params : dict
            Query string parameters.
        not_found_ok : bool
            When True a 404 answer returns None instead of raising.
        context : RequestContext, optional
            Logging context.

        Raises
        ------
        DataSourceError
            On any other status >= 400 (with ``status_code`` set), on
            connection errors and timeouts, and on an undecodable body.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        start = time.monotonic()

        try:
            session = await self._get_session()

            logger.info(
                "Request [%s.%s] url=%s params=%s",
                ctx.source,
                ctx.method,
                url,
                params,
            )

            resp = await session.get(url, params=params)

            if resp.status == 404 and not_found_ok:
                await resp.text()  # drain so the connection is released
                logger.info(
                    "No match [%s.%s] elapsed=%.2fs",
                    ctx.source,
                    ctx.method,
                    time.monotonic() - start,
                )
                return None

            if resp.status >= 400:
                body = await resp.text()
                logger.warning(
                    "HTTP %d from %s.%s: %s",
                    resp.status,
                    ctx.source,
                    ctx.method,
                    body[:200],
                )
                raise DataSourceError(
                    ctx.source,
                    f"HTTP {resp.status}: {body[:500]}",
                    status_code=resp.status,
                )

            data = await resp.json()

        except asyncio.TimeoutError as e:
            elapsed = time.monotonic() - start
            logger.warning(
                "Timeout [%s.%s] elapsed=%.1fs", ctx.source, ctx.method, elapsed
            )
            raise DataSourceError(ctx.source, f"Timeout after {elapsed:.1f}s") from e

        except aiohttp.ClientError as e:
            logger.warning("Connection error [%s.%s]: %s", ctx.source, ctx.method, e)
            raise DataSourceError(ctx.source, f"Connection error: {e}") from e

        except ValueError as e:
            raise DataSourceError(ctx.source, f"Invalid JSON body: {e}") from e

        logger.info(
            "Success [%s.%s] elapsed=%.2fs",
            ctx.source,
            ctx.method,
            time.monotonic() - start,
        )
        return data
