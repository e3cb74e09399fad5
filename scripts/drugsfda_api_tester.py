"""Standalone script to hit the openFDA drugs@FDA API and inspect raw responses."""

import asyncio
import json
import logging

import aiohttp

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

BASE_URL = "https://api.fda.gov/drug/drugsfda.json"
SEARCH_TERM = "METFORMIN HYDROCHLORIDE"


async def search_applications(
    session: aiohttp.ClientSession, term: str, limit: int = 2
) -> dict:
    """Search mode: applications whose ingredient matches the term."""
    params = {
        "search": f'products.active_ingredients.name:"{term}"',
        "limit": limit,
    }
    async with session.get(BASE_URL, params=params) as resp:
        logger.info("search_applications status: %s", resp.status)
        return await resp.json()


async def no_match(session: aiohttp.ClientSession) -> dict:
    """The 404 body openFDA sends when nothing matches."""
    params = {"search": 'sponsor_name:"ZZZ-NO-SUCH-SPONSOR"', "limit": 1}
    async with session.get(BASE_URL, params=params) as resp:
        logger.info("no_match status: %s", resp.status)
        return await resp.json()


async def main() -> None:
    async with aiohttp.ClientSession() as session:
        logger.info("--- search_applications for '%s' ---", SEARCH_TERM)
        found = await search_applications(session, SEARCH_TERM)
        print(json.dumps(found, indent=2))

        logger.info("--- no_match ---")
        missing = await no_match(session)
        print(json.dumps(missing, indent=2))


if __name__ == "__main__":
    asyncio.run(main())
