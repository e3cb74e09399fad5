"""Shared fixtures for integration tests."""

import pytest

from drug_browser.data_sources.fda import DrugsFDAClient


@pytest.fixture
async def drugs_fda_client():
    """Create and tear down a DrugsFDAClient."""
    c = DrugsFDAClient()
    yield c
    await c.close()
