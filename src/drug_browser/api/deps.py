"""FastAPI dependencies."""

from fastapi import Request

from drug_browser.data_sources.fda import DrugsFDAClient


def get_fda_client(request: Request) -> DrugsFDAClient:
    """The drugs@FDA client created by the app lifespan."""
    return request.app.state.fda_client
