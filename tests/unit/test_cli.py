"""Tests for the drug-browser command-line interface."""

from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from drug_browser.cli.cli import main, render_table
from drug_browser.data_sources.base_client import DataSourceError
from drug_browser.models.model_drug import (
    DrugDetail,
    DrugDocument,
    DrugListItem,
    DrugListPage,
    DrugProduct,
)

LISTING = DrugListPage(
    page=1,
    page_size=10,
    total=25,
    items=[
        DrugListItem(id="APP-001", product_name="B-DRUG", sponsor_name="B-LAB"),
        DrugListItem(id="APP-002", product_name="A-DRUG", sponsor_name="A-LAB"),
    ],
)


def test_render_table_uses_dash_for_nulls():
    lines = render_table([DrugListItem(id="APP-NULLS")])

    assert lines[0].split() == ["Product", "Substance", "Sponsor", "Application", "Route"]
    assert lines[2].split() == ["—"] * 5


def test_search_sorts_by_product_name():
    runner = CliRunner()
    with patch(
        "drug_browser.cli.cli._fetch_list", new_callable=AsyncMock, return_value=LISTING
    ) as fetch:
        result = runner.invoke(main, ["search", "-s", "DRUG", "-n", "500"])

    assert result.exit_code == 0, result.output
    assert result.output.index("A-DRUG") < result.output.index("B-DRUG")
    assert "Page 1/3 (25 results)" in result.output
    query = fetch.await_args.args[0]
    assert query.search == "DRUG"
    assert query.page_size == 100


def test_search_descending():
    runner = CliRunner()
    with patch(
        "drug_browser.cli.cli._fetch_list", new_callable=AsyncMock, return_value=LISTING
    ):
        result = runner.invoke(main, ["search", "--sort", "sponsor_name", "--desc"])

    assert result.exit_code == 0, result.output
    assert result.output.index("B-LAB") < result.output.index("A-LAB")


def test_search_no_results():
    runner = CliRunner()
    empty = DrugListPage(page=1, page_size=10, total=0, items=[])
    with patch(
        "drug_browser.cli.cli._fetch_list", new_callable=AsyncMock, return_value=empty
    ):
        result = runner.invoke(main, ["search", "-s", "INEXISTANT"])

    assert result.exit_code == 0
    assert "No results." in result.output


def test_search_upstream_error():
    runner = CliRunner()
    with patch(
        "drug_browser.cli.cli._fetch_list",
        new_callable=AsyncMock,
        side_effect=DataSourceError("openfda", "HTTP 500: boom", status_code=500),
    ):
        result = runner.invoke(main, ["search"])

    assert result.exit_code == 1
    assert "Failed to fetch FDA data" in result.output


def test_detail_prints_products_and_documents():
    detail = DrugDetail(
        application_number="APP-001",
        sponsor_name="TEST LAB",
        products=[
            DrugProduct(
                brand_name="TEST DRUG",
                generic_name="GENERIC",
                strength="10MG",
                substances=["SUB-A", "SUB-B"],
            )
        ],
        documents=[DrugDocument(type="APPROVAL LETTER", effective_date="2010-01-01")],
    )
    runner = CliRunner()
    with patch(
        "drug_browser.cli.cli._fetch_detail", new_callable=AsyncMock, return_value=detail
    ):
        result = runner.invoke(main, ["detail", "APP-001"])

    assert result.exit_code == 0, result.output
    assert "TEST LAB" in result.output
    assert "10MG" in result.output
    assert "SUB-A, SUB-B" in result.output
    assert "2010-01-01  APPROVAL LETTER" in result.output


def test_detail_json_uses_camel_case():
    detail = DrugDetail(application_number="APP-001")
    runner = CliRunner()
    with patch(
        "drug_browser.cli.cli._fetch_detail", new_callable=AsyncMock, return_value=detail
    ):
        result = runner.invoke(main, ["detail", "APP-001", "--json"])

    assert result.exit_code == 0, result.output
    assert '"applicationNumber": "APP-001"' in result.output


def test_detail_not_found():
    runner = CliRunner()
    with patch(
        "drug_browser.cli.cli._fetch_detail", new_callable=AsyncMock, return_value=None
    ):
        result = runner.invoke(main, ["detail", "NOPE"])

    assert result.exit_code == 1
    assert "Drug not found: NOPE" in result.output
