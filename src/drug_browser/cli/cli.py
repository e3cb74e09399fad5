"""Command-line interface for drug-browser."""

import asyncio
import json

import click

from drug_browser.config import get_settings
from drug_browser.data_sources.base_client import DataSourceError
from drug_browser.data_sources.fda import DrugsFDAClient
from drug_browser.logging_config import configure_logging
from drug_browser.models.model_drug import (
    DrugDetail,
    DrugListItem,
    DrugListPage,
    SearchQuery,
)
from drug_browser.services import drug_normalizer
from drug_browser.services.table_view import SORTABLE_COLUMNS, SortDirection, TableState

EMPTY_CELL = "—"

LIST_COLUMNS: list[tuple[str, str]] = [
    ("product_name", "Product"),
    ("substance_name", "Substance"),
    ("sponsor_name", "Sponsor"),
    ("application_number", "Application"),
    ("route", "Route"),
]


async def _fetch_list(query: SearchQuery) -> DrugListPage:
    async with DrugsFDAClient() as client:
        result = await client.search_drugs(query)
    return drug_normalizer.to_list_page(result, query)


async def _fetch_detail(application_number: str) -> DrugDetail | None:
    query = SearchQuery(search=application_number, page=1, page_size=1)
    async with DrugsFDAClient() as client:
        result = await client.search_drugs(query)
    return drug_normalizer.normalize_detail(result, application_number)


def _cell(value: str | None) -> str:
    return value if value else EMPTY_CELL


def render_table(items: list[DrugListItem]) -> list[str]:
    """Plain-text table of list items, one string per line."""
    rows = [[_cell(getattr(item, attr)) for attr, _ in LIST_COLUMNS] for item in items]
    headers = [title for _, title in LIST_COLUMNS]
    widths = [
        max([len(headers[i])] + [len(row[i]) for row in rows])
        for i in range(len(headers))
    ]

    def fmt(cells: list[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    lines = [fmt(headers), fmt(["-" * w for w in widths])]
    lines.extend(fmt(row) for row in rows)
    return lines


def render_detail(detail: DrugDetail) -> list[str]:
    lines = [
        f"Application: {_cell(detail.application_number)}",
        f"Sponsor:     {_cell(detail.sponsor_name)}",
        "",
        "Products:",
    ]
    for p in detail.products:
        lines.append(
            f"  {_cell(p.brand_name)} ({_cell(p.generic_name)}) "
            f"{_cell(p.strength)} {_cell(p.dosage_form)} {_cell(p.route)} "
            f"[{_cell(p.marketing_status)}, #{_cell(p.product_number)}, TE {_cell(p.te_code)}]"
        )
        if p.substances:
            lines.append(f"    substances: {', '.join(p.substances)}")
    lines.append("")
    lines.append("Documents:")
    for d in detail.documents:
        lines.append(f"  {_cell(d.effective_date)}  {_cell(d.type)}  {_cell(d.url)}")
    return lines


@click.group()
@click.version_option(package_name="drug-browser")
def main():
    """Drug Browser: search and inspect drugs@FDA applications."""
    configure_logging(get_settings().log_level)


@main.command()
@click.option("--host", default=None, help="Bind address (default from settings)")
@click.option("--port", type=int, default=None, help="Port (default from settings)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool):
    """Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "drug_browser.api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@main.command()
@click.option("-s", "--search", default=None, help="Free-text search")
@click.option("-p", "--page", default=1, show_default=True, help="Page number")
@click.option(
    "-n", "--page-size", default=10, show_default=True, help="Results per page"
)
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice(SORTABLE_COLUMNS),
    default="product_name",
    show_default=True,
    help="Column to sort the page on",
)
@click.option("--desc", is_flag=True, help="Sort descending")
def search(search: str | None, page: int, page_size: int, sort_key: str, desc: bool):
    """List drug applications, one page at a time."""
    query = SearchQuery.from_params(search=search, page=page, page_size=page_size)
    try:
        listing = asyncio.run(_fetch_list(query))
    except DataSourceError as e:
        raise click.ClickException(f"Failed to fetch FDA data: {e}")

    state = TableState(
        sort_key=sort_key,
        sort_direction=SortDirection.DESC if desc else SortDirection.ASC,
    ).with_page(listing)

    if not listing.items:
        click.echo("No results.")
        return

    for line in render_table(state.sort_items(listing.items)):
        click.echo(line)
    click.echo(
        f"\nPage {state.page}/{state.total_pages} ({state.total} results)"
    )


@main.command()
@click.argument("application_number")
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON view")
def detail(application_number: str, as_json: bool):
    """Show one drug application."""
    application_number = application_number.strip()
    if not application_number:
        raise click.UsageError("APPLICATION_NUMBER is required")

    try:
        view = asyncio.run(_fetch_detail(application_number))
    except DataSourceError as e:
        raise click.ClickException(f"Failed to fetch FDA detail: {e}")

    if view is None:
        raise click.ClickException(f"Drug not found: {application_number}")

    if as_json:
        click.echo(json.dumps(view.model_dump(by_alias=True), indent=2))
        return
    for line in render_detail(view):
        click.echo(line)


if __name__ == "__main__":
    main()
