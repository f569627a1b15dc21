"""Command-line interface for the artwork selector."""

import asyncio
import json
from typing import Optional

import typer
from typing_extensions import Annotated

from .api import ArtworkAPIClient
from .core import AccumulationResult, FetchFailure
from .services import PageView, SelectionSession
from .utils import setup_logging

app = typer.Typer(help="Artwork Selector - browse artworks and select rows across pages")

LogLevelOption = Annotated[
    Optional[str],
    typer.Option("--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
]
PageOption = Annotated[int, typer.Option("--page", "-p", min=1, help="Page to display first")]


def _truncate(value: Optional[object], width: int) -> str:
    text = "" if value is None else " ".join(str(value).split())
    return text if len(text) <= width else text[: width - 1] + "…"


def render_page(view: PageView) -> str:
    """Render a page view as a plain-text table."""
    header_box = "[x]" if view.page_fully_selected else "[ ]"
    lines = [
        f"{header_box} {'ID':>7}  {'Title':<40}  {'Artist':<30}  {'Origin':<15}  {'Start':>6}  {'End':>6}"
    ]
    for record in view.records:
        box = "[x]" if view.is_selected(record) else "[ ]"
        lines.append(
            f"{box} {record.id:>7}  {_truncate(record.title, 40):<40}  "
            f"{_truncate(record.artist_display, 30):<30}  "
            f"{_truncate(record.place_of_origin, 15):<15}  "
            f"{_truncate(record.date_start, 6):>6}  {_truncate(record.date_end, 6):>6}"
        )
    lines.append(
        f"Page {view.page_index or 0} of {view.total_pages} "
        f"({view.total_count} records) - {view.selected_count} selected"
    )
    return "\n".join(lines)


async def run_browse(page: int) -> PageView:
    async with ArtworkAPIClient() as client:
        session = SelectionSession(client)
        await session.load_page(page)
        return session.view()


async def run_select(count: int, page: int, quiet: bool = False) -> AccumulationResult:
    async with ArtworkAPIClient() as client:
        session = SelectionSession(client)
        await session.load_page(page)

        if not quiet:
            session.subscribe(
                lambda view: typer.echo(f"... {view.selected_count}/{count} selected")
            )
        try:
            return await session.select_rows(count)
        except FetchFailure:
            typer.echo(
                f"Selection stopped early: {len(session.selection)} records kept", err=True
            )
            raise


@app.command()
def browse(page: PageOption = 1, log_level: LogLevelOption = None) -> None:
    """Fetch and print one page of artworks."""
    setup_logging(log_level)
    try:
        view = asyncio.run(run_browse(page))
    except FetchFailure as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(render_page(view))


@app.command()
def select(
    count: Annotated[int, typer.Argument(help="Total number of rows to select")],
    page: PageOption = 1,
    json_output: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    log_level: LogLevelOption = None,
) -> None:
    """Select COUNT rows starting from a page, fetching later pages as needed."""
    setup_logging(log_level)
    try:
        result = asyncio.run(run_select(count, page, quiet=json_output))
    except FetchFailure as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(json.dumps({
            "target": result.target,
            "selected_count": result.selected_count,
            "added": result.added,
            "pages_fetched": result.pages_fetched,
            "exhausted": result.exhausted,
            "selected_ids": result.selected_ids,
        }))
        return

    typer.echo(
        f"Selected {result.selected_count} of {result.target} requested rows "
        f"({result.added} added, {len(result.pages_fetched)} extra pages fetched)"
    )
    if result.exhausted:
        typer.echo("Collection exhausted before the target was reached")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
