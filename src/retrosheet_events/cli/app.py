from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from retrosheet_events.cache.archive_cache import ArchiveCache
from retrosheet_events.cli._logging import configure_logging
from retrosheet_events.cli._output import (
    console,
    print_archive_list,
    print_cache_status,
    print_error,
    print_load_summary,
    print_written,
)
from retrosheet_events.cli.factory import build_fetch_context
from retrosheet_events.config import LoaderSettings, create_config, load_loader_settings
from retrosheet_events.domain.errors import UnknownEventTypeError
from retrosheet_events.domain.event_type import EventType
from retrosheet_events.ingest.catalog import list_events
from retrosheet_events.projections import project_lineups, project_metadata, project_plays

app = typer.Typer(name="retrosheet-events", help="Download and parse Retrosheet play-by-play event files")
cache_app = typer.Typer(name="cache", help="Inspect and clear the local archive cache")
app.add_typer(cache_app, name="cache")


def parse_years(value: str) -> list[int]:
    """Parse ``"2024"``, ``"2022,2024"`` or ``"2020-2024"`` (mixable) into years."""
    years: list[int] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            if "-" in part:
                start, end = (int(p) for p in part.split("-", 1))
            else:
                start = end = int(part)
        except ValueError:
            raise typer.BadParameter(f"Not a year or year range: {part!r}") from None
        if start > end:
            raise typer.BadParameter(f"Year range {part} runs backwards")
        years.extend(range(start, end + 1))
    return years


def _parse_types(values: list[str] | None) -> list[EventType]:
    if not values:
        return [EventType.REGULAR]
    try:
        return [EventType.parse(v) for v in values]
    except UnknownEventTypeError as e:
        raise typer.BadParameter(str(e)) from e


def _settings(ctx: typer.Context) -> LoaderSettings:
    settings = ctx.obj if isinstance(ctx.obj, LoaderSettings) else None
    if settings is None:
        settings = load_loader_settings()
    return settings


_YearsOpt = Annotated[str, typer.Option("--years", "-y", help="Years, e.g. 2024, 2022,2024 or 2020-2024")]
_TypeOpt = Annotated[
    list[str] | None, typer.Option("--type", "-t", help="Event type: regular, allstar or post (repeatable)")
]


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    config_path: Annotated[str, typer.Option("--config", help="YAML configuration file")] = "retrosheet.yaml",
) -> None:
    """Download and parse Retrosheet play-by-play event files."""
    configure_logging(verbose=verbose)
    ctx.obj = load_loader_settings(create_config(yaml_path=config_path))
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


@app.command(name="list")
def list_cmd(
    ctx: typer.Context,
    years: Annotated[str | None, typer.Option("--years", "-y", help="Years to list (default: all)")] = None,
    event_type: _TypeOpt = None,
    check: Annotated[bool, typer.Option("--check/--no-check", help="Check the server for each archive")] = True,
) -> None:
    """List event archives available on Retrosheet."""
    settings = _settings(ctx)
    archives = list_events(
        parse_years(years) if years else None,
        _parse_types(event_type),
        check_availability=check,
        base_url=settings.base_url,
    )
    print_archive_list(archives)


@app.command(name="fetch")
def fetch_cmd(
    ctx: typer.Context,
    years: _YearsOpt,
    output_dir: Annotated[Path, typer.Option("--output-dir", "-o", help="Directory for the CSV tables")] = Path("."),
    event_type: _TypeOpt = None,
    cache: Annotated[bool | None, typer.Option("--cache/--no-cache", help="Override cache.enabled")] = None,
    workers: Annotated[int | None, typer.Option("--workers", help="Parser processes (1 = no pool)")] = None,
) -> None:
    """Download, parse and write plays.csv, games.csv and lineups.csv."""
    settings = _settings(ctx)
    archives = list_events(
        parse_years(years), _parse_types(event_type), check_availability=False, base_url=settings.base_url
    )

    with build_fetch_context(settings, use_cache=cache, max_workers=workers) as fetch:
        results = fetch.loader.load(archives)

    print_load_summary(results)

    files = [f for result in results.values() if result.is_ok() for f in result.unwrap()]
    if results and all(result.is_err() for result in results.values()):
        print_error("No archives could be retrieved")
        raise typer.Exit(code=1)

    records = [record for f in files for record in f.records]
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, frame in (
        ("plays.csv", project_plays(records)),
        ("games.csv", project_metadata(records)),
        ("lineups.csv", project_lineups(records)),
    ):
        path = output_dir / name
        frame.to_csv(path, index=False)
        written.append(path)
    print_written(written)


@cache_app.command(name="status")
def cache_status_cmd(ctx: typer.Context) -> None:
    """Show cached archives."""
    settings = _settings(ctx)
    cache = ArchiveCache(settings.cache_dir)
    print_cache_status(cache.cache_dir, cache.status())


@cache_app.command(name="clear")
def cache_clear_cmd(
    ctx: typer.Context,
    years: Annotated[str | None, typer.Option("--years", "-y", help="Only these years")] = None,
    event_type: Annotated[list[str] | None, typer.Option("--type", "-t", help="Only these event types")] = None,
    yes: Annotated[bool, typer.Option("--yes", help="Do not ask for confirmation")] = False,
) -> None:
    """Delete cached archives."""
    settings = _settings(ctx)
    cache = ArchiveCache(settings.cache_dir)
    if not cache.status():
        console.print("Cache is already empty.")
        return
    if not yes and not typer.confirm(f"Delete cached archives in {cache.cache_dir}?"):
        console.print("Cancelled.")
        return
    removed = cache.clear(
        years=parse_years(years) if years else None,
        event_types=_parse_types(event_type) if event_type else None,
    )
    console.print(f"Deleted {removed} file(s).")
