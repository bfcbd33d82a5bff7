from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from retrosheet_events.cache.archive_cache import CacheEntry
    from retrosheet_events.domain.errors import RetrievalError
    from retrosheet_events.domain.event_type import EventType
    from retrosheet_events.domain.records import ParsedEventFile
    from retrosheet_events.ingest.catalog import EventArchive
    from retrosheet_events.result import Result

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_archive_list(archives: Sequence[EventArchive]) -> None:
    if not archives:
        console.print("No event archives found.")
        return
    table = Table(title="Retrosheet Event Archives")
    table.add_column("Year", justify="right")
    table.add_column("Type")
    table.add_column("URL")
    for archive in archives:
        table.add_row(str(archive.year), archive.event_type.value, archive.url)
    console.print(table)


def print_load_summary(
    results: dict[tuple[int, EventType], Result[list[ParsedEventFile], RetrievalError]],
) -> None:
    table = Table(title="Load Summary")
    table.add_column("Year", justify="right")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Files", justify="right")
    table.add_column("Records", justify="right")
    table.add_column("Issues", justify="right")

    for (year, event_type), result in results.items():
        if result.is_err():
            table.add_row(str(year), event_type.value, "[red]Failed[/red]", "-", "-", "-")
            continue
        files = result.unwrap()
        if not files:
            table.add_row(str(year), event_type.value, "[yellow]Empty[/yellow]", "0", "0", "0")
            continue
        records = sum(len(f.records) for f in files)
        issues = sum(len(f.decode_issues) + len(f.boundary_issues) for f in files)
        table.add_row(str(year), event_type.value, "[green]OK[/green]", str(len(files)), str(records), str(issues))

    console.print(table)


def print_written(paths: Sequence[Path]) -> None:
    for path in paths:
        console.print(f"  Wrote {path}")


def print_cache_status(cache_dir: Path, entries: Sequence[CacheEntry]) -> None:
    if not entries:
        console.print("Cache is empty.")
        console.print(f"Location: {cache_dir}")
        return
    table = Table(title="Cached Event Archives")
    table.add_column("Year", justify="right")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Modified")
    for entry in entries:
        table.add_row(
            str(entry.year) if entry.year is not None else "?",
            entry.event_type.value if entry.event_type else "unknown",
            format_size(entry.size_bytes),
            entry.modified.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)
    total = sum(e.size_bytes for e in entries)
    console.print(f"Location: {cache_dir}")
    console.print(f"Total: {len(entries)} file(s), {format_size(total)}")
