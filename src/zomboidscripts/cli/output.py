"""Rich output formatting helpers for the zomboid-scripts CLI."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table
from rich.text import Text

from zomboidscripts.config import ConfigStore
from zomboidscripts.discovery import DiscoveryResult
from zomboidscripts.loader import LoadJob
from zomboidscripts.store import LoadedFile

console = Console()


def _short(path: str | Path) -> str:
    """Abbreviate the home directory to ``~``."""
    return str(path).replace(str(Path.home()), "~", 1)


def print_discovery(result: DiscoveryResult) -> None:
    if not result.found:
        console.print("[bold red]No Project Zomboid installation found.[/bold red]")
        console.print("Set one manually with: zomboid-scripts config set-root PATH")
        return
    console.print(Text.assemble(("Scripts: ", "bold"), (_short(result.path), "green")))
    console.print(Text.assemble(("Found via: ", "bold"), (result.strategy or "-", "cyan")))


def run_with_progress(job: LoadJob) -> int:
    """Drive ``job`` to completion behind a progress bar."""
    columns = (
        TextColumn("[bold]Loading"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("{task.description}", style="dim"),
    )
    with Progress(*columns, console=console, transient=True) as progress:
        task = progress.add_task("", total=job.total)
        for step in job:
            progress.update(task, completed=step.current, description=step.name)
    return job.loaded_count


def print_load_summary(job: LoadJob) -> None:
    parts = [f"[bold]{job.loaded_count}[/bold] files loaded"]
    if job.skipped:
        parts.append(f"[yellow]{len(job.skipped)} skipped[/yellow]")
    console.print(" | ".join(parts))
    for path in job.skipped:
        console.print(f"  [yellow]unreadable:[/yellow] {escape(_short(path))}")


def _first_match(loaded: LoadedFile, query: str, case_sensitive: bool) -> tuple[int, str]:
    needle = query if case_sensitive else query.lower()
    for number, line in enumerate(loaded.lines, start=1):
        haystack = line if case_sensitive else line.lower()
        if needle in haystack:
            return number, line.strip()
    return 0, ""


def print_search_results(
    files: list[LoadedFile], query: str, case_sensitive: bool, show_lines: bool,
) -> None:
    if not files:
        console.print(f"[dim]No files match {escape(repr(query))}.[/dim]")
        return

    table = Table(title=f"Matches for {escape(repr(query))}", show_header=True, header_style="bold")
    table.add_column("File", style="bold")
    table.add_column("Directory", style="dim")
    if show_lines:
        table.add_column("Line", justify="right")
        table.add_column("Text")

    for loaded in files:
        row = [escape(loaded.name), escape(_short(loaded.directory))]
        if show_lines:
            number, text = _first_match(loaded, query, case_sensitive)
            row += [str(number) if number else "-", escape(text[:80])]
        table.add_row(*row)

    console.print(table)
    console.print(f"[bold]{len(files)}[/bold] matching files")


def print_config(config: ConfigStore) -> None:
    table = Table(title="Configuration", show_header=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("File", _short(config.path))
    root_style = "green" if config.has_valid_root() else "red"
    table.add_row("Root", Text(config.root_path or "(not set)", style=root_style))
    table.add_row("Updated", config.last_updated or "-")
    console.print(table)

    existing = {p.name for p in config.subfolder_paths()}
    if not config.subfolders:
        console.print("[dim]No media subfolders tracked.[/dim]")
    for name in config.subfolders:
        marker = "[green]✓[/green]" if name in existing else "[red]✗[/red]"
        console.print(f"  {marker} media/{escape(name)}")
