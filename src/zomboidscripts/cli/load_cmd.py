"""``zomboid-scripts load [PATH...]`` and ``export OUTPUT [PATH...]``.

``load`` scans the given folders (or, with none, the auto-discovered
install and its tracked subfolders) and loads every script file,
showing progress. ``export`` does the same and writes the result to a
JSON cache file that ``search --cache`` can read back.

Exit Codes:
    0 -- Files were loaded (and exported).
    1 -- The cache file could not be written.
    2 -- No installation or no script files were found.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from zomboidscripts.cli.common import get_workbench, load_or_exit
from zomboidscripts.cli.output import console, print_load_summary
from zomboidscripts.exceptions import CacheError
from zomboidscripts.store import save_cache

_PATHS = click.argument(
    "paths", nargs=-1, type=click.Path(exists=True, file_okay=False),
)
_EXTENSIONS = click.option(
    "--ext", "extensions",
    multiple=True,
    help="Accepted file extension, repeatable (default: .txt .lua .xml).",
)


def _apply_extensions(bench, extensions: tuple[str, ...]) -> None:
    if extensions:
        bench.loader.extensions = frozenset(
            (e if e.startswith(".") else f".{e}").lower() for e in extensions
        )


@click.command("load")
@_PATHS
@_EXTENSIONS
@click.pass_context
def load_command(ctx: click.Context, paths: tuple[str, ...], extensions: tuple[str, ...]) -> None:
    """Load script files from PATHS, or from the discovered install."""
    bench = get_workbench(ctx)
    _apply_extensions(bench, extensions)
    job = load_or_exit(bench, paths)
    print_load_summary(job)


@click.command("export")
@click.argument("output", type=click.Path(dir_okay=False))
@_PATHS
@_EXTENSIONS
@click.pass_context
def export_command(
    ctx: click.Context, output: str, paths: tuple[str, ...], extensions: tuple[str, ...],
) -> None:
    """Load script files and write them to the OUTPUT cache file."""
    bench = get_workbench(ctx)
    _apply_extensions(bench, extensions)
    job = load_or_exit(bench, paths)
    try:
        written = save_cache(bench.store, Path(output))
    except CacheError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        sys.exit(1)
    print_load_summary(job)
    console.print(f"Cache written to: {written.resolve()}")
