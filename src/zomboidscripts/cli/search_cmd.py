"""``zomboid-scripts search QUERY`` -- Find loaded scripts by content, path or name.

Loads scripts first (from a cache file with ``--cache``, from PATHs
given with ``--path``, or from the discovered install) and then queries
the in-memory store.

Exit Codes:
    0 -- At least one file matched.
    1 -- Nothing matched, or the cache could not be read.
    2 -- No installation or no script files were found.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.markup import escape

from zomboidscripts.cli.common import get_workbench, load_or_exit
from zomboidscripts.cli.output import console, print_search_results


@click.command("search")
@click.argument("query")
@click.option(
    "--in", "field",
    type=click.Choice(["content", "path", "name"]),
    default="content",
    help="What to match against (default: content). name matches the whole file name.",
)
@click.option("--case-sensitive", is_flag=True, default=False, help="Match case exactly.")
@click.option(
    "--cache", "cache_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read files from a cache written by 'export' instead of scanning.",
)
@click.option(
    "--path", "paths",
    multiple=True,
    type=click.Path(exists=True, file_okay=False),
    help="Folder to scan instead of the discovered install (repeatable).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_context
def search_command(
    ctx: click.Context,
    query: str,
    field: str,
    case_sensitive: bool,
    cache_path: str | None,
    paths: tuple[str, ...],
    output_format: str,
) -> None:
    """Search loaded script files for QUERY."""
    bench = get_workbench(ctx)
    if cache_path is not None:
        if bench.load_cache(Path(cache_path)) is None:
            console.print(f"[bold red]Cannot read cache: {escape(cache_path)}[/bold red]")
            sys.exit(1)
    else:
        load_or_exit(bench, paths, quiet=output_format == "json")

    store = bench.store
    if field == "content":
        matches = store.search_content(query, case_sensitive=case_sensitive)
    elif field == "path":
        matches = store.search_paths(query, case_sensitive=case_sensitive)
    elif case_sensitive:
        matches = store.get_files_by_name(query)
    else:
        wanted = query.lower()
        matches = [f for f in store if f.name.lower() == wanted]

    if output_format == "json":
        click.echo(json.dumps(
            {"query": query, "field": field, "matches": [f.path for f in matches]},
            indent=2,
        ))
    else:
        print_search_results(matches, query, case_sensitive, show_lines=field == "content")

    sys.exit(0 if matches else 1)
