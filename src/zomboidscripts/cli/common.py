"""Helpers shared by the CLI subcommands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from zomboidscripts.cli.output import console, print_discovery, run_with_progress
from zomboidscripts.loader import LoadJob
from zomboidscripts.workbench import ScriptWorkbench


def configure_logging(verbose: int) -> None:
    """Route library logging to stderr through Rich (-v INFO, -vv DEBUG)."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def get_workbench(ctx: click.Context) -> ScriptWorkbench:
    """Build the workbench on first use and keep it on the context."""
    obj = ctx.ensure_object(dict)
    bench = obj.get("workbench")
    if bench is None:
        config_path = obj.get("config_path")
        bench = ScriptWorkbench.create(Path(config_path) if config_path else None)
        obj["workbench"] = bench
    return bench


def load_or_exit(bench: ScriptWorkbench, paths: tuple[str, ...], quiet: bool = False) -> LoadJob:
    """Start a load from ``paths`` (or auto-discovery) and drive it to the end.

    Exits with code 2 when nothing could be loaded.
    """
    if paths:
        job = bench.load_from_multiple_paths(paths)
    else:
        job = bench.start_auto_load()
        if job is None and bench.last_discovery is not None and not bench.last_discovery.found:
            print_discovery(bench.last_discovery)
            sys.exit(2)

    if job is None:
        console.print("[bold red]No script files found to load.[/bold red]")
        sys.exit(2)

    if quiet:
        job.run()
    else:
        run_with_progress(job)
    return job
