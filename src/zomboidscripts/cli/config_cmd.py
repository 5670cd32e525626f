"""``zomboid-scripts config`` -- Show and edit the persisted configuration.

Subcommands:
    show             -- Print the root, tracked subfolders and file location.
    set-root PATH    -- Set the Project Zomboid install root.
    add NAME         -- Track ``media/NAME``.
    remove NAME      -- Stop tracking ``media/NAME``.
    reset            -- Forget the root and all subfolders.

Exit Codes:
    0 -- The change was applied.
    1 -- Invalid name, or nothing to change (duplicate / not tracked).
"""

from __future__ import annotations

import sys

import click
from rich.markup import escape

from zomboidscripts.cli.common import get_workbench
from zomboidscripts.cli.output import console, print_config
from zomboidscripts.exceptions import ValidationError


@click.group("config")
def config_group() -> None:
    """Show or change the root folder and tracked media subfolders."""


@config_group.command("show")
@click.pass_context
def show_command(ctx: click.Context) -> None:
    """Print the current configuration."""
    print_config(get_workbench(ctx).config)


@config_group.command("set-root")
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.pass_context
def set_root_command(ctx: click.Context, path: str) -> None:
    """Use PATH as the Project Zomboid install root."""
    bench = get_workbench(ctx)
    bench.set_root(path)
    if not bench.config.has_valid_root():
        console.print(f"[yellow]Warning: {escape(path)} has no media folder.[/yellow]")
    console.print(f"Root set to: {escape(str(bench.config.root_path))}")


@config_group.command("add")
@click.argument("name")
@click.pass_context
def add_command(ctx: click.Context, name: str) -> None:
    """Track the media subfolder NAME."""
    bench = get_workbench(ctx)
    try:
        added = bench.add_subfolder(name)
    except ValidationError as exc:
        console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        sys.exit(1)
    if not added:
        console.print(f"Already tracked: {escape(name)}")
        sys.exit(1)
    console.print(f"Tracking media/{escape(bench.config.subfolders[-1])}")


@config_group.command("remove")
@click.argument("name")
@click.pass_context
def remove_command(ctx: click.Context, name: str) -> None:
    """Stop tracking the media subfolder NAME."""
    bench = get_workbench(ctx)
    try:
        removed = bench.remove_subfolder(name)
    except ValidationError as exc:
        console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        sys.exit(1)
    if not removed:
        console.print(f"Not tracked: {escape(name)}")
        sys.exit(1)
    console.print(f"Removed: {escape(name)}")


@config_group.command("reset")
@click.confirmation_option(prompt="Forget the root and all tracked subfolders?")
@click.pass_context
def reset_command(ctx: click.Context) -> None:
    """Reset the configuration to its empty defaults."""
    get_workbench(ctx).config.reset()
    console.print("Configuration reset.")
