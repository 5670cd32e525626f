"""zomboid-scripts CLI -- Find a Project Zomboid install and work with its scripts.

Entry point for the ``zomboid-scripts`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    discover  -- Locate the game's media/scripts folder.
    load      -- Load script files (progress bar + summary).
    search    -- Search loaded scripts by content, path or file name.
    export    -- Load scripts and write them to a JSON cache file.
    config    -- Show or edit the root folder and tracked subfolders.

Usage::

    zomboid-scripts discover
    zomboid-scripts load                      # Auto-discover and load
    zomboid-scripts load ./mods/MyMod/media/scripts
    zomboid-scripts search "item Axe"
    zomboid-scripts search Base --in path --cache scripts.json
    zomboid-scripts export scripts.json
    zomboid-scripts config add lua
"""

from __future__ import annotations

import click

from zomboidscripts import __version__
from zomboidscripts.cli.common import configure_logging
from zomboidscripts.cli.config_cmd import config_group
from zomboidscripts.cli.discover_cmd import discover_command
from zomboidscripts.cli.load_cmd import export_command, load_command
from zomboidscripts.cli.search_cmd import search_command


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    envvar="ZOMBOID_SCRIPTS_CONFIG",
    default=None,
    help="Config file to use (default: per-user config directory).",
)
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: int) -> None:
    """zomboid-scripts: Locate Project Zomboid and load its script files.

    Finds the game install (Steam libraries, common folders, saved
    configuration), scans the tracked media subfolders and lets you
    search what was loaded.
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)["config_path"] = config_path


# Register all subcommands
cli.add_command(discover_command)
cli.add_command(load_command)
cli.add_command(search_command)
cli.add_command(export_command)
cli.add_command(config_group)
