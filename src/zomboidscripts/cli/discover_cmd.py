"""``zomboid-scripts discover`` -- Locate the Project Zomboid scripts folder.

Runs the ordered discovery strategies (saved config, executable-relative,
Steam libraries, alternate installs, Windows deep scan) and prints the
result. A successful Steam/alternate/deep-scan hit is remembered in the
configuration file.

Exit Codes:
    0 -- An installation was found.
    2 -- No installation was found.
"""

from __future__ import annotations

import json
import sys

import click

from zomboidscripts.cli.common import get_workbench
from zomboidscripts.cli.output import print_discovery


@click.command("discover")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_context
def discover_command(ctx: click.Context, output_format: str) -> None:
    """Find the game's media/scripts directory automatically."""
    bench = get_workbench(ctx)
    result = bench.discover()

    if output_format == "json":
        click.echo(json.dumps({
            "found": result.found,
            "path": str(result.path) if result.path else None,
            "root": str(result.root) if result.root else None,
            "strategy": result.strategy,
        }, indent=2))
    else:
        print_discovery(result)

    sys.exit(0 if result.found else 2)
