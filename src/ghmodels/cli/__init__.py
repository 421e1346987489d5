"""ghmodels CLI -- quick checks against the GitHub Models endpoint.

This module is NEVER imported from ghmodels/__init__.py.
It is only loaded via the ``ghmodels`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging
import os

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install ghmodels[cli]"
    ) from None

from dotenv import load_dotenv


@click.group()
@click.option(
    "--env-file",
    default=".env",
    show_default=True,
    help="Dotenv file to load before running (skipped if missing).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable INFO logging.")
@click.pass_context
def cli(ctx: click.Context, env_file: str, verbose: bool) -> None:
    """Talk to GitHub Models from the terminal."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if env_file and os.path.exists(env_file):
        load_dotenv(env_file)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register subcommands after cli group is defined
from ghmodels.cli.commands.ask import ask  # noqa: E402
from ghmodels.cli.commands.limits import limits  # noqa: E402
from ghmodels.cli.commands.validate import validate  # noqa: E402

cli.add_command(ask)
cli.add_command(validate)
cli.add_command(limits)
