"""ghmodels limits -- show the free-tier rate-limit notice."""

from __future__ import annotations

import click

from ghmodels.cli.formatting import get_console
from ghmodels.formatting import print_rate_limit_notice


@click.command()
def limits() -> None:
    """Show GitHub Models free-tier rate limits."""
    print_rate_limit_notice(get_console())
