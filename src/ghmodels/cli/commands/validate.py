"""ghmodels validate -- check that the configured token works."""

from __future__ import annotations

import click

from ghmodels.cli.formatting import format_probe, get_console
from ghmodels.llm.probe import probe_credential


@click.command()
def validate() -> None:
    """Send one minimal request to confirm the token and endpoint work."""
    console = get_console()
    result = probe_credential()
    format_probe(result, console)
    if not result.ok:
        raise SystemExit(1)
