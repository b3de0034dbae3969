"""clausegate contracts -- list registered task contracts."""

from __future__ import annotations

import click

from clausegate.cli.formatting import format_contracts, get_console


@click.command()
def contracts() -> None:
    """List the task contracts results are validated against."""
    from clausegate.contracts import list_contracts

    format_contracts(list_contracts(), get_console())
