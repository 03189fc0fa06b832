from __future__ import annotations

import sys

import click
from rich import box
from rich.markup import escape
from rich.table import Table

from ...registry.scheme_syntax import (
    is_valid_scheme,
    normalize_blacklist_entry,
    normalize_scheme,
)
from ...types import DEFAULT_BLACKLIST
from .. import cli, console

YES = "[green]✓[/green]"
NO = "[red]✗[/red]"


@cli.command()
@click.argument("schemes", nargs=-1, required=True)
@click.option(
    "-b",
    "--blacklist",
    multiple=True,
    help="Extra blacklisted scheme (repeatable)",
)
def check(schemes: tuple[str, ...], blacklist: tuple[str, ...]):
    """
    Check whether schemes can be registered.

    Examples:
      protocol-handler check s3:// gdrive: HTTPS://
      protocol-handler check ftp:// -b ftp:
    """
    blacklisted = {
        normalize_blacklist_entry(scheme)
        for scheme in (*DEFAULT_BLACKLIST, *blacklist)
    }

    table = Table(
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Input", style="white")
    table.add_column("Normalized", style="cyan")
    table.add_column("Valid", justify="center")
    table.add_column("Blacklisted", justify="center")

    registrable = True
    for raw in schemes:
        normalized = normalize_scheme(raw)
        valid = is_valid_scheme(normalized)
        is_blacklisted = normalized in blacklisted
        registrable = registrable and valid and not is_blacklisted
        table.add_row(
            escape(raw),
            escape(normalized) or "-",
            YES if valid else NO,
            "[red]yes[/red]" if is_blacklisted else "-",
        )

    console.print(table)

    if not registrable:
        sys.exit(1)
