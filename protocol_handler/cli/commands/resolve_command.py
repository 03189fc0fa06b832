from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich import box
from rich.markup import escape
from rich.table import Table

from ...errors import ProtocolHandlerError
from ...logging import setup_logging
from ...types import ResolutionOutcome
from .. import cli, console
from ..branding import StatusPrinter
from ..loaders import HandlerLoaderRegistry

_status = StatusPrinter(console)
_loader_registry = HandlerLoaderRegistry()

OUTCOME_STYLE_MAP = {
    ResolutionOutcome.RESOLVED: "[green]RESOLVED[/green]",
    ResolutionOutcome.DECLINED: "[yellow]DECLINED[/yellow]",
    ResolutionOutcome.PASSED_THROUGH: "[blue]PASSED THROUGH[/blue]",
    ResolutionOutcome.PROTOCOL_RELATIVE: "[magenta]PROTOCOL RELATIVE[/magenta]",
}


async def _resolve_all(handler, urls):
    rows = []
    for url in urls:
        try:
            resolution = await handler.resolution(url)
        except ProtocolHandlerError as e:
            rows.append((url, f"[red]{e.name}[/red]", e.message, False))
            continue
        except Exception as e:
            rows.append((url, f"[red]{type(e).__name__}[/red]", str(e), False))
            continue
        rows.append(
            (
                url,
                OUTCOME_STYLE_MAP[resolution.outcome],
                resolution.target or "-",
                resolution.outcome != ResolutionOutcome.DECLINED,
            )
        )
    return rows


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.argument("urls", nargs=-1, required=True)
def resolve(path: str, urls: tuple[str, ...]):
    """
    Resolve URLs with a protocol handler without serving it.

    Examples:
      protocol-handler resolve ./resolvers.py s3://bucket/key
      protocol-handler resolve ./redirects.yaml gdrive://abc //cdn.example.com/x
    """
    logger = setup_logging(level="WARNING")

    handler = _loader_registry.load(Path(path), logger)
    if handler is None:
        _status.print(
            "Failed to load protocol handler", "error"
        )
        sys.exit(1)

    rows = asyncio.run(_resolve_all(handler, urls))

    table = Table(
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("URL", style="white")
    table.add_column("Outcome")
    table.add_column("Target / Error", style="dim")
    for url, outcome, detail, _ in rows:
        table.add_row(escape(url), outcome, escape(detail))
    console.print(table)

    if not all(ok for *_, ok in rows):
        sys.exit(1)
