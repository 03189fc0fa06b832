from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from ... import __version__
from ...logging import setup_logging
from .. import cli, console
from ..branding import StatusPrinter, render_banner
from ..loaders import HandlerLoaderRegistry

_status = StatusPrinter(console)
_loader_registry = HandlerLoaderRegistry()


@cli.command()
@click.argument("path", type=click.Path(exists=True))
@click.option(
    "--host",
    default="0.0.0.0",
    help="HTTP host to bind to",
)
@click.option(
    "-p",
    "--port",
    type=int,
    default=3000,
    show_default=True,
    help="HTTP port to listen on",
)
@click.option(
    "--route",
    default="/resolve",
    show_default=True,
    help="Path of the resolve endpoint",
)
@click.option(
    "--param",
    default=None,
    help="Query parameter holding the URL (defaults to the handler's)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose logging",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Minimal output",
)
def serve(
    path: str,
    host: str,
    port: int,
    route: str,
    param: Optional[str],
    verbose: bool,
    quiet: bool,
):
    """
    Serve a protocol handler over HTTP.

    PATH is a Python module defining a ProtocolHandler, or a YAML file
    declaring template resolvers.

    Examples:
      protocol-handler serve ./resolvers.py
      protocol-handler serve ./redirects.yaml --port 8080
    """
    if not quiet:
        render_banner(console, __version__)
        console.print()

    log_level = (
        "DEBUG"
        if verbose
        else "INFO" if not quiet else "WARNING"
    )
    logger = setup_logging(level=log_level)

    path_obj = Path(path)
    if not _loader_registry.find_loader_for_path(path_obj):
        _status.print(
            f"Unsupported file type: {path_obj.suffix}",
            "error",
        )
        sys.exit(1)

    handler = _loader_registry.load(path_obj, logger)
    if handler is None:
        _status.print(
            "Failed to load protocol handler", "error"
        )
        sys.exit(1)

    if not quiet:
        _status.print(
            f"Protocols: [cyan]{', '.join(handler.protocols) or '-'}[/cyan]",
            "info",
        )
        _status.print(
            f"Listening on [cyan]http://{host}:{port}{route}"
            f"?{param or handler.param}=<url>[/cyan]",
            "server",
        )

    handler.serve(
        host=host,
        port=port,
        route=route,
        param=param,
        app_logger=logger,
    )
