from __future__ import annotations

from rich.console import Console

LOGO_MINI = (
    "[bold cyan]⇢  protocol-handler[/bold cyan] [dim]v{version}[/dim]"
)

STATUS_ICON_MAP = {
    "info": "[blue]ℹ[/blue]",
    "success": "[green]✓[/green]",
    "warning": "[yellow]⚠[/yellow]",
    "error": "[red]✗[/red]",
    "server": "[cyan]⇢[/cyan]",
    "loading": "[cyan]⟳[/cyan]",
}


class StatusPrinter:
    def __init__(self, console: Console):
        self._console = console

    def print(
        self, message: str, status: str = "info"
    ):
        icon = STATUS_ICON_MAP.get(
            status, STATUS_ICON_MAP["info"]
        )
        self._console.print(f"  {icon} {message}")


def render_banner(console: Console, version: str) -> None:
    console.print(LOGO_MINI.format(version=version))
