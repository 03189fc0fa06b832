"""
protocol-handler logging

Rich console logging for the resolver and its HTTP server:
- Colored, icon-prefixed output for interactive use
- Plain structured format when rich output is disabled
- Resolution outcome highlighting and timing

Usage:
    from protocol_handler.logging import setup_logging, get_logger

    logger = setup_logging(level="DEBUG")
    logger.url_resolved(Resolution.resolved("s3://b/k", "s3:", "https://..."), 0.4)
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text
from rich.theme import Theme

from .types import Resolution, ResolutionOutcome

ROOT_LOGGER_NAME = "protocol_handler"

# =============================================================================
# CUSTOM THEME
# =============================================================================

PROTOCOL_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim",
        "scheme": "bold white",
        "outcome.resolved": "bold green",
        "outcome.declined": "bold yellow",
        "outcome.passed": "bold blue",
        "outcome.relative": "bold magenta",
        "timing": "dim cyan",
        "url": "cyan",
        "server": "bold cyan",
    }
)

OUTCOME_STYLES = {
    ResolutionOutcome.RESOLVED: "[outcome.resolved]RESOLVED[/outcome.resolved]",
    ResolutionOutcome.DECLINED: "[outcome.declined]DECLINED[/outcome.declined]",
    ResolutionOutcome.PASSED_THROUGH: "[outcome.passed]PASSED THROUGH[/outcome.passed]",
    ResolutionOutcome.PROTOCOL_RELATIVE: "[outcome.relative]PROTOCOL RELATIVE[/outcome.relative]",
}


# =============================================================================
# CUSTOM LOG HANDLER
# =============================================================================


class ProtocolRichHandler(RichHandler):
    """Rich handler with icon-prefixed level names."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("show_time", True)
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("rich_tracebacks", True)
        super().__init__(*args, **kwargs)

    def get_level_text(
        self, record: logging.LogRecord
    ) -> Text:
        level_name = record.levelname

        icons = {
            "DEBUG": "🔍",
            "INFO": "ℹ️ ",
            "WARNING": "⚠️ ",
            "ERROR": "❌",
            "CRITICAL": "🚨",
        }

        icon = icons.get(level_name, "•")

        style = {
            "DEBUG": "dim",
            "INFO": "cyan",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold red",
        }.get(level_name, "white")

        return Text(f"{icon} {level_name:<8}", style=style)


# =============================================================================
# PROTOCOL LOGGER
# =============================================================================


class ProtocolLogger:
    """
    Semantic logging interface.

    Example:
        logger = ProtocolLogger("registry")
        logger.protocol_registered("s3:")
    """

    def __init__(self, name: str, level: Optional[str] = None):
        """
        Args:
            name: Logger name, nested under ``protocol_handler``
            level: Optional level override (DEBUG, INFO, WARNING, ERROR)
        """
        self.name = name
        self._logger = logging.getLogger(
            f"{ROOT_LOGGER_NAME}.{name}"
        )
        if level is not None:
            self._logger.setLevel(
                getattr(logging, level.upper())
            )

    def _log(self, level: int, message: str, **kwargs):
        extra = {"markup": True, **kwargs}
        self._logger.log(level, message, extra=extra)

    # =========================================================================
    # SEMANTIC LOGGING METHODS
    # =========================================================================

    def protocol_registered(
        self, scheme: str, description: Optional[str] = None
    ):
        """Log resolver registration."""
        message = f"[scheme]{escape(scheme)}[/scheme] registered"
        if description:
            message += f" [dim]// {escape(description)}[/dim]"
        self._log(logging.DEBUG, message)

    def url_resolved(
        self,
        resolution: Resolution,
        elapsed_ms: Optional[float] = None,
    ):
        """Log a resolution outcome."""
        outcome_str = OUTCOME_STYLES.get(
            resolution.outcome, str(resolution.outcome)
        )
        timing_str = (
            f" [timing]({elapsed_ms:.2f}ms)[/timing]"
            if elapsed_ms
            else ""
        )
        message = (
            f"[url]{escape(resolution.url)}[/url] → {outcome_str}{timing_str}"
        )
        if resolution.target and resolution.target != resolution.url:
            message += f" [dim]// {escape(resolution.target)}[/dim]"

        level = (
            logging.WARNING
            if resolution.outcome == ResolutionOutcome.DECLINED
            else logging.DEBUG
        )
        self._log(level, message)

    def resolution_failed(self, url: str, error: Exception):
        """Log a classified resolution error."""
        self._log(
            logging.INFO,
            f"[url]{escape(url)}[/url] → [error]{type(error).__name__}[/error] [dim]// {escape(str(error))}[/dim]",
        )

    def request_received(self, url: str, request_id: Optional[str] = None):
        """Log an incoming resolve request."""
        suffix = (
            f" [dim]({escape(request_id[:8])}...)[/dim]"
            if request_id
            else ""
        )
        self._log(
            logging.DEBUG,
            f"[server]Resolve request:[/server] {escape(url)}{suffix}",
        )

    def server_started(self, address: str, route: str):
        """Log server startup."""
        self._log(
            logging.INFO,
            f"[server]Server started[/server] on [cyan]http://{escape(address + route)}[/cyan]",
        )

    def server_stopped(self):
        """Log server shutdown."""
        self._log(logging.INFO, "[dim]Server stopped[/dim]")

    def error(self, message: str, exc_info: bool = False):
        self._logger.error(message, exc_info=exc_info)

    def warning(self, message: str):
        self._log(
            logging.WARNING, f"[warning]{escape(message)}[/warning]"
        )

    def info(self, message: str):
        self._log(logging.INFO, escape(message))

    def debug(self, message: str):
        self._log(logging.DEBUG, f"[dim]{escape(message)}[/dim]")


# =============================================================================
# SETUP FUNCTION
# =============================================================================


def setup_logging(
    level: str = "INFO",
    rich_output: bool = True,
    log_file: Optional[str] = None,
) -> ProtocolLogger:
    """
    Configure protocol-handler logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        rich_output: Enable rich console output
        log_file: Optional file path for log output

    Returns:
        ProtocolLogger instance
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    plain_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if rich_output:
        console = Console(theme=PROTOCOL_THEME, stderr=True)
        handler = ProtocolRichHandler(console=console)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(plain_formatter)
        root_logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(plain_formatter)
        root_logger.addHandler(file_handler)

    return ProtocolLogger("main")


def get_logger(name: str) -> ProtocolLogger:
    """
    Get a ProtocolLogger for a component.

    Args:
        name: Component name

    Returns:
        ProtocolLogger instance
    """
    return ProtocolLogger(name)
