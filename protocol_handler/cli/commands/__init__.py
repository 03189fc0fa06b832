from . import check_command, resolve_command, serve_command

__all__ = ["check_command", "resolve_command", "serve_command"]
