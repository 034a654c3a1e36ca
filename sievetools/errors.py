"""Error reporting shared by the command-line tools."""

import sys

__all__ = ["FatalError", "format_error", "warning"]


class FatalError(Exception):
    """An unrecoverable error: the command reports it and exits with status 1."""


def _render(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def format_error(fmt: str, *args) -> str:
    """Return the printf-style message prefixed with ``Error: ``."""
    return "Error: " + _render(fmt, args)


def warning(fmt: str, *args) -> None:
    """Write the printf-style message to stderr, prefixed with ``Warning: ``."""
    print("Warning: " + _render(fmt, args), file=sys.stderr)