"""Standardized CLI exit codes for toolkata.

Exit code scheme:

    0  SUCCESS          -- command completed
    1  GENERAL_ERROR    -- unexpected failure, crash, unhandled exception
    2  USAGE_ERROR      -- invalid arguments, bad flags, bad config (Click default)
    3  NOT_FOUND        -- no entry or reference table for the given slug
    4  INVALID_CATALOG  -- a literal table failed its integrity checks
"""

from __future__ import annotations

import sys

import click

# ---------------------------------------------------------------------------
# Exit code constants
# ---------------------------------------------------------------------------

EXIT_SUCCESS: int = 0
EXIT_ERROR: int = 1
EXIT_USAGE: int = 2
EXIT_NOT_FOUND: int = 3
EXIT_INVALID_CATALOG: int = 4

DESCRIPTIONS: dict[int, str] = {
    EXIT_SUCCESS: "success",
    EXIT_ERROR: "unexpected error",
    EXIT_USAGE: "invalid usage (bad arguments, flags or config)",
    EXIT_NOT_FOUND: "slug not found -- run `toolkata list`",
    EXIT_INVALID_CATALOG: "catalog failed integrity checks",
}

# ---------------------------------------------------------------------------
# Custom exceptions (caught by Click's error handler)
# ---------------------------------------------------------------------------


class ToolkataError(click.ClickException):
    """Base class for toolkata errors with exit codes."""

    def __init__(self, message: str, exit_code: int = EXIT_ERROR):
        super().__init__(message)
        self.exit_code = exit_code

    def format_message(self) -> str:
        return self.message


class EntryNotFoundError(ToolkataError):
    """Raised when a slug matches no tutorial entry."""

    def __init__(self, slug: str):
        super().__init__(f"No tutorial entry named {slug!r}. Run `toolkata list` to see all slugs.", EXIT_NOT_FOUND)
        self.slug = slug


class TableNotFoundError(ToolkataError):
    """Raised when a slug has no reference table."""

    def __init__(self, slug: str):
        super().__init__(f"No reference table for {slug!r}.", EXIT_NOT_FOUND)
        self.slug = slug


class InvalidCatalogError(ToolkataError):
    """Raised when the literal catalog fails validation."""

    def __init__(self, message: str = "Catalog failed integrity checks."):
        super().__init__(message, EXIT_INVALID_CATALOG)


def exit_with(code: int, message: str | None = None) -> None:
    """Print an optional message to stderr and exit with the given code."""
    if message:
        click.echo(f"Error: {message}", err=True)
    sys.exit(code)
