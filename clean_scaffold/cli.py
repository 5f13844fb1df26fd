"""Command-line argument handling.

``validate`` turns raw arguments into a ``ScaffoldRequest``. Help flags are
honoured anywhere on the command line and before any other check.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError

from .models import ScaffoldRequest
from .utils import console

PROG = "clean-scaffold"
HELP_FLAGS = ("-h", "--help")


class UsageError(Exception):
    """Raised when the command line is missing or has invalid arguments."""


class HelpRequested(Exception):
    """Raised when ``-h`` or ``--help`` appears anywhere in the arguments."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("project_name", nargs="?", default="")
    parser.add_argument("project_path", nargs="?", default=None)
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


def print_usage() -> None:
    """Print the usage text."""
    console.print("[bold green]Usage:[/bold green]")
    console.print(f"    {PROG} <project_name> [<project_path>]\n", markup=False)
    console.print("[bold green]Options:[/bold green]")
    console.print("    -h, --help        Show this help message and exit.\n", markup=False)
    console.print("[bold green]Arguments:[/bold green]")
    console.print(
        "    project_name    - Name of the project/solution to create (required).",
        markup=False,
    )
    console.print(
        "    project_path    - Path where the project should be created "
        "(optional, defaults to current directory).",
        markup=False,
    )


def validate(args: list[str]) -> ScaffoldRequest:
    """Validate raw command-line arguments.

    Args:
        args: Arguments without the program name.

    Returns:
        The validated request. ``project_path`` defaults to the current
        working directory.

    Raises:
        HelpRequested: If any argument is ``-h`` or ``--help``.
        UsageError: If the project name is missing or invalid.
    """
    if any(arg in HELP_FLAGS for arg in args):
        raise HelpRequested()

    # "--" lets names that start with a dash through as positionals.
    parsed = _build_parser().parse_args(["--", *args] if args else [])

    if not parsed.project_name:
        raise UsageError("Project name is required.")

    fields: dict[str, object] = {"project_name": parsed.project_name}
    if parsed.project_path:
        fields["project_path"] = Path(parsed.project_path)

    try:
        return ScaffoldRequest(**fields)
    except ValidationError as exc:
        details = "; ".join(err["msg"] for err in exc.errors())
        raise UsageError(f"Invalid arguments: {details}") from exc
