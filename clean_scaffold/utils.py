"""Shared utility functions for clean-scaffold.

Provides async command execution and Rich-based console reporting. All
user-facing output goes through the module-level ``console`` so that every
stage prints with the same colour conventions.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> tuple[int, str, str]:
    """Run an external command asynchronously and wait for it to finish.

    Args:
        cmd: Program and arguments. Never passed through a shell.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits indefinitely.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple. A timed-out command reports
        a return code of ``-1``.

    Raises:
        FileNotFoundError: If the program does not exist.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return -1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}"

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return process.returncode or 0, stdout_str, stderr_str


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a blue stage heading."""
    console.print(f"[bold blue]{escape(message)}[/bold blue]", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()
