"""Wrapper around the ``dotnet`` CLI.

Builds the argument lists for the handful of ``dotnet`` sub-commands the
scaffolder needs and turns any failure (non-zero exit, missing binary,
timeout) into a ``ToolchainError``.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from .models import TemplateKind
from .utils import console, run_command


class ToolchainError(Exception):
    """Raised when an external ``dotnet`` command fails."""

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class DotnetCli:
    """Runs ``dotnet`` sub-commands one at a time.

    Every method awaits the child process to completion before returning, so
    callers observe a strictly sequential order of commands.
    """

    def __init__(
        self,
        binary: str = "dotnet",
        timeout: float | None = None,
        verbose: bool = False,
    ):
        self.binary = binary
        self.timeout = timeout
        self.verbose = verbose

    async def _run(self, *args: str, cwd: str | Path | None = None) -> str:
        """Run ``dotnet <args>`` and return its stdout.

        Raises ToolchainError if the command exits with a non-zero code.
        """
        cmd = [self.binary] + list(args)
        cmd_str = " ".join(cmd)

        try:
            returncode, stdout, stderr = await run_command(
                cmd, cwd=cwd, timeout=self.timeout
            )
        except FileNotFoundError as exc:
            raise ToolchainError(
                f"'{self.binary}' was not found. Is the .NET SDK installed?",
                command=cmd_str,
            ) from exc

        if self.verbose and stdout:
            console.print(escape(stdout), style="dim", soft_wrap=True)

        if returncode != 0:
            raise ToolchainError(
                f"Command failed (exit {returncode}): {cmd_str}\n{stderr or stdout}",
                command=cmd_str,
                returncode=returncode,
                stderr=stderr,
            )

        return stdout

    async def new_project(self, kind: TemplateKind, name: str, cwd: Path) -> None:
        """``dotnet new <kind> -o <name>`` inside *cwd*."""
        await self._run("new", kind.value, "-o", name, cwd=cwd)

    async def add_reference(self, project_file: Path, targets: list[Path]) -> None:
        """``dotnet add <project> reference <targets...>``."""
        await self._run(
            "add", str(project_file), "reference", *(str(t) for t in targets)
        )

    async def new_solution(
        self, name: str, cwd: Path, solution_format: str | None = None
    ) -> None:
        """``dotnet new sln -n <name>`` inside *cwd*."""
        args = ["new", "sln", "-n", name]
        if solution_format:
            args += ["--format", solution_format]
        await self._run(*args, cwd=cwd)

    async def add_to_solution(self, solution_path: Path, member: Path) -> None:
        """``dotnet sln <solution> add <member>``."""
        await self._run("sln", str(solution_path), "add", str(member))

    async def restore(self, solution_path: Path) -> None:
        """``dotnet restore <solution>``."""
        await self._run("restore", str(solution_path))
