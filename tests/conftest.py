"""Shared pytest fixtures for the clean-scaffold test suite.

Provides reusable fixtures for:
- A fake ``dotnet`` toolchain that materialises what the real SDK would write
- Mock subprocess helpers
- Default configuration and requests rooted in ``tmp_path``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from clean_scaffold.config import Config
from clean_scaffold.models import ScaffoldRequest
from clean_scaffold.rollback import RollbackLedger
from clean_scaffold.toolchain import DotnetCli, ToolchainError


# ---------------------------------------------------------------------------
# Fake dotnet toolchain
# ---------------------------------------------------------------------------

class FakeDotnet(DotnetCli):
    """``DotnetCli`` whose commands act on the filesystem directly.

    Every invocation is appended to ``calls`` as ``(args, cwd)``. Commands can
    be made to fail with ``fail_on``, a mapping of command key to the 1-based
    call number that should fail. Keys are ``"new"`` (projects),
    ``"new sln"``, ``"add"``, ``"sln"`` and ``"restore"``.

    ``materialize_limit`` caps how many layer projects actually appear on
    disk; later ``dotnet new`` calls still report success.
    """

    def __init__(
        self,
        fail_on: dict[str, int] | None = None,
        materialize_limit: int | None = None,
    ) -> None:
        super().__init__(binary="dotnet")
        self.fail_on = fail_on or {}
        self.materialize_limit = materialize_limit
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []
        self._counts: dict[str, int] = {}
        self._projects_created = 0

    @staticmethod
    def key(args: tuple[str, ...]) -> str:
        if args[:2] == ("new", "sln"):
            return "new sln"
        return args[0]

    def commands(self, key: str) -> list[tuple[str, ...]]:
        return [args for args, _ in self.calls if self.key(args) == key]

    async def _run(self, *args: str, cwd: str | Path | None = None) -> str:
        cwd_path = Path(cwd) if cwd else None
        self.calls.append((args, cwd_path))
        key = self.key(args)
        self._counts[key] = self._counts.get(key, 0) + 1

        if self.fail_on.get(key) == self._counts[key]:
            raise ToolchainError(
                f"Command failed (exit 1): dotnet {' '.join(args)}",
                command="dotnet " + " ".join(args),
                returncode=1,
                stderr="simulated failure",
            )

        if key == "new":
            name = args[3]
            if self.materialize_limit is None or self._projects_created < self.materialize_limit:
                project_dir = cwd_path / name
                project_dir.mkdir(parents=True)
                (project_dir / f"{name}.csproj").write_text("<Project />\n", encoding="utf-8")
            self._projects_created += 1
        elif key == "new sln":
            name = args[3]
            extension = args[5] if len(args) > 5 else "sln"
            (cwd_path / f"{name}.{extension}").write_text("solution\n", encoding="utf-8")
        elif key == "sln":
            solution = Path(args[1])
            if not solution.exists():
                raise ToolchainError(f"Solution not found: {solution}", returncode=1)
            with solution.open("a", encoding="utf-8") as fh:
                fh.write(f"{args[3]}\n")
        elif key == "add":
            for project in (args[1], *args[3:]):
                if not Path(project).exists():
                    raise ToolchainError(f"Project not found: {project}", returncode=1)
        elif key == "restore":
            if not Path(args[1]).exists():
                raise ToolchainError(f"Solution not found: {args[1]}", returncode=1)

        return ""


@pytest.fixture
def fake_dotnet() -> FakeDotnet:
    """A fake toolchain where every command succeeds."""
    return FakeDotnet()


@pytest.fixture
def make_fake_dotnet():
    """Factory for fake toolchains with configured failures.

    Usage:
        def test_failure(make_fake_dotnet):
            toolchain = make_fake_dotnet(fail_on={"add": 1})
    """
    def factory(**kwargs: Any) -> FakeDotnet:
        return FakeDotnet(**kwargs)

    return factory


# ---------------------------------------------------------------------------
# Requests & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Target directory that scaffolded solutions are generated into."""
    directory = tmp_path / "work"
    directory.mkdir()
    return directory


@pytest.fixture
def acme_request(work_dir: Path) -> ScaffoldRequest:
    return ScaffoldRequest(project_name="Acme", project_path=work_dir)


@pytest.fixture
def default_config() -> Config:
    return Config()


@pytest.fixture
def ledger() -> RollbackLedger:
    return RollbackLedger()


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
