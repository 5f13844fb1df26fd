"""NuGet package restore for the finished solution."""

from __future__ import annotations

from pathlib import Path

from ..toolchain import DotnetCli
from ..utils import print_step


class PackageRestorer:
    def __init__(self, toolchain: DotnetCli) -> None:
        self.toolchain = toolchain

    async def restore(self, solution_path: Path) -> None:
        """Run ``dotnet restore`` against *solution_path*."""
        print_step("\nRestoring NuGet packages...")
        await self.toolchain.restore(solution_path)
