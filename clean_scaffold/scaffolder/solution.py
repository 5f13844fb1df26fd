"""Solution file creation and layer registration."""

from __future__ import annotations

from pathlib import Path

from ..models import LayerSpec
from ..rollback import RollbackLedger
from ..toolchain import DotnetCli
from ..utils import print_step, print_success


class SolutionAssembler:
    """Creates ``<name>.sln`` and registers every layer in it."""

    def __init__(self, toolchain: DotnetCli, solution_format: str | None = None) -> None:
        self.toolchain = toolchain
        self.solution_format = solution_format

    @property
    def extension(self) -> str:
        return self.solution_format or "sln"

    def solution_path(self, root_path: Path, project_name: str) -> Path:
        return root_path / f"{project_name}.{self.extension}"

    async def assemble(
        self,
        root_path: Path,
        project_name: str,
        layers: list[LayerSpec],
        ledger: RollbackLedger,
    ) -> Path:
        """Create the solution file and add the layers in table order.

        The solution path is recorded as soon as ``dotnet new sln`` has been
        issued.

        Returns:
            Path of the solution file.
        """
        solution_path = self.solution_path(root_path, project_name)

        print_step("Creating solution file...")
        try:
            await self.toolchain.new_solution(
                project_name, cwd=root_path, solution_format=self.solution_format
            )
        finally:
            ledger.record(solution_path)

        print_success("Adding projects to solution")
        for layer in layers:
            await self.toolchain.add_to_solution(solution_path, layer.directory(root_path))

        return solution_path
