"""Project structure generation.

Creates the solution root and one ``dotnet new`` project per layer, in the
fixed order of ``LAYER_BLUEPRINTS``.
"""

from __future__ import annotations

from pathlib import Path

from ..models import LayerSpec, ScaffoldRequest
from ..rollback import RollbackLedger
from ..toolchain import DotnetCli
from ..utils import print_step, print_success


class StructureGenerator:
    """Creates the root directory and the layer projects."""

    def __init__(self, toolchain: DotnetCli) -> None:
        self.toolchain = toolchain

    async def create(
        self,
        request: ScaffoldRequest,
        layers: list[LayerSpec],
        ledger: RollbackLedger,
    ) -> Path:
        """Create ``<project_path>/<project_name>`` and every layer inside it.

        The root is recorded only once it exists. Each layer directory is
        recorded right after its ``dotnet new`` command was issued, whether or
        not the command succeeded, so partial output is rolled back too.

        Raises:
            FileExistsError: If the root directory already exists.
            ToolchainError: If ``dotnet new`` fails for any layer.
        """
        root_path = request.root_path

        print_step(f"Creating project structure at '{root_path}'")
        root_path.mkdir(parents=True)
        ledger.record(root_path)

        for layer in layers:
            print_success(f"Creating {layer.kind.value} Layer: {layer.name}")
            try:
                await self.toolchain.new_project(layer.kind, layer.name, cwd=root_path)
            finally:
                ledger.record(layer.directory(root_path))

        return root_path
