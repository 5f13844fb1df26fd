"""Project reference wiring between the generated layers."""

from __future__ import annotations

from pathlib import Path

from ..models import LayerSpec, resolve_references
from ..toolchain import DotnetCli
from ..utils import print_step


class ReferenceWirer:
    """Declares the fixed ``REFERENCE_EDGES`` topology with ``dotnet add``.

    One command is issued per source layer, listing all of its targets.
    References create no new paths, so nothing is recorded for rollback.
    """

    def __init__(self, toolchain: DotnetCli) -> None:
        self.toolchain = toolchain

    async def wire(self, root_path: Path, layers: list[LayerSpec]) -> list[tuple[str, str]]:
        """Add every reference edge under *root_path*.

        Returns:
            The declared ``(source, target)`` layer-name pairs, in order.
        """
        print_step("\nAdding project references...")
        declared: list[tuple[str, str]] = []

        for source, targets in resolve_references(layers):
            await self.toolchain.add_reference(
                source.project_file(root_path),
                [target.project_file(root_path) for target in targets],
            )
            declared.extend((source.name, target.name) for target in targets)

        return declared
