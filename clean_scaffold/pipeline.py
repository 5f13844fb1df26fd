"""clean-scaffold pipeline orchestrator.

Generates a .NET Clean Architecture solution in five sequential stages:

1. STRUCTURE  -- Root directory and one ``dotnet new`` project per layer.
2. SOLUTION   -- ``<name>.sln`` with every layer registered.
3. REFERENCES -- Project references API -> Domain/Application/Infrastructure,
                 Application -> Domain, Infrastructure -> Domain.
4. SUPPORT    -- ``docker-compose.yml`` and ``Dockerfile``.
5. RESTORE    -- ``dotnet restore`` on the solution.

Every path a stage creates is recorded in a ``RollbackLedger``. If any stage
fails, the ledger is unwound exactly once and the run ends with a
``PipelineError``.

Usage::

    clean-scaffold Acme /tmp/work
    python -m clean_scaffold Acme
"""

from __future__ import annotations

import asyncio
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

from .cli import HelpRequested, UsageError, print_usage, validate
from .config import Config
from .models import LayerSpec, ScaffoldRequest
from .rollback import RollbackLedger
from .scaffolder import (
    DockerGenerator,
    PackageRestorer,
    ReferenceWirer,
    SolutionAssembler,
    StructureGenerator,
    TemplateRenderer,
)
from .toolchain import DotnetCli
from .utils import print_error, print_success, print_summary_table

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PipelineError(Exception):
    """Raised after a failed stage has been rolled back."""

    def __init__(self, stage: str, message: str, removed: list[Path] | None = None) -> None:
        self.stage = stage
        self.removed = removed or []
        super().__init__(f"Stage {stage}: {message}")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class ScaffoldResult:
    """Artifacts produced by a successful run."""

    root_path: Path
    solution_path: Path
    layers: list[LayerSpec]
    references: list[tuple[str, str]] = field(default_factory=list)
    support_files: list[Path] = field(default_factory=list)
    duration_seconds: float = 0.0


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Runs the scaffolding stages in order with rollback on failure.

    Attributes:
        config: Global configuration.
        toolchain: ``dotnet`` wrapper shared by every stage.
        ledger: Paths created so far in the current run.
    """

    def __init__(
        self,
        config: Config | None = None,
        toolchain: DotnetCli | None = None,
        ledger: RollbackLedger | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.toolchain = toolchain or DotnetCli(
            binary=self.config.dotnet_binary,
            timeout=self.config.command_timeout,
            verbose=self.config.verbose,
        )
        self.ledger = ledger if ledger is not None else RollbackLedger()

        self.structure = StructureGenerator(self.toolchain)
        self.solution = SolutionAssembler(self.toolchain, self.config.solution_format)
        self.references = ReferenceWirer(self.toolchain)
        self.docker = DockerGenerator(renderer or TemplateRenderer(), self.config)
        self.restorer = PackageRestorer(self.toolchain)

    async def run(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Execute every stage for *request*.

        Returns:
            A ``ScaffoldResult`` describing what was generated.

        Raises:
            PipelineError: If any stage failed. Everything recorded in the
                ledger up to that point has been removed.
        """
        start = time.monotonic()
        layers = request.layers
        stage = "STRUCTURE"

        try:
            root_path = await self.structure.create(request, layers, self.ledger)

            stage = "SOLUTION"
            solution_path = await self.solution.assemble(
                root_path, request.project_name, layers, self.ledger
            )

            stage = "REFERENCES"
            references = await self.references.wire(root_path, layers)

            stage = "SUPPORT"
            support_files = await self.docker.emit(
                root_path, request.project_name, request.service_name, self.ledger
            )

            stage = "RESTORE"
            await self.restorer.restore(solution_path)
        except Exception as exc:
            print_error(f"{stage} failed: {exc}")
            removed = self.ledger.rollback()
            raise PipelineError(stage, str(exc), removed) from exc

        return ScaffoldResult(
            root_path=root_path,
            solution_path=solution_path,
            layers=layers,
            references=references,
            support_files=support_files,
            duration_seconds=time.monotonic() - start,
        )


def _print_final_summary(request: ScaffoldRequest, result: ScaffoldResult) -> None:
    summary = {layer.suffix: layer.name for layer in result.layers}
    summary["Solution"] = result.solution_path.name
    for src, dst in result.references:
        key = f"{src} ->"
        summary[key] = f"{summary[key]}, {dst}" if key in summary else dst
    for path in result.support_files:
        summary[path.name] = str(path)
    summary["Duration"] = f"{result.duration_seconds:.1f}s"
    print_summary_table(summary, title=request.project_name)

    print_success(
        f"Project '{request.project_name}' created successfully in '{request.project_path}'"
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``clean-scaffold`` and ``python -m clean_scaffold``."""
    args = sys.argv[1:] if argv is None else argv

    try:
        request = validate(args)
    except HelpRequested:
        print_usage()
        sys.exit(0)
    except UsageError as exc:
        print_error(f"Error: {exc}")
        print_usage()
        sys.exit(1)

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid SCAFFOLD_* configuration: {exc}")
        sys.exit(1)

    pipeline = ScaffoldPipeline(config)
    try:
        result = asyncio.run(pipeline.run(request))
    except PipelineError:
        sys.exit(1)

    _print_final_summary(request, result)


if __name__ == "__main__":
    main()
