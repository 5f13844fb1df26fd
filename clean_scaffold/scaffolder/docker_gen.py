"""Docker support file generation.

Renders the ``docker-compose.yml`` orchestration descriptor and the two-stage
``Dockerfile`` from the Jinja2 templates next to this module. Container
orchestrators parse both files structurally, so their layout is fixed and only
the project/service names (and configured image tags and ports) vary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config import Config
from ..rollback import RollbackLedger
from ..utils import print_step
from .templates import TemplateRenderer

COMPOSE_FILE_NAME = "docker-compose.yml"
DOCKERFILE_NAME = "Dockerfile"


class DockerGenerator:
    """Generates the Docker Compose file and Dockerfile for a solution."""

    # Template name -> (output file name, progress message), in write order
    _SUPPORT_FILES: dict[str, tuple[str, str]] = {
        "docker-compose.yml.j2": (COMPOSE_FILE_NAME, "Creating Docker Compose File..."),
        "Dockerfile.j2": (DOCKERFILE_NAME, "Creating Dockerfile..."),
    }

    def __init__(self, renderer: TemplateRenderer, config: Config) -> None:
        self.renderer = renderer
        self.config = config

    def build_context(self, project_name: str, service_name: str) -> dict[str, Any]:
        """Template rendering context for *project_name*."""
        return {
            "project_name": project_name,
            "service_name": service_name,
            "api_project": f"{project_name}.API",
            "dockerfile_name": DOCKERFILE_NAME,
            **self.config.template_context(),
        }

    async def emit(
        self,
        root_path: Path,
        project_name: str,
        service_name: str,
        ledger: RollbackLedger,
    ) -> list[Path]:
        """Write both support files into *root_path*.

        Each file is recorded in *ledger* as soon as it has been written, so a
        failure on the second file still rolls back the first.

        Returns:
            The written paths, compose file first.
        """
        context = self.build_context(project_name, service_name)
        written: list[Path] = []

        for template_name, (output_name, message) in self._SUPPORT_FILES.items():
            print_step(f"\n{message}")
            path = await self.renderer.render_to_file(
                template_name, root_path / output_name, context
            )
            ledger.record(path)
            written.append(path)

        return written
