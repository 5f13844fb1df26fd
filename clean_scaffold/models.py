"""Data models for a scaffolding run.

The layer set and the reference topology are fixed and expressed as
declarative tables (``LAYER_BLUEPRINTS`` and ``REFERENCE_EDGES``) so the whole
solution shape can be reviewed in one place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Letters, digits, "_", "." and "-", starting with a letter or digit. Such a name
# is a valid .NET project name and a plain YAML mapping key.
_VALID_NAME = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.-]*")


class TemplateKind(str, Enum):
    """``dotnet new`` template short names used for the generated layers."""

    WEB_API = "webapi"
    CLASS_LIBRARY = "classlib"
    TEST_SUITE = "xunit"


@dataclass(frozen=True)
class LayerBlueprint:
    """One row of the layer table, independent of the project name."""

    suffix: str
    kind: TemplateKind


@dataclass(frozen=True)
class LayerSpec:
    """A layer resolved against a concrete project name."""

    name: str
    suffix: str
    kind: TemplateKind

    def directory(self, root_path: Path) -> Path:
        return root_path / self.name

    def project_file(self, root_path: Path) -> Path:
        """Path of the ``.csproj`` that ``dotnet new`` writes for this layer."""
        return self.directory(root_path) / f"{self.name}.csproj"


@dataclass(frozen=True)
class ReferenceEdge:
    """Directed "depends on" relation from one layer to several others."""

    source: str
    targets: tuple[str, ...]


LAYER_BLUEPRINTS: tuple[LayerBlueprint, ...] = (
    LayerBlueprint("API", TemplateKind.WEB_API),
    LayerBlueprint("Domain", TemplateKind.CLASS_LIBRARY),
    LayerBlueprint("Application", TemplateKind.CLASS_LIBRARY),
    LayerBlueprint("Infrastructure", TemplateKind.CLASS_LIBRARY),
    LayerBlueprint("Shared", TemplateKind.CLASS_LIBRARY),
    LayerBlueprint("Tests", TemplateKind.TEST_SUITE),
)

REFERENCE_EDGES: tuple[ReferenceEdge, ...] = (
    ReferenceEdge("API", ("Domain", "Application", "Infrastructure")),
    ReferenceEdge("Application", ("Domain",)),
    ReferenceEdge("Infrastructure", ("Domain",)),
)


def build_layers(project_name: str) -> list[LayerSpec]:
    """Resolve ``LAYER_BLUEPRINTS`` into named layers, preserving table order."""
    return [
        LayerSpec(name=f"{project_name}.{bp.suffix}", suffix=bp.suffix, kind=bp.kind)
        for bp in LAYER_BLUEPRINTS
    ]


def resolve_references(
    layers: list[LayerSpec],
) -> list[tuple[LayerSpec, list[LayerSpec]]]:
    """Map ``REFERENCE_EDGES`` onto concrete layers.

    Raises:
        KeyError: If an edge names a suffix missing from *layers*.
    """
    by_suffix = {layer.suffix: layer for layer in layers}
    return [
        (by_suffix[edge.source], [by_suffix[target] for target in edge.targets])
        for edge in REFERENCE_EDGES
    ]


class ScaffoldRequest(BaseModel):
    """Validated command-line input for a single run."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(min_length=1)
    project_path: Path = Field(default_factory=Path.cwd)

    @field_validator("project_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be blank")
        if not _VALID_NAME.fullmatch(value):
            raise ValueError(
                f"'{value}' is not a valid project name (use letters, digits, '_', '.' "
                "and '-', starting with a letter or digit)"
            )
        return value

    @field_validator("project_path")
    @classmethod
    def _absolute_path(cls, value: Path) -> Path:
        return value.expanduser().absolute()

    @property
    def service_name(self) -> str:
        """Lowercased project name used for the container artifacts."""
        return self.project_name.lower()

    @property
    def root_path(self) -> Path:
        return self.project_path / self.project_name

    @property
    def layers(self) -> list[LayerSpec]:
        return build_layers(self.project_name)
