"""clean-scaffold configuration.

Typed settings for the scaffolding pipeline. Uses a Pydantic v2 model so
values are validated at construction time and can be loaded from environment
variables by the CLI entry point.
"""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global clean-scaffold configuration.

    Created once by the CLI entry point (usually via ``from_env``) and then
    handed to ``ScaffoldPipeline``, which passes it to every stage that needs
    it.
    """

    dotnet_binary: str = Field(default="dotnet", min_length=1)
    dotnet_version: str = Field(
        default="9.0", min_length=1, description="Tag used for the SDK and runtime images"
    )
    solution_format: Literal["sln", "slnx"] | None = Field(
        default=None,
        description="Passed to `dotnet new sln --format` when set; omitted otherwise",
    )
    command_timeout: int | None = Field(
        default=None, ge=1, description="Per-command timeout in seconds (None waits forever)"
    )
    host_port: int = Field(default=8000, ge=1, le=65535)
    container_port: int = Field(default=80, ge=1, le=65535)
    verbose: bool = False

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def sdk_image(self) -> str:
        """Base image for the build stage of the generated Dockerfile."""
        return f"mcr.microsoft.com/dotnet/sdk:{self.dotnet_version}"

    @property
    def runtime_image(self) -> str:
        """Base image for the runtime stage of the generated Dockerfile."""
        return f"mcr.microsoft.com/dotnet/aspnet:{self.dotnet_version}"

    @property
    def solution_extension(self) -> str:
        return self.solution_format or "sln"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_DOTNET, SCAFFOLD_DOTNET_VERSION, SCAFFOLD_SOLUTION_FORMAT,
            SCAFFOLD_COMMAND_TIMEOUT, SCAFFOLD_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_DOTNET"):
            kwargs["dotnet_binary"] = os.environ["SCAFFOLD_DOTNET"]
        if os.environ.get("SCAFFOLD_DOTNET_VERSION"):
            kwargs["dotnet_version"] = os.environ["SCAFFOLD_DOTNET_VERSION"]
        if os.environ.get("SCAFFOLD_SOLUTION_FORMAT"):
            kwargs["solution_format"] = os.environ["SCAFFOLD_SOLUTION_FORMAT"].strip().lower()
        if os.environ.get("SCAFFOLD_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["SCAFFOLD_COMMAND_TIMEOUT"])

        verbose = os.environ.get("SCAFFOLD_VERBOSE", "").strip().lower()
        kwargs["verbose"] = verbose in ("1", "true", "yes", "on")

        return cls(**kwargs)

    def template_context(self) -> dict[str, Any]:
        """Variables the configuration contributes to both support file templates."""
        return {
            "sdk_image": self.sdk_image,
            "runtime_image": self.runtime_image,
            "host_port": self.host_port,
            "container_port": self.container_port,
            "solution_extension": self.solution_extension,
        }
