"""clean-scaffold stages -- each one step of generating a .NET solution.

Stages run in this order under ``ScaffoldPipeline``:

1. ``StructureGenerator`` -- root directory and one ``dotnet new`` per layer.
2. ``SolutionAssembler`` -- ``<name>.sln`` with every layer registered.
3. ``ReferenceWirer``    -- project references between the layers.
4. ``DockerGenerator``   -- ``docker-compose.yml`` and ``Dockerfile``.
5. ``PackageRestorer``   -- ``dotnet restore`` on the solution.

Quick usage::

    from clean_scaffold.scaffolder import StructureGenerator
    from clean_scaffold.toolchain import DotnetCli

    root = await StructureGenerator(DotnetCli()).create(request, request.layers, ledger)
"""

from clean_scaffold.scaffolder.docker_gen import DockerGenerator
from clean_scaffold.scaffolder.references import ReferenceWirer
from clean_scaffold.scaffolder.restorer import PackageRestorer
from clean_scaffold.scaffolder.solution import SolutionAssembler
from clean_scaffold.scaffolder.structure import StructureGenerator
from clean_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "DockerGenerator",
    "PackageRestorer",
    "ReferenceWirer",
    "SolutionAssembler",
    "StructureGenerator",
    "TemplateRenderer",
]
