"""clean-scaffold -- generate a .NET Clean Architecture solution skeleton.

Creates API, Domain, Application, Infrastructure, Shared and Tests projects,
wires their references, adds Docker support files and restores packages.
Anything created is removed again if a step fails.
"""

__version__ = "0.1.0"
