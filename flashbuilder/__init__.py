"""Flash Builder descriptor generator.

Resolves a module's compile dependencies and source folders from the host
build and renders the Flash Builder project descriptors (``.project``,
``.actionScriptProperties``, ``.flexLibProperties`` / ``.flexProperties``)
into the module base directory.

Usage::

    from flashbuilder import BuildSession, execute

    session = BuildSession(project=module, artifacts=artifacts, session_modules=modules)
    written = execute(session)
"""

from flashbuilder.config import GeneratorConfig
from flashbuilder.exceptions import GenerationError
from flashbuilder.models import (
    BuildSession,
    DataModel,
    Module,
    PackagingKind,
    ResolvedArtifact,
    Resource,
    SessionModule,
)
from flashbuilder.plugin import execute, execute_from_file

__all__ = [
    "BuildSession",
    "DataModel",
    "GenerationError",
    "GeneratorConfig",
    "Module",
    "PackagingKind",
    "ResolvedArtifact",
    "Resource",
    "SessionModule",
    "execute",
    "execute_from_file",
]
