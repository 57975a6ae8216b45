"""Compile dependency filtering and path resolution.

Maps each library dependency of the module to the path the IDE should link
against.  Modules built in the same session have not produced their final
artifact yet, so they are referenced at their expected build output
(``<basedir>/bin/<artifactId>.swc``) instead of the resolved file.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from flashbuilder.config import GeneratorConfig
from flashbuilder.exceptions import GenerationError
from flashbuilder.models import ResolvedArtifact
from flashbuilder.utils import portable_path

from .matcher import ModuleMatcher


class DependencyResolver:
    """Turns resolved artifacts into descriptor dependency paths."""

    def __init__(self, matcher: ModuleMatcher, config: GeneratorConfig | None = None) -> None:
        self.matcher = matcher
        self.config = config or GeneratorConfig()

    # -- Public API --------------------------------------------------------

    def is_relevant(self, artifact: ResolvedArtifact) -> bool:
        """Whether *artifact* is a library that belongs in the descriptor.

        Platform-owned artifacts (the SDK itself) are supplied by the IDE and
        are never listed.
        """
        return (
            artifact.type == self.config.library_type
            and self.config.platform_group not in artifact.group_id
        )

    def resolve(self, artifacts: Iterable[ResolvedArtifact]) -> list[str]:
        """Return one path per relevant artifact, in input order.

        Paths are canonical and use forward slashes.  Existence is not
        checked.

        Raises:
            GenerationError: If an artifact outside the session has no
                resolved file.
        """
        return [self.path_for(a) for a in artifacts if self.is_relevant(a)]

    def path_for(self, artifact: ResolvedArtifact) -> str:
        """Return the descriptor path of a single artifact."""
        session_module = self.matcher.match(artifact)
        if session_module is not None:
            target = (
                Path(session_module.basedir)
                / self.config.bin_dir
                / f"{artifact.artifact_id}.{self.config.library_type}"
            )
            return portable_path(target)

        if artifact.file is None:
            raise GenerationError(
                artifact.artifact_id,
                f"Dependency {':'.join(artifact.key)} has no resolved file",
            )
        return portable_path(artifact.file)
