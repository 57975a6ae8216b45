"""Identity matching between resolved artifacts and session modules."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from flashbuilder.models import ModuleIdentity, SessionModule


class ModuleMatcher:
    """Looks up session modules by their (group, artifact, version) triple.

    The index is built once from the session's modules.  Matching is exact
    and case-sensitive on all three coordinates.  Should two session modules
    share a triple, the first one listed wins.
    """

    def __init__(self, session_modules: Iterable[SessionModule]) -> None:
        self._index: dict[tuple[str, str, str], SessionModule] = {}
        for module in session_modules:
            self._index.setdefault(module.key, module)

    def __len__(self) -> int:
        return len(self._index)

    def match(self, artifact: ModuleIdentity) -> Optional[SessionModule]:
        """Return the session module built from *artifact*, if any."""
        return self._index.get(artifact.key)

    def is_session_module(self, artifact: ModuleIdentity) -> bool:
        return artifact.key in self._index
