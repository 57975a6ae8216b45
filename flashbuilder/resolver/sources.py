"""Source folder collection and default application detection."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from flashbuilder.models import Resource

DEFAULT_SOURCE_FOLDER = "src/main/flex"


def collect_sources(
    resources: Iterable[Resource],
    compile_source_roots: Iterable[str],
) -> list[str]:
    """Return the source and resource directories that exist on disk.

    Resource directories come first, then compile source roots, each in
    declaration order.  Missing directories are dropped silently, which is
    the normal case for a module without resources.

    Examples::

        resources=[A, B], roots=[C] with only B and C present -> [B, C]
    """
    candidates = [r.directory for r in resources]
    candidates.extend(compile_source_roots)
    return [c for c in candidates if Path(c).is_dir()]


def detect_main_application(
    basedir: str | Path,
    source_folder: str = DEFAULT_SOURCE_FOLDER,
) -> Optional[str]:
    """Pick the default application file of a module.

    Looks at the direct children of ``<basedir>/<source_folder>`` and returns
    the name of the first plain file in lexicographic order, or ``None`` when
    the folder is missing or holds no files.  Hidden files (``.DS_Store``,
    ``.gitkeep``) are never candidates.
    """
    folder = Path(basedir) / source_folder
    if not folder.is_dir():
        return None

    names = sorted(
        child.name
        for child in folder.iterdir()
        if child.is_file() and not child.name.startswith(".")
    )
    return names[0] if names else None
