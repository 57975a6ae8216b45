"""Pydantic v2 models for the Flash Builder descriptor generator.

Defines the read-only view of the host build (the module being processed,
its resolved artifacts and the other modules of the session) and the data
model handed to the templates.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PackagingKind(str, Enum):
    """Module packaging kinds that produce descriptors."""
    LIBRARY = "swc"
    EXECUTABLE = "swf"

    @property
    def template_set(self) -> str:
        """Template namespace rendered for this kind."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: str) -> Optional["PackagingKind"]:
        """Return the kind for a packaging string, ``None`` if unsupported."""
        try:
            return cls(value)
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# Host build models
# ---------------------------------------------------------------------------

class ModuleIdentity(BaseModel):
    """The (group, artifact, version) coordinates of a module or artifact."""
    model_config = ConfigDict(frozen=True)

    group_id: str = Field(..., description="Group identifier, e.g. 'com.acme.ui'")
    artifact_id: str = Field(..., description="Artifact identifier, e.g. 'widgets'")
    version: str = Field(..., description="Version string, e.g. '1.0.0-SNAPSHOT'")

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.group_id, self.artifact_id, self.version)


class Resource(BaseModel):
    """A declared resource entry of a module."""
    model_config = ConfigDict(frozen=True)

    directory: str = Field(..., description="Resource directory path")


class Module(ModuleIdentity):
    """The build unit descriptors are generated for."""
    basedir: Path = Field(..., description="Absolute module base directory")
    packaging: str = Field(..., description="Packaging kind, e.g. 'swc' or 'swf'")
    build_directory: Path = Field(..., description="Build output directory")
    final_name: str = Field(..., description="Base name of the built artifact")
    resources: list[Resource] = Field(default_factory=list)
    compile_source_roots: list[str] = Field(default_factory=list)
    name: str = Field(default="", description="Human-readable module name")
    description: str = Field(default="")

    @property
    def display_name(self) -> str:
        return self.name or self.artifact_id


class SessionModule(ModuleIdentity):
    """A module taking part in the current multi-module build."""
    basedir: Path = Field(..., description="Absolute module base directory")


class ResolvedArtifact(ModuleIdentity):
    """A dependency as resolved by the host build."""
    type: str = Field(..., description="Artifact type, e.g. 'swc', 'jar', 'rb.swc'")
    file: Optional[Path] = Field(
        default=None, description="Resolved file; absent for unbuilt session modules"
    )


class BuildSession(BaseModel):
    """Everything the host supplies for one generation run."""
    model_config = ConfigDict(frozen=True)

    project: Module
    artifacts: list[ResolvedArtifact] = Field(default_factory=list)
    session_modules: list[SessionModule] = Field(default_factory=list)

    def save(self, path: Path) -> Path:
        """Write the session as JSON so it can be replayed with :meth:`load`."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "BuildSession":
        """Load a session previously dumped by a host."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)


# ---------------------------------------------------------------------------
# Template data model
# ---------------------------------------------------------------------------

class DataModel(BaseModel):
    """Variables available to the descriptor templates.

    ``sources`` behaves as an ordered set: the first occurrence of a path is
    kept, later duplicates are dropped.  Callers pass canonical paths so that
    two spellings of one directory collapse into a single entry.
    """
    model_config = ConfigDict(frozen=True)

    project: Module
    dependencies: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    main_application: Optional[str] = None
    config_xml: str
    source_folder: str = Field(default="src/main/flex")

    @field_validator("sources")
    @classmethod
    def _unique_sources(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    def as_context(self) -> dict[str, Any]:
        """Return the template context using the descriptor variable names."""
        return {
            "project": self.project,
            "dependencies": list(self.dependencies),
            "sources": list(self.sources),
            "mainApplication": self.main_application,
            "configXml": self.config_xml,
            "sourceFolder": self.source_folder,
        }
