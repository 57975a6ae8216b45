"""Assembles the template data model for one module."""

from __future__ import annotations

from pathlib import Path

from flashbuilder.config import GeneratorConfig
from flashbuilder.models import BuildSession, DataModel, Module
from flashbuilder.resolver import (
    DependencyResolver,
    ModuleMatcher,
    collect_sources,
    detect_main_application,
)
from flashbuilder.utils import canonical_path, portable_path


class DataModelBuilder:
    """Builds a :class:`DataModel` from the host's view of the build."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()

    def build(self, session: BuildSession) -> DataModel:
        project = session.project
        resolver = DependencyResolver(ModuleMatcher(session.session_modules), self.config)

        return DataModel(
            project=project,
            dependencies=resolver.resolve(session.artifacts),
            sources=[
                portable_path(source)
                for source in collect_sources(project.resources, project.compile_source_roots)
            ],
            main_application=detect_main_application(
                project.basedir, self.config.source_folder
            ),
            config_xml=self.config_xml_path(project),
            source_folder=self.config.source_folder,
        )

    def config_xml_path(self, project: Module) -> str:
        """Canonical path of the compiler configuration file of *project*."""
        return canonical_path(
            Path(project.build_directory) / f"{project.final_name}{self.config.config_suffix}"
        )
