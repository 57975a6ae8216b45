"""Shared pytest fixtures for the descriptor generator test suite.

Provides reusable fixtures for:
- An on-disk module layout (base dir, sources, resources, build dir)
- Host build models (module, artifacts, session modules)
- A quiet generator configuration
- A recording stub renderer
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from flashbuilder.config import GeneratorConfig
from flashbuilder.models import (
    BuildSession,
    Module,
    ResolvedArtifact,
    Resource,
    SessionModule,
)
from flashbuilder.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def quiet_config() -> GeneratorConfig:
    """Default configuration with console output switched off."""
    return GeneratorConfig(quiet=True)


# ---------------------------------------------------------------------------
# On-disk module layout
# ---------------------------------------------------------------------------

@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    """A module base directory with sources, resources and a main application.

    Layout::

        widgets/
            src/main/flex/Main.mxml
            src/main/flex/com/        (package folder, not a file)
            src/main/resources/
            target/
    """
    root = tmp_path / "widgets"
    flex = root / "src" / "main" / "flex"
    (flex / "com").mkdir(parents=True)
    (flex / "Main.mxml").write_text("<s:Application/>\n", encoding="utf-8")
    (root / "src" / "main" / "resources").mkdir(parents=True)
    (root / "target").mkdir()
    return root


def make_module(basedir: Path, packaging: str = "swc", **overrides: Any) -> Module:
    """Build a ``Module`` rooted at *basedir* with conventional folders."""
    fields: dict[str, Any] = {
        "group_id": "com.acme.ui",
        "artifact_id": "widgets",
        "version": "1.0.0",
        "basedir": basedir,
        "packaging": packaging,
        "build_directory": basedir / "target",
        "final_name": "widgets-1.0.0",
        "resources": [
            Resource(directory=str(basedir / "src" / "main" / "resources")),
            Resource(directory=str(basedir / "src" / "test" / "resources")),
        ],
        "compile_source_roots": [str(basedir / "src" / "main" / "flex")],
    }
    fields.update(overrides)
    return Module(**fields)


@pytest.fixture
def library_module(module_dir: Path) -> Module:
    return make_module(module_dir, "swc")


@pytest.fixture
def executable_module(module_dir: Path) -> Module:
    return make_module(module_dir, "swf", artifact_id="console")


# ---------------------------------------------------------------------------
# Artifacts & session
# ---------------------------------------------------------------------------

@pytest.fixture
def sibling_dir(tmp_path: Path) -> Path:
    """Base directory of another module built in the same session."""
    path = tmp_path / "core"
    path.mkdir()
    return path


@pytest.fixture
def session_modules(sibling_dir: Path) -> list[SessionModule]:
    return [
        SessionModule(
            group_id="com.acme.ui", artifact_id="core", version="1.0.0", basedir=sibling_dir
        ),
    ]


@pytest.fixture
def artifacts(tmp_path: Path) -> list[ResolvedArtifact]:
    """A realistic dependency list: session module, external libs, SDK, jar."""
    repo = tmp_path / "repo"
    return [
        ResolvedArtifact(
            group_id="com.acme.ui",
            artifact_id="core",
            version="1.0.0",
            type="swc",
            file=repo / "com" / "acme" / "ui" / "core-1.0.0.swc",
        ),
        ResolvedArtifact(
            group_id="com.greensock",
            artifact_id="tweenmax",
            version="12.1",
            type="swc",
            file=repo / "tweenmax-12.1.swc",
        ),
        ResolvedArtifact(
            group_id="org.apache.flex.framework",
            artifact_id="framework",
            version="4.16.1",
            type="swc",
            file=repo / "framework-4.16.1.swc",
        ),
        ResolvedArtifact(
            group_id="commons-io",
            artifact_id="commons-io",
            version="2.6",
            type="jar",
            file=repo / "commons-io-2.6.jar",
        ),
    ]


@pytest.fixture
def library_session(
    library_module: Module,
    artifacts: list[ResolvedArtifact],
    session_modules: list[SessionModule],
) -> BuildSession:
    return BuildSession(
        project=library_module, artifacts=artifacts, session_modules=session_modules
    )


@pytest.fixture
def executable_session(
    executable_module: Module,
    artifacts: list[ResolvedArtifact],
    session_modules: list[SessionModule],
) -> BuildSession:
    return BuildSession(
        project=executable_module, artifacts=artifacts, session_modules=session_modules
    )


# ---------------------------------------------------------------------------
# Renderer stub
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock TemplateRenderer that records render_to_file calls."""
    renderer = MagicMock(spec=TemplateRenderer)

    def mock_render_to_file(template_path: str, output_path, context):
        out = Path(output_path)
        out.write_text(f"<!-- Rendered from {template_path} -->\n", encoding="utf-8")
        return out

    renderer.render_to_file.side_effect = mock_render_to_file
    return renderer


@pytest.fixture
def module_factory():
    """The ``make_module`` helper, for tests that need custom modules."""
    return make_module
