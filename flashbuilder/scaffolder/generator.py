"""Descriptor generation driver.

Selects the template set for a module from its packaging kind and renders
each descriptor into the module base directory:

- ``swc`` (library): ``.actionScriptProperties``, ``.flexLibProperties``,
  ``.project``
- ``swf`` (executable): ``.actionScriptProperties``, ``.flexProperties``,
  ``.project``

Other packaging kinds produce nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import TemplateError

from flashbuilder.config import GeneratorConfig
from flashbuilder.exceptions import GenerationError
from flashbuilder.models import BuildSession, DataModel, PackagingKind
from flashbuilder.utils import print_warning

from .model_builder import DataModelBuilder
from .templates import Renderer, TemplateRenderer, template_name


# Template set -> descriptor files, in render order
DESCRIPTOR_FILES: dict[PackagingKind, tuple[str, ...]] = {
    PackagingKind.LIBRARY: (
        ".actionScriptProperties",
        ".flexLibProperties",
        ".project",
    ),
    PackagingKind.EXECUTABLE: (
        ".actionScriptProperties",
        ".flexProperties",
        ".project",
    ),
}


class DescriptorGenerator:
    """Generates the IDE descriptors of one module."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.model_builder = DataModelBuilder(self.config)

    # -- Public API --------------------------------------------------------

    def generate(self, session: BuildSession) -> list[Path]:
        """Generate the descriptors for ``session.project``.

        Returns:
            The written files, in render order.  Empty when the packaging
            kind has no descriptors.

        Raises:
            GenerationError: If a template is missing, fails to render, or
                its output cannot be encoded or written.  Files written
                before the failure are left in place.
        """
        project = session.project
        kind = PackagingKind.parse(project.packaging)
        if kind is None:
            if not self.config.quiet:
                print_warning(
                    f"Packaging '{project.packaging}' of {project.artifact_id} "
                    "has no descriptors -- skipping."
                )
            return []

        model = self.model_builder.build(session)
        return self.render_descriptors(kind, model)

    def render_descriptors(self, kind: PackagingKind, model: DataModel) -> list[Path]:
        """Render the template set of *kind* into the module base directory."""
        context = model.as_context()
        output_dir = Path(model.project.basedir)
        written: list[Path] = []

        for destination in DESCRIPTOR_FILES[kind]:
            template_path = template_name(kind.template_set, destination)
            try:
                path = self.renderer.render_to_file(
                    template_path, output_dir / destination, context
                )
            except (TemplateError, OSError, UnicodeError) as exc:
                raise GenerationError(
                    model.project.artifact_id,
                    f"Failed to generate {destination} from {template_path}: {exc}",
                ) from exc
            written.append(Path(path))

        return written
