"""Jinja2 template rendering for descriptor generation.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``flashbuilder/scaffolder/templates/`` directory and renders them with the
descriptor data model.  Templates are namespaced by template set
(``library/``, ``executable/``) and named after the file they produce, with
a ``.j2`` suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


def template_name(namespace: str, destination: str) -> str:
    """Return the template path producing *destination* in *namespace*.

    Examples::

        template_name("library", ".project") -> "library/.project.j2"
    """
    return f"{namespace}/{destination}{TEMPLATE_SUFFIX}"


# ---------------------------------------------------------------------------
# Renderer protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class Renderer(Protocol):
    """Anything able to render a named template into a file."""

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        ...


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 descriptor templates.

    Values are XML-escaped on output, and referencing a variable that is not
    in the context is an error rather than an empty string.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(enabled_extensions=("j2",)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"library/.project.j2"``).
            context: Dictionary of variables available inside the template.

        Raises:
            jinja2.TemplateNotFound: If the template does not exist.
            jinja2.TemplateError: If the template is malformed or references
                an undefined variable.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Any existing file is overwritten.  The content is encoded before the
        file is opened, so an encoding failure leaves the file untouched.
        Returns the output path.

        Raises:
            UnicodeEncodeError: If the rendered text is not valid UTF-8.
        """
        data = self.render(template_path, context).encode("utf-8")
        out = Path(output_path)
        out.write_bytes(data)
        return out

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root and use ``/`` separators.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob(f"*{TEMPLATE_SUFFIX}")
        )
