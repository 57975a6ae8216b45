"""Build host entry point.

A build host calls :func:`execute` once per module during its lifecycle,
passing the module, its resolved compile dependencies and the modules of the
current session.  Hosts that run out of process can dump a
:class:`~flashbuilder.models.BuildSession` to JSON and call
:func:`execute_from_file` instead.
"""

from __future__ import annotations

from pathlib import Path

from flashbuilder.config import GeneratorConfig
from flashbuilder.exceptions import GenerationError
from flashbuilder.models import BuildSession
from flashbuilder.scaffolder.generator import DescriptorGenerator
from flashbuilder.utils import print_error, print_success, print_summary_table


def execute(session: BuildSession, config: GeneratorConfig | None = None) -> list[Path]:
    """Generate the IDE descriptors of ``session.project``.

    Args:
        session: The host's view of the build.
        config: Generator settings.  Read from the environment when omitted.

    Returns:
        The descriptor files written, empty for packaging kinds without
        descriptors.

    Raises:
        GenerationError: When generation fails; the host should abort.
    """
    config = config or GeneratorConfig.from_env()
    project = session.project

    try:
        written = DescriptorGenerator(config).generate(session)
    except GenerationError as exc:
        if not config.quiet:
            print_error(f"Descriptor generation failed: {exc}")
        raise

    if written and not config.quiet:
        print_summary_table(
            {
                "Module": ":".join(project.key),
                "Packaging": project.packaging,
                "Artifacts": str(len(session.artifacts)),
                "Files": ", ".join(p.name for p in written),
            },
            title="Flash Builder descriptors",
        )
        print_success(f"Wrote {len(written)} descriptors to {project.basedir}")

    return written


def execute_from_file(path: str | Path, config: GeneratorConfig | None = None) -> list[Path]:
    """Load a dumped :class:`BuildSession` from *path* and run :func:`execute`."""
    return execute(BuildSession.load(Path(path)), config)
