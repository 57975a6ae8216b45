"""Flash Builder descriptor generator configuration.

Typed settings for dependency filtering, path conventions and template
lookup.  All settings use Pydantic v2 models so they are validated at
construction time and can be serialised to/from JSON or environment
variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Global generator configuration.

    Instances are typically created once by the host entry point (or by
    :meth:`from_env`) and then passed to every component that needs them.
    """

    library_type: str = Field(
        default="swc", min_length=1, description="Artifact type of compiled libraries"
    )
    platform_group: str = Field(
        default="org.apache.flex",
        min_length=1,
        description="Group id fragment of platform-owned artifacts, never surfaced",
    )
    source_folder: str = Field(
        default="src/main/flex",
        description="Folder, relative to the module base directory, holding the main application",
    )
    bin_dir: str = Field(
        default="bin", description="Build output folder of in-session modules"
    )
    config_suffix: str = Field(
        default="-configs.xml", description="Suffix of the compiler configuration file"
    )
    template_dir: Optional[Path] = Field(
        default=None, description="Override for the bundled template directory"
    )
    quiet: bool = Field(default=False, description="Suppress console output")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            FLASHBUILDER_LIBRARY_TYPE, FLASHBUILDER_PLATFORM_GROUP,
            FLASHBUILDER_SOURCE_FOLDER, FLASHBUILDER_BIN_DIR,
            FLASHBUILDER_CONFIG_SUFFIX, FLASHBUILDER_TEMPLATE_DIR,
            FLASHBUILDER_QUIET.
        """
        kwargs: dict[str, Any] = {}
        for field_name in (
            "library_type",
            "platform_group",
            "source_folder",
            "bin_dir",
            "config_suffix",
        ):
            value = os.environ.get(f"FLASHBUILDER_{field_name.upper()}")
            if value:
                kwargs[field_name] = value

        if os.environ.get("FLASHBUILDER_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["FLASHBUILDER_TEMPLATE_DIR"])

        quiet = os.environ.get("FLASHBUILDER_QUIET", "")
        kwargs["quiet"] = quiet.strip().lower() in _TRUTHY

        return cls(**kwargs)
