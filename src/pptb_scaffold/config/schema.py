"""Configuration schema for pptb-scaffold."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Literal, cast

PackageManagerName = Literal["npm", "yarn", "pnpm"]
PACKAGE_MANAGER_NAMES: tuple[PackageManagerName, ...] = ("npm", "yarn", "pnpm")

DEFAULT_DISPLAY_NAME = "My PPTB Tool"
DEFAULT_DESCRIPTION = "A Power Platform Tool Box tool"


@dataclass(frozen=True)
class ToolConfig:
    """Fully resolved settings for one generated tool.

    Read-only once built; the materializer and post-generation steps
    only ever see this value.
    """

    template_id: str
    display_name: str
    identifier: str
    description: str
    package_manager: PackageManagerName
    git_init: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary, used as the template render context."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class ToolConfigBuilder:
    """Mutable record filled in field by field during resolution."""

    template_id: str
    display_name: str | None = None
    identifier: str | None = None
    description: str | None = None
    package_manager: PackageManagerName | None = None
    git_init: bool | None = None

    def build(self) -> ToolConfig:
        """Freeze into a ToolConfig. Raises ValueError if a field is unset."""
        missing = [f.name for f in fields(self) if getattr(self, f.name) is None]
        if missing:
            raise ValueError(f"Unresolved fields: {', '.join(missing)}")
        return ToolConfig(
            template_id=self.template_id,
            display_name=cast(str, self.display_name),
            identifier=cast(str, self.identifier),
            description=cast(str, self.description),
            package_manager=cast(PackageManagerName, self.package_manager),
            git_init=cast(bool, self.git_init),
        )


@dataclass
class ScaffoldConfig:
    """User defaults read from config.yaml files.

    None values mean "not set" and fall through to the next layer.
    Explicit command-line flags always win over these values.
    """

    display_name: str | None = None
    description: str | None = None
    package_manager: PackageManagerName | None = None
    git_init: bool | None = None
    skip_install: bool | None = None

    def merge(self, other: ScaffoldConfig) -> ScaffoldConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new ScaffoldConfig instance.
        """
        return ScaffoldConfig(
            display_name=(
                other.display_name
                if other.display_name is not None
                else self.display_name
            ),
            description=(
                other.description if other.description is not None else self.description
            ),
            package_manager=(
                other.package_manager
                if other.package_manager is not None
                else self.package_manager
            ),
            git_init=other.git_init if other.git_init is not None else self.git_init,
            skip_install=(
                other.skip_install
                if other.skip_install is not None
                else self.skip_install
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScaffoldConfig:
        """Create a ScaffoldConfig from a dictionary.

        Unknown keys and values of the wrong type are ignored.
        """
        display_name_raw = data.get("display_name")
        display_name = str(display_name_raw) if display_name_raw else None
        description_raw = data.get("description")
        description = str(description_raw) if description_raw is not None else None

        package_manager_raw = data.get("package_manager")
        package_manager: PackageManagerName | None = None
        if package_manager_raw in PACKAGE_MANAGER_NAMES:
            package_manager = cast(PackageManagerName, package_manager_raw)

        git_init_raw = data.get("git_init")
        git_init = git_init_raw if isinstance(git_init_raw, bool) else None
        skip_install_raw = data.get("skip_install")
        skip_install = skip_install_raw if isinstance(skip_install_raw, bool) else None

        return cls(
            display_name=display_name,
            description=description,
            package_manager=package_manager,
            git_init=git_init,
            skip_install=skip_install,
        )


# Default configuration values (used when not specified anywhere).
# display_name and description stay unset: their fallbacks differ between
# quick mode and the interactive prompts.
DEFAULT_CONFIG = ScaffoldConfig(
    package_manager="npm",
    git_init=True,
    skip_install=False,
)
