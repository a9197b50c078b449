"""Resolution of tool settings from flags, quick-mode defaults and prompts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

import click

from pptb_scaffold.config.schema import (
    DEFAULT_DESCRIPTION,
    DEFAULT_DISPLAY_NAME,
    PACKAGE_MANAGER_NAMES,
    PackageManagerName,
    ScaffoldConfig,
    ToolConfig,
    ToolConfigBuilder,
)
from pptb_scaffold.config.validation import (
    check_identifier,
    derive_identifier,
    validate_identifier,
)
from pptb_scaffold.console import console
from pptb_scaffold.templates import TEMPLATES, ToolTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldOverrides:
    """Values given explicitly on the command line. None means "not given"."""

    display_name: str | None = None
    identifier: str | None = None
    description: str | None = None
    package_manager: PackageManagerName | None = None
    git_init: bool | None = None


def _identifier_value_proc(value: str) -> str:
    """click value_proc that rejects invalid identifiers so click re-prompts."""
    result = validate_identifier(value)
    if result is not True:
        raise click.BadParameter(result)
    return value


class FieldResolver:
    """Resolves each tool setting in a fixed order.

    For every field: an explicit override wins, then quick mode applies a
    default silently, otherwise the user is prompted with that default.
    """

    def __init__(
        self,
        overrides: FieldOverrides | None = None,
        defaults: ScaffoldConfig | None = None,
        quick: bool = False,
        folder_name: str | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            overrides: Values from command-line flags.
            defaults: Merged user configuration used as the default layer.
            quick: Skip prompts and take defaults.
            folder_name: Base name of an explicitly given destination folder.
        """
        self.overrides = overrides or FieldOverrides()
        self.defaults = defaults or ScaffoldConfig()
        self.quick = quick
        self.folder_name = folder_name or None

    def resolve(self, template_id: str) -> ToolConfig:
        """Resolve all fields and return the frozen configuration.

        Raises:
            InvalidIdentifierError: If --tool-id was given and is invalid.
        """
        builder = ToolConfigBuilder(template_id=template_id)
        builder.display_name = self.resolve_display_name()
        builder.identifier = self.resolve_identifier(builder.display_name)
        builder.description = self.resolve_description()
        builder.git_init = self.resolve_git_init()
        builder.package_manager = self.resolve_package_manager()
        config = builder.build()
        logger.debug("Resolved tool configuration: %s", config)
        return config

    def resolve_display_name(self) -> str:
        """Tool display name; defaults to the destination folder name."""
        if self.overrides.display_name is not None:
            return self.overrides.display_name

        default = self.folder_name or self.defaults.display_name or DEFAULT_DISPLAY_NAME
        if self.quick:
            return default

        result: str = click.prompt("What's the name of your tool?", default=default)
        return result

    def resolve_identifier(self, display_name: str) -> str:
        """Tool identifier (package name); defaults to one derived from the name."""
        if self.overrides.identifier is not None:
            return check_identifier(self.overrides.identifier)

        default = derive_identifier(display_name)
        if self.quick:
            return default

        result: str = click.prompt(
            "What's the identifier of your tool?",
            default=default,
            value_proc=_identifier_value_proc,
        )
        return result

    def resolve_description(self) -> str:
        """Tool description; empty in quick mode unless configured."""
        if self.overrides.description is not None:
            return self.overrides.description

        if self.quick:
            return self.defaults.description or ""

        result: str = click.prompt(
            "What's the description of your tool?",
            default=self.defaults.description or DEFAULT_DESCRIPTION,
        )
        return result

    def resolve_git_init(self) -> bool:
        """Whether to initialize a git repository."""
        if self.overrides.git_init is not None:
            return self.overrides.git_init

        default = self.defaults.git_init if self.defaults.git_init is not None else True
        if self.quick:
            return default

        return click.confirm("Initialize a git repository?", default=default)

    def resolve_package_manager(self) -> PackageManagerName:
        """Package manager used to install and build the tool."""
        if self.overrides.package_manager is not None:
            return self.overrides.package_manager

        default = self.defaults.package_manager or "npm"
        if self.quick:
            return default

        choice = click.prompt(
            "Which package manager do you want to use?",
            type=click.Choice(PACKAGE_MANAGER_NAMES),
            default=default,
        )
        return cast(PackageManagerName, choice)


def select_template() -> ToolTemplate:
    """Prompt the user to pick a template from a numbered list."""
    console.print("[bold]What type of tool do you want to create?[/bold]")
    for i, template in enumerate(TEMPLATES, 1):
        console.print(f"  {i}. {template.name} [dim]({template.short_name})[/dim]")

    choice: int = click.prompt(
        "Select tool type",
        type=click.IntRange(1, len(TEMPLATES)),
        default=1,
    )
    return TEMPLATES[choice - 1]
