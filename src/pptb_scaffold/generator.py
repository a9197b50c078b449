"""Generator orchestrator - sequential scaffolding pipeline.

A run moves through a fixed sequence of states. Template selection, field
resolution and materialization can abort the run; once aborted, every later
state is skipped. Install and git init never abort: their exit codes are
logged and otherwise left for the user to notice in the command output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel

from pptb_scaffold.config.schema import ScaffoldConfig, ToolConfig
from pptb_scaffold.config.validation import InvalidIdentifierError
from pptb_scaffold.console import console
from pptb_scaffold.git import init_repository
from pptb_scaffold.materializer import Materializer, MaterializeError
from pptb_scaffold.package_managers import get_package_manager
from pptb_scaffold.prompts import FieldOverrides, FieldResolver, select_template
from pptb_scaffold.templates import (
    ToolTemplate,
    UnknownTemplateAliasError,
    format_aliases,
    resolve_template,
)

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the Power Platform Tool Box generator!"


class GeneratorState(Enum):
    """States of a generator run, in execution order."""

    INIT = "init"
    SELECT_TEMPLATE = "select_template"
    RESOLVE_FIELDS = "resolve_fields"
    MATERIALIZE = "materialize"
    INSTALL = "install"
    FINALIZE = "finalize"
    DONE = "done"


@dataclass(frozen=True)
class GeneratorOptions:
    """Command-line inputs for a single run."""

    destination: str | None = None
    quick: bool = False
    tool_type: str | None = None
    overrides: FieldOverrides = field(default_factory=FieldOverrides)
    skip_install: bool = False


@dataclass
class GenerationResult:
    """Runtime state and outcome of a generator run."""

    cwd: Path
    destination: Path | None = None
    state: GeneratorState = GeneratorState.INIT
    template: ToolTemplate | None = None
    config: ToolConfig | None = None
    written: list[Path] = field(default_factory=list)
    aborted: bool = False
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """True when every state ran to completion."""
        return self.state == GeneratorState.DONE and not self.aborted


def _folder_name_for(config: ToolConfig) -> str:
    """Folder name used when no destination is given.

    Names made only of dots would point at the working folder or its parent,
    so those fall back to the identifier.
    """
    name = config.display_name.strip().replace("/", "-").replace("\\", "-")
    if not name.strip("."):
        return config.identifier
    return name


class Generator:
    """Runs the scaffolding pipeline for one tool."""

    def __init__(
        self,
        options: GeneratorOptions,
        defaults: ScaffoldConfig | None = None,
        cwd: Path | None = None,
        materializer: Materializer | None = None,
    ) -> None:
        self.options = options
        self.defaults = defaults or ScaffoldConfig()
        self.materializer = materializer or Materializer()
        self.result = GenerationResult(cwd=(cwd or Path.cwd()).resolve())

    def run(self) -> GenerationResult:
        """Execute every state in order, stopping early on abort."""
        self._enter(GeneratorState.INIT)
        self._init()

        self._enter(GeneratorState.SELECT_TEMPLATE)
        template = self._select_template()
        if template is None:
            return self.result

        self._enter(GeneratorState.RESOLVE_FIELDS)
        config = self._resolve_fields(template)
        if config is None:
            return self.result
        destination = self.result.destination or self.result.cwd / _folder_name_for(
            config
        )
        self.result.destination = destination

        self._enter(GeneratorState.MATERIALIZE)
        if not self._materialize(template, config, destination):
            return self.result

        self._enter(GeneratorState.INSTALL)
        self._install(config, destination)

        self._enter(GeneratorState.FINALIZE)
        self._finalize(template, config, destination)

        self._enter(GeneratorState.DONE)
        return self.result

    def _enter(self, state: GeneratorState) -> None:
        self.result.state = state
        logger.debug("Entering state %s", state.value)

    def _abort(self, message: str) -> None:
        logger.debug("Aborting in state %s: %s", self.result.state.value, message)
        self.result.aborted = True
        self.result.error = message

    # -- States ------------------------------------------------------------

    def _init(self) -> None:
        console.print(
            Panel.fit(f"[bold]{WELCOME_MESSAGE}[/bold]", border_style="cyan")
        )
        if self.options.destination:
            self.result.destination = (
                self.result.cwd / self.options.destination
            ).resolve()
            logger.debug("Destination: %s", self.result.destination)

    def _select_template(self) -> ToolTemplate | None:
        if self.options.tool_type:
            try:
                template = resolve_template(self.options.tool_type)
            except UnknownTemplateAliasError as e:
                console.print(f"[red]Invalid tool type: {escape(e.alias)}[/red]")
                console.print(f"Possible types are: {format_aliases()}")
                self._abort(str(e))
                return None
        else:
            template = select_template()
        logger.debug("Selected template %s", template.id)
        self.result.template = template
        return template

    def _resolve_fields(self, template: ToolTemplate) -> ToolConfig | None:
        destination = self.result.destination
        resolver = FieldResolver(
            overrides=self.options.overrides,
            defaults=self.defaults,
            quick=self.options.quick,
            folder_name=destination.name if destination is not None else None,
        )
        try:
            config = resolver.resolve(template.id)
        except InvalidIdentifierError as e:
            console.print(
                f"[red]Invalid tool identifier '{escape(e.value or '')}': "
                f"{e.message}[/red]"
            )
            self._abort(e.message)
            return None
        self.result.config = config
        return config

    def _materialize(
        self, template: ToolTemplate, config: ToolConfig, destination: Path
    ) -> bool:
        try:
            self.result.written = self.materializer.materialize(
                destination, template, config
            )
        except MaterializeError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            self._abort(str(e))
            return False
        console.print(
            f"[dim]Created {len(self.result.written)} files in "
            f"{escape(str(destination))}[/dim]"
        )
        return True

    def _install(self, config: ToolConfig, destination: Path) -> None:
        if self.options.skip_install or self.defaults.skip_install:
            logger.debug("Skipping dependency installation")
            return

        manager = get_package_manager(config.package_manager)
        console.print(
            f"\nInstalling dependencies with {manager.install_command}...\n"
        )
        if manager.install(destination) is None:
            console.print(
                f"[yellow]{manager.name} was not found in PATH. "
                f"Run '{manager.install_command}' yourself.[/yellow]"
            )

    def _finalize(
        self, template: ToolTemplate, config: ToolConfig, destination: Path
    ) -> None:
        if config.git_init and init_repository(destination) is None:
            console.print(
                "[yellow]git was not found in PATH, skipping git init.[/yellow]"
            )

        manager = get_package_manager(config.package_manager)
        console.print("\n[bold green]Your tool has been created![/bold green]\n")
        console.print("To get started:\n")
        if destination != self.result.cwd:
            console.print(f"  cd {escape(destination.name)}")
        console.print(f"  {manager.script_command('build')}")
        console.print()

        if template.end_message is not None:
            for line in template.end_message(config):
                console.print(line)
