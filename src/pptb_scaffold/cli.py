"""Command-line interface for pptb-scaffold."""

import logging
from typing import cast

import click
from rich.logging import RichHandler
from rich.markup import escape

from pptb_scaffold import __version__
from pptb_scaffold.config.loader import (
    get_home_config_path,
    get_local_config_path,
    home_config_exists,
    load_config,
    local_config_exists,
)
from pptb_scaffold.config.preflight import run_all_checks
from pptb_scaffold.config.schema import PACKAGE_MANAGER_NAMES, PackageManagerName
from pptb_scaffold.console import console
from pptb_scaffold.generator import Generator, GeneratorOptions
from pptb_scaffold.prompts import FieldOverrides
from pptb_scaffold.templates import TEMPLATES

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"pptb-scaffold [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """pptb-scaffold - create Power Platform Tool Box tools."""
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        console.print("[bold]pptb-scaffold[/bold] - Power Platform Tool Box generator")
        console.print("\nRun [cyan]pptb-scaffold new[/cyan] to create a tool.")


@main.command()
@click.argument("destination", required=False)
@click.option(
    "--quick",
    "-q",
    is_flag=True,
    help="Quick mode, skip all optional prompts and use defaults.",
)
@click.option(
    "--tool-type",
    "--toolType",
    "-t",
    "tool_type",
    help="Tool type: " + ", ".join(t.short_name for t in TEMPLATES) + ".",
)
@click.option(
    "--tool-display-name",
    "--toolDisplayName",
    "-n",
    "display_name",
    help="Display name of the tool.",
)
@click.option("--tool-id", "--toolId", "identifier", help="Id of the tool.")
@click.option(
    "--tool-description",
    "--toolDescription",
    "description",
    help="Description of the tool.",
)
@click.option(
    "--pkg-manager",
    "--pkgManager",
    "package_manager",
    type=click.Choice(PACKAGE_MANAGER_NAMES),
    help="Package manager: npm, yarn or pnpm.",
)
@click.option(
    "--git-init/--no-git-init",
    "--gitInit/--no-gitInit",
    "git_init",
    default=None,
    help="Initialize a git repository.",
)
@click.option(
    "--skip-install",
    is_flag=True,
    help="Do not install dependencies after generating.",
)
def new(
    destination: str | None,
    quick: bool,
    tool_type: str | None,
    display_name: str | None,
    identifier: str | None,
    description: str | None,
    package_manager: str | None,
    git_init: bool | None,
    skip_install: bool,
) -> None:
    """Generate a tool ready for development.

    DESTINATION is the folder to create the tool in, absolute or relative to
    the current working directory. Use '.' for the current folder. If not
    provided, defaults to a folder named after the tool display name.
    """
    options = GeneratorOptions(
        destination=destination,
        quick=quick,
        tool_type=tool_type,
        overrides=FieldOverrides(
            display_name=display_name,
            identifier=identifier,
            description=description,
            package_manager=cast(PackageManagerName | None, package_manager),
            git_init=git_init,
        ),
        skip_install=skip_install,
    )
    result = Generator(options, defaults=load_config()).run()
    if result.aborted:
        logger.debug("Generation aborted: %s", result.error)


@main.command()
def templates() -> None:
    """List available tool types and their aliases."""
    console.print("[bold]Available Tool Types:[/bold]\n")
    for template in TEMPLATES:
        aliases = ", ".join(template.aliases)
        console.print(f"  [cyan]{template.short_name}[/cyan] {template.name}")
        console.print(f"    [dim]Aliases: {aliases}[/dim]")


@main.command()
def preflight() -> None:
    """Validate environment is ready (Node.js, package managers, git)."""
    if not run_all_checks():
        raise SystemExit(1)


@main.command("config")
def show_config() -> None:
    """Show the effective default settings."""
    config = load_config()
    console.print("\n[bold]Current Effective Configuration:[/bold]")
    console.print(f"  [dim]Global: {get_home_config_path()}[/dim]")
    console.print(f"  [dim]Local: {get_local_config_path()}[/dim]")
    console.print()

    for key, value in config.to_dict().items():
        console.print(f"  {key}: {escape(str(value))}")

    console.print()
    if home_config_exists():
        console.print("  [green]Global config: exists[/green]")
    else:
        console.print("  [dim]Global config: not found[/dim]")
    if local_config_exists():
        console.print("  [green]Local config: exists[/green]")
    else:
        console.print("  [dim]Local config: not found[/dim]")
