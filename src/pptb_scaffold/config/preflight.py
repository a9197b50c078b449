"""Preflight checks to validate environment."""

import shutil

from pptb_scaffold.console import console
from pptb_scaffold.git import is_git_installed
from pptb_scaffold.package_managers import (
    PACKAGE_MANAGERS,
    get_available_package_managers,
)


def check_node() -> bool:
    """Check that Node.js is available."""
    if shutil.which("node") is None:
        console.print("[red]✗[/red] Node.js not found - https://nodejs.org/")
        return False
    console.print("[green]✓[/green] Node.js is installed")
    return True


def check_git() -> bool:
    """Check that git is available. Only needed when initializing a repo."""
    if is_git_installed():
        console.print("[green]✓[/green] git is installed")
    else:
        console.print(
            "[yellow]⚠[/yellow] git not found - repositories will not be initialized"
        )
    return True


def check_package_managers() -> bool:
    """Check for installed package managers."""
    console.print("\n[bold]Package Managers:[/bold]")

    for manager in PACKAGE_MANAGERS:
        if manager.is_installed():
            console.print(f"  [green]✓[/green] {manager.name}")
        else:
            console.print(
                f"  [dim]✗[/dim] {manager.name} - [dim]{manager.install_info}[/dim]"
            )

    available = get_available_package_managers()
    if not available:
        console.print("\n[yellow]⚠[/yellow] No package managers detected.")
        return False

    console.print(f"\n[green]✓[/green] {len(available)} package manager(s) available")
    return True


CHECKS = [
    check_node,
    check_git,
    check_package_managers,
]


def run_all_checks() -> bool:
    """Run all preflight checks."""
    console.print("[bold]Running preflight checks...[/bold]\n")

    results = [check() for check in CHECKS]
    all_passed = all(results)

    if all_passed:
        console.print("\n[bold green]All preflight checks passed![/bold green]")
    else:
        console.print("\n[bold red]Some preflight checks failed.[/bold red]")

    return all_passed
