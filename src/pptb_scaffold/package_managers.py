"""Package manager definitions and detection."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageManager:
    """Definition of a JavaScript package manager."""

    name: str
    cli_command: str
    install_args: tuple[str, ...]
    run_prefix: str  # Prefix for package.json scripts, e.g. "npm run"
    install_info: str

    @property
    def install_command(self) -> str:
        """Human-readable install command."""
        return " ".join((self.cli_command, *self.install_args))

    def script_command(self, script: str) -> str:
        """Command line that runs a package.json script."""
        return f"{self.run_prefix} {script}"

    def is_installed(self) -> bool:
        """Check if this package manager's CLI command is available in PATH."""
        return shutil.which(self.cli_command) is not None

    def install(self, cwd: Path) -> int | None:
        """Install dependencies in `cwd`, blocking until the command exits.

        Output goes straight to the terminal. Returns the exit code, or None
        if the executable could not be found.
        """
        executable = shutil.which(self.cli_command)
        if executable is None:
            logger.warning("%s not found in PATH", self.cli_command)
            return None
        cmd = [executable, *self.install_args]
        logger.debug("Running %s in %s", " ".join(cmd), cwd)
        result = subprocess.run(cmd, cwd=cwd)
        logger.debug("%s exited with %d", self.cli_command, result.returncode)
        return result.returncode


NPM = PackageManager(
    name="npm",
    cli_command="npm",
    install_args=("install",),
    run_prefix="npm run",
    install_info="https://nodejs.org/",
)

YARN = PackageManager(
    name="yarn",
    cli_command="yarn",
    install_args=(),
    run_prefix="yarn",
    install_info="https://yarnpkg.com/getting-started/install",
)

PNPM = PackageManager(
    name="pnpm",
    cli_command="pnpm",
    install_args=("install",),
    run_prefix="pnpm",
    install_info="https://pnpm.io/installation",
)

PACKAGE_MANAGERS: tuple[PackageManager, ...] = (NPM, YARN, PNPM)


def get_package_manager(name: str) -> PackageManager:
    """Find a package manager by name. Raises KeyError if unknown."""
    for manager in PACKAGE_MANAGERS:
        if manager.name == name:
            return manager
    raise KeyError(name)


def get_available_package_managers() -> list[PackageManager]:
    """Return list of package managers that are currently installed."""
    return [manager for manager in PACKAGE_MANAGERS if manager.is_installed()]
