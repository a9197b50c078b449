"""Git repository initialization for generated tools."""

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_COMMAND = "git"


def is_git_installed() -> bool:
    """Check if git is available in PATH."""
    return shutil.which(GIT_COMMAND) is not None


def init_repository(path: Path) -> int | None:
    """Run `git init --quiet` in `path`.

    Returns the exit code, or None if git could not be found. A non-zero
    exit code is logged but not raised.
    """
    executable = shutil.which(GIT_COMMAND)
    if executable is None:
        logger.warning("git not found in PATH")
        return None

    result = subprocess.run(
        [executable, "init", "--quiet"],
        cwd=path,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        logger.warning(
            "git init exited with %d: %s", result.returncode, result.stderr.strip()
        )
    return result.returncode
