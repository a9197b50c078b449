"""Location of the bundled template files."""

from pathlib import Path

FILES_DIRNAME = "files"


def get_package_templates_path() -> Path:
    """Get path to the template files bundled with the package."""
    return Path(__file__).parent / FILES_DIRNAME
