"""Writes a tool template's files into a destination directory.

Verbatim entries are copied byte for byte. Rendered entries are Jinja2
templates whose context is the resolved ToolConfig; referencing a name that
is not a config field is an error rather than an empty string.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from pptb_scaffold.config.schema import ToolConfig
from pptb_scaffold.templates import FileEntry, ToolTemplate, get_package_templates_path

logger = logging.getLogger(__name__)


class MaterializeError(Exception):
    """Raised when a template file cannot be written."""


class DestinationExistsError(MaterializeError):
    """Raised when a file already exists at the destination path."""


class MissingTemplateFileError(MaterializeError):
    """Raised when a manifest entry points at a file that is not bundled."""


class TemplateRenderError(MaterializeError):
    """Raised when a rendered file references an unknown placeholder."""


class Materializer:
    """Produces a project tree from a ToolTemplate and a ToolConfig."""

    def __init__(self, templates_root: Path | None = None) -> None:
        self.templates_root = templates_root or get_package_templates_path()
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_root)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def materialize(
        self, destination_root: Path, template: ToolTemplate, config: ToolConfig
    ) -> list[Path]:
        """Write every applicable manifest entry under `destination_root`.

        Entries are processed in manifest order. Nothing is rolled back if
        an entry fails; files written before the failure stay on disk.

        Returns:
            Paths of the files written, in manifest order.

        Raises:
            MaterializeError: On a destination collision, missing source file,
                render failure or filesystem error.
        """
        written: list[Path] = []
        context = config.to_dict()

        for entry in template.plan(config):
            target = destination_root / entry.destination
            self._write_entry(entry, target, context)
            logger.debug("Wrote %s", target)
            written.append(target)

        return written

    def render_entry(self, entry: FileEntry, context: dict[str, object]) -> str:
        """Render a single templated entry to text."""
        try:
            return self.env.get_template(entry.source).render(**context)
        except TemplateNotFound:
            raise MissingTemplateFileError(
                f"Template file not found: {entry.source}"
            ) from None
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to render {entry.source}: {e}") from e

    def _write_entry(
        self, entry: FileEntry, target: Path, context: dict[str, object]
    ) -> None:
        if target.exists():
            raise DestinationExistsError(f"File already exists: {target}")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            if entry.render:
                content = self.render_entry(entry, context)
                with target.open("x", encoding="utf-8", newline="") as f:
                    f.write(content)
            else:
                source = self.templates_root / entry.source
                if not source.is_file():
                    raise MissingTemplateFileError(
                        f"Template file not found: {entry.source}"
                    )
                shutil.copyfile(source, target)
        except OSError as e:
            raise MaterializeError(f"Failed to write {target}: {e}") from e
