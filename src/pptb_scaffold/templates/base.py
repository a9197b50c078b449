"""Base tool template definition."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pptb_scaffold.config.schema import ToolConfig
from pptb_scaffold.package_managers import get_package_manager

# Sample components shipped by every framework template
DEMO_COMPONENTS = ("ConnectionStatus", "DataverseAPIDemo", "EventLog", "ToolboxAPIDemo")


@dataclass(frozen=True)
class FileEntry:
    """One file operation in a template manifest.

    `source` is relative to the bundled template files directory and
    `destination` is relative to the generated project root.
    """

    source: str
    destination: str
    render: bool = False  # Render as a Jinja2 template instead of copying bytes
    when: Callable[[ToolConfig], bool] | None = None

    def is_included(self, config: ToolConfig) -> bool:
        """Check whether this entry applies to the given configuration."""
        return self.when is None or self.when(config)


@dataclass(frozen=True)
class ToolTemplate:
    """Definition of a tool template (one supported front-end stack)."""

    id: str  # e.g. "tool-react"
    aliases: tuple[str, ...]  # First alias is the canonical short name
    name: str  # Shown in the interactive selection
    files: tuple[FileEntry, ...]
    end_message: Callable[[ToolConfig], list[str]] | None = None

    @property
    def short_name(self) -> str:
        """Canonical alias used on the command line."""
        return self.aliases[0]

    def plan(self, config: ToolConfig) -> list[FileEntry]:
        """Return the manifest entries that apply to `config`, in order."""
        return [entry for entry in self.files if entry.is_included(config)]


def _strip_stack(source: str) -> str:
    """Drop the leading stack directory: "vue/src/main.ts" -> "src/main.ts"."""
    return source.split("/", 1)[-1]


def copy(source: str, destination: str | None = None) -> FileEntry:
    """Manifest entry copied byte for byte."""
    return FileEntry(source=source, destination=destination or _strip_stack(source))


def render(source: str, destination: str | None = None) -> FileEntry:
    """Manifest entry rendered with the tool configuration."""
    return FileEntry(
        source=source, destination=destination or _strip_stack(source), render=True
    )


def wants_git(config: ToolConfig) -> bool:
    """Predicate for files that only make sense in a git repository."""
    return config.git_init


def project_files(stack: str, tsconfig: str | None = None) -> tuple[FileEntry, ...]:
    """Files every template ships: manifest, tsconfig, ignore files, readme."""
    return (
        render(f"{stack}/package.json", "package.json"),
        copy(tsconfig or f"{stack}/tsconfig.json", "tsconfig.json"),
        FileEntry(source="shared/gitignore", destination=".gitignore", when=wants_git),
        copy("shared/npmignore", ".npmignore"),
        render("shared/README.md", "README.md"),
    )


def ready_message(
    label: str, dev_server: bool = True
) -> Callable[[ToolConfig], list[str]]:
    """Build an end message announcing the stack and its build commands."""

    def _message(config: ToolConfig) -> list[str]:
        manager = get_package_manager(config.package_manager)
        lines = [
            f"Your {label} tool is ready!",
            f"Build your tool with: {manager.script_command('build')}",
        ]
        if dev_server:
            lines.append(f"Start dev server with: {manager.script_command('dev')}")
        return lines

    return _message
