"""Tool template definitions and lookup."""

from pptb_scaffold.templates.base import FileEntry, ToolTemplate
from pptb_scaffold.templates.html import HTML
from pptb_scaffold.templates.loader import get_package_templates_path
from pptb_scaffold.templates.react import REACT
from pptb_scaffold.templates.reactant import REACTANT
from pptb_scaffold.templates.reactfluent import REACTFLUENT
from pptb_scaffold.templates.reactmui import REACTMUI
from pptb_scaffold.templates.svelte import SVELTE
from pptb_scaffold.templates.vue import VUE

__all__ = [
    "FileEntry",
    "ToolTemplate",
    "TEMPLATES",
    "HTML",
    "REACT",
    "REACTANT",
    "REACTFLUENT",
    "REACTMUI",
    "SVELTE",
    "VUE",
    "UnknownTemplateAliasError",
    "format_aliases",
    "get_package_templates_path",
    "get_template_by_alias",
    "get_template_by_id",
    "resolve_template",
]

# Order matches the interactive selection list
TEMPLATES: tuple[ToolTemplate, ...] = (
    HTML,
    REACT,
    REACTANT,
    REACTFLUENT,
    REACTMUI,
    VUE,
    SVELTE,
)


class UnknownTemplateAliasError(LookupError):
    """Raised when a tool type alias matches no registered template."""

    def __init__(self, alias: str) -> None:
        super().__init__(f"Invalid tool type: {alias}")
        self.alias = alias
        self.valid_aliases = [template.aliases for template in TEMPLATES]


def format_aliases() -> str:
    """All valid aliases, grouped per template."""
    return ", ".join(", ".join(template.aliases) for template in TEMPLATES)


def get_template_by_alias(alias: str) -> ToolTemplate | None:
    """Find a template by any of its aliases (case-sensitive)."""
    for template in TEMPLATES:
        if alias in template.aliases:
            return template
    return None


def get_template_by_id(template_id: str) -> ToolTemplate | None:
    """Find a template by its id, e.g. "tool-vue"."""
    for template in TEMPLATES:
        if template.id == template_id:
            return template
    return None


def resolve_template(alias: str) -> ToolTemplate:
    """Resolve an alias to a template. Raises UnknownTemplateAliasError."""
    template = get_template_by_alias(alias)
    if template is None:
        raise UnknownTemplateAliasError(alias)
    return template
