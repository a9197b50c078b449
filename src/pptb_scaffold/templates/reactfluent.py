"""React with Fluent UI template."""

from pptb_scaffold.templates.base import ToolTemplate, ready_message
from pptb_scaffold.templates.react import react_files

REACTFLUENT = ToolTemplate(
    id="tool-reactfluent",
    aliases=("reactfluent",),
    name="React Fluent UI",
    files=react_files("reactfluent"),
    end_message=ready_message("React Fluent UI"),
)
