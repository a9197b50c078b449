"""React with Material UI template."""

from pptb_scaffold.templates.base import ToolTemplate, ready_message
from pptb_scaffold.templates.react import react_files

REACTMUI = ToolTemplate(
    id="tool-reactmui",
    aliases=("reactmui",),
    name="React Material UI",
    files=react_files("reactmui"),
    end_message=ready_message("React Material UI"),
)
