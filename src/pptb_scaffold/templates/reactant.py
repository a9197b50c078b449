"""React with Ant Design template."""

from pptb_scaffold.templates.base import ToolTemplate, ready_message
from pptb_scaffold.templates.react import react_files

REACTANT = ToolTemplate(
    id="tool-reactant",
    aliases=("reactant",),
    name="React Ant",
    files=react_files("reactant"),
    end_message=ready_message("React Ant Design"),
)
