"""Plain HTML with TypeScript template."""

from pptb_scaffold.templates.base import (
    ToolTemplate,
    copy,
    project_files,
    ready_message,
)

HTML = ToolTemplate(
    id="tool-html",
    aliases=("html", "typescript", "ts"),
    name="HTML with TypeScript",
    files=(
        *project_files("html"),
        copy("html/src/index.html"),
        copy("html/src/app.ts"),
        copy("html/src/styles.css"),
    ),
    end_message=ready_message("HTML/TypeScript", dev_server=False),
)
