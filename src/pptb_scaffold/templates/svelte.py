"""Svelte template."""

from pptb_scaffold.templates.base import (
    DEMO_COMPONENTS,
    ToolTemplate,
    copy,
    project_files,
    ready_message,
    render,
)

SVELTE = ToolTemplate(
    id="tool-svelte",
    aliases=("svelte",),
    name="Svelte",
    files=(
        *project_files("svelte"),
        copy("vite/tsconfig.node.json"),
        copy("svelte/vite.config.js"),
        copy("svelte/svelte.config.js"),
        render("svelte/index.html"),
        copy("svelte/src/main.ts"),
        copy("svelte/src/App.svelte"),
        copy("svelte/src/app.css"),
        copy("svelte/src/vite-env.d.ts"),
        *(copy(f"svelte/src/lib/{name}.svelte") for name in DEMO_COMPONENTS),
        copy("svelte/src/lib/stores.ts"),
    ),
    end_message=ready_message("Svelte"),
)
