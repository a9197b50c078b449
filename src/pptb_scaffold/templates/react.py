"""React template and the Vite/React files shared by its UI-library variants."""

from pptb_scaffold.templates.base import (
    DEMO_COMPONENTS,
    FileEntry,
    ToolTemplate,
    copy,
    project_files,
    ready_message,
    render,
)


def react_files(stack: str) -> tuple[FileEntry, ...]:
    """Manifest for a Vite + React stack.

    Build tooling, entry point and hooks come from the base React template;
    App and components come from `stack`.
    """
    return (
        *project_files(stack, tsconfig="react/tsconfig.json"),
        copy("vite/tsconfig.node.json"),
        copy("react/vite.config.ts"),
        render("react/index.html"),
        copy("react/src/main.tsx"),
        copy(f"{stack}/src/App.tsx"),
        copy("react/src/index.css"),
        copy("react/src/vite-env.d.ts"),
        *(copy(f"{stack}/src/components/{name}.tsx") for name in DEMO_COMPONENTS),
        copy("react/src/hooks/useToolboxAPI.ts"),
    )


REACT = ToolTemplate(
    id="tool-react",
    aliases=("react",),
    name="React",
    files=react_files("react"),
    end_message=ready_message("React"),
)
