"""Vue template."""

from pptb_scaffold.templates.base import (
    DEMO_COMPONENTS,
    ToolTemplate,
    copy,
    project_files,
    ready_message,
    render,
)

VUE = ToolTemplate(
    id="tool-vue",
    aliases=("vue",),
    name="Vue",
    files=(
        *project_files("vue"),
        copy("vite/tsconfig.node.json"),
        copy("vue/vite.config.ts"),
        render("vue/index.html"),
        copy("vue/src/main.ts"),
        copy("vue/src/App.vue"),
        copy("vue/src/style.css"),
        copy("vue/src/vite-env.d.ts"),
        *(copy(f"vue/src/components/{name}.vue") for name in DEMO_COMPONENTS),
        copy("vue/src/composables/useToolboxAPI.ts"),
    ),
    end_message=ready_message("Vue"),
)
