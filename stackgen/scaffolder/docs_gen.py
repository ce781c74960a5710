"""README generation for the project root, frontend and backend."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..models import FrontendTool, StackOptions
from ..utils import print_error, print_step, print_success
from .backend_gen import DEFAULT_PORT
from .templates import TemplateRenderer

# Template name -> output path relative to the project root
DOCUMENTS: dict[str, str] = {
    "docs/README.root.md.j2": "README.md",
    "docs/README.frontend.md.j2": "frontend/README.md",
    "docs/README.backend.md.j2": "backend/README.md",
}

_FRONTEND_DEV_PORTS: dict[FrontendTool, int] = {
    FrontendTool.VITE: 5173,
    FrontendTool.CRA: 3000,
}


def build_docs_context(project_name: str, options: StackOptions) -> dict[str, Any]:
    """Every substitution the README templates use, derived from *options*."""
    yarn = options.use_yarn
    return {
        "project_name": project_name,
        "typescript": options.typescript,
        "tool_label": options.frontend_tool.label,
        "language": "TypeScript" if options.typescript else "JavaScript",
        "package_manager_label": "Yarn" if yarn else "npm",
        "ext": "ts" if options.typescript else "js",
        "jsx_ext": "tsx" if options.typescript else "jsx",
        "install_cmd": "yarn" if yarn else "npm install",
        "dev_cmd": "yarn dev" if yarn else "npm run dev",
        "run_prefix": "yarn" if yarn else "npm run",
        "add_cmd": "yarn add" if yarn else "npm install",
        "add_dev_cmd": "yarn add -D" if yarn else "npm install -D",
        "dlx_cmd": "yarn dlx" if yarn else "npx",
        "frontend_port": _FRONTEND_DEV_PORTS[options.frontend_tool],
        "backend_port": DEFAULT_PORT,
    }


class DocumentationGenerator:
    """Writes the three README documents of a generated project."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(self, project_name: str, options: StackOptions) -> dict[str, str]:
        """Render all documents without touching the filesystem."""
        context = build_docs_context(project_name, options)
        return {
            output: self.renderer.render(template, context)
            for template, output in DOCUMENTS.items()
        }

    async def generate(
        self,
        project_path: str | Path,
        project_name: str,
        options: StackOptions,
    ) -> list[Path]:
        """Write the documents under *project_path*, replacing existing files."""
        print_step("Generating documentation...")
        root = Path(project_path)
        context = build_docs_context(project_name, options)
        written: list[Path] = []
        try:
            for template, output in DOCUMENTS.items():
                path = await self.renderer.render_to_file(template, root / output, context)
                written.append(path)
        except Exception as exc:
            print_error(f"Error generating documentation: {exc}")
            raise
        print_success("Documentation generated successfully")
        return written
