"""Express + Mongoose backend generation.

Writes the backend manifest, the ``src/`` layout and one example resource
(model, controller, route), the database helper, the error middleware and the
environment files, then installs dependencies with the chosen package manager.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from ..models import BackendOptions
from ..runner import CommandRunner
from ..utils import dump_json, print_error, print_step, write_file
from .manifests import backend_package_json, tsconfig
from .package_manager import install_command
from .templates import TemplateRenderer

DEFAULT_PORT = 5000
DEFAULT_MONGODB_URI = "mongodb://localhost:27017/your-database"

SOURCE_DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/controllers",
    "src/models",
    "src/routes",
    "src/middleware",
    "src/config",
)


class BackendGenerator:
    """Generates the Express backend of a MERN project."""

    # Template name -> output path without extension
    _SOURCE_FILES: dict[str, str] = {
        "backend/src/index.j2": "src/index",
        "backend/src/models/Example.j2": "src/models/Example",
        "backend/src/controllers/example.j2": "src/controllers/example",
        "backend/src/routes/example.j2": "src/routes/example",
        "backend/src/config/db.j2": "src/config/db",
        "backend/src/middleware/error.j2": "src/middleware/error",
    }

    def __init__(self, renderer: TemplateRenderer, runner: CommandRunner) -> None:
        self.renderer = renderer
        self.runner = runner

    # -- Pure rendering ----------------------------------------------------

    def render_files(self, options: BackendOptions) -> dict[str, str]:
        """Render every backend file for *options*.

        Returns:
            Mapping of path relative to the backend directory to file content,
            in the order the files are written.
        """
        context = _build_context(options)
        files: dict[str, str] = {
            "package.json": dump_json(backend_package_json(options)),
        }
        for template_name, stem in self._SOURCE_FILES.items():
            files[f"{stem}.{options.ext}"] = self.renderer.render(template_name, context)

        env = self.renderer.render("backend/env.j2", context)
        files[".env"] = env
        files[".env.example"] = env
        files[".gitignore"] = self.renderer.render("backend/gitignore.j2", context)

        if options.typescript:
            files["tsconfig.json"] = dump_json(tsconfig())
        return files

    # -- Generation --------------------------------------------------------

    async def generate(self, backend_path: str | Path, options: BackendOptions) -> list[Path]:
        """Write the backend into *backend_path* and install its dependencies.

        The directory must already exist.  Files are written one after the
        other; the install runs last and a non-zero exit aborts generation.

        Returns:
            List of written file paths.
        """
        print_step("Setting up backend...")
        root = Path(backend_path)
        try:
            written = await self._write_files(root, options)
            await self.runner.run(install_command(options.package_manager), cwd=root)
        except Exception as exc:
            print_error(f"Error setting up backend: {exc}")
            raise
        return written

    async def _write_files(self, root: Path, options: BackendOptions) -> list[Path]:
        files = self.render_files(options)
        written: list[Path] = []

        manifest = root / "package.json"
        await asyncio.to_thread(write_file, manifest, files.pop("package.json"))
        written.append(manifest)

        for directory in SOURCE_DIRECTORIES:
            await asyncio.to_thread(
                (root / directory).mkdir, parents=True, exist_ok=True
            )

        for rel_path, content in files.items():
            out = root / rel_path
            await asyncio.to_thread(write_file, out, content)
            written.append(out)
        return written


def _build_context(options: BackendOptions) -> dict[str, Any]:
    """Template context; the language flag is the only branching input."""
    return {
        "typescript": options.typescript,
        "ext": options.ext,
        "port": DEFAULT_PORT,
        "mongodb_uri": DEFAULT_MONGODB_URI,
    }
