"""React frontend generation.

Project files come entirely from the external scaffolding tool (Vite or
Create React App).  This generator only runs that tool, layers extra
dependencies on top and patches ``format``/``lint`` scripts into the
manifest it produced.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..models import FrontendOptions
from ..runner import CommandRunner
from ..utils import load_json, print_error, print_step, save_json
from .manifests import with_frontend_scripts
from .package_manager import add_command, scaffold_command

FRONTEND_DEPENDENCIES: tuple[str, ...] = (
    "axios",
    "@tanstack/react-query",
    "react-router-dom",
)

FRONTEND_DEV_DEPENDENCIES: tuple[str, ...] = (
    "prettier",
    "eslint-config-prettier",
    "eslint-plugin-prettier",
)

FRONTEND_TYPESCRIPT_DEV_DEPENDENCIES: tuple[str, ...] = (
    "@types/node",
    "@types/react",
    "@types/react-dom",
)


def dev_dependencies(typescript: bool) -> list[str]:
    """Dev-only packages installed after scaffolding."""
    packages = list(FRONTEND_DEV_DEPENDENCIES)
    if typescript:
        packages.extend(FRONTEND_TYPESCRIPT_DEV_DEPENDENCIES)
    return packages


class FrontendGenerator:
    """Bootstraps the React frontend of a MERN project."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def commands(self, options: FrontendOptions) -> list[list[str]]:
        """The external commands run for *options*, in order."""
        manager = options.package_manager
        return [
            scaffold_command(options.tool, options.typescript, manager),
            add_command(manager, list(FRONTEND_DEPENDENCIES)),
            add_command(manager, dev_dependencies(options.typescript), dev=True),
        ]

    async def generate(self, frontend_path: str | Path, options: FrontendOptions) -> Path:
        """Scaffold the frontend into *frontend_path* (which must exist).

        Returns:
            Path to the patched ``package.json``.
        """
        print_step("Setting up frontend...")
        root = Path(frontend_path)
        try:
            for cmd in self.commands(options):
                await self.runner.run(cmd, cwd=root)
            return await self._patch_manifest(root)
        except Exception as exc:
            print_error(f"Error setting up frontend: {exc}")
            raise

    async def _patch_manifest(self, root: Path) -> Path:
        manifest_path = root / "package.json"
        manifest = await asyncio.to_thread(load_json, manifest_path)
        return await save_json(with_frontend_scripts(manifest), manifest_path)
