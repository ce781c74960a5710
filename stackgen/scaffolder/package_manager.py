"""Command lines for npm / yarn and the React scaffolding tools."""

from __future__ import annotations

from ..models import FrontendTool, PackageManager


def install_command(manager: PackageManager) -> list[str]:
    """Install everything declared in the manifest of the working directory."""
    if manager is PackageManager.YARN:
        return ["yarn"]
    return ["npm", "install"]


def add_command(
    manager: PackageManager,
    packages: list[str],
    *,
    dev: bool = False,
) -> list[str]:
    """Add *packages* to the manifest of the working directory."""
    base = ["yarn", "add"] if manager is PackageManager.YARN else ["npm", "install"]
    if dev:
        base.append("-D")
    return [*base, *packages]


def scaffold_command(
    tool: FrontendTool,
    typescript: bool,
    manager: PackageManager,
) -> list[str]:
    """Bootstrap a React project into the current (empty) directory."""
    if tool is FrontendTool.VITE:
        template = "react-ts" if typescript else "react"
        if manager is PackageManager.YARN:
            return ["yarn", "create", "vite", ".", "--template", template]
        return ["npm", "create", "vite@latest", ".", "--", "--template", template]

    if manager is PackageManager.YARN:
        cmd = ["yarn", "create", "react-app", "."]
    else:
        cmd = ["npx", "create-react-app", "."]
    if typescript:
        cmd += ["--template", "typescript"]
    return cmd
