"""MERN stack driver: MongoDB, Express.js, React.js, Node.js.

Prompts for the stack options, creates ``frontend/`` and ``backend/``, runs
both generators concurrently, then writes the documentation and the root
workspace manifest.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..models import FrontendTool, PackageManager, StackOptions
from ..prompts import Prompter
from ..runner import CommandRunner
from ..scaffolder import (
    BackendGenerator,
    DocumentationGenerator,
    FrontendGenerator,
    TemplateRenderer,
)
from ..scaffolder.manifests import WORKSPACES, workspace_manifest
from ..utils import print_info, print_step, print_summary_table, save_json


def prompt_mern_options(prompter: Prompter) -> StackOptions:
    """Second prompt round: build tool, TypeScript, Yarn."""
    tool = prompter.select(
        "Choose your React build tool",
        {tool.value: tool.label for tool in FrontendTool},
    )
    typescript = prompter.confirm("Would you like to use TypeScript?", default=False)
    use_yarn = prompter.confirm("Would you like to use Yarn instead of npm?", default=False)
    return StackOptions(
        frontend_tool=FrontendTool(tool),
        typescript=typescript,
        package_manager=PackageManager.YARN if use_yarn else PackageManager.NPM,
    )


class MernStack:
    """Materializes a MERN monorepo inside an existing, empty project root."""

    def __init__(
        self,
        runner: CommandRunner,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.frontend_gen = FrontendGenerator(runner)
        self.backend_gen = BackendGenerator(self.renderer, runner)
        self.docs_gen = DocumentationGenerator(self.renderer)

    async def create(self, project_path: str | Path, options: StackOptions) -> Path:
        """Generate the whole stack under *project_path*.

        A failure in either generator is re-raised once both have settled;
        whatever the other one already wrote or installed stays on disk.

        Returns:
            Path to the root workspace manifest.
        """
        root = Path(project_path)
        directories = {name: root / name for name in WORKSPACES}

        for name, directory in directories.items():
            await asyncio.to_thread(directory.mkdir)
            print_info(f"Created {name} directory")

        results = await asyncio.gather(
            self.frontend_gen.generate(directories["frontend"], options.frontend_options()),
            self.backend_gen.generate(directories["backend"], options.backend_options()),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

        await self.docs_gen.generate(root, root.name, options)
        return await save_json(workspace_manifest(root.name), root / "package.json")


async def create_mern_app(
    project_path: Path,
    prompter: Prompter,
    runner: CommandRunner,
) -> None:
    """Registry handler for the ``MERN`` stack."""
    print_step("Configuring your MERN stack project...")
    options = prompt_mern_options(prompter)
    print_summary_table(
        {
            "Build tool": options.frontend_tool.label,
            "Language": "TypeScript" if options.typescript else "JavaScript",
            "Package manager": options.package_manager.value,
        },
        title="MERN configuration",
    )
    await MernStack(runner).create(project_path, options)
