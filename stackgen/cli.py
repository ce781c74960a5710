"""Command-line entry point for stack-generator.

Usage::

    stack-generator
    python -m stackgen.cli

The tool is fully interactive: it asks for a project name and a stack, then
hands the freshly created project directory to the stack's driver.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from .config import Config
from .models import ProjectRequest
from .prompts import Prompter
from .runner import CommandRunner
from .stacks import AVAILABLE_STACKS, get_stack
from .utils import console, print_banner, print_error, print_success


class ProjectExistsError(Exception):
    """Raised when the target project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Directory {path} already exists. Please choose a different name."
        )


async def create_project(
    base_dir: str | Path,
    prompter: Prompter,
    runner: CommandRunner,
) -> ProjectRequest:
    """Prompt for a project and generate it under *base_dir*.

    The project directory is created with a single-level ``mkdir``; an
    existing directory is never reused.  Nothing is removed if a later step
    fails.

    Raises:
        ProjectExistsError: If ``base_dir/<name>`` already exists.
        StackNotImplementedError: If the chosen stack has no handler.
    """
    project_name = prompter.ask_project_name()
    stack_key = prompter.select(
        "Which stack would you like to use?",
        {key: stack.description for key, stack in AVAILABLE_STACKS.items()},
    )
    request = ProjectRequest(project_name=project_name, stack_key=stack_key)

    project_path = Path(base_dir) / request.project_name
    if project_path.exists():
        raise ProjectExistsError(project_path)

    stack = get_stack(request.stack_key)
    await asyncio.to_thread(project_path.mkdir)
    await stack.handler(project_path, prompter, runner)
    return request


def print_next_steps(request: ProjectRequest) -> None:
    """Print the literal follow-up commands for a fresh project."""
    console.print("Next steps:")
    console.print(f"[yellow]  cd {request.project_name}[/yellow]")
    console.print("[yellow]  npm install[/yellow]")
    console.print("[yellow]  npm start[/yellow]")
    console.print()


def main() -> None:
    """CLI entry point for ``stack-generator``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="stack-generator",
        description="Interactive project scaffolding for full-stack web applications",
        epilog=(
            "Environment:\n"
            "  STACKGEN_BASE_DIR         where the project folder is created (default: cwd)\n"
            "  STACKGEN_COMMAND_TIMEOUT  seconds before a package-manager command is killed\n"
            "  STACKGEN_CAPTURE_OUTPUT   capture package-manager output instead of streaming it\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.parse_args()

    print_banner("Welcome to Stack Generator!")

    try:
        config = Config.from_env()
        runner = CommandRunner(
            timeout=config.command_timeout,
            capture=config.capture_output,
        )
        request = asyncio.run(create_project(config.base_dir, Prompter(), runner))
    except KeyboardInterrupt:
        print_error("Aborted.")
        sys.exit(1)
    except Exception as exc:
        print_error("Error creating project:")
        print_error(str(exc))
        sys.exit(1)

    stack = get_stack(request.stack_key)
    console.print()
    print_success(f"{stack.name} project created successfully!")
    console.print()
    print_next_steps(request)


if __name__ == "__main__":
    main()
