"""Shared pytest fixtures for the stack-generator test suite.

Provides reusable fixtures for:
- Scripted prompt answers
- A recording command runner that never spawns real package managers
- Mock subprocess helpers
- Stack option variants
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from stackgen.models import FrontendTool, PackageManager, StackOptions
from stackgen.prompts import Prompter
from stackgen.runner import CommandError, CommandResult, CommandRunner


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------

class ScriptedPrompter(Prompter):
    """Answers prompts from pre-recorded queues and records the questions."""

    def __init__(
        self,
        names: list[str] | None = None,
        selections: list[str] | None = None,
        confirmations: list[bool] | None = None,
    ) -> None:
        self.names = list(names or [])
        self.selections = list(selections or [])
        self.confirmations = list(confirmations or [])
        self.questions: list[str] = []

    def ask_project_name(self) -> str:
        self.questions.append("project name")
        return self.names.pop(0)

    def select(self, message: str, choices: dict[str, str]) -> str:
        self.questions.append(message)
        answer = self.selections.pop(0)
        assert answer in choices, f"{answer!r} is not one of {list(choices)}"
        return answer

    def confirm(self, message: str, default: bool = False) -> bool:
        self.questions.append(message)
        return self.confirmations.pop(0)


@pytest.fixture
def prompter_factory():
    """Factory for ``ScriptedPrompter`` instances.

    Usage:
        def test_x(prompter_factory):
            prompter = prompter_factory(names=["app"], selections=["MERN", "vite"],
                                        confirmations=[False, False])
    """
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------

SCAFFOLDED_MANIFEST = {
    "name": "frontend",
    "private": True,
    "version": "0.0.0",
    "scripts": {"dev": "vite", "build": "vite build", "lint": "eslint ."},
    "dependencies": {"react": "^18.2.0", "react-dom": "^18.2.0"},
}


def is_scaffold_command(args: list[str]) -> bool:
    return any(
        token in ("vite", "vite@latest", "react-app", "create-react-app")
        for token in args
    )


class FakeRunner(CommandRunner):
    """Records every command instead of running it.

    Scaffolding commands write a minimal ``package.json`` into the working
    directory, the way Vite / Create React App would.  Commands matching
    *fail_when* raise ``CommandError`` with exit code 1.
    """

    def __init__(
        self,
        fail_when: Optional[Callable[[list[str], Path], bool]] = None,
    ) -> None:
        super().__init__()
        self.fail_when = fail_when
        self.calls: list[tuple[list[str], Path]] = []

    async def run(self, args: list[str], cwd: str | Path) -> CommandResult:
        cwd = Path(cwd)
        self.calls.append((list(args), cwd))
        if self.fail_when is not None and self.fail_when(list(args), cwd):
            result = CommandResult(args=list(args), cwd=cwd, returncode=1, stderr="boom")
            raise CommandError(f"Command failed with exit code 1: {' '.join(args)}", result)
        if is_scaffold_command(args):
            (cwd / "package.json").write_text(
                json.dumps(SCAFFOLDED_MANIFEST, indent=2), encoding="utf-8"
            )
        return CommandResult(args=list(args), cwd=cwd, returncode=0)

    def commands_in(self, cwd: Path) -> list[list[str]]:
        return [args for args, where in self.calls if where == cwd]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner that succeeds on every command."""
    return FakeRunner()


@pytest.fixture
def failing_runner_factory():
    """Factory for runners that fail on selected commands.

    Usage:
        def test_x(failing_runner_factory):
            runner = failing_runner_factory(lambda args, cwd: args == ["yarn"])
    """
    def factory(fail_when: Callable[[list[str], Path], bool]) -> FakeRunner:
        return FakeRunner(fail_when=fail_when)

    return factory


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


# ---------------------------------------------------------------------------
# Stack options
# ---------------------------------------------------------------------------

@pytest.fixture
def js_options() -> StackOptions:
    """Vite + JavaScript + npm, the default answers."""
    return StackOptions(
        frontend_tool=FrontendTool.VITE,
        typescript=False,
        package_manager=PackageManager.NPM,
    )


@pytest.fixture
def ts_yarn_options() -> StackOptions:
    """Create React App + TypeScript + Yarn."""
    return StackOptions(
        frontend_tool=FrontendTool.CRA,
        typescript=True,
        package_manager=PackageManager.YARN,
    )


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty project root with ``frontend/`` and ``backend/`` created."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    (project_dir / "frontend").mkdir()
    (project_dir / "backend").mkdir()
    yield project_dir
