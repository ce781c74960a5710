"""Integration tests for the prompt-then-scaffold flow.

These tests drive ``create_project`` with scripted answers through every
generator and verify the resulting project tree: manifests, backend sources,
READMEs, and the commands handed to the package manager.

No Node.js toolchain is required; the command runner is faked.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from stackgen.cli import create_project


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def _tree(root: Path) -> set[str]:
    """Relative posix paths of every file under *root*."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldJavaScript:
    """Vite + JavaScript + npm."""

    async def test_full_tree(self, prompter_factory, fake_runner, tmp_path: Path):
        prompter = prompter_factory(
            names=["my-app"], selections=["MERN", "vite"], confirmations=[False, False]
        )
        await create_project(tmp_path, prompter, fake_runner)
        root = tmp_path / "my-app"

        assert _tree(root) == {
            "package.json",
            "README.md",
            "frontend/package.json",
            "frontend/README.md",
            "backend/package.json",
            "backend/README.md",
            "backend/.env",
            "backend/.env.example",
            "backend/.gitignore",
            "backend/src/index.js",
            "backend/src/models/Example.js",
            "backend/src/controllers/example.js",
            "backend/src/routes/example.js",
            "backend/src/config/db.js",
            "backend/src/middleware/error.js",
        }

    async def test_commands(self, prompter_factory, fake_runner, tmp_path: Path):
        prompter = prompter_factory(
            names=["my-app"], selections=["MERN", "vite"], confirmations=[False, False]
        )
        await create_project(tmp_path, prompter, fake_runner)
        root = tmp_path / "my-app"

        assert fake_runner.commands_in(root / "frontend") == [
            ["npm", "create", "vite@latest", ".", "--", "--template", "react"],
            ["npm", "install", "axios", "@tanstack/react-query", "react-router-dom"],
            ["npm", "install", "-D", "prettier", "eslint-config-prettier", "eslint-plugin-prettier"],
        ]
        assert fake_runner.commands_in(root / "backend") == [["npm", "install"]]
        assert len(fake_runner.calls) == 4

    async def test_manifests_are_valid(self, prompter_factory, fake_runner, tmp_path: Path):
        prompter = prompter_factory(
            names=["my-app"], selections=["MERN", "vite"], confirmations=[False, False]
        )
        await create_project(tmp_path, prompter, fake_runner)
        root = tmp_path / "my-app"

        workspace = _read_json(root / "package.json")
        assert workspace["name"] == "my-app"
        assert workspace["workspaces"] == ["frontend", "backend"]

        backend = _read_json(root / "backend" / "package.json")
        assert backend["scripts"]["start"] == "node src/index.js"
        assert "mongoose" in backend["dependencies"]

        frontend = _read_json(root / "frontend" / "package.json")
        assert "format" in frontend["scripts"]

    async def test_readmes(self, prompter_factory, fake_runner, tmp_path: Path):
        prompter = prompter_factory(
            names=["my-app"], selections=["MERN", "vite"], confirmations=[False, False]
        )
        await create_project(tmp_path, prompter, fake_runner)
        root = tmp_path / "my-app"

        readme = (root / "README.md").read_text(encoding="utf-8")
        assert readme.startswith("# my-app\n")
        assert "npm run dev" in readme
        assert "{{" not in readme


@pytest.mark.integration
class TestScaffoldTypeScript:
    """Create React App + TypeScript + Yarn."""

    async def test_full_tree(self, prompter_factory, fake_runner, tmp_path: Path):
        prompter = prompter_factory(
            names=["ts_app"], selections=["MERN", "cra"], confirmations=[True, True]
        )
        await create_project(tmp_path, prompter, fake_runner)
        root = tmp_path / "ts_app"

        files = _tree(root)
        assert "backend/tsconfig.json" in files
        assert "backend/src/index.ts" in files
        assert not any(f.startswith("backend/src/") and f.endswith(".js") for f in files)

    async def test_commands(self, prompter_factory, fake_runner, tmp_path: Path):
        prompter = prompter_factory(
            names=["ts_app"], selections=["MERN", "cra"], confirmations=[True, True]
        )
        await create_project(tmp_path, prompter, fake_runner)
        root = tmp_path / "ts_app"

        frontend = fake_runner.commands_in(root / "frontend")
        assert frontend[0] == ["yarn", "create", "react-app", ".", "--template", "typescript"]
        assert frontend[2] == [
            "yarn", "add", "-D",
            "prettier", "eslint-config-prettier", "eslint-plugin-prettier",
            "@types/node", "@types/react", "@types/react-dom",
        ]
        assert fake_runner.commands_in(root / "backend") == [["yarn"]]

    async def test_backend_manifest(self, prompter_factory, fake_runner, tmp_path: Path):
        prompter = prompter_factory(
            names=["ts_app"], selections=["MERN", "cra"], confirmations=[True, True]
        )
        await create_project(tmp_path, prompter, fake_runner)

        backend = _read_json(tmp_path / "ts_app" / "backend" / "package.json")
        assert backend["scripts"]["build"] == "tsc"
        assert "typescript" in backend["devDependencies"]

    async def test_readmes_mention_yarn(self, prompter_factory, fake_runner, tmp_path: Path):
        prompter = prompter_factory(
            names=["ts_app"], selections=["MERN", "cra"], confirmations=[True, True]
        )
        await create_project(tmp_path, prompter, fake_runner)
        root = tmp_path / "ts_app"

        readme = (root / "README.md").read_text(encoding="utf-8")
        assert "yarn dev" in readme
        assert "Yarn package manager" in readme
        assert "main.tsx" in (root / "frontend" / "README.md").read_text(encoding="utf-8")


@pytest.mark.integration
class TestScaffoldFailure:
    async def test_failed_install_leaves_partial_project(
        self, prompter_factory, failing_runner_factory, tmp_path: Path
    ):
        runner = failing_runner_factory(lambda args, cwd: args == ["npm", "install"])
        prompter = prompter_factory(
            names=["my-app"], selections=["MERN", "vite"], confirmations=[False, False]
        )

        with pytest.raises(Exception, match="exit code 1"):
            await create_project(tmp_path, prompter, runner)

        root = tmp_path / "my-app"
        assert (root / "backend" / "package.json").is_file()
        assert (root / "frontend" / "package.json").is_file()
        assert not (root / "package.json").exists()
