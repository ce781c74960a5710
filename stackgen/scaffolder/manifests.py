"""Structured builders for the JSON manifests written into a project.

Manifests are assembled as dictionaries rather than rendered from text so
the generated JSON is always well-formed.
"""

from __future__ import annotations

from typing import Any

from ..models import BackendOptions

# ---------------------------------------------------------------------------
# Backend
# ---------------------------------------------------------------------------

BACKEND_DEPENDENCIES: dict[str, str] = {
    "express": "^4.18.2",
    "mongoose": "^7.0.3",
    "cors": "^2.8.5",
    "dotenv": "^16.0.3",
    "helmet": "^7.0.0",
    "morgan": "^1.10.0",
}

BACKEND_DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^3.0.1",
    "eslint": "^8.38.0",
    "prettier": "^2.8.7",
    "eslint-config-prettier": "^8.8.0",
    "eslint-plugin-prettier": "^4.2.1",
}

BACKEND_TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript": "^5.0.4",
    "ts-node-dev": "^2.0.0",
    "@types/express": "^4.17.17",
    "@types/cors": "^2.8.13",
    "@types/morgan": "^1.9.4",
    "@types/node": "^18.15.11",
}


def backend_package_json(options: BackendOptions) -> dict[str, Any]:
    """Return the backend ``package.json`` for the chosen language variant."""
    scripts = {
        "dev": "nodemon src/index.js",
        "start": "node src/index.js",
        "lint": f'eslint "src/**/*.{options.ext}" --fix',
        "format": f'prettier --write "src/**/*.{options.ext}"',
    }
    dev_dependencies = dict(BACKEND_DEV_DEPENDENCIES)

    if options.typescript:
        scripts.update({
            "dev": "ts-node-dev --respawn --transpile-only src/index.ts",
            "build": "tsc",
            "start": "node dist/index.js",
        })
        dev_dependencies.update(BACKEND_TYPESCRIPT_DEV_DEPENDENCIES)

    return {
        "name": "backend",
        "version": "1.0.0",
        "private": True,
        "type": "module",
        "scripts": scripts,
        "dependencies": dict(BACKEND_DEPENDENCIES),
        "devDependencies": dev_dependencies,
    }


def tsconfig() -> dict[str, Any]:
    """Compiler configuration for the TypeScript backend."""
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "ESNext",
            "moduleResolution": "node",
            "esModuleInterop": True,
            "outDir": "./dist",
            "rootDir": "./src",
            "strict": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
        },
        "include": ["src/**/*"],
        "exclude": ["node_modules", "dist"],
    }


# ---------------------------------------------------------------------------
# Frontend
# ---------------------------------------------------------------------------

FRONTEND_EXTRA_SCRIPTS: dict[str, str] = {
    "format": 'prettier --write "src/**/*.{js,jsx,ts,tsx}"',
    "lint": 'eslint "src/**/*.{js,jsx,ts,tsx}" --fix',
}


def with_frontend_scripts(manifest: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *manifest* with ``format``/``lint`` scripts merged in.

    Existing scripts written by the scaffolding tool are preserved unless
    they share a name with one of the added scripts.
    """
    patched = dict(manifest)
    patched["scripts"] = {**manifest.get("scripts", {}), **FRONTEND_EXTRA_SCRIPTS}
    return patched


# ---------------------------------------------------------------------------
# Workspace root
# ---------------------------------------------------------------------------

WORKSPACES: tuple[str, ...] = ("frontend", "backend")


def workspace_manifest(project_name: str) -> dict[str, Any]:
    """Root ``package.json`` declaring frontend and backend as workspaces."""
    return {
        "name": project_name,
        "version": "1.0.0",
        "private": True,
        "workspaces": list(WORKSPACES),
        "scripts": {
            "dev": 'concurrently "npm run dev:frontend" "npm run dev:backend"',
            "dev:frontend": "npm run dev --workspace=frontend",
            "dev:backend": "npm run dev --workspace=backend",
            "build": "npm run build --workspaces",
            "start": "npm run start:backend",
            "start:backend": "npm run start --workspace=backend",
        },
        "devDependencies": {
            "concurrently": "^8.2.0",
        },
    }
