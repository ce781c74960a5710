"""Pydantic v2 models describing a scaffolding request.

Every model here is short-lived: it is built from the user's answers, passed
by value into the generators and discarded when the run ends.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
INVALID_NAME_MESSAGE = (
    "Project name may only include letters, numbers, underscores and hyphens."
)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FrontendTool(str, Enum):
    """React build tool used to bootstrap the frontend."""
    VITE = "vite"
    CRA = "cra"

    @property
    def label(self) -> str:
        return "Vite" if self is FrontendTool.VITE else "Create React App"


class PackageManager(str, Enum):
    """Node package manager driving installs and scaffolding."""
    NPM = "npm"
    YARN = "yarn"


# ---------------------------------------------------------------------------
# Request & options
# ---------------------------------------------------------------------------

class ProjectRequest(BaseModel):
    """The project name and stack chosen at the first prompt round."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory name of the new project")
    stack_key: str = Field(..., description="Key into the stack registry, e.g. 'MERN'")

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not PROJECT_NAME_PATTERN.fullmatch(value):
            raise ValueError(INVALID_NAME_MESSAGE)
        return value


class BackendOptions(BaseModel):
    """What the backend generator needs to know."""

    model_config = ConfigDict(frozen=True)

    typescript: bool = False
    package_manager: PackageManager = PackageManager.NPM

    @property
    def ext(self) -> str:
        return "ts" if self.typescript else "js"


class FrontendOptions(BaseModel):
    """What the frontend generator needs to know."""

    model_config = ConfigDict(frozen=True)

    tool: FrontendTool = FrontendTool.VITE
    typescript: bool = False
    package_manager: PackageManager = PackageManager.NPM


class StackOptions(BaseModel):
    """Answers to the MERN-specific prompt round."""

    model_config = ConfigDict(frozen=True)

    frontend_tool: FrontendTool = Field(default=FrontendTool.VITE)
    typescript: bool = Field(default=False)
    package_manager: PackageManager = Field(default=PackageManager.NPM)

    @property
    def use_yarn(self) -> bool:
        return self.package_manager is PackageManager.YARN

    def backend_options(self) -> BackendOptions:
        return BackendOptions(
            typescript=self.typescript,
            package_manager=self.package_manager,
        )

    def frontend_options(self) -> FrontendOptions:
        return FrontendOptions(
            tool=self.frontend_tool,
            typescript=self.typescript,
            package_manager=self.package_manager,
        )
