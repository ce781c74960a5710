"""stack-generator configuration.

Typed runtime settings for a single scaffolding run. Settings use a Pydantic
v2 model so they are validated at construction time and can be built from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global stack-generator configuration.

    Created once by the CLI entry point and used to build the command runner
    and resolve where new projects are created.
    """

    base_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory in which the project folder is created",
    )
    command_timeout: Optional[int] = Field(
        default=None,
        ge=1,
        description="Per-command timeout in seconds; None waits indefinitely",
    )
    capture_output: bool = Field(
        default=False,
        description="Capture package-manager output instead of streaming it",
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STACKGEN_BASE_DIR, STACKGEN_COMMAND_TIMEOUT, STACKGEN_CAPTURE_OUTPUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("STACKGEN_BASE_DIR"):
            kwargs["base_dir"] = Path(os.environ["STACKGEN_BASE_DIR"])
        if os.environ.get("STACKGEN_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["STACKGEN_COMMAND_TIMEOUT"])
        if os.environ.get("STACKGEN_CAPTURE_OUTPUT"):
            kwargs["capture_output"] = (
                os.environ["STACKGEN_CAPTURE_OUTPUT"].strip().lower() in _TRUTHY
            )
        return cls(**kwargs)
