"""External process invocation for package managers and scaffolding CLIs.

Every generator talks to the outside world through ``CommandRunner.run``:
one command, one working directory, one result.  Tests substitute a fake
runner so no real ``npm``/``yarn`` process is ever spawned.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from .utils import console, run_command


@dataclass
class CommandResult:
    """Outcome of a single external command."""

    args: list[str]
    cwd: Path
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return " ".join(self.args)


class CommandError(Exception):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, message: str, result: CommandResult | None = None):
        self.result = result
        super().__init__(message)


class CommandRunner:
    """Runs commands to completion, one at a time per caller.

    Args:
        timeout: Seconds before a command is killed; ``None`` never times out.
        capture: Capture output instead of streaming it to the terminal.
    """

    def __init__(
        self,
        timeout: int | None = None,
        capture: bool = False,
    ) -> None:
        self.timeout = timeout
        self.capture = capture

    async def run(self, args: list[str], cwd: str | Path) -> CommandResult:
        """Run *args* in *cwd* and wait for it to exit.

        Raises:
            CommandError: If the command exits non-zero (or cannot be started).
        """
        cwd = Path(cwd)
        console.print(f"[dim]$ {escape(' '.join(args))}  (in {escape(str(cwd))})[/dim]")
        returncode, stdout, stderr = await run_command(
            args,
            cwd=cwd,
            timeout=self.timeout,
            capture=self.capture,
        )
        result = CommandResult(
            args=list(args),
            cwd=cwd,
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )
        if not result.success:
            detail = f": {stderr}" if stderr else ""
            raise CommandError(
                f"Command failed with exit code {returncode}: "
                f"{result.command_line}{detail}",
                result,
            )
        return result
