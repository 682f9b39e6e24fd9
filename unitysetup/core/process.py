"""
Command execution for unity-setup.

CommandRunner spawns a command, optionally elevated through sudo, captures its
standard output and returns a CommandResult. Callers that cannot trust exit
codes (every Unity Hub call) pass ignore_return_code=True and decide success
from the captured text instead.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Sequence

from unitysetup.core.exceptions import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a command."""

    command: str
    stdout: str
    exit_code: int

    def satisfies(self, predicate: Callable[[str], bool]) -> bool:
        """Apply a success predicate to the captured output."""
        return predicate(self.stdout)

    def contains_any(self, *markers: str) -> bool:
        """Check whether any marker occurs in the captured output."""
        return self.satisfies(lambda text: any(marker in text for marker in markers))


def format_command(command: Sequence[str]) -> str:
    """Render an argument list for logs, quoting arguments with spaces."""
    return " ".join(f'"{arg}"' if " " in arg else arg for arg in command)


class CommandRunner:
    """Run commands sequentially and capture their standard output."""

    def run(
        self,
        command: Sequence[str],
        sudo: bool = False,
        ignore_return_code: bool = False,
    ) -> CommandResult:
        """
        Run a command to completion.

        Args:
            command: Program and arguments
            sudo: Prefix the command with sudo
            ignore_return_code: Return normally on non-zero exit codes

        Returns:
            CommandResult with captured stdout and exit code

        Raises:
            CommandError: If the program cannot be started, or exits non-zero
                and ignore_return_code is False
        """
        args = [str(arg) for arg in command]
        if sudo:
            args = ["sudo", *args]
        rendered = format_command(args)

        logger.info(f"[command]{rendered}")
        try:
            completed = subprocess.run(args, capture_output=True, text=True)
        except OSError as e:
            raise CommandError(rendered) from e

        if completed.stdout:
            logger.info(completed.stdout.rstrip())
        if completed.stderr:
            logger.info(completed.stderr.rstrip())

        if completed.returncode != 0 and not ignore_return_code:
            raise CommandError(rendered, completed.returncode, completed.stdout)

        return CommandResult(
            command=rendered,
            stdout=completed.stdout or "",
            exit_code=completed.returncode,
        )
