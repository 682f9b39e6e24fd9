"""
Fake command runner for testing components that shell out.

Records every command instead of spawning it and answers with canned output
registered per command fragment.
"""

from dataclasses import dataclass
from typing import List, Sequence

from unitysetup.core.exceptions import CommandError
from unitysetup.core.process import CommandResult, format_command


@dataclass
class RecordedCommand:
    """A command passed to FakeCommandRunner.run()."""

    args: List[str]
    sudo: bool
    ignore_return_code: bool

    @property
    def line(self) -> str:
        return " ".join(self.args)


class FakeCommandRunner:
    """CommandRunner replacement with scripted responses."""

    def __init__(self):
        self.commands: List[RecordedCommand] = []
        self._responses = []

    def respond(self, fragment: str, *outputs: str, exit_code: int = 0, fail: bool = False):
        """
        Register output for commands containing fragment.

        Several outputs are returned in order; the last one repeats.
        Later registrations take precedence over earlier ones.

        Args:
            fragment: Substring of the space-joined command
            outputs: Captured stdout values
            exit_code: Exit code to report
            fail: Simulate a program that cannot be started
        """
        self._responses.insert(
            0,
            {
                "fragment": fragment,
                "outputs": list(outputs) or [""],
                "exit_code": exit_code,
                "fail": fail,
            },
        )

    def run(
        self,
        command: Sequence[str],
        sudo: bool = False,
        ignore_return_code: bool = False,
    ) -> CommandResult:
        recorded = RecordedCommand(
            args=[str(arg) for arg in command],
            sudo=sudo,
            ignore_return_code=ignore_return_code,
        )
        self.commands.append(recorded)
        rendered = format_command(recorded.args)

        for response in self._responses:
            if response["fragment"] in recorded.line:
                if response["fail"]:
                    raise CommandError(rendered)
                outputs = response["outputs"]
                stdout = outputs.pop(0) if len(outputs) > 1 else outputs[0]
                exit_code = response["exit_code"]
                if exit_code != 0 and not ignore_return_code:
                    raise CommandError(rendered, exit_code, stdout)
                return CommandResult(rendered, stdout, exit_code)

        return CommandResult(rendered, "", 0)

    def lines(self) -> List[str]:
        """Space-joined commands in execution order."""
        return [command.line for command in self.commands]

    def find(self, fragment: str) -> List[RecordedCommand]:
        return [command for command in self.commands if fragment in command.line]
