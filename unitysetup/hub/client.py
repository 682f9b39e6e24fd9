"""
Unity Hub command-line client.

Every hub call runs through the platform's headless wrapper and tolerates
non-zero exit codes: the hub's exit status is unreliable on every platform
(on Windows it always exits 1), so callers judge success from the output.
"""

import logging
from pathlib import Path
from typing import Sequence

from unitysetup.core.models import ModuleRequest
from unitysetup.core.platform import PlatformProfile
from unitysetup.core.process import CommandResult, CommandRunner

logger = logging.getLogger(__name__)


class HubClient:
    """Thin wrapper over the hub's headless command surface."""

    def __init__(
        self, profile: PlatformProfile, hub_path: Path, runner: CommandRunner
    ):
        """
        Initialize hub client.

        Args:
            profile: Platform profile providing the headless wrapper
            hub_path: Path to the hub executable
            runner: Command runner
        """
        self.profile = profile
        self.hub_path = Path(hub_path)
        self.runner = runner

    def execute(self, args: Sequence[str]) -> CommandResult:
        """Run a hub command and return its captured output."""
        command = self.profile.hub_command(self.hub_path, args)
        return self.runner.run(command, ignore_return_code=True)

    def list_installed(self) -> CommandResult:
        return self.execute(["editors", "--installed"])

    def set_install_path(self, install_path: str) -> CommandResult:
        return self.execute(["install-path", "--set", str(install_path)])

    def install(self, version: str, changeset: str) -> CommandResult:
        return self.execute(
            ["install", "--version", version, "--changeset", changeset]
        )

    def install_modules(self, version: str, request: ModuleRequest) -> CommandResult:
        return self.execute(
            ["install-modules", "--version", version, *request.to_args()]
        )
