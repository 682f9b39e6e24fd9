"""
Unity editor installation.

EditorProvisioner probes for the requested version first and only drives the
hub installer when it is missing. After installing it probes again; an editor
that still is not listed is the one fatal installation outcome.
"""

import logging
from typing import Optional

from unitysetup.core.exceptions import InstallationFailedError, InstallError
from unitysetup.core.models import VersionSpec
from unitysetup.core.platform import PlatformProfile
from unitysetup.core.process import CommandRunner
from unitysetup.editor.locator import EditorLocator
from unitysetup.hub.client import HubClient

logger = logging.getLogger(__name__)


class EditorProvisioner:
    """Install a Unity editor version unless it is already present."""

    def __init__(
        self,
        hub: HubClient,
        locator: EditorLocator,
        profile: PlatformProfile,
        runner: CommandRunner,
        self_hosted: bool = False,
    ):
        """
        Initialize editor provisioner.

        Args:
            hub: Hub client
            locator: Editor locator sharing the same hub
            profile: Platform profile
            runner: Command runner for install directory preparation
            self_hosted: Skip sudo elevation
        """
        self.hub = hub
        self.locator = locator
        self.profile = profile
        self.runner = runner
        self.self_hosted = self_hosted

    def provision(self, spec: VersionSpec, install_path: Optional[str] = None) -> str:
        """
        Make sure the editor for spec is installed.

        Args:
            spec: Resolved version and changeset
            install_path: Custom editors directory configured in the hub

        Returns:
            Path to the editor executable

        Raises:
            InstallError: If spec lacks its version or changeset
            InstallationFailedError: If the editor is missing after installing
            CommandError: If the install directory cannot be prepared
        """
        if not spec.is_resolved:
            raise InstallError(f"Unresolved Unity version: {spec}")

        logger.info("Starting installation of Unity Editor")
        editor_path = self.locator.locate(spec.version)
        if editor_path:
            logger.info(f"Unity already installed at: {editor_path}")
            return editor_path

        logger.info("Unity not found, proceeding with installation...")
        if install_path:
            self.configure_install_path(install_path)

        logger.info(
            f"Installing Unity version {spec.version} with changeset {spec.changeset}"
        )
        self.hub.install(spec.version, spec.changeset)

        editor_path = self.locator.locate(spec.version)
        if not editor_path:
            raise InstallationFailedError(spec.version)

        logger.info(f"Unity Editor installed successfully: {editor_path}")
        return editor_path

    def configure_install_path(self, install_path: str):
        """Create the install directory and point the hub at it."""
        logger.info(f"Install path set: {install_path}")
        if self.profile.prepares_install_dir:
            sudo = not self.self_hosted
            # The hub may write as a different user
            self.runner.run(["mkdir", "-p", install_path], sudo=sudo)
            self.runner.run(["chmod", "-R", "o+rwx", install_path], sudo=sudo)
            logger.debug("Install directory prepared")

        self.hub.set_install_path(install_path)
        logger.info(f"Install path configured in Unity Hub: {install_path}")
