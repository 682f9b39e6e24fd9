"""
Unity Hub installation.

HubProvisioner makes sure the hub exists at the platform's fixed location,
downloading and installing it with the platform-specific sequence otherwise:

- Linux: move the AppImage into ~/Unity Hub, mark it executable, pre-accept
  the EULA and best-effort install the system libraries the hub needs
- macOS: mount the disk image, copy the app bundle, unmount, delete the image
- Windows: run the installer silently, delete it
"""

import logging
import re
import shutil
import stat
from pathlib import Path
from typing import Callable

from unitysetup.core.download import download_tool
from unitysetup.core.exceptions import CommandError, HubInstallError
from unitysetup.core.platform import PlatformProfile
from unitysetup.core.process import CommandRunner

logger = logging.getLogger(__name__)

VOLUMES_DIR = "/Volumes"
APPLICATIONS_DIR = "/Applications"


class HubProvisioner:
    """Ensure Unity Hub is installed and return its path."""

    def __init__(
        self,
        profile: PlatformProfile,
        runner: CommandRunner,
        download: Callable[[str], Path] = download_tool,
        self_hosted: bool = False,
    ):
        """
        Initialize hub provisioner.

        Args:
            profile: Platform profile
            runner: Command runner
            download: Callable downloading a URL to a local file
            self_hosted: Skip sudo elevation (self-hosted runners have rights)
        """
        self.profile = profile
        self.runner = runner
        self.download = download
        self.self_hosted = self_hosted
        self._installers = {
            "linux": self._install_linux,
            "macos": self._install_macos,
            "windows": self._install_windows,
        }

    @property
    def sudo(self) -> bool:
        return not self.self_hosted

    def is_installed(self) -> bool:
        return self.profile.hub_path.exists()

    def ensure(self) -> Path:
        """
        Install the hub unless it is already present.

        Returns:
            Path to the hub executable

        Raises:
            HubInstallError: If an installation command or file operation fails
            DownloadError: If the installer cannot be downloaded
        """
        hub_path = self.profile.hub_path
        logger.info(f"Define Unity Hub path on platform: {self.profile.name}")

        if self.is_installed():
            logger.info(f"Unity Hub is already installed in: {hub_path}")
            return hub_path

        logger.info("Installing Unity Hub...")
        installer_path = self.download(self.profile.hub_installer_url)
        try:
            self._installers[self.profile.name](Path(installer_path))
        except (CommandError, OSError) as e:
            raise HubInstallError(f"Unity Hub installation failed: {e}") from e

        return hub_path

    def _install_linux(self, installer_path: Path):
        hub_path = self.profile.hub_path
        hub_path.parent.mkdir(parents=True, exist_ok=True)
        self.profile.hub_config_dir.mkdir(parents=True, exist_ok=True)

        shutil.move(str(installer_path), str(hub_path))
        mode = hub_path.stat().st_mode
        hub_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        self.profile.eula_sentinel.touch()

        try:
            self.runner.run(["apt-get", "update"], sudo=self.sudo)
            self.runner.run(
                ["apt-get", "install", "-y", *self.profile.system_packages],
                sudo=self.sudo,
            )
            logger.info("Unity Hub successfully installed")
        except CommandError as e:
            # apt-get is missing on some images
            logger.warning(f"Unity Hub installed with errors: {e}")

    def _install_macos(self, installer_path: Path):
        self.runner.run(["hdiutil", "mount", str(installer_path)], sudo=self.sudo)

        volumes = self.runner.run(["ls", VOLUMES_DIR]).stdout
        match = re.search(r"Unity Hub.*", volumes)
        if not match:
            raise HubInstallError(f"Unity Hub volume not mounted in {VOLUMES_DIR}")
        hub_volume = f"{VOLUMES_DIR}/{match.group(0).strip()}"

        self.runner.run(
            [
                "ditto",
                f"{hub_volume}/Unity Hub.app",
                f"{APPLICATIONS_DIR}/Unity Hub.app",
            ]
        )
        self.runner.run(["hdiutil", "detach", hub_volume], sudo=self.sudo)
        installer_path.unlink(missing_ok=True)
        logger.info("Unity Hub successfully installed")

    def _install_windows(self, installer_path: Path):
        self.runner.run([str(installer_path), "/S"])
        installer_path.unlink(missing_ok=True)
        logger.info("Unity Hub successfully installed")
