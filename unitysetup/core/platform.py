"""
Platform profiles for unity-setup.

This module maps the running operating system onto a read-only PlatformProfile
holding every platform-specific constant the provisioning flow needs: where
Unity Hub lives, where its installer is downloaded from, and how the hub is
invoked headlessly.

The profile is resolved once at startup and passed explicitly to every
component, so no other module inspects the operating system.

Usage:
    from unitysetup.core.platform import detect_platform

    profile = detect_platform()
    print(f"Hub path: {profile.hub_path}")
    print(profile.hub_command(profile.hub_path, ["editors", "--installed"]))
"""

import functools
import logging
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from unitysetup.core.exceptions import UnsupportedPlatformError

logger = logging.getLogger(__name__)

HUB_CDN_URL = "https://public-cdn.cloud.unity3d.com/hub/prod"

LINUX_SYSTEM_PACKAGES = (
    "libgconf-2-4",
    "libglu1",
    "libasound2",
    "libgtk2.0-0",
    "libgtk-3-0",
    "libnss3",
    "zenity",
    "xvfb",
)


@dataclass(frozen=True)
class PlatformProfile:
    """
    Platform-specific constants and command templates.

    Attributes:
        name: Normalized platform name ('linux', 'macos', 'windows')
        hub_path: Fixed install location of the Unity Hub executable
        hub_installer_url: Download URL of the hub installer artifact
        headless_prefix: Command words placed before the hub executable
        headless_flags: Arguments placed between the hub executable and hub args
        editor_executable_suffix: Relative suffix appended to listed editor paths
        prepares_install_dir: Whether a custom install dir needs mkdir/chmod
        system_packages: Packages installed best-effort alongside the hub
        hub_config_dir: Hub configuration directory (EULA sentinel lives here)
    """

    name: str
    hub_path: Path
    hub_installer_url: str
    headless_prefix: Tuple[str, ...] = ()
    headless_flags: Tuple[str, ...] = ("--", "--headless")
    editor_executable_suffix: str = ""
    prepares_install_dir: bool = False
    system_packages: Tuple[str, ...] = field(default_factory=tuple)
    hub_config_dir: Optional[Path] = None

    def hub_command(self, hub_path: Path, args: Sequence[str]) -> List[str]:
        """
        Wrap hub arguments into a full headless invocation.

        Example:
            >>> profile = linux_profile(Path("/home/runner"))
            >>> profile.hub_command(profile.hub_path, ["editors", "--installed"])[:2]
            ['xvfb-run', '--auto-servernum']
        """
        return [
            *self.headless_prefix,
            str(hub_path),
            *self.headless_flags,
            *args,
        ]

    @property
    def eula_sentinel(self) -> Optional[Path]:
        """Path of the file marking the hub EULA as accepted."""
        if self.hub_config_dir is None:
            return None
        return self.hub_config_dir / "eulaAccepted"


def linux_profile(home: Path) -> PlatformProfile:
    """Profile for Linux runners (AppImage hub under the user's home)."""
    return PlatformProfile(
        name="linux",
        hub_path=home / "Unity Hub" / "UnityHub.AppImage",
        hub_installer_url=f"{HUB_CDN_URL}/UnityHub.AppImage",
        # The hub needs a display even in headless mode
        headless_prefix=("xvfb-run", "--auto-servernum"),
        headless_flags=("--headless",),
        prepares_install_dir=True,
        system_packages=LINUX_SYSTEM_PACKAGES,
        hub_config_dir=home / ".config" / "Unity Hub",
    )


def macos_profile() -> PlatformProfile:
    """Profile for macOS runners (application bundle in /Applications)."""
    return PlatformProfile(
        name="macos",
        hub_path=Path("/Applications/Unity Hub.app/Contents/MacOS/Unity Hub"),
        hub_installer_url=f"{HUB_CDN_URL}/UnityHubSetup.dmg",
        editor_executable_suffix="/Contents/MacOS/Unity",
        prepares_install_dir=True,
    )


def windows_profile() -> PlatformProfile:
    """Profile for Windows runners."""
    return PlatformProfile(
        name="windows",
        hub_path=Path("C:/Program Files/Unity Hub/Unity Hub.exe"),
        hub_installer_url=f"{HUB_CDN_URL}/UnityHubSetup.exe",
    )


def _normalize_system(system: str) -> str:
    """
    Normalize an OS identifier.

    Accepts both platform.system() values ('Linux', 'Darwin', 'Windows') and
    sys.platform values ('linux', 'darwin', 'win32').
    """
    system = system.lower()
    if system.startswith("linux"):
        return "linux"
    elif system in ("darwin", "macos"):
        return "macos"
    elif system in ("windows", "win32"):
        return "windows"
    return system


def get_platform_profile(
    system: Optional[str] = None, home: Optional[Path] = None
) -> PlatformProfile:
    """
    Select the profile for an operating system.

    Args:
        system: OS identifier (defaults to the running OS)
        home: Home directory used by Linux paths (defaults to Path.home())

    Returns:
        PlatformProfile for the OS

    Raises:
        UnsupportedPlatformError: If the OS is not Linux, macOS or Windows
    """
    if system is None:
        system = platform.system()

    name = _normalize_system(system)
    if name == "linux":
        return linux_profile(home if home is not None else Path.home())
    elif name == "macos":
        return macos_profile()
    elif name == "windows":
        return windows_profile()
    raise UnsupportedPlatformError(system)


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformProfile:
    """
    Detect the profile of the running operating system.

    This function is cached - it only runs detection once per process.
    """
    profile = get_platform_profile()
    logger.debug(f"Detected platform: {profile.name}")
    return profile


def clear_platform_cache():
    """Clear the cached profile (primarily for tests)."""
    detect_platform.cache_clear()
