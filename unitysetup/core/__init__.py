"""
Core functionality for unity-setup.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    UnitySetupError,
    ConfigError,
    UnsupportedPlatformError,
    CommandError,
    DownloadError,
    VersionResolutionError,
    ProjectNotFoundError,
    VersionUnparsableError,
    ChangesetNotFoundError,
    InstallError,
    HubInstallError,
    InstallationFailedError,
    ModuleInstallError,
)

from .models import (
    VersionSpec,
    ModuleRequest,
)

from .platform import (
    PlatformProfile,
    detect_platform,
    get_platform_profile,
    clear_platform_cache,
)

from .process import (
    CommandResult,
    CommandRunner,
)

__all__ = [
    "UnitySetupError",
    "ConfigError",
    "UnsupportedPlatformError",
    "CommandError",
    "DownloadError",
    "VersionResolutionError",
    "ProjectNotFoundError",
    "VersionUnparsableError",
    "ChangesetNotFoundError",
    "InstallError",
    "HubInstallError",
    "InstallationFailedError",
    "ModuleInstallError",
    "VersionSpec",
    "ModuleRequest",
    "PlatformProfile",
    "detect_platform",
    "get_platform_profile",
    "clear_platform_cache",
    "CommandResult",
    "CommandRunner",
]
