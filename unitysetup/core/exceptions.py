"""
Centralized exception hierarchy for unity-setup.

Every failure that aborts a provisioning run derives from UnitySetupError so the
CLI can report it as the job's single failure message.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class UnitySetupError(Exception):
    """Base exception for all unity-setup errors."""

    pass


class ConfigError(UnitySetupError):
    """Configuration parsing or validation error."""

    pass


class UnsupportedPlatformError(UnitySetupError):
    """Raised when the running operating system has no platform profile."""

    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Unsupported platform: {system}")


# ============================================================================
# Process / Network Exceptions
# ============================================================================


class CommandError(UnitySetupError):
    """Raised when a command cannot be spawned or exits non-zero."""

    def __init__(self, command: str, exit_code: int = -1, output: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.output = output
        if exit_code == -1:
            msg = f"Failed to run command: {command}"
        else:
            msg = f"Command failed with exit code {exit_code}: {command}"
        super().__init__(msg)


class DownloadError(UnitySetupError):
    """Raised when a download fails after all retries."""

    pass


# ============================================================================
# Version Resolution Exceptions
# ============================================================================


class VersionResolutionError(UnitySetupError):
    """Base exception for version resolution errors."""

    pass


class ProjectNotFoundError(VersionResolutionError):
    """Raised when the project version file does not exist."""

    def __init__(self, version_file):
        self.version_file = version_file
        super().__init__(f"Project not found at path: {version_file}")


class VersionUnparsableError(VersionResolutionError):
    """Raised when the project version file matches no known format."""

    def __init__(self, version_file):
        self.version_file = version_file
        super().__init__(f"Can't parse editor version from: {version_file}")


class ChangesetNotFoundError(VersionResolutionError):
    """Raised when the changeset of a version cannot be determined."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Can't find Unity version changeset automatically: {version}")


# ============================================================================
# Installation Exceptions
# ============================================================================


class InstallError(UnitySetupError):
    """Base exception for installation errors."""

    pass


class HubInstallError(InstallError):
    """Raised when Unity Hub cannot be installed."""

    pass


class InstallationFailedError(InstallError):
    """Raised when the editor is still missing after installation."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Unity Editor installation failed: {version}")


class ModuleInstallError(InstallError):
    """Raised when hub output carries no module installation success marker."""

    def __init__(self, version: str, modules, output: str = ""):
        self.version = version
        self.modules = list(modules)
        self.output = output
        super().__init__(
            f"Unity modules installation failed for {version}: "
            f"{', '.join(self.modules)}"
        )
