"""
Locate command implementation.

Only queries an existing Unity Hub; nothing is installed.
"""

import logging
from pathlib import Path

from unitysetup.cli.utils import config_from_args, print_error
from unitysetup.core.platform import detect_platform
from unitysetup.core.process import CommandRunner
from unitysetup.editor.locator import EditorLocator
from unitysetup.hub.client import HubClient
from unitysetup.version.resolver import VersionResolver

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Print the executable path of an installed editor.

    Returns:
        Exit code (0 if installed, 1 otherwise)
    """
    profile = detect_platform()
    if not profile.hub_path.exists():
        print_error("Unity Hub not installed", f"Expected at: {profile.hub_path}")
        return 1

    config = config_from_args(args)
    version = config.unity_version
    if not version:
        version, _ = VersionResolver().read_project_version(Path(config.project_path))

    hub = HubClient(profile, profile.hub_path, CommandRunner())
    editor_path = EditorLocator(hub, profile).locate(version)
    if not editor_path:
        print_error(f"Unity {version} is not installed")
        return 1

    print(editor_path)
    return 0
