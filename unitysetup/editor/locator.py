"""
Installed editor lookup through Unity Hub.
"""

import logging
from typing import Optional

from unitysetup.core.platform import PlatformProfile
from unitysetup.hub.client import HubClient
from unitysetup.parsers import EditorListParser

logger = logging.getLogger(__name__)


class EditorLocator:
    """Find the executable of an installed editor version."""

    def __init__(
        self,
        hub: HubClient,
        profile: PlatformProfile,
        parser: Optional[EditorListParser] = None,
    ):
        self.hub = hub
        self.profile = profile
        self.parser = parser or EditorListParser()

    def locate(self, version: str) -> Optional[str]:
        """
        Return the editor executable for version, or None if not installed.

        Absence is a normal outcome of this probe, not an error.
        """
        logger.info(f"Looking for Unity version: {version} at path: {self.hub.hub_path}")
        output = self.hub.list_installed().stdout

        editor_path = self.parser.find(output, version)
        if not editor_path:
            installed = ", ".join(self.parser.parse(output)) or "none"
            logger.info(f"Unity {version} not installed (installed editors: {installed})")
            return None

        return editor_path + self.profile.editor_executable_suffix
