"""
Optional editor module installation.

The hub's output is the only success signal: the whole request succeeds when
the output mentions a successful installation or an already installed module,
and fails otherwise. There is no per-module accounting.
"""

import logging

from unitysetup.core.exceptions import ModuleInstallError
from unitysetup.core.models import ModuleRequest
from unitysetup.hub.client import HubClient

logger = logging.getLogger(__name__)

SUCCESS_MARKERS = ("successfully", "it's already installed")


class ModuleProvisioner:
    """Install optional modules into an installed editor."""

    def __init__(self, hub: HubClient):
        self.hub = hub

    def install(self, version: str, request: ModuleRequest):
        """
        Install modules for an editor version.

        Raises:
            ValueError: If request names no modules
            ModuleInstallError: If the hub output has no success marker
        """
        if not request:
            raise ValueError("At least one module must be requested")

        logger.info(f"Installing Unity modules: {', '.join(request.names)}")
        result = self.hub.install_modules(version, request)
        if not result.contains_any(*SUCCESS_MARKERS):
            raise ModuleInstallError(version, request.names, result.stdout)

        logger.info("Unity modules installed successfully")
