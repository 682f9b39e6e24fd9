"""
Provisioning run orchestration.

One run resolves the editor version, ensures Unity Hub, installs the editor
and finally the requested modules. Steps run strictly in sequence; the first
failure aborts the run and nothing is rolled back.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from unitysetup.config import SetupConfig
from unitysetup.core.download import download_tool, fetch_page
from unitysetup.core.models import ModuleRequest
from unitysetup.core.platform import PlatformProfile, detect_platform
from unitysetup.core.process import CommandRunner
from unitysetup.editor.locator import EditorLocator
from unitysetup.editor.modules import ModuleProvisioner
from unitysetup.editor.provisioner import EditorProvisioner
from unitysetup.hub.client import HubClient
from unitysetup.hub.provisioner import HubProvisioner
from unitysetup.version.resolver import VersionResolver

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Outcome of a provisioning run."""

    version: str
    changeset: str
    editor_path: str
    hub_path: Path


def run_setup(
    config: SetupConfig,
    profile: Optional[PlatformProfile] = None,
    runner: Optional[CommandRunner] = None,
    download: Callable[[str], Path] = download_tool,
    fetch: Callable[[str], str] = fetch_page,
) -> SetupResult:
    """
    Provision the editor described by config.

    Args:
        config: Run inputs
        profile: Platform profile (detected when omitted)
        runner: Command runner
        download: Downloads installers to local files
        fetch: Returns the text of release pages

    Returns:
        SetupResult with the resolved version and editor path

    Raises:
        UnitySetupError: Any failure of any step
    """
    if profile is None:
        profile = detect_platform()
    if runner is None:
        runner = CommandRunner()

    logger.info(
        "Inputs:"
        f"\n  unity-version: {config.unity_version}"
        f"\n  unity-version-changeset: {config.unity_version_changeset}"
        f"\n  unity-modules: {config.unity_modules}"
        f"\n  unity-modules-child: {config.unity_modules_child}"
        f"\n  install-path: {config.install_path}"
        f"\n  project-path: {config.project_path}"
        f"\n  self-hosted: {config.self_hosted}"
    )

    spec = VersionResolver(fetch=fetch).resolve(
        config.unity_version,
        config.unity_version_changeset,
        Path(config.project_path),
    )

    hub_path = HubProvisioner(
        profile, runner, download=download, self_hosted=config.self_hosted
    ).ensure()

    hub = HubClient(profile, hub_path, runner)
    locator = EditorLocator(hub, profile)
    editor_path = EditorProvisioner(
        hub, locator, profile, runner, self_hosted=config.self_hosted
    ).provision(spec, config.install_path)

    request = ModuleRequest.from_names(
        config.unity_modules, config.unity_modules_child
    )
    if request:
        ModuleProvisioner(hub).install(spec.version, request)

    return SetupResult(
        version=spec.version,
        changeset=spec.changeset,
        editor_path=editor_path,
        hub_path=hub_path,
    )
