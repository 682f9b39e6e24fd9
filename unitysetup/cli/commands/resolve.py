"""
Resolve command implementation.
"""

import logging
from pathlib import Path

from unitysetup.cli.utils import config_from_args
from unitysetup.version.resolver import VersionResolver

logger = logging.getLogger(__name__)


def run(args) -> int:
    """Print the resolved version and changeset."""
    config = config_from_args(args)
    spec = VersionResolver().resolve(
        config.unity_version,
        config.unity_version_changeset,
        Path(config.project_path),
    )
    print(f"{spec.version} {spec.changeset}")
    return 0
