"""
Install command implementation.

Provisions Unity Hub, the editor and its modules from command-line flags and
the optional YAML configuration.
"""

import logging

from unitysetup.cli.parser import configure_logging
from unitysetup.cli.utils import config_from_args, format_success_message
from unitysetup.pipeline import run_setup

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = config_from_args(args)
    if config.verbose:
        configure_logging(verbose=True)

    result = run_setup(config)

    print(
        format_success_message(
            "Unity Editor ready",
            {
                "Version": result.version,
                "Changeset": result.changeset,
                "Editor": result.editor_path,
                "Unity Hub": result.hub_path,
            },
        )
    )
    return 0
