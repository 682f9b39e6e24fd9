"""
GitHub Actions step implementation.

Reads the step inputs, provisions the editor and publishes the results as
step outputs and environment variables for later steps.
"""

import logging

from unitysetup.ci import actions
from unitysetup.cli.parser import configure_logging
from unitysetup.cli.utils import config_from_args
from unitysetup.config import SetupConfig
from unitysetup.core.exceptions import UnitySetupError
from unitysetup.pipeline import run_setup

logger = logging.getLogger(__name__)


def read_inputs() -> dict:
    """Collect every known option from the step inputs."""
    return {name: actions.get_input(name) for name in SetupConfig.option_names()}


def run(args) -> int:
    """
    Run the action command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 when the step failed)
    """
    try:
        config = config_from_args(args, read_inputs())
        if config.verbose:
            configure_logging(verbose=True)

        result = run_setup(config)
    except UnitySetupError as e:
        logger.error(f"Error: {e}")
        return actions.set_failed(str(e))

    actions.set_output("unity-version", result.version)
    actions.set_output("unity-version-changeset", result.changeset)
    actions.set_output("unity-path", result.editor_path)
    actions.export_variable("UNITY_PATH", result.editor_path)
    actions.export_variable("UNITY_VERSION", result.version)
    return 0
