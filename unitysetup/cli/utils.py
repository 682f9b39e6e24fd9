"""
Shared utilities for CLI commands.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from unitysetup.config import SetupConfig, load_config

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

# argparse dest -> option name
_ARG_OPTIONS = {
    "unity_version": "unity-version",
    "changeset": "unity-version-changeset",
    "modules": "unity-modules",
    "child_modules": "unity-modules-child",
    "install_path": "install-path",
    "self_hosted": "self-hosted",
}


def config_from_args(args, overrides: Optional[Dict[str, Any]] = None) -> SetupConfig:
    """
    Build the effective configuration for a command.

    Command-line flags win over the given overrides, which win over the
    YAML file.

    Args:
        args: Parsed command-line arguments
        overrides: Options from another source (e.g., CI inputs)

    Returns:
        Effective SetupConfig
    """
    options: Dict[str, Any] = dict(overrides or {})
    for dest, option in _ARG_OPTIONS.items():
        value = getattr(args, dest, None)
        if value is not None:
            options[option] = value

    if getattr(args, "verbose", False):
        options["verbose"] = True

    project_path = Path(options.pop("project-path", None) or args.project_path)
    config = load_config(project_path, getattr(args, "config", None), options)
    logger.debug(f"Effective configuration: {config}")
    return config


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def format_success_message(title: str, details: Dict[str, Any], width: int = 70) -> str:
    """
    Format a standardized success message.

    Args:
        title: Success message title
        details: Key-value pairs to display
        width: Width of message box

    Returns:
        Formatted message string
    """
    lines = ["=" * width, title, "=" * width, ""]
    for key, value in details.items():
        lines.append(f"{key}: {value}")
    lines.append("")
    return "\n".join(lines)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)
