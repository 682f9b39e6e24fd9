"""
GitHub Actions runtime binding.

Reads step inputs from INPUT_* environment variables and reports results
through the runner's file commands (GITHUB_OUTPUT, GITHUB_ENV) and workflow
commands (::error::).
"""

import logging
import os
import sys
import uuid
from pathlib import Path
from typing import List, Mapping, Optional

from unitysetup.config import parse_bool, parse_list

logger = logging.getLogger(__name__)


def _input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, env: Optional[Mapping[str, str]] = None) -> str:
    """
    Get a step input.

    Example:
        >>> get_input("unity-version", {"INPUT_UNITY-VERSION": " 2022.3.10f1 "})
        '2022.3.10f1'
    """
    env = os.environ if env is None else env
    return env.get(_input_env_name(name), "").strip()


def get_input_list(name: str, env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Get a newline-separated input as a list, dropping blank lines."""
    return parse_list(get_input(name, env))


def get_input_bool(name: str, env: Optional[Mapping[str, str]] = None) -> bool:
    return parse_bool(get_input(name, env))


def _append_file_command(env_var: str, name: str, value: str) -> bool:
    """Append name/value to a runner file command; False if unavailable."""
    file_path = os.environ.get(env_var)
    if not file_path:
        return False

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(Path(file_path), "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    return True


def set_output(name: str, value: str):
    """Set a step output."""
    logger.debug(f"Output {name}={value}")
    if not _append_file_command("GITHUB_OUTPUT", name, value):
        print(f"::set-output name={name}::{value}")


def export_variable(name: str, value: str):
    """Export an environment variable for this and later steps."""
    os.environ[name] = value
    logger.debug(f"Export {name}={value}")
    if not _append_file_command("GITHUB_ENV", name, value):
        print(f"::set-env name={name}::{value}")


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error(message: str):
    """Emit an error annotation."""
    print(f"::error::{_escape_data(message)}", file=sys.stdout)


def set_failed(message: str) -> int:
    """
    Mark the step failed.

    Returns:
        Exit code to terminate the step with
    """
    error(message)
    return 1
