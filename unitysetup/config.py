"""YAML configuration and input normalization for unity-setup.

Options use the same hyphenated names everywhere (YAML keys, GitHub Actions
inputs): unity-version, unity-version-changeset, unity-modules,
unity-modules-child, install-path, project-path, self-hosted, verbose.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from unitysetup.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "unity-setup.yaml"


def parse_bool(value: Any) -> bool:
    """Interpret an input as a boolean; only 'true' (any case) is true."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() == "true"


def parse_list(value: Any) -> List[str]:
    """Interpret a newline-separated string or a list as trimmed names."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split("\n")
    elif isinstance(value, (list, tuple)):
        items = [str(item) for item in value]
    else:
        raise ConfigError(f"Expected a list or newline-separated string: {value!r}")
    return [item.strip() for item in items if item.strip()]


def _parse_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass
class SetupConfig:
    """Inputs of a provisioning run."""

    unity_version: Optional[str] = None
    unity_version_changeset: Optional[str] = None
    unity_modules: List[str] = field(default_factory=list)
    unity_modules_child: bool = False
    install_path: Optional[str] = None
    project_path: str = "."
    self_hosted: bool = False
    verbose: bool = False

    @classmethod
    def option_names(cls) -> List[str]:
        """Hyphenated option names, as used in YAML and CI inputs."""
        return [f.name.replace("_", "-") for f in fields(cls)]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SetupConfig":
        """Build a config from hyphenated option names."""
        return cls().merge(data)

    def merge(self, data: Mapping[str, Any]) -> "SetupConfig":
        """
        Return a copy with the given options applied.

        None values and empty strings leave the current value unchanged.

        Raises:
            ConfigError: If an option name is unknown
        """
        known = set(self.option_names())
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ConfigError(f"Unknown configuration options: {', '.join(unknown)}")

        changes: Dict[str, Any] = {}
        for key, value in data.items():
            if value is None or value == "":
                continue
            attr = key.replace("-", "_")
            if attr == "unity_modules":
                changes[attr] = parse_list(value)
            elif attr in ("unity_modules_child", "self_hosted", "verbose"):
                changes[attr] = parse_bool(value)
            else:
                parsed = _parse_str(value)
                if parsed is not None:
                    changes[attr] = parsed
        return replace(self, **changes)


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigError: If the file is required but missing, or is not valid YAML
    """
    if not config_file.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {config_file}")
    return data


def load_config(
    project_path: Path,
    config_file: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> SetupConfig:
    """
    Build the effective configuration.

    Precedence, lowest first: defaults, YAML file, overrides.

    Args:
        project_path: Project root; also where the default YAML file is looked up
        config_file: Explicit YAML file (must exist)
        overrides: Options taking precedence over the file

    Returns:
        Effective SetupConfig
    """
    if config_file is not None:
        data = load_yaml_config(Path(config_file), required=True)
    else:
        data = load_yaml_config(Path(project_path) / DEFAULT_CONFIG_FILE)

    config = SetupConfig(project_path=str(project_path)).merge(data)
    if overrides:
        config = config.merge(overrides)
    return config
