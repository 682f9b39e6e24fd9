"""
Tests for configuration loading and input normalization.
"""

import pytest

from unitysetup.config import (
    DEFAULT_CONFIG_FILE,
    SetupConfig,
    load_config,
    load_yaml_config,
    parse_bool,
    parse_list,
)
from unitysetup.core.exceptions import ConfigError


class TestParsers:
    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("TRUE", True), (" True ", True), ("false", False),
         ("yes", False), ("", False), (None, False), (True, True), (False, False)],
    )
    def test_parse_bool(self, value, expected):
        assert parse_bool(value) is expected

    def test_parse_list_from_string(self):
        assert parse_list("android\n  ios \n\nwebgl\n") == ["android", "ios", "webgl"]

    def test_parse_list_from_list(self):
        assert parse_list(["android", " ", "ios"]) == ["android", "ios"]

    def test_parse_list_rejects_mapping(self):
        with pytest.raises(ConfigError):
            parse_list({"android": True})


class TestSetupConfig:
    def test_defaults(self):
        config = SetupConfig()
        assert config.unity_version is None
        assert config.unity_modules == []
        assert config.project_path == "."
        assert config.self_hosted is False

    def test_from_mapping(self):
        config = SetupConfig.from_mapping(
            {
                "unity-version": "2022.3.10f1",
                "unity-modules": "Android\nios",
                "unity-modules-child": "true",
                "self-hosted": "false",
            }
        )
        assert config.unity_version == "2022.3.10f1"
        assert config.unity_modules == ["Android", "ios"]
        assert config.unity_modules_child is True
        assert config.self_hosted is False

    def test_empty_values_keep_current(self):
        base = SetupConfig(unity_version="2022.3.10f1", install_path="/opt")
        merged = base.merge({"unity-version": "", "install-path": None})
        assert merged == base

    def test_unknown_option(self):
        with pytest.raises(ConfigError, match="unity-verison"):
            SetupConfig.from_mapping({"unity-verison": "2022.3.10f1"})

    def test_numeric_yaml_values_become_strings(self):
        config = SetupConfig.from_mapping({"install-path": 42})
        assert config.install_path == "42"

    def test_option_names(self):
        assert "unity-version-changeset" in SetupConfig.option_names()
        assert "project-path" in SetupConfig.option_names()


class TestLoadConfig:
    def test_missing_optional_file(self, temp_dir):
        assert load_yaml_config(temp_dir / DEFAULT_CONFIG_FILE) == {}

    def test_missing_required_file(self, temp_dir):
        with pytest.raises(ConfigError, match="not found"):
            load_yaml_config(temp_dir / "custom.yaml", required=True)

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / DEFAULT_CONFIG_FILE
        path.write_text("unity-version: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_yaml_config(path)

    def test_non_mapping_yaml(self, temp_dir):
        path = temp_dir / DEFAULT_CONFIG_FILE
        path.write_text("- android\n- ios\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_yaml_config(path)

    def test_file_in_project_then_overrides(self, temp_dir):
        (temp_dir / DEFAULT_CONFIG_FILE).write_text(
            "unity-version: 2021.3.5f1\n"
            "unity-modules:\n  - android\n  - ios\n"
            "self-hosted: true\n"
        )

        config = load_config(temp_dir, overrides={"unity-version": "2022.3.10f1"})

        assert config.unity_version == "2022.3.10f1"
        assert config.unity_modules == ["android", "ios"]
        assert config.self_hosted is True
        assert config.project_path == str(temp_dir)

    def test_explicit_config_file(self, temp_dir):
        custom = temp_dir / "ci.yaml"
        custom.write_text("install-path: /opt/unity\n")

        config = load_config(temp_dir / "project", config_file=custom)

        assert config.install_path == "/opt/unity"
