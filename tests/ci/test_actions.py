"""
Tests for the GitHub Actions runtime binding.
"""

import os

from unitysetup.ci import actions


class TestInputs:
    def test_get_input_trims(self):
        env = {"INPUT_UNITY-VERSION": " 2022.3.10f1\n"}
        assert actions.get_input("unity-version", env) == "2022.3.10f1"

    def test_missing_input_is_empty(self):
        assert actions.get_input("install-path", {}) == ""

    def test_spaces_become_underscores(self):
        assert actions.get_input("my input", {"INPUT_MY_INPUT": "x"}) == "x"

    def test_get_input_list(self):
        env = {"INPUT_UNITY-MODULES": "android\n\n ios \n"}
        assert actions.get_input_list("unity-modules", env) == ["android", "ios"]

    def test_get_input_bool(self):
        assert actions.get_input_bool("self-hosted", {"INPUT_SELF-HOSTED": "True"})
        assert not actions.get_input_bool("self-hosted", {"INPUT_SELF-HOSTED": "1"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("INPUT_PROJECT-PATH", "game")
        assert actions.get_input("project-path") == "game"


class TestOutputs:
    def test_set_output_writes_file(self, temp_dir, monkeypatch):
        output_file = temp_dir / "output"
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

        actions.set_output("unity-version", "2022.3.10f1")

        lines = output_file.read_text().splitlines()
        assert lines[0].startswith("unity-version<<ghadelimiter_")
        assert lines[1] == "2022.3.10f1"
        assert lines[2] == lines[0].split("<<", 1)[1]

    def test_set_output_without_file(self, monkeypatch, capsys):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)

        actions.set_output("unity-path", "/opt/unity")

        assert capsys.readouterr().out == "::set-output name=unity-path::/opt/unity\n"

    def test_export_variable(self, temp_dir, monkeypatch):
        env_file = temp_dir / "env"
        monkeypatch.setenv("GITHUB_ENV", str(env_file))
        monkeypatch.delenv("UNITY_PATH", raising=False)

        actions.export_variable("UNITY_PATH", "/opt/unity")

        assert os.environ["UNITY_PATH"] == "/opt/unity"
        assert "UNITY_PATH<<ghadelimiter_" in env_file.read_text()
        monkeypatch.delenv("UNITY_PATH")

    def test_set_failed(self, capsys):
        code = actions.set_failed("Unity Editor installation failed\nsecond line")

        assert code == 1
        assert capsys.readouterr().out == (
            "::error::Unity Editor installation failed%0Asecond line\n"
        )
