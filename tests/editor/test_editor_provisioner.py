"""
Unit tests for editor installation.
"""

import pytest

from unitysetup.core.exceptions import CommandError, InstallationFailedError, InstallError
from unitysetup.core.models import VersionSpec
from unitysetup.editor.locator import EditorLocator
from unitysetup.editor.provisioner import EditorProvisioner
from unitysetup.hub.client import HubClient

SPEC = VersionSpec("2022.3.10f1", "ff3792e53c62")
LISTED = "2022.3.10f1 , installed at /opt/unity/2022.3.10f1/Editor/Unity\n"


def _provisioner(profile, runner, self_hosted=False):
    hub = HubClient(profile, profile.hub_path, runner)
    return EditorProvisioner(
        hub, EditorLocator(hub, profile), profile, runner, self_hosted=self_hosted
    )


class TestEditorProvisioner:
    def test_fast_path_issues_no_install(self, linux, fake_runner):
        fake_runner.respond("editors --installed", LISTED)

        path = _provisioner(linux, fake_runner).provision(SPEC, "/opt/unity")

        assert path == "/opt/unity/2022.3.10f1/Editor/Unity"
        assert fake_runner.find("install --version") == []
        assert fake_runner.find("install-path") == []
        assert len(fake_runner.commands) == 1

    def test_installs_then_relocates(self, linux, fake_runner):
        fake_runner.respond("editors --installed", "", LISTED)

        path = _provisioner(linux, fake_runner).provision(SPEC)

        assert path == "/opt/unity/2022.3.10f1/Editor/Unity"
        install = fake_runner.find("install --version")
        assert len(install) == 1
        assert install[0].args[-4:] == [
            "--version",
            "2022.3.10f1",
            "--changeset",
            "ff3792e53c62",
        ]
        assert fake_runner.find("install-path") == []

    def test_still_missing_after_install(self, linux, fake_runner):
        fake_runner.respond("editors --installed", "")

        with pytest.raises(InstallationFailedError, match="2022.3.10f1"):
            _provisioner(linux, fake_runner).provision(SPEC)

        assert len(fake_runner.find("install --version")) == 1

    def test_install_path_prepared_with_sudo(self, linux, fake_runner):
        fake_runner.respond("editors --installed", "", LISTED)

        _provisioner(linux, fake_runner).provision(SPEC, "/opt/unity")

        lines = fake_runner.lines()
        assert lines[1] == "mkdir -p /opt/unity"
        assert lines[2] == "chmod -R o+rwx /opt/unity"
        assert lines[3].endswith("install-path --set /opt/unity")
        assert "install --version" in lines[4]
        assert fake_runner.commands[1].sudo and fake_runner.commands[2].sudo
        assert not fake_runner.commands[3].sudo

    def test_self_hosted_skips_sudo(self, macos, fake_runner):
        fake_runner.respond("editors --installed", "", LISTED)

        _provisioner(macos, fake_runner, self_hosted=True).provision(SPEC, "/opt/unity")

        assert not any(command.sudo for command in fake_runner.commands)
        assert fake_runner.find("mkdir -p /opt/unity")

    def test_windows_skips_directory_preparation(self, windows, fake_runner):
        fake_runner.respond("editors --installed", "", LISTED)

        _provisioner(windows, fake_runner).provision(SPEC, "D:/Unity")

        assert fake_runner.find("mkdir") == []
        assert fake_runner.find("chmod") == []
        assert fake_runner.find("install-path --set D:/Unity")

    def test_directory_preparation_failure_propagates(self, linux, fake_runner):
        fake_runner.respond("editors --installed", "")
        fake_runner.respond("mkdir", exit_code=1)

        with pytest.raises(CommandError):
            _provisioner(linux, fake_runner).provision(SPEC, "/opt/unity")

        assert fake_runner.find("install --version") == []

    @pytest.mark.parametrize(
        "spec", [VersionSpec("2022.3.10f1", ""), VersionSpec("", "ff3792e53c62")]
    )
    def test_unresolved_spec_rejected(self, linux, fake_runner, spec):
        with pytest.raises(InstallError, match="Unresolved"):
            _provisioner(linux, fake_runner).provision(spec)

        assert fake_runner.commands == []
