"""
Pytest configuration and shared fixtures for unity-setup tests.
"""

import dataclasses
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from unitysetup.core.platform import (
    clear_platform_cache,
    linux_profile,
    macos_profile,
    windows_profile,
)
from tests.mocks import FakeCommandRunner, FakeDownloader, FakePageFetcher


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def _reset_platform_cache():
    clear_platform_cache()
    yield
    clear_platform_cache()


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def fake_downloader(temp_dir: Path) -> FakeDownloader:
    return FakeDownloader(temp_dir / "downloads")


@pytest.fixture
def fake_fetcher() -> FakePageFetcher:
    return FakePageFetcher()


@pytest.fixture
def linux(temp_dir: Path):
    """Linux profile rooted in a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    return linux_profile(home)


@pytest.fixture
def macos(temp_dir: Path):
    """macOS profile whose hub path lives in the temporary directory."""
    return dataclasses.replace(
        macos_profile(), hub_path=temp_dir / "Unity Hub.app" / "Contents" / "MacOS" / "Unity Hub"
    )


@pytest.fixture
def windows(temp_dir: Path):
    """Windows profile whose hub path lives in the temporary directory."""
    return dataclasses.replace(
        windows_profile(), hub_path=temp_dir / "Unity Hub" / "Unity Hub.exe"
    )


@pytest.fixture
def unity_project(temp_dir: Path):
    """Factory writing ProjectSettings/ProjectVersion.txt into a project dir."""

    def _create(content: str) -> Path:
        project = temp_dir / "project"
        settings = project / "ProjectSettings"
        settings.mkdir(parents=True, exist_ok=True)
        (settings / "ProjectVersion.txt").write_text(content, encoding="utf-8")
        return project

    return _create
