"""
Mock implementations for testing unity-setup components.

This package provides fakes of process execution and downloads to enable
isolated, deterministic testing.
"""

from .runner import FakeCommandRunner, RecordedCommand
from .network import FakeDownloader, FakePageFetcher

__all__ = [
    "FakeCommandRunner",
    "RecordedCommand",
    "FakeDownloader",
    "FakePageFetcher",
]
