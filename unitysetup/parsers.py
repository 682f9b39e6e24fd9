"""
Parsers for text produced outside unity-setup.

Every piece of external text the provisioning flow relies on goes through one
of these parsers, so each format can be hardened independently and tested
against captured fixture text:

- ProjectVersionParser: ProjectSettings/ProjectVersion.txt
- ChangesetPageParser: Unity release pages
- EditorListParser: output of `Unity Hub -- --headless editors --installed`
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class OutputParser(ABC, Generic[T]):
    """Interface for parsers of one kind of external text."""

    @abstractmethod
    def parse(self, text: str) -> T:
        """
        Parse text.

        Args:
            text: Raw text as read from a file, page or command output

        Returns:
            Parsed value; parsers return None or empty values rather than
            raising when nothing is found
        """
        pass


class ProjectVersionParser(OutputParser[Optional[Tuple[str, Optional[str]]]]):
    """
    Parse a project's ProjectVersion.txt.

    Returns (version, changeset) from the `m_EditorVersionWithRevision` line,
    (version, None) from a bare `m_EditorVersion` line, or None.
    """

    WITH_REVISION = re.compile(r"m_EditorVersionWithRevision:\s*(\S+)\s*\(([^)\s]+)\)")
    VERSION_ONLY = re.compile(r"m_EditorVersion:\s*(\S+)")

    def parse(self, text: str) -> Optional[Tuple[str, Optional[str]]]:
        match = self.WITH_REVISION.search(text)
        if match:
            return match.group(1), match.group(2)

        match = self.VERSION_ONLY.search(text)
        if match:
            return match.group(1), None

        return None


class ChangesetPageParser(OutputParser[Optional[str]]):
    """
    Extract a version's changeset from a Unity release page.

    The `unityhub://<version>/<changeset>` link is preferred; the
    human-readable "Changeset:" label is the fallback.
    """

    LABEL = re.compile(r"Changeset:</span>\s*([a-z0-9]{12})")

    def __init__(self, version: str):
        self.version = version
        self.link = re.compile(rf"unityhub://{re.escape(version)}/([a-z0-9]+)")

    def parse(self, text: str) -> Optional[str]:
        match = self.link.search(text) or self.LABEL.search(text)
        if match:
            return match.group(1)
        return None


class EditorListParser(OutputParser[Dict[str, str]]):
    """
    Parse the hub's installed editors listing.

    Architecture annotations such as "(Intel)" are stripped before matching
    because they sit between the version and the path.
    """

    ANNOTATIONS = ("(Intel)", "(Apple silicon)")
    ENTRY = re.compile(r"^\s*(\S+)\s*,\s*installed at (.+?)\s*$", re.MULTILINE)

    def clean(self, text: str) -> str:
        for annotation in self.ANNOTATIONS:
            text = text.replace(annotation, "")
        return text

    def parse(self, text: str) -> Dict[str, str]:
        return {
            version: path for version, path in self.ENTRY.findall(self.clean(text))
        }

    def find(self, text: str, version: str) -> Optional[str]:
        """Return the install path listed for version, or None."""
        pattern = re.compile(
            rf"(?<![\w.]){re.escape(version)}\s*,\s*installed at (.+?)\s*$",
            re.MULTILINE,
        )
        match = pattern.search(self.clean(text))
        if match:
            return match.group(1)
        return None
