"""
Editor version resolution.

Turns partial version information into a fully resolved VersionSpec:

1. No explicit version: read ProjectSettings/ProjectVersion.txt; a line with
   revision gives both fields, a bare version line triggers a changeset lookup.
2. Version without changeset: look the changeset up on the Unity release page.
3. Both given: used as-is.

Changeset lookup picks the release page from the stage letter in the version
(a = alpha, b = beta, f = final) and scrapes the changeset from it.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Optional, Tuple

from unitysetup.core.download import fetch_page
from unitysetup.core.exceptions import (
    ChangesetNotFoundError,
    ProjectNotFoundError,
    VersionUnparsableError,
)
from unitysetup.core.models import VersionSpec
from unitysetup.parsers import ChangesetPageParser, ProjectVersionParser

logger = logging.getLogger(__name__)

PROJECT_VERSION_FILE = Path("ProjectSettings") / "ProjectVersion.txt"

ALPHA_PAGE_URL = "https://unity3d.com/unity/alpha/{version}"
BETA_PAGE_URL = "https://unity3d.com/unity/beta/{version}"
RELEASE_PAGE_URL = "https://unity3d.com/unity/whats-new/{version}"

_NUMERIC_PREFIX = re.compile(r"[.0-9]+")


def changeset_page_url(version: str) -> Optional[str]:
    """
    Get the release page URL listing a version's changeset.

    Alpha and beta pages use the full version; release pages use only the
    numeric prefix.

    Example:
        >>> changeset_page_url("2022.3.10f1")
        'https://unity3d.com/unity/whats-new/2022.3.10'
        >>> changeset_page_url("2023.1.0b4")
        'https://unity3d.com/unity/beta/2023.1.0b4'

    Returns:
        Page URL, or None if the version carries no known stage letter
    """
    if "a" in version:
        return ALPHA_PAGE_URL.format(version=version)
    elif "b" in version:
        return BETA_PAGE_URL.format(version=version)
    elif "f" in version:
        match = _NUMERIC_PREFIX.match(version)
        if match:
            return RELEASE_PAGE_URL.format(version=match.group(0))
    return None


class VersionResolver:
    """Resolve the editor version and changeset to install."""

    def __init__(
        self,
        fetch: Callable[[str], str] = fetch_page,
        project_parser: Optional[ProjectVersionParser] = None,
    ):
        """
        Initialize resolver.

        Args:
            fetch: Callable returning the text of a URL
            project_parser: Parser for ProjectVersion.txt
        """
        self.fetch = fetch
        self.project_parser = project_parser or ProjectVersionParser()

    def resolve(
        self,
        version: Optional[str] = None,
        changeset: Optional[str] = None,
        project_path: Path = Path("."),
    ) -> VersionSpec:
        """
        Resolve a complete VersionSpec.

        Args:
            version: Explicit editor version
            changeset: Explicit changeset (ignored without a version)
            project_path: Unity project root used when version is not given

        Returns:
            Resolved VersionSpec

        Raises:
            ProjectNotFoundError: If the project version file does not exist
            VersionUnparsableError: If the project version file is malformed
            ChangesetNotFoundError: If the changeset lookup fails
        """
        if not version:
            logger.info("Can't get Unity version from input")
            spec = self.find_project_version(Path(project_path))
            logger.info(
                f"Found in project Unity version: {spec.version} "
                f"changeset: {spec.changeset}"
            )
            return spec

        if not changeset:
            changeset = self.find_changeset(version)

        return VersionSpec(version=version, changeset=changeset)

    def read_project_version(self, project_path: Path) -> Tuple[str, Optional[str]]:
        """
        Read the version pinned by a Unity project without any lookup.

        Returns:
            (version, changeset); changeset is None for files without revision
        """
        version_file = project_path / PROJECT_VERSION_FILE
        if not version_file.is_file():
            raise ProjectNotFoundError(version_file)

        logger.info(f"Try to find m_EditorVersionWithRevision in project: {version_file}")
        try:
            text = version_file.read_text(encoding="utf-8")
        except OSError as e:
            raise ProjectNotFoundError(version_file) from e

        parsed = self.project_parser.parse(text)
        if parsed is None:
            raise VersionUnparsableError(version_file)

        return parsed

    def find_project_version(self, project_path: Path) -> VersionSpec:
        """Resolve the version pinned by a Unity project."""
        version, changeset = self.read_project_version(project_path)
        if changeset is None:
            changeset = self.find_changeset(version)
        return VersionSpec(version=version, changeset=changeset)

    def find_changeset(self, version: str) -> str:
        """
        Look up the changeset of a version on its release page.

        Fetch and parse failures are logged and reported as a single
        ChangesetNotFoundError.
        """
        logger.info(f"Try to find Unity version changeset for {version}")

        url = changeset_page_url(version)
        if url is None:
            logger.error(f"No release page known for version: {version}")
            raise ChangesetNotFoundError(version)

        logger.info(f"on url: {url}")
        changeset = None
        try:
            page = self.fetch(url)
            changeset = ChangesetPageParser(version).parse(page)
        except Exception as e:
            logger.error(f"Failed to read release page {url}: {e}")

        if not changeset:
            raise ChangesetNotFoundError(version)
        return changeset
