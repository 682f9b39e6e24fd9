"""
Editor version resolution from inputs, project files and release pages.
"""

from .resolver import VersionResolver, changeset_page_url, PROJECT_VERSION_FILE

__all__ = ["VersionResolver", "changeset_page_url", "PROJECT_VERSION_FILE"]
