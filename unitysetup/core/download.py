"""
Network download primitive with retry logic.

This module provides the downloads the provisioning flow needs:
- Streaming HTTP/HTTPS downloads with redirects and TLS verification
- Retry logic with exponential backoff
- Temporary-file downloads for installers (download_tool)
- Page fetches returning decoded text (fetch_page)
"""

import logging
import tempfile
import time
import uuid
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import requests
from requests.exceptions import RequestException

from unitysetup.core.exceptions import DownloadError

logger = logging.getLogger(__name__)


def download_file(
    url: str,
    destination: Path,
    timeout: int = 30,
    max_retries: int = 3,
) -> Path:
    """
    Download file from URL to destination with retry logic.

    Args:
        url: URL to download from
        destination: Local path to save file
        timeout: Request timeout in seconds
        max_retries: Maximum number of attempts

    Returns:
        Path to downloaded file

    Raises:
        DownloadError: If download fails after retries
        ValueError: If URL or destination is invalid
    """
    if not url:
        raise ValueError("URL cannot be empty")

    if not destination:
        raise ValueError("Destination path cannot be empty")

    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)

    for attempt in range(max_retries):
        try:
            return _download(url, destination, timeout)
        except RequestException as e:
            if attempt == max_retries - 1:
                raise DownloadError(
                    f"Download failed after {max_retries} attempts: {e}"
                ) from e

            backoff_seconds = 2**attempt
            logger.warning(
                f"Download attempt {attempt + 1} failed: {e}. "
                f"Retrying in {backoff_seconds}s..."
            )
            time.sleep(backoff_seconds)

    raise DownloadError("Download failed for unknown reason")


def _download(url: str, destination: Path, timeout: int) -> Path:
    """Stream a single download attempt to disk."""
    logger.info(f"Downloading from {url}")

    response = requests.get(url, stream=True, timeout=timeout, allow_redirects=True)
    response.raise_for_status()

    with open(destination, "wb") as f:
        for chunk in response.iter_content(chunk_size=8192):
            if chunk:
                f.write(chunk)

    logger.debug(f"Download complete: {destination}")
    return destination


def download_tool(url: str, directory: Optional[Path] = None) -> Path:
    """
    Download a URL into a fresh file under a temporary directory.

    The file keeps the extension of the URL path so installers such as
    .dmg or .exe stay recognizable to the OS.

    Args:
        url: URL to download
        directory: Target directory (defaults to the system temp dir)

    Returns:
        Path to the downloaded file
    """
    if directory is None:
        directory = Path(tempfile.gettempdir())

    suffix = Path(urlparse(url).path).suffix
    destination = Path(directory) / f"{uuid.uuid4()}{suffix}"
    return download_file(url, destination)


def fetch_page(url: str) -> str:
    """
    Download a page and return its text.

    Args:
        url: Page URL

    Returns:
        Page content decoded as UTF-8
    """
    page_path = download_tool(url)
    try:
        return page_path.read_text(encoding="utf-8", errors="replace")
    finally:
        page_path.unlink(missing_ok=True)
