"""
L4 Execution — Archive download and size verification.

Downloads go through whichever of curl / wget is on PATH so proxies,
CA bundles and progress bars behave the way the user's shell does.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from devsetup.core.errors import DownloadError
from devsetup.core.models.platform import Platform
from devsetup.core.services.install.data.constants import DOWNLOADERS
from devsetup.core.services.install.execution.subprocess_runner import run_command

logger = logging.getLogger(__name__)


def go_archive_name(version: str, target: Platform) -> str:
    """``go1.24.4.linux-amd64.tar.gz`` (``.zip`` on Windows)."""
    ext = "zip" if target.platform == "windows" else "tar.gz"
    return f"go{version}.{target.platform}-{target.arch}.{ext}"


def go_archive_url(base_url: str, version: str, target: Platform) -> str:
    return f"{base_url.rstrip('/')}/{go_archive_name(version, target)}"


def find_downloader() -> str | None:
    """First available download tool, or None."""
    for tool in DOWNLOADERS:
        if shutil.which(tool):
            return tool
    return None


def _download_command(tool: str, url: str, dest: Path) -> list[str]:
    if tool == "curl":
        return ["curl", "-fL", url, "-o", str(dest)]
    return ["wget", url, "-O", str(dest)]


def download_file(url: str, dest: Path, *, timeout: int | None = None) -> Path:
    """Fetch ``url`` into ``dest``.

    Raises:
        DownloadError: No download tool, or the tool exited non-zero,
            or nothing was written.
    """
    tool = find_downloader()
    if tool is None:
        raise DownloadError("Neither curl nor wget found. Please install one.")

    if dest.exists():
        logger.info("Removing existing download: %s", dest)
        dest.unlink()

    logger.info("Downloading %s with %s", url, tool)
    result = run_command(_download_command(tool, url, dest), timeout=timeout, capture=False)
    if not result["ok"]:
        dest.unlink(missing_ok=True)
        raise DownloadError(f"Download failed using {tool}: {url}")

    if not dest.is_file():
        raise DownloadError(f"Download failed - file not found: {dest.name}")

    return dest


def verify_download_size(path: Path, min_bytes: int = 1) -> int:
    """Reject empty or truncated downloads.

    Returns:
        The file size in bytes.

    Raises:
        DownloadError: If the file is smaller than ``min_bytes``.
    """
    try:
        size = path.stat().st_size
    except OSError as e:
        raise DownloadError(f"Cannot stat download {path}: {e}") from e

    if size < min_bytes:
        if size == 0:
            raise DownloadError(f"Download is empty: {path.name}")
        raise DownloadError(f"Download appears incomplete - file too small: {size} bytes")

    logger.info("Downloaded file size: %d bytes", size)
    return size
