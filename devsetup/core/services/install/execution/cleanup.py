"""
L4 Execution — Removal of a previous toolchain and its caches.

The GOPATH is only ever partially cleared: build caches and installed
binaries go, the user's ``src`` tree stays.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Any

from devsetup.core.errors import PermissionDeniedError
from devsetup.core.services.install.data.constants import GOPATH_CACHE_DIRS
from devsetup.core.services.install.execution.subprocess_runner import run_command

logger = logging.getLogger(__name__)


def is_in_use(path: Path) -> bool:
    """True when ``lsof`` reports open files under ``path``.

    Hosts without lsof are treated as "not in use".
    """
    if not shutil.which("lsof"):
        return False
    result = run_command(["lsof", str(path)], timeout=30)
    return result["ok"]


def _make_writable(root: Path) -> None:
    # Go's module cache is written read-only
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            target = os.path.join(dirpath, name)
            try:
                if not os.path.islink(target):
                    mode = os.stat(target).st_mode
                    os.chmod(target, mode | stat.S_IWUSR)
            except OSError:
                continue
    try:
        os.chmod(root, os.stat(root).st_mode | stat.S_IWUSR)
    except OSError:
        pass


def remove_tree(path: Path) -> None:
    """Delete ``path`` recursively.

    Raises:
        PermissionDeniedError: If the directory or its parent is not writable,
            or removal fails part-way.
    """
    if not os.access(path, os.W_OK) or not os.access(path.parent, os.W_OK):
        raise PermissionDeniedError(
            f"Cannot remove existing installation - no write permission: {path}"
        )
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise PermissionDeniedError(f"Failed to remove existing installation: {path}: {e}") from e
    logger.info("Removed %s", path)


def clean_module_cache(env: dict[str, str] | None = None) -> bool:
    """Run ``go clean -modcache`` with whatever ``go`` is on PATH.

    Returns:
        True if the cache was cleaned, False if go is absent or the
        command failed (never fatal).
    """
    if not shutil.which("go"):
        return False
    result = run_command(["go", "clean", "-modcache"], env=env, timeout=300)
    if not result["ok"]:
        logger.warning("Could not clean module cache: %s", result.get("stderr") or result["error"])
    return result["ok"]


def clean_gopath_caches(gopath: Path) -> dict[str, Any]:
    """Remove cache subdirectories of the GOPATH, preserving ``src``.

    Returns::

        {"removed": ["~/go/pkg"], "failed": [], "src_preserved": True}
    """
    removed: list[str] = []
    failed: list[str] = []

    for name in GOPATH_CACHE_DIRS:
        cache_dir = gopath / name
        if not cache_dir.is_dir():
            continue
        _make_writable(cache_dir)
        try:
            shutil.rmtree(cache_dir)
            removed.append(str(cache_dir))
        except OSError as e:
            logger.warning("Could not remove %s: %s", cache_dir, e)
            failed.append(str(cache_dir))

    return {
        "removed": removed,
        "failed": failed,
        "src_preserved": (gopath / "src").is_dir(),
    }
