"""
L4 Execution — Core subprocess runner.

The SINGLE PLACE where ``subprocess.run`` is called for install
operations. Never raises: failures come back as ``{"ok": False, ...}``.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_OUTPUT_TAIL = 2000


def _is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def run_command(
    cmd: list[str],
    *,
    needs_sudo: bool = False,
    timeout: int | None = None,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    capture: bool = True,
) -> dict[str, Any]:
    """Run a command and report the outcome as a dict.

    Package-manager installs run with ``capture=False`` so the user sees
    progress and can answer sudo's password prompt on the terminal.

    Args:
        cmd: Command list for ``subprocess.run()``.
        needs_sudo: Prefix with ``sudo`` unless already root.
        timeout: Seconds before ``TimeoutExpired``; None blocks forever.
        env: Full environment for the child (default: inherit).
        cwd: Working directory for the command.
        capture: Capture stdout/stderr instead of inheriting them.

    Returns:
        ``{"ok": True, "returncode": 0, "stdout": "...", ...}`` on success,
        ``{"ok": False, "error": "...", ...}`` on failure.
    """
    if needs_sudo and not _is_root():
        if shutil.which("sudo"):
            cmd = ["sudo"] + cmd
        else:
            logger.warning("sudo not found, running without it: %s", cmd[0])

    logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), cwd)
    start = time.monotonic()

    try:
        result = subprocess.run(
            cmd,
            capture_output=capture,
            text=True,
            timeout=timeout,
            env=dict(env) if env is not None else None,
            cwd=cwd,
        )
    except FileNotFoundError:
        return {"ok": False, "error": f"Command not found: {cmd[0]}", "cmd": cmd}
    except subprocess.TimeoutExpired:
        return {"ok": False, "error": f"Command timed out ({timeout}s)", "cmd": cmd}
    except OSError as e:
        logger.exception("Subprocess error: %s", cmd)
        return {"ok": False, "error": str(e), "cmd": cmd}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = result.stdout[-_OUTPUT_TAIL:] if result.stdout else ""
    stderr = result.stderr[-_OUTPUT_TAIL:] if result.stderr else ""

    if result.returncode == 0:
        return {
            "ok": True,
            "returncode": 0,
            "stdout": stdout,
            "stderr": stderr,
            "elapsed_ms": elapsed_ms,
        }

    return {
        "ok": False,
        "returncode": result.returncode,
        "error": f"Command failed (exit {result.returncode}): {' '.join(cmd)}",
        "stdout": stdout,
        "stderr": stderr,
        "elapsed_ms": elapsed_ms,
    }
