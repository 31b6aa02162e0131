"""
L3 Detection — Tool presence and version checking.

Read-only checks: ``shutil.which`` for presence, the recipe's
``verify`` command for the reported version string.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from devsetup.core.models.platform import ToolStatus
from devsetup.core.services.install.data.recipes import TOOL_RECIPES

logger = logging.getLogger(__name__)


def _first_line(output: str) -> str | None:
    for line in output.splitlines():
        if line.strip():
            return line.strip()
    return None


def get_tool_version(tool: str, path: str | None = None) -> str | None:
    """Get the version line a tool reports about itself.

    Runs the recipe's ``verify`` command and returns the first non-empty
    line of its output (``tmux -V`` → ``"tmux 3.4"``).

    Returns:
        The version line, or None if the tool is absent, has no version
        command, or the command fails.
    """
    recipe = TOOL_RECIPES.get(tool, {})
    cmd = recipe.get("verify") if recipe else [tool, "--version"]
    if not cmd:
        return None

    binary = shutil.which(cmd[0], path=path)
    if not binary:
        return None

    env = None
    if path is not None:
        env = os.environ.copy()
        env["PATH"] = path

    try:
        result = subprocess.run(
            [binary, *cmd[1:]],
            capture_output=True, text=True, timeout=15, env=env,
        )
    except (subprocess.TimeoutExpired, OSError) as exc:
        logger.debug("Version check for %s failed: %s", tool, exc)
        return None

    # Some tools print their version on stderr
    return _first_line((result.stdout or "") + "\n" + (result.stderr or ""))


def inspect_tool(tool: str, path: str | None = None) -> ToolStatus:
    """Presence check for one tool: found, binary path, version."""
    cli = TOOL_RECIPES.get(tool, {}).get("cli", tool)
    binary = shutil.which(cli, path=path)
    if not binary:
        return ToolStatus(name=tool)
    return ToolStatus(
        name=tool,
        found=True,
        path=binary,
        version=get_tool_version(tool, path=path),
    )
