"""
L5 Orchestration — Tools delegated to the host package manager.

tmux, Neovim and Alacritty all follow the same contract:

    presence check → resolve backend → install → presence check again

An already-installed tool short-circuits with its version and no
changes.  The re-check after install is what decides success; the
manager's exit status only decides failure.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from typing import Any

from devsetup.adapters.registry import PackageManagerRegistry, default_registry
from devsetup.core.errors import (
    InstallError,
    UnsupportedPackageManagerError,
    VerificationError,
)
from devsetup.core.services.install.data.recipes import PACKAGE_TOOLS, TOOL_RECIPES
from devsetup.core.services.install.detection.tool_version import inspect_tool
from devsetup.core.services.install.orchestration.go_tools import go_install

logger = logging.getLogger(__name__)

Progress = Callable[[str], None]


def _noop(_msg: str) -> None:
    return None


def _recipe(tool: str) -> dict[str, Any]:
    if tool not in PACKAGE_TOOLS:
        raise InstallError(f"No package recipe for {tool}")
    return TOOL_RECIPES[tool]


def install_package_tool(
    tool: str,
    *,
    registry: PackageManagerRegistry | None = None,
    timeout: int | None = None,
    on_progress: Progress | None = None,
) -> dict[str, Any]:
    """Install one package-manager tool if it is missing.

    Returns::

        {"tool": "tmux", "already_installed": False, "manager": "apt",
         "path": "/usr/bin/tmux", "version": "tmux 3.4"}

    Raises:
        UnsupportedPackageManagerError: No known package manager found.
        InstallError: The package manager exited non-zero.
        VerificationError: The tool is still not on PATH afterwards.
    """
    say = on_progress or _noop
    recipe = _recipe(tool)
    label = recipe.get("label", tool)

    status = inspect_tool(tool)
    if status.found:
        say(f"{label} is already installed: {status.version or status.path}")
        return {
            "tool": tool,
            "already_installed": True,
            "manager": None,
            "path": status.path,
            "version": status.version,
        }

    backend = (registry or default_registry()).resolve()
    if backend is None:
        raise UnsupportedPackageManagerError(
            f"Unsupported package manager. Please install {label} manually."
        )

    say(f"Installing {label} via {backend.name}...")
    result = backend.install(recipe["package"], cask=recipe.get("cask", False), timeout=timeout)
    if not result["ok"]:
        raise InstallError(
            f"{backend.name} failed to install {recipe['package']}: "
            f"{result.get('error', 'unknown error')}"
        )

    status = backend.verify(tool)
    if not status.found:
        raise VerificationError(f"{label} installation failed")

    logger.info("Installed %s: %s", tool, status.version)
    return {
        "tool": tool,
        "already_installed": False,
        "manager": backend.name,
        "path": status.path,
        "version": status.version,
    }


def install_companions(
    tool: str,
    *,
    timeout: int | None = None,
    on_progress: Progress | None = None,
) -> dict[str, Any]:
    """Install the Go helpers a package tool works with (gopls for Neovim).

    Missing Go is a warning, not a failure.

    Returns::

        {"skipped": bool, "installed": [...], "present": [...], "missing": [...]}
    """
    say = on_progress or _noop
    companions = TOOL_RECIPES.get(tool, {}).get("companions", [])
    outcome: dict[str, Any] = {"skipped": False, "installed": [], "present": [], "missing": []}
    if not companions:
        return outcome

    go = shutil.which("go")
    if not go:
        say("Warning: Go is not installed. Please install Go first.")
        say("Skipping Go tools installation.")
        outcome["skipped"] = True
        return outcome

    say("Installing Go development tools...")
    for companion in companions:
        status = inspect_tool(companion)
        if status.found:
            say(f"{companion} is already installed: {status.version or status.path}")
            outcome["present"].append(companion)
            continue

        say(f"Installing {companion}...")
        result = go_install(companion, go_binary=go, timeout=timeout)
        if not result["ok"]:
            raise InstallError(
                f"Failed to install {companion}: {result.get('error', 'unknown error')}"
            )
        if inspect_tool(companion).found:
            outcome["installed"].append(companion)
        else:
            say("Warning: Go tools may not be in PATH. Check your Go installation.")
            outcome["missing"].append(companion)

    return outcome
