"""
L5 Orchestration — Go tools installed with ``go install``.

Covers the quality and workflow tool sets and the development tools the
hardened toolchain installer adds.  Every tool is a module path from
``TOOL_RECIPES`` installed at ``@latest``.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Mapping
from typing import Any

from devsetup.core.errors import InstallError, MissingPrerequisiteError
from devsetup.core.services.install.data.recipes import GO_TOOL_SETS, TOOL_RECIPES
from devsetup.core.services.install.detection.tool_version import (
    get_tool_version,
    inspect_tool,
)
from devsetup.core.services.install.execution.subprocess_runner import run_command

logger = logging.getLogger(__name__)

Progress = Callable[[str], None]


def _noop(_msg: str) -> None:
    return None


def require_go() -> str:
    """Path of the ``go`` on PATH.

    Raises:
        MissingPrerequisiteError: If Go is not installed.
    """
    go = shutil.which("go")
    if not go:
        raise MissingPrerequisiteError("Go not found. Run `devsetup go` first.")
    return go


def tool_set(name: str) -> dict[str, Any]:
    """Look up a tool set by name (``quality``, ``workflow``, ``dev``)."""
    try:
        return GO_TOOL_SETS[name]
    except KeyError:
        raise InstallError(f"Unknown Go tool set: {name}") from None


def describe_tool_set(name: str) -> list[str]:
    """``"- gopls (language server)"`` lines for the confirmation prompt."""
    return [
        f"- {tool} ({TOOL_RECIPES[tool]['description']})"
        for tool in tool_set(name)["tools"]
    ]


def go_install(
    tool: str,
    *,
    go_binary: str = "go",
    env: Mapping[str, str] | None = None,
    timeout: int | None = None,
) -> dict[str, Any]:
    """``go install <module>@latest`` for one recipe."""
    recipe = TOOL_RECIPES.get(tool)
    if not recipe or "module" not in recipe:
        return {"ok": False, "error": f"No Go module recipe for {tool}"}
    return run_command(
        [go_binary, "install", f"{recipe['module']}@latest"],
        env=dict(env) if env is not None else None,
        timeout=timeout,
        capture=False,
    )


def install_go_tools(
    tools: list[str],
    *,
    go_binary: str = "go",
    env: Mapping[str, str] | None = None,
    timeout: int | None = None,
    on_progress: Progress | None = None,
) -> list[str]:
    """Install each tool in order; the first failure aborts.

    Returns:
        The tools that were installed.

    Raises:
        InstallError: If ``go install`` exits non-zero for any tool.
    """
    say = on_progress or _noop
    installed: list[str] = []
    for tool in tools:
        say(f"Installing {tool}...")
        result = go_install(tool, go_binary=go_binary, env=env, timeout=timeout)
        if not result["ok"]:
            raise InstallError(f"Failed to install {tool}: {result.get('error', 'unknown error')}")
        installed.append(tool)
    return installed


def verify_lines(tools: list[str], path: str | None = None) -> list[str]:
    """One ``✓ name: path`` / ``✗ name: NOT FOUND`` line per tool."""
    lines = []
    for tool in tools:
        status = inspect_tool(tool, path=path)
        if status.found:
            lines.append(f"✓ {tool}: {status.path}")
        else:
            lines.append(f"✗ {tool}: NOT FOUND")
    return lines


def install_tool_set(
    name: str,
    *,
    timeout: int | None = None,
    on_progress: Progress | None = None,
) -> dict[str, Any]:
    """Install a named tool set with the ``go`` already on PATH.

    Returns::

        {"set": "quality", "installed": [...], "verify": ["✓ gopls: ..."]}
    """
    go = require_go()
    definition = tool_set(name)
    installed = install_go_tools(
        definition["tools"], go_binary=go, timeout=timeout, on_progress=on_progress,
    )
    return {
        "set": name,
        "installed": installed,
        "verify": verify_lines(definition["tools"]),
    }


def current_go_version() -> str | None:
    """``go version`` line of the Go on PATH, if any."""
    return get_tool_version("go")
