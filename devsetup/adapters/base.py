"""
Package-manager adapter base — the contract between installers and
the host package manager.

Installers never branch on a package-manager name; they resolve a
backend through the registry and call its ``install`` / ``verify``.

To add a backend:
    1. Subclass PackageManager
    2. Set ``kind`` and ``binary``, implement ``install_command``
    3. Register it in ``default_registry()`` at the right priority
"""

from __future__ import annotations

import logging
import shutil
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from devsetup.core.models.platform import ToolStatus
from devsetup.core.services.install.detection.tool_version import inspect_tool
from devsetup.core.services.install.execution.subprocess_runner import run_command

logger = logging.getLogger(__name__)


class PackageManagerKind(str, Enum):
    """Supported package-manager families."""

    APT = "apt"          # Debian / Ubuntu
    PACMAN = "pacman"    # Arch
    DNF = "dnf"          # Fedora / RHEL
    BREW = "brew"        # macOS Homebrew
    UNKNOWN = "unknown"


class PackageManager(ABC):
    """Abstract base class for package-manager backends.

    ``install`` never raises; failures come back as ``{"ok": False}``
    dicts from the subprocess runner.
    """

    kind: PackageManagerKind = PackageManagerKind.UNKNOWN
    binary: str = ""
    needs_sudo: bool = True

    @property
    def name(self) -> str:
        return self.kind.value

    def is_available(self) -> bool:
        """Detect: is the manager's executable on PATH?"""
        return bool(self.binary) and shutil.which(self.binary) is not None

    def refresh_command(self) -> list[str] | None:
        """Index refresh to run before installing, if the manager needs one."""
        return None

    @abstractmethod
    def install_command(self, package: str, *, cask: bool = False) -> list[str]:
        """Non-interactive install command for one package."""

    def install(
        self,
        package: str,
        *,
        cask: bool = False,
        timeout: int | None = None,
    ) -> dict[str, Any]:
        """Install one package, refreshing the index first if needed."""
        refresh = self.refresh_command()
        if refresh:
            result = run_command(
                refresh, needs_sudo=self.needs_sudo, timeout=timeout, capture=False,
            )
            if not result["ok"]:
                return result

        cmd = self.install_command(package, cask=cask)
        logger.info("Installing %s via %s: %s", package, self.name, " ".join(cmd))
        return run_command(cmd, needs_sudo=self.needs_sudo, timeout=timeout, capture=False)

    def verify(self, tool: str) -> ToolStatus:
        """Presence check after install."""
        return inspect_tool(tool)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
