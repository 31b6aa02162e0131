"""
Mock package manager — test double for the package-manager backends.

Records every install request instead of touching the system.  An
``on_install`` callback lets a test make the tool "appear" on PATH
once its package is installed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from devsetup.adapters.base import PackageManager, PackageManagerKind


class MockPackageManager(PackageManager):
    """Configurable fake backend.

    Args:
        kind: Which family to impersonate (affects ``name``).
        available: What ``is_available`` reports.
        fail: Make every install return a failed result.
        on_install: Called with the package name after a "successful"
            install, e.g. to drop a fake binary on PATH.
    """

    def __init__(
        self,
        kind: PackageManagerKind = PackageManagerKind.APT,
        available: bool = True,
        fail: bool = False,
        on_install: Callable[[str], None] | None = None,
    ):
        self.kind = kind
        self.binary = kind.value
        self._available = available
        self._fail = fail
        self._on_install = on_install
        self._call_log: list[dict[str, Any]] = []

    @property
    def call_log(self) -> list[dict[str, Any]]:
        """Every install request received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def install_command(self, package: str, *, cask: bool = False) -> list[str]:
        return [self.binary, "install", package]

    def install(
        self,
        package: str,
        *,
        cask: bool = False,
        timeout: int | None = None,
    ) -> dict[str, Any]:
        self._call_log.append({"package": package, "cask": cask})
        if self._fail:
            return {"ok": False, "returncode": 100, "error": f"[mock] {self.name} failed"}
        if self._on_install:
            self._on_install(package)
        return {"ok": True, "returncode": 0, "stdout": f"[mock] installed {package}"}

    def reset(self) -> None:
        self._call_log.clear()
