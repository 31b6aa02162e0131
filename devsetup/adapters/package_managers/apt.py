"""
apt backend — Debian, Ubuntu and WSL distributions.
"""

from __future__ import annotations

from devsetup.adapters.base import PackageManager, PackageManagerKind


class AptPackageManager(PackageManager):
    kind = PackageManagerKind.APT
    binary = "apt"

    def refresh_command(self) -> list[str] | None:
        return ["apt", "update"]

    def install_command(self, package: str, *, cask: bool = False) -> list[str]:
        return ["apt", "install", "-y", package]
