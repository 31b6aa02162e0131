"""
pacman backend — Arch and derivatives.
"""

from __future__ import annotations

from devsetup.adapters.base import PackageManager, PackageManagerKind


class PacmanPackageManager(PackageManager):
    kind = PackageManagerKind.PACMAN
    binary = "pacman"

    def install_command(self, package: str, *, cask: bool = False) -> list[str]:
        return ["pacman", "-S", "--noconfirm", package]
