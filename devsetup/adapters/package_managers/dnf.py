"""
dnf backend — Fedora family.
"""

from __future__ import annotations

from devsetup.adapters.base import PackageManager, PackageManagerKind


class DnfPackageManager(PackageManager):
    kind = PackageManagerKind.DNF
    binary = "dnf"

    def install_command(self, package: str, *, cask: bool = False) -> list[str]:
        return ["dnf", "install", "-y", package]
