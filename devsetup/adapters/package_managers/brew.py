"""
Homebrew backend — macOS.

Runs as the invoking user; brew refuses to run under sudo.
GUI applications such as Alacritty are casks.
"""

from __future__ import annotations

from devsetup.adapters.base import PackageManager, PackageManagerKind


class BrewPackageManager(PackageManager):
    kind = PackageManagerKind.BREW
    binary = "brew"
    needs_sudo = False

    def install_command(self, package: str, *, cask: bool = False) -> list[str]:
        if cask:
            return ["brew", "install", "--cask", package]
        return ["brew", "install", package]
