"""
Platform and tool-status models.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

PlatformName = Literal["linux", "darwin", "windows"]
ArchName = Literal["amd64", "arm64"]


class Platform(BaseModel):
    """Canonical (platform, arch) pair for the host.

    ``platform`` and ``arch`` use Go's naming so they can be dropped
    straight into a release archive name.
    """

    platform: PlatformName
    arch: ArchName
    label: str = ""
    wsl: bool = False

    @property
    def pair(self) -> str:
        return f"{self.platform}-{self.arch}"

    @property
    def os_type(self) -> str:
        """Coarse tag exported as ``OS_TYPE`` in the shell profile."""
        return "macos" if self.platform == "darwin" else self.platform


class ToolStatus(BaseModel):
    """Result of probing one tool on PATH."""

    name: str
    found: bool = False
    path: str | None = None
    version: str | None = None
