"""
Installer settings — every knob the installers used to hard-code.

Loaded by ``devsetup.core.config.loader``.  Paths are stored as written
(``~`` allowed) and expanded through the ``*_path`` properties so a
config file can stay portable between machines.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_GO_VERSION = "1.24.4"

# Go release archives are comfortably above this; anything smaller
# is a truncated download or an HTML error page.
MIN_GO_ARCHIVE_BYTES = 50 * 1024 * 1024


class InstallerConfig(BaseModel):
    """Target versions, install locations and environment defaults."""

    go_version: str = DEFAULT_GO_VERSION
    install_dir: str = "~/.local"
    workspace_dir: str = "~/workspace"
    gopath: str = "~/go"
    profile_path: str = "~/.profile"

    download_base_url: str = "https://golang.org/dl"
    min_download_bytes: int = Field(default=MIN_GO_ARCHIVE_BYTES, ge=1)
    in_use_wait_seconds: float = Field(default=3, ge=0)
    command_timeout: int | None = None

    goproxy: str = "https://proxy.golang.org,direct"
    gosumdb: str = "sum.golang.org"
    editor: str = "nvim"
    locale: str = "en_US.UTF-8"

    dotfiles_url: str = "https://github.com/yourusername/dotfiles"

    @property
    def install_path(self) -> Path:
        return Path(self.install_dir).expanduser()

    @property
    def goroot_path(self) -> Path:
        """Toolchain root: ``<install_dir>/go``."""
        return self.install_path / "go"

    @property
    def gopath_path(self) -> Path:
        return Path(self.gopath).expanduser()

    @property
    def workspace_path(self) -> Path:
        return Path(self.workspace_dir).expanduser()

    @property
    def profile_file(self) -> Path:
        return Path(self.profile_path).expanduser()
