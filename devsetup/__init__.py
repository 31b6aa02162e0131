"""
devsetup — developer environment installer.

Installs a Go toolchain, Neovim, tmux, Alacritty and Go tooling by
detecting the host platform and package manager.
"""

__version__ = "0.1.0"
