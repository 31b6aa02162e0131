"""
L0 Data — Module-level constants.

Pure data. No logic. No imports beyond stdlib.
"""

from __future__ import annotations

# Architecture name normalization to Go-style names (amd64/arm64).
# Only the pairs we ship archives for are listed; anything else is
# rejected by the platform detector.
_IARCH_MAP: dict[str, str] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "AMD64": "amd64",      # Windows reports upper-case
    "arm64": "arm64",      # macOS (Darwin reports arm64)
    "aarch64": "arm64",
}

# (platform, arch) pairs with an official Go archive we install.
SUPPORTED_PLATFORMS: frozenset[tuple[str, str]] = frozenset({
    ("linux", "amd64"),
    ("darwin", "amd64"),
    ("darwin", "arm64"),
    ("windows", "amd64"),
})

# uname -s prefixes that mean "Windows with a POSIX layer"
WINDOWS_SYSTEM_PREFIXES: tuple[str, ...] = ("CYGWIN", "MINGW", "MSYS", "WINDOWS")

# Download tools, tried in order.
DOWNLOADERS: tuple[str, ...] = ("curl", "wget")

# Sentinels around the managed block in the shell profile.
PROFILE_BLOCK_BEGIN = "# >>> devsetup environment >>>"
PROFILE_BLOCK_END = "# <<< devsetup environment <<<"

# GOPATH subdirectories that only hold build caches / installed binaries.
GOPATH_CACHE_DIRS: tuple[str, ...] = ("pkg", "bin")

# Directories the hardened installer makes sure exist (relative to HOME).
HOME_LAYOUT_DIRS: tuple[str, ...] = (".config", ".cache", ".local/bin", ".local/share")

SMOKE_TEST_MODULE = "test-install"
SMOKE_TEST_OUTPUT = "Go installation working!"
SMOKE_TEST_SOURCE = (
    "package main\n"
    'import "fmt"\n'
    f'func main() {{ fmt.Println("{SMOKE_TEST_OUTPUT}") }}\n'
)
