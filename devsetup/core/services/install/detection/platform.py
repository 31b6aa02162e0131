"""
L3 Detection — Host platform.

Maps ``uname -s`` / ``uname -m`` style identifiers onto the canonical
(platform, arch) pairs that Go publishes archives for.
"""

from __future__ import annotations

import logging
import platform as _platform
from pathlib import Path

from devsetup.core.errors import UnsupportedPlatformError
from devsetup.core.models.platform import Platform
from devsetup.core.services.install.data.constants import (
    _IARCH_MAP,
    SUPPORTED_PLATFORMS,
    WINDOWS_SYSTEM_PREFIXES,
)

logger = logging.getLogger(__name__)

_PROC_VERSION = Path("/proc/version")


def is_wsl(proc_version: str | None = None) -> bool:
    """True when running under Windows Subsystem for Linux."""
    if proc_version is None:
        try:
            proc_version = _PROC_VERSION.read_text(encoding="utf-8", errors="ignore")
        except OSError:
            return False
    return "microsoft" in proc_version.lower()


def os_type(system: str | None = None) -> str:
    """Coarse OS tag: linux, macos, windows or unknown."""
    system = system if system is not None else _platform.system()
    upper = system.upper()
    if upper.startswith("LINUX"):
        return "linux"
    if upper.startswith("DARWIN"):
        return "macos"
    if upper.startswith(WINDOWS_SYSTEM_PREFIXES):
        return "windows"
    return "unknown"


def detect_platform(
    system: str | None = None,
    machine: str | None = None,
    proc_version: str | None = None,
) -> Platform:
    """Detect the canonical platform for this host.

    Args:
        system: OS identifier (default: ``platform.system()``).
        machine: Machine architecture (default: ``platform.machine()``).
        proc_version: Contents of /proc/version, for WSL detection.

    Raises:
        UnsupportedPlatformError: For any pair outside SUPPORTED_PLATFORMS.
    """
    system = system if system is not None else _platform.system()
    machine = machine if machine is not None else _platform.machine()

    kind = os_type(system)
    arch = _IARCH_MAP.get(machine)

    if kind == "unknown":
        raise UnsupportedPlatformError(f"Unsupported platform: {system}")

    name = "darwin" if kind == "macos" else kind
    if arch is None or (name, arch) not in SUPPORTED_PLATFORMS:
        label = "macOS" if kind == "macos" else system
        raise UnsupportedPlatformError(f"Unsupported {label} architecture: {machine}")

    wsl = False
    if name == "linux":
        wsl = is_wsl(proc_version)
        label = "Windows Subsystem for Linux (WSL)" if wsl else "Linux"
    elif name == "darwin":
        label = "macOS (Apple Silicon)" if arch == "arm64" else "macOS (Intel)"
    else:
        label = "Windows (Git Bash/MSYS2)"

    detected = Platform(platform=name, arch=arch, label=label, wsl=wsl)
    logger.debug("Detected platform %s (%s)", detected.pair, label)
    return detected
