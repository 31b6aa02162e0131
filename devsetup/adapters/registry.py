"""
Package-manager registry — ordered lookup of backends.

Backends are checked in registration order; the first one whose
executable is on PATH wins.  No match means "unknown", which callers
treat as terminal.
"""

from __future__ import annotations

import logging
from typing import Any

from devsetup.adapters.base import PackageManager, PackageManagerKind
from devsetup.adapters.package_managers import (
    AptPackageManager,
    BrewPackageManager,
    DnfPackageManager,
    PacmanPackageManager,
)

logger = logging.getLogger(__name__)


class PackageManagerRegistry:
    """Priority-ordered registry of package-manager backends."""

    def __init__(self, backends: list[PackageManager] | None = None):
        self._backends: dict[str, PackageManager] = {}
        for backend in backends or []:
            self.register(backend)

    def register(self, backend: PackageManager) -> None:
        """Register a backend at the lowest priority."""
        name = backend.name
        if name in self._backends:
            logger.warning("Overwriting existing package manager: %s", name)
        self._backends[name] = backend
        logger.debug("Registered package manager: %s", name)

    def unregister(self, name: str) -> None:
        self._backends.pop(name, None)

    def get(self, name: str) -> PackageManager | None:
        return self._backends.get(name)

    def list_backends(self) -> list[str]:
        """Backend names in priority order."""
        return list(self._backends.keys())

    def resolve(self) -> PackageManager | None:
        """First available backend, or None when nothing is detected."""
        for backend in self._backends.values():
            try:
                if backend.is_available():
                    logger.debug("Resolved package manager: %s", backend.name)
                    return backend
            except OSError as e:
                logger.debug("Availability check for %s failed: %s", backend.name, e)
        return None

    def resolve_kind(self) -> PackageManagerKind:
        backend = self.resolve()
        return backend.kind if backend else PackageManagerKind.UNKNOWN

    def backend_status(self) -> dict[str, dict[str, Any]]:
        """Availability of every registered backend."""
        status = {}
        for name, backend in self._backends.items():
            try:
                available = backend.is_available()
            except OSError:
                available = False
            status[name] = {
                "name": name,
                "available": available,
                "type": backend.__class__.__name__,
            }
        return status


def default_registry() -> PackageManagerRegistry:
    """apt > pacman > dnf > brew."""
    return PackageManagerRegistry([
        AptPackageManager(),
        PacmanPackageManager(),
        DnfPackageManager(),
        BrewPackageManager(),
    ])
