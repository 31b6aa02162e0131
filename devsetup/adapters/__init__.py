"""Adapters — package-manager backends.

Public re-exports for convenient access.
"""

from devsetup.adapters.base import PackageManager, PackageManagerKind
from devsetup.adapters.mock import MockPackageManager
from devsetup.adapters.registry import PackageManagerRegistry, default_registry

__all__ = [
    "MockPackageManager",
    "PackageManager",
    "PackageManagerKind",
    "PackageManagerRegistry",
    "default_registry",
]
