"""
Domain models — Pydantic types for the installers.

    from devsetup.core.models import InstallerConfig, Platform, ToolStatus
"""

from devsetup.core.models.platform import Platform, ToolStatus
from devsetup.core.models.settings import InstallerConfig

__all__ = [
    "InstallerConfig",
    "Platform",
    "ToolStatus",
]
