"""
Installer error taxonomy.

Services raise these; the CLI catches ``InstallError`` at the edge,
prints ``Error: <message>`` to stderr and exits 1.
"""

from __future__ import annotations


class InstallError(Exception):
    """Base class for every fatal installer failure."""


class UnsupportedPlatformError(InstallError):
    """OS / architecture combination is not one we ship archives for."""


class MissingPrerequisiteError(InstallError):
    """A tool this installer depends on is not on PATH."""


class PermissionDeniedError(InstallError):
    """A directory we must write to is not writable."""


class DownloadError(InstallError):
    """Fetching the archive failed or produced a truncated file."""


class ExtractionError(InstallError):
    """The archive could not be unpacked into the install root."""


class VerificationError(InstallError):
    """The tool is still missing or broken after installation."""


class UnsupportedPackageManagerError(InstallError):
    """None of the known package managers is present on this host."""
