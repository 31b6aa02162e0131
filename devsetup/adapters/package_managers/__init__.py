from devsetup.adapters.package_managers.apt import AptPackageManager
from devsetup.adapters.package_managers.brew import BrewPackageManager
from devsetup.adapters.package_managers.dnf import DnfPackageManager
from devsetup.adapters.package_managers.pacman import PacmanPackageManager

__all__ = [
    "AptPackageManager",
    "BrewPackageManager",
    "DnfPackageManager",
    "PacmanPackageManager",
]
