"""
L0 Data — ``__init__.py`` re-exports all data constants.
"""

from devsetup.core.services.install.data.constants import (  # noqa: F401
    _IARCH_MAP,
    DOWNLOADERS,
    PROFILE_BLOCK_BEGIN,
    PROFILE_BLOCK_END,
    SUPPORTED_PLATFORMS,
)
from devsetup.core.services.install.data.recipes import (  # noqa: F401
    GO_TOOL_SETS,
    PACKAGE_TOOLS,
    TOOL_RECIPES,
)
