"""
L3 Detection — read-only checks of the host.
"""

from devsetup.core.services.install.detection.platform import (  # noqa: F401
    detect_platform,
    is_wsl,
    os_type,
)
from devsetup.core.services.install.detection.tool_version import (  # noqa: F401
    get_tool_version,
    inspect_tool,
)
