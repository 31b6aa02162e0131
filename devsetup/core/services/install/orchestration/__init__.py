"""
L5 Orchestration — the installer flows.
"""

from devsetup.core.services.install.orchestration.go_toolchain import (  # noqa: F401
    create_directories,
    describe_current_go,
    fetch_toolchain,
    install_go,
    remove_existing,
    validate_permissions,
)
from devsetup.core.services.install.orchestration.go_tools import (  # noqa: F401
    describe_tool_set,
    install_go_tools,
    install_tool_set,
    require_go,
    verify_lines,
)
from devsetup.core.services.install.orchestration.package_tools import (  # noqa: F401
    install_companions,
    install_package_tool,
)
