"""
L4 Execution — functions that WRITE to the system: subprocess calls,
downloads, extraction, directory removal and profile writes.
"""

from devsetup.core.services.install.execution.cleanup import (  # noqa: F401
    clean_gopath_caches,
    clean_module_cache,
    is_in_use,
    remove_tree,
)
from devsetup.core.services.install.execution.download import (  # noqa: F401
    download_file,
    go_archive_name,
    go_archive_url,
    verify_download_size,
)
from devsetup.core.services.install.execution.extract import (  # noqa: F401
    extract_archive,
)
from devsetup.core.services.install.execution.shell_profile import (  # noqa: F401
    apply_environment,
    merge_managed_block,
    render_profile_block,
    write_profile,
)
from devsetup.core.services.install.execution.smoke_test import (  # noqa: F401
    run_smoke_test,
)
from devsetup.core.services.install.execution.subprocess_runner import (  # noqa: F401
    run_command,
)
