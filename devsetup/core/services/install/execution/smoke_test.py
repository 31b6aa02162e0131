"""
L4 Execution — Post-install smoke test.

Builds and runs a hello-world module in a throwaway directory to prove
the toolchain works, not just that the binary exists.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from devsetup.core.errors import VerificationError
from devsetup.core.services.install.data.constants import (
    SMOKE_TEST_MODULE,
    SMOKE_TEST_OUTPUT,
    SMOKE_TEST_SOURCE,
)
from devsetup.core.services.install.execution.subprocess_runner import run_command

logger = logging.getLogger(__name__)


def run_smoke_test(
    go_binary: Path,
    env: Mapping[str, str] | None = None,
    timeout: int | None = None,
) -> dict[str, Any]:
    """``go mod init`` + ``go run main.go`` in a temp dir.

    Raises:
        VerificationError: If either command fails or the program's
            output is not what it should print.
    """
    with tempfile.TemporaryDirectory(prefix="go-test-") as tmp:
        go = str(go_binary)

        init = run_command([go, "mod", "init", SMOKE_TEST_MODULE], env=env, cwd=tmp, timeout=timeout)
        if not init["ok"]:
            raise VerificationError(f"go mod init failed: {init.get('stderr') or init['error']}")

        (Path(tmp) / "main.go").write_text(SMOKE_TEST_SOURCE, encoding="utf-8")

        run = run_command([go, "run", "main.go"], env=env, cwd=tmp, timeout=timeout)
        if not run["ok"]:
            raise VerificationError(f"go run failed: {run.get('stderr') or run['error']}")

    output = run["stdout"].strip()
    if SMOKE_TEST_OUTPUT not in output:
        raise VerificationError(f"Unexpected smoke test output: {output!r}")

    logger.info("Smoke test passed: %s", output)
    return {"ok": True, "output": output}
