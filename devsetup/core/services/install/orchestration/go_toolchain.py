"""
L5 Orchestration — Go toolchain installer.

Two variants share one flow:

    clean      remove old root → download → extract → verify → profile
    hardened   + permission pre-flight, directory layout, safe cleanup,
                 size guard, dev tools, smoke test

The post-install check for ``<goroot>/bin/go`` is the only thing that
decides whether the toolchain counts as installed.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
import time
from collections.abc import Callable, MutableMapping
from pathlib import Path
from typing import Any

from devsetup.core.errors import PermissionDeniedError, VerificationError
from devsetup.core.models.platform import Platform
from devsetup.core.models.settings import InstallerConfig
from devsetup.core.services.install.data.constants import HOME_LAYOUT_DIRS
from devsetup.core.services.install.data.recipes import GO_TOOL_SETS
from devsetup.core.services.install.execution.cleanup import (
    clean_gopath_caches,
    clean_module_cache,
    is_in_use,
    remove_tree,
)
from devsetup.core.services.install.execution.download import (
    download_file,
    go_archive_name,
    go_archive_url,
    verify_download_size,
)
from devsetup.core.services.install.execution.extract import extract_archive
from devsetup.core.services.install.execution.shell_profile import (
    apply_environment,
    write_profile,
)
from devsetup.core.services.install.execution.smoke_test import run_smoke_test
from devsetup.core.services.install.execution.subprocess_runner import run_command
from devsetup.core.services.install.orchestration.go_tools import (
    install_go_tools,
    verify_lines,
)

logger = logging.getLogger(__name__)

Progress = Callable[[str], None]


def _noop(_msg: str) -> None:
    return None


# ── Current state ───────────────────────────────────────────────


def _go_env(go: str, var: str) -> str:
    result = run_command([go, "env", var], timeout=30)
    return result["stdout"].strip() if result["ok"] else "unknown"


def describe_current_go(environ: MutableMapping[str, str] | None = None) -> dict[str, Any]:
    """What the shell currently sees of Go.

    Returns::

        {"found": True, "binary": "/usr/local/go/bin/go",
         "version": "go1.22.0", "goroot": "...", "gopath": "...",
         "env": {"PATH": "...", "GOROOT": "not set", "GOPATH": "not set"}}
    """
    env = os.environ if environ is None else environ
    info: dict[str, Any] = {
        "found": False,
        "binary": None,
        "version": None,
        "goroot": None,
        "gopath": None,
        "env": {
            "PATH": env.get("PATH", ""),
            "GOROOT": env.get("GOROOT") or "not set",
            "GOPATH": env.get("GOPATH") or "not set",
        },
    }

    go = shutil.which("go", path=env.get("PATH"))
    if not go:
        return info

    result = run_command([go, "version"], timeout=30)
    fields = result["stdout"].split() if result["ok"] else []
    info.update(
        found=True,
        binary=go,
        version=fields[2] if len(fields) > 2 else "unknown",
        goroot=_go_env(go, "GOROOT"),
        gopath=_go_env(go, "GOPATH"),
    )
    return info


def installed_go_binary(config: InstallerConfig, target: Platform) -> Path:
    """Expected binary under the toolchain root (``go.exe`` on Windows)."""
    name = "go.exe" if target.platform == "windows" else "go"
    return config.goroot_path / "bin" / name


# ── Hardened pre-flight ─────────────────────────────────────────


def _writable(path: Path) -> bool:
    return os.access(path, os.W_OK)


def validate_permissions(
    config: InstallerConfig,
    home: Path | None = None,
    tmp_dir: Path | None = None,
) -> None:
    """Refuse to start when any directory we would write into is read-only.

    Checks HOME, each existing directory from the install dir up to HOME
    (or up to the nearest existing ancestor when the install dir lives
    outside HOME), and the temp directory.

    Raises:
        PermissionDeniedError: Naming the first unwritable directory.
    """
    home = home or Path.home()
    if not _writable(home):
        raise PermissionDeniedError(f"Cannot write to home directory: {home}")

    for directory in [config.install_path, *config.install_path.parents]:
        exists = directory.is_dir()
        if exists and not _writable(directory):
            raise PermissionDeniedError(f"Cannot write to existing directory: {directory}")
        if directory == home or (exists and home not in directory.parents):
            break

    tmp = tmp_dir or Path(tempfile.gettempdir())
    if not _writable(tmp):
        raise PermissionDeniedError(f"Cannot write to temp directory: {tmp}")


def create_directories(
    config: InstallerConfig,
    home: Path | None = None,
    on_progress: Progress | None = None,
) -> list[Path]:
    """Create the install dir, workspace and XDG layout.

    Returns:
        The directories that did not exist before.

    Raises:
        PermissionDeniedError: If a directory cannot be created or written.
    """
    say = on_progress or _noop
    home = home or Path.home()
    wanted = [config.install_path, config.workspace_path]
    wanted += [home / rel for rel in HOME_LAYOUT_DIRS]

    created: list[Path] = []
    for directory in wanted:
        if directory.is_dir():
            say(f"Exists: {directory}")
        else:
            say(f"Creating: {directory}")
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise PermissionDeniedError(f"Failed to create directory: {directory}: {e}") from e
            created.append(directory)
        if not _writable(directory):
            raise PermissionDeniedError(f"Cannot write to directory: {directory}")
    return created


# ── Cleanup ─────────────────────────────────────────────────────


def remove_existing(
    config: InstallerConfig,
    *,
    hardened: bool = False,
    on_progress: Progress | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> dict[str, Any]:
    """Remove a previous toolchain root (and, hardened, the Go caches).

    Returns::

        {"removed": bool, "previous_version": "go1.22.0" | None,
         "modcache_cleaned": bool, "gopath": {...} | None}
    """
    say = on_progress or _noop
    goroot = config.goroot_path
    outcome: dict[str, Any] = {
        "removed": False,
        "previous_version": None,
        "modcache_cleaned": False,
        "gopath": None,
    }

    if goroot.is_dir():
        say(f"Found existing Go installation at: {goroot}")
        if hardened:
            old_go = goroot / "bin" / "go"
            if old_go.is_file():
                result = run_command([str(old_go), "version"], timeout=30)
                fields = result["stdout"].split() if result["ok"] else []
                outcome["previous_version"] = fields[2] if len(fields) > 2 else "unknown"
                say(f"Existing Go version: {outcome['previous_version']}")

            if is_in_use(goroot):
                say(f"Warning: Files in {goroot} are currently in use")
                say(f"Waiting {config.in_use_wait_seconds:g} seconds for processes to finish...")
                sleep(config.in_use_wait_seconds)

        say("Removing existing installation...")
        remove_tree(goroot)
        outcome["removed"] = True
    elif hardened:
        say(f"No existing Go installation found at: {goroot}")

    if not hardened:
        return outcome

    if shutil.which("go"):
        say("Cleaning Go module cache...")
        outcome["modcache_cleaned"] = clean_module_cache()
        if not outcome["modcache_cleaned"]:
            say("Note: Could not clean module cache")

    gopath = config.gopath_path
    if gopath.is_dir():
        say("Cleaning Go workspace cache...")
        caches = clean_gopath_caches(gopath)
        for path in caches["removed"]:
            say(f"Removed cache: {path}")
        for path in caches["failed"]:
            say(f"Warning: Could not remove {path}")
        if caches["src_preserved"]:
            say(f"Note: Preserving your projects in {gopath / 'src'}")
        outcome["gopath"] = caches

    return outcome


# ── Download + extract ──────────────────────────────────────────


def fetch_toolchain(
    config: InstallerConfig,
    target: Platform,
    *,
    min_bytes: int = 1,
    on_progress: Progress | None = None,
) -> Path:
    """Download, size-check and extract the archive into the install dir.

    The archive lives in a per-run temp directory that is removed
    whether or not the steps succeed.

    Returns:
        Path of the installed ``go`` binary.

    Raises:
        DownloadError: Fetch failed or the artifact is below ``min_bytes``.
        ExtractionError: The archive could not be unpacked.
        VerificationError: No ``bin/go`` under the toolchain root afterwards.
    """
    say = on_progress or _noop
    url = go_archive_url(config.download_base_url, config.go_version, target)
    config.install_path.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(prefix="devsetup-go-") as tmp:
        archive = Path(tmp) / go_archive_name(config.go_version, target)
        say(f"Downloading: {url}")
        download_file(url, archive, timeout=config.command_timeout)
        size = verify_download_size(archive, min_bytes=min_bytes)
        say(f"Downloaded file size: {size} bytes")

        say("Extracting...")
        extract_archive(archive, config.install_path)
        archive.unlink(missing_ok=True)

    binary = installed_go_binary(config, target)
    if not binary.is_file():
        raise VerificationError(f"Installation failed - Go binary not found at {binary}")
    return binary


# ── Full flow ───────────────────────────────────────────────────


def install_go(
    config: InstallerConfig,
    target: Platform,
    *,
    hardened: bool = False,
    on_progress: Progress | None = None,
    home: Path | None = None,
    environ: MutableMapping[str, str] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> dict[str, Any]:
    """Install the Go toolchain described by ``config`` for ``target``.

    Args:
        config: Versions and locations.
        target: Resolved platform pair.
        hardened: Run the pre-flight checks, safe cleanup, size guard,
            dev tools and smoke test.
        on_progress: Receives one human-readable line per step.
        home: Home directory (default: ``Path.home()``).
        environ: Environment to update after the profile is written
            (default: ``os.environ``).
        sleep: Used for the in-use wait.

    Returns::

        {"goroot": "...", "binary": "...", "version": "go version ...",
         "profile": {...}, "cleanup": {...}, "dev_tools": [...],
         "verify": [...], "smoke_test": {...} | None}
    """
    say = on_progress or _noop
    env = os.environ if environ is None else environ

    if hardened:
        say("Validating permissions...")
        validate_permissions(config, home=home)
        say("Creating directory structure...")
        create_directories(config, home=home, on_progress=say)

    cleanup = remove_existing(config, hardened=hardened, on_progress=say, sleep=sleep)

    say(f"Installing Go {config.go_version} for {target.pair}...")
    binary = fetch_toolchain(
        config,
        target,
        min_bytes=config.min_download_bytes if hardened else 1,
        on_progress=say,
    )

    version = run_command([str(binary), "version"], timeout=config.command_timeout or 60)
    version_line = version["stdout"].strip() if version["ok"] else "unknown"
    say(f"Go installed successfully: {version_line}")

    say("Setting up environment configuration...")
    profile = write_profile(config, home=home)
    if profile["backup"]:
        say(f"Backed up previous profile to {profile['backup']}")
    apply_environment(config, environ=env, home=home)

    outcome: dict[str, Any] = {
        "goroot": str(config.goroot_path),
        "binary": str(binary),
        "version": version_line,
        "profile": profile,
        "cleanup": cleanup,
        "dev_tools": [],
        "verify": [],
        "smoke_test": None,
    }
    if not hardened:
        return outcome

    dev_tools = GO_TOOL_SETS["dev"]["tools"]
    say("Installing Go development tools...")
    outcome["dev_tools"] = install_go_tools(
        dev_tools,
        go_binary=str(binary),
        env=env,
        timeout=config.command_timeout,
        on_progress=say,
    )
    outcome["verify"] = verify_lines(dev_tools, path=env.get("PATH"))

    say("Testing Go functionality...")
    outcome["smoke_test"] = run_smoke_test(binary, env=dict(env), timeout=config.command_timeout)
    return outcome
