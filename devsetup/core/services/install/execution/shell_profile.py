"""
L4 Execution — Shell profile environment block.

devsetup owns one sentinel-delimited block in the profile file.  The
block is replaced in place on every run and appended when missing;
everything outside it is left untouched.

The same export list drives both the POSIX text written to disk and
the values applied to ``os.environ``, so steps later in the same run
see the environment a fresh login shell would.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import time
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from devsetup.core.errors import InstallError
from devsetup.core.models.settings import InstallerConfig
from devsetup.core.services.install.data.constants import (
    PROFILE_BLOCK_BEGIN,
    PROFILE_BLOCK_END,
)
from devsetup.core.services.install.detection.platform import os_type

logger = logging.getLogger(__name__)

_VAR_RE = re.compile(r"\$(?:\{(\w+)\}|(\w+))")

_OS_TYPE_CASE = """\
case "$(uname -s)" in
    Linux*)     export OS_TYPE="linux";;
    Darwin*)    export OS_TYPE="macos";;
    CYGWIN*|MINGW*|MSYS*) export OS_TYPE="windows";;
    *)          export OS_TYPE="unknown";;
esac"""


def _shell_path(path: Path, home: Path) -> str:
    """Render ``path`` relative to ``$HOME`` when it lives under it."""
    try:
        rel = path.relative_to(home)
    except ValueError:
        return str(path)
    return "$HOME" if str(rel) == "." else f"$HOME/{rel.as_posix()}"


def profile_exports(config: InstallerConfig, home: Path | None = None) -> list[dict[str, Any]]:
    """Ordered export list for the managed block.

    Each entry is ``{"name", "value", "comment", "if_dir"}``; ``if_dir``
    makes the export conditional on a directory existing.
    """
    home = home or Path.home()
    goroot = _shell_path(config.goroot_path, home)
    gopath = _shell_path(config.gopath_path, home)

    def entry(name: str, value: str, comment: str = "", if_dir: str | None = None) -> dict:
        return {"name": name, "value": value, "comment": comment, "if_dir": if_dir}

    return [
        entry("XDG_CONFIG_HOME", "$HOME/.config", "XDG Base Directory Specification"),
        entry("XDG_DATA_HOME", "$HOME/.local/share"),
        entry("XDG_CACHE_HOME", "$HOME/.cache"),
        entry("PATH", "$HOME/.local/bin:$PATH", "Local installation paths"),
        entry("GOROOT", goroot, "Go environment", if_dir=goroot),
        entry("PATH", "$GOROOT/bin:$PATH", if_dir=goroot),
        entry("GOPATH", gopath),
        entry("PATH", "$PATH:$GOPATH/bin"),
        entry("GOPROXY", config.goproxy, "Go configuration"),
        entry("GOSUMDB", config.gosumdb),
        entry("EDITOR", config.editor, "Development environment"),
        entry("VISUAL", config.editor),
        entry("WORKSPACE", _shell_path(config.workspace_path, home)),
        entry("LANG", config.locale, "Locale"),
        entry("LC_ALL", config.locale),
    ]


def render_profile_block(config: InstallerConfig, home: Path | None = None) -> str:
    """POSIX-only text of the managed block, sentinels included."""
    lines = [
        PROFILE_BLOCK_BEGIN,
        "# Managed by devsetup. Changes inside this block are overwritten.",
    ]
    open_if: str | None = None

    for item in profile_exports(config, home):
        if open_if is not None and item["if_dir"] != open_if:
            lines.append("fi")
            open_if = None
        if item["comment"]:
            lines.append("")
            lines.append(f"# {item['comment']}")
        if item["if_dir"] is not None and open_if is None:
            lines.append(f'if [ -d "{item["if_dir"]}" ]; then')
            open_if = item["if_dir"]

        indent = "    " if open_if is not None else ""
        lines.append(f'{indent}export {item["name"]}="{item["value"]}"')

    if open_if is not None:
        lines.append("fi")

    lines.append("")
    lines.append("# Platform detection")
    lines.append(_OS_TYPE_CASE)
    lines.append(PROFILE_BLOCK_END)
    return "\n".join(lines) + "\n"


def merge_managed_block(existing: str, block: str) -> str:
    """Replace the managed block in ``existing``, or append it.

    Raises:
        InstallError: If a begin sentinel has no matching end sentinel.
    """
    begin = existing.find(PROFILE_BLOCK_BEGIN)
    if begin == -1:
        if not existing:
            return block
        sep = "" if existing.endswith("\n") else "\n"
        return f"{existing}{sep}\n{block}"

    end = existing.find(PROFILE_BLOCK_END, begin)
    if end == -1:
        raise InstallError(
            "Shell profile has an unterminated devsetup block "
            f"(missing '{PROFILE_BLOCK_END}'). Fix it by hand and re-run."
        )

    end += len(PROFILE_BLOCK_END)
    if existing[end:end + 1] == "\n":
        end += 1
    return existing[:begin] + block + existing[end:]


def write_profile(config: InstallerConfig, home: Path | None = None) -> dict[str, Any]:
    """Write the managed block into the profile file.

    A symlinked profile is written through to its target, and the file
    keeps its permission bits.

    Returns:
        ``{"path": "...", "changed": bool, "backup": "..." | None}``

    Raises:
        InstallError: If the profile cannot be read or written.
    """
    target = config.profile_file
    try:
        return _write_profile(target, config, home)
    except OSError as e:
        raise InstallError(f"Cannot write shell profile {target}: {e}") from e


def _write_profile(target: Path, config: InstallerConfig, home: Path | None) -> dict[str, Any]:
    real = target.resolve()
    existing = ""
    if real.is_file():
        existing = real.read_text(encoding="utf-8")

    updated = merge_managed_block(existing, render_profile_block(config, home))
    if updated == existing:
        return {"path": str(target), "changed": False, "backup": None}

    backup = None
    if existing:
        backup = f"{target}.backup.{int(time.time())}"
        try:
            shutil.copy2(real, backup)
        except OSError as e:
            logger.warning("Could not back up %s: %s", target, e)
            backup = None

    real.parent.mkdir(parents=True, exist_ok=True)
    tmp = real.with_name(f".{real.name}.devsetup.tmp")
    tmp.write_text(updated, encoding="utf-8")
    if real.is_file():
        shutil.copymode(real, tmp)
    os.replace(tmp, real)

    logger.info("Wrote environment block to %s", real)
    return {"path": str(target), "changed": True, "backup": backup}


def _expand(value: str, env: MutableMapping[str, str]) -> str:
    return _VAR_RE.sub(lambda m: env.get(m.group(1) or m.group(2), ""), value)


def apply_environment(
    config: InstallerConfig,
    environ: MutableMapping[str, str] | None = None,
    home: Path | None = None,
) -> dict[str, str]:
    """Evaluate the managed block against ``environ`` (default: os.environ).

    Equivalent to sourcing the profile in the current process.

    Returns:
        The variables that were set, with their final values.
    """
    env = os.environ if environ is None else environ
    env.setdefault("HOME", str(home or Path.home()))

    applied: dict[str, str] = {}
    for item in profile_exports(config, home):
        cond = item["if_dir"]
        if cond is not None and not Path(_expand(cond, env)).is_dir():
            continue
        env[item["name"]] = _expand(item["value"], env)
        applied[item["name"]] = env[item["name"]]

    env["OS_TYPE"] = os_type()
    applied["OS_TYPE"] = env["OS_TYPE"]
    return applied
