"""
Shared test fixtures and configuration.

Nothing here touches the network or a real package manager: PATH is
narrowed to a per-test ``bin`` directory holding tiny ``/bin/sh``
stand-ins for the tools under test.
"""

import io
import os
import tarfile
from pathlib import Path

import pytest

from devsetup.core.models.settings import InstallerConfig

FAKE_GO_SCRIPT = """\
case "$1" in
    version) echo "go version go1.24.4 linux/amd64" ;;
    env) echo "/fake/$2" ;;
    mod) echo "go: creating new go.mod: module $3" ;;
    run) echo "Go installation working!" ;;
    *) exit 0 ;;
esac
"""


def write_tool(bin_dir: Path, name: str, body: str) -> Path:
    """Drop an executable shell script named ``name`` into ``bin_dir``."""
    bin_dir.mkdir(parents=True, exist_ok=True)
    path = bin_dir / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(0o755)
    return path


def go_archive_bytes(go_script: str = FAKE_GO_SCRIPT) -> bytes:
    """A ``.tar.gz`` shaped like a Go release: ``go/bin/go`` plus ``go/VERSION``."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tf:
        for name, content, mode in (
            ("go/bin/go", "#!/bin/sh\n" + go_script, 0o755),
            ("go/VERSION", "go1.24.4\n", 0o644),
        ):
            data = content.encode()
            info = tarfile.TarInfo(name)
            info.size = len(data)
            info.mode = mode
            tf.addfile(info, io.BytesIO(data))
    return buf.getvalue()


@pytest.fixture
def restore_environ():
    """Undo any os.environ writes the code under test makes."""
    saved = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def home(tmp_path: Path, monkeypatch, restore_environ) -> Path:
    """Isolated HOME with no devsetup / Go environment leaking in."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    for name in list(os.environ):
        if name.startswith("DEVSETUP_") or name in ("GOROOT", "GOPATH", "GOBIN"):
            monkeypatch.delenv(name)
    return home_dir


@pytest.fixture
def bin_dir(tmp_path: Path, monkeypatch, home: Path) -> Path:
    """Empty directory that is the whole of PATH."""
    path = tmp_path / "bin"
    path.mkdir()
    monkeypatch.setenv("PATH", str(path))
    return path


@pytest.fixture
def config(home: Path) -> InstallerConfig:
    """Default settings, resolved against the isolated HOME."""
    return InstallerConfig(min_download_bytes=1, in_use_wait_seconds=0)


@pytest.fixture
def make_tool(bin_dir: Path):
    """``make_tool("tmux", 'echo "tmux 3.4"')`` puts a fake tool on PATH."""

    def _make(name: str, body: str = "exit 0", directory: Path | None = None) -> Path:
        return write_tool(directory or bin_dir, name, body)

    return _make


@pytest.fixture
def go_archive() -> bytes:
    """Bytes of a minimal Go release archive whose ``go`` passes the smoke test."""
    return go_archive_bytes()


@pytest.fixture
def fake_go_script() -> str:
    return FAKE_GO_SCRIPT
