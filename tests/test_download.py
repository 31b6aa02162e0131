"""
Tests for archive naming, download, size verification and extraction.
"""

import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest

from devsetup.core.errors import DownloadError, ExtractionError
from devsetup.core.models.platform import Platform
from devsetup.core.services.install.execution.download import (
    download_file,
    find_downloader,
    go_archive_name,
    go_archive_url,
    verify_download_size,
)
from devsetup.core.services.install.execution.extract import extract_archive

LINUX = Platform(platform="linux", arch="amd64", label="Linux")
MAC_ARM = Platform(platform="darwin", arch="arm64", label="macOS (Apple Silicon)")
WINDOWS = Platform(platform="windows", arch="amd64", label="Windows (Git Bash/MSYS2)")


class TestArchiveNames:
    def test_tarball(self):
        assert go_archive_name("1.24.4", LINUX) == "go1.24.4.linux-amd64.tar.gz"
        assert go_archive_name("1.24.4", MAC_ARM) == "go1.24.4.darwin-arm64.tar.gz"

    def test_windows_zip(self):
        assert go_archive_name("1.24.4", WINDOWS) == "go1.24.4.windows-amd64.zip"

    def test_url(self):
        assert (
            go_archive_url("https://golang.org/dl/", "1.24.4", LINUX)
            == "https://golang.org/dl/go1.24.4.linux-amd64.tar.gz"
        )


class TestDownload:
    def test_prefers_curl(self, make_tool):
        make_tool("wget")
        make_tool("curl")
        assert find_downloader() == "curl"

    def test_falls_back_to_wget(self, make_tool):
        make_tool("wget")
        assert find_downloader() == "wget"

    def test_no_downloader(self, bin_dir, tmp_path: Path):
        with pytest.raises(DownloadError, match="Neither curl nor wget"):
            download_file("https://example.invalid/go.tgz", tmp_path / "go.tgz")

    def test_curl_command(self, make_tool, tmp_path: Path):
        make_tool("curl")
        dest = tmp_path / "go.tgz"

        def fake_run(cmd, **kwargs):
            dest.write_bytes(b"data")
            return {"ok": True, "returncode": 0}

        with patch(
            "devsetup.core.services.install.execution.download.run_command",
            side_effect=fake_run,
        ) as run:
            assert download_file("https://x/go.tgz", dest) == dest

        assert run.call_args.args[0] == ["curl", "-fL", "https://x/go.tgz", "-o", str(dest)]

    def test_wget_writes_file(self, make_tool, tmp_path: Path):
        make_tool("wget", 'while [ "$1" != "-O" ]; do shift; done\necho payload > "$2"')
        dest = tmp_path / "go.tgz"
        download_file("https://x/go.tgz", dest)
        assert dest.read_text() == "payload\n"

    def test_failed_download_removes_partial(self, make_tool, tmp_path: Path):
        make_tool("curl", 'while [ "$1" != "-o" ]; do shift; done\necho partial > "$2"\nexit 22')
        dest = tmp_path / "go.tgz"
        with pytest.raises(DownloadError, match="Download failed using curl"):
            download_file("https://x/go.tgz", dest)
        assert not dest.exists()


class TestSizeGuard:
    def test_empty_is_rejected(self, tmp_path: Path):
        path = tmp_path / "go.tgz"
        path.write_bytes(b"")
        with pytest.raises(DownloadError, match="empty"):
            verify_download_size(path)

    def test_below_minimum(self, tmp_path: Path):
        path = tmp_path / "go.tgz"
        path.write_bytes(b"x" * 1024)
        with pytest.raises(DownloadError, match="file too small: 1024 bytes"):
            verify_download_size(path, min_bytes=52428800)

    def test_at_minimum(self, tmp_path: Path):
        path = tmp_path / "go.tgz"
        path.write_bytes(b"x" * 100)
        assert verify_download_size(path, min_bytes=100) == 100


class TestExtract:
    def test_tarball(self, tmp_path: Path, go_archive: bytes):
        archive = tmp_path / "go1.24.4.linux-amd64.tar.gz"
        archive.write_bytes(go_archive)
        extract_archive(archive, tmp_path / "out")
        assert (tmp_path / "out" / "go" / "bin" / "go").is_file()

    def test_zip(self, tmp_path: Path):
        archive = tmp_path / "go1.24.4.windows-amd64.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("go/bin/go.exe", "MZ")
        extract_archive(archive, tmp_path / "out")
        assert (tmp_path / "out" / "go" / "bin" / "go.exe").is_file()

    def test_corrupt_archive(self, tmp_path: Path):
        archive = tmp_path / "go.tar.gz"
        archive.write_bytes(b"<html>Not Found</html>")
        with pytest.raises(ExtractionError):
            extract_archive(archive, tmp_path / "out")

    def test_unknown_format(self, tmp_path: Path):
        archive = tmp_path / "go.rar"
        archive.write_bytes(b"")
        with pytest.raises(ExtractionError, match="Unsupported archive format"):
            extract_archive(archive, tmp_path / "out")
