"""
Tests for package-manager-delegated installers: tmux, nvim, alacritty.
"""

from unittest.mock import patch

import pytest

from devsetup.adapters import MockPackageManager, PackageManagerKind, PackageManagerRegistry
from devsetup.core.errors import (
    InstallError,
    UnsupportedPackageManagerError,
    VerificationError,
)
from devsetup.core.services.install.orchestration.package_tools import (
    install_companions,
    install_package_tool,
)


def _registry(*backends) -> PackageManagerRegistry:
    return PackageManagerRegistry(list(backends))


class TestPresenceCheck:
    def test_already_installed_is_untouched(self, make_tool):
        make_tool("tmux", 'echo "tmux 3.3a"')
        mock = MockPackageManager()
        messages: list[str] = []

        result = install_package_tool(
            "tmux", registry=_registry(mock), on_progress=messages.append,
        )

        assert result["already_installed"] is True
        assert result["version"] == "tmux 3.3a"
        assert mock.call_count == 0
        assert messages == ["tmux is already installed: tmux 3.3a"]

    def test_nvim_first_line_only(self, make_tool):
        make_tool("nvim", 'echo "NVIM v0.10.1"\necho "Build type: Release"')
        result = install_package_tool("nvim", registry=_registry(MockPackageManager()))
        assert result["version"] == "NVIM v0.10.1"


class TestInstall:
    def test_apt_installs_tmux(self, make_tool):
        mock = MockPackageManager(
            PackageManagerKind.APT,
            on_install=lambda pkg: make_tool("tmux", 'echo "tmux 3.4"'),
        )

        result = install_package_tool("tmux", registry=_registry(mock))

        assert mock.call_log == [{"package": "tmux", "cask": False}]
        assert result["manager"] == "apt"
        assert result["version"] == "tmux 3.4"
        assert result["already_installed"] is False

    def test_real_apt_backend_commands(self, make_tool):
        from devsetup.adapters.package_managers import AptPackageManager

        make_tool("apt")

        def fake_run(cmd, **kwargs):
            if cmd[:2] == ["apt", "install"]:
                make_tool("tmux", 'echo "tmux 3.4"')
            return {"ok": True, "returncode": 0}

        with patch("devsetup.adapters.base.run_command", side_effect=fake_run) as run:
            result = install_package_tool("tmux", registry=_registry(AptPackageManager()))

        assert [c.args[0] for c in run.call_args_list] == [
            ["apt", "update"],
            ["apt", "install", "-y", "tmux"],
        ]
        assert result["version"] == "tmux 3.4"

    def test_alacritty_is_a_cask(self, make_tool):
        mock = MockPackageManager(
            PackageManagerKind.BREW,
            on_install=lambda pkg: make_tool("alacritty", 'echo "alacritty 0.13.2"'),
        )
        install_package_tool("alacritty", registry=_registry(mock))
        assert mock.call_log == [{"package": "alacritty", "cask": True}]

    @pytest.mark.parametrize(
        "tool, label", [("tmux", "tmux"), ("nvim", "Neovim"), ("alacritty", "Alacritty")],
    )
    def test_unknown_package_manager(self, bin_dir, tool, label):
        registry = _registry(MockPackageManager(available=False))
        with pytest.raises(
            UnsupportedPackageManagerError,
            match=f"Unsupported package manager. Please install {label} manually.",
        ):
            install_package_tool(tool, registry=registry)
        assert registry.resolve() is None

    def test_manager_failure_is_fatal(self, bin_dir):
        with pytest.raises(InstallError, match="apt failed to install tmux"):
            install_package_tool("tmux", registry=_registry(MockPackageManager(fail=True)))

    def test_still_missing_after_install(self, bin_dir):
        with pytest.raises(VerificationError, match="tmux installation failed"):
            install_package_tool("tmux", registry=_registry(MockPackageManager()))

    def test_not_a_package_tool(self):
        with pytest.raises(InstallError, match="No package recipe"):
            install_package_tool("gopls")


class TestCompanions:
    def test_go_missing_is_a_warning(self, bin_dir):
        messages: list[str] = []
        result = install_companions("nvim", on_progress=messages.append)
        assert result["skipped"] is True
        assert "Warning: Go is not installed. Please install Go first." in messages

    def test_installs_gopls(self, make_tool):
        make_tool("go")

        def fake_go_install(tool, **kwargs):
            make_tool(tool, 'echo "golang.org/x/tools/gopls v0.16.0"')
            return {"ok": True, "returncode": 0}

        with patch(
            "devsetup.core.services.install.orchestration.package_tools.go_install",
            side_effect=fake_go_install,
        ) as go_install:
            result = install_companions("nvim")

        go_install.assert_called_once()
        assert result["installed"] == ["gopls"]

    def test_gopls_present(self, make_tool):
        make_tool("go")
        make_tool("gopls", 'echo "golang.org/x/tools/gopls v0.16.0"')
        with patch(
            "devsetup.core.services.install.orchestration.package_tools.go_install",
        ) as go_install:
            result = install_companions("nvim")
        go_install.assert_not_called()
        assert result["present"] == ["gopls"]

    def test_no_companions(self):
        assert install_companions("tmux") == {
            "skipped": False, "installed": [], "present": [], "missing": [],
        }
