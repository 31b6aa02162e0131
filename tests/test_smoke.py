"""
Smoke tests — verify the bootstrap is healthy.

These tests ensure the basic scaffolding works:
- Package imports successfully
- CLI entrypoint responds
- Every installer command is registered
"""

from click.testing import CliRunner

from devsetup import __version__
from devsetup.main import cli


class TestBootstrap:
    """Verify the project bootstrap is healthy."""

    def test_version_is_set(self):
        assert __version__
        assert isinstance(__version__, str)

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Go development environment" in result.output

    def test_commands_registered(self):
        assert set(cli.commands) >= {
            "platform", "status", "profile", "go", "go-tools", "tmux", "nvim", "alacritty",
        }

    def test_each_command_has_help(self):
        runner = CliRunner()
        for name in cli.commands:
            result = runner.invoke(cli, [name, "--help"])
            assert result.exit_code == 0, name
