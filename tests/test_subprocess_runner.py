"""
Tests for the subprocess runner — never raises, always a dict.
"""

from unittest.mock import patch

from devsetup.core.services.install.execution.subprocess_runner import run_command


class TestRunCommand:
    def test_success(self, make_tool):
        make_tool("hello", 'echo "hi there"')
        result = run_command(["hello"])
        assert result["ok"]
        assert result["stdout"].strip() == "hi there"
        assert result["returncode"] == 0

    def test_non_zero_exit(self, make_tool):
        make_tool("broken", "echo oops >&2\nexit 3")
        result = run_command(["broken"])
        assert not result["ok"]
        assert result["returncode"] == 3
        assert "exit 3" in result["error"]
        assert "oops" in result["stderr"]

    def test_missing_command(self, bin_dir):
        result = run_command(["definitely-not-installed"])
        assert not result["ok"]
        assert "Command not found" in result["error"]

    def test_sudo_prefix_when_not_root(self, make_tool):
        make_tool("sudo", 'exec "$@"')
        make_tool("apt", "exit 0")
        with patch(
            "devsetup.core.services.install.execution.subprocess_runner._is_root",
            return_value=False,
        ), patch("subprocess.run") as run:
            run.return_value.returncode = 0
            run.return_value.stdout = ""
            run.return_value.stderr = ""
            run_command(["apt", "update"], needs_sudo=True)

        assert run.call_args.args[0] == ["sudo", "apt", "update"]

    def test_no_sudo_when_root(self):
        with patch(
            "devsetup.core.services.install.execution.subprocess_runner._is_root",
            return_value=True,
        ), patch("subprocess.run") as run:
            run.return_value.returncode = 0
            run.return_value.stdout = ""
            run.return_value.stderr = ""
            run_command(["apt", "update"], needs_sudo=True)

        assert run.call_args.args[0] == ["apt", "update"]
