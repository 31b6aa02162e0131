"""
Tests for Go tool sets installed with ``go install``.
"""

from unittest.mock import patch

import pytest

from devsetup.core.errors import InstallError, MissingPrerequisiteError
from devsetup.core.services.install.data.recipes import GO_TOOL_SETS, TOOL_RECIPES
from devsetup.core.services.install.orchestration.go_tools import (
    describe_tool_set,
    go_install,
    install_tool_set,
    require_go,
    verify_lines,
)

_RUN = "devsetup.core.services.install.orchestration.go_tools.run_command"


class TestToolSets:
    def test_quality(self):
        assert GO_TOOL_SETS["quality"]["tools"] == ["gopls", "goimports", "staticcheck", "godoc"]

    def test_workflow(self):
        assert GO_TOOL_SETS["workflow"]["tools"] == ["air", "dlv", "golangci-lint"]

    def test_every_tool_has_a_module(self):
        for definition in GO_TOOL_SETS.values():
            for tool in definition["tools"]:
                assert TOOL_RECIPES[tool]["module"]

    def test_describe(self):
        assert describe_tool_set("quality")[0] == "- gopls (language server)"

    def test_unknown_set(self):
        with pytest.raises(InstallError, match="Unknown Go tool set"):
            describe_tool_set("nope")


class TestRequireGo:
    def test_missing(self, bin_dir):
        with pytest.raises(MissingPrerequisiteError, match="Run `devsetup go` first"):
            require_go()

    def test_present(self, make_tool):
        go = make_tool("go")
        assert require_go() == str(go)


class TestInstall:
    def test_go_install_command(self):
        with patch(_RUN, return_value={"ok": True, "returncode": 0}) as run:
            go_install("staticcheck", go_binary="/opt/go/bin/go")
        assert run.call_args.args[0] == [
            "/opt/go/bin/go", "install", "honnef.co/go/tools/cmd/staticcheck@latest",
        ]

    def test_not_a_go_tool(self):
        assert go_install("tmux")["ok"] is False

    def test_tool_set_in_order(self, make_tool):
        make_tool("go")
        messages: list[str] = []
        with patch(_RUN, return_value={"ok": True, "returncode": 0}) as run:
            result = install_tool_set("workflow", on_progress=messages.append)

        modules = [c.args[0][2] for c in run.call_args_list]
        assert modules == [
            "github.com/air-verse/air@latest",
            "github.com/go-delve/delve/cmd/dlv@latest",
            "github.com/golangci/golangci-lint/cmd/golangci-lint@latest",
        ]
        assert result["installed"] == ["air", "dlv", "golangci-lint"]
        assert messages == ["Installing air...", "Installing dlv...", "Installing golangci-lint..."]

    def test_first_failure_aborts(self, make_tool):
        make_tool("go")
        failed = {"ok": False, "returncode": 1, "error": "Command failed (exit 1)"}
        with patch(_RUN, return_value=failed) as run:
            with pytest.raises(InstallError, match="Failed to install gopls"):
                install_tool_set("quality")
        assert run.call_count == 1

    def test_requires_go(self, bin_dir):
        with patch(_RUN) as run:
            with pytest.raises(MissingPrerequisiteError):
                install_tool_set("quality")
        run.assert_not_called()


class TestVerifyLines:
    def test_found_and_missing(self, make_tool):
        gopls = make_tool("gopls", 'echo "golang.org/x/tools/gopls v0.16.0"')
        lines = verify_lines(["gopls", "godoc"])
        assert lines == [f"✓ gopls: {gopls}", "✗ godoc: NOT FOUND"]
