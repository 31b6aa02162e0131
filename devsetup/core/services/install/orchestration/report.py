"""
L5 Orchestration — Post-install report text.

Pure text builders; the CLI decides how to print them.
"""

from __future__ import annotations

from pathlib import Path

from devsetup.core.models.platform import Platform
from devsetup.core.models.settings import InstallerConfig
from devsetup.core.services.install.data.recipes import TOOL_RECIPES


def next_steps(tool: str, config: InstallerConfig) -> list[str]:
    """Numbered next-steps block shown after a package-manager install."""
    steps = [f"1. Set up your dotfiles: {config.dotfiles_url}"]
    hint = TOOL_RECIPES.get(tool, {}).get("config_hint")
    if hint:
        label = TOOL_RECIPES[tool].get("label", tool)
        steps.append(f"2. Create {label} configuration in {hint}")
    return steps


def usage_lines(tools: list[str]) -> list[str]:
    """Example invocations for tools that have one."""
    return [
        f"  {TOOL_RECIPES[t]['usage']}"
        for t in tools
        if TOOL_RECIPES.get(t, {}).get("usage")
    ]


def directory_summary(config: InstallerConfig, home: Path | None = None) -> list[str]:
    home = home or Path.home()
    return [
        f"GOROOT: {config.goroot_path}",
        f"GOPATH: {config.gopath_path}",
        f"Workspace: {config.workspace_path}",
        f"Config: {home / '.config'}",
    ]


def shell_instructions(target: Platform, config: InstallerConfig) -> list[str]:
    """How to load the profile from the user's interactive shell."""
    profile = config.profile_path
    if target.platform == "windows":
        lines = [
            "For Git Bash on Windows:",
            f"  Add '. {profile}' to ~/.bashrc",
            "",
            "For PowerShell, manually add to PATH:",
            f'  $env:PATH += ";{config.goroot_path / "bin"};{config.gopath_path / "bin"}"',
        ]
    else:
        lines = [
            "Add this line to your shell config file:",
            "  ~/.bashrc or ~/.zshrc:",
            f"    . {profile}",
            "",
            "Or the environment will be loaded automatically",
            "when you start a new login shell.",
        ]
    lines += ["", "Restart your terminal to load the new environment."]
    return lines


def quick_start_lines(config: InstallerConfig) -> list[str]:
    workspace = config.workspace_dir.rstrip("/")
    return [
        "Quick start:",
        f"  mkdir {workspace}/my-project && cd {workspace}/my-project",
        "  go mod init my-project",
        "  printf 'package main\\nimport \"fmt\"\\nfunc main() { fmt.Println(\"Hello!\") }\\n' > main.go",
        "  go run main.go",
    ]
