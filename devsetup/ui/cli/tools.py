"""
CLI commands for package-manager tools: tmux, nvim, alacritty.

All three share one body; only the recipe differs.
"""

from __future__ import annotations

import click

from devsetup.core.errors import InstallError
from devsetup.ui.cli.common import fail, get_config


def _run_package_install(ctx: click.Context, tool: str) -> None:
    from devsetup.core.services.install.data.recipes import TOOL_RECIPES
    from devsetup.core.services.install.orchestration.package_tools import (
        install_companions,
        install_package_tool,
    )
    from devsetup.core.services.install.orchestration.report import next_steps

    config = get_config(ctx)
    label = TOOL_RECIPES[tool]["label"]
    click.echo(f"=== {label} Setup ===")

    try:
        result = install_package_tool(
            tool,
            registry=ctx.obj.get("registry"),
            timeout=config.command_timeout,
            on_progress=click.echo,
        )
        if result["already_installed"]:
            return
        install_companions(tool, timeout=config.command_timeout, on_progress=click.echo)
    except (InstallError, OSError) as e:
        fail(str(e))

    click.secho(f"Setup complete: {result['version'] or result['path']}", fg="green")
    click.echo()
    click.echo("Next steps:")
    for line in next_steps(tool, config):
        click.echo(line)


@click.command()
@click.pass_context
def tmux(ctx: click.Context) -> None:
    """Install tmux via the system package manager."""
    _run_package_install(ctx, "tmux")


@click.command()
@click.pass_context
def nvim(ctx: click.Context) -> None:
    """Install Neovim (and gopls when Go is present)."""
    _run_package_install(ctx, "nvim")


@click.command()
@click.pass_context
def alacritty(ctx: click.Context) -> None:
    """Install the Alacritty terminal emulator."""
    _run_package_install(ctx, "alacritty")
