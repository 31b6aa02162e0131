"""
devsetup — CLI entrypoint.

Usage:
    python -m devsetup.main --help
    python -m devsetup.main platform
    python -m devsetup.main go --hardened
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from devsetup import __version__
from devsetup.core.errors import InstallError
from devsetup.core.observability.logging_config import setup_logging
from devsetup.ui.cli.common import fail, get_config


@click.group()
@click.version_option(version=__version__, prog_name="devsetup")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to config.yml (default: $DEVSETUP_CONFIG or ~/.config/devsetup/config.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """devsetup — install a Go development environment."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("DEVSETUP_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("DEVSETUP_LOG_FILE"),
        log_file_level=os.environ.get("DEVSETUP_LOG_FILE_LEVEL"),
    )


@cli.command()
def platform() -> None:
    """Show the detected platform and package manager."""
    from devsetup.adapters.registry import default_registry
    from devsetup.core.services.install.detection.platform import detect_platform, os_type

    try:
        target = detect_platform()
    except InstallError as e:
        fail(str(e))

    click.secho(f"🖥️  {target.label}", fg="cyan", bold=True)
    click.echo(f"   Platform: {target.pair}")
    click.echo(f"   OS type:  {os_type()}")
    if target.wsl:
        click.echo("   WSL:      yes")

    backend = default_registry().resolve()
    click.echo(f"   Package manager: {backend.name if backend else 'unknown'}")


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show Go and tool installation status."""
    from devsetup.core.services.install.data.recipes import TOOL_RECIPES
    from devsetup.core.services.install.detection.tool_version import inspect_tool
    from devsetup.core.services.install.orchestration.go_toolchain import describe_current_go

    config = get_config(ctx)
    current = describe_current_go()

    click.secho("\n🐹 Go", fg="cyan", bold=True)
    if current["found"]:
        click.echo(f"   ✓ {current['version']}  → {current['binary']}")
        click.echo(f"     GOROOT: {current['goroot']}")
        click.echo(f"     GOPATH: {current['gopath']}")
    else:
        click.echo("   ✗ Go not found in PATH")
    click.echo(f"   Env GOROOT: {current['env']['GOROOT']}  GOPATH: {current['env']['GOPATH']}")
    click.echo(f"   Target: Go {config.go_version} in {config.goroot_path}")

    click.secho("\n🔧 Tools", fg="cyan", bold=True)
    for tool in TOOL_RECIPES:
        if tool == "go":
            continue
        info = inspect_tool(tool)
        if info.found:
            detail = f"  ({info.version})" if info.version else ""
            click.echo(f"   ✓ {tool}: {info.path}{detail}")
        else:
            click.echo(f"   ✗ {tool}: NOT FOUND")
    click.echo()


@cli.command()
@click.option("--print", "print_only", is_flag=True, help="Print the block instead of writing it.")
@click.pass_context
def profile(ctx: click.Context, print_only: bool) -> None:
    """Write the managed environment block into the shell profile."""
    from devsetup.core.services.install.execution.shell_profile import (
        render_profile_block,
        write_profile,
    )

    config = get_config(ctx)

    if print_only:
        click.echo(render_profile_block(config), nl=False)
        return

    try:
        result = write_profile(config)
    except (InstallError, OSError) as e:
        fail(str(e))

    if not result["changed"]:
        click.echo(f"✅ {result['path']} already up to date")
        return

    click.secho(f"✅ Environment written to {result['path']}", fg="green")
    if result["backup"]:
        click.echo(f"   Backup: {result['backup']}")
    click.echo(f"   Run: . {config.profile_path}")


# ── Installer commands ──────────────────────────────────────────

from devsetup.ui.cli.go import go, go_tools  # noqa: E402
from devsetup.ui.cli.tools import alacritty, nvim, tmux  # noqa: E402

cli.add_command(go)
cli.add_command(go_tools)
cli.add_command(tmux)
cli.add_command(nvim)
cli.add_command(alacritty)


if __name__ == "__main__":
    cli()
