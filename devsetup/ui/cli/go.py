"""
CLI commands for the Go toolchain and Go tool sets.

Thin wrappers over ``devsetup.core.services.install.orchestration``.
"""

from __future__ import annotations

import click

from devsetup.core.errors import InstallError
from devsetup.ui.cli.common import choice_menu, confirm_gate, fail, get_config, heading


def _show_current_state(config, current: dict) -> None:
    click.echo()
    heading("🔍 Current Go Status:")
    if current["found"]:
        click.echo("✓ Go is installed:")
        click.echo(f"  Binary: {current['binary']}")
        click.echo(f"  Version: {current['version']}")
        click.echo(f"  GOROOT: {current['goroot']}")
        click.echo(f"  GOPATH: {current['gopath']}")
    else:
        click.echo("✗ Go not found in PATH")

    click.echo()
    click.echo("Environment Variables:")
    for name, value in current["env"].items():
        click.echo(f"{name}: {value}")

    click.echo()
    click.echo("Target Installation:")
    click.echo(f"Will install Go {config.go_version} to: {config.goroot_path}")
    click.echo()


@click.command("go")
@click.option("--hardened", is_flag=True, help="Permission checks, safe cleanup, dev tools and a smoke test.")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation menu.")
@click.pass_context
def go(ctx: click.Context, hardened: bool, yes: bool) -> None:
    """Install the Go toolchain."""
    from devsetup.core.services.install.detection.platform import detect_platform
    from devsetup.core.services.install.orchestration.go_toolchain import (
        describe_current_go,
        install_go,
    )
    from devsetup.core.services.install.orchestration.report import (
        directory_summary,
        quick_start_lines,
        shell_instructions,
    )

    config = get_config(ctx)

    if hardened:
        heading("🚀 POSIX-Compliant Universal Go Installer")
    else:
        heading("🚀 Go Installer (Binary Only)")
        click.echo("This installs Go only - no development tools")
    click.echo(f"Installing Go {config.go_version}")
    click.echo()

    try:
        target = detect_platform()
        click.echo(f"Detected: {target.label}")
        click.echo(f"Platform: {target.pair}")

        _show_current_state(config, describe_current_go())
        click.secho(f"⚠️  This will install Go {config.go_version}", fg="yellow")
        click.echo(f"Target location: {config.goroot_path}")
        click.echo()
        if not choice_menu(yes):
            return

        click.echo()
        result = install_go(config, target, hardened=hardened, on_progress=click.echo)
    except (InstallError, OSError) as e:
        fail(str(e))

    click.echo()
    if not hardened:
        click.secho("🎉 Installation complete!", fg="green", bold=True)
        click.echo(f"Run: . {config.profile_path} && go version")
        return

    click.echo()
    heading("Go Installation:")
    click.echo(result["version"])
    click.echo(f"Go binary: {result['binary']}")
    click.echo()
    heading("Development Tools:")
    for line in result["verify"]:
        click.echo(line)
    click.echo()
    heading("Directory Structure:")
    for line in directory_summary(config):
        click.echo(line)
    click.echo()
    click.echo(f"Smoke test: {result['smoke_test']['output']}")

    click.echo()
    heading("🐚 Shell Integration:")
    for line in shell_instructions(target, config):
        click.echo(line)

    click.echo()
    heading("🎉 Installation Complete!")
    click.echo(f"Go {config.go_version} is now installed and ready to use.")
    click.echo()
    for line in quick_start_lines(config):
        click.echo(line)


@click.command("go-tools")
@click.argument("tool_set", type=click.Choice(["quality", "workflow"]))
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_context
def go_tools(ctx: click.Context, tool_set: str, yes: bool) -> None:
    """Install a Go tool set (quality or workflow) with go install."""
    from devsetup.core.services.install.orchestration.go_tools import (
        current_go_version,
        describe_tool_set,
        install_tool_set,
        require_go,
        tool_set as get_tool_set,
    )
    from devsetup.core.services.install.orchestration.report import usage_lines

    config = get_config(ctx)
    definition = get_tool_set(tool_set)

    click.echo(definition["title"])
    click.echo()

    try:
        require_go()
        click.echo(f"Current Go: {current_go_version() or 'unknown'}")
        click.echo()
        click.echo("Will install:")
        for line in describe_tool_set(tool_set):
            click.echo(line)
        click.echo()
        for note in definition["notes"]:
            click.echo(note)
        if definition["notes"]:
            click.echo()

        if not confirm_gate(yes):
            return

        click.echo("Installing tools...")
        result = install_tool_set(
            tool_set, timeout=config.command_timeout, on_progress=click.echo,
        )
    except (InstallError, OSError) as e:
        fail(str(e))

    click.echo()
    click.echo("Verifying installation:")
    for line in result["verify"]:
        click.echo(line)

    usage = usage_lines(definition["tools"])
    if usage:
        click.echo()
        click.echo("Usage:")
        for line in usage:
            click.echo(line)

    click.echo()
    click.secho("Installation complete!", fg="green")
