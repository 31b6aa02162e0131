"""
Shared CLI plumbing — config access, error exit, interactive gates.

Every gated command takes ``--yes``; without it the prompts read from
stdin exactly like the interactive installers always have.
"""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from devsetup.core.models.settings import InstallerConfig


def fail(message: str) -> NoReturn:
    """Print ``Error: <message>`` to stderr and exit 1."""
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def get_config(ctx: click.Context) -> InstallerConfig:
    """Load the installer config once per invocation."""
    from devsetup.core.config.loader import ConfigError, load_config

    obj = ctx.ensure_object(dict)
    if obj.get("settings") is None:
        try:
            obj["settings"] = load_config(obj.get("config_path"))
        except ConfigError as e:
            fail(str(e))
    return obj["settings"]


def heading(title: str, underline: str = "=") -> None:
    click.echo(title)
    click.echo(underline * len(title))


def _read(prompt: str) -> str | None:
    """One line from stdin; None on EOF."""
    try:
        return click.prompt(prompt, default="", show_default=False, prompt_suffix=": ")
    except click.Abort:
        click.echo()
        return None


def confirm_gate(yes: bool) -> bool:
    """``Continue? (y/n)`` — only y / yes (any case) proceeds."""
    if yes:
        return True
    answer = _read("Continue? (y/n)")
    if answer is not None and answer.strip().lower() in ("y", "yes"):
        return True
    click.echo("Cancelled")
    return False


def choice_menu(yes: bool) -> bool:
    """Numbered 1 (proceed) / 2 (exit) menu, re-prompting on anything else."""
    click.echo("Options:")
    click.echo("1) Proceed with installation")
    click.echo("2) Exit without changes")
    click.echo()
    if yes:
        click.echo("Proceeding with installation...")
        return True

    while True:
        choice = _read("Enter your choice (1 or 2)")
        if choice is None:
            click.echo("Installation cancelled")
            return False
        choice = choice.strip()
        if choice == "1":
            click.echo("Proceeding with installation...")
            return True
        if choice == "2":
            click.echo("Installation cancelled")
            return False
        click.echo("Invalid choice. Please enter 1 or 2.")
