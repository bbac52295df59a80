"""Settings management CLI commands.

- config list: Show current effective settings
- config path: Show which settings file is in use
- config get: Get a setting
- config set: Set a setting (e.g. the bookmark folder)
"""

from __future__ import annotations

import json

import click
from pydantic import BaseModel
from rich.syntax import Syntax

from vaultmark.cli import ui
from vaultmark.cli.console import get_console
from vaultmark.config import ConfigManager
from vaultmark.errors import ConfigError

_MISSING = object()


def _manager(ctx: click.Context) -> ConfigManager:
    obj = ctx.find_root().obj or {}
    return ConfigManager(obj.get("config_path"))


def _parse_value(value: str) -> bool | int | float | str | None:
    """Interpret a command-line value as JSON scalar, falling back to text."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.lower() in ("null", "none"):
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


@click.group()
def config() -> None:
    """Settings management commands."""


@config.command("list")
@click.pass_context
def config_list(ctx: click.Context) -> None:
    """Show current effective settings."""
    console = get_console()
    try:
        cfg = _manager(ctx).load()
    except ConfigError as e:
        ui.error("Configuration error", detail=str(e))
        raise SystemExit(2)

    config_json = json.dumps(cfg.model_dump(mode="json"), indent=2, ensure_ascii=False)
    console.print(Syntax(config_json, "json", theme="monokai", line_numbers=False))


@config.command("path")
@click.pass_context
def config_path_cmd(ctx: click.Context) -> None:
    """Show the settings file in use."""
    manager = _manager(ctx)
    try:
        manager.load()
    except ConfigError as e:
        ui.error("Configuration error", detail=str(e))
        raise SystemExit(2)

    if manager.config_path:
        ui.success(f"Currently using: {manager.config_path}")
    else:
        ui.warning("Using default settings (no settings file found)")


@config.command("get")
@click.argument("key")
@click.pass_context
def config_get(ctx: click.Context, key: str) -> None:
    """Get a setting, e.g. ``bookmark.path``."""
    console = get_console()
    manager = _manager(ctx)
    try:
        manager.load()
    except ConfigError as e:
        ui.error("Configuration error", detail=str(e))
        raise SystemExit(2)

    value = manager.get(key, _MISSING)
    if value is _MISSING:
        console.print(f"[yellow]Key not found:[/yellow] {key}")
        raise SystemExit(1)

    if isinstance(value, BaseModel):
        output = json.dumps(value.model_dump(mode="json"), indent=2, ensure_ascii=False)
        console.print(Syntax(output, "json", theme="monokai", line_numbers=False))
    elif value is None:
        console.print("null", highlight=False)
    else:
        console.print(str(value), highlight=False)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a setting, e.g. ``config set bookmark.path links``."""
    manager = _manager(ctx)
    parsed_value = _parse_value(value)

    try:
        manager.load()
        try:
            manager.set(key, parsed_value)
        except ConfigError:
            if parsed_value == value:
                raise
            # Text settings such as bookmark.path may look like numbers
            manager.set(key, value)
            parsed_value = value
    except ConfigError as e:
        ui.error(f"Invalid value for '{key}'", detail=str(e))
        raise SystemExit(1)

    try:
        path = manager.save()
    except OSError as e:
        ui.error("Error saving settings", detail=str(e))
        raise SystemExit(1)

    ui.success(f"Set {key} = {parsed_value} ({path})")


__all__ = ["config"]
