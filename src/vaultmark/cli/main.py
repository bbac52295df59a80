"""Command-line host for vaultmark."""

from __future__ import annotations

import asyncio
import importlib
from pathlib import Path

import click
from dotenv import load_dotenv

# Load .env file from current directory and parent directories
load_dotenv()

from click import Context  # noqa: E402
from loguru import logger  # noqa: E402

from vaultmark.cli import ui  # noqa: E402
from vaultmark.cli.console import get_console, get_stderr_console  # noqa: E402
from vaultmark.cli.logging_config import print_version, setup_logging  # noqa: E402
from vaultmark.commands import (  # noqa: E402
    BOOKMARK_ALL_LINKS,
    COMMANDS,
    EXTRACT_URL,
    IMPORT_URL,
    Command,
    run_command,
)
from vaultmark.config import ConfigManager, LogConfig  # noqa: E402
from vaultmark.constants import NOTICE_ERROR  # noqa: E402
from vaultmark.errors import ConfigError  # noqa: E402
from vaultmark.host import Host, Notifier  # noqa: E402
from vaultmark.store import BookmarkStore  # noqa: E402

# Mapping of command name -> (module_path, attribute_name, short_help)
_LAZY_COMMANDS: dict[str, tuple[str, str, str]] = {
    "config": (
        "vaultmark.cli.commands.config",
        "config",
        "Settings management commands.",
    ),
}


class VaultmarkGroup(click.Group):
    """Group whose settings subcommands are imported only when invoked."""

    def list_commands(self, ctx: Context) -> list[str]:
        names = set(_LAZY_COMMANDS.keys())
        names.update(super().list_commands(ctx))
        return sorted(names)

    def get_command(self, ctx: Context, cmd_name: str) -> click.Command | None:
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd

        spec = _LAZY_COMMANDS.get(cmd_name)
        if spec is None:
            return None

        module_path, attr_name, _help = spec
        cmd = getattr(importlib.import_module(module_path), attr_name)
        self.add_command(cmd, cmd_name)
        return cmd


def _build_host(
    ctx: Context,
    *,
    active_document: str | None = None,
    selection: str = "",
) -> Host:
    obj = ctx.find_root().obj
    return Host(
        store=obj["store"],
        active_document=active_document,
        selection=selection,
        notifier=Notifier(get_stderr_console(), enabled=not obj["quiet"]),
    )


def _invoke(ctx: Context, command: Command, host: Host) -> None:
    """Run a command from the table and map failure to exit code 1."""
    manager = ConfigManager(ctx.find_root().obj["config_path"])
    ok = asyncio.run(run_command(command, host, manager))
    if not ok:
        ctx.exit(1)


# =============================================================================
# Main CLI app
# =============================================================================


@click.group(cls=VaultmarkGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--vault",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    envvar="VAULTMARK_VAULT",
    show_default=True,
    help="Vault directory bookmarks are written into.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to settings file.",
)
@click.option("--verbose", is_flag=True, help="Show more log output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress notices and console logs.")
@click.option(
    "--version",
    "-v",
    is_flag=True,
    callback=print_version,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.pass_context
def app(
    ctx: Context,
    vault: Path,
    config_path: Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Bookmark web pages into a Markdown vault."""
    try:
        log_cfg = ConfigManager(config_path).load().log
    except ConfigError:
        # Reported when a command loads its settings
        log_cfg = LogConfig()

    setup_logging(
        verbose,
        log_dir=log_cfg.dir,
        log_level=log_cfg.level,
        rotation=log_cfg.rotation,
        retention=log_cfg.retention,
        quiet=quiet,
    )

    ctx.ensure_object(dict)
    ctx.obj.update(
        store=BookmarkStore(vault),
        config_path=config_path,
        quiet=quiet,
    )
    logger.debug(f"Vault: {ctx.obj['store'].root}")


@app.command("extract")
@click.argument("url")
@click.pass_context
def extract_cmd(ctx: Context, url: str) -> None:
    """Bookmark URL (the selected text)."""
    _invoke(ctx, EXTRACT_URL, _build_host(ctx, selection=url))


@app.command("import")
@click.pass_context
def import_cmd(ctx: Context) -> None:
    """Bookmark the URL on the clipboard."""
    _invoke(ctx, IMPORT_URL, _build_host(ctx))


@app.command("all")
@click.argument(
    "document",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
)
@click.pass_context
def all_cmd(ctx: Context, document: Path | None) -> None:
    """Bookmark every link in DOCUMENT (a note inside the vault)."""
    store: BookmarkStore = ctx.find_root().obj["store"]
    active: str | None = None

    if document is not None:
        # Paths that exist from the working directory win over vault-relative ones
        candidate = document if document.is_absolute() else Path.cwd() / document
        try:
            active = store.relative(candidate if candidate.exists() else document)
        except ValueError as e:
            host = _build_host(ctx)
            host.notify(NOTICE_ERROR.format(error=e))
            ctx.exit(1)

    _invoke(ctx, BOOKMARK_ALL_LINKS, _build_host(ctx, active_document=active))


@app.command("commands")
def commands_cmd() -> None:
    """List available commands."""
    ui.title("Commands")
    for command in COMMANDS.values():
        ui.info(f"[cyan]{command.id}[/cyan]  {command.name}", console=get_console())


if __name__ == "__main__":
    app()
