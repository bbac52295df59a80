"""Logging configuration for the vaultmark CLI.

Key features:
- Unified loguru-based logging with consistent formatting
- Intercepts third-party library logs (httpx, httpcore, anyio)
- Console shows warnings and key milestones; DEBUG goes to the log file only
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from click import Context
from loguru import logger

from vaultmark import __version__
from vaultmark.constants import LOG_DIR_ENV_VAR

# Third-party loggers to intercept and route to loguru
INTERCEPTED_LOGGERS = [
    "httpx",
    "httpcore",
    "anyio",
    "asyncio",
    "bs4",
]

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>"
)


class InterceptHandler(logging.Handler):
    """Intercept standard logging and forward to loguru.

    Uses the record's built-in location info instead of frame tracing.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(
            name=record.name,
            module=record.module,
            function=record.funcName,
            line=record.lineno,
        ).opt(exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    verbose: bool,
    log_dir: str | None = None,
    log_level: str = "DEBUG",
    rotation: str = "10 MB",
    retention: str = "7 days",
    quiet: bool = False,
) -> tuple[int | None, Path | None]:
    """Configure logging.

    Args:
        verbose: Show every INFO message on the console, not just milestones.
        log_dir: Directory for log files. Supports ~ expansion.
                 Can be overridden by the VAULTMARK_LOG_DIR env var.
        log_level: Log level for file output.
        rotation: Log file rotation size.
        retention: Log file retention period.
        quiet: Disable console logging entirely.

    Returns:
        Tuple of (console_handler_id, log_file_path). Log file path is None
        if file logging is disabled.
    """
    logger.remove()

    console_handler_id: int | None = None
    if not quiet:
        console_handler_id = logger.add(
            sys.stderr,
            level="INFO",
            format=CONSOLE_FORMAT,
            filter=lambda record: _should_show_log(record, verbose),
        )

    env_log_dir = os.environ.get(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_dir = env_log_dir

    log_file_path: Path | None = None
    if log_dir:
        log_path = Path(log_dir).expanduser()
        try:
            log_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"File logging disabled, cannot create {log_path}: {e}")
        else:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            log_file_path = log_path / f"vaultmark_{timestamp}.log"
            logger.add(
                log_file_path,
                level=log_level,
                rotation=rotation,
                retention=retention,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <5} | {module}:{line: <3} | {message}",
            )

    _setup_log_interception()

    return console_handler_id, log_file_path


def _setup_log_interception() -> None:
    """Route third-party library logs (WARNING+) to loguru."""
    intercept_handler = InterceptHandler()

    for logger_name in INTERCEPTED_LOGGERS:
        stdlib_logger = logging.getLogger(logger_name)
        stdlib_logger.handlers.clear()
        stdlib_logger.addHandler(intercept_handler)
        stdlib_logger.propagate = False
        stdlib_logger.setLevel(logging.WARNING)


def _is_third_party_log(name: str) -> bool:
    """Check if a log comes from an intercepted library (exact or dotted prefix)."""
    name_lower = name.lower()
    return any(
        name_lower == intercepted or name_lower.startswith(f"{intercepted}.")
        for intercepted in INTERCEPTED_LOGGERS
    )


def _should_show_log(record: Any, verbose: bool) -> bool:
    """Filter function for console logging.

    Warnings and above are always shown. Third-party INFO is hidden. Without
    verbose, only milestone INFO messages (saves, completions) are shown.
    """
    level = record["level"].name

    if level == "DEBUG":
        return False

    if level in ("WARNING", "ERROR", "CRITICAL"):
        return True

    name = record.get("extra", {}).get("name", "")
    if _is_third_party_log(name):
        return False

    if not verbose:
        msg = record.get("message", "")
        return any(kw in msg for kw in ("Saved", "Complete"))

    return True


def print_version(ctx: Context, param: Any, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    from vaultmark.cli.console import get_console

    get_console().print(f"vaultmark {__version__}")
    ctx.exit(0)
