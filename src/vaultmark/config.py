"""Configuration management for vaultmark."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from vaultmark.constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_BOOKMARK_PATH,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_RETENTION,
    DEFAULT_LOG_ROTATION,
    DEFAULT_USER_AGENT,
    DEFAULT_USER_CONFIG_DIR,
)
from vaultmark.errors import ConfigError


class BookmarkConfig(BaseModel):
    """Bookmark storage configuration."""

    path: str = DEFAULT_BOOKMARK_PATH  # Folder inside the vault


class FetchConfig(BaseModel):
    """Page fetch configuration."""

    timeout: float | None = Field(default=DEFAULT_FETCH_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT


class LogConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = DEFAULT_LOG_LEVEL
    dir: str | None = DEFAULT_LOG_DIR
    rotation: str = DEFAULT_LOG_ROTATION
    retention: str = DEFAULT_LOG_RETENTION


class VaultmarkConfig(BaseModel):
    """Main configuration model."""

    bookmark: BookmarkConfig = Field(default_factory=BookmarkConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    log: LogConfig = Field(default_factory=LogConfig)


class Settings:
    """Read-only view of the configuration used by the pipeline.

    Settings are threaded explicitly into every pipeline entry point; a
    fresh instance is built for each command invocation.
    """

    def __init__(self, config: VaultmarkConfig | None = None) -> None:
        self.config = config or VaultmarkConfig()

    def bookmark_path(self) -> str:
        """Folder (vault-relative) where bookmarks are stored."""
        path = self.config.bookmark.path.strip().strip("/")
        return path or DEFAULT_BOOKMARK_PATH

    @property
    def fetch(self) -> FetchConfig:
        return self.config.fetch


def _set_nested_value(data: dict[str, Any], key_path: str, value: Any) -> None:
    """Set a nested value in a dict using dot-separated key path.

    Creates intermediate dicts if they don't exist.
    """
    parts = key_path.split(".")
    current = data
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


class ConfigManager:
    """Configuration manager for loading and saving settings."""

    CONFIG_FILENAME = CONFIG_FILENAME
    DEFAULT_USER_CONFIG_DIR = Path(DEFAULT_USER_CONFIG_DIR).expanduser()

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._explicit_path = Path(config_path) if config_path else None
        self._config: VaultmarkConfig | None = None
        self._config_path: Path | None = None
        self._raw_data: dict[str, Any] = {}  # Preserve original JSON structure
        self._modified_keys: set[str] = set()

    @property
    def config(self) -> VaultmarkConfig:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    @property
    def config_path(self) -> Path | None:
        """Get the path of the loaded configuration file."""
        return self._config_path

    def load(self, env_override: bool = True) -> VaultmarkConfig:
        """
        Load configuration from file with fallback chain.

        Priority (highest to lowest):
        1. Explicit config path given to the manager
        2. VAULTMARK_CONFIG environment variable
        3. ./vaultmark.json (current directory)
        4. ~/.vaultmark/config.json (user directory)
        5. Default values

        Raises:
            ConfigError: If the file is not valid JSON or fails validation
        """
        config_data: dict[str, Any] = {}
        self._config_path = None

        resolved_path = self._resolve_config_path(env_override)
        if resolved_path and resolved_path.exists():
            config_data = self._load_json(resolved_path)
            self._config_path = resolved_path

        self._raw_data = config_data.copy()
        self._modified_keys.clear()

        try:
            self._config = VaultmarkConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigError(str(e)) from e
        return self._config

    def load_settings(self) -> Settings:
        """Load configuration from disk and wrap it in a ``Settings`` view."""
        return Settings(self.load())

    def _resolve_config_path(self, env_override: bool) -> Path | None:
        """Resolve configuration file path based on priority."""
        if self._explicit_path:
            return self._explicit_path

        if env_override:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                return Path(env_path)

        cwd_config = Path.cwd() / self.CONFIG_FILENAME
        if cwd_config.exists():
            return cwd_config

        user_config = self.DEFAULT_USER_CONFIG_DIR / "config.json"
        if user_config.exists():
            return user_config

        return None

    def _load_json(self, path: Path) -> dict[str, Any]:
        """Load JSON configuration file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Expected JSON object in {path}, got {type(data).__name__}"
            )
        return data

    def save(self, path: Path | str | None = None) -> Path:
        """Save modified keys back to the configuration file.

        Only keys changed through ``set`` are written; the rest of the
        original JSON is preserved as loaded.
        """
        if self._config is None:
            self._config = self.load()

        save_path = Path(path) if path else self._config_path
        if save_path is None:
            save_path = self._explicit_path or Path.cwd() / self.CONFIG_FILENAME

        save_path.parent.mkdir(parents=True, exist_ok=True)

        output_data = self._raw_data.copy()
        for key in self._modified_keys:
            _set_nested_value(output_data, key, self.get(key))

        with open(save_path, "w", encoding="utf-8") as f:
            json.dump(output_data, f, indent=2, ensure_ascii=False)
            f.write("\n")

        self._config_path = save_path
        return save_path

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-separated key path.

        Returns default only when the key does not exist; a key whose value
        is None returns None.

        Example: config_manager.get("bookmark.path")
        """
        value: Any = self.config

        for part in key.split("."):
            if isinstance(value, BaseModel) and part in type(value).model_fields:
                value = getattr(value, part)
            elif isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by dot-separated key path.

        The whole configuration is re-validated so bad values are rejected
        before anything is saved.

        Example: config_manager.set("bookmark.path", "links")

        Raises:
            ConfigError: If the key is unknown or the value is invalid
        """
        data = self.config.model_dump(mode="json")
        parent: Any = data
        parts = key.split(".")
        for part in parts[:-1]:
            if not isinstance(parent, dict) or part not in parent:
                raise ConfigError(f"Unknown configuration key: {key}")
            parent = parent[part]
        if not isinstance(parent, dict) or parts[-1] not in parent:
            raise ConfigError(f"Unknown configuration key: {key}")

        parent[parts[-1]] = value
        try:
            self._config = VaultmarkConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(e)) from e
        self._modified_keys.add(key)
