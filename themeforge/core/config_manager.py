"""Configuration management for themeforge."""

import os
import platform
from pathlib import Path
from typing import Any

import yaml

from ..models.config import ThemeforgeSettings
from ..models.exceptions import ConfigurationError

CONFIG_FILENAME = "config.yaml"


class ConfigManager:
    """Locates, loads and writes the themeforge configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir

    def get_config_directory(self) -> Path:
        """Get the directory where config.yaml lives.

        Priority:
        1. Explicit directory passed to the constructor
        2. THEMEFORGE_CONFIG_DIR environment variable
        3. OS-appropriate config directory

        Returns:
            Path to the configuration directory
        """
        if self._config_dir is not None:
            return self._config_dir

        env_dir = os.getenv("THEMEFORGE_CONFIG_DIR")
        if env_dir:
            self._config_dir = Path(env_dir).expanduser().resolve()
            return self._config_dir

        self._config_dir = self._get_os_config_directory()
        return self._config_dir

    def _get_os_config_directory(self) -> Path:
        system = platform.system().lower()

        if system == "windows":
            appdata = os.getenv("APPDATA")
            if appdata:
                return Path(appdata) / "themeforge"
            return Path.home() / "AppData" / "Roaming" / "themeforge"

        if system == "darwin":
            return Path.home() / "Library" / "Application Support" / "themeforge"

        xdg_config = os.getenv("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "themeforge"
        return Path.home() / ".config" / "themeforge"

    @property
    def config_path(self) -> Path:
        return self.get_config_directory() / CONFIG_FILENAME

    def load_settings(self) -> ThemeforgeSettings:
        """Load settings, falling back to defaults when no config file exists.

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        config_path = self.config_path
        if not config_path.exists():
            return ThemeforgeSettings()

        try:
            with config_path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration: {e}", file_path=str(config_path)) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration: {e}", file_path=str(config_path)) from e

        if data is None:
            return ThemeforgeSettings()

        try:
            return ThemeforgeSettings.from_dict(data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration values: {e}", file_path=str(config_path)) from e
        except ConfigurationError as e:
            e.details["file_path"] = str(config_path)
            raise

    def write_default_config(self, force: bool = False) -> bool:
        """Write config.yaml with default settings.

        Args:
            force: Overwrite an existing file

        Returns:
            True if the file was written, False if it already existed
        """
        config_path = self.config_path
        if config_path.exists() and not force:
            return False

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with config_path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(ThemeforgeSettings().to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigurationError(f"Failed to write configuration: {e}", file_path=str(config_path)) from e
        return True
