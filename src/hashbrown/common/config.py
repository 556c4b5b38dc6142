"""Configuration loader with multi-source support."""

import logging
import os
from pathlib import Path
from typing import Dict, Any, List, Optional, Type, TypeVar

import platformdirs
import toml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)


class ConfigLoader:
    """Loads configuration from multiple sources with priority.

    Priority (lowest to highest): defaults file, system config, user config,
    environment variables.
    """

    def __init__(self, app_name: str = "hashbrown", config_class: Optional[Type[T]] = None) -> None:
        self.app_name = app_name
        self.config_class = config_class
        self._config: Optional[T] = None

    def load(self, defaults_path: Optional[Path] = None) -> T:
        """Load configuration from all sources.

        Args:
            defaults_path: Optional path to a defaults.toml file

        Returns:
            Validated configuration object (or a plain dict without config_class)

        Raises:
            pydantic.ValidationError: If the merged configuration is invalid
            toml.TomlDecodeError: If a config file is malformed
        """
        config_dict = self._load_defaults(defaults_path)

        system_config = self._load_system_config()
        if system_config:
            config_dict = self._deep_merge(config_dict, system_config)

        user_config = self._load_user_config()
        if user_config:
            config_dict = self._deep_merge(config_dict, user_config)

        config_dict = self._apply_env_overrides(config_dict)

        if self.config_class:
            self._config = self.config_class(**config_dict)
        else:
            self._config = config_dict

        return self._config

    def _load_defaults(self, defaults_path: Optional[Path] = None) -> Dict[str, Any]:
        """Load the defaults file, explicit path first."""
        if defaults_path:
            if not defaults_path.exists():
                raise FileNotFoundError(f"Config file not found: {defaults_path}")
            logger.debug(f"Loading defaults: {{'path': {str(defaults_path)!r}}}")
            return toml.load(defaults_path)

        possible_paths = [
            Path.cwd() / "config" / "defaults.toml",
            Path.home() / ".config" / self.app_name / "defaults.toml",
        ]

        for path in possible_paths:
            if path.exists():
                logger.debug(f"Loading defaults: {{'path': {str(path)!r}}}")
                return toml.load(path)

        return {}

    def _load_system_config(self) -> Optional[Dict[str, Any]]:
        """Load system-wide configuration."""
        if os.name == "nt":
            system_path = (
                Path(os.environ.get("PROGRAMDATA", "C:\\ProgramData"))
                / self.app_name
                / "config.toml"
            )
        else:
            system_path = Path(f"/etc/{self.app_name}/config.toml")

        if system_path.exists():
            logger.debug(f"Loading system config: {{'path': {str(system_path)!r}}}")
            return toml.load(system_path)

        return None

    def _load_user_config(self) -> Optional[Dict[str, Any]]:
        """Load user-specific configuration."""
        user_config_dir = platformdirs.user_config_dir(appname=self.app_name, appauthor=False)
        user_config_path = Path(user_config_dir) / "config.toml"

        if user_config_path.exists():
            logger.debug(f"Loading user config: {{'path': {str(user_config_path)!r}}}")
            return toml.load(user_config_path)

        logger.debug(f"User config not found: {{'path': {str(user_config_path)!r}}}")
        return None

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Override config with environment variables.

        Format: HASHBROWN_SECTION_KEY, e.g. HASHBROWN_ENGINE_CHUNK_SIZE sets
        engine.chunk_size. Underscores inside keys are resolved against the
        keys the config model knows about.
        """
        prefix = f"{self.app_name.upper().replace('-', '_')}_"

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            parts = env_key[len(prefix):].lower().split("_")
            key_path = self._resolve_key_path(parts)

            current = config
            for part in key_path[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]

            current[key_path[-1]] = self._convert_env_value(env_value)
            logger.debug(f"Environment override: {{'key': {'.'.join(key_path)!r}}}")

        return config

    def _resolve_key_path(self, parts: List[str]) -> List[str]:
        """Group underscore-separated parts into section and key names.

        The first part names the section when the config model has a nested
        model of that name; the remaining parts form the key.
        """
        if self.config_class is None or len(parts) < 2:
            return parts

        fields = self.config_class.model_fields
        section = parts[0]
        if section in fields:
            annotation = fields[section].annotation
            if isinstance(annotation, type) and issubclass(annotation, BaseModel):
                return [section, "_".join(parts[1:])]

        return ["_".join(parts)]

    def _convert_env_value(self, value: str) -> Any:
        """Convert string environment variable to appropriate type."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        if "," in value:
            return [v.strip() for v in value.split(",")]

        return value

    @property
    def config(self) -> T:
        """Get loaded configuration."""
        if self._config is None:
            self._config = self.load()
        return self._config
