"""Configuration management for the timr CLI."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class StoreConfig(BaseModel):
    """Task store configuration."""

    path: Optional[str] = Field(default=None)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="table")
    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")


class Config(BaseModel):
    """Main configuration."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages timr configuration profiles."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("timr-cli"))
        self.config_file = self.config_dir / f"{profile}.json"

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, falling back to defaults."""
        if not self.config_file.exists():
            return Config()
        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Config(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning(
                "ignoring unreadable config %s: %s", self.config_file, e
            )
            return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def has_key(self, key: str) -> bool:
        """Check whether a dot-separated key names a configuration setting."""
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                return False
            value = getattr(value, k)
        return True

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration setting
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(key)

        current[keys[-1]] = value

        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration (or a single key) to defaults."""
        if key is None:
            self._config = Config()
            self.save_config()
        else:
            self.set(key, self.get_from_config(Config(), key))

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        keys = key.split(".")
        value: Any = config
        for k in keys:
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def list_profiles(self) -> list[str]:
        """List all available profiles."""
        if not self.config_dir.exists():
            return []
        return sorted(
            config_file.stem
            for config_file in self.config_dir.glob("*.json")
            if not config_file.name.startswith(".")
        )


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager


def resolve_output_format(output: Optional[str], profile: str = "default") -> str:
    """Return the ``--output`` value, or the profile's ``output.format``."""
    if output:
        return output
    return get_config_manager(profile).get("output.format") or "table"
