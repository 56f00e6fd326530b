"""
DeviOS Configuration Loader

Configuration management for the terminal core:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Author: Deviser
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional, List

from devios.exceptions import ConfigurationError
from devios.logger import get_logger
from devios.i18n import Locale


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / 'config.json'


@dataclass
class TerminalConfig:
    """Identity of the emulated machine and its users."""
    os_name: str = "DeviOS"
    version: str = "1.0.0"
    hostname: str = "terminal"
    guest_user: str = "user"
    service_user: str = "deviser"
    primary_group: str = "users"
    uid: int = 1000
    gid: int = 1000
    machine: str = "x86_64"
    banner_title: str = "Deviser Terminal"


@dataclass
class AuthConfig:
    """sudo challenge settings."""
    sudo_secret: str = "password"
    max_attempts: int = 3


@dataclass
class LocaleConfig:
    """Content language settings."""
    default: str = "zh_TW"
    supported: List[str] = field(default_factory=lambda: ["zh_TW", "en_US"])


@dataclass
class SequencerConfig:
    """Scripted output timing."""
    time_scale: float = 1.0
    tick_interval: float = 0.01


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: str = ""
    console_output: bool = False


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    history_size: int = 1000
    gated_directories: List[str] = field(default_factory=lambda: [
        "about", "skills", "projects", "contact", ".github"
    ])


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the terminal core and provides
    type-safe access to configuration values.
    """
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    locale: LocaleConfig = field(default_factory=LocaleConfig)
    sequencer: SequencerConfig = field(default_factory=SequencerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating settings,
    and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.terminal.hostname)
        terminal
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                path=str(config_path)
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {e}",
                path=str(config_path)
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {e}",
                path=str(config_path)
            ) from e

        self._config = self.parse(data)
        self._loaded = True

        get_logger('config').debug("Configuration loaded", context={'path': str(path)})
        return self._config

    @staticmethod
    def parse(data: dict[str, Any]) -> Config:
        """
        Parse configuration data into a Config object.

        Unknown sections and keys are rejected so typos surface at start-up.
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be an object")

        config = Config()

        for section_name, section_data in data.items():
            if not hasattr(config, section_name):
                raise ConfigurationError(
                    f"Unknown configuration section: {section_name}",
                    key=section_name
                )
            if not isinstance(section_data, dict):
                raise ConfigurationError(
                    f"Configuration section must be an object: {section_name}",
                    key=section_name
                )

            section = getattr(config, section_name)
            known = {f.name for f in fields(section)}
            for key, value in section_data.items():
                if key not in known:
                    raise ConfigurationError(
                        f"Unknown configuration key: {section_name}.{key}",
                        key=f"{section_name}.{key}"
                    )
                setattr(section, key, value)

        ConfigLoader._validate(config)
        return config

    @staticmethod
    def _validate(config: Config) -> None:
        """Check cross-field constraints."""
        if config.auth.max_attempts < 1:
            raise ConfigurationError("auth.max_attempts must be at least 1", key="auth.max_attempts")
        if config.sequencer.time_scale < 0:
            raise ConfigurationError("sequencer.time_scale must not be negative", key="sequencer.time_scale")
        for code in config.locale.supported:
            try:
                Locale.from_code(code)
            except ValueError as e:
                raise ConfigurationError(
                    f"locale.supported contains unknown locale '{code}'",
                    key="locale.supported"
                ) from e
        if config.locale.default not in config.locale.supported:
            raise ConfigurationError(
                f"locale.default '{config.locale.default}' is not a supported locale",
                key="locale.default"
            )

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if not self._loaded:
            return Config()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'terminal.hostname')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self.config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'auth.max_attempts')
            value: Value to set

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        if not self._loaded:
            self._config = Config()
            self._loaded = True

        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigurationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
        else:
            raise ConfigurationError(f"Invalid configuration key: {key}", key=key)

    def reset(self) -> None:
        """Drop any loaded configuration and return to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if is_dataclass(obj):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self.config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
