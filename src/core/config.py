"""
Configuration Management System for the Console Game Hub

Handles loading configuration from environment variables and YAML
config files, merged over built-in defaults, with validation.
"""

import os
import yaml
import logging
from typing import Any, Dict, List, Optional, Callable
from pathlib import Path
from dataclasses import dataclass


@dataclass
class ConfigSource:
    """Configuration source definition"""
    name: str
    priority: int
    loader: Callable
    path: Optional[str] = None


class ConfigurationError(Exception):
    """Configuration-related errors"""
    pass


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# Files read from the config directory, later files override earlier ones
CONFIG_FILES = ("default.yaml", "config.yaml")

# Environment variable -> dot-path key
ENV_OVERRIDES = {
    "GAMEHUB_DEBUG": "app.debug",
    "GAMEHUB_SEED": "app.seed",
    "GAMEHUB_LOG_LEVEL": "logging.level",
    "GAMEHUB_COLOR": "ui.color",
    "GAMEHUB_DELAYS": "ui.delays",
}


class ConfigurationManager:
    """
    Manages hub configuration with support for multiple sources
    and validation.
    """

    def __init__(self, config_dir: str = "config"):
        self.config_dir = Path(config_dir)
        self.config: Dict[str, Any] = {}
        self.sources: List[ConfigSource] = []
        self.logger = logging.getLogger(__name__)

        # Default configuration values
        self.defaults = {
            "app": {
                "name": "Console Game Hub",
                "version": "1.0.0",
                "debug": False,
                "seed": None
            },
            "ui": {
                "color": True,
                "clear_screen": True,
                "delays": True,
                "delay_scale": 1.0,
                "branding": "DEV: MUHAMMAD TAHA"
            },
            "logging": {
                "level": "INFO",
                "file": "logs/gamehub.log",
                "max_size": "1MB",
                "backup_count": 3,
                "console": False,
                "console_level": "WARNING"
            }
        }

        self._setup_sources()

    def _setup_sources(self):
        """Register the layers, lowest priority first"""
        self.sources.append(ConfigSource("defaults", 1, lambda: self.defaults))

        for priority, file_name in enumerate(CONFIG_FILES, start=2):
            path = str(self.config_dir / file_name)
            self.sources.append(ConfigSource(
                name=file_name,
                priority=priority,
                loader=lambda path=path: self._load_from_file(path),
                path=path
            ))

        self.sources.append(ConfigSource("environment", len(CONFIG_FILES) + 2, self._load_from_env))

    def load_config(self) -> None:
        """Load configuration from all sources"""
        self.logger.info("Loading configuration from all sources")

        merged_config = {}

        for source in sorted(self.sources, key=lambda s: s.priority):
            layer = source.loader()
            if layer:
                merged_config = self._deep_merge(merged_config, layer)
                self.logger.debug(f"Applied configuration layer {source.name}")

        self.config = merged_config
        self._validate_config()
        self.logger.info("Configuration loaded successfully")

    def _load_from_env(self) -> Dict[str, Any]:
        """Collect GAMEHUB_* overrides, "true"/"false" become booleans and digit strings ints"""
        config = {}

        for env_var, config_key in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if value is None:
                continue

            if value.lower() in ('true', 'false'):
                value = value.lower() == 'true'
            elif value.isdigit():
                value = int(value)
            self._set_nested_value(config, config_key, value)

        return config

    def _load_from_file(self, file_path: str) -> Dict[str, Any]:
        """Load one YAML layer, a missing or unreadable file contributes nothing"""
        path = Path(file_path)
        if not path.is_file():
            return {}

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Error loading config file {path}: {e}")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            self.logger.warning(f"Ignoring {path}: top level must be a mapping")
            return {}
        return data

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _set_nested_value(self, config: Dict, key_path: str, value: Any) -> None:
        """Set a nested configuration value using dot notation"""
        keys = key_path.split('.')
        current = config

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def _validate_config(self) -> None:
        """Validate configuration values"""
        errors = []

        required_sections = ['app', 'ui', 'logging']
        for section in required_sections:
            if section not in self.config:
                errors.append(f"Missing required configuration section: {section}")

        log_level = self.get('logging.level', 'INFO')
        if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {log_level}")

        seed = self.get('app.seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            errors.append(f"Invalid random seed: {seed}")

        delay_scale = self.get('ui.delay_scale', 1.0)
        if isinstance(delay_scale, bool) or not isinstance(delay_scale, (int, float)) or delay_scale < 0:
            errors.append(f"Invalid delay scale: {delay_scale}")

        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation"""
        keys = key.split('.')
        current = self.config

        try:
            for k in keys:
                current = current[k]
            return current
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation"""
        self._set_nested_value(self.config, key, value)

    def get_seed(self) -> Optional[int]:
        """Get the random seed, None means seed from system entropy"""
        return self.get('app.seed')

    def get_delay_scale(self) -> float:
        """Get the multiplier for cosmetic delays (0 when delays are off)"""
        if not self.get('ui.delays', True):
            return 0.0
        return float(self.get('ui.delay_scale', 1.0))
