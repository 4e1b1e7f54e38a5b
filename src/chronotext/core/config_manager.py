"""Configuration Management for ChronoText

Handles loading and validation of recognizer settings. Supports hierarchical
YAML configuration with environment variable overrides.
"""

import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .error_handler import ConfigurationError
from .logging_manager import LoggingManager

SUPPORTED_CULTURES = ("en-us",)


class ResolutionConfig(BaseModel):
    """Settings that change how parsed values are resolved."""
    min_two_digit_year_past_num: int = Field(default=40, ge=0, le=99)
    max_two_digit_year_future_num: int = Field(default=40, ge=0, le=99)
    inclusive_end_period: bool = Field(default=False)


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_to_console: bool = Field(default=False)
    log_to_file: bool = Field(default=False)
    log_dir: str = Field(default="logs")


class CacheConfig(BaseModel):
    """Configuration for the recognizer model cache."""
    enabled: bool = Field(default=True)


class RecognizerConfig(BaseModel):
    """Main recognizer configuration."""
    culture: str = Field(default="en-us")
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)

    @field_validator('culture')
    @classmethod
    def validate_culture(cls, v):
        """Only cultures with shipped resource tables are accepted"""
        culture = v.strip().lower()
        if culture not in SUPPORTED_CULTURES:
            raise ValueError(f"Unsupported culture '{v}', expected one of {', '.join(SUPPORTED_CULTURES)}")
        return culture


class ConfigManager:
    """Manages recognizer configuration loading and validation."""

    ENV_PREFIX = "CHRONOTEXT_"

    def __init__(self, config_path: Optional[Path] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional directory holding configuration files
            environment: Environment name (development, testing, production)
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv('CHRONOTEXT_ENV', 'development')
        self._config: Optional[RecognizerConfig] = None
        self._lock = threading.Lock()
        self.logger = LoggingManager.get_logger(__name__)

        # Configuration file paths
        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        # Looking for config in order of precedence
        config_locations = [
            Path("config"),
            Path.home() / ".chronotext",
        ]

        for location in config_locations:
            if location.exists() and location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths for hierarchical loading."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml'  # For development overrides
        }

    @property
    def config(self) -> RecognizerConfig:
        """Loaded configuration, loading it on first access."""
        return self.load_config()

    def load_config(self) -> RecognizerConfig:
        """Load and validate configuration with hierarchical overrides.

        Returns:
            Validated recognizer configuration

        Raises:
            ConfigurationError: If a file is not valid YAML or validation fails
        """
        with self._lock:
            if self._config:
                return self._config

            config_data: Dict[str, Any] = {}

            # Load configurations in order of precedence
            for config_type, config_file in self.config_files.items():
                if config_file.exists():
                    self.logger.info(f"Loading {config_type} config from {config_file}")
                    self._deep_merge(config_data, self._load_yaml_file(config_file))

            # Apply environment variable overrides
            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {list(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            try:
                self._config = RecognizerConfig(**config_data)
            except ValidationError as e:
                self.logger.error(f"Configuration validation failed: {e}")
                raise ConfigurationError(f"Invalid configuration: {e}") from e

            return self._config

    def update_config(self, updates: Dict[str, Any]) -> RecognizerConfig:
        """Apply updates on top of the loaded configuration.

        Args:
            updates: Nested dictionary of configuration updates

        Returns:
            Updated configuration
        """
        current = self.load_config()
        with self._lock:
            config_dict = current.model_dump()
            self._deep_merge(config_dict, updates)
            try:
                self._config = RecognizerConfig(**config_dict)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
            return self._config

    def save_config(self, file_path: Optional[Path] = None) -> Path:
        """Write the current configuration as YAML.

        Returns:
            Path of the written file
        """
        target = Path(file_path) if file_path else self.config_files['local']
        target.parent.mkdir(parents=True, exist_ok=True)

        with open(target, 'w') as f:
            yaml.dump(self.load_config().model_dump(), f, default_flow_style=False, sort_keys=False)

        self.logger.info(f"Saved configuration to {target}")
        return target

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Environment variables follow pattern: CHRONOTEXT_<SECTION>_<KEY>
        Example: CHRONOTEXT_RESOLUTION_INCLUSIVE_END_PERIOD -> resolution.inclusive_end_period
        """
        overrides: Dict[str, Any] = {}
        top_level = set(RecognizerConfig.model_fields)

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX) or key == 'CHRONOTEXT_ENV':
                continue

            name = key[len(self.ENV_PREFIX):].lower()
            if name in top_level:
                overrides[name] = self._convert_env_value(value)
                continue

            section, _, field_name = name.partition('_')
            if section in top_level and field_name:
                overrides.setdefault(section, {})[field_name] = self._convert_env_value(value)

        return overrides

    def _convert_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Convert environment variable string to appropriate type."""
        # Boolean conversion
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        # Numeric conversion
        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge nested dictionaries."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value
