"""
Configuration Manager for maybe-monad.

This module provides a centralized configuration system for the package. It
supports loading settings from environment variables, JSON files, and default
values, with validation of every section.
"""

import os
import json
from typing import Dict, Any, Union
from pathlib import Path
from dataclasses import dataclass, field, asdict


ENV_PREFIX = "MAYBE_"
TRUTHY = ["true", "1", "yes"]


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    pass


@dataclass
class LoggingConfig:
    """Configuration settings for logging."""

    enable_file_logging: bool = False
    log_dir: str = field(default_factory=lambda: os.path.join(os.getcwd(), "logs"))
    log_level: str = "WARNING"
    console_logging: bool = False

    def __post_init__(self):
        """Validate and normalize the log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() not in valid_levels:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}. Must be one of {valid_levels}"
            )

        self.log_level = self.log_level.upper()


@dataclass
class MaybeConfig:
    """Behaviour of the Maybe container and its combinators."""

    # Store a deep copy of every wrapped value; off stores the caller's object
    deep_copy_values: bool = True
    # Check annotations when composing; arity checks always run
    strict_signatures: bool = True


@dataclass
class DebugConfig:
    """Configuration settings for debugging."""

    global_debug: bool = False
    module_debug: Dict[str, bool] = field(default_factory=dict)

    def is_debug_enabled(self, module_name: str) -> bool:
        """
        Check if debug is enabled for a module.

        Args:
            module_name: Name of the module

        Returns:
            bool: Whether debug is enabled for the module
        """
        env_var = f"{ENV_PREFIX}DEBUG_{module_name.upper()}"
        if env_var in os.environ:
            return os.environ[env_var].lower() in TRUTHY

        if module_name in self.module_debug:
            return self.module_debug[module_name]

        return self.global_debug


@dataclass
class PackageConfig:
    """
    Central configuration class for maybe-monad.

    Holds every configuration section in one structured object.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    maybe: MaybeConfig = field(default_factory=MaybeConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)

    @classmethod
    def from_env(cls) -> "PackageConfig":
        """
        Create a configuration instance from environment variables.

        Variables take the form MAYBE_<SECTION>_<KEY>, for example
        MAYBE_LOGGING_LOG_LEVEL=DEBUG or MAYBE_MAYBE_STRICT_SIGNATURES=false.

        Returns:
            PackageConfig: Configuration instance with values from environment variables
        """
        config = cls()

        for env_name, env_value in os.environ.items():
            if not env_name.startswith(ENV_PREFIX):
                continue

            # Module debug flags are handled below
            if env_name.startswith(f"{ENV_PREFIX}DEBUG_"):
                continue

            if env_name == f"{ENV_PREFIX}DEBUG":
                config.debug.global_debug = env_value.lower() in TRUTHY
                continue

            parts = env_name.replace(ENV_PREFIX, "", 1).lower().split("_", 1)
            if len(parts) != 2:
                continue

            section, key = parts

            if hasattr(config, section) and hasattr(getattr(config, section), key):
                section_obj = getattr(config, section)

                # Convert based on the type of the current value
                current_value = getattr(section_obj, key)
                if isinstance(current_value, bool):
                    new_value = env_value.lower() in TRUTHY
                elif isinstance(current_value, int):
                    try:
                        new_value = int(env_value)
                    except ValueError as e:
                        raise ConfigurationError(f"Invalid value for {env_name}: {e}")
                else:
                    new_value = env_value

                setattr(section_obj, key, new_value)

        for env_name, env_value in os.environ.items():
            if env_name.startswith(f"{ENV_PREFIX}DEBUG_"):
                module_name = env_name.replace(f"{ENV_PREFIX}DEBUG_", "", 1).lower()
                config.debug.module_debug[module_name] = env_value.lower() in TRUTHY

        config.validate()
        return config

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "PackageConfig":
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the JSON configuration file

        Returns:
            PackageConfig: Configuration instance with values from the file
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        try:
            with file_path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file: {e}")

        config = cls()

        for section_name, section_data in data.items():
            if not hasattr(config, section_name):
                continue

            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)

        config.validate()
        return config

    def validate(self) -> None:
        """Re-run section validation after values were assigned."""
        self.logging.__post_init__()

        for name in ("deep_copy_values", "strict_signatures"):
            if not isinstance(getattr(self.maybe, name), bool):
                raise ConfigurationError(f"maybe.{name} must be a bool")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        Returns:
            Dict[str, Any]: Configuration as a nested dictionary
        """
        return {
            "logging": asdict(self.logging),
            "maybe": asdict(self.maybe),
            "debug": {
                "global_debug": self.debug.global_debug,
                "module_debug": dict(self.debug.module_debug),
            },
        }

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """
        Save configuration to a JSON file.

        Args:
            file_path: Path to save the configuration file
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with file_path.open("w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def get_debug_mode(self, module_name: str) -> bool:
        """Get debug mode for a specific module."""
        return self.debug.is_debug_enabled(module_name)


# Global configuration instance, built from defaults and environment variables
config = PackageConfig.from_env()


def get_debug_mode(module_name: str) -> bool:
    """
    Get debug mode for a specific module.

    Args:
        module_name: Name of the module

    Returns:
        bool: Whether debug is enabled for the module
    """
    return config.get_debug_mode(module_name)
