"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None
    namespace: Optional[str] = None
    class_name: str = "Types"

    # Type handling
    list_type: str = "IEnumerable"
    scalars: Dict[str, str] = field(default_factory=dict)
    enum_values: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    # Additional metadata
    add_comments: bool = True

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["csharp"] = {
            "class_name": "Types",
            "list_type": "IEnumerable",
            "add_comments": True,
            "scalars": {},
            "enum_values": {},
        }

    def get_config(self, language: str = "csharp", custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        base_config = json.loads(json.dumps(self._configs.get(language, {})))

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)
            logger.debug("Loaded configuration file %s", config_file)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get('custom', {}))
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}") from e

    def list_languages(self) -> list[str]:
        """Get list of languages with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not config.class_name.isidentifier():
            warnings.append(f"Invalid class_name: {config.class_name}")

        if not config.list_type.replace(".", "").isidentifier():
            warnings.append(f"Invalid list_type: {config.list_type}")

        if config.namespace:
            parts = config.namespace.split(".")
            if not all(part.isidentifier() for part in parts):
                warnings.append(f"Invalid namespace: {config.namespace}")

        if not isinstance(config.scalars, dict):
            warnings.append("scalars must be a mapping of scalar name to type name")

        if not isinstance(config.enum_values, dict):
            warnings.append("enum_values must be a mapping of enum name to value overrides")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str = "csharp", custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CSHARP_CONFIG = {
    "namespace": "MyOrg.MyApp",
    "class_name": "Types",
    "list_type": "IEnumerable",
    "scalars": {"DateTime": "DateTime"},
    "enum_values": {"Status": {"ACTIVE": "active"}},
}
