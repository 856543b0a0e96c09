"""
Lookup of code generators by target language.

The CLI and ``generate_from_schema`` name a language ("csharp", "cs", "c#")
and get back a freshly configured generator.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from ..logging_config import get_logger
from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Maps language names and aliases to generator classes."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """Register ``generator_class`` under ``language`` and its aliases."""
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(f"{generator_class!r} is not a CodeGenerator subclass")

        key = language.lower()
        self._generators[key] = generator_class
        for alias in aliases or []:
            self._aliases[alias.lower()] = key

        logger.debug("Registered %s generator %s", key, generator_class.__name__)

    def resolve_language(self, language: str) -> str:
        """
        Map a language name or alias to its registered name.

        Raises:
            RegistryError: If nothing is registered under ``language``
        """
        key = language.lower()
        key = self._aliases.get(key, key)
        if key not in self._generators:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return key

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return self._aliases.get(key, key) in self._generators

    def list_languages(self) -> List[str]:
        return sorted(self._generators)

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Build a generator for ``language``.

        Args:
            language: Language name or alias
            config: GeneratorConfig, dict of overrides, JSON config path or None

        Raises:
            RegistryError: If the language is unknown or the config has the wrong type
        """
        key = self.resolve_language(language)
        return self._generators[key](_to_generator_config(key, config))

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """Describe the generator behind ``language`` for the CLI."""
        key = self.resolve_language(language)
        generator_class = self._generators[key]
        generator = generator_class(load_config(key))

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": sorted(a for a, target in self._aliases.items() if target == key),
            "module": generator_class.__module__,
        }


def _to_generator_config(language: str, config: ConfigSource) -> GeneratorConfig:
    if isinstance(config, GeneratorConfig):
        return config
    if isinstance(config, (str, Path)):
        return load_config(language, config_file=config)
    if isinstance(config, dict):
        return load_config(language, custom_config=config)
    if config is None:
        return load_config(language)
    raise RegistryError(f"Invalid config type: {type(config)}")


_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Return the shared registry, registering the bundled generators on first use."""
    global _registry
    if _registry is None:
        from .languages.csharp import CSharpGenerator

        _registry = GeneratorRegistry()
        _registry.register("csharp", CSharpGenerator, aliases=["cs", "c#"])
    return _registry


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a fresh generator instance from the shared registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Language info for every registered language, keyed by name."""
    return {language: get_language_info(language) for language in list_supported_languages()}
