"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    DefinitionKind,
    TypeKind,
    ResolvedType,
    FieldDescriptor,
    TransformerSpec,
    GeneratedDeclaration,
    SchemaTypeRegistry,
    definition_kind,
    get_base_type_node,
    is_list_reference,
    list_depth,
    wrap_type_with_modifiers,
)
from .naming import NameSanitizer, NamingCase
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema model
    "DefinitionKind",
    "TypeKind",
    "ResolvedType",
    "FieldDescriptor",
    "TransformerSpec",
    "GeneratedDeclaration",
    "SchemaTypeRegistry",
    "definition_kind",
    "get_base_type_node",
    "is_list_reference",
    "list_depth",
    "wrap_type_with_modifiers",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
