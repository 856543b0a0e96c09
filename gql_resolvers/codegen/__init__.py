"""
GraphQL Resolvers Code Generation Module

Generates typed argument and input transformers from a GraphQL schema.
"""

from graphql import GraphQLSchema

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.schema import (
    DefinitionKind,
    TypeKind,
    ResolvedType,
    FieldDescriptor,
    TransformerSpec,
    SchemaTypeRegistry,
)
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config

# Version info
__version__ = "0.1.0"


def generate_from_schema(schema: GraphQLSchema, language="csharp", config=None):
    """
    Generate code from a built GraphQL schema.

    Args:
        schema: graphql-core schema
        language: Target language name
        config: Generator configuration dict, path or GeneratorConfig

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, config)
    return generate_code(generator, schema)


def quick_generate(sdl: str, language="csharp", **options):
    """
    Quick code generation from SDL text.

    Args:
        sdl: GraphQL schema definition language text
        language: Target language
        **options: Generator options

    Returns:
        Generated code string
    """
    from gql_resolvers.utils import build_schema_from_sdl

    result = generate_from_schema(build_schema_from_sdl(sdl), language, options)

    if result.success:
        return result.code
    else:
        raise GeneratorError(result.error_message)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "DefinitionKind",
    "TypeKind",
    "ResolvedType",
    "FieldDescriptor",
    "TransformerSpec",
    "SchemaTypeRegistry",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "generate_code",
    "generate_from_schema",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
]
