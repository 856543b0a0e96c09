"""
C# code generator module.

Generates C# enums and argument/input transformer classes from a GraphQL
schema.
"""

from .generator import CSharpGenerator, create_csharp_generator
from .naming import create_csharp_sanitizer
from .types import CSharpTypeResolver
from .declarations import EnumEmitter, InputTransformerBuilder
from .config import (
    CSharpConfig,
    CSHARP_SCALARS,
    CSHARP_USINGS,
    build_namespace_from_path,
)

__all__ = [
    # Generator
    "CSharpGenerator",
    "create_csharp_generator",
    # Building blocks
    "CSharpTypeResolver",
    "EnumEmitter",
    "InputTransformerBuilder",
    # Naming
    "create_csharp_sanitizer",
    # Configuration
    "CSharpConfig",
    "CSHARP_SCALARS",
    "CSHARP_USINGS",
    "build_namespace_from_path",
]
