"""
C# type resolution for GraphQL type references.

Maps a (possibly list / non-null wrapped) type reference onto the C# type
used for fields, casts and accessors in the generated transformers.
"""

from typing import Optional

from graphql import TypeNode

from ....logging_config import get_logger
from ...core.naming import NameSanitizer
from ...core.schema import (
    ResolvedType,
    SchemaTypeRegistry,
    TypeKind,
    get_base_type_node,
    list_depth,
    wrap_type_with_modifiers,
)
from .config import CSharpConfig
from .naming import create_csharp_sanitizer, convert_type_name

logger = get_logger(__name__)

# Stand-in for scalars without a mapping and for types the registry can't place
FALLBACK_TYPE = "Object"


class CSharpTypeResolver:
    """
    Resolves type references to C# type names.

    Unknown scalars and unresolvable names degrade to ``Object`` instead of
    failing, so generation always completes.
    """

    def __init__(self, sanitizer: Optional[NameSanitizer] = None):
        self.sanitizer = sanitizer or create_csharp_sanitizer()

    def convert_name(self, name: str) -> str:
        return convert_type_name(self.sanitizer, name)

    def resolve(
        self, type_ref: TypeNode, registry: SchemaTypeRegistry, config: CSharpConfig
    ) -> ResolvedType:
        """
        Resolve one type reference.

        Args:
            type_ref: Type node from the schema AST
            registry: Registry used to look up the leaf type's kind
            config: Run configuration (scalar map, list container)

        Returns:
            ResolvedType with the leaf type and the container-wrapped type
        """
        name = get_base_type_node(type_ref).name.value
        depth = list_depth(type_ref)
        kind = registry.kind_of(name)

        if kind == TypeKind.SCALAR and name in config.scalar_map:
            base_type, is_scalar = config.scalar_map[name], True
        elif kind == TypeKind.INPUT_OBJECT:
            base_type, is_scalar = f"{self.convert_name(name)}Input", False
        elif kind == TypeKind.ENUM:
            base_type, is_scalar = self.convert_name(name), True
        else:
            logger.debug("No C# mapping for %s type %s, using %s",
                         kind.value, name, FALLBACK_TYPE)
            base_type, is_scalar = FALLBACK_TYPE, True

        return ResolvedType(
            base_type=base_type,
            type_name=wrap_type_with_modifiers(base_type, type_ref, config.list_type),
            is_scalar=is_scalar,
            is_array=depth > 0,
            list_depth=depth,
        )
