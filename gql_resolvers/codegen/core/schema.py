"""
Core schema representation for code generation.

Wraps the graphql-core schema and AST so generators can ask simple
questions: what kind of definition is this node, what kind of type does a
name refer to, and which fields feed a transformer class.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Sequence
from enum import Enum

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    GraphQLSchema,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
    is_enum_type,
    is_input_object_type,
    is_object_type,
    is_scalar_type,
    parse,
    print_schema,
)


class DefinitionKind(Enum):
    """Top-level schema definitions the generators care about."""

    ENUM = "enum"
    INPUT_OBJECT = "input_object"
    OBJECT = "object"
    OTHER = "other"


class TypeKind(Enum):
    """Schema-level kind of a named type."""

    SCALAR = "scalar"
    ENUM = "enum"
    INPUT_OBJECT = "input_object"
    OBJECT = "object"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ResolvedType:
    """Target-language type chosen for one type reference."""

    base_type: str  # Unwrapped leaf type, e.g. "FilterInput"
    type_name: str  # Leaf wrapped once per list level, e.g. "IEnumerable<FilterInput>"
    is_scalar: bool
    is_array: bool
    list_depth: int = 0  # Number of list wrappers, 0 for a plain value


@dataclass(frozen=True)
class FieldDescriptor:
    """A single argument or input-object field."""

    name: str  # Original GraphQL name, used as the map key
    type_ref: TypeNode
    description: Optional[str] = None

    @classmethod
    def from_node(cls, node: InputValueDefinitionNode) -> "FieldDescriptor":
        return cls(
            name=node.name.value,
            type_ref=node.type,
            description=node.description.value if node.description else None,
        )


@dataclass(frozen=True)
class TransformerSpec:
    """Logical unit from which one transformer class is generated."""

    name: str
    fields: Tuple[FieldDescriptor, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    @classmethod
    def from_nodes(
        cls,
        name: str,
        nodes: Sequence[InputValueDefinitionNode],
        description: Optional[str] = None,
    ) -> "TransformerSpec":
        return cls(
            name=name,
            fields=tuple(FieldDescriptor.from_node(n) for n in nodes or ()),
            description=description,
        )


@dataclass(frozen=True)
class GeneratedDeclaration:
    """Rendered declaration text tagged with the schema node it came from."""

    source: str
    code: str


def definition_kind(node) -> DefinitionKind:
    """Classify a top-level document definition."""
    if isinstance(node, EnumTypeDefinitionNode):
        return DefinitionKind.ENUM
    if isinstance(node, InputObjectTypeDefinitionNode):
        return DefinitionKind.INPUT_OBJECT
    if isinstance(node, ObjectTypeDefinitionNode):
        return DefinitionKind.OBJECT
    return DefinitionKind.OTHER


def get_base_type_node(type_ref: TypeNode) -> NamedTypeNode:
    """Strip every list and non-null wrapper from a type reference."""
    while isinstance(type_ref, (ListTypeNode, NonNullTypeNode)):
        type_ref = type_ref.type
    return type_ref


def list_depth(type_ref: TypeNode) -> int:
    """Count the list wrappers in a type reference."""
    depth = 0
    while isinstance(type_ref, (ListTypeNode, NonNullTypeNode)):
        if isinstance(type_ref, ListTypeNode):
            depth += 1
        type_ref = type_ref.type
    return depth


def is_list_reference(type_ref: TypeNode) -> bool:
    """True if a list wrapper appears anywhere in the reference chain."""
    return list_depth(type_ref) > 0


def wrap_type_with_modifiers(base_type: str, type_ref: TypeNode, list_type: str) -> str:
    """
    Wrap ``base_type`` in ``list_type`` once per list level of ``type_ref``.

    Non-null wrappers are ignored; the outermost list becomes the outermost
    container, so ``[[Int]]`` gives ``List<List<int>>``.
    """
    if isinstance(type_ref, NonNullTypeNode):
        return wrap_type_with_modifiers(base_type, type_ref.type, list_type)
    if isinstance(type_ref, ListTypeNode):
        inner = wrap_type_with_modifiers(base_type, type_ref.type, list_type)
        return f"{list_type}<{inner}>"
    return base_type


class SchemaTypeRegistry:
    """Resolves type names against a built GraphQL schema."""

    def __init__(self, schema: GraphQLSchema):
        self.schema = schema

    def kind_of(self, name: str) -> TypeKind:
        """Return the schema-level kind of ``name`` (UNKNOWN if absent)."""
        schema_type = self.schema.get_type(name)

        if is_scalar_type(schema_type):
            return TypeKind.SCALAR
        if is_input_object_type(schema_type):
            return TypeKind.INPUT_OBJECT
        if is_enum_type(schema_type):
            return TypeKind.ENUM
        if is_object_type(schema_type):
            return TypeKind.OBJECT
        return TypeKind.UNKNOWN

    def to_document(self) -> DocumentNode:
        """
        Print the schema and parse it back.

        Extensions are merged into their base definitions this way, and
        the built-in scalars and introspection types are left out.
        """
        return parse(print_schema(self.schema))
