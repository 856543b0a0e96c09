"""
C# declaration builders.

EnumEmitter renders GraphQL enums as ordinal-valued C# enums.
InputTransformerBuilder renders a TransformerSpec (an input object or the
argument list of a field) as a class that copies values out of an untyped
``Dictionary<string, object>`` into typed private fields.
"""

from typing import Any, Dict

from graphql import EnumTypeDefinitionNode

from ....logging_config import get_logger
from ...core.naming import NamingCase
from ...core.schema import (
    FieldDescriptor,
    GeneratedDeclaration,
    ResolvedType,
    SchemaTypeRegistry,
    TransformerSpec,
)
from ...core.templates import TemplateEngine
from .config import CSharpConfig
from .naming import create_csharp_sanitizer
from .types import CSharpTypeResolver

logger = get_logger(__name__)

ARGS_MAP_TYPE = "Dictionary<string, object>"


class EnumEmitter:
    """Renders one enum definition."""

    def __init__(self, template_engine: TemplateEngine, type_resolver: CSharpTypeResolver):
        self.template_engine = template_engine
        self.type_resolver = type_resolver

    def emit(self, node: EnumTypeDefinitionNode, config: CSharpConfig) -> GeneratedDeclaration:
        """
        Render ``node`` with members numbered by declaration position.

        Value overrides from ``config.enum_values`` are looked up but never
        replace the ordinal.
        """
        enum_name = node.name.value

        if enum_name in config.enum_values:
            logger.warning(
                "Enum value overrides for %s are not applied; members keep ordinal values",
                enum_name,
            )

        member_names = create_csharp_sanitizer()
        members = [
            {
                "name": member_names.sanitize_name(value.name.value, NamingCase.PASCAL_CASE),
                "value": index,
            }
            for index, value in enumerate(node.values or ())
        ]

        description = node.description.value if node.description else None
        code = self.template_engine.render_template(
            "enum.cs.j2",
            {
                "enum_name": self.type_resolver.convert_name(enum_name),
                "description": description if config.add_comments else None,
                "members": members,
            },
        )
        return GeneratedDeclaration(source=enum_name, code=code)


class InputTransformerBuilder:
    """Renders transformer classes for input objects and field arguments."""

    def __init__(self, template_engine: TemplateEngine, type_resolver: CSharpTypeResolver):
        self.template_engine = template_engine
        self.type_resolver = type_resolver

    def build(
        self,
        spec: TransformerSpec,
        registry: SchemaTypeRegistry,
        config: CSharpConfig,
        source: str = None,
    ) -> GeneratedDeclaration:
        """
        Render the transformer class for ``spec``.

        Private fields, constructor statements and accessors are emitted in
        ``spec.fields`` order, one of each per field.
        """
        accessor_names = create_csharp_sanitizer()
        fields = []

        for descriptor in spec.fields:
            resolved = self.type_resolver.resolve(descriptor.type_ref, registry, config)
            fields.append(self._field_context(descriptor, resolved, accessor_names, config))

        code = self.template_engine.render_template(
            "input_transformer.cs.j2",
            {
                "class_name": spec.name,
                "description": spec.description if config.add_comments else None,
                "fields": fields,
            },
        )
        return GeneratedDeclaration(source=source or spec.name, code=code)

    def _field_context(self, descriptor: FieldDescriptor, resolved: ResolvedType,
                       accessor_names, config: CSharpConfig) -> Dict[str, Any]:
        accessor = accessor_names.sanitize_name(descriptor.name, NamingCase.PASCAL_CASE)
        return {
            "name": descriptor.name,
            "type_name": resolved.type_name,
            "extraction": extraction_statement(descriptor.name, resolved),
            "accessor": f"Get{accessor}",
            "description": descriptor.description if config.add_comments else None,
        }


def extraction_statement(name: str, resolved: ResolvedType) -> str:
    """
    Constructor statement copying ``args["name"]`` into ``this._name``.

    - list of input objects: one nested transformer per element map, with
      one Select per list level
    - scalars and enums: a direct cast
    - single input object: one nested transformer from the value's map
    """
    value = f'args.GetValueOrDefault("{name}")'

    if resolved.is_array and not resolved.is_scalar:
        depth = resolved.list_depth or 1
        maps_type = ARGS_MAP_TYPE
        for _ in range(depth):
            maps_type = f"IEnumerable<{maps_type}>"
        converted = _select_transformers(f"(({maps_type}) {value})", resolved.base_type, depth)
        return f"this._{name} = {converted};"
    if resolved.is_scalar:
        return f"this._{name} = ({resolved.type_name}) {value};"
    return f"this._{name} = new {resolved.type_name}(({ARGS_MAP_TYPE}) {value});"


def _select_transformers(source: str, base_type: str, depth: int, level: int = 0) -> str:
    """Map every innermost element map of ``source`` to a ``base_type`` transformer."""
    item = "item" if level == 0 else f"item{level}"
    if depth == 1:
        body = f"new {base_type}({item})"
    else:
        body = _select_transformers(item, base_type, depth - 1, level + 1)
    return f"{source}.Select({item} => {body}).ToList()"
