"""
C# code generator implementation.

Walks the schema definitions once, in document order, and renders enums,
input-object transformers and field-argument transformers into a single
C# file wrapped in one outer class.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path

from graphql import GraphQLSchema, InputObjectTypeDefinitionNode, ObjectTypeDefinitionNode

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.schema import (
    DefinitionKind,
    GeneratedDeclaration,
    SchemaTypeRegistry,
    TransformerSpec,
    TypeKind,
    definition_kind,
)
from .config import CSHARP_USINGS, CSharpConfig
from .declarations import EnumEmitter, InputTransformerBuilder
from .naming import create_csharp_sanitizer, validate_csharp_namespace
from .types import FALLBACK_TYPE, CSharpTypeResolver

logger = get_logger(__name__)


class CSharpGenerator(CodeGenerator):
    """Code generator for C# argument and input transformers."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C# generator with configuration."""
        super().__init__(config)

        self.csharp_config = CSharpConfig.from_generator_config(self.config)

        self.sanitizer = create_csharp_sanitizer()
        self.type_resolver = CSharpTypeResolver(self.sanitizer)
        self.enum_emitter = EnumEmitter(self.template_engine, self.type_resolver)
        self.transformer_builder = InputTransformerBuilder(
            self.template_engine, self.type_resolver
        )

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def get_template_directory(self) -> Path:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, schema: GraphQLSchema) -> str:
        """Generate the complete C# file for ``schema``."""
        registry = SchemaTypeRegistry(schema)
        declarations = self.generate_declarations(registry)

        context = {
            "package_declaration": self.get_package_declaration(),
            "imports": self.get_import_statements(),
            "class_name": self.csharp_config.class_name,
            "body": "\n".join(declaration.code for declaration in declarations),
        }
        return self.render_template("file.cs.j2", context)

    def generate_declarations(
        self, registry: SchemaTypeRegistry
    ) -> List[GeneratedDeclaration]:
        """Render every declaration the schema produces, in definition order."""
        # Fresh naming state so repeated runs produce identical output
        self.sanitizer.reset_used_names()

        declarations = []
        for node in registry.to_document().definitions:
            declarations.extend(self._dispatch(node, registry))

        self.last_declaration_count = len(declarations)
        logger.info("Generated %d C# declarations", len(declarations))
        return declarations

    def _dispatch(self, node, registry: SchemaTypeRegistry) -> List[GeneratedDeclaration]:
        """Route one top-level definition to its handler."""
        kind = definition_kind(node)

        if kind == DefinitionKind.ENUM:
            return [self.enum_emitter.emit(node, self.csharp_config)]
        elif kind == DefinitionKind.INPUT_OBJECT:
            return [self._input_object_declaration(node, registry)]
        elif kind == DefinitionKind.OBJECT:
            return self._field_argument_declarations(node, registry)
        else:
            logger.debug("Skipping %s definition", node.kind)
            return []

    def _input_object_declaration(
        self, node: InputObjectTypeDefinitionNode, registry: SchemaTypeRegistry
    ) -> GeneratedDeclaration:
        name = node.name.value
        spec = TransformerSpec.from_nodes(
            f"{self.type_resolver.convert_name(name)}Input",
            node.fields,
            node.description.value if node.description else None,
        )
        return self.transformer_builder.build(
            spec, registry, self.csharp_config, source=name
        )

    def _field_argument_declarations(
        self, node: ObjectTypeDefinitionNode, registry: SchemaTypeRegistry
    ) -> List[GeneratedDeclaration]:
        """One Args transformer per field that declares arguments."""
        type_name = node.name.value
        declarations = []

        for field_node in node.fields or ():
            if not field_node.arguments:
                continue

            field_name = field_node.name.value
            spec = TransformerSpec.from_nodes(
                f"{self.type_resolver.convert_name(type_name)}"
                f"{self.type_resolver.convert_name(field_name)}Args",
                field_node.arguments,
                field_node.description.value if field_node.description else None,
            )
            declarations.append(
                self.transformer_builder.build(
                    spec, registry, self.csharp_config, source=f"{type_name}.{field_name}"
                )
            )

        return declarations

    def get_import_statements(self) -> List[str]:
        """Fixed usings of the generated file."""
        return [f"using {name};" for name in CSHARP_USINGS]

    def get_package_declaration(self) -> Optional[str]:
        """Get the file-scoped namespace declaration."""
        return f"namespace {self.csharp_config.namespace};"

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """Report unmapped scalars, inert enum overrides and naming problems."""
        warnings = super().validate_schema(schema)
        registry = SchemaTypeRegistry(schema)

        for name in sorted(schema.type_map):
            if name.startswith("__"):
                continue
            kind = registry.kind_of(name)
            if kind == TypeKind.SCALAR and name not in self.csharp_config.scalar_map:
                warnings.append(
                    f"Scalar {name} has no C# mapping - using {FALLBACK_TYPE}"
                )

        for enum_name in self.csharp_config.enum_values:
            if registry.kind_of(enum_name) != TypeKind.ENUM:
                warnings.append(f"enum_values refers to unknown enum {enum_name}")
            else:
                warnings.append(
                    f"enum_values for {enum_name} are not applied - members keep ordinal values"
                )

        for error in validate_csharp_namespace(self.csharp_config.namespace):
            warnings.append(f"Invalid namespace {self.csharp_config.namespace}: {error}")

        if not self.csharp_config.class_name.isidentifier():
            warnings.append(f"Invalid class name: {self.csharp_config.class_name}")

        return warnings


def create_csharp_generator(config: Optional[Dict[str, Any]] = None) -> CSharpGenerator:
    """Create a C# generator from plain configuration overrides."""
    return CSharpGenerator(load_config("csharp", custom_config=config))
