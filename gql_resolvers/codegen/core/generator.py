"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from graphql import GraphQLSchema

from ...logging_config import get_logger
from .config import GeneratorConfig
from .schema import SchemaTypeRegistry, GeneratedDeclaration
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self.last_declaration_count = 0
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: GraphQLSchema) -> str:
        """
        Generate the complete output file for a schema.

        Args:
            schema: Built GraphQL schema

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_declarations(
        self, registry: SchemaTypeRegistry
    ) -> List[GeneratedDeclaration]:
        """
        Generate the body declarations, in schema definition order.

        Args:
            registry: Type registry wrapping the schema

        Returns:
            Declarations in traversal order
        """
        pass

    def get_import_statements(self) -> List[str]:
        """Get any required import statements for the generated code."""
        return []

    def get_package_declaration(self) -> Optional[str]:
        """Get package/namespace declaration if needed."""
        return None

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """
        Report schema features the generator degrades on.

        Args:
            schema: Schema to inspect

        Returns:
            List of warning messages (empty if no issues)
        """
        return []

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines and ends
        the file with a single newline.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: GraphQLSchema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        code = generator.format_code(generator.generate(schema))

        registry = SchemaTypeRegistry(schema)
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "type_count": len(registry.to_document().definitions),
            "declaration_count": generator.last_declaration_count,
            "namespace": generator.get_package_declaration(),
        }

        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
