"""
C#-specific naming utilities and sanitization.

C# keywords are case-sensitive, so only exact matches count as conflicts.
"""

from ...core.naming import NameSanitizer, NamingCase


CSHARP_RESERVED_WORDS = {
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
    "lock", "long", "namespace", "new", "null", "object", "operator",
    "out", "override", "params", "private", "protected", "public",
    "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
    "stackalloc", "static", "string", "struct", "switch", "this", "throw",
    "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
    "ushort", "using", "virtual", "void", "volatile", "while",
}


def create_csharp_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for C#."""
    return NameSanitizer(CSHARP_RESERVED_WORDS, set(), case_sensitive=True)


def convert_type_name(sanitizer: NameSanitizer, name: str) -> str:
    """PascalCase a GraphQL type or field name for use in a type name."""
    return sanitizer.sanitize_name(name, NamingCase.PASCAL_CASE, unique=False)


def validate_csharp_namespace(namespace: str) -> list[str]:
    """
    Validate a dotted C# namespace.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not namespace:
        errors.append("Namespace cannot be empty")
        return errors

    for part in namespace.split("."):
        if not part.isidentifier():
            errors.append(f"'{part}' is not a valid C# identifier")
        elif part in CSHARP_RESERVED_WORDS:
            errors.append(f"'{part}' is a C# reserved word")

    return errors
