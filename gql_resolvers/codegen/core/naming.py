"""
Naming utilities for safe code generation.

Handles case conversion of GraphQL names, keyword conflicts and
duplicate-name resolution inside a declaration scope.
"""

import re
from typing import Set, Dict
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""
    SNAKE_CASE = "snake"      # user_name
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None,
                 case_sensitive: bool = False):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
            case_sensitive: Compare against reserved words by exact case
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self.case_sensitive = case_sensitive
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.PASCAL_CASE,
                      suffix_on_conflict: str = "_", unique: bool = True) -> str:
        """
        Sanitize a name for safe use in target language.

        The same source name always maps to the same result until the
        sanitizer is reset.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts
            unique: Track the result and suffix later duplicates

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}_{target_case.value}_{suffix_on_conflict}_{unique}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)
        final_name = self._resolve_conflicts(converted, suffix_on_conflict, unique)

        self._name_cache[cache_key] = final_name
        if unique:
            self._used_names.add(final_name)

        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r'[^a-zA-Z0-9_-]', '_', name)
        cleaned = cleaned.strip('_-')

        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "field"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            return self._to_snake_case(name).upper()
        else:
            return name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        name = name.replace('-', '_')

        # Split acronym runs from a following word: HTTPRequest -> HTTP_Request
        name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
        # Split camel humps: userId -> user_Id
        name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

        name = name.lower()
        name = re.sub(r'_+', '_', name)

        return name.strip('_')

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        snake = self._to_snake_case(name)
        parts = snake.split('_')

        if not parts:
            return name

        return parts[0].lower() + ''.join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        snake = self._to_snake_case(name)
        parts = snake.split('_')

        return ''.join(part.capitalize() for part in parts if part)

    def _is_reserved(self, name: str) -> bool:
        candidate = name if self.case_sensitive else name.lower()
        return candidate in self.reserved_words or candidate in self.builtin_types

    def _resolve_conflicts(self, name: str, suffix: str, unique: bool) -> str:
        """Resolve naming conflicts with reserved words and existing names."""
        if self._is_reserved(name):
            name = f"{name}{suffix}"

        if not unique:
            return name

        original_name = name
        counter = 1
        while name in self._used_names:
            if suffix == "_":
                name = f"{original_name}{suffix}{counter}"
            else:
                name = f"{original_name}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Reset the tracking of used names and the conversion cache."""
        self._used_names.clear()
        self._name_cache.clear()

    def add_used_name(self, name: str):
        """Manually add a name to the used names set."""
        self._used_names.add(name)
