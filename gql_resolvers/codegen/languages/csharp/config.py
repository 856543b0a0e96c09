"""
C#-specific configuration.

Turns the generic GeneratorConfig into the immutable settings one
generation run works from, and owns the fixed parts of the output file.
"""

import os
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ...core.config import GeneratorConfig

# Built-in GraphQL scalars and the C# types they map to
CSHARP_SCALARS = {
    "ID": "string",
    "String": "string",
    "Boolean": "bool",
    "Int": "int",
    "Float": "double",
}

# Fixed usings emitted at the top of every generated file
CSHARP_USINGS = (
    "HotChocolate",
    "HotChocolate.Resolvers",
    "HotChocolate.Types",
    "System",
    "System.Collections.Generic",
    "System.Linq",
    "System.Threading.Tasks",
)

DEFAULT_NAMESPACE = "Generated"


def build_namespace_from_path(path: Optional[str]) -> str:
    """
    Derive a namespace from an output directory.

    Drops the first ``src/main/<language>/`` prefix and turns path
    separators into dots: ``src/main/csharp/MyOrg/MyApp`` -> ``MyOrg.MyApp``.
    """
    unix_path = (path or "").replace("\\", "/")
    if unix_path in ("", "."):
        return ""
    unix_path = re.sub(r"src/main/.*?/", "", unix_path, count=1)
    return unix_path.strip("/").replace("/", ".")


def default_namespace_for(output_file: Optional[str]) -> str:
    """Namespace used when none is configured."""
    if output_file:
        namespace = build_namespace_from_path(
            os.path.dirname(os.path.normpath(output_file))
        )
        if namespace:
            return namespace
    return DEFAULT_NAMESPACE


@dataclass(frozen=True)
class CSharpConfig:
    """Settings for one generation run; never mutated once built."""

    scalar_map: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(CSHARP_SCALARS))
    )
    enum_values: Mapping[str, Mapping[str, Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    namespace: str = DEFAULT_NAMESPACE
    class_name: str = "Types"
    list_type: str = "IEnumerable"
    add_comments: bool = True

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "CSharpConfig":
        """Fill every unset value with its default and freeze the result."""
        scalars = dict(CSHARP_SCALARS)
        scalars.update(config.scalars or {})

        enum_values = {
            enum_name: MappingProxyType(dict(overrides))
            for enum_name, overrides in (config.enum_values or {}).items()
        }

        return cls(
            scalar_map=MappingProxyType(scalars),
            enum_values=MappingProxyType(enum_values),
            namespace=config.namespace or default_namespace_for(config.output_file),
            class_name=config.class_name or "Types",
            list_type=config.list_type or "IEnumerable",
            add_comments=config.add_comments,
        )
