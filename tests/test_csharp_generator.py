import pytest
from graphql import build_schema

from gql_resolvers.codegen import (
    CodeGenerator,
    GeneratorConfig,
    SchemaTypeRegistry,
    generate_code,
    generate_from_schema,
    quick_generate,
)
from gql_resolvers.codegen.languages.csharp import (
    CSHARP_USINGS,
    CSharpGenerator,
    create_csharp_generator,
)
from gql_resolvers.utils import SchemaLoaderError


def _lines(code):
    return [line.strip() for line in code.splitlines()]


class TestEndToEnd:
    def test_file_layout(self, sample_schema):
        result = generate_from_schema(sample_schema)
        assert result.success, result.error_message

        lines = result.code.splitlines()
        assert lines[0] == "namespace Generated;"
        assert lines[1] == ""
        assert lines[2 : 2 + len(CSHARP_USINGS)] == [f"using {u};" for u in CSHARP_USINGS]
        assert lines[2 + len(CSHARP_USINGS)] == ""
        assert lines[3 + len(CSHARP_USINGS)] == "public class Types"
        assert lines[4 + len(CSHARP_USINGS)] == "{"
        assert lines[-1] == "}"
        assert result.code.endswith("}\n")

    def test_declarations_are_nested_in_outer_class(self, sample_schema):
        lines = generate_from_schema(sample_schema).code.splitlines()

        assert "    public enum Status" in lines
        assert "    public class QueryUsersArgs" in lines
        assert "        private int _limit;" in lines
        assert '                this._limit = (int) args.GetValueOrDefault("limit");' in lines

    def test_status_enum(self, sample_schema):
        lines = _lines(generate_from_schema(sample_schema).code)
        start = lines.index("public enum Status")

        assert lines[start + 1 : start + 5] == ["{", "Active = 0,", "Inactive = 1", "}"]

    def test_query_users_args(self, sample_schema):
        code = generate_from_schema(sample_schema).code
        lines = _lines(code)
        start = lines.index("public class QueryUsersArgs")
        end = lines.index("}", lines.index("public bool GetActive() { return this._active; }"))
        block = lines[start:end]

        assert [line for line in block if line.startswith("private ")] == [
            "private int _limit;",
            "private bool _active;",
        ]
        assert len([line for line in block if line.startswith("this._")]) == 2
        assert len([line for line in block if " Get" in line]) == 2

    def test_every_construct_is_generated(self, sample_schema):
        lines = _lines(generate_from_schema(sample_schema).code)

        for header in (
            "public enum Status",
            "public class RangeInput",
            "public class FilterInput",
            "public class QueryUsersArgs",
            "public class QuerySearchArgs",
        ):
            assert header in lines

    def test_objects_and_fields_without_arguments_emit_nothing(self, sample_schema):
        lines = _lines(generate_from_schema(sample_schema).code)

        assert not any("QueryMeArgs" in line for line in lines)
        assert "public class User" not in lines
        assert "public class Query" not in lines

    def test_search_args_use_nested_transformers(self, sample_schema):
        lines = _lines(generate_from_schema(sample_schema).code)

        assert (
            'this._filter = new FilterInput((Dictionary<string, object>) '
            'args.GetValueOrDefault("filter"));'
        ) in lines
        assert (
            'this._filters = ((IEnumerable<Dictionary<string, object>>) '
            'args.GetValueOrDefault("filters")).Select(item => new FilterInput(item)).ToList();'
        ) in lines

    def test_output_is_idempotent(self, sample_schema):
        generator = CSharpGenerator()
        first = generate_code(generator, sample_schema).code
        second = generate_code(generator, sample_schema).code

        assert first == second
        assert generate_from_schema(sample_schema).code == first

    def test_schema_without_declarations(self):
        schema = build_schema("type Query { ok: Boolean }")
        lines = generate_from_schema(schema).code.splitlines()

        assert lines[-4:] == ["public class Types", "{", "", "}"]


class TestTraversal:
    def test_declarations_follow_definition_order(self, generator, registry):
        declarations = generator.generate_declarations(registry)
        sources = [d.source for d in declarations]

        expected = []
        for node in registry.to_document().definitions:
            name = node.name.value
            if name in ("Status", "Range", "Filter"):
                expected.append(name)
            elif name == "Query":
                expected.extend(["Query.users", "Query.search"])

        assert sources == expected
        assert generator.last_declaration_count == 5

    def test_extension_fields_are_included(self):
        schema = build_schema(
            """
            type Query { a: Int }
            extend type Query { b(x: Int): Int }
            """
        )
        assert "public class QueryBArgs" in _lines(generate_from_schema(schema).code)


class TestConfiguration:
    def test_custom_settings(self, sample_schema):
        config = {"namespace": "MyOrg.MyApp", "class_name": "Resolvers", "list_type": "List"}
        lines = _lines(generate_from_schema(sample_schema, "csharp", config).code)

        assert lines[0] == "namespace MyOrg.MyApp;"
        assert "public class Resolvers" in lines
        assert "private List<RangeInput> _ranges;" in lines

    def test_namespace_from_output_path(self, sample_schema):
        config = GeneratorConfig(output_file="src/main/csharp/MyOrg/MyApp/Types.cs")
        result = generate_from_schema(sample_schema, "csharp", config)

        assert result.code.startswith("namespace MyOrg.MyApp;\n")
        assert result.metadata["namespace"] == "namespace MyOrg.MyApp;"

    def test_scalar_mapping(self, sample_schema):
        result = generate_from_schema(
            sample_schema, "csharp", {"scalars": {"DateTime": "DateTime"}}
        )

        assert "private DateTime _since;" in _lines(result.code)
        assert not any("DateTime" in w for w in result.warnings)

    def test_no_comments(self, sample_schema):
        code = generate_from_schema(sample_schema, "csharp", {"add_comments": False}).code
        assert "summary" not in code

    def test_comments_by_default(self, sample_schema):
        lines = _lines(generate_from_schema(sample_schema).code)
        assert "/// Account state" in lines
        assert "/// Search filter" in lines

    def test_header_comes_from_generator(self, sample_schema):
        generator = CSharpGenerator(GeneratorConfig(namespace="MyOrg.MyApp"))
        lines = generate_code(generator, sample_schema).code.splitlines()
        imports = generator.get_import_statements()

        assert lines[0] == generator.get_package_declaration() == "namespace MyOrg.MyApp;"
        assert lines[2 : 2 + len(imports)] == imports

    def test_create_csharp_generator(self):
        generator = create_csharp_generator({"class_name": "Args"})
        assert generator.csharp_config.class_name == "Args"
        assert generator.get_package_declaration() == "namespace Generated;"
        assert generator.get_import_statements()[0] == "using HotChocolate;"


class TestWarningsAndMetadata:
    def test_unmapped_scalar_warning(self, sample_schema):
        result = generate_from_schema(sample_schema)
        assert "Scalar DateTime has no C# mapping - using Object" in result.warnings

    def test_enum_value_overrides_are_reported(self, sample_schema):
        config = {"enum_values": {"Status": {"ACTIVE": 5}, "Nope": {}}}
        result = generate_from_schema(sample_schema, "csharp", config)

        assert "enum_values for Status are not applied - members keep ordinal values" in result.warnings
        assert "enum_values refers to unknown enum Nope" in result.warnings
        assert "Active = 0," in _lines(result.code)

    def test_invalid_names_are_reported(self, sample_schema):
        result = generate_from_schema(
            sample_schema, "csharp", {"namespace": "My-Org", "class_name": "2Types"}
        )

        assert any(w.startswith("Invalid namespace My-Org") for w in result.warnings)
        assert "Invalid class name: 2Types" in result.warnings

    def test_metadata(self, sample_schema):
        metadata = generate_from_schema(sample_schema).metadata

        assert metadata["language"] == "csharp"
        assert metadata["file_extension"] == ".cs"
        assert metadata["type_count"] == 6
        assert metadata["declaration_count"] == 5


class _BrokenGenerator(CodeGenerator):
    language_name = "broken"
    file_extension = ".txt"

    def generate(self, schema):
        raise RuntimeError("boom")

    def generate_declarations(self, registry: SchemaTypeRegistry):
        return []


def test_generation_failure_is_captured(sample_schema):
    result = generate_code(_BrokenGenerator(), sample_schema)

    assert not result.success
    assert result.code == ""
    assert "boom" in result.error_message
    assert isinstance(result.exception, RuntimeError)


def test_format_code(generator):
    assert generator.format_code("a  \n\n\n\nb\n\n") == "a\n\nb\n"


def test_quick_generate(sample_sdl):
    code = quick_generate(sample_sdl, class_name="Resolvers")
    assert "public class Resolvers" in _lines(code)


def test_quick_generate_invalid_sdl():
    with pytest.raises(SchemaLoaderError):
        quick_generate("type Query {")
