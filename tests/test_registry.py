import json

import pytest

from gql_resolvers.codegen.core.config import GeneratorConfig
from gql_resolvers.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from gql_resolvers.codegen.languages.csharp import CSharpGenerator


@pytest.mark.parametrize("name", ["csharp", "CSharp", "cs", "c#", "C#"])
def test_aliases_resolve_to_csharp(name):
    assert is_language_supported(name)
    assert isinstance(get_generator(name), CSharpGenerator)


def test_unsupported_language():
    assert not is_language_supported("cobol")
    with pytest.raises(RegistryError, match="Available: csharp"):
        get_generator("cobol")


def test_generators_are_fresh_instances():
    assert get_generator("csharp") is not get_generator("csharp")


class TestConfigSources:
    def test_dict_overrides(self):
        assert get_generator("csharp", {"class_name": "A"}).csharp_config.class_name == "A"

    def test_generator_config_is_used_as_is(self):
        config = GeneratorConfig(namespace="MyApp")
        assert get_generator("cs", config).config is config

    def test_config_file(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text(json.dumps({"list_type": "List"}), encoding="utf-8")

        assert get_generator("csharp", path).csharp_config.list_type == "List"
        assert get_generator("csharp", str(path)).csharp_config.list_type == "List"

    def test_invalid_config_type(self):
        with pytest.raises(RegistryError, match="Invalid config type"):
            get_generator("csharp", 42)


def test_language_info():
    info = get_language_info("cs")

    assert info["name"] == "csharp"
    assert info["file_extension"] == ".cs"
    assert info["class"] == "CSharpGenerator"
    assert info["aliases"] == ["c#", "cs"]
    assert info["module"] == CSharpGenerator.__module__
    assert list_supported_languages() == ["csharp"]
    assert list(list_all_language_info()) == ["csharp"]


class TestGeneratorRegistry:
    def test_rejects_non_generators(self):
        with pytest.raises(RegistryError, match="not a CodeGenerator subclass"):
            GeneratorRegistry().register("x", object)

    def test_empty_registry(self):
        registry = GeneratorRegistry()

        assert registry.list_languages() == []
        assert not registry.is_supported("csharp")
        with pytest.raises(RegistryError, match="csharp"):
            registry.resolve_language("csharp")

    def test_aliases_are_case_insensitive(self):
        registry = GeneratorRegistry()
        registry.register("CSharp", CSharpGenerator, aliases=["CS"])

        assert registry.resolve_language("cs") == "csharp"
        assert registry.resolve_language("CSHARP") == "csharp"
