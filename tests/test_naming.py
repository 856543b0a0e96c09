import pytest

from gql_resolvers.codegen.core.naming import NameSanitizer, NamingCase
from gql_resolvers.codegen.languages.csharp.naming import (
    convert_type_name,
    create_csharp_sanitizer,
    validate_csharp_namespace,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("ACTIVE", "Active"),
        ("IN_PROGRESS", "InProgress"),
        ("userId", "UserId"),
        ("HTTPRequest", "HttpRequest"),
        ("user-name", "UserName"),
        ("Query", "Query"),
    ],
)
def test_pascal_case(name, expected):
    sanitizer = NameSanitizer()
    assert sanitizer.sanitize_name(name, NamingCase.PASCAL_CASE) == expected


@pytest.mark.parametrize(
    "name, case, expected",
    [
        ("userId", NamingCase.SNAKE_CASE, "user_id"),
        ("HTTPRequest", NamingCase.SNAKE_CASE, "http_request"),
        ("user_name", NamingCase.CAMEL_CASE, "userName"),
        ("userName", NamingCase.SCREAMING_SNAKE, "USER_NAME"),
    ],
)
def test_other_cases(name, case, expected):
    assert NameSanitizer().sanitize_name(name, case) == expected


def test_invalid_characters_are_cleaned():
    sanitizer = NameSanitizer()
    assert sanitizer.sanitize_name("user name!", NamingCase.SNAKE_CASE) == "user_name"
    assert sanitizer.sanitize_name("___", NamingCase.SNAKE_CASE) == "field"


class TestConflicts:
    def test_colliding_results_get_numeric_suffix(self):
        sanitizer = NameSanitizer()
        assert sanitizer.sanitize_name("user_id") == "UserId"
        assert sanitizer.sanitize_name("userId") == "UserId_1"
        assert sanitizer.sanitize_name("USER_ID") == "UserId_2"

    def test_same_source_name_is_stable(self):
        sanitizer = NameSanitizer()
        first = sanitizer.sanitize_name("status")
        assert sanitizer.sanitize_name("status") == first

    def test_non_unique_names_are_not_tracked(self):
        sanitizer = NameSanitizer()
        assert sanitizer.sanitize_name("user_id", unique=False) == "UserId"
        assert sanitizer.sanitize_name("userId", unique=False) == "UserId"
        assert sanitizer.sanitize_name("userId") == "UserId"

    def test_reset_forgets_used_names(self):
        sanitizer = NameSanitizer()
        sanitizer.sanitize_name("user_id")
        sanitizer.reset_used_names()
        assert sanitizer.sanitize_name("userId") == "UserId"

    def test_manually_added_name_is_avoided(self):
        sanitizer = NameSanitizer()
        sanitizer.add_used_name("Value")
        assert sanitizer.sanitize_name("value") == "Value_1"

    def test_custom_suffix(self):
        sanitizer = NameSanitizer()
        sanitizer.sanitize_name("a")
        assert sanitizer.sanitize_name("A", suffix_on_conflict="X") == "A1"

    def test_reserved_words_case_insensitive_by_default(self):
        sanitizer = NameSanitizer({"class"})
        assert sanitizer.sanitize_name("class") == "Class_"


class TestCSharpNaming:
    def test_keywords_match_exact_case_only(self):
        sanitizer = create_csharp_sanitizer()
        assert sanitizer.sanitize_name("class", NamingCase.SNAKE_CASE) == "class_"
        assert sanitizer.sanitize_name("class", NamingCase.PASCAL_CASE) == "Class"

    def test_type_names_never_collide(self):
        sanitizer = create_csharp_sanitizer()
        assert convert_type_name(sanitizer, "users") == "Users"
        assert convert_type_name(sanitizer, "Users") == "Users"

    @pytest.mark.parametrize(
        "namespace, valid",
        [
            ("MyOrg.MyApp", True),
            ("Generated", True),
            ("", False),
            ("My-Org", False),
            ("MyOrg.namespace", False),
            ("1App", False),
        ],
    )
    def test_namespace_validation(self, namespace, valid):
        assert (validate_csharp_namespace(namespace) == []) is valid
