import pytest
from graphql import build_schema

from gql_resolvers.codegen.core.schema import SchemaTypeRegistry
from gql_resolvers.codegen.languages.csharp import CSharpGenerator

SAMPLE_SDL = '''
"""Account state"""
enum Status {
  ACTIVE
  INACTIVE
}

scalar DateTime

input Range {
  from: Int
  to: Int
}

"""Search filter"""
input Filter {
  tags: [String]
  status: Status
  range: Range
  ranges: [Range!]!
  since: DateTime
}

type User {
  id: ID!
  name: String
  status: Status
}

type Query {
  users(limit: Int, active: Boolean): [User]
  me: User
  search(filter: Filter, filters: [Filter]): [User]
}
'''


@pytest.fixture
def sample_sdl():
    return SAMPLE_SDL


@pytest.fixture
def sample_schema():
    return build_schema(SAMPLE_SDL)


@pytest.fixture
def registry(sample_schema):
    return SchemaTypeRegistry(sample_schema)


@pytest.fixture
def generator():
    return CSharpGenerator()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(SAMPLE_SDL, encoding="utf-8")
    return path
