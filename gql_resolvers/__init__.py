"""
gql_resolvers - typed resolver argument classes from GraphQL schemas.
"""

__version__ = "0.1.0"
