"""Command-line entry point for gql_resolvers."""

import argparse
import logging
import sys

from . import __version__
from .codegen.cli_integration import add_codegen_args, handle_codegen_command
from .logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``gql-resolvers`` command."""
    parser = argparse.ArgumentParser(
        prog="gql-resolvers",
        description="Generate typed argument and input transformers from a GraphQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gql-resolvers schema.graphql
  gql-resolvers schema.graphql -o src/main/csharp/MyOrg/MyApp/Types.cs
  gql-resolvers --url https://example.com/graphql --class-name Resolvers
  gql-resolvers --list-languages
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show progress logs and generation metadata"
    )
    log_group.add_argument("--debug", action="store_true", help="Show debug logs")

    add_codegen_args(parser)
    return parser


def main(argv=None) -> int:
    """Parse arguments, configure logging and run code generation."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        configure_logging(logging.DEBUG)
    elif args.verbose:
        configure_logging(logging.INFO)
    else:
        configure_logging(logging.WARNING)

    return handle_codegen_command(args)


if __name__ == "__main__":
    sys.exit(main())
