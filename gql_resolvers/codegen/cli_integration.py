"""
CLI integration for code generation functionality.

Provides command-line interface for the codegen module.
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, Optional

from graphql import GraphQLSchema
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from ..logging_config import get_logger
from ..utils import SchemaLoaderError, build_schema_from_sdl, load_schema
from .registry import is_language_supported
from . import (
    generate_from_schema,
    list_supported_languages,
    get_generator,
    get_language_info,
    list_all_language_info,
    GeneratorConfig,
    ConfigError,
    load_config,
    GeneratorError,
)

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


console = Console()
# Status output while generated code is streamed to stdout
err_console = Console(stderr=True)


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to an existing CLI parser."""

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument(
        "file", nargs="?", help="GraphQL schema file (.graphql SDL or introspection .json)"
    )
    input_group.add_argument("--url", help="GraphQL endpoint to introspect")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read SDL from standard input"
    )

    codegen_group = parser.add_argument_group("code generation")

    codegen_group.add_argument(
        "--language",
        "-l",
        default="csharp",
        help="Target language (default: csharp; use --list-languages to see options)",
    )

    codegen_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )

    codegen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )

    codegen_group.add_argument(
        "--namespace",
        metavar="NAME",
        help="Namespace of the generated file (default: derived from --output)",
    )

    codegen_group.add_argument(
        "--class-name",
        metavar="NAME",
        help="Name of the outer class wrapping all declarations (default: Types)",
    )

    codegen_group.add_argument(
        "--list-type",
        metavar="TYPE",
        help="Container type used for GraphQL lists (default: IEnumerable)",
    )

    codegen_group.add_argument(
        "--scalar",
        action="append",
        default=[],
        metavar="NAME=TYPE",
        help="Map a GraphQL scalar to a target type (repeatable)",
    )

    codegen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't emit schema descriptions as comments",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed information about a specific language and exit",
    )


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle code generation command from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not (args.file or args.url or args.stdin):
            console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        language = args.language.lower()
        if not _validate_language(language):
            return 1

        schema = _get_input_schema(args)
        config = _build_config(args)

        return _generate_and_output(schema, language, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.error("CLI error: %s", e)
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] gql-resolvers [dim]schema.graphql[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] gql-resolvers --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    generator = get_generator(language)

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config_table.add_row("Class Name", str(generator.config.class_name))
    config_table.add_row("List Type", str(generator.config.list_type))
    config_table.add_row("Namespace", str(generator.get_package_declaration()))
    config_table.add_row("Add Comments", str(generator.config.add_comments))

    console.print()
    console.print(config_table)

    examples_text = f"""Generate to stdout:
[cyan]gql-resolvers -l {language} schema.graphql[/cyan]

Generate to file (namespace derived from the path):
[cyan]gql-resolvers -l {language} -o src/main/csharp/MyOrg/MyApp/Types{info['file_extension']} schema.graphql[/cyan]

Map a custom scalar:
[cyan]gql-resolvers -l {language} --scalar DateTime=DateTime schema.graphql[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))

    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    if not is_language_supported(language):
        if not silent:
            supported = list_supported_languages()
            console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _get_input_schema(args: argparse.Namespace) -> GraphQLSchema:
    """Load the schema from the file, URL or stdin source in ``args``."""
    try:
        if args.file:
            return load_schema(file_path=args.file)[1]
        elif args.url:
            return load_schema(url=args.url)[1]
        else:
            return build_schema_from_sdl(sys.stdin.read())
    except (SchemaLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load schema: {e}") from e


def _parse_scalar_overrides(pairs) -> Dict[str, str]:
    """Turn ``NAME=TYPE`` strings into a scalar mapping."""
    scalars = {}
    for pair in pairs or []:
        name, sep, type_name = pair.partition("=")
        if not sep or not name.strip() or not type_name.strip():
            raise CLIError(f"Invalid --scalar value '{pair}', expected NAME=TYPE")
        scalars[name.strip()] = type_name.strip()
    return scalars


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from config file and CLI arguments."""
    overrides = {}

    if args.output:
        overrides["output_file"] = args.output
    if args.namespace:
        overrides["namespace"] = args.namespace
    if args.class_name:
        overrides["class_name"] = args.class_name
    if args.list_type:
        overrides["list_type"] = args.list_type
    if args.no_comments:
        overrides["add_comments"] = False

    try:
        config = load_config(args.language.lower(), config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    scalars = _parse_scalar_overrides(args.scalar)
    if scalars:
        overrides["scalars"] = {**config.scalars, **scalars}

    for key, value in overrides.items():
        setattr(config, key, value)

    return config


def _generate_and_output(
    schema: GraphQLSchema, language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    output_file: Optional[str] = args.output
    report = console if output_file else err_console

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=report,
            transient=True,
        ) as progress:
            gen_task = progress.add_task(
                f"[green]Generating {language} code...", total=None
            )
            result = generate_from_schema(schema, language, config)
            progress.remove_task(gen_task)

        if not result.success:
            report.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
            if result.exception:
                report.print(f"[dim]Details: {result.exception}[/dim]")
            return 1

        if output_file:
            output_path = Path(output_file)
            try:
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(result.code, encoding="utf-8")
            except OSError as e:
                console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
                return 1
            console.print(
                f"[green]✓[/green] Generated {language} code saved to [cyan]{output_path}[/cyan]"
            )
        else:
            if console.is_terminal:
                console.print(Syntax(result.code, language, theme="monokai"))
            else:
                sys.stdout.write(result.code)

        if getattr(args, "verbose", False) and result.metadata:
            metadata_table = Table(
                title="📊 Generation Metadata",
                box=box.SIMPLE,
                show_header=True,
                header_style="bold cyan",
            )
            metadata_table.add_column("Property", style="bold")
            metadata_table.add_column("Value", style="green")

            for key, value in result.metadata.items():
                metadata_table.add_row(key.replace("_", " ").title(), str(value))

            report.print()
            report.print(metadata_table)

        if result.warnings:
            report.print("\n[yellow]⚠️  Warnings:[/yellow]")
            for warning in result.warnings:
                report.print(f"  [yellow]•[/yellow] {warning}")
            report.print()

        return 0

    except GeneratorError as e:
        report.print(f"[red]✗[/red] {e}")
        return 1
