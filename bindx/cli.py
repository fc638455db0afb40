import argparse
import logging
import sys
from typing import Optional

from bindx.config.settings import settings
from bindx.container import container
from bindx.entities.Association import Association, ExtensionLookup
from bindx.exceptions import BaseAppError, InvalidInputError
from bindx.utils.formatters import (
    OutputMode,
    format_associations,
    format_lookup,
    unknown_type_message,
)

USAGE = "Usage: bindx <extension> | --json | -j | --app <Name> [-j]"

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOOKUP_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bindx",
        usage=USAGE,
        description=(
            "Show the default application macOS uses for a file extension, "
            "or list the associations of every extension installed apps declare."
        ),
    )
    parser.add_argument(
        "extension", nargs="?", help="Extension to look up (e.g. pdf or .pdf)"
    )
    parser.add_argument(
        "-j", "--json", action="store_true", help="List all associations as JSON"
    )
    # A bare --app yields "" which means no filter
    parser.add_argument(
        "-a",
        "--app",
        nargs="?",
        const="",
        default=None,
        metavar="NAME",
        help="Only list associations whose handler path or bundle ID contains NAME",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"Seconds to wait for the application scan (default: {settings.scan_timeout:g})",
    )
    parser.add_argument(
        "--pretty", action="store_true", help="Render output with colors and tables"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug information to stderr"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def extension_precedes_app(argv: list[str], extension: str) -> bool:
    """Whether the extension token appears before any --app option in argv."""
    for token in argv:
        if token in ("-a", "--app") or token.startswith("--app="):
            return False
        if token == extension:
            return True
    return False


def run_lookup(raw_extension: str, pretty: bool) -> int:
    lookup = container.get_lookup_extension_use_case().execute(raw_extension)
    if not lookup.found:
        print(unknown_type_message(lookup.extension))
        return EXIT_INVALID
    if pretty:
        _print_lookup_pretty(lookup)
    else:
        for line in format_lookup(lookup):
            print(line)
    return EXIT_OK


def run_enumeration(app_filter: Optional[str], as_json: bool, pretty: bool) -> int:
    associations = container.get_list_associations_use_case().execute(app_filter)
    mode = OutputMode.STRUCTURED if as_json else OutputMode.LIST
    if pretty:
        _print_associations_pretty(associations, mode)
        return EXIT_OK
    text = format_associations(associations, mode)
    if text:
        print(text)
    return EXIT_OK


def _print_lookup_pretty(lookup: ExtensionLookup) -> None:
    from rich import box
    from rich.console import Console
    from rich.markup import escape
    from rich.panel import Panel

    console = Console(soft_wrap=True)
    console.print(
        Panel(
            "\n".join(escape(line) for line in format_lookup(lookup)),
            title=escape(f".{lookup.extension} ({lookup.content_type})"),
            box=box.ROUNDED,
            border_style="magenta",
            expand=False,
        )
    )


def _print_associations_pretty(associations: list[Association], mode: OutputMode) -> None:
    from rich import box
    from rich.console import Console
    from rich.markup import escape
    from rich.syntax import Syntax
    from rich.table import Table

    console = Console(soft_wrap=True)
    if mode is OutputMode.STRUCTURED:
        console.print(Syntax(format_associations(associations, mode), "json"))
        return
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Extension", style="cyan", no_wrap=True)
    table.add_column("Bundle ID")
    table.add_column("Application", style="green")
    for a in associations:
        table.add_row(
            escape(a.extension),
            escape(a.handler_identifier) if a.handler_identifier else "[dim]-[/dim]",
            escape(a.handler_path) if a.handler_path else "[dim]-[/dim]",
        )
    console.print(table)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(USAGE)
        return EXIT_INVALID

    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    if args.timeout is not None:
        if args.timeout <= 0:
            print("Error: --timeout must be positive", file=sys.stderr)
            return EXIT_INVALID
        container.scan_timeout = args.timeout
        container.reset()

    try:
        # A positional token only selects single mode when it comes before --app
        if args.extension is not None and (
            args.app is None or extension_precedes_app(argv, args.extension)
        ):
            return run_lookup(args.extension, args.pretty)
        if args.json or args.app is not None:
            return run_enumeration(args.app or None, args.json, args.pretty)
        print(USAGE)
        return EXIT_INVALID
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOOKUP_FAILED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
