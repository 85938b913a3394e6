"""Command-line interface for the bundle analyzer.

This module provides the main entry point for running the analyzer from the
command line against a JSON stats file written by a bundler. It uses argparse
to handle subcommands and configuration.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .analysis.analyzer import BundleAnalyzer
from .api import create_analyzer
from .models.filters import AnySubstring, Substring
from .models.options import AnalyzerOptions, resolve_root
from .reporting.formatter import format_json, format_report


def load_stats(path: str):
    """Load a bundle descriptor from a JSON stats file.

    Args:
        path: Path to the stats file.

    Returns:
        The decoded JSON document.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON.
    """
    stats_file = Path(path)
    if not stats_file.is_file():
        raise FileNotFoundError(f"Stats file does not exist: {path}")

    try:
        with stats_file.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Stats file is not valid JSON: {e}") from e


def _build_options(args: argparse.Namespace) -> AnalyzerOptions:
    """Build AnalyzerOptions from parsed command-line arguments.

    Args:
        args: Parsed command-line arguments.

    Returns:
        AnalyzerOptions with the working directory as the default root.
    """
    module_filter = None
    if args.filter:
        if len(args.filter) == 1:
            module_filter = Substring(args.filter[0])
        else:
            module_filter = AnySubstring(tuple(args.filter))

    return AnalyzerOptions(
        root=args.root if args.root is not None else resolve_root(),
        limit=args.limit,
        filter=module_filter,
        hide_deps=args.hide_deps,
        show_exports=args.show_exports,
    )


def cmd_analyze(args: argparse.Namespace, analyzer: BundleAnalyzer) -> int:
    """Handle the analyze subcommand.

    Args:
        args: Parsed command-line arguments.
        analyzer: Analyzer instance (dependency injection).

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        if args.verbose:
            print(f"Analyzing: {args.stats_file}", file=sys.stderr)

        bundle = load_stats(args.stats_file)
        options = _build_options(args)
        result = analyzer.analyze(bundle, options)

        if args.verbose:
            print(
                f"Reporting {len(result.modules)} of {result.module_count} modules",
                file=sys.stderr,
            )

        # Format output
        if args.format == "json":
            output = format_json(result)
        else:  # summary
            output = format_report(result, options)

        # Write to stdout
        print(output, end="" if output.endswith("\n") else "\n")

        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc(file=sys.stderr)
        return 1


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def main(argv: list | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 for success, 1 for error).
    """
    parser = argparse.ArgumentParser(
        prog="bundle-analyzer",
        description="Report rendered size, tree-shaking reduction and usage of bundled modules",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze a bundler stats file"
    )
    analyze_parser.add_argument(
        "stats_file", help="JSON file with a 'modules' list of module records"
    )
    analyze_parser.add_argument(
        "--root",
        default=None,
        help="Prefix stripped from module ids (default: current directory)",
    )
    analyze_parser.add_argument(
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Only report the N largest modules",
    )
    analyze_parser.add_argument(
        "--filter",
        action="append",
        default=None,
        metavar="TEXT",
        help="Only report modules whose id contains TEXT (repeatable)",
    )
    analyze_parser.add_argument(
        "--hide-deps", action="store_true", help="Do not list dependent modules"
    )
    analyze_parser.add_argument(
        "--show-exports", action="store_true", help="List used and unused exports"
    )
    analyze_parser.add_argument(
        "--format",
        choices=["json", "summary"],
        default="summary",
        help="Output format (default: summary)",
    )
    analyze_parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose output"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.command == "analyze":
        return cmd_analyze(args, create_analyzer())

    return 1


if __name__ == "__main__":
    sys.exit(main())
