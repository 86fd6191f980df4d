"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import requests

from occurrence_map import __version__
from occurrence_map.config import get_settings
from occurrence_map.datasources.elevation import ElevationLookupError
from occurrence_map.flows.pipeline import run_pipeline


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gbif-occurrence-map",
        description="Interactive maps of GBIF species occurrences with elevation and photos",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'run' command - fetch, enrich and render one species
    run_parser = subparsers.add_parser("run", help="Build an occurrence map for a species")
    run_parser.add_argument(
        "species",
        nargs="?",
        default=None,
        help="Scientific name (default: species_name from settings)",
    )
    run_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of GBIF records (default: limit from settings)",
    )
    run_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output HTML file (default: output_path from settings)",
    )
    run_parser.add_argument(
        "--no-images",
        action="store_true",
        help="Leave photo thumbnails out of popups",
    )
    run_parser.add_argument(
        "--overlay",
        type=int,
        default=None,
        metavar="N",
        help="Add N random demonstration points as a second layer",
    )
    run_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the overlay points",
    )
    run_parser.add_argument(
        "--table",
        type=Path,
        default=None,
        metavar="PATH",
        help="Also write an HTML preview table of the first 10 records",
    )
    run_parser.add_argument(
        "--no-selfcontained",
        action="store_true",
        help="Link Leaflet from the CDN instead of inlining it",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the 'run' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    species = args.species or settings.species_name
    limit = args.limit if args.limit is not None else settings.limit
    output = args.output if args.output is not None else settings.output_path
    overlay = args.overlay if args.overlay is not None else settings.overlay_points
    seed = args.seed if args.seed is not None else settings.seed

    try:
        summary = run_pipeline(
            species,
            limit,
            output,
            show_images=not args.no_images,
            overlay_points=overlay,
            seed=seed,
            table_output=args.table,
            selfcontained=not args.no_selfcontained,
        )
    except (requests.RequestException, ElevationLookupError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Success: {summary['markers']} markers written to {summary['output']}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default species: {settings.species_name} (limit {settings.limit})")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "run": cmd_run,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
