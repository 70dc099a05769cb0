"""Roster CLI entry points.
This module exposes import, statistics, and export commands.
It maps argparse commands onto SDK calls over one in-memory registry.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Any, Sequence

from analytics.report_export import employee_to_payload
from core.config import RosterConfig
from core.constants import SUPPORTED_LOG_LEVELS, SUPPORTED_SOURCE_FORMATS
from core.errors import RosterError
from core.logging_config import configure_logging
from core.types import ImportSummary
from store.roster_sdk import RosterClient

STATS_VIEWS = ("companies", "positions", "statuses", "below-base", "top")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="roster", description="Employee roster CLI")
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override ROSTER_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_import_command(subparsers)
    _add_stats_command(subparsers)
    _add_export_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Roster CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.log_level)
        if args.command == "import":
            return _run_import_command(client, args)
        if args.command == "stats":
            return _run_stats_command(client, args)
        if args.command == "export":
            return _run_export_command(client, args)
    except RosterError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(log_level: str | None) -> RosterClient:
    """Build SDK client with optional log-level override.

    Args:
        log_level: Optional override level name.

    Returns:
        Configured SDK client.
    """
    config = RosterConfig.from_env()
    if log_level:
        config = replace(config, log_level=log_level)
    configure_logging(config.log_level)
    return RosterClient(config)


def _run_import_command(client: RosterClient, args: argparse.Namespace) -> int:
    """Handle import command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code, 1 when any unit failed.
    """
    summaries = _import_sources(client, args.sources, args.format)
    for summary in summaries:
        print(f"source={summary.source}")
        print(f"imported_count={summary.imported_count}")
        print(f"failed_count={summary.failed_count}")
        for error in summary.errors:
            print(error)
    return 1 if any(summary.has_errors for summary in summaries) else 0


def _run_stats_command(client: RosterClient, args: argparse.Namespace) -> int:
    """Handle stats command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    _report_import_errors(_import_sources(client, args.sources, args.format))
    print(json.dumps(_build_stats_view(client, args.view), indent=2, sort_keys=True))
    return 0


def _run_export_command(client: RosterClient, args: argparse.Namespace) -> int:
    """Handle export command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    _report_import_errors(_import_sources(client, args.sources, args.format))
    report_path = client.export_csv(args.output, company=args.company)
    print(report_path)
    return 0


def _import_sources(
    client: RosterClient,
    sources: Sequence[str],
    source_format: str,
) -> list[ImportSummary]:
    """Import every source in order into the client registry."""
    return [client.import_file(source, source_format) for source in sources]


def _report_import_errors(summaries: Sequence[ImportSummary]) -> None:
    """Echo import errors to stderr so stdout stays machine-readable."""
    for summary in summaries:
        for error in summary.errors:
            print(f"{summary.source}: {error}", file=sys.stderr)


def _build_stats_view(client: RosterClient, view: str) -> Any:
    """Build the JSON-safe payload for one statistics view."""
    if view == "companies":
        return {
            company: stats.to_payload()
            for company, stats in client.company_statistics().items()
        }
    if view == "positions":
        return {position.name: count for position, count in client.count_by_position().items()}
    if view == "statuses":
        return client.status_distribution()
    if view == "below-base":
        return [employee_to_payload(record) for record in client.below_base_salary()]
    top_earner = client.highest_paid()
    return employee_to_payload(top_earner) if top_earner else None


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Register shared source arguments."""
    parser.add_argument("sources", nargs="+", help="CSV or XML source files")
    parser.add_argument(
        "--format",
        default="auto",
        choices=SUPPORTED_SOURCE_FORMATS,
        help="Source format; auto picks XML for .xml files",
    )


def _add_import_command(subparsers: Any) -> None:
    """Register import subcommand."""
    parser = subparsers.add_parser("import", help="Import sources and print summaries")
    _add_source_arguments(parser)


def _add_stats_command(subparsers: Any) -> None:
    """Register stats subcommand."""
    parser = subparsers.add_parser("stats", help="Import sources and print statistics")
    _add_source_arguments(parser)
    parser.add_argument(
        "--view",
        default="companies",
        choices=STATS_VIEWS,
        help="Statistics view to print",
    )


def _add_export_command(subparsers: Any) -> None:
    """Register export subcommand."""
    parser = subparsers.add_parser("export", help="Import sources and write a CSV report")
    _add_source_arguments(parser)
    parser.add_argument("--output", required=True, help="Report output path")
    parser.add_argument("--company", help="Optional company to restrict the report to")
