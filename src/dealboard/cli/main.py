"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path

from dealboard.config import DashboardConfig


def main() -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="dealboard",
        description="CRM-sheet opportunities and issue tracker tickets",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (environment variables fill unset fields)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    opps_parser = subparsers.add_parser("opportunities", help="Opportunities grouped into stage buckets")
    opps_parser.add_argument(
        "--bucket",
        type=str,
        default=None,
        help="Only print this bucket (e.g. due_diligence)",
    )
    opps_parser.add_argument(
        "--show-attempts",
        action="store_true",
        help="Include the sheet resolution log",
    )
    opps_parser.add_argument("--output", type=Path, default=None, help="Write JSON to file")

    tickets_parser = subparsers.add_parser("tickets", help="Tickets from the saved tracker filter")
    tickets_parser.add_argument("--output", type=Path, default=None, help="Write JSON to file")

    subparsers.add_parser("status", help="Which integrations have credentials configured")

    subparsers.add_parser("inspect", help="Fetch the sheet and describe its layout")

    dash_parser = subparsers.add_parser("dashboard", help="Refresh both datasets and print stats")
    dash_parser.add_argument("--output", type=Path, default=None, help="Write JSON to file")

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load_config(args)

    if args.command == "opportunities":
        _run_opportunities(args, config)
    elif args.command == "tickets":
        _run_tickets(args, config)
    elif args.command == "status":
        _run_status(config)
    elif args.command == "inspect":
        _run_inspect(config)
    elif args.command == "dashboard":
        _run_dashboard(args, config)
    else:
        parser.print_help()


def _load_config(args: argparse.Namespace) -> DashboardConfig:
    if args.config is None:
        return DashboardConfig.from_env()
    if not args.config.exists():
        raise SystemExit(f"Config file not found: {args.config}")
    return DashboardConfig.from_yaml(args.config)


def _emit(data, output: Path | None = None) -> None:
    """Print JSON, or write it to output and print a one-line summary."""
    text = json.dumps(data, indent=2, default=str)
    if output:
        output.write_text(text, encoding="utf-8")
        print(f"Wrote {output}")
    else:
        print(text)


def _run_opportunities(args: argparse.Namespace, config: DashboardConfig) -> None:
    """Run opportunities command."""
    from dealboard.pipeline import get_opportunities

    report = get_opportunities(config)
    if args.bucket and args.bucket not in report.buckets:
        raise SystemExit(f"Unknown bucket: {args.bucket}. Available: {list(report.buckets)}")

    data = report.model_dump(mode="json", by_alias=True, exclude_none=True)
    if not args.show_attempts:
        data.pop("attempts", None)
    if args.bucket:
        data["buckets"] = {args.bucket: data["buckets"][args.bucket]}
        data["totals"] = {args.bucket: data["totals"][args.bucket]}

    if report.error:
        print(f"Sheet: {report.error} (source={report.source})", file=sys.stderr)
    _emit(data, args.output)


def _run_tickets(args: argparse.Namespace, config: DashboardConfig) -> None:
    """Run tickets command."""
    from dealboard.pipeline import get_tickets

    report = get_tickets(config)
    if report.error:
        print(f"Tickets: {report.error}", file=sys.stderr)
    _emit(report.model_dump(mode="json", by_alias=True, exclude_none=True), args.output)


def _run_status(config: DashboardConfig) -> None:
    """Run status command."""
    from dealboard.pipeline import get_config_status

    status = get_config_status(config)
    print(f"  [{'x' if status.tickets_configured else ' '}] Issue tracker")
    print(f"  [{'x' if status.opportunities_configured else ' '}] CRM sheet", end="")
    if status.sheet_strategies:
        print(f" (via {', '.join(status.sheet_strategies)})")
    else:
        print()


def _run_inspect(config: DashboardConfig) -> None:
    """Run inspect command: sheet layout regardless of bucket matches."""
    from dealboard.diagnostics import inspect_rows
    from dealboard.errors import NoMatch
    from dealboard.sources import SheetResolver

    resolution = SheetResolver.for_config(config.sheet).resolve()
    for attempt in resolution.attempts:
        print(f"  {attempt.strategy}: {attempt.outcome} {attempt.detail}".rstrip(), file=sys.stderr)
    try:
        rows = resolution.require_rows()
    except NoMatch as e:
        print(f"No data: {e}", file=sys.stderr)
        raise SystemExit(1)

    diagnostics = inspect_rows(rows, config.sheet.id_prefix)
    data = {"source": resolution.source, **diagnostics.model_dump(mode="json")}
    _emit(data)


def _run_dashboard(args: argparse.Namespace, config: DashboardConfig) -> None:
    """Run dashboard command."""
    from dealboard.pipeline import refresh_dashboard

    dashboard = refresh_dashboard(config)
    stats = dashboard.stats
    print(
        f"\n--- Tickets: {stats.tickets_total} ({stats.tickets_open} open, "
        f"{stats.tickets_high_priority} high priority) ---",
        file=sys.stderr,
    )
    for name, bucket in stats.buckets.items():
        print(f"  {name}: {bucket.count} ({bucket.amount_display})", file=sys.stderr)
    print(f"  sheet source: {dashboard.opportunities.source}\n", file=sys.stderr)

    _emit(dashboard.model_dump(mode="json", by_alias=True, exclude_none=True), args.output)


if __name__ == "__main__":
    main()
