"""CLI adapter printing ledger reports as JSON.

Examples::

    busledger-report dashboard
    busledger-report pnl --from 2024-01-01 --to 2024-06-30
    busledger-report cashflow --months 12
"""

import argparse
import json
import sys

from busledger.domain.errors import LedgerError
from busledger.domain.services.periods import parse_iso_date
from busledger.adapters.json_payload import to_payload
from busledger.infrastructure.container import (
    build_cashflow_forecast_use_case,
    build_dashboard_use_case,
    build_ledger_repository,
    build_profit_and_loss_use_case,
)
from busledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from busledger.infrastructure.settings import LedgerSettings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="busledger-report",
        description="Print bus ledger reports as JSON.",
    )
    subparsers = parser.add_subparsers(dest="report", required=True)
    subparsers.add_parser("dashboard", help="Dashboard KPIs and trend.")
    pnl = subparsers.add_parser("pnl", help="Profit & Loss statement.")
    pnl.add_argument("--from", dest="start", help="First day, YYYY-MM-DD.")
    pnl.add_argument("--to", dest="end", help="Last day, YYYY-MM-DD.")
    cashflow = subparsers.add_parser("cashflow", help="Cash-flow forecast.")
    cashflow.add_argument(
        "--months",
        type=int,
        default=None,
        help="Number of months to project (default from settings).",
    )
    return parser


def _run_report(args: argparse.Namespace, settings: LedgerSettings):
    """Execute the requested report and return its model."""
    today = settings.today()
    repository = build_ledger_repository()
    if args.report == "dashboard":
        return build_dashboard_use_case(repository).execute(today=today)
    if args.report == "pnl":
        start = parse_iso_date(args.start, "from") if args.start else None
        end = parse_iso_date(args.end, "to") if args.end else None
        return build_profit_and_loss_use_case(repository).execute(
            start_date=start,
            end_date=end,
            today=today,
        )
    if args.report == "cashflow":
        return build_cashflow_forecast_use_case(
            repository,
            settings=settings,
        ).execute(period_months=args.months, today=today)
    raise ValueError(f"Unsupported report: {args.report}")


def main(argv: list[str] | None = None) -> int:
    """Run the report CLI.

    Args:
        argv: Optional argument list, defaults to sys.argv.

    Returns:
        int: Process exit code, non-zero when the report failed.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    get_usage_logger().info(f"report={args.report}")
    settings = LedgerSettings.from_env()
    try:
        report = _run_report(args, settings)
    except LedgerError as exc:
        logger.error(f"Report {args.report} failed: {exc}")
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(to_payload(report), indent=2))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
