"""CLI for running policy projections and analyzing illustration ledgers.

Usage:
    python -m src.cli project --premium 45000 --bills 3000 --policy-rate 6.2 --loan-rate 0
    python -m src.cli project --max-non-mec 50232 --use-max-non-mec --escalation ramped --calendar
    python -m src.cli ledger illustration.txt --out policy_details.csv
    pbpaste | python -m src.cli ledger -
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from src.config import settings
from src.engine.aggregator import analyze_ledger
from src.engine.calendar import payment_calendar
from src.engine.currency import parse_currency, parse_rate
from src.engine.export import ExportSchema, to_delimited_text
from src.engine.projection import simulate
from src.models.ledger import LedgerAnalysis
from src.models.projection import BillEscalation, ProjectionResult
from src.models.schemas import PremiumSelector, ScenarioInput

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _money(value, places: int = 0) -> str:
    """Decimal amount as "$12,345" (or with cents when places=2)."""
    return f"${value:,.{places}f}"


def _section(title: str) -> None:
    rule = "=" * 72
    print(f"\n{rule}\n  {title}\n{rule}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_key_points(scenario: ScenarioInput, result: ProjectionResult) -> None:
    config = result.config
    _section("Key Points")
    print(f"  Contributing {_money(config.annual_contribution)} annually to the policy "
          f"earning {config.policy_growth_rate}%")
    print(f"  Monthly bills of {_money(config.monthly_bills)} are funded through a "
          f"general account loan at {config.loan_interest_rate}%")
    print(f"  Rate arbitrage: {float(result.spread):.1f}% spread, plus "
          f"{config.cashback_rate}% cashback benefits")
    if result.sustainable_year is not None:
        print(f"  Policy becomes truly self-sustaining in Year {result.sustainable_year} "
              f"(premium payments can stop)")
    else:
        print("  Policy does not become self-sustaining within the projected timeframe")
    if scenario.selected_premium is PremiumSelector.MAX_NON_MEC_PREMIUM:
        print("  Premium basis:    max non-MEC premium")


def _print_schedule(label: str, rows, key: str, highlight: int | None = None) -> None:
    print(f"  {label:>5} {'Income':>10} {'Growth':>10} {'Bills':>10} {'Interest':>10} "
          f"{'Loan Bal.':>12} {'Cashback':>9} {'Cash Val.':>12} {'Net Eq.':>12}")
    for r in rows:
        period = getattr(r, key)
        marker = "*" if highlight is not None and period == highlight else " "
        print(f" {marker}{period:>5} {_money(r.income):>10} {_money(r.policy_growth):>10} "
              f"{_money(r.bills):>10} {_money(r.loan_interest):>10} "
              f"{_money(r.loan_balance):>12} {_money(r.cashback):>9} "
              f"{_money(r.cash_value):>12} {_money(r.net_equity):>12}")


def print_projection(result: ProjectionResult) -> None:
    _section("First Year Monthly Details")
    _print_schedule("Month", result.monthly, "month")
    _section("Annual Projection")
    _print_schedule("Year", result.yearly, "year", highlight=result.sustainable_year)


def print_calendar(result: ProjectionResult) -> None:
    config = result.config
    _section("Monthly Payment Schedule")
    for month in payment_calendar(config.monthly_bills, config.monthly_income, config.cashback_rate):
        print(f"  {month.name}")
        for event in month.events:
            print(f"    {event.days:<10} {event.description}")


def print_ledger_summary(analysis: LedgerAnalysis) -> None:
    s = analysis.summary
    _section("Summary Statistics")
    print(f"  Policy years:            {s.row_count}")
    print(f"  Total Premium Outlay:    {_money(s.total_premium_outlay, 2)}")
    print(f"  Total Policy Charges:    {_money(s.total_policy_charges, 2)}")
    print(f"  Total Credits:           {_money(s.total_credits, 2)}")
    print(f"  Final Accumulated Value: {_money(s.final_accumulated_value, 2)}")
    print(f"  Final Death Benefit:     {_money(s.final_death_benefit, 2)}")
    if s.sustainable_year is not None:
        print(f"  Self-sustaining after:   Year {s.sustainable_year}")
    else:
        print("  Self-sustaining after:   never within the illustration")


def _write_export(text: str, out: str) -> None:
    Path(out).write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote %s", out)
    print(f"\n  Export written to {out}")


# ── Commands ─────────────────────────────────────────────────────────────────

def run_project(args: argparse.Namespace) -> None:
    scenario = ScenarioInput(
        annual_premium=args.premium,
        max_non_mec_premium=args.max_non_mec,
        selected_premium=(
            PremiumSelector.MAX_NON_MEC_PREMIUM if args.use_max_non_mec
            else PremiumSelector.ANNUAL_CONTRIBUTION
        ),
        monthly_bills=args.bills,
        policy_rate=args.policy_rate,
        loan_rate=args.loan_rate,
        cashback_rate=args.cashback_rate,
        policy_length=args.years,
        bill_escalation=BillEscalation(args.escalation),
    )
    result = simulate(scenario.to_config())

    print_key_points(scenario, result)
    print_projection(result)
    if args.calendar:
        print_calendar(result)
    if not args.no_export:
        out = args.out or settings.projection_export_filename
        _write_export(to_delimited_text(result.yearly, ExportSchema.YEARLY_PROJECTION), out)


def run_ledger(args: argparse.Namespace) -> None:
    if args.path == "-":
        raw_text = sys.stdin.read()
    else:
        raw_text = Path(args.path).read_text(encoding="utf-8")

    analysis = analyze_ledger(raw_text)
    print_ledger_summary(analysis)
    if not args.no_export:
        out = args.out or settings.ledger_export_filename
        _write_export(to_delimited_text(analysis.rows, ExportSchema.LEDGER), out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Premium-financed policy projection CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    project = sub.add_parser("project", help="Project cash value vs. loan balance")
    project.add_argument("--premium", type=parse_currency, default=settings.default_annual_premium,
                         help="Annual premium (default: %(default)s)")
    project.add_argument("--max-non-mec", type=parse_currency, default=settings.default_max_non_mec_premium,
                         help="Max non-MEC premium (default: %(default)s)")
    project.add_argument("--use-max-non-mec", action="store_true",
                         help="Project on the max non-MEC premium instead of the annual premium")
    project.add_argument("--bills", type=parse_currency, default=None,
                         help="Monthly bills (default: settings value, or derived from premium when ramped)")
    project.add_argument("--policy-rate", type=parse_rate, default=settings.default_policy_rate,
                         help="Policy growth rate %% (default: %(default)s)")
    project.add_argument("--loan-rate", type=parse_rate, default=settings.default_loan_rate,
                         help="Loan interest rate %% (default: %(default)s)")
    project.add_argument("--cashback-rate", type=parse_rate, default=settings.default_cashback_rate,
                         help="Card cashback rate %% (default: %(default)s)")
    project.add_argument("--years", type=int, default=settings.default_policy_length,
                         help="Length of policy in years (default: %(default)s)")
    project.add_argument("--escalation", choices=[e.value for e in BillEscalation],
                         default=BillEscalation.FLAT.value, help="Bill escalation policy")
    project.add_argument("--calendar", action="store_true", help="Print the monthly payment schedule")
    project.add_argument("--out", help="CSV output path")
    project.add_argument("--no-export", action="store_true", help="Skip writing the CSV")
    project.set_defaults(func=run_project)

    ledger = sub.add_parser("ledger", help="Analyze a pasted policy illustration ledger")
    ledger.add_argument("path", help="Ledger text file, or - for stdin")
    ledger.add_argument("--out", help="CSV output path")
    ledger.add_argument("--no-export", action="store_true", help="Skip writing the CSV")
    ledger.set_defaults(func=run_ledger)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except ValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
