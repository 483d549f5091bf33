# This project was developed with assistance from AI tools.
"""compctl -- lending compliance checks from the command line.

Usage:
    compctl trid --app-date 2026-02-26 [--le-date ...] [--closing-date ...]
    compctl atr [-f loan.json] [--loan-amount ...] [--dti ...]
    compctl adverse --reasons 1,2,"Recent bankruptcy"
    compctl ecoa --decision denied --reasons 2
"""

import argparse
import logging
import sys

from .. import __version__
from ..core.clock import Clock, system_clock
from ..core.config import settings
from ..core.errors import InvalidInputError
from ..schemas.loan import Decision
from ..services.compliance.catalog import AdverseActionCatalog, get_catalog
from ..services.compliance.checks import (
    check_atr_qm,
    check_ecoa,
    check_trid_timing,
    generate_adverse_action,
)
from . import render
from .loaders import build_cli_loan, build_timing_input, load_loan_file
from .reasons import resolve_reasons

logger = logging.getLogger(__name__)

_FORMATS = ["table", "text", "json"]


def _emit(args: argparse.Namespace, record, lines: list[str]) -> None:
    if args.format == "json":
        print(render.to_json(record))
    else:
        print("\n".join(lines))


def _cmd_trid(args: argparse.Namespace, clock: Clock) -> int:
    timing = build_timing_input(
        application_date=args.app_date,
        le_disclosure_date=args.le_date,
        cd_disclosure_date=args.cd_date,
        closing_date=args.closing_date,
    )
    result = check_trid_timing(timing, clock=clock)
    _emit(args, result, render.format_trid(result))
    return 0


def _load_or_build_loan(args: argparse.Namespace, clock: Clock):
    if args.file:
        return load_loan_file(args.file)
    return build_cli_loan(
        application_date=clock().isoformat(),
        loan_amount=args.loan_amount,
        dti=args.dti,
        points_and_fees=args.points_fees,
        term_months=args.term,
        negative_amortization=args.neg_am,
        interest_only=args.interest_only,
        balloon_payment=args.balloon,
        prepayment_penalty=args.prepay_penalty,
    )


def _cmd_atr(args: argparse.Namespace, clock: Clock) -> int:
    loan = _load_or_build_loan(args, clock)
    result = check_atr_qm(loan)
    _emit(args, result, render.format_atr_qm(result))
    return 0


def _load_catalog() -> AdverseActionCatalog:
    try:
        return get_catalog()
    except (FileNotFoundError, ValueError) as exc:
        raise InvalidInputError(str(exc), source="catalog") from exc


def _cmd_adverse(args: argparse.Namespace, clock: Clock) -> int:
    catalog = _load_catalog()
    if args.list_reasons:
        print("\n".join(render.format_reason_list(catalog)))
        return 0

    app_date = args.app_date or clock().isoformat()
    # Validates the date the same way the timing check does.
    build_timing_input(application_date=app_date)

    reasons = resolve_reasons(args.reasons, catalog)
    notice = generate_adverse_action(
        args.applicant,
        app_date,
        args.creditor,
        args.creditor_address,
        reasons,
        clock=clock,
        catalog=catalog,
    )
    _emit(args, notice, render.format_adverse_action(notice))
    return 0


def _cmd_ecoa(args: argparse.Namespace, clock: Clock) -> int:
    catalog = _load_catalog()
    reasons = resolve_reasons(args.reasons, catalog)
    loan = _load_or_build_loan(args, clock)
    check = check_ecoa(loan, args.decision, reasons or None)
    _emit(args, check, render.format_ecoa(check, args.decision, reasons))
    return 0


def _add_format_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=_FORMATS,
        default=settings.DEFAULT_FORMAT,
        help="Output format (default: %(default)s)",
    )


def _add_loan_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-f", "--file", help="Loan data file (JSON or YAML)")
    parser.add_argument("--loan-amount", type=float, default=300_000, help="Loan amount")
    parser.add_argument("--dti", type=float, default=35, help="Debt-to-income ratio (percent)")
    parser.add_argument("--points-fees", type=float, default=0, help="Total points and fees")
    parser.add_argument("--term", type=int, default=360, help="Loan term in months")
    parser.add_argument("--neg-am", action="store_true", help="Has negative amortization")
    parser.add_argument("--interest-only", action="store_true", help="Has interest-only period")
    parser.add_argument("--balloon", action="store_true", help="Has balloon payment")
    parser.add_argument("--prepay-penalty", action="store_true", help="Has prepayment penalty")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Lending compliance checks (TRID, ATR/QM, ECOA)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    trid = sub.add_parser("trid", help="Check TRID timing compliance")
    trid.add_argument("--app-date", required=True, help="Application date (YYYY-MM-DD)")
    trid.add_argument("--le-date", help="Loan Estimate disclosure date")
    trid.add_argument("--cd-date", help="Closing Disclosure date")
    trid.add_argument("--closing-date", help="Scheduled closing date")
    _add_format_option(trid)
    trid.set_defaults(handler=_cmd_trid)

    atr = sub.add_parser("atr", help="Check ATR/QM compliance")
    _add_loan_options(atr)
    _add_format_option(atr)
    atr.set_defaults(handler=_cmd_atr)

    adverse = sub.add_parser("adverse", help="Generate ECOA-compliant adverse action notice")
    adverse.add_argument("--applicant", default=settings.DEFAULT_APPLICANT_NAME)
    adverse.add_argument("--app-date", help="Application date (default: today)")
    adverse.add_argument("--creditor", default=settings.DEFAULT_CREDITOR_NAME)
    adverse.add_argument("--creditor-address", default=settings.DEFAULT_CREDITOR_ADDRESS)
    adverse.add_argument("--reasons", help="Comma-separated reason codes (1-16) or text")
    adverse.add_argument(
        "--list-reasons", action="store_true", help="List standard adverse action reasons"
    )
    _add_format_option(adverse)
    adverse.set_defaults(handler=_cmd_adverse)

    ecoa = sub.add_parser("ecoa", help="Validate adverse-action reasons for a credit decision")
    ecoa.add_argument(
        "--decision",
        required=True,
        choices=[d.value for d in Decision],
        help="Credit decision",
    )
    ecoa.add_argument("--reasons", help="Comma-separated reason codes (1-16) or text")
    _add_loan_options(ecoa)
    _add_format_option(ecoa)
    ecoa.set_defaults(handler=_cmd_ecoa)

    return parser


def main(argv: list[str] | None = None, clock: Clock = system_clock) -> int:
    """Parse arguments, run one check, print the result. Returns the exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(args, clock)
    except InvalidInputError as exc:
        logger.debug("Rejected input for %s", args.command, exc_info=True)
        print(f"{settings.APP_NAME} {args.command}: invalid input: {exc}", file=sys.stderr)
        return 2
