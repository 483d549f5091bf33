# This project was developed with assistance from AI tools.
"""Turn CLI options and loan files into validated input records.

Every failure surfaces as InvalidInputError so the evaluators only ever
see well-typed records.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..core.errors import InvalidInputError
from ..schemas.loan import LoanData, TimingInput

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _describe_validation_error(exc: ValidationError) -> str:
    """Collapse pydantic errors into one readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "input"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _read_document(path: Path) -> Any:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidInputError(f"cannot read file ({exc.strerror})", source=str(path)) from exc

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(raw)
        return json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidInputError(f"malformed document ({exc})", source=str(path)) from exc


def load_loan_file(path: str | Path) -> LoanData:
    """Load a loan record from a JSON or YAML file with camelCase keys."""
    path = Path(path)
    data = _read_document(path)
    if not isinstance(data, dict):
        raise InvalidInputError("loan file must contain a single object", source=str(path))
    try:
        loan = LoanData.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputError(_describe_validation_error(exc), source=str(path)) from exc
    logger.info("Loaded loan %s from %s", loan.loan_id, path)
    return loan


def build_cli_loan(
    *,
    application_date: str,
    loan_amount: float = 300_000,
    dti: float = 35,
    points_and_fees: float = 0,
    term_months: int = 360,
    negative_amortization: bool = False,
    interest_only: bool = False,
    balloon_payment: bool = False,
    prepayment_penalty: bool = False,
) -> LoanData:
    """Synthesize a loan from command-line figures; other terms use stock values."""
    try:
        return LoanData(
            loan_id="CLI-INPUT",
            application_date=application_date,
            loan_amount=loan_amount,
            property_value=loan_amount * 1.25,
            interest_rate=6.5,
            term_months=term_months,
            monthly_payment=0,
            dti=dti,
            ltv=80,
            credit_score=720,
            points_and_fees=points_and_fees,
            negative_amortization=negative_amortization,
            interest_only=interest_only,
            balloon_payment=balloon_payment,
            prepayment_penalty=prepayment_penalty,
            borrower_income=100_000,
            property_type="single-family",
            occupancy="primary",
            loan_purpose="purchase",
            loan_type="conventional",
        )
    except ValidationError as exc:
        raise InvalidInputError(_describe_validation_error(exc)) from exc


def build_timing_input(
    application_date: str,
    le_disclosure_date: str | None = None,
    cd_disclosure_date: str | None = None,
    closing_date: str | None = None,
) -> TimingInput:
    """Validate disclosure dates into a TimingInput."""
    try:
        return TimingInput(
            application_date=application_date,
            le_disclosure_date=le_disclosure_date,
            cd_disclosure_date=cd_disclosure_date,
            closing_date=closing_date,
        )
    except ValidationError as exc:
        raise InvalidInputError(_describe_validation_error(exc)) from exc
