# This project was developed with assistance from AI tools.
"""Compliance check functions for TRID, ATR/QM, and ECOA.

Pure functions -- no I/O beyond the injected clock and the cached
adverse-action catalog, fully testable with plain values. Domain problems
are reported as Findings on the returned record, never raised.
"""

import logging
from datetime import date

from ...core.clock import Clock, system_clock
from ...core.formatting import format_number, round_half_up
from ...schemas.findings import ComplianceCheck, Finding, Regulation, Severity
from ...schemas.loan import Decision, LoanData, TimingInput
from ...schemas.results import AdverseActionNotice, AtrQmResult, QmType, TridTiming
from ..business_days import add_business_days, business_days_until, subtract_business_days
from .catalog import AdverseActionCatalog, get_catalog

logger = logging.getLogger(__name__)

LE_DEADLINE_BUSINESS_DAYS = 3
CD_LEAD_BUSINESS_DAYS = 3

QM_DTI_LIMIT = 43
QM_MAX_TERM_MONTHS = 360
QM_POINTS_FEES_RATE = 0.03
QM_SMALL_LOAN_THRESHOLD = 100_000
QM_SMALL_LOAN_FEE_CAP = 3_000

MAX_ADVERSE_ACTION_REASONS = 4


# ---------------------------------------------------------------------------
# TRID check
# ---------------------------------------------------------------------------


def check_trid_timing(timing: TimingInput, clock: Clock = system_clock) -> TridTiming:
    """Check TRID disclosure timing.

    - Loan Estimate (LE) must be delivered within 3 business days of application.
    - Closing Disclosure (CD) must be delivered at least 3 business days before
      closing. Without a closing date the CD side is vacuously compliant.

    Args:
        timing: Application and disclosure dates.
        clock: Source of "today" for undelivered-disclosure deadlines.
    """
    findings: list[Finding] = []
    today = clock()

    # --- Loan Estimate timing ---
    le_deadline = add_business_days(
        date.fromisoformat(timing.application_date), LE_DEADLINE_BUSINESS_DAYS
    )
    days_until_le_deadline = business_days_until(today, le_deadline)

    le_compliant = True
    if timing.le_disclosure_date:
        if date.fromisoformat(timing.le_disclosure_date) > le_deadline:
            le_compliant = False
            findings.append(
                Finding(
                    code="TRID-LE-001",
                    severity=Severity.CRITICAL,
                    description="Loan Estimate not provided within 3 business days",
                    remediation="Issue LE immediately and document reason for delay",
                )
            )
    elif days_until_le_deadline < 0:
        le_compliant = False
        findings.append(
            Finding(
                code="TRID-LE-002",
                severity=Severity.CRITICAL,
                description="Loan Estimate deadline has passed",
                remediation="Issue LE immediately",
            )
        )

    # --- Closing Disclosure timing ---
    cd_compliant = True
    cd_deadline: date | None = None
    days_until_cd_deadline: int | None = None

    if timing.closing_date:
        cd_deadline = subtract_business_days(
            date.fromisoformat(timing.closing_date), CD_LEAD_BUSINESS_DAYS
        )
        days_until_cd_deadline = business_days_until(today, cd_deadline)

        if timing.cd_disclosure_date:
            if date.fromisoformat(timing.cd_disclosure_date) > cd_deadline:
                cd_compliant = False
                findings.append(
                    Finding(
                        code="TRID-CD-001",
                        severity=Severity.CRITICAL,
                        description=(
                            "Closing Disclosure not provided 3 business days before closing"
                        ),
                        remediation="Reschedule closing or document consumer waiver",
                    )
                )
        elif days_until_cd_deadline < 0:
            cd_compliant = False
            findings.append(
                Finding(
                    code="TRID-CD-002",
                    severity=Severity.CRITICAL,
                    description="CD deadline has passed for scheduled closing",
                    remediation="Issue CD immediately or reschedule closing",
                )
            )

    logger.debug(
        "TRID timing for application dated %s: le_compliant=%s cd_compliant=%s",
        timing.application_date,
        le_compliant,
        cd_compliant,
    )

    return TridTiming(
        application_date=timing.application_date,
        le_disclosure_date=timing.le_disclosure_date,
        cd_disclosure_date=timing.cd_disclosure_date,
        closing_date=timing.closing_date,
        le_deadline=le_deadline.isoformat(),
        cd_deadline=cd_deadline.isoformat() if cd_deadline else None,
        le_compliant=le_compliant,
        cd_compliant=cd_compliant,
        days_until_le_deadline=days_until_le_deadline if days_until_le_deadline > 0 else None,
        days_until_cd_deadline=(
            days_until_cd_deadline
            if days_until_cd_deadline is not None and days_until_cd_deadline > 0
            else None
        ),
        findings=findings,
    )


# ---------------------------------------------------------------------------
# ATR/QM check
# ---------------------------------------------------------------------------


def points_and_fees_limit(loan_amount: float) -> float:
    """QM points-and-fees cap: 3% of the loan, at most $3,000 below $100k."""
    if loan_amount >= QM_SMALL_LOAN_THRESHOLD:
        return loan_amount * QM_POINTS_FEES_RATE
    return min(loan_amount * QM_POINTS_FEES_RATE, QM_SMALL_LOAN_FEE_CAP)


def check_atr_qm(loan: LoanData) -> AtrQmResult:
    """Classify a loan under ATR/QM (Ability-to-Repay / Qualified Mortgage).

    Risky features and a points-and-fees overage disqualify QM status.
    DTI above 43% never disqualifies on its own; it demotes a QM loan from
    safe harbor to rebuttable presumption.
    """
    findings: list[Finding] = []
    risky_features: list[str] = []

    if loan.negative_amortization:
        risky_features.append("Negative amortization")
    if loan.interest_only:
        risky_features.append("Interest-only payments")
    if loan.balloon_payment:
        risky_features.append("Balloon payment")
    if loan.prepayment_penalty:
        risky_features.append("Prepayment penalty")
    if loan.term_months > QM_MAX_TERM_MONTHS:
        risky_features.append("Term exceeds 30 years")

    fee_limit = points_and_fees_limit(loan.loan_amount)
    fees_exceeded = loan.points_and_fees > fee_limit
    if fees_exceeded:
        risky_features.append("Points and fees exceed limit")
        findings.append(
            Finding(
                code="QM-PF-001",
                severity=Severity.CRITICAL,
                description=(
                    f"Points and fees (${format_number(loan.points_and_fees)}) "
                    f"exceed {round_half_up(fee_limit)} limit"
                ),
                remediation="Reduce fees or document as non-QM",
            )
        )

    if loan.dti > QM_DTI_LIMIT:
        findings.append(
            Finding(
                code="QM-DTI-001",
                severity=Severity.MAJOR,
                description=(
                    f"DTI ({format_number(loan.dti)}%) exceeds QM safe harbor limit "
                    f"({QM_DTI_LIMIT}%)"
                ),
                remediation="May still qualify with AUS approval or as non-QM",
            )
        )

    has_risky_features = bool(risky_features)
    is_qm = not has_risky_features and not fees_exceeded

    if not is_qm:
        qm_type = QmType.NON_QM
    elif loan.dti <= QM_DTI_LIMIT:
        qm_type = QmType.SAFE_HARBOR
    else:
        qm_type = QmType.REBUTTABLE_PRESUMPTION

    logger.debug("ATR/QM classification for loan %s: %s", loan.loan_id, qm_type.value)

    return AtrQmResult(
        is_qm=is_qm,
        qm_type=qm_type,
        dti=loan.dti,
        dti_limit=QM_DTI_LIMIT,
        points_and_fees=loan.points_and_fees,
        points_and_fees_limit=fee_limit,
        has_risky_features=has_risky_features,
        risky_features=risky_features,
        findings=findings,
    )


# ---------------------------------------------------------------------------
# ECOA check
# ---------------------------------------------------------------------------


def check_ecoa(
    loan: LoanData,
    decision: Decision | str,
    reasons: list[str] | None = None,
) -> ComplianceCheck:
    """Check ECOA adverse-action reason requirements.

    Denials and counteroffers must state specific reasons. More than four
    reasons is a best-practice warning, not a failure. Approvals always pass.

    Args:
        loan: The application the decision was made on.
        decision: "approved", "denied", or "countered".
        reasons: Stated reasons for the adverse action, if any.
    """
    decision = Decision(decision)
    findings: list[Finding] = []
    warnings: list[str] = []

    if decision in Decision.adverse():
        if not reasons:
            findings.append(
                Finding(
                    code="ECOA-AA-001",
                    severity=Severity.CRITICAL,
                    description="Adverse action requires specific reasons",
                    remediation="Provide specific reasons for denial",
                )
            )
        elif len(reasons) > MAX_ADVERSE_ACTION_REASONS:
            warnings.append(
                "Best practice: limit adverse action reasons to "
                f"{MAX_ADVERSE_ACTION_REASONS} primary factors"
            )

    passed = not any(f.severity == Severity.CRITICAL for f in findings)
    logger.debug("ECOA check for loan %s (%s): passed=%s", loan.loan_id, decision.value, passed)

    return ComplianceCheck(
        regulation=Regulation.ECOA,
        passed=passed,
        findings=findings,
        warnings=warnings,
        recommendations=["Document all adverse action reasons contemporaneously"],
    )


def generate_adverse_action(
    applicant_name: str,
    application_date: str,
    creditor_name: str,
    creditor_address: str,
    reasons: list[str],
    clock: Clock = system_clock,
    catalog: AdverseActionCatalog | None = None,
) -> AdverseActionNotice:
    """Build an ECOA adverse-action notice.

    Keeps the first four reasons in their given order and does no
    validation; pair with ``check_ecoa`` when compliance matters.
    """
    catalog = catalog or get_catalog()
    return AdverseActionNotice(
        applicant_name=applicant_name,
        application_date=application_date,
        decision_date=clock().isoformat(),
        creditor_name=creditor_name,
        creditor_address=creditor_address,
        reasons=list(reasons[:MAX_ADVERSE_ACTION_REASONS]),
        ecoa_notice=catalog.ecoa_notice,
        fcra_notice=catalog.fcra_notice,
    )
