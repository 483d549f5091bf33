# This project was developed with assistance from AI tools.
"""Console rendering for evaluator results.

Each ``format_*`` function returns output lines; the caller prints them.
"""

from pydantic import BaseModel

from ..core.formatting import format_number
from ..schemas.findings import ComplianceCheck, Finding, Severity
from ..schemas.results import AdverseActionNotice, AtrQmResult, TridTiming
from ..services.compliance.catalog import AdverseActionCatalog

RULE = "═" * 63
SUBRULE = "─" * 63

_SEVERITY_ICONS = {
    Severity.CRITICAL: "🚨",
    Severity.MAJOR: "⚠",
}


def to_json(record: BaseModel) -> str:
    """Pretty-printed camelCase JSON, absent optionals omitted."""
    return record.model_dump_json(by_alias=True, exclude_none=True, indent=2)


def _money(value: float) -> str:
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"


def _header(title: str) -> list[str]:
    return [RULE, title, RULE]


def _section(title: str) -> list[str]:
    return ["", title, SUBRULE]


def _format_findings(findings: list[Finding]) -> list[str]:
    if not findings:
        return []
    lines = _section("FINDINGS")
    for f in findings:
        icon = _SEVERITY_ICONS.get(f.severity, "ℹ")
        lines.append(f"{icon} [{f.code}] {f.description}")
        if f.remediation:
            lines.append(f"   → {f.remediation}")
    return lines


def _status(compliant: bool) -> str:
    return "✓ COMPLIANT" if compliant else "✗ NON-COMPLIANT"


def format_trid(result: TridTiming) -> list[str]:
    lines = _header("TRID TIMING COMPLIANCE")
    lines.append("")
    lines.append(f"Application Date:   {result.application_date}")
    if result.le_disclosure_date:
        lines.append(f"LE Disclosure:      {result.le_disclosure_date}")
    if result.cd_disclosure_date:
        lines.append(f"CD Disclosure:      {result.cd_disclosure_date}")
    if result.closing_date:
        lines.append(f"Closing Date:       {result.closing_date}")

    lines += _section("STATUS")
    lines.append(f"Loan Estimate:      {_status(result.le_compliant)}")
    lines.append(f"  Deadline:            {result.le_deadline}")
    if result.days_until_le_deadline:
        lines.append(f"  Days until deadline: {result.days_until_le_deadline}")
    lines.append(f"Closing Disclosure: {_status(result.cd_compliant)}")
    if result.cd_deadline:
        lines.append(f"  Deadline:            {result.cd_deadline}")
    if result.days_until_cd_deadline:
        lines.append(f"  Days until deadline: {result.days_until_cd_deadline}")

    lines += _format_findings(result.findings)
    lines.append(RULE)
    return lines


def format_atr_qm(result: AtrQmResult) -> list[str]:
    lines = _header("ATR/QM COMPLIANCE CHECK")
    lines.append("")
    qm_status = "✓ QUALIFIED MORTGAGE" if result.is_qm else "✗ NON-QM"
    lines.append(f"QM Status:          {qm_status}")
    if result.qm_type:
        lines.append(f"QM Type:            {result.qm_type.value.upper()}")

    lines += _section("KEY METRICS")
    dti_icon = "✓" if result.dti <= result.dti_limit else "⚠"
    lines.append(
        f"{dti_icon} DTI:               {format_number(result.dti)}% "
        f"(limit: {format_number(result.dti_limit)}%)"
    )
    pf_icon = "✓" if result.points_and_fees <= result.points_and_fees_limit else "✗"
    lines.append(
        f"{pf_icon} Points & Fees:     ${_money(result.points_and_fees)} "
        f"(limit: ${_money(result.points_and_fees_limit)})"
    )

    if result.risky_features:
        lines += _section("RISKY FEATURES")
        for feature in result.risky_features:
            lines.append(f"  ✗ {feature}")

    lines += _format_findings(result.findings)
    lines.append(RULE)
    return lines


def format_adverse_action(notice: AdverseActionNotice) -> list[str]:
    lines = _header("NOTICE OF ADVERSE ACTION")
    lines += [
        "",
        f"Date: {notice.decision_date}",
        f"To: {notice.applicant_name}",
        "",
        f"Your application for credit dated {notice.application_date} has been",
        "denied based on the following reason(s):",
        "",
    ]
    if notice.reasons:
        lines += [f"  • {reason}" for reason in notice.reasons]
    else:
        lines.append("  [No specific reasons provided - COMPLIANCE WARNING]")

    lines += ["", SUBRULE, "EQUAL CREDIT OPPORTUNITY ACT NOTICE", SUBRULE, notice.ecoa_notice]
    if notice.fcra_notice:
        lines += ["", SUBRULE, "FAIR CREDIT REPORTING ACT NOTICE", SUBRULE, notice.fcra_notice]
    lines += ["", notice.creditor_name, notice.creditor_address, RULE]
    return lines


def format_reason_list(catalog: AdverseActionCatalog) -> list[str]:
    lines = _header("STANDARD ADVERSE ACTION REASONS")
    for i, reason in enumerate(catalog.reasons, start=1):
        lines.append(f"{i:>2}. {reason}")
    lines.append(RULE)
    return lines


def format_ecoa(check: ComplianceCheck, decision: str, reasons: list[str]) -> list[str]:
    lines = _header("ECOA ADVERSE ACTION CHECK")
    lines.append("")
    lines.append(f"Decision:           {decision.upper()}")
    lines.append(f"Status:             {'✓ PASSED' if check.passed else '✗ FAILED'}")

    if reasons:
        lines += _section("REASONS")
        lines += [f"  • {reason}" for reason in reasons]

    lines += _format_findings(check.findings)

    if check.warnings:
        lines += _section("WARNINGS")
        lines += [f"⚠ {w}" for w in check.warnings]

    if check.recommendations:
        lines += _section("RECOMMENDATIONS")
        lines += [f"  → {r}" for r in check.recommendations]

    lines.append(RULE)
    return lines
