# This project was developed with assistance from AI tools.
"""Evaluator output records."""

import enum

from pydantic import Field

from . import CamelModel, Number
from .findings import Finding


class QmType(str, enum.Enum):
    SAFE_HARBOR = "safe-harbor"
    REBUTTABLE_PRESUMPTION = "rebuttable-presumption"
    NON_QM = "non-qm"


class TridTiming(CamelModel):
    """LE/CD timing result.

    Day counts are present only while the deadline is still ahead.
    """

    application_date: str
    le_disclosure_date: str | None = None
    cd_disclosure_date: str | None = None
    closing_date: str | None = None
    le_deadline: str
    cd_deadline: str | None = None
    le_compliant: bool
    cd_compliant: bool
    days_until_le_deadline: int | None = None
    days_until_cd_deadline: int | None = None
    findings: list[Finding] = Field(default_factory=list)


class AtrQmResult(CamelModel):
    """ATR/QM classification with limits echoed beside the actual figures."""

    is_qm: bool
    qm_type: QmType | None = None
    dti: Number
    dti_limit: Number
    points_and_fees: Number
    points_and_fees_limit: Number
    has_risky_features: bool
    risky_features: list[str] = Field(default_factory=list)
    findings: list[Finding] = Field(default_factory=list)


class AdverseActionNotice(CamelModel):
    applicant_name: str
    application_date: str
    decision_date: str
    creditor_name: str
    creditor_address: str
    reasons: list[str]
    ecoa_notice: str
    fcra_notice: str | None = None
