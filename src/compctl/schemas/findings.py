# This project was developed with assistance from AI tools.
"""Finding and generic compliance-check envelope."""

import enum

from pydantic import Field

from . import CamelModel


class Severity(str, enum.Enum):
    """Finding severity, most severe first."""

    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"
    INFO = "info"


class Regulation(str, enum.Enum):
    TRID = "TRID"
    ATR_QM = "ATR_QM"
    HMDA = "HMDA"
    ECOA = "ECOA"
    RESPA = "RESPA"
    TILA = "TILA"
    FCRA = "FCRA"
    UDAAP = "UDAAP"
    SCRA = "SCRA"
    FLOOD = "FLOOD"


class Finding(CamelModel):
    """Single rule violation or observation raised by an evaluator."""

    code: str
    severity: Severity
    description: str
    remediation: str | None = None


class ComplianceCheck(CamelModel):
    """Pass/fail envelope for cross-cutting checks such as ECOA reason validation."""

    regulation: Regulation
    passed: bool
    findings: list[Finding] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
