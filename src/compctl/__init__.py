# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .core.clock import Clock, fixed_clock, system_clock
from .core.errors import InvalidInputError
from .schemas.findings import ComplianceCheck, Finding, Regulation, Severity
from .schemas.loan import ArmFeatures, Decision, LoanData, TimingInput
from .schemas.results import AdverseActionNotice, AtrQmResult, QmType, TridTiming
from .services.business_days import (
    add_business_days,
    business_days_between,
    business_days_until,
    subtract_business_days,
)
from .services.compliance.catalog import AdverseActionCatalog, get_catalog, load_catalog
from .services.compliance.checks import (
    check_atr_qm,
    check_ecoa,
    check_trid_timing,
    generate_adverse_action,
)

__all__ = [
    "AdverseActionCatalog",
    "AdverseActionNotice",
    "ArmFeatures",
    "AtrQmResult",
    "Clock",
    "ComplianceCheck",
    "Decision",
    "Finding",
    "InvalidInputError",
    "LoanData",
    "QmType",
    "Regulation",
    "Severity",
    "TimingInput",
    "TridTiming",
    "add_business_days",
    "business_days_between",
    "business_days_until",
    "check_atr_qm",
    "check_ecoa",
    "check_trid_timing",
    "fixed_clock",
    "generate_adverse_action",
    "get_catalog",
    "load_catalog",
    "subtract_business_days",
    "system_clock",
]
