# This project was developed with assistance from AI tools.
"""Input records: loan snapshot, disclosure timing, credit decision."""

import enum

from . import CamelModel, IsoDate, Number


class Decision(str, enum.Enum):
    APPROVED = "approved"
    DENIED = "denied"
    COUNTERED = "countered"

    @classmethod
    def adverse(cls) -> frozenset["Decision"]:
        """Decisions that require adverse-action reasons."""
        return frozenset({cls.DENIED, cls.COUNTERED})


class ArmFeatures(CamelModel):
    """Adjustable-rate terms. Carried with the loan, not evaluated."""

    initial_rate: Number
    margin: Number
    caps: list[Number]


class LoanData(CamelModel):
    """Snapshot of one loan application.

    Amounts are dollars; ``dti``, ``ltv`` and ``interest_rate`` are percents
    (35 means 35%).
    """

    loan_id: str
    application_date: IsoDate
    loan_amount: Number
    property_value: Number
    interest_rate: Number
    term_months: int
    monthly_payment: Number
    dti: Number
    ltv: Number
    credit_score: int
    points_and_fees: Number
    prepayment_penalty: bool | None = None
    negative_amortization: bool | None = None
    interest_only: bool | None = None
    balloon_payment: bool | None = None
    arm_features: ArmFeatures | None = None
    borrower_income: Number
    property_type: str
    occupancy: str
    loan_purpose: str
    loan_type: str


class TimingInput(CamelModel):
    """Disclosure dates for a TRID timing check."""

    application_date: IsoDate
    le_disclosure_date: IsoDate | None = None
    cd_disclosure_date: IsoDate | None = None
    closing_date: IsoDate | None = None
