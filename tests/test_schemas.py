# This project was developed with assistance from AI tools.
"""Tests for record validation and JSON shape."""

import json

import pytest
from pydantic import ValidationError

from compctl.schemas.findings import Finding, Severity
from compctl.schemas.loan import LoanData, TimingInput
from compctl.schemas.results import AtrQmResult, QmType
from compctl.services.compliance.checks import check_atr_qm


def _camel_loan(**overrides) -> dict:
    data = {
        "loanId": "FILE-1",
        "applicationDate": "2026-02-26",
        "loanAmount": 250000,
        "propertyValue": 312500,
        "interestRate": 6.25,
        "termMonths": 360,
        "monthlyPayment": 1540,
        "dti": 38,
        "ltv": 80,
        "creditScore": 700,
        "pointsAndFees": 4000,
        "borrowerIncome": 90000,
        "propertyType": "condo",
        "occupancy": "primary",
        "loanPurpose": "refinance",
        "loanType": "conventional",
    }
    data.update(overrides)
    return data


class TestLoanData:
    def test_validates_camel_case_input(self):
        loan = LoanData.model_validate(_camel_loan(balloonPayment=True))
        assert loan.loan_id == "FILE-1"
        assert loan.balloon_payment is True
        assert loan.prepayment_penalty is None

    def test_arm_features(self):
        loan = LoanData.model_validate(
            _camel_loan(armFeatures={"initialRate": 5.5, "margin": 2.75, "caps": [2, 1, 5]})
        )
        assert loan.arm_features.caps == [2, 1, 5]

    def test_rejects_nan_dti(self):
        with pytest.raises(ValidationError):
            LoanData.model_validate(_camel_loan(dti=float("nan")))

    def test_rejects_non_numeric_amount(self):
        with pytest.raises(ValidationError):
            LoanData.model_validate(_camel_loan(loanAmount="lots"))

    def test_rejects_missing_field(self):
        data = _camel_loan()
        del data["pointsAndFees"]
        with pytest.raises(ValidationError, match="pointsAndFees|points_and_fees"):
            LoanData.model_validate(data)

    def test_is_immutable(self, base_loan):
        with pytest.raises(ValidationError):
            base_loan.dti = 50


class TestTimingInput:
    def test_keeps_original_strings(self):
        timing = TimingInput(application_date="2026-02-26", closing_date="2026-03-10")
        assert timing.application_date == "2026-02-26"
        assert timing.le_disclosure_date is None

    @pytest.mark.parametrize("bad", ["2026-02-30", "02/26/2026", "20260226", "yesterday", ""])
    def test_rejects_malformed_dates(self, bad):
        with pytest.raises(ValidationError):
            TimingInput(application_date=bad)

    def test_rejects_malformed_optional_date(self):
        with pytest.raises(ValidationError):
            TimingInput(application_date="2026-02-26", le_disclosure_date="2026-13-01")


class TestJsonShape:
    def test_camel_case_keys_and_omitted_optionals(self):
        result = AtrQmResult(
            is_qm=True,
            qm_type=QmType.SAFE_HARBOR,
            dti=35,
            dti_limit=43,
            points_and_fees=5000,
            points_and_fees_limit=9000,
            has_risky_features=False,
            findings=[Finding(code="X-1", severity=Severity.INFO, description="d")],
        )
        data = json.loads(result.model_dump_json(by_alias=True, exclude_none=True))
        assert data["isQm"] is True
        assert data["qmType"] == "safe-harbor"
        assert data["pointsAndFeesLimit"] == 9000
        assert data["riskyFeatures"] == []
        assert data["findings"] == [{"code": "X-1", "severity": "info", "description": "d"}]

    def test_whole_numbers_serialize_as_integers(self, base_loan):
        result = check_atr_qm(base_loan)
        raw = result.model_dump_json(by_alias=True)
        data = json.loads(raw)
        for key in ("dti", "dtiLimit", "pointsAndFees", "pointsAndFeesLimit"):
            assert isinstance(data[key], int), key
        assert data["dtiLimit"] == 43
        assert data["pointsAndFeesLimit"] == 9000
        assert "9000.0" not in raw
        assert "35.0" not in raw

    def test_fractional_numbers_stay_floats(self, base_loan):
        result = check_atr_qm(base_loan.model_copy(update={"dti": 36.5, "loan_amount": 150_050}))
        data = json.loads(result.model_dump_json(by_alias=True))
        assert data["dti"] == 36.5
        assert data["pointsAndFeesLimit"] == pytest.approx(4501.5)

    def test_python_dump_keeps_floats(self):
        loan = LoanData.model_validate(_camel_loan())
        assert isinstance(loan.model_dump()["loan_amount"], float)
        assert json.loads(loan.model_dump_json(by_alias=True))["loanAmount"] == 250000
