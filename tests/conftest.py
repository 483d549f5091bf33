# This project was developed with assistance from AI tools.
"""Shared fixtures: a baseline QM loan and a pinned clock."""

from datetime import date

import pytest

from compctl.core.clock import fixed_clock
from compctl.schemas.loan import LoanData
from compctl.services.compliance import catalog as catalog_mod

# Thursday
TODAY = date(2026, 2, 26)


@pytest.fixture
def base_loan() -> LoanData:
    """A $300k conventional loan that qualifies for QM safe harbor."""
    return LoanData(
        loan_id="TEST-001",
        application_date="2026-02-26",
        loan_amount=300_000,
        property_value=375_000,
        interest_rate=6.5,
        term_months=360,
        monthly_payment=1896,
        dti=35,
        ltv=80,
        credit_score=720,
        points_and_fees=5000,
        borrower_income=100_000,
        property_type="single-family",
        occupancy="primary",
        loan_purpose="purchase",
        loan_type="conventional",
    )


@pytest.fixture
def clock():
    return fixed_clock(TODAY)


@pytest.fixture(autouse=True)
def _reset_catalog_cache():
    """Reset the catalog module cache around each test."""
    catalog_mod._cached_catalog = None
    catalog_mod._cached_path = None
    catalog_mod._cached_mtime = 0.0
    yield
    catalog_mod._cached_catalog = None
    catalog_mod._cached_path = None
    catalog_mod._cached_mtime = 0.0
