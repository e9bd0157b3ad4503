"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from loan_calc.interest import InterestCalculator
from loan_calc.models import Currency, Loan
from loan_calc.store import LoanRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def registry() -> LoanRegistry:
    """Create a fresh registry for each test."""
    return LoanRegistry()


@pytest.fixture
def calculator() -> InterestCalculator:
    """ACT/365 calculator."""
    return InterestCalculator()


@pytest.fixture
def sample_loan() -> Loan:
    """100 000 USD at 3.0% + 1.5% over ten days of January 2024."""
    return Loan(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 10),
        principal=Decimal("100000"),
        currency=Currency.USD,
        base_rate=Decimal("3.0"),
        margin=Decimal("1.5"),
    )


@pytest.fixture
def other_loan() -> Loan:
    """A second, distinct loan."""
    return Loan(
        start_date=date(2024, 3, 1),
        end_date=date(2024, 5, 31),
        principal=Decimal("2500000"),
        currency=Currency.JPY,
        base_rate=Decimal("0.25"),
        margin=Decimal("1.0"),
    )
