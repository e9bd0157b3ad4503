"""Domain models for loans and interest schedules."""

from loan_calc.models.enums import Currency, DayCountConvention
from loan_calc.models.loan import InterestEntry, Loan, validate_loan

__all__ = [
    "Currency",
    "DayCountConvention",
    "InterestEntry",
    "Loan",
    "validate_loan",
]
