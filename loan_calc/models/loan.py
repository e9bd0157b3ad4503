"""Loan models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from loan_calc.models.enums import Currency

# Keeps every rounded amount within the default 28-digit decimal context
MAX_PRINCIPAL = Decimal("1e15")
MAX_RATE = Decimal("1000")


@dataclass
class Loan:
    """Loan contract entity.

    Rates are annual percentages (``Decimal("3.0")`` for 3 %).
    """

    start_date: date
    end_date: date
    principal: Decimal
    currency: Currency
    base_rate: Decimal
    margin: Decimal
    loan_id: int | None = field(default=None, compare=False)  # Assigned by the registry

    @property
    def effective_rate(self) -> Decimal:
        """Base rate plus margin."""
        return self.base_rate + self.margin

    @property
    def total_days(self) -> int:
        """Number of accrual days, counting both ends of the range."""
        return (self.end_date - self.start_date).days + 1

    @classmethod
    def default(cls) -> "Loan":
        """Template loan used to prefill the add form."""
        return cls(
            start_date=date(2020, 1, 1),
            end_date=date(2020, 1, 5),
            principal=Decimal("1000"),
            currency=Currency.USD,
            base_rate=Decimal("5"),
            margin=Decimal("1"),
        )


@dataclass(frozen=True)
class InterestEntry:
    """One day of an interest schedule."""

    date: date
    days_elapsed: int  # 1 on the start date
    accrued_interest: Decimal
    accrued_interest_no_margin: Decimal
    cumulative_interest: Decimal


def validate_loan(loan: Loan) -> list[str]:
    """Check a loan's field types and invariants.

    Returns
    -------
    list[str]
        Human-readable violations; empty when the loan is valid.
    """
    violations: list[str] = []

    dates_ok = True
    for name in ("start_date", "end_date"):
        value = getattr(loan, name)
        if not isinstance(value, date) or isinstance(value, datetime):
            violations.append(f"{name} must be a calendar date")
            dates_ok = False
    if dates_ok and loan.start_date > loan.end_date:
        violations.append("start_date must be on or before end_date")

    if not isinstance(loan.principal, Decimal) or not loan.principal.is_finite():
        violations.append("principal must be a finite decimal amount")
    elif loan.principal <= 0:
        violations.append("principal must be greater than zero")
    elif loan.principal >= MAX_PRINCIPAL:
        violations.append(f"principal must be less than {MAX_PRINCIPAL:,f}")

    for name in ("base_rate", "margin"):
        value = getattr(loan, name)
        if not isinstance(value, Decimal) or not value.is_finite():
            violations.append(f"{name} must be a finite decimal percentage")
        elif value < 0:
            violations.append(f"{name} must not be negative")
        elif value > MAX_RATE:
            violations.append(f"{name} must not exceed {MAX_RATE}%")

    try:
        Currency.parse(loan.currency)
    except ValueError:
        violations.append(f"currency {loan.currency!r} is not a recognised code")

    return violations
