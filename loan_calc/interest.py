"""Simple-interest schedule calculation.

Interest accrues linearly on the principal at the loan's effective rate
(base rate plus margin). Each calendar day from the start date to the end
date, both included, accrues::

    principal * (effective_rate / 100) / basis

where ``basis`` comes from the day-count convention (365 or 360).
Amounts are kept at full ``Decimal`` precision; rounding to the currency's
minor unit is left to the presentation layer via :func:`round_money`.
"""

from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterator

from loan_calc.exceptions import InvalidLoanError, ValidationError
from loan_calc.models import Currency, DayCountConvention, InterestEntry, Loan, validate_loan

_HUNDRED = Decimal(100)


def round_money(amount: Decimal, currency: Currency | str) -> Decimal:
    """Round an amount to the currency's minor unit (half-up)."""
    places = Currency.parse(currency).minor_units
    try:
        return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError(f"amount {amount} is too large to display") from None


class InterestSchedule:
    """Lazily generated daily interest entries for one loan.

    Iterating again recomputes the entries from the loan terms captured at
    construction; nothing is cached.
    """

    def __init__(self, loan: Loan, daily_interest: Decimal, daily_interest_no_margin: Decimal) -> None:
        self.start_date = loan.start_date
        self.days = loan.total_days
        self.daily_interest = daily_interest
        self.daily_interest_no_margin = daily_interest_no_margin

    def __iter__(self) -> Iterator[InterestEntry]:
        cumulative = Decimal(0)
        for offset in range(self.days):
            cumulative += self.daily_interest
            yield InterestEntry(
                date=self.start_date + timedelta(days=offset),
                days_elapsed=offset + 1,
                accrued_interest=self.daily_interest,
                accrued_interest_no_margin=self.daily_interest_no_margin,
                cumulative_interest=cumulative,
            )

    def __len__(self) -> int:
        return self.days


class InterestCalculator:
    """Stateless simple-interest calculator.

    Parameters
    ----------
    day_count : DayCountConvention
        Convention supplying the annual divisor (default ACT/365).
    """

    def __init__(self, day_count: DayCountConvention = DayCountConvention.ACT_365) -> None:
        self.day_count = day_count

    @property
    def basis(self) -> int:
        return self.day_count.basis

    def compute_schedule(self, loan: Loan) -> InterestSchedule:
        """Build the day-by-day schedule for a loan.

        Raises
        ------
        InvalidLoanError
            If the loan fails validation.
        """
        self._check(loan)
        return InterestSchedule(
            loan,
            daily_interest=self._daily(loan, loan.effective_rate),
            daily_interest_no_margin=self._daily(loan, loan.base_rate),
        )

    def compute_total(self, loan: Loan) -> Decimal:
        """Closed-form interest over the whole range at the effective rate."""
        self._check(loan)
        return self._total(loan, loan.effective_rate)

    def compute_total_no_margin(self, loan: Loan) -> Decimal:
        """Closed-form interest over the whole range at the base rate only."""
        self._check(loan)
        return self._total(loan, loan.base_rate)

    def _daily(self, loan: Loan, rate: Decimal) -> Decimal:
        return loan.principal * (rate / _HUNDRED) / self.basis

    def _total(self, loan: Loan, rate: Decimal) -> Decimal:
        return loan.principal * (rate / _HUNDRED) * loan.total_days / self.basis

    @staticmethod
    def _check(loan: Loan) -> None:
        violations = validate_loan(loan)
        if violations:
            raise InvalidLoanError(violations)
