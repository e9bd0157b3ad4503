"""Demo loan generator."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from loan_calc.generators.base import BaseGenerator
from loan_calc.models import Currency, Loan


class LoanGenerator(BaseGenerator):
    """Generate valid sample loans for demos and training sessions."""

    CURRENCY_WEIGHTS = {
        Currency.USD: 0.4,
        Currency.EUR: 0.25,
        Currency.GBP: 0.15,
        Currency.CHF: 0.1,
        Currency.JPY: 0.1,
    }

    # Annual base rates by currency, in percent
    BASE_RATES = {
        Currency.USD: (2.5, 5.5),
        Currency.EUR: (1.5, 4.0),
        Currency.GBP: (3.0, 5.25),
        Currency.CHF: (0.5, 1.75),
        Currency.JPY: (0.0, 0.5),
    }

    def generate(self) -> Loan:
        """Generate a loan.

        Returns
        -------
        Loan
            Generated loan, without an id.
        """
        currency = self.random.choices(
            list(self.CURRENCY_WEIGHTS), weights=list(self.CURRENCY_WEIGHTS.values())
        )[0]

        if currency is Currency.JPY:
            principal = Decimal(self.random.randint(100, 5000) * 100_000)
        else:
            principal = Decimal(self.random.randint(10, 1000) * 1000)

        start_date: date = self.fake.date_between(start_date="-2y", end_date="today")
        end_date = start_date + timedelta(days=self.random.choice([29, 89, 179, 364]))

        low, high = self.BASE_RATES[currency]
        base_rate = Decimal(str(round(self.random.uniform(low, high), 2)))
        margin = Decimal(str(self.random.choice([0.5, 0.75, 1.0, 1.25, 1.5, 2.0])))

        return Loan(
            start_date=start_date,
            end_date=end_date,
            principal=principal,
            currency=currency,
            base_rate=base_rate,
            margin=margin,
        )

    def generate_batch(self, count: int) -> Iterator[Loan]:
        """Generate ``count`` loans."""
        for _ in range(count):
            yield self.generate()
