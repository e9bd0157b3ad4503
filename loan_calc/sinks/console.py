"""Console sink for loans and interest schedules."""

import json
from decimal import Decimal
from typing import Any, Iterable

from loan_calc.interest import InterestSchedule, round_money
from loan_calc.models import InterestEntry, Loan
from loan_calc.sinks.serialization import serialize_value, to_dict


class ConsoleSink:
    """Write loans and schedules to stdout as text tables or JSON."""

    def __init__(self, output_format: str = "table", max_rows: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        output_format : str
            "table" for aligned text, "json" for pretty-printed JSON.
        max_rows : int | None
            Maximum schedule rows to print (None for all).
        """
        self.output_format = output_format
        self.max_rows = max_rows

    def write_loan(self, loan: Loan) -> None:
        """Print one loan's terms."""
        if self.output_format == "json":
            self._print_json(self._loan_dict(loan))
            return

        print(f"Loan ID: {loan.loan_id}")
        for label, value in self._loan_rows(loan):
            print(f"  {label:<16} {value}")

    def write_loans(self, loans: Iterable[Loan]) -> None:
        """Print every loan, or a notice when there are none."""
        loans = list(loans)
        if self.output_format == "json":
            self._print_json([self._loan_dict(loan) for loan in loans])
            return

        if not loans:
            print("No loans recorded.")
            return
        print("All Loans:")
        for loan in loans:
            self.write_loan(loan)
            print()

    def write_schedule(
        self,
        loan: Loan,
        schedule: InterestSchedule,
        total: Decimal,
        total_no_margin: Decimal,
    ) -> None:
        """Print a loan's interest schedule and totals."""
        entries = list(schedule)
        shown = entries[: self.max_rows] if self.max_rows else entries

        if self.output_format == "json":
            self._print_json(
                {
                    "loan": self._loan_dict(loan),
                    "total_interest": serialize_value(round_money(total, loan.currency)),
                    "total_interest_no_margin": serialize_value(
                        round_money(total_no_margin, loan.currency)
                    ),
                    "days": len(entries),
                    "entries": [self._entry_dict(entry, loan) for entry in shown],
                }
            )
            return

        print("Loan Interest Calculation Results")
        print("-" * 32)
        self.write_loan(loan)
        print()

        header = f"{'Date':<12}{'Day':>6}{'Interest':>16}{'No margin':>16}{'Cumulative':>18}"
        print(header)
        print("-" * len(header))
        for entry in shown:
            print(
                f"{entry.date.isoformat():<12}"
                f"{entry.days_elapsed:>6}"
                f"{self._money(entry.accrued_interest, loan):>16}"
                f"{self._money(entry.accrued_interest_no_margin, loan):>16}"
                f"{self._money(entry.cumulative_interest, loan):>18}"
            )
        if len(shown) < len(entries):
            print(f"... and {len(entries) - len(shown)} more days")

        print("-" * len(header))
        print(f"Total interest:             {self._money(total, loan)} {loan.currency.value}")
        print(f"Total interest (no margin): {self._money(total_no_margin, loan)} {loan.currency.value}")

    def _loan_rows(self, loan: Loan) -> list[tuple[str, str]]:
        return [
            ("Start date", loan.start_date.isoformat()),
            ("End date", loan.end_date.isoformat()),
            ("Principal", f"{self._money(loan.principal, loan)} {loan.currency.value}"),
            ("Base rate", f"{loan.base_rate}%"),
            ("Margin", f"{loan.margin}%"),
            ("Effective rate", f"{loan.effective_rate}%"),
            ("Days", str(loan.total_days)),
        ]

    @staticmethod
    def _entry_dict(entry: InterestEntry, loan: Loan) -> dict:
        data = to_dict(entry)
        for key in ("accrued_interest", "accrued_interest_no_margin", "cumulative_interest"):
            data[key] = serialize_value(round_money(getattr(entry, key), loan.currency))
        return data

    @staticmethod
    def _loan_dict(loan: Loan) -> dict:
        data = to_dict(loan)
        data["effective_rate"] = serialize_value(loan.effective_rate)
        return data

    @staticmethod
    def _money(amount: Decimal, loan: Loan) -> str:
        return f"{round_money(amount, loan.currency):,}"

    @staticmethod
    def _print_json(data: Any) -> None:
        print(json.dumps(data, indent=2, ensure_ascii=False))
