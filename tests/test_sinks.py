"""Tests for the console sink."""

import json
from dataclasses import replace

import pytest

from loan_calc.interest import InterestCalculator
from loan_calc.models import Loan
from loan_calc.sinks import ConsoleSink


def _write_schedule(sink: ConsoleSink, loan: Loan, calculator: InterestCalculator) -> None:
    sink.write_schedule(
        loan,
        calculator.compute_schedule(loan),
        total=calculator.compute_total(loan),
        total_no_margin=calculator.compute_total_no_margin(loan),
    )


class TestConsoleSinkTable:
    """Tests for table output."""

    def test_write_loan(self, capsys: pytest.CaptureFixture, sample_loan: Loan) -> None:
        ConsoleSink().write_loan(replace(sample_loan, loan_id=4))

        out = capsys.readouterr().out
        assert "Loan ID: 4" in out
        assert "100,000.00 USD" in out
        assert "Effective rate   4.5%" in out
        assert "Days             10" in out

    def test_write_loans_empty(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink().write_loans([])

        assert capsys.readouterr().out == "No loans recorded.\n"

    def test_write_loans(
        self, capsys: pytest.CaptureFixture, sample_loan: Loan, other_loan: Loan
    ) -> None:
        ConsoleSink().write_loans([replace(sample_loan, loan_id=1), replace(other_loan, loan_id=2)])

        out = capsys.readouterr().out
        assert out.startswith("All Loans:")
        assert out.index("Loan ID: 1") < out.index("Loan ID: 2")
        assert "2,500,000 JPY" in out

    def test_write_schedule(
        self,
        capsys: pytest.CaptureFixture,
        sample_loan: Loan,
        calculator: InterestCalculator,
    ) -> None:
        _write_schedule(ConsoleSink(), replace(sample_loan, loan_id=1), calculator)

        out = capsys.readouterr().out
        assert "2024-01-01" in out
        assert "2024-01-10" in out
        assert "12.33" in out
        assert "Total interest:             123.29 USD" in out
        assert "Total interest (no margin): 82.19 USD" in out

    def test_write_schedule_with_max_rows(
        self,
        capsys: pytest.CaptureFixture,
        sample_loan: Loan,
        calculator: InterestCalculator,
    ) -> None:
        _write_schedule(ConsoleSink(max_rows=3), replace(sample_loan, loan_id=1), calculator)

        out = capsys.readouterr().out
        assert "2024-01-03" in out
        assert "2024-01-04" not in out
        assert "... and 7 more days" in out
        assert "123.29 USD" in out


class TestConsoleSinkJson:
    """Tests for JSON output."""

    def test_write_loans(self, capsys: pytest.CaptureFixture, sample_loan: Loan) -> None:
        ConsoleSink(output_format="json").write_loans([replace(sample_loan, loan_id=1)])

        data = json.loads(capsys.readouterr().out)
        assert data == [
            {
                "start_date": "2024-01-01",
                "end_date": "2024-01-10",
                "principal": "100000",
                "currency": "USD",
                "base_rate": "3.0",
                "margin": "1.5",
                "loan_id": 1,
                "effective_rate": "4.5",
            }
        ]

    def test_write_loans_empty(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleSink(output_format="json").write_loans([])

        assert json.loads(capsys.readouterr().out) == []

    def test_write_schedule(
        self,
        capsys: pytest.CaptureFixture,
        sample_loan: Loan,
        calculator: InterestCalculator,
    ) -> None:
        _write_schedule(ConsoleSink(output_format="json", max_rows=2), sample_loan, calculator)

        data = json.loads(capsys.readouterr().out)
        assert data["total_interest"] == "123.29"
        assert data["total_interest_no_margin"] == "82.19"
        assert data["days"] == 10
        assert len(data["entries"]) == 2
        assert data["entries"][1]["date"] == "2024-01-02"
        assert data["entries"][1]["days_elapsed"] == 2
        assert data["entries"][1]["accrued_interest"] == "12.33"
        assert data["entries"][1]["accrued_interest_no_margin"] == "8.22"
        assert data["entries"][1]["cumulative_interest"] == "24.66"
