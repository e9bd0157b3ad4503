"""Output sinks for loan data."""

from loan_calc.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
