"""In-memory store for loan records."""

from loan_calc.store.registry import LoanRegistry

__all__ = ["LoanRegistry"]
