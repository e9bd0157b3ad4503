"""Sample data generators."""

from loan_calc.generators.loan import LoanGenerator

__all__ = ["LoanGenerator"]
