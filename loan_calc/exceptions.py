"""Custom exception hierarchy for loan-calc."""


class LoanCalcError(Exception):
    """Base exception for all loan-calc errors."""


class ValidationError(LoanCalcError):
    """Raised when loan fields are malformed or out of range."""

    def __init__(self, violations: list[str] | str) -> None:
        if isinstance(violations, str):
            violations = [violations]
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))


class InvalidLoanError(ValidationError):
    """Raised when a loan reaching the calculator breaks its invariants."""


class NotFoundError(LoanCalcError):
    """Raised when a loan id is not in the registry."""

    def __init__(self, loan_id: object) -> None:
        self.loan_id = loan_id
        super().__init__(f"Loan with ID {loan_id} not found")


class ConfigurationError(LoanCalcError):
    """Raised when configuration is invalid or missing."""
