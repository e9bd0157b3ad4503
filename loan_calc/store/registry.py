"""In-memory loan registry."""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from loan_calc.exceptions import NotFoundError, ValidationError
from loan_calc.logging import get_logger, log_fields
from loan_calc.models import Currency, Loan, validate_loan

logger = get_logger(__name__)

_UPDATABLE_FIELDS = frozenset(f.name for f in fields(Loan)) - {"loan_id"}


@dataclass
class LoanRegistry:
    """Owns the loan records for the lifetime of the process."""

    loans: dict[int, Loan] = field(default_factory=dict)
    _next_loan_id: int = 1

    def add(self, loan: Loan) -> int:
        """Validate and store a copy of ``loan`` under a fresh id.

        Returns
        -------
        int
            The id assigned to the stored loan.

        Raises
        ------
        ValidationError
            If any field is invalid. The registry is left unchanged.
        """
        violations = validate_loan(loan)
        if violations:
            raise ValidationError(violations)

        loan_id = self._next_loan_id
        stored = replace(loan, loan_id=loan_id, currency=Currency.parse(loan.currency))
        self.loans[loan_id] = stored
        self._next_loan_id += 1
        logger.info(
            "Added loan %d (%s %s)",
            loan_id,
            stored.principal,
            stored.currency.value,
            extra=log_fields(loan_id=loan_id, currency=stored.currency.value),
        )
        return loan_id

    def update(self, loan_id: int, changes: Mapping[str, Any]) -> None:
        """Apply ``changes`` to a stored loan in place.

        Raises
        ------
        NotFoundError
            If ``loan_id`` is unknown.
        ValidationError
            If a field name is not updatable or the merged loan is invalid.
        """
        loan = self.get(loan_id)

        unknown = sorted(set(changes) - _UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError([f"field {name!r} cannot be updated" for name in unknown])

        merged = replace(loan, **changes)
        violations = validate_loan(merged)
        if violations:
            raise ValidationError(violations)

        merged.currency = Currency.parse(merged.currency)
        for name in changes:
            setattr(loan, name, getattr(merged, name))
        logger.info(
            "Updated loan %d: %s",
            loan_id,
            ", ".join(sorted(changes)) or "no changes",
            extra=log_fields(loan_id=loan_id, currency=loan.currency.value, fields_changed=sorted(changes)),
        )

    def get(self, loan_id: int) -> Loan:
        """Get a loan by id."""
        try:
            return self.loans[loan_id]
        except (KeyError, TypeError):
            raise NotFoundError(loan_id) from None

    def list_all(self) -> list[Loan]:
        """Get all loans in insertion order."""
        return list(self.loans.values())

    def summary(self) -> dict[str, int]:
        """Return loan counts per currency."""
        counts: dict[str, int] = {}
        for loan in self.loans.values():
            counts[loan.currency.value] = counts.get(loan.currency.value, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self.loans)

    def __contains__(self, loan_id: object) -> bool:
        return loan_id in self.loans
