"""Payee picker, payroll breakdown totals and the registration review queue."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from pydantic import BaseModel

from greenroom.core.exceptions import PayrollRunError
from greenroom.models.payroll import CompanyRegistration, PayrollLine, PayrollTotals

logger = logging.getLogger(__name__)


class PickablePayee(BaseModel):
    id: int
    name: str
    role: str = ""
    is_selected: bool = False


class PayeePicker:
    """Name search over payees with a per-payee selection toggle."""

    def __init__(self, payees: Iterable[PickablePayee]) -> None:
        self._payees = {payee.id: payee for payee in payees}
        self.search = ""

    def visible(self) -> list[PickablePayee]:
        needle = self.search.lower()
        return [p for p in self._payees.values() if needle in p.name.lower()]

    def toggle(self, payee_id: int) -> PickablePayee:
        payee = self._payees[payee_id]
        payee = payee.model_copy(update={"is_selected": not payee.is_selected})
        self._payees[payee_id] = payee
        return payee

    def selected(self) -> list[PickablePayee]:
        return [p for p in self._payees.values() if p.is_selected]


def payroll_totals(lines: Iterable[PayrollLine]) -> PayrollTotals:
    totals = {"pay": Decimal("0"), "deductions": Decimal("0"),
              "union_dues": Decimal("0"), "employer_taxes": Decimal("0")}
    for line in lines:
        totals["pay"] += line.amount
        totals["deductions"] += line.deductions
        totals["union_dues"] += line.union_dues
        totals["employer_taxes"] += line.employer_taxes
    return PayrollTotals(
        total_pay=totals["pay"],
        total_deductions=totals["deductions"],
        total_union_dues=totals["union_dues"],
        total_employer_taxes=totals["employer_taxes"],
    )


class ReviewQueue:
    """Company registrations awaiting approval."""

    def __init__(self, registrations: Iterable[CompanyRegistration] = ()) -> None:
        self._pending = list(registrations)

    @property
    def pending(self) -> list[CompanyRegistration]:
        return list(self._pending)

    def approve(self, index: int) -> CompanyRegistration:
        """Approve and remove the registration at ``index``."""
        if not 0 <= index < len(self._pending):
            raise PayrollRunError(f"No pending registration at position {index}")
        registration = self._pending.pop(index)
        logger.info("Registration approved", extra={"entity_name": registration.entity_name})
        return registration
