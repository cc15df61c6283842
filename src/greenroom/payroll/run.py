"""Run payroll: pick a pay period, select ready payees, review and submit."""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import IntEnum
from typing import Iterable

from greenroom.core.exceptions import PayrollRunError
from greenroom.core.protocols import ISubmissionGateway
from greenroom.models.payroll import Payee, PayeeKind, PayeeStatus, PayPeriod
from greenroom.models.submission import SubmissionReceipt

logger = logging.getLogger(__name__)


class RunStep(IntEnum):
    SELECT_PAYEES = 0
    REVIEW_AND_SUBMIT = 1


RUN_STEP_LABELS = ("Select Payees", "Review & Submit")

PAY_PERIODS: tuple[PayPeriod, ...] = (
    PayPeriod(id="pp-2025-04-07", label="Apr 7 - Apr 13, 2025"),
    PayPeriod(id="pp-2025-04-14", label="Apr 14 - Apr 20, 2025"),
    PayPeriod(id="pp-2025-04-21", label="Apr 21 - Apr 27, 2025"),
)

SAMPLE_PAYEES: tuple[Payee, ...] = (
    Payee(id=1, name="Jane Smith", type=PayeeKind.EMPLOYEE, status=PayeeStatus.READY,
          payroll_amount=Decimal("1250.00")),
    Payee(id=2, name="John Doe", type=PayeeKind.EMPLOYEE, status=PayeeStatus.READY,
          payroll_amount=Decimal("1800.00")),
    Payee(id=3, name="Acme Production Services", type=PayeeKind.VENDOR, status=PayeeStatus.READY,
          payroll_amount=Decimal("2500.00")),
    Payee(id=4, name="Alice Johnson", type=PayeeKind.EMPLOYEE, status=PayeeStatus.INCOMPLETE,
          payroll_amount=Decimal("0")),
    Payee(id=5, name="Bob Williams Productions, LLC", type=PayeeKind.LOANOUT,
          status=PayeeStatus.READY, payroll_amount=Decimal("3200.00")),
)


class PayrollRun:
    """Selection state for one payroll run."""

    def __init__(
        self,
        *,
        gateway: ISubmissionGateway,
        payees: Iterable[Payee] = SAMPLE_PAYEES,
        pay_periods: Iterable[PayPeriod] = PAY_PERIODS,
    ) -> None:
        self._gateway = gateway
        self._payees = {payee.id: payee for payee in payees}
        self._periods = {period.id: period for period in pay_periods}
        self._period_id = next(iter(self._periods))
        self._selected: list[int] = []
        self._step = RunStep.SELECT_PAYEES
        self._receipt: SubmissionReceipt | None = None

    @property
    def payees(self) -> list[Payee]:
        return list(self._payees.values())

    @property
    def pay_period(self) -> PayPeriod:
        return self._periods[self._period_id]

    @property
    def step(self) -> RunStep:
        return self._step

    @property
    def selected_ids(self) -> list[int]:
        return list(self._selected)

    @property
    def selected_payees(self) -> list[Payee]:
        return [payee for payee in self._payees.values() if payee.id in self._selected]

    @property
    def selected_total(self) -> Decimal:
        return sum((payee.payroll_amount for payee in self.selected_payees), Decimal("0"))

    @property
    def is_submitted(self) -> bool:
        return self._receipt is not None

    def _guard(self) -> None:
        if self._receipt is not None:
            raise PayrollRunError("Payroll has already been submitted")

    def choose_pay_period(self, period_id: str) -> None:
        """Pick a pay period. Any selection made for the previous period is dropped."""
        self._guard()
        if period_id not in self._periods:
            raise PayrollRunError(f"Unknown pay period {period_id!r}")
        self._period_id = period_id
        self._selected = []

    def toggle(self, payee_id: int) -> bool:
        """Flip one payee's selection. Returns whether the payee is now selected."""
        self._guard()
        payee = self._payees.get(payee_id)
        if payee is None:
            raise PayrollRunError(f"Unknown payee {payee_id}")
        if payee_id in self._selected:
            self._selected.remove(payee_id)
            return False
        if not payee.is_ready:
            raise PayrollRunError(f"{payee.name} has incomplete onboarding")
        self._selected.append(payee_id)
        return True

    def select_all(self) -> None:
        self._guard()
        self._selected = [payee.id for payee in self._payees.values() if payee.is_ready]

    def deselect_all(self) -> None:
        self._guard()
        self._selected = []

    def review(self) -> None:
        self._guard()
        if not self._selected:
            raise PayrollRunError("Select at least one payee")
        self._step = RunStep.REVIEW_AND_SUBMIT

    def back(self) -> None:
        self._guard()
        self._step = RunStep.SELECT_PAYEES

    async def submit(self) -> SubmissionReceipt:
        self._guard()
        if self._step != RunStep.REVIEW_AND_SUBMIT:
            raise PayrollRunError("Review the selection before submitting")
        payload = {
            "pay_period": self.pay_period.model_dump(),
            "selected_payees": list(self._selected),
            "payees": [payee.model_dump(mode="json") for payee in self.selected_payees],
            "total": str(self.selected_total),
        }
        self._receipt = await self._gateway.submit("payroll_run", payload)
        logger.info(
            "Payroll submitted",
            extra={"pay_period": self._period_id, "payees": len(self._selected),
                   "total": self.selected_total},
        )
        return self._receipt
