"""Payroll run, timesheet, vendor payment and registration review records."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class PayeeStatus(StrEnum):
    READY = "ready"
    INCOMPLETE = "incomplete"


class PayeeKind(StrEnum):
    EMPLOYEE = "Employee"
    VENDOR = "Vendor"
    LOANOUT = "Loanout"


class LineStatus(StrEnum):
    APPROVED = "approved"
    PENDING = "pending"


class VendorPaymentMethod(StrEnum):
    ACH = "ACH"
    CHECK = "Check"


class PayPeriod(BaseModel):
    model_config = {"frozen": True}

    id: str
    label: str


class Payee(BaseModel):
    """A payee eligible for a payroll run."""

    model_config = {"frozen": True}

    id: int
    name: str
    type: PayeeKind
    status: PayeeStatus
    payroll_amount: Decimal = Decimal("0")

    @property
    def is_ready(self) -> bool:
        return self.status == PayeeStatus.READY


class PayrollLine(BaseModel):
    """One payee's row in the payroll breakdown."""

    id: int
    name: str
    status: LineStatus = LineStatus.PENDING
    amount: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    union_dues: Decimal = Decimal("0")
    employer_taxes: Decimal = Decimal("0")


class PayrollTotals(BaseModel):
    total_pay: Decimal = Decimal("0")
    total_deductions: Decimal = Decimal("0")
    total_union_dues: Decimal = Decimal("0")
    total_employer_taxes: Decimal = Decimal("0")


class Timesheet(BaseModel):
    id: int
    employee_name: str
    total_hours: float = 0.0
    overtime: float = 0.0
    reimbursements: Decimal = Decimal("0")
    reimbursement_attachment: Optional[str] = None
    allowances: str = ""
    approved: bool = False


class Vendor(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    ein: str


class OneOffPayment(BaseModel):
    id: int
    vendor_name: str
    ein: str
    payment_method: str = "check"
    amount: Decimal
    description: str
    code_class: str = ""
    is_new_vendor: bool = False


class VendorPayment(BaseModel):
    id: str
    name: str
    ein: str
    payment_method: VendorPaymentMethod = VendorPaymentMethod.ACH
    account_info: Optional[str] = None
    payment_amount: Decimal = Decimal("0")
    description: str = ""
    code_class: str = ""


class CompanyRegistration(BaseModel):
    """A company registration waiting for administrator approval."""

    entity_name: str
    entity_type: str = ""
    fein: str = ""
    city: str = ""
    state: str = ""
    administrator_email: str = ""
    details: dict[str, str] = Field(default_factory=dict)
