"""Vendor payments: one-off payments and the recurring vendor payment list."""

from __future__ import annotations

import itertools
from decimal import Decimal
from typing import Iterable

from greenroom.core.exceptions import PayrollRunError
from greenroom.models.payroll import OneOffPayment, Vendor, VendorPayment, VendorPaymentMethod
from greenroom.validators.fields import mask_account_number, parse_amount

EXISTING_VENDORS: tuple[Vendor, ...] = (
    Vendor(id="v1", name="Acme Production Services", ein="12-3456789"),
    Vendor(id="v2", name="Broadway Lighting Co.", ein="98-7654321"),
    Vendor(id="v3", name="Sound Solutions Inc.", ein="45-6789123"),
)

CODE_CLASSES: dict[str, str] = {
    "production": "Production",
    "tech": "Technical",
    "venue": "Venue",
    "admin": "Administrative",
}

DEFAULT_CODE_CLASS = "EXPENSE-5000"


class OneOffPayments:
    """One-off payments to existing or newly added vendors."""

    def __init__(
        self,
        vendors: Iterable[Vendor] = EXISTING_VENDORS,
        payments: Iterable[OneOffPayment] = (),
    ) -> None:
        self._vendors = {vendor.id: vendor for vendor in vendors}
        self._payments = list(payments)
        self._ids = itertools.count(max((p.id for p in self._payments), default=0) + 1)

    @property
    def vendors(self) -> list[Vendor]:
        return list(self._vendors.values())

    @property
    def payments(self) -> list[OneOffPayment]:
        return list(self._payments)

    @property
    def total(self) -> Decimal:
        return sum((payment.amount for payment in self._payments), Decimal("0"))

    def add_for_vendor(
        self,
        vendor_id: str,
        amount: str,
        description: str,
        *,
        payment_method: str = "check",
        code_class: str = "",
    ) -> OneOffPayment | None:
        """Pay an existing vendor. Returns None when a required input is missing."""
        vendor = self._vendors.get(vendor_id)
        if vendor is None or not amount or not description:
            return None
        return self._append(vendor.name, vendor.ein, amount, description,
                            payment_method, code_class, is_new_vendor=False)

    def quick_add(
        self,
        name: str,
        ein: str,
        amount: str,
        description: str,
        *,
        payment_method: str = "check",
        code_class: str = "",
    ) -> OneOffPayment | None:
        """Pay a vendor not yet on file."""
        if not name or not ein or not amount or not description:
            return None
        return self._append(name, ein, amount, description,
                            payment_method, code_class, is_new_vendor=True)

    def _append(
        self, name: str, ein: str, amount: str, description: str,
        payment_method: str, code_class: str, *, is_new_vendor: bool,
    ) -> OneOffPayment:
        payment = OneOffPayment(
            id=next(self._ids),
            vendor_name=name,
            ein=ein,
            payment_method=payment_method,
            amount=parse_amount(amount),
            description=description,
            code_class=code_class,
            is_new_vendor=is_new_vendor,
        )
        self._payments.append(payment)
        return payment

    def remove(self, payment_id: int) -> None:
        self._payments = [p for p in self._payments if p.id != payment_id]


class VendorPaymentList:
    """Vendors paid on the current payroll, with masked bank details."""

    def __init__(self, payments: Iterable[VendorPayment] = ()) -> None:
        self._payments = list(payments)

    @property
    def payments(self) -> list[VendorPayment]:
        return list(self._payments)

    @property
    def total(self) -> Decimal:
        return sum((p.payment_amount for p in self._payments), Decimal("0"))

    def add(
        self,
        name: str,
        ein: str,
        amount: Decimal,
        *,
        payment_method: VendorPaymentMethod = VendorPaymentMethod.ACH,
        account_number: str = "",
        description: str = "",
        code_class: str = "",
    ) -> VendorPayment:
        if not name or not ein or amount <= 0:
            raise PayrollRunError("Vendor name, EIN and a positive amount are required")
        payment = VendorPayment(
            id=str(len(self._payments) + 1),
            name=name,
            ein=ein,
            payment_method=payment_method,
            account_info=(
                mask_account_number(account_number)
                if payment_method == VendorPaymentMethod.ACH else None
            ),
            payment_amount=amount,
            description=description,
            code_class=code_class or DEFAULT_CODE_CLASS,
        )
        self._payments.append(payment)
        return payment

    def remove(self, payment_id: str) -> None:
        self._payments = [p for p in self._payments if p.id != payment_id]
