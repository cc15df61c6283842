"""Payee onboarding record and the vocabularies its fields draw from."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from greenroom.models.address import Address


class PayeeType(StrEnum):
    EMPLOYEE = "Employee"
    LOANOUT = "Loanout"
    VENDOR = "Vendor/Contractor"


class OnboardingMode(StrEnum):
    MANUAL = "manual"
    SELF_SERVICE = "self-service"


class RatePeriod(StrEnum):
    HOUR = "Hour"
    WEEK = "Week"
    MONTH = "Month"


class EarningCode(StrEnum):
    SALARY_REHEARSAL = "Salary Rehearsal"
    SALARY_PERFORMANCE = "Salary Performance"


class IncrementFrequency(StrEnum):
    WEEK = "Week"
    MONTH = "Month"


class AllowanceFrequency(StrEnum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


class PaymentMethod(StrEnum):
    DIRECT_DEPOSIT = "Direct deposit"
    CHECK = "Check"


class AccountType(StrEnum):
    CHECKING = "checking"
    SAVINGS = "savings"


LEGAL_STATUSES: tuple[str, ...] = (
    "Citizen of the United States",
    "Noncitizen national of the United States",
    "Lawful permanent resident",
    "Noncitizen",
)

VALIDATION_DOCUMENTS: tuple[str, ...] = (
    "Passport",
    "Resident card",
    "Foreign Passport",
    "Combination of driver's license and SSN",
)

FEDERAL_FILING_STATUSES: tuple[str, ...] = (
    "Single or Married filing separately",
    "Married filing jointly or Qualifying surviving spouse",
    "Head of household",
)

# Shared by the NY IT-2104 step and the residential state step
STATE_FILING_STATUSES: tuple[str, ...] = (
    "Single",
    "Married filing joint return",
    "Married filing separate return",
    "Head of household",
    "Qualifying surviving spouse",
)

STATE_WITHHOLDING_CODES: tuple[str, ...] = ("A", "B", "C", "D", "E", "F")

FEDERAL_TAX_CLASSIFICATIONS: tuple[str, ...] = (
    "Individual/sole proprietor",
    "C corporation",
    "S corporation",
    "Partnership",
    "Trust/estate",
    "LLC (C corporation)",
    "LLC (S corporation)",
    "LLC (Partnership)",
    "Other",
)

GENDERS: tuple[str, ...] = ("male", "female", "other", "prefer not to say")


class UploadedFile(BaseModel):
    """Metadata for a file the user attached."""

    model_config = {"frozen": True}

    name: str
    content_type: str = "application/octet-stream"
    size: int = 0


class PayRate(BaseModel):
    amount: Decimal = Decimal("0")
    period: RatePeriod = RatePeriod.HOUR
    cost_code: str = ""
    earning_code: EarningCode = EarningCode.SALARY_REHEARSAL


class Increment(BaseModel):
    type: str = ""
    amount: Decimal = Decimal("0")
    frequency: IncrementFrequency = IncrementFrequency.WEEK


class Allowance(BaseModel):
    category: str = ""
    amount: Decimal = Decimal("0")
    frequency: AllowanceFrequency = AllowanceFrequency.DAILY
    cost_code: str = ""


class OnboardingFormData(BaseModel):
    """Everything collected about one payee during onboarding.

    Only ``payee_type`` is set at creation; every other field is filled in
    as the wizard progresses.
    """

    payee_type: PayeeType

    # --- General Info ---
    legal_first_name: str = ""
    legal_last_name: str = ""
    entity_name: str = ""
    gender: str = ""
    ssn: str = ""
    ein: str = ""
    date_of_birth: str = ""
    email: str = ""
    home_address: Optional[Address] = None
    business_address: Optional[Address] = None

    # --- Union ---
    is_union_member: bool = False
    union: str = ""
    job_title: str = ""
    role_name: str = ""
    department: str = ""

    # --- Employment ---
    job_start_date: str = ""
    job_end_date: str = ""
    pay_rates: list[PayRate] = Field(default_factory=list)
    increments: list[Increment] = Field(default_factory=list)
    allowances: list[Allowance] = Field(default_factory=list)

    # --- 401k ---
    opt_in_401k: bool = False
    percentage_401k: Decimal = Decimal("0")

    # --- Representatives ---
    has_agent: bool = False
    agent_email: str = ""
    agent_fee_rehearsal: Decimal = Decimal("0")
    agent_fee_performance: Decimal = Decimal("0")
    agent_authorization: bool = False
    has_manager: bool = False
    manager_email: str = ""
    manager_fee_rehearsal: Decimal = Decimal("0")
    manager_fee_performance: Decimal = Decimal("0")
    manager_authorization: bool = False

    # --- Work Authorization (I-9) ---
    phone_number: str = ""
    legal_status: str = ""
    validation_document: str = ""
    document_number: str = ""
    issuing_authority: str = ""
    document_expiration: str = ""
    document_file: Optional[UploadedFile] = None

    # --- Federal (W-4) ---
    federal_filing_status: str = ""
    multiple_jobs: bool = False
    dependents_credit: Decimal = Decimal("0")
    other_income: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    extra_withholding: Decimal = Decimal("0")

    # --- NY State (IT-2104) ---
    ny_filing_status: str = ""
    ny_withholding_allowance: Decimal = Decimal("0")
    ny_additional_withholding: Decimal = Decimal("0")
    nyc_withholding_allowance: Decimal = Decimal("0")
    nyc_additional_withholding: Decimal = Decimal("0")

    # --- Residential State ---
    state_filing_status: str = ""
    state_withholding_code: str = ""
    state_additional_withholding: Decimal = Decimal("0")
    state_reduced_withholding: Decimal = Decimal("0")

    # --- Payment ---
    payment_method: Optional[PaymentMethod] = None
    routing_number: str = ""
    account_number: str = ""
    account_type: Optional[AccountType] = None
    mailing_address: Optional[Address] = None

    # --- Taxpayer Info (W-9) ---
    federal_tax_classification: str = ""
    exempt_payee_code: str = ""
    fatca_exemption_code: str = ""

    # --- Documents ---
    w4_completed: bool = False
    i9_completed: bool = False
    w9_completed: bool = False
    other_documents: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _address_matches_payee_type(self) -> OnboardingFormData:
        if self.payee_type == PayeeType.EMPLOYEE:
            if self.business_address is not None:
                raise ValueError("Employees have a home address, not a business address")
        elif self.home_address is not None:
            raise ValueError(f"{self.payee_type} payees have a business address, not a home address")
        return self

    @property
    def display_name(self) -> str:
        if self.payee_type == PayeeType.EMPLOYEE:
            return f"{self.legal_first_name} {self.legal_last_name}".strip()
        return self.entity_name

    @property
    def lives_in_ny(self) -> bool:
        return self.home_address is not None and self.home_address.state == "NY"

    def effective_mailing_address(self) -> Address | None:
        """Check payments go to the mailing address, else the home address."""
        return self.mailing_address or self.home_address

    def summary(self) -> dict[str, str]:
        """The confirmation-screen digest of this record."""
        if self.payee_type == PayeeType.EMPLOYEE:
            return {
                "name": self.display_name,
                "email": self.email,
                "union_member": "Yes" if self.is_union_member else "No",
                "job_title": self.job_title,
            }
        address = self.business_address
        return {
            "name": self.entity_name,
            "email": self.email,
            "ein": self.ein,
            "business_address": (
                ", ".join(part for part in (
                    address.address1, address.address2, address.city,
                    address.state, address.zip_code,
                ) if part)
                if address else ""
            ),
        }


# Kept across payee type changes
SHARED_FIELDS: frozenset[str] = frozenset({
    "payee_type",
    "legal_first_name",
    "legal_last_name",
    "entity_name",
    "email",
    "payment_method",
    "routing_number",
    "account_number",
    "account_type",
    "mailing_address",
    "other_documents",
})

_EMPLOYEE_FIELDS = frozenset({
    "gender", "ssn", "date_of_birth", "home_address",
    "is_union_member", "union", "job_title", "role_name", "department",
    "job_start_date", "job_end_date", "pay_rates", "increments", "allowances",
    "opt_in_401k", "percentage_401k",
    "has_agent", "agent_email", "agent_fee_rehearsal", "agent_fee_performance",
    "agent_authorization", "has_manager", "manager_email", "manager_fee_rehearsal",
    "manager_fee_performance", "manager_authorization",
    "federal_filing_status", "multiple_jobs", "dependents_credit", "other_income",
    "deductions", "extra_withholding", "w4_completed",
})
_WORKER_FIELDS = frozenset({
    "phone_number", "legal_status", "validation_document", "document_number",
    "issuing_authority", "document_expiration", "document_file",
    "ny_filing_status", "ny_withholding_allowance", "ny_additional_withholding",
    "nyc_withholding_allowance", "nyc_additional_withholding",
    "state_filing_status", "state_withholding_code", "state_additional_withholding",
    "state_reduced_withholding", "i9_completed",
})
_ENTITY_FIELDS = frozenset({
    "ein", "business_address", "federal_tax_classification", "exempt_payee_code",
    "fatca_exemption_code", "w9_completed",
})

APPLICABLE_FIELDS: dict[PayeeType, frozenset[str]] = {
    PayeeType.EMPLOYEE: _EMPLOYEE_FIELDS | _WORKER_FIELDS,
    PayeeType.LOANOUT: _WORKER_FIELDS | _ENTITY_FIELDS,
    PayeeType.VENDOR: _ENTITY_FIELDS,
}


def fields_for(payee_type: PayeeType) -> frozenset[str]:
    """Every record field a payee of this type may carry."""
    return SHARED_FIELDS | APPLICABLE_FIELDS[payee_type]


def inapplicable_fields(data: OnboardingFormData) -> list[str]:
    """Fields holding a non-default value that ``data.payee_type`` does not collect."""
    allowed = fields_for(data.payee_type)
    return [
        name for name, info in OnboardingFormData.model_fields.items()
        if name not in allowed
        and getattr(data, name) != info.get_default(call_default_factory=True)
    ]
