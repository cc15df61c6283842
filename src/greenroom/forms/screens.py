"""Form records and validation rules for the registration and setup screens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel

from greenroom.core.types import FieldErrors
from greenroom.forms.controller import FormController
from greenroom.models.onboarding import UploadedFile
from greenroom.validators import fields as v

# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


class LoginForm(BaseModel):
    email: str = ""
    password: str = ""


def login_rules(form: LoginForm) -> FieldErrors:
    """Report only the first failing check."""
    if not form.email:
        return {"email": v.EMAIL_REQUIRED}
    if not v.is_valid_email(form.email):
        return {"email": v.EMAIL_INVALID}
    if not form.password:
        return {"password": v.PASSWORD_REQUIRED}
    if len(form.password) < v.PASSWORD_MIN_LENGTH:
        return {"password": v.PASSWORD_TOO_SHORT}
    return {}


# ---------------------------------------------------------------------------
# Account activation
# ---------------------------------------------------------------------------


class AccountActivationForm(BaseModel):
    email: str = ""
    password: str = ""
    confirm_password: str = ""

    @property
    def strength(self) -> v.PasswordStrength:
        return v.password_strength(self.password)


def account_activation_rules(form: AccountActivationForm) -> FieldErrors:
    errors: FieldErrors = {}
    password_error = v.password_error(form.password)
    if password_error:
        errors["password"] = password_error
    if form.password != form.confirm_password:
        errors["confirm_password"] = v.PASSWORD_MISMATCH
    return errors


# ---------------------------------------------------------------------------
# Company information
# ---------------------------------------------------------------------------


class EntityType(StrEnum):
    CORPORATION = "corp"
    PARTNERSHIP = "partnership"
    SOLE_PROPRIETOR = "soleProprietor"
    NON_PROFIT = "nonProfit"
    LLC = "llc"


class CompanyInformationForm(BaseModel):
    entity_name: str = ""
    entity_type: str = ""
    fein: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = "NY"
    zip_code: str = ""
    phone_number: str = ""
    nys_unemployment_number: str = ""


def company_information_rules(form: CompanyInformationForm) -> FieldErrors:
    errors: FieldErrors = {}
    if not form.entity_name.strip():
        errors["entity_name"] = "Entity name is required"
    if form.entity_type not in set(EntityType):
        errors["entity_type"] = "Please select an entity type"
    for field, kind in (
        ("fein", "fein"),
        ("zip_code", "zip"),
        ("phone_number", "phone"),
        ("nys_unemployment_number", "nys_unemployment_number"),
    ):
        message = v.check_field(kind, getattr(form, field))
        if message:
            errors[field] = message
    return errors


# ---------------------------------------------------------------------------
# Payroll details
# ---------------------------------------------------------------------------


class PayFrequency(StrEnum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"


class PayPeriodTiming(StrEnum):
    ARREARS = "arrears"
    SAME_WEEK = "sameWeek"


class PayrollDetailsForm(BaseModel):
    pay_frequency: PayFrequency = PayFrequency.WEEKLY
    pay_period: PayPeriodTiming = PayPeriodTiming.ARREARS
    payroll_start_date: date
    starting_check_number: str = ""


def payroll_details_rules(today: date, lead_days: int = v.START_DATE_LEAD_DAYS):
    """Build the rule function for a given calendar day."""

    def rules(form: PayrollDetailsForm) -> FieldErrors:
        errors: FieldErrors = {}
        date_error = v.payroll_start_date_error(form.payroll_start_date, today, lead_days)
        if date_error:
            errors["payroll_start_date"] = date_error
        check_error = v.check_number_error(form.starting_check_number)
        if check_error:
            errors["starting_check_number"] = check_error
        return errors

    return rules


def new_payroll_details_form(
    today: date, lead_days: int = v.START_DATE_LEAD_DAYS
) -> FormController[PayrollDetailsForm]:
    initial = PayrollDetailsForm(
        payroll_start_date=v.next_valid_payroll_start_date(today, lead_days),
    )
    return FormController(initial, payroll_details_rules(today, lead_days))


# ---------------------------------------------------------------------------
# Terms review
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Agreement:
    id: str
    title: str
    file_name: str


AGREEMENTS: tuple[Agreement, ...] = (
    Agreement("terms", "Terms of Service", "greenroom-terms-of-service.pdf"),
    Agreement("privacy", "Privacy Policy", "greenroom-privacy-policy.pdf"),
    Agreement("data_processing", "Data Processing Agreement", "greenroom-dpa.pdf"),
    Agreement("security", "Security Policy", "greenroom-security-policy.pdf"),
)

AGREEMENTS_REQUIRED = "You must accept all agreements to continue"


class TermsReviewForm(BaseModel):
    terms: bool = False
    privacy: bool = False
    data_processing: bool = False
    security: bool = False

    def all_accepted(self) -> bool:
        return all(getattr(self, agreement.id) for agreement in AGREEMENTS)


def terms_review_rules(form: TermsReviewForm) -> FieldErrors:
    return {} if form.all_accepted() else {"agreements": AGREEMENTS_REQUIRED}


# ---------------------------------------------------------------------------
# Bank setup
# ---------------------------------------------------------------------------

SUGGESTED_BANKS: tuple[str, ...] = (
    "Chase Bank",
    "Bank of America",
    "Wells Fargo",
    "Citibank",
    "TD Bank",
    "Capital One",
    "PNC Bank",
    "U.S. Bank",
)


def suggest_banks(query: str) -> list[str]:
    """Banks whose name contains ``query``, ignoring case. Empty query suggests nothing."""
    if not query:
        return []
    needle = query.lower()
    return [bank for bank in SUGGESTED_BANKS if needle in bank.lower()]


class BankSetupForm(BaseModel):
    bank_name: str = ""
    routing_number: str = ""
    account_number: str = ""
    confirm_account_number: str = ""
    account_type: str = ""
    authorization: bool = False


def bank_setup_rules(form: BankSetupForm) -> FieldErrors:
    errors: FieldErrors = {}
    if not form.bank_name.strip():
        errors["bank_name"] = "Bank name is required"
    if not form.routing_number:
        errors["routing_number"] = v.ROUTING_REQUIRED
    elif not v.is_valid_routing_number(form.routing_number):
        errors["routing_number"] = v.ROUTING_INVALID
    if not form.account_number:
        errors["account_number"] = "Account number is required"
    if form.account_number != form.confirm_account_number:
        errors["confirm_account_number"] = "Account numbers do not match"
    if form.account_type not in ("checking", "savings"):
        errors["account_type"] = "Account type is required"
    if not form.authorization:
        errors["authorization"] = "You must authorize credit/debit transactions"
    return errors


def new_bank_setup_form() -> FormController[BankSetupForm]:
    return FormController(
        BankSetupForm(),
        bank_setup_rules,
        formatters={"routing_number": v.format_routing_number},
    )


# ---------------------------------------------------------------------------
# Union setup
# ---------------------------------------------------------------------------


class AgreementType(StrEnum):
    LORT = "lort"
    OFF_BROADWAY = "off_broadway"
    PRODUCTION_CONTRACT = "production_contract"
    SPECIAL_AGREEMENT = "special_agreement"
    SHOWCASE_CODE = "showcase_code"
    DEVELOPMENTAL = "developmental"
    TWENTY_NINE_HOUR = "29_hour"


# "usa" and "sag" are listed as coming soon and cannot be chosen
SELECTABLE_UNIONS: tuple[str, ...] = ("aea",)
PRODUCTION_TYPES: tuple[str, ...] = ("musical", "dramatic")
TIERS: tuple[str, ...] = ("tier1", "tier2", "tier3")

UNION_FIELDS: tuple[str, ...] = (
    "union",
    "agreement_type",
    "production_type",
    "tier",
    "aea_employer_id",
    "aea_production_title",
    "aea_business_rep",
)


class UnionSetupForm(BaseModel):
    has_union_production: Optional[bool] = None
    union: str = ""
    agreement_type: str = ""
    production_type: str = ""
    tier: str = ""
    aea_employer_id: str = ""
    aea_production_title: str = ""
    aea_business_rep: str = ""


def union_setup_rules(form: UnionSetupForm) -> FieldErrors:
    errors: FieldErrors = {}
    if not form.has_union_production:
        return errors
    if form.union not in SELECTABLE_UNIONS:
        errors["union"] = "Please select a union"
    if form.agreement_type not in set(AgreementType):
        errors["agreement_type"] = "Please select an agreement type"
    if form.agreement_type == AgreementType.OFF_BROADWAY and form.production_type not in PRODUCTION_TYPES:
        errors["production_type"] = "Please select a production type"
    if form.agreement_type == AgreementType.DEVELOPMENTAL and form.tier not in TIERS:
        errors["tier"] = "Please select a tier"
    if form.agreement_type != AgreementType.TWENTY_NINE_HOUR:
        if not form.aea_employer_id:
            errors["aea_employer_id"] = "AEA Employer ID is required"
        if not form.aea_production_title:
            errors["aea_production_title"] = "AEA Production Title is required"
        if not form.aea_business_rep:
            errors["aea_business_rep"] = "AEA Business Representative is required"
    return errors


def set_union_production(controller: FormController[UnionSetupForm], has_union: bool) -> None:
    """Answer the union-production question; "no" wipes every union field."""
    controller.set_field("has_union_production", has_union)
    if not has_union:
        controller.set_fields(**{field: "" for field in UNION_FIELDS})


# ---------------------------------------------------------------------------
# Signature setup
# ---------------------------------------------------------------------------


class SignatureMethod(StrEnum):
    DRAW = "draw"
    UPLOAD = "upload"


SIGNATURE_POLICIES: tuple[str, ...] = ("single", "double")
SIGNATURE_IMAGE_REQUIRED = "Please upload an image file (JPG, PNG, GIF)"


class SignatureSetupForm(BaseModel):
    signature_policy: str = ""
    signature_method: SignatureMethod = SignatureMethod.DRAW
    drawn_signature: Optional[str] = None  # encoded image data
    uploaded_signature: Optional[UploadedFile] = None


def signature_setup_rules(form: SignatureSetupForm) -> FieldErrors:
    errors: FieldErrors = {}
    if form.signature_policy not in SIGNATURE_POLICIES:
        errors["signature_policy"] = "Please select a signature policy"
    if form.signature_method == SignatureMethod.DRAW and not form.drawn_signature:
        errors["drawn_signature"] = "Please draw your signature"
    elif form.signature_method == SignatureMethod.UPLOAD and form.uploaded_signature is None:
        errors["uploaded_signature"] = "Please upload a signature image"
    return errors


def set_signature_method(controller: FormController[SignatureSetupForm], method: SignatureMethod) -> None:
    """Switching method discards the signature captured the other way."""
    controller.set_field("signature_method", method)
    if method == SignatureMethod.DRAW:
        controller.set_field("uploaded_signature", None)
    else:
        controller.set_field("drawn_signature", None)


def upload_signature(controller: FormController[SignatureSetupForm], file: UploadedFile) -> bool:
    """Attach an uploaded signature; non-image files are refused and leave the form unchanged."""
    if not file.content_type.startswith("image/"):
        controller.set_error("uploaded_signature", SIGNATURE_IMAGE_REQUIRED)
        return False
    controller.set_field("uploaded_signature", file)
    return True
