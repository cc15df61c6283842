"""Validation rules for each onboarding step and for final submission."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable

from greenroom.core.types import FieldErrors
from greenroom.models.address import address_errors
from greenroom.models.onboarding import (
    FEDERAL_FILING_STATUSES,
    FEDERAL_TAX_CLASSIFICATIONS,
    LEGAL_STATUSES,
    STATE_FILING_STATUSES,
    STATE_WITHHOLDING_CODES,
    VALIDATION_DOCUMENTS,
    OnboardingFormData,
    OnboardingMode,
    PayeeType,
    PaymentMethod,
    inapplicable_fields,
)
from greenroom.models.union import UNIONS
from greenroom.onboarding.documents import Invitation, mandatory_documents
from greenroom.onboarding.steps import StepId, visible_steps
from greenroom.validators import fields as v

NON_NEGATIVE = "Must be zero or more"
PERCENT_RANGE = "Must be between 0 and 100"
EIN_OR_SSN_INVALID = "Enter an EIN (99-9999999) or SSN (999-99-9999)"


def _require(errors: FieldErrors, data: OnboardingFormData, field: str, message: str) -> bool:
    if not str(getattr(data, field) or "").strip():
        errors[field] = message
        return False
    return True


def _require_choice(
    errors: FieldErrors, data: OnboardingFormData, field: str,
    choices: tuple[str, ...], message: str,
) -> None:
    if getattr(data, field) not in choices:
        errors[field] = message


def _email(errors: FieldErrors, value: str, field: str = "email") -> None:
    if not value:
        errors[field] = v.EMAIL_REQUIRED
    elif not v.is_valid_email(value):
        errors[field] = v.EMAIL_INVALID


def _non_negative(errors: FieldErrors, data: OnboardingFormData, *fields: str) -> None:
    for field in fields:
        if getattr(data, field) < 0:
            errors[field] = NON_NEGATIVE


def _parse_date(raw: str) -> date | None:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def _employee_general_info(data: OnboardingFormData) -> FieldErrors:
    errors: FieldErrors = {}
    _require(errors, data, "legal_first_name", "Legal first name is required")
    _require(errors, data, "legal_last_name", "Legal last name is required")
    _email(errors, data.email)
    if _require(errors, data, "ssn", "SSN is required") and not v.is_valid_ssn(data.ssn):
        errors["ssn"] = v.SSN_INVALID
    _require(errors, data, "date_of_birth", "Date of birth is required")
    errors.update(address_errors(data.home_address, "home_address"))

    if data.is_union_member and data.union not in UNIONS:
        errors["union"] = "Please select a union"
    _require(errors, data, "job_title", "Job title is required")
    if _require(errors, data, "job_start_date", "Job start date is required"):
        start = _parse_date(data.job_start_date)
        end = _parse_date(data.job_end_date) if data.job_end_date else None
        if start is None:
            errors["job_start_date"] = "Enter a valid date"
        elif data.job_end_date and end is None:
            errors["job_end_date"] = "Enter a valid date"
        elif end is not None and end < start:
            errors["job_end_date"] = "End date cannot be before start date"

    if data.opt_in_401k and not Decimal("0") <= data.percentage_401k <= Decimal("100"):
        errors["percentage_401k"] = PERCENT_RANGE
    if data.has_agent:
        _email(errors, data.agent_email, "agent_email")
    if data.has_manager:
        _email(errors, data.manager_email, "manager_email")
    return errors


def _check_ein(errors: FieldErrors, data: OnboardingFormData) -> None:
    if not _require(errors, data, "ein", "EIN is required"):
        return
    if data.payee_type == PayeeType.VENDOR:
        if not v.is_valid_fein_or_ssn(data.ein):
            errors["ein"] = EIN_OR_SSN_INVALID
    elif not v.is_valid_fein(data.ein):
        errors["ein"] = v.FEIN_INVALID


def _entity_general_info(data: OnboardingFormData) -> FieldErrors:
    errors: FieldErrors = {}
    _require(errors, data, "entity_name", "Entity name is required")
    _email(errors, data.email)
    _check_ein(errors, data)
    errors.update(address_errors(data.business_address, "business_address"))
    return errors


def general_info_errors(data: OnboardingFormData) -> FieldErrors:
    if data.payee_type == PayeeType.EMPLOYEE:
        return _employee_general_info(data)
    return _entity_general_info(data)


def work_authorization_errors(data: OnboardingFormData) -> FieldErrors:
    errors: FieldErrors = {}
    if _require(errors, data, "phone_number", "Phone number is required"):
        if not v.is_valid_phone(data.phone_number):
            errors["phone_number"] = v.PHONE_INVALID
    _require_choice(errors, data, "legal_status", LEGAL_STATUSES, "Please select a legal status")
    _require_choice(
        errors, data, "validation_document", VALIDATION_DOCUMENTS,
        "Please select a document type",
    )
    _require(errors, data, "document_number", "Document number is required")
    _require(errors, data, "issuing_authority", "Issuing authority is required")
    if data.document_file is None:
        errors["document_file"] = "Please upload the document"
    return errors


def federal_tax_errors(data: OnboardingFormData) -> FieldErrors:
    errors: FieldErrors = {}
    _require_choice(
        errors, data, "federal_filing_status", FEDERAL_FILING_STATUSES,
        "Please select a filing status",
    )
    _non_negative(
        errors, data, "dependents_credit", "other_income", "deductions", "extra_withholding",
    )
    return errors


def taxpayer_info_errors(data: OnboardingFormData) -> FieldErrors:
    errors: FieldErrors = {}
    _require(errors, data, "entity_name", "Entity name is required")
    _require_choice(
        errors, data, "federal_tax_classification", FEDERAL_TAX_CLASSIFICATIONS,
        "Please select a federal tax classification",
    )
    errors.update(address_errors(data.business_address, "business_address"))
    _check_ein(errors, data)
    return errors


def ny_state_tax_errors(data: OnboardingFormData) -> FieldErrors:
    errors: FieldErrors = {}
    _require_choice(
        errors, data, "ny_filing_status", STATE_FILING_STATUSES, "Please select a filing status",
    )
    _non_negative(
        errors, data,
        "ny_withholding_allowance", "ny_additional_withholding",
        "nyc_withholding_allowance", "nyc_additional_withholding",
    )
    return errors


def residential_state_tax_errors(data: OnboardingFormData) -> FieldErrors:
    errors: FieldErrors = {}
    _require_choice(
        errors, data, "state_filing_status", STATE_FILING_STATUSES,
        "Please select a filing status",
    )
    if data.state_withholding_code and data.state_withholding_code not in STATE_WITHHOLDING_CODES:
        errors["state_withholding_code"] = "Withholding code must be A through F"
    _non_negative(errors, data, "state_additional_withholding", "state_reduced_withholding")
    return errors


def payment_details_errors(data: OnboardingFormData) -> FieldErrors:
    errors: FieldErrors = {}
    if data.payment_method is None:
        errors["payment_method"] = "Please select a payment method"
    elif data.payment_method == PaymentMethod.DIRECT_DEPOSIT:
        if not data.routing_number:
            errors["routing_number"] = v.ROUTING_REQUIRED
        elif not v.is_valid_routing_number(data.routing_number):
            errors["routing_number"] = v.ROUTING_INVALID
        _require(errors, data, "account_number", "Account number is required")
        if data.account_type is None:
            errors["account_type"] = "Account type is required"
    else:
        errors.update(address_errors(data.effective_mailing_address(), "mailing_address"))
    return errors


def invitation_errors(data: OnboardingFormData, invitation: Invitation) -> FieldErrors:
    errors: FieldErrors = {}
    _email(errors, data.email)
    if not invitation.subject.strip():
        errors["subject"] = "Subject is required"
    missing = [doc for doc in mandatory_documents(data.payee_type) if doc not in invitation.documents]
    if missing:
        errors["documents"] = f"Required documents missing: {', '.join(missing)}"
    return errors


STEP_RULES: dict[StepId, Callable[[OnboardingFormData], FieldErrors]] = {
    StepId.GENERAL_INFO: general_info_errors,
    StepId.WORK_AUTHORIZATION: work_authorization_errors,
    StepId.FEDERAL_TAX: federal_tax_errors,
    StepId.TAXPAYER_INFO: taxpayer_info_errors,
    StepId.NY_STATE_TAX: ny_state_tax_errors,
    StepId.RESIDENTIAL_STATE_TAX: residential_state_tax_errors,
    StepId.PAYMENT_DETAILS: payment_details_errors,
}

# Completing a step counts as completing the document it collects
STEP_DOCUMENTS: dict[StepId, str] = {
    StepId.FEDERAL_TAX: "w4_completed",
    StepId.WORK_AUTHORIZATION: "i9_completed",
    StepId.TAXPAYER_INFO: "w9_completed",
}


def step_errors(
    step: StepId, data: OnboardingFormData, invitation: Invitation | None = None
) -> FieldErrors:
    if step == StepId.SELF_ONBOARDING_INVITATION:
        return invitation_errors(data, invitation or Invitation.for_payee(data.payee_type))
    return STEP_RULES[step](data)


# Requirements checked once, before the record leaves the wizard
_SUBMISSION_REQUIREMENTS: dict[PayeeType, tuple[tuple[str, str], ...]] = {
    PayeeType.EMPLOYEE: (
        ("ssn", "SSN is required"),
        ("w4_completed", "W-4 must be completed"),
        ("i9_completed", "I-9 must be completed"),
    ),
    PayeeType.LOANOUT: (
        ("ein", "EIN is required"),
        ("i9_completed", "I-9 must be completed"),
        ("w9_completed", "W-9 must be completed"),
    ),
    PayeeType.VENDOR: (
        ("ein", "EIN is required"),
        ("w9_completed", "W-9 must be completed"),
    ),
}


def submission_errors(data: OnboardingFormData) -> FieldErrors:
    return {
        field: message
        for field, message in _SUBMISSION_REQUIREMENTS[data.payee_type]
        if not getattr(data, field)
    }


def applicability_errors(data: OnboardingFormData) -> FieldErrors:
    message = f"Not collected for {data.payee_type} payees"
    return {field: message for field in inapplicable_fields(data)}


def record_errors(data: OnboardingFormData) -> FieldErrors:
    """Every error in a manually entered record, across all of its visible steps.

    Document flags set by the caller do not stand in for the steps that
    collect them: each step's rules run against the record as given.
    """
    errors: FieldErrors = {}
    for step in visible_steps(data.payee_type, OnboardingMode.MANUAL, data):
        errors.update(step_errors(step, data))
    errors.update(submission_errors(data))
    errors.update(applicability_errors(data))
    return errors
