"""Onboarding step table and visible-step derivation.

The step sequence is never stored: it is always recomputed from the payee
type, the onboarding mode and the form record.
"""

from __future__ import annotations

from enum import StrEnum

from greenroom.models.onboarding import OnboardingFormData, OnboardingMode, PayeeType


class StepId(StrEnum):
    GENERAL_INFO = "general_info"
    WORK_AUTHORIZATION = "work_authorization"
    FEDERAL_TAX = "federal_tax"
    TAXPAYER_INFO = "taxpayer_info"
    NY_STATE_TAX = "ny_state_tax"
    RESIDENTIAL_STATE_TAX = "residential_state_tax"
    PAYMENT_DETAILS = "payment_details"
    SELF_ONBOARDING_INVITATION = "self_onboarding_invitation"


STEP_LABELS: dict[StepId, str] = {
    StepId.GENERAL_INFO: "General Information",
    StepId.WORK_AUTHORIZATION: "Work Authorization (I-9)",
    StepId.FEDERAL_TAX: "Federal Tax Withholdings (W-4)",
    StepId.TAXPAYER_INFO: "Taxpayer Information (W-9)",
    StepId.NY_STATE_TAX: "NY State Tax Withholdings",
    StepId.RESIDENTIAL_STATE_TAX: "Residential State Tax",
    StepId.PAYMENT_DETAILS: "Payment Details",
    StepId.SELF_ONBOARDING_INVITATION: "Self-Onboarding Invitation",
}

MANUAL_STEPS: dict[PayeeType, tuple[StepId, ...]] = {
    PayeeType.EMPLOYEE: (
        StepId.GENERAL_INFO,
        StepId.WORK_AUTHORIZATION,
        StepId.FEDERAL_TAX,
        StepId.NY_STATE_TAX,
        StepId.RESIDENTIAL_STATE_TAX,
        StepId.PAYMENT_DETAILS,
    ),
    PayeeType.LOANOUT: (
        StepId.GENERAL_INFO,
        StepId.WORK_AUTHORIZATION,
        StepId.TAXPAYER_INFO,
        StepId.NY_STATE_TAX,
        StepId.RESIDENTIAL_STATE_TAX,
        StepId.PAYMENT_DETAILS,
    ),
    PayeeType.VENDOR: (
        StepId.GENERAL_INFO,
        StepId.TAXPAYER_INFO,
        StepId.PAYMENT_DETAILS,
    ),
}

SELF_SERVICE_STEPS: tuple[StepId, ...] = (StepId.SELF_ONBOARDING_INVITATION,)


def effective_mode(payee_type: PayeeType, mode: OnboardingMode) -> OnboardingMode:
    """Employees are always onboarded manually."""
    if payee_type == PayeeType.EMPLOYEE:
        return OnboardingMode.MANUAL
    return mode


def declared_steps(payee_type: PayeeType, mode: OnboardingMode) -> tuple[StepId, ...]:
    if effective_mode(payee_type, mode) == OnboardingMode.SELF_SERVICE:
        return SELF_SERVICE_STEPS
    return MANUAL_STEPS[payee_type]


def is_step_hidden(step: StepId, form_data: OnboardingFormData) -> bool:
    # NY residents are covered by the NY step; the check is exact and case-sensitive
    return step == StepId.RESIDENTIAL_STATE_TAX and form_data.lives_in_ny


def visible_steps(
    payee_type: PayeeType, mode: OnboardingMode, form_data: OnboardingFormData
) -> list[StepId]:
    return [
        step for step in declared_steps(payee_type, mode)
        if not is_step_hidden(step, form_data)
    ]


def step_label(step: StepId) -> str:
    return STEP_LABELS[step]
