"""Tests for per-step validation and submission requirements."""

from __future__ import annotations

from decimal import Decimal

from greenroom.models.onboarding import OnboardingFormData, PayeeType, PaymentMethod
from greenroom.onboarding import step_rules
from greenroom.onboarding.documents import Invitation
from greenroom.onboarding.steps import StepId
from greenroom.validators import fields as v
from tests.unit.onboarding.conftest import NY_HOME


def test_complete_employee_passes_every_step(employee):
    for step in step_rules.STEP_RULES:
        if step == StepId.TAXPAYER_INFO:
            continue
        assert step_rules.step_errors(step, employee) == {}, step


def test_empty_employee_general_info():
    errors = step_rules.general_info_errors(OnboardingFormData(payee_type=PayeeType.EMPLOYEE))
    assert errors["email"] == v.EMAIL_REQUIRED
    assert errors["ssn"] == "SSN is required"
    assert errors["home_address.address1"] == "Address Line 1 is required"


def test_ssn_format(employee):
    errors = step_rules.general_info_errors(employee.model_copy(update={"ssn": "123456789"}))
    assert errors == {"ssn": v.SSN_INVALID}


def test_job_end_before_start(employee):
    errors = step_rules.general_info_errors(employee.model_copy(update={"job_end_date": "2026-01-01"}))
    assert errors == {"job_end_date": "End date cannot be before start date"}


def test_union_member_needs_union(employee):
    errors = step_rules.general_info_errors(employee.model_copy(update={"is_union_member": True}))
    assert errors == {"union": "Please select a union"}


def test_agent_email_checked_when_present(employee):
    errors = step_rules.general_info_errors(
        employee.model_copy(update={"has_agent": True, "agent_email": "nope"})
    )
    assert errors == {"agent_email": v.EMAIL_INVALID}


def test_vendor_accepts_ssn_as_ein(vendor):
    assert step_rules.taxpayer_info_errors(vendor.model_copy(update={"ein": "123-45-6789"})) == {}
    errors = step_rules.taxpayer_info_errors(vendor.model_copy(update={"ein": "12345"}))
    assert errors == {"ein": step_rules.EIN_OR_SSN_INVALID}


def test_loanout_needs_fein(vendor):
    loanout = vendor.model_copy(update={"payee_type": PayeeType.LOANOUT, "ein": "123-45-6789"})
    assert step_rules.taxpayer_info_errors(loanout) == {"ein": v.FEIN_INVALID}


def test_federal_tax_amounts_non_negative(employee):
    errors = step_rules.federal_tax_errors(employee.model_copy(update={"deductions": Decimal("-1")}))
    assert errors == {"deductions": step_rules.NON_NEGATIVE}


def test_withholding_code_range(employee):
    errors = step_rules.residential_state_tax_errors(
        employee.model_copy(update={"state_withholding_code": "G"})
    )
    assert "state_withholding_code" in errors


class TestPaymentDetails:
    def test_direct_deposit_requires_bank_fields(self, employee):
        data = employee.model_copy(update={"payment_method": PaymentMethod.DIRECT_DEPOSIT})
        assert set(step_rules.payment_details_errors(data)) == {
            "routing_number", "account_number", "account_type",
        }

    def test_check_uses_home_address_when_no_mailing(self, employee):
        assert step_rules.payment_details_errors(employee) == {}
        bare = employee.model_copy(update={"home_address": None})
        assert "mailing_address.address1" in step_rules.payment_details_errors(bare)

    def test_method_required(self, employee):
        data = employee.model_copy(update={"payment_method": None})
        assert step_rules.payment_details_errors(data) == {"payment_method": "Please select a payment method"}


class TestInvitation:
    def test_mandatory_documents_required(self, vendor):
        invitation = Invitation(documents=[])
        errors = step_rules.step_errors(StepId.SELF_ONBOARDING_INVITATION, vendor, invitation)
        assert "documents" in errors

    def test_default_invitation_is_valid(self, vendor):
        assert step_rules.step_errors(StepId.SELF_ONBOARDING_INVITATION, vendor) == {}


def test_submission_requirements():
    errors = step_rules.submission_errors(OnboardingFormData(payee_type=PayeeType.LOANOUT))
    assert set(errors) == {"ein", "i9_completed", "w9_completed"}


class TestRecordErrors:
    def test_complete_records_pass(self, employee, vendor):
        assert step_rules.record_errors(
            employee.model_copy(update={"w4_completed": True, "i9_completed": True})
        ) == {}
        assert step_rules.record_errors(vendor.model_copy(update={"w9_completed": True})) == {}

    def test_document_flags_do_not_replace_step_rules(self):
        data = OnboardingFormData(
            payee_type=PayeeType.EMPLOYEE,
            ssn="not-an-ssn",
            email="bogus",
            w4_completed=True,
            i9_completed=True,
        )
        errors = step_rules.record_errors(data)
        assert errors["ssn"] == v.SSN_INVALID
        assert errors["email"] == v.EMAIL_INVALID
        assert "federal_filing_status" in errors
        assert "w4_completed" not in errors

    def test_foreign_fields_reported(self, vendor):
        data = vendor.model_copy(update={"w9_completed": True, "ssn": "123-45-6789"})
        assert step_rules.record_errors(data) == {"ssn": "Not collected for Vendor/Contractor payees"}

    def test_ny_resident_not_checked_for_residential_state(self, employee):
        data = employee.model_copy(update={
            "home_address": NY_HOME, "state_filing_status": "",
            "w4_completed": True, "i9_completed": True,
        })
        assert step_rules.record_errors(data) == {}
