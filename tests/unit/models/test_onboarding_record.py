"""Tests for the onboarding record: derived values and payee-type rules."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from greenroom.models.address import Address
from greenroom.models.onboarding import (
    OnboardingFormData,
    PayeeType,
    fields_for,
    inapplicable_fields,
)


def test_lives_in_ny_is_exact_match():
    data = OnboardingFormData(payee_type=PayeeType.EMPLOYEE, home_address=Address(state="NY"))
    assert data.lives_in_ny
    assert not data.model_copy(update={"home_address": Address(state="ny")}).lives_in_ny
    assert not OnboardingFormData(payee_type=PayeeType.EMPLOYEE).lives_in_ny


def test_mailing_address_falls_back_to_home():
    home = Address(address1="1 Main St")
    data = OnboardingFormData(payee_type=PayeeType.EMPLOYEE, home_address=home)
    assert data.effective_mailing_address() == home
    mailing = Address(address1="PO Box 9")
    assert data.model_copy(update={"mailing_address": mailing}).effective_mailing_address() == mailing


def test_employee_summary():
    data = OnboardingFormData(
        payee_type=PayeeType.EMPLOYEE,
        legal_first_name="Ada",
        legal_last_name="Lovelace",
        email="ada@example.com",
        is_union_member=True,
        job_title="Actor",
    )
    assert data.summary() == {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "union_member": "Yes",
        "job_title": "Actor",
    }


def test_vendor_summary_joins_business_address():
    data = OnboardingFormData(
        payee_type=PayeeType.VENDOR,
        entity_name="Lights Inc",
        email="ap@lights.example",
        ein="12-3456789",
        business_address=Address(address1="5 Stage Rd", city="Troy", state="NY", zip_code="12180"),
    )
    summary = data.summary()
    assert summary["name"] == "Lights Inc"
    assert summary["business_address"] == "5 Stage Rd, Troy, NY, 12180"
    assert data.display_name == "Lights Inc"


class TestAddressForPayeeType:
    def test_employee_rejects_business_address(self):
        with pytest.raises(ValidationError, match="home address"):
            OnboardingFormData(
                payee_type=PayeeType.EMPLOYEE,
                home_address=Address(state="CA"),
                business_address=Address(city="Albany"),
            )

    @pytest.mark.parametrize("payee_type", [PayeeType.LOANOUT, PayeeType.VENDOR])
    def test_entities_reject_home_address(self, payee_type):
        with pytest.raises(ValidationError, match="business address"):
            OnboardingFormData(payee_type=payee_type, home_address=Address(state="NY"))


def test_inapplicable_fields_ignore_defaults():
    vendor = OnboardingFormData(payee_type=PayeeType.VENDOR, ssn="", ein="12-3456789")
    assert inapplicable_fields(vendor) == []
    assert inapplicable_fields(vendor.model_copy(update={"ssn": "1", "w4_completed": True})) == [
        "ssn", "w4_completed",
    ]
    assert "home_address" in fields_for(PayeeType.EMPLOYEE)
    assert "home_address" not in fields_for(PayeeType.LOANOUT)
