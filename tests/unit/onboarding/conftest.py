"""Fixtures for onboarding tests."""

from __future__ import annotations

import pytest

from greenroom.models.address import Address
from greenroom.models.onboarding import (
    FEDERAL_FILING_STATUSES,
    LEGAL_STATUSES,
    OnboardingFormData,
    PayeeType,
    PaymentMethod,
    UploadedFile,
)

CA_HOME = Address(address1="1 Sunset Blvd", city="Los Angeles", state="CA", zip_code="90001")
NY_HOME = Address(address1="1 Broadway", city="New York", state="NY", zip_code="10004")
BUSINESS = Address(address1="5 Stage Rd", city="Troy", state="NY", zip_code="12180")


def complete_employee_fields(home: Address = CA_HOME) -> dict:
    return {
        "legal_first_name": "Ada",
        "legal_last_name": "Lovelace",
        "email": "ada@example.com",
        "ssn": "123-45-6789",
        "date_of_birth": "1990-01-01",
        "home_address": home,
        "job_title": "Director",
        "job_start_date": "2026-11-02",
        "phone_number": "(212)-555-0100",
        "legal_status": LEGAL_STATUSES[0],
        "validation_document": "Passport",
        "document_number": "X1234567",
        "issuing_authority": "US Department of State",
        "document_file": UploadedFile(name="passport.pdf", content_type="application/pdf"),
        "federal_filing_status": FEDERAL_FILING_STATUSES[0],
        "ny_filing_status": "Single",
        "state_filing_status": "Single",
        "payment_method": PaymentMethod.CHECK,
    }


def complete_vendor_fields() -> dict:
    return {
        "entity_name": "Lights Inc",
        "email": "ap@lights.example",
        "ein": "12-3456789",
        "business_address": BUSINESS,
        "federal_tax_classification": "C corporation",
        "payment_method": PaymentMethod.CHECK,
        "mailing_address": BUSINESS,
    }


@pytest.fixture
def employee():
    return OnboardingFormData(payee_type=PayeeType.EMPLOYEE, **complete_employee_fields())


@pytest.fixture
def vendor():
    return OnboardingFormData(payee_type=PayeeType.VENDOR, **complete_vendor_fields())
