"""Tests for the HTTP surface using FastAPI's TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from greenroom.api.app import create_app
from greenroom.core.exceptions import CacheError
from greenroom.onboarding.steps import StepId
from greenroom.validators import fields as v
from tests.fakes import MemoryCacheBackend, MemorySubmissionGateway
from tests.unit.onboarding.conftest import complete_vendor_fields


@pytest.fixture
def gateway():
    return MemorySubmissionGateway()


@pytest.fixture
def client(gateway):
    app = create_app(gateway=gateway, cache=MemoryCacheBackend())
    with TestClient(app) as test_client:
        yield test_client


class _BrokenCache(MemoryCacheBackend):
    def ping(self):
        raise CacheError("down")


class _SilentCache(MemoryCacheBackend):
    def ping(self):
        return False


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready(self, client):
        assert client.get("/ready").json() == {"status": "ready", "environment": "dev"}

    def test_not_ready_when_cache_down(self):
        app = create_app(gateway=MemorySubmissionGateway(), cache=_BrokenCache())
        with TestClient(app) as client:
            assert client.get("/ready").status_code == 503

    def test_not_ready_when_ping_fails(self):
        app = create_app(gateway=MemorySubmissionGateway(), cache=_SilentCache())
        with TestClient(app) as client:
            assert client.get("/ready").status_code == 503


class TestValidation:
    def test_field_check(self, client):
        resp = client.post("/validation/fields", json={"kind": "ssn", "value": "123456789"})
        assert resp.json() == {"kind": "ssn", "valid": False, "error": v.SSN_INVALID}

    def test_unknown_field_rule(self, client):
        assert client.post("/validation/fields", json={"kind": "shoe_size", "value": "9"}).status_code == 422

    def test_password_strength(self, client):
        body = client.post("/validation/password-strength", json={"password": "Abcdefgh123!"}).json()
        assert body["level"] == 4
        assert body["error"] is None

    def test_empty_password(self, client):
        body = client.post("/validation/password-strength", json={}).json()
        assert body["level"] == 0
        assert body["error"] == v.PASSWORD_REQUIRED

    def test_payroll_start_date(self, client):
        resp = client.get(
            "/validation/payroll-start-date",
            params={"selected": "2026-10-23", "today": "2026-10-19"},
        )
        body = resp.json()
        assert body["valid"] is False
        assert body["error"] == v.START_DATE_WRONG_DAY
        assert body["next_valid"] == "2026-10-22"


class TestOnboarding:
    def test_steps_for_ny_employee(self, client):
        resp = client.post("/onboarding/steps", json={
            "payee_type": "Employee",
            "form_data": {"home_address": {"state": "NY"}},
        })
        ids = [step["id"] for step in resp.json()["steps"]]
        assert len(ids) == 5
        assert StepId.RESIDENTIAL_STATE_TAX not in ids

    def test_employee_self_service_reported_as_manual(self, client):
        body = client.post("/onboarding/steps", json={"payee_type": "Employee", "mode": "self-service"}).json()
        assert body["mode"] == "manual"

    def test_invalid_form_data(self, client):
        resp = client.post("/onboarding/steps", json={"form_data": {"percentage_401k": "lots"}})
        assert resp.status_code == 422

    def test_incomplete_submission_rejected(self, client, gateway):
        resp = client.post("/onboarding/submissions", json={"payee_type": "Vendor/Contractor"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["step"] == "submission"
        assert gateway.submissions == []

    def test_complete_submission_accepted(self, client, gateway):
        form_data = {**complete_vendor_fields(), "w9_completed": True}
        form_data["business_address"] = form_data["business_address"].model_dump()
        form_data["mailing_address"] = form_data["mailing_address"].model_dump()
        resp = client.post("/onboarding/submissions", json={
            "payee_type": "Vendor/Contractor", "form_data": form_data,
        })
        assert resp.status_code == 201
        assert resp.json()["kind"] == "onboarding"
        assert gateway.payloads("onboarding")[0]["entity_name"] == "Lights Inc"

    def test_invalid_record_with_completed_flags_rejected(self, client, gateway):
        resp = client.post("/onboarding/submissions", json={
            "payee_type": "Employee",
            "form_data": {
                "ssn": "not-an-ssn", "email": "bogus",
                "w4_completed": True, "i9_completed": True,
            },
        })
        assert resp.status_code == 422
        errors = resp.json()["detail"]["errors"]
        assert errors["ssn"] == v.SSN_INVALID
        assert errors["email"] == v.EMAIL_INVALID
        assert gateway.payloads("onboarding") == []

    def test_employee_with_business_address_rejected(self, client, gateway):
        resp = client.post("/onboarding/submissions", json={
            "payee_type": "Employee",
            "form_data": {"business_address": {"city": "Albany"}},
        })
        assert resp.status_code == 422
        assert gateway.submissions == []

    def test_self_service_invitation(self, client, gateway):
        resp = client.post("/onboarding/submissions", json={
            "payee_type": "Loanout",
            "mode": "self-service",
            "form_data": {"email": "crew@loanout.example"},
        })
        assert resp.status_code == 201
        assert resp.json()["kind"] == "onboarding_invitation"

    def test_gateway_failure_is_bad_gateway(self, client, gateway):
        gateway.fail_with = "offline"
        resp = client.post("/onboarding/submissions", json={
            "payee_type": "Loanout",
            "mode": "self-service",
            "form_data": {"email": "crew@loanout.example"},
        })
        assert resp.status_code == 502


class TestScreens:
    def test_submit_terms_review(self, client, gateway):
        resp = client.post("/screens/terms_review/submit", json={
            "terms": True, "privacy": True, "data_processing": True, "security": True,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["saved"] is True
        assert body["next_screen"] == "account_activation"
        assert gateway.payloads("terms_review")

    def test_field_errors_are_422(self, client):
        resp = client.post("/screens/bank_setup/submit", json={"routing_number": "123"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["errors"]["routing_number"] == v.ROUTING_INVALID

    def test_unknown_screen_is_404(self, client):
        assert client.post("/screens/nowhere/submit", json={}).status_code == 404

    def test_unknown_field_is_422(self, client):
        assert client.post("/screens/terms_review/submit", json={"cookies": True}).status_code == 422

    def test_gateway_failure_is_502(self, client, gateway):
        gateway.fail_with = "offline"
        resp = client.post("/screens/union_setup/submit", json={"has_union_production": False})
        assert resp.status_code == 502
