"""Tests for the payee picker, payroll totals and the registration review queue."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from greenroom.core.exceptions import PayrollRunError
from greenroom.models.payroll import CompanyRegistration, PayrollLine
from greenroom.payroll.review import PayeePicker, PickablePayee, ReviewQueue, payroll_totals


@pytest.fixture
def picker():
    return PayeePicker([
        PickablePayee(id=1, name="Jane Smith", role="Actor"),
        PickablePayee(id=2, name="John Doe", role="Stage Manager"),
    ])


def test_search_is_case_insensitive(picker):
    picker.search = "JANE"
    assert [p.id for p in picker.visible()] == [1]
    picker.search = ""
    assert len(picker.visible()) == 2


def test_toggle_selection(picker):
    assert picker.toggle(2).is_selected
    assert [p.id for p in picker.selected()] == [2]
    picker.toggle(2)
    assert picker.selected() == []


def test_payroll_totals():
    totals = payroll_totals([
        PayrollLine(id=1, name="A", amount=Decimal("1000"), deductions=Decimal("100"),
                    union_dues=Decimal("25"), employer_taxes=Decimal("76.50")),
        PayrollLine(id=2, name="B", amount=Decimal("500"), deductions=Decimal("50")),
    ])
    assert totals.total_pay == Decimal("1500")
    assert totals.total_deductions == Decimal("150")
    assert totals.total_union_dues == Decimal("25")
    assert totals.total_employer_taxes == Decimal("76.50")


def test_empty_totals_are_zero():
    assert payroll_totals([]).total_pay == Decimal("0")


def test_approve_removes_registration(caplog):
    queue = ReviewQueue([
        CompanyRegistration(entity_name="Greenroom LLC"),
        CompanyRegistration(entity_name="Stagehands Inc"),
    ])
    with caplog.at_level(logging.INFO, logger="greenroom"):
        approved = queue.approve(0)
    assert approved.entity_name == "Greenroom LLC"
    assert [r.entity_name for r in queue.pending] == ["Stagehands Inc"]
    assert any(r.getMessage() == "Registration approved" for r in caplog.records)


def test_approve_out_of_range():
    with pytest.raises(PayrollRunError, match="position 0"):
        ReviewQueue().approve(0)


def test_approve_rejects_negative_position():
    queue = ReviewQueue([CompanyRegistration(entity_name="Greenroom LLC")])
    with pytest.raises(PayrollRunError):
        queue.approve(-1)
    assert [r.entity_name for r in queue.pending] == ["Greenroom LLC"]
