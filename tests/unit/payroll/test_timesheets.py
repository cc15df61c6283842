"""Tests for timesheet entry."""

from __future__ import annotations

from decimal import Decimal

import pytest

from greenroom.payroll.timesheets import TimesheetBook


@pytest.fixture
def book():
    return TimesheetBook()


def test_seeded_rows(book):
    assert [row.employee_name for row in book.timesheets] == ["John Doe", "Jane Smith", "Robert Johnson"]


def test_hours_rounded_to_quarter(book):
    assert book.set_hours(1, "total_hours", "38.1").total_hours == 38.0
    assert book.set_hours(1, "overtime", "2.13").overtime == 2.25


def test_non_numeric_hours_count_as_zero(book):
    assert book.set_hours(2, "total_hours", "lots").total_hours == 0.0


def test_negative_entries_clamped_to_zero(book):
    assert book.set_hours(1, "total_hours", "-5").total_hours == 0.0
    assert book.set_hours(1, "overtime", "-0.1").overtime == 0.0
    assert book.set_reimbursements(1, "-20").reimbursements == Decimal("0")


def test_only_hours_fields(book):
    with pytest.raises(ValueError):
        book.set_hours(1, "approved", "1")


def test_reimbursements(book):
    assert book.set_reimbursements(2, "19.99").reimbursements == Decimal("19.99")


def test_allowance_options(book):
    assert book.set_allowance(1, "Travel").allowances == "Travel"
    assert book.set_allowance(1, "").allowances == ""
    with pytest.raises(ValueError):
        book.set_allowance(1, "Yacht")


def test_receipt_and_approval(book):
    assert book.attach_receipt(1, "taxi.png").reimbursement_attachment == "taxi.png"
    assert book.toggle_approval(1).approved
    assert not book.toggle_approval(1).approved


def test_rows_are_replaced_not_mutated(book):
    before = book.get(1)
    book.toggle_approval(1)
    assert before.approved is False
