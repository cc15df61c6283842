"""Administrator timesheet entry."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from greenroom.models.payroll import Timesheet
from greenroom.validators.fields import parse_amount, parse_hours

ALLOWANCE_OPTIONS: tuple[str, ...] = ("Kit/Box", "Per Diem", "Travel", "Meal", "Equipment", "Other")

_HOUR_FIELDS = frozenset({"total_hours", "overtime"})


def sample_timesheets() -> list[Timesheet]:
    return [
        Timesheet(id=1, employee_name="John Doe", total_hours=40.0, overtime=2.5,
                  reimbursements=Decimal("75.00"), allowances="Per Diem", approved=False),
        Timesheet(id=2, employee_name="Jane Smith", total_hours=37.5, overtime=0,
                  reimbursements=Decimal("0"), allowances="Kit/Box", approved=True),
        Timesheet(id=3, employee_name="Robert Johnson", total_hours=42.25, overtime=4.0,
                  reimbursements=Decimal("125.75"), reimbursement_attachment="receipt.pdf",
                  allowances="Per Diem", approved=True),
    ]


class TimesheetBook:
    """Editable set of timesheets keyed by id."""

    def __init__(self, timesheets: Iterable[Timesheet] | None = None) -> None:
        rows = sample_timesheets() if timesheets is None else timesheets
        self._rows = {row.id: row for row in rows}

    @property
    def timesheets(self) -> list[Timesheet]:
        return list(self._rows.values())

    def get(self, timesheet_id: int) -> Timesheet:
        return self._rows[timesheet_id]

    def _replace(self, timesheet_id: int, **changes) -> Timesheet:
        row = self._rows[timesheet_id].model_copy(update=changes)
        self._rows[timesheet_id] = row
        return row

    def set_hours(self, timesheet_id: int, field: str, raw: str) -> Timesheet:
        """Record typed hours, rounded to the nearest quarter hour."""
        if field not in _HOUR_FIELDS:
            raise ValueError(f"{field!r} is not an hours field")
        return self._replace(timesheet_id, **{field: parse_hours(raw)})

    def set_reimbursements(self, timesheet_id: int, raw: str) -> Timesheet:
        return self._replace(timesheet_id, reimbursements=parse_amount(raw))

    def set_allowance(self, timesheet_id: int, allowance: str) -> Timesheet:
        if allowance and allowance not in ALLOWANCE_OPTIONS:
            raise ValueError(f"Unknown allowance {allowance!r}")
        return self._replace(timesheet_id, allowances=allowance)

    def attach_receipt(self, timesheet_id: int, file_name: str) -> Timesheet:
        return self._replace(timesheet_id, reimbursement_attachment=file_name)

    def toggle_approval(self, timesheet_id: int) -> Timesheet:
        return self._replace(timesheet_id, approved=not self._rows[timesheet_id].approved)
