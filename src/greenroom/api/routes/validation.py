"""Field-level validation endpoints used by the form screens."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from greenroom.api.deps import get_settings
from greenroom.core.config import AppSettings
from greenroom.validators import fields

router = APIRouter(tags=["validation"])


class FieldCheck(BaseModel):
    kind: str
    value: str = ""


class FieldCheckResult(BaseModel):
    kind: str
    valid: bool
    error: Optional[str] = None


class PasswordCheck(BaseModel):
    password: str = ""


class PasswordCheckResult(BaseModel):
    level: int
    label: str
    color: str
    error: Optional[str] = None


class StartDateResult(BaseModel):
    selected: date
    valid: bool
    error: Optional[str] = None
    next_valid: date


@router.post("/fields", response_model=FieldCheckResult)
async def check_field(body: FieldCheck) -> FieldCheckResult:
    """Check one value against a named format rule (email, fein, ssn, zip, ...)."""
    if body.kind not in fields.FIELD_RULES:
        raise HTTPException(status_code=422, detail=f"Unknown field rule {body.kind!r}")
    error = fields.check_field(body.kind, body.value)
    return FieldCheckResult(kind=body.kind, valid=error is None, error=error)


@router.post("/password-strength", response_model=PasswordCheckResult)
async def check_password(body: PasswordCheck) -> PasswordCheckResult:
    strength = fields.password_strength(body.password)
    error = fields.password_error(body.password) if body.password else fields.PASSWORD_REQUIRED
    return PasswordCheckResult(
        level=strength.level, label=strength.label, color=strength.color, error=error,
    )


@router.get("/payroll-start-date", response_model=StartDateResult)
async def check_payroll_start_date(
    selected: date,
    today: Optional[date] = None,
    settings: AppSettings = Depends(get_settings),
) -> StartDateResult:
    today = today or date.today()
    lead_days = settings.payroll.start_date_lead_days
    error = fields.payroll_start_date_error(selected, today, lead_days)
    return StartDateResult(
        selected=selected,
        valid=error is None,
        error=error,
        next_valid=fields.next_valid_payroll_start_date(today, lead_days),
    )
