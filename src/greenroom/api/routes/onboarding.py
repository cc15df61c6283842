"""Onboarding endpoints: step derivation and record submission."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError

from greenroom.api.deps import get_gateway, get_settings
from greenroom.core.config import AppSettings
from greenroom.core.exceptions import StepValidationError, SubmissionError
from greenroom.core.protocols import ISubmissionGateway
from greenroom.core.types import FieldErrors
from greenroom.models.onboarding import OnboardingFormData, OnboardingMode, PayeeType
from greenroom.models.submission import SubmissionReceipt
from greenroom.onboarding.documents import Invitation
from greenroom.onboarding.service import OnboardingService
from greenroom.onboarding.step_rules import step_errors
from greenroom.onboarding.steps import effective_mode, step_label, visible_steps

router = APIRouter(tags=["onboarding"])


class OnboardingRequest(BaseModel):
    payee_type: PayeeType = PayeeType.EMPLOYEE
    mode: OnboardingMode = OnboardingMode.MANUAL
    form_data: dict[str, Any] = Field(default_factory=dict)
    invitation: Optional[Invitation] = None


class StepView(BaseModel):
    id: str
    label: str
    errors: FieldErrors = Field(default_factory=dict)


class StepsResponse(BaseModel):
    payee_type: PayeeType
    mode: OnboardingMode
    steps: list[StepView]


def _form_data(body: OnboardingRequest) -> OnboardingFormData:
    try:
        return OnboardingFormData.model_validate({**body.form_data, "payee_type": body.payee_type})
    except ValidationError as exc:
        raise HTTPException(
            status_code=422, detail=exc.errors(include_url=False, include_context=False),
        ) from exc


@router.post("/steps", response_model=StepsResponse)
async def derive_steps(body: OnboardingRequest) -> StepsResponse:
    """Return the visible steps for a payee type, mode and partially filled record."""
    data = _form_data(body)
    mode = effective_mode(body.payee_type, body.mode)
    invitation = body.invitation or Invitation.for_payee(body.payee_type)
    steps = [
        StepView(id=str(step), label=step_label(step), errors=step_errors(step, data, invitation))
        for step in visible_steps(body.payee_type, mode, data)
    ]
    return StepsResponse(payee_type=body.payee_type, mode=mode, steps=steps)


@router.post("/submissions", response_model=SubmissionReceipt, status_code=201)
async def submit_onboarding(
    body: OnboardingRequest,
    settings: AppSettings = Depends(get_settings),
    gateway: ISubmissionGateway = Depends(get_gateway),
) -> SubmissionReceipt:
    """Validate and send an onboarding record, or a self-onboarding invitation."""
    data = _form_data(body)
    service = OnboardingService(settings=settings, gateway=gateway)
    try:
        return await service.send_record(data, body.mode, body.invitation)
    except StepValidationError as exc:
        raise HTTPException(
            status_code=422, detail={"step": exc.step, "errors": exc.errors},
        ) from exc
    except SubmissionError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
