"""Hands completed onboarding records to the submission gateway."""

from __future__ import annotations

import logging
from typing import Any

from greenroom.core.config import AppSettings
from greenroom.core.exceptions import StepValidationError, WizardError
from greenroom.core.protocols import ISubmissionGateway
from greenroom.models.onboarding import OnboardingFormData, OnboardingMode
from greenroom.models.submission import SubmissionReceipt
from greenroom.onboarding.documents import Invitation
from greenroom.onboarding.step_rules import record_errors, step_errors
from greenroom.onboarding.steps import StepId, effective_mode
from greenroom.onboarding.wizard import OnboardingWizard

logger = logging.getLogger(__name__)


class OnboardingService:
    """Builds wizards from settings and sends their results."""

    def __init__(self, *, settings: AppSettings, gateway: ISubmissionGateway) -> None:
        self._settings = settings
        self._gateway = gateway

    def start(self, *args: Any, **kwargs: Any) -> OnboardingWizard:
        kwargs.setdefault("enforce_validation", self._settings.wizard.enforce_validation)
        return OnboardingWizard(*args, **kwargs)

    async def send(self, wizard: OnboardingWizard) -> SubmissionReceipt:
        """Send a submitted wizard's record, or its invitation in self-service mode."""
        if not wizard.is_complete:
            raise WizardError("Onboarding has not been submitted yet")
        return await self.send_record(wizard.data, wizard.mode, wizard.invitation)

    async def send_record(
        self,
        data: OnboardingFormData,
        mode: OnboardingMode = OnboardingMode.MANUAL,
        invitation: Invitation | None = None,
    ) -> SubmissionReceipt:
        """Validate and send one record.

        Manual records must pass every visible step and the submission
        requirements; self-service records only need a valid invitation.
        """
        mode = effective_mode(data.payee_type, mode)
        if mode == OnboardingMode.SELF_SERVICE:
            invitation = invitation or Invitation.for_payee(data.payee_type)
            errors = step_errors(StepId.SELF_ONBOARDING_INVITATION, data, invitation)
            if errors:
                raise StepValidationError(str(StepId.SELF_ONBOARDING_INVITATION), errors)
            payload = {
                "payee_type": str(data.payee_type),
                "email": data.email,
                "invitation": invitation.model_dump(mode="json"),
            }
            kind = "onboarding_invitation"
        else:
            errors = record_errors(data)
            if errors:
                raise StepValidationError("submission", errors)
            payload = data.model_dump(mode="json")
            kind = "onboarding"

        receipt = await self._gateway.submit(kind, payload)
        logger.info(
            "Onboarding sent",
            extra={"kind": kind, "payee_type": str(data.payee_type), "reference": receipt.reference},
        )
        return receipt
