"""Payee onboarding wizard: step navigation over one aggregate form record."""

from __future__ import annotations

import logging
from typing import Any

from greenroom.core.exceptions import StepValidationError, UnknownFieldError, WizardCompletedError
from greenroom.core.types import FieldErrors
from greenroom.forms.controller import replace_fields
from greenroom.models.address import update_address
from greenroom.models.onboarding import (
    OnboardingFormData,
    OnboardingMode,
    PayeeType,
    fields_for,
    inapplicable_fields,
)
from greenroom.onboarding import documents
from greenroom.onboarding.step_rules import STEP_DOCUMENTS, step_errors, submission_errors
from greenroom.onboarding.steps import (
    StepId,
    declared_steps,
    effective_mode,
    is_step_hidden,
    visible_steps,
)

logger = logging.getLogger(__name__)

# Never written to logs
SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "ssn", "ein", "date_of_birth", "routing_number", "account_number",
    "document_number", "document_file",
})


def reset_for_payee_type(data: OnboardingFormData, payee_type: PayeeType) -> OnboardingFormData:
    """Carry shared and still-applicable fields into a record for ``payee_type``."""
    keep = fields_for(payee_type)
    kept = {name: value for name, value in dict(data).items() if name in keep}
    kept["payee_type"] = payee_type
    return OnboardingFormData.model_validate(kept)


class OnboardingWizard:
    """Drives one payee through the onboarding steps.

    The step index points into the declared step list for the current payee
    type and mode; hidden steps are passed over by ``next`` and ``back``.
    After the last step the record is submitted and the wizard is terminal.
    """

    def __init__(
        self,
        payee_type: PayeeType = PayeeType.EMPLOYEE,
        mode: OnboardingMode = OnboardingMode.MANUAL,
        *,
        enforce_validation: bool = False,
    ) -> None:
        self._enforce = enforce_validation
        self._data = OnboardingFormData(payee_type=payee_type)
        self._mode = effective_mode(payee_type, mode)
        self._invitation = documents.Invitation.for_payee(payee_type)
        self._index = 0
        self._complete = False
        self._history: list[StepId] = [self.current_step]

    # -- state -------------------------------------------------------------

    @property
    def data(self) -> OnboardingFormData:
        return self._data

    @property
    def payee_type(self) -> PayeeType:
        return self._data.payee_type

    @property
    def mode(self) -> OnboardingMode:
        return self._mode

    @property
    def invitation(self) -> documents.Invitation:
        return self._invitation

    @property
    def step_index(self) -> int:
        return self._index

    @property
    def declared_steps(self) -> tuple[StepId, ...]:
        return declared_steps(self.payee_type, self._mode)

    @property
    def visible_steps(self) -> list[StepId]:
        return visible_steps(self.payee_type, self._mode, self._data)

    @property
    def current_step(self) -> StepId:
        return self.declared_steps[self._index]

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def can_go_back(self) -> bool:
        return not self._complete and self._previous_index() is not None

    @property
    def history(self) -> list[StepId]:
        """Steps entered so far, in order, including revisits."""
        return list(self._history)

    def _guard(self) -> None:
        if self._complete:
            raise WizardCompletedError("Onboarding has already been submitted")

    # -- editing -----------------------------------------------------------

    def update(self, **changes: Any) -> OnboardingFormData:
        self._guard()
        for name in changes:
            if name not in OnboardingFormData.model_fields:
                raise UnknownFieldError("OnboardingFormData", name)
        if "payee_type" in changes:
            raise ValueError("Use change_payee_type() to switch payee type")
        allowed = fields_for(self.payee_type)
        for name in changes:
            if name not in allowed:
                raise UnknownFieldError(f"OnboardingFormData ({self.payee_type})", name)
        self._data = replace_fields(self._data, **changes)
        return self._data

    def update_address(self, field: str, sub_field: str, value: str) -> OnboardingFormData:
        if field not in ("home_address", "business_address", "mailing_address"):
            raise UnknownFieldError("OnboardingFormData", field)
        if field not in fields_for(self.payee_type):
            raise UnknownFieldError(f"OnboardingFormData ({self.payee_type})", field)
        current = getattr(self._data, field)
        if field == "mailing_address" and current is None:
            current = self._data.home_address
        return self.update(**{field: update_address(current, sub_field, value)})

    def replace_data(self, data: OnboardingFormData) -> OnboardingFormData:
        """Adopt a record produced by an employment helper."""
        self._guard()
        if data.payee_type != self.payee_type:
            raise ValueError("Use change_payee_type() to switch payee type")
        extra = inapplicable_fields(data)
        if extra:
            raise UnknownFieldError(f"OnboardingFormData ({self.payee_type})", extra[0])
        self._data = data
        return self._data

    def toggle_document(self, document: str) -> documents.Invitation:
        self._guard()
        self._invitation = documents.toggle_document(self._invitation, self.payee_type, document)
        return self._invitation

    def edit_invitation(self, **changes: Any) -> documents.Invitation:
        self._guard()
        if "documents" in changes:
            raise ValueError("Use toggle_document() to change documents")
        self._invitation = self._invitation.model_copy(update=changes)
        return self._invitation

    # -- validation --------------------------------------------------------

    def step_errors(self, step: StepId | None = None) -> FieldErrors:
        return step_errors(step or self.current_step, self._data, self._invitation)

    def submission_errors(self) -> FieldErrors:
        if self._mode == OnboardingMode.SELF_SERVICE:
            return {}
        return submission_errors(self._data)

    # -- navigation --------------------------------------------------------

    def _next_index(self) -> int | None:
        steps = self.declared_steps
        for index in range(self._index + 1, len(steps)):
            if not is_step_hidden(steps[index], self._data):
                return index
        return None

    def _previous_index(self) -> int | None:
        steps = self.declared_steps
        for index in range(self._index - 1, -1, -1):
            if not is_step_hidden(steps[index], self._data):
                return index
        return None

    def _complete_step(self, step: StepId) -> None:
        errors = self.step_errors(step)
        if errors and self._enforce:
            raise StepValidationError(str(step), errors)
        document_flag = STEP_DOCUMENTS.get(step)
        if document_flag and not errors:
            self._data = replace_fields(self._data, **{document_flag: True})

    def next(self) -> StepId | None:
        """Advance to the next visible step, or submit from the last one.

        Returns the new current step, or None once the record is submitted.
        """
        self._guard()
        self._complete_step(self.current_step)
        target = self._next_index()
        if target is None:
            self._submit()
            return None
        self._index = target
        self._history.append(self.current_step)
        return self.current_step

    def back(self) -> StepId:
        self._guard()
        target = self._previous_index()
        if target is not None:
            self._index = target
            self._history.append(self.current_step)
        return self.current_step

    def _submit(self) -> None:
        if self._enforce:
            errors = self.submission_errors()
            if errors:
                raise StepValidationError("submission", errors)
        self._complete = True
        logger.info(
            "Onboarding submitted",
            extra={
                "payee_type": str(self.payee_type),
                "mode": str(self._mode),
                "record": self._data.model_dump(mode="json", exclude=set(SENSITIVE_FIELDS)),
            },
        )

    # -- governing inputs --------------------------------------------------

    def change_payee_type(self, payee_type: PayeeType) -> None:
        self._guard()
        if payee_type == self.payee_type:
            return
        self._data = reset_for_payee_type(self._data, payee_type)
        self._mode = effective_mode(payee_type, self._mode)
        self._invitation = documents.Invitation.for_payee(payee_type)
        self._restart_steps()

    def set_mode(self, mode: OnboardingMode) -> bool:
        """Switch onboarding mode. Returns False when the change is not allowed."""
        self._guard()
        resolved = effective_mode(self.payee_type, mode)
        if resolved != mode:
            logger.debug("Self-service onboarding is not available for %s", self.payee_type)
            return False
        if resolved != self._mode:
            self._mode = resolved
            self._restart_steps()
        return True

    def restart(self) -> None:
        """Discard everything entered and start over with the same payee type and mode."""
        self._data = OnboardingFormData(payee_type=self.payee_type)
        self._invitation = documents.Invitation.for_payee(self.payee_type)
        self._complete = False
        self._restart_steps()

    def _restart_steps(self) -> None:
        self._index = 0
        self._history = [self.current_step]
