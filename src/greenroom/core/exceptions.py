"""Greenroom exception hierarchy."""

from __future__ import annotations


class GreenroomError(Exception):
    """Base exception for all Greenroom errors."""


class UnknownFieldError(GreenroomError):
    """A form was asked to set a field it does not declare."""

    def __init__(self, form: str, field: str) -> None:
        self.form = form
        self.field = field
        super().__init__(f"{form} has no field {field!r}")


class WizardError(GreenroomError):
    """Error raised by the onboarding wizard."""


class WizardCompletedError(WizardError):
    """The wizard has already submitted and accepts no further changes."""


class StepValidationError(WizardError):
    """The current step (or the whole record) failed validation."""

    def __init__(self, step: str, errors: dict[str, str]) -> None:
        self.step = step
        self.errors = errors
        super().__init__(f"Step {step} has {len(errors)} error(s): {sorted(errors)}")


class UnknownScreenError(GreenroomError):
    """No screen is registered under the requested id."""


class InvalidTransitionError(GreenroomError):
    """A screen transition was requested from the wrong state."""

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move from {current} via {requested}")


class PayrollRunError(GreenroomError):
    """A payroll run operation was rejected."""


class SubmissionError(GreenroomError):
    """The submission gateway failed to accept a payload."""


class CacheError(GreenroomError):
    """Cache operation failed."""
