"""Base screen with common dependency wiring and the save cycle."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from greenroom.core.config import AppSettings
from greenroom.core.protocols import ICacheBackend, ISubmissionGateway
from greenroom.core.types import FieldErrors
from greenroom.forms.controller import FormController
from greenroom.models.submission import SubmissionReceipt

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ScreenId(StrEnum):
    LOGIN = "login"
    COMPANY_INFORMATION = "company_information"
    PAYROLL_DETAILS = "payroll_details"
    TERMS_REVIEW = "terms_review"
    ACCOUNT_ACTIVATION = "account_activation"
    BANK_SETUP = "bank_setup"
    UNION_SETUP = "union_setup"
    SIGNATURE_SETUP = "signature_setup"


class SaveOutcome(BaseModel):
    """Result of pressing a screen's submit button."""

    screen: ScreenId
    saved: bool
    errors: FieldErrors = Field(default_factory=dict)
    receipt: Optional[SubmissionReceipt] = None
    next_screen: Optional[ScreenId] = None


class BaseScreen(Generic[T]):
    """Common base for all form screens.

    Settings, submission gateway and cache are injected at construction
    time. Subclasses supply the form and, where needed, the payload.
    """

    screen_id: ClassVar[ScreenId]
    next_screen: ClassVar[ScreenId | None] = None

    def __init__(
        self,
        *,
        settings: AppSettings,
        gateway: ISubmissionGateway,
        cache: ICacheBackend,
        form: FormController[T] | None = None,
    ) -> None:
        self._settings = settings
        self._gateway = gateway
        self._cache = cache
        self.form = form if form is not None else self.build_form()

    def build_form(self) -> FormController[T]:
        raise NotImplementedError

    def payload(self) -> dict[str, Any]:
        return self.form.values.model_dump(mode="json")

    @property
    def _status_key(self) -> str:
        return f"save_status:{self.screen_id}"

    async def submit(self) -> SaveOutcome:
        """Validate, then hand the payload to the gateway.

        Gateway failures propagate as SubmissionError; the success
        indicator is only recorded once the gateway has accepted.
        """
        if not self.form.validate():
            return SaveOutcome(screen=self.screen_id, saved=False, errors=self.form.errors)

        receipt = await self._gateway.submit(str(self.screen_id), self.payload())
        self._cache.setex(
            self._status_key,
            self._settings.submission.success_display_seconds,
            receipt.reference,
        )
        logger.info("Saved %s", self.screen_id, extra={"reference": receipt.reference})
        return SaveOutcome(
            screen=self.screen_id, saved=True, receipt=receipt, next_screen=self.next_screen,
        )

    def is_success_visible(self) -> bool:
        return self._cache.get(self._status_key) is not None

    async def health_check(self) -> dict[str, Any]:
        """Return screen health status."""
        return {
            "screen": self.__class__.__name__,
            "status": "healthy",
            "environment": self._settings.environment,
        }
