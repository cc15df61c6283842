"""Screen registry and the registration flow state machine."""

from __future__ import annotations

import logging
from typing import Any

from greenroom.core.exceptions import InvalidTransitionError, UnknownScreenError
from greenroom.screens.base import BaseScreen, ScreenId
from greenroom.screens.registration import (
    AccountActivationScreen,
    CompanyInformationScreen,
    LoginScreen,
    PayrollDetailsScreen,
    TermsReviewScreen,
)
from greenroom.screens.setup import BankSetupScreen, SignatureSetupScreen, UnionSetupScreen

logger = logging.getLogger(__name__)

SCREENS: dict[ScreenId, type[BaseScreen]] = {
    ScreenId.LOGIN: LoginScreen,
    ScreenId.COMPANY_INFORMATION: CompanyInformationScreen,
    ScreenId.PAYROLL_DETAILS: PayrollDetailsScreen,
    ScreenId.TERMS_REVIEW: TermsReviewScreen,
    ScreenId.ACCOUNT_ACTIVATION: AccountActivationScreen,
    ScreenId.BANK_SETUP: BankSetupScreen,
    ScreenId.UNION_SETUP: UnionSetupScreen,
    ScreenId.SIGNATURE_SETUP: SignatureSetupScreen,
}

REGISTRATION_SEQUENCE: tuple[ScreenId, ...] = (
    ScreenId.COMPANY_INFORMATION,
    ScreenId.PAYROLL_DETAILS,
    ScreenId.TERMS_REVIEW,
    ScreenId.ACCOUNT_ACTIVATION,
)


def create_screen(screen_id: str, **deps: Any) -> BaseScreen:
    """Instantiate the screen registered under ``screen_id``."""
    try:
        key = ScreenId(screen_id)
    except ValueError as exc:
        raise UnknownScreenError(f"No screen named {screen_id!r}") from exc
    return SCREENS[key](**deps)


class RegistrationFlow:
    """Company Information -> Payroll Details -> Terms Review -> Account Activation."""

    def __init__(self) -> None:
        self._index = 0
        self._done = False

    @property
    def current(self) -> ScreenId:
        return REGISTRATION_SEQUENCE[self._index]

    @property
    def is_done(self) -> bool:
        return self._done

    def advance(self, from_screen: ScreenId) -> ScreenId | None:
        """Move past ``from_screen`` after it saved. Returns the new screen, or None at the end."""
        if self._done or from_screen != self.current:
            raise InvalidTransitionError(str(self.current), f"advance from {from_screen}")
        if self._index == len(REGISTRATION_SEQUENCE) - 1:
            self._done = True
            logger.info("Registration complete")
            return None
        self._index += 1
        return self.current

    def back(self) -> ScreenId:
        if self._done:
            raise InvalidTransitionError("done", "back")
        if self._index > 0:
            self._index -= 1
        return self.current
