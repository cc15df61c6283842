"""Tests for the screen registry and the registration flow."""

from __future__ import annotations

import pytest

from greenroom.core.exceptions import InvalidTransitionError, UnknownScreenError
from greenroom.screens.base import ScreenId
from greenroom.screens.router import REGISTRATION_SEQUENCE, RegistrationFlow, create_screen
from greenroom.screens.setup import BankSetupScreen


def test_create_screen_by_id(deps):
    assert isinstance(create_screen("bank_setup", **deps), BankSetupScreen)


def test_create_unknown_screen_raises(deps):
    with pytest.raises(UnknownScreenError):
        create_screen("payroll_magic", **deps)


class TestRegistrationFlow:
    def test_walks_the_sequence(self):
        flow = RegistrationFlow()
        seen = [flow.current]
        for screen in REGISTRATION_SEQUENCE[:-1]:
            seen.append(flow.advance(screen))
        assert tuple(seen) == REGISTRATION_SEQUENCE
        assert flow.advance(ScreenId.ACCOUNT_ACTIVATION) is None
        assert flow.is_done

    def test_advance_from_wrong_screen_raises(self):
        flow = RegistrationFlow()
        with pytest.raises(InvalidTransitionError):
            flow.advance(ScreenId.TERMS_REVIEW)

    def test_no_moves_after_done(self):
        flow = RegistrationFlow()
        for screen in REGISTRATION_SEQUENCE:
            flow.advance(screen)
        with pytest.raises(InvalidTransitionError):
            flow.advance(ScreenId.ACCOUNT_ACTIVATION)
        with pytest.raises(InvalidTransitionError):
            flow.back()

    def test_back_stops_at_first_screen(self):
        flow = RegistrationFlow()
        flow.advance(ScreenId.COMPANY_INFORMATION)
        assert flow.back() == ScreenId.COMPANY_INFORMATION
        assert flow.back() == ScreenId.COMPANY_INFORMATION
