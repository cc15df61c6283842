"""Login and the company registration screens."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from greenroom.core.config import AppSettings
from greenroom.core.protocols import ICacheBackend, ISubmissionGateway
from greenroom.forms import screens as forms
from greenroom.forms.controller import FormController
from greenroom.screens.base import BaseScreen, SaveOutcome, ScreenId
from greenroom.validators.fields import PasswordStrength, format_phone_number


class LoginScreen(BaseScreen[forms.LoginForm]):
    """Credential check in front of MFA. Nothing is sent to the gateway."""

    screen_id = ScreenId.LOGIN

    def __init__(self, *, on_login: Callable[[str], None] | None = None, **deps: Any) -> None:
        self._on_login = on_login
        super().__init__(**deps)

    def build_form(self) -> FormController[forms.LoginForm]:
        return FormController(forms.LoginForm(), forms.login_rules)

    async def submit(self) -> SaveOutcome:
        if not self.form.validate():
            return SaveOutcome(screen=self.screen_id, saved=False, errors=self.form.errors)
        if self._on_login is not None:
            self._on_login(self.form.values.email)
        return SaveOutcome(screen=self.screen_id, saved=True)


class CompanyInformationScreen(BaseScreen[forms.CompanyInformationForm]):
    screen_id = ScreenId.COMPANY_INFORMATION
    next_screen = ScreenId.PAYROLL_DETAILS

    def build_form(self) -> FormController[forms.CompanyInformationForm]:
        return FormController(
            forms.CompanyInformationForm(),
            forms.company_information_rules,
            formatters={"phone_number": format_phone_number},
        )


class PayrollDetailsScreen(BaseScreen[forms.PayrollDetailsForm]):
    screen_id = ScreenId.PAYROLL_DETAILS
    next_screen = ScreenId.TERMS_REVIEW

    def __init__(
        self,
        *,
        settings: AppSettings,
        gateway: ISubmissionGateway,
        cache: ICacheBackend,
        today: date | None = None,
        form: FormController[forms.PayrollDetailsForm] | None = None,
    ) -> None:
        self._today = today or date.today()
        super().__init__(settings=settings, gateway=gateway, cache=cache, form=form)

    def build_form(self) -> FormController[forms.PayrollDetailsForm]:
        return forms.new_payroll_details_form(
            self._today, self._settings.payroll.start_date_lead_days,
        )


class TermsReviewScreen(BaseScreen[forms.TermsReviewForm]):
    screen_id = ScreenId.TERMS_REVIEW
    next_screen = ScreenId.ACCOUNT_ACTIVATION

    def build_form(self) -> FormController[forms.TermsReviewForm]:
        return FormController(forms.TermsReviewForm(), forms.terms_review_rules)

    def toggle(self, agreement_id: str) -> None:
        current = getattr(self.form.values, agreement_id)
        self.form.set_field(agreement_id, not current)
        self.form.clear_errors("agreements")


class AccountActivationScreen(BaseScreen[forms.AccountActivationForm]):
    screen_id = ScreenId.ACCOUNT_ACTIVATION

    def build_form(self) -> FormController[forms.AccountActivationForm]:
        return FormController(forms.AccountActivationForm(), forms.account_activation_rules)

    @property
    def strength(self) -> PasswordStrength:
        return self.form.values.strength

    def payload(self) -> dict[str, Any]:
        return self.form.values.model_dump(mode="json", exclude={"confirm_password"})
