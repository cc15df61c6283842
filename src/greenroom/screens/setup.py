"""Standalone setup screens: bank account, union and signature."""

from __future__ import annotations

from typing import Any

from greenroom.forms import screens as forms
from greenroom.forms.controller import FormController
from greenroom.models.onboarding import UploadedFile
from greenroom.screens.base import BaseScreen, ScreenId
from greenroom.validators.fields import mask_account_number


class BankSetupScreen(BaseScreen[forms.BankSetupForm]):
    screen_id = ScreenId.BANK_SETUP

    def build_form(self) -> FormController[forms.BankSetupForm]:
        return forms.new_bank_setup_form()

    def suggestions(self) -> list[str]:
        return forms.suggest_banks(self.form.values.bank_name)

    def payload(self) -> dict[str, Any]:
        values = self.form.values
        return {
            "bank_name": values.bank_name,
            "routing_number": values.routing_number,
            "account_number": values.account_number,
            "account_type": values.account_type,
            "authorization": values.authorization,
            "account_display": mask_account_number(values.account_number),
        }


class UnionSetupScreen(BaseScreen[forms.UnionSetupForm]):
    screen_id = ScreenId.UNION_SETUP

    def build_form(self) -> FormController[forms.UnionSetupForm]:
        return FormController(forms.UnionSetupForm(), forms.union_setup_rules)

    def set_union_production(self, has_union: bool) -> None:
        forms.set_union_production(self.form, has_union)

    @property
    def requires_aea_details(self) -> bool:
        return self.form.values.agreement_type != forms.AgreementType.TWENTY_NINE_HOUR


class SignatureSetupScreen(BaseScreen[forms.SignatureSetupForm]):
    screen_id = ScreenId.SIGNATURE_SETUP

    def build_form(self) -> FormController[forms.SignatureSetupForm]:
        return FormController(forms.SignatureSetupForm(), forms.signature_setup_rules)

    def choose_method(self, method: forms.SignatureMethod) -> None:
        forms.set_signature_method(self.form, method)

    def draw(self, image_data: str) -> None:
        self.form.set_field("drawn_signature", image_data)

    def upload(self, file: UploadedFile) -> bool:
        return forms.upload_signature(self.form, file)

    def payload(self) -> dict[str, Any]:
        values = self.form.values
        if values.signature_method == forms.SignatureMethod.DRAW:
            signature: Any = values.drawn_signature
        else:
            signature = values.uploaded_signature.model_dump() if values.uploaded_signature else None
        return {
            "signature_policy": values.signature_policy,
            "signature_method": str(values.signature_method),
            "signature": signature,
        }
