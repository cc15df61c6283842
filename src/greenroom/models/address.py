"""Postal address record and its sub-form helpers."""

from __future__ import annotations

from pydantic import BaseModel

from greenroom.core.exceptions import UnknownFieldError
from greenroom.validators.fields import check_field

REQUIRED_ADDRESS_FIELDS: tuple[str, ...] = ("address1", "city", "state", "zip_code")

_LABELS = {
    "address1": "Address Line 1",
    "address2": "Address Line 2",
    "city": "City",
    "state": "State",
    "zip_code": "ZIP Code",
}


class Address(BaseModel):
    """US postal address. All parts are free text; ZIP format is checked by the parent form."""

    model_config = {"frozen": True}

    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in _LABELS)


def update_address(address: Address | None, field: str, value: str) -> Address:
    """Return a new address with ``field`` replaced.

    Starts from an empty address when none exists yet.
    """
    if field not in _LABELS:
        raise UnknownFieldError("Address", field)
    base = address or Address()
    return base.model_copy(update={field: value})


def missing_address_fields(address: Address | None, required: bool = True) -> list[str]:
    """Required sub-fields that are still blank."""
    if not required:
        return []
    base = address or Address()
    return [name for name in REQUIRED_ADDRESS_FIELDS if not getattr(base, name).strip()]


def address_errors(address: Address | None, prefix: str, required: bool = True) -> dict[str, str]:
    """Field errors keyed ``{prefix}.{sub_field}`` for a required address."""
    errors = {
        f"{prefix}.{name}": f"{_LABELS[name]} is required"
        for name in missing_address_fields(address, required)
    }
    if address is not None:
        zip_error = check_field("zip", address.zip_code)
        if zip_error:
            errors[f"{prefix}.zip_code"] = zip_error
    return errors
