"""Employment sub-forms: pay rates, increments, allowances, 401k and representatives.

Every helper takes the current record and returns a new one. List entries
are validated as whole records before they are stored; a rejected entry
leaves the record untouched and comes back with its errors.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, NamedTuple

from greenroom.core.types import FieldErrors
from greenroom.forms.controller import replace_fields
from greenroom.models.onboarding import (
    Allowance,
    EarningCode,
    Increment,
    OnboardingFormData,
    PayRate,
    RatePeriod,
)
from greenroom.models.union import AEA_INCREMENTS, minimum_weekly_rate

MAX_PAY_RATES = 10
_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def _entry_index(entries: list, index: int, label: str) -> int:
    if not 0 <= index < len(entries):
        raise ValueError(f"No {label} at position {index}")
    return index


class EntryResult(NamedTuple):
    data: OnboardingFormData
    errors: FieldErrors

    @property
    def accepted(self) -> bool:
        return not self.errors


def clamp_percentage(value: Decimal | float | int | str) -> Decimal:
    amount = Decimal(str(value))
    return max(_ZERO, min(amount, _HUNDRED))


# ---------------------------------------------------------------------------
# Pay rates
# ---------------------------------------------------------------------------

def default_pay_rates(data: OnboardingFormData) -> OnboardingFormData:
    """Seed a union member's first weekly rate at the AEA minimum for their title."""
    minimum = minimum_weekly_rate(data.is_union_member, data.job_title)
    if minimum is None or data.pay_rates:
        return data
    rate = PayRate(amount=minimum, period=RatePeriod.WEEK, earning_code=EarningCode.SALARY_REHEARSAL)
    return replace_fields(data, pay_rates=[rate])


def normalize_pay_rate(data: OnboardingFormData, rate: PayRate) -> PayRate:
    """Union members are paid weekly and never below their minimum."""
    if not data.is_union_member:
        return rate
    changes: dict[str, Any] = {"period": RatePeriod.WEEK}
    minimum = minimum_weekly_rate(data.is_union_member, data.job_title)
    if minimum is not None and rate.amount < minimum:
        changes["amount"] = minimum
    return rate.model_copy(update=changes)


def pay_rate_errors(rate: PayRate) -> FieldErrors:
    errors: FieldErrors = {}
    if rate.amount <= 0:
        errors["amount"] = "Amount must be greater than 0"
    return errors


def add_pay_rate(data: OnboardingFormData, rate: PayRate) -> EntryResult:
    if len(data.pay_rates) >= MAX_PAY_RATES:
        return EntryResult(data, {"pay_rates": f"Maximum of {MAX_PAY_RATES} pay rates allowed"})
    rate = normalize_pay_rate(data, rate)
    errors = pay_rate_errors(rate)
    if errors:
        return EntryResult(data, errors)
    return EntryResult(replace_fields(data, pay_rates=[*data.pay_rates, rate]), {})


def update_pay_rate(data: OnboardingFormData, index: int, **changes: Any) -> EntryResult:
    _entry_index(data.pay_rates, index, "pay rate")
    rate = replace_fields(data.pay_rates[index], **changes)
    rate = normalize_pay_rate(data, rate)
    errors = pay_rate_errors(rate)
    if errors:
        return EntryResult(data, errors)
    rates = list(data.pay_rates)
    rates[index] = rate
    return EntryResult(replace_fields(data, pay_rates=rates), {})


def remove_pay_rate(data: OnboardingFormData, index: int) -> OnboardingFormData:
    rates = list(data.pay_rates)
    del rates[_entry_index(rates, index, "pay rate")]
    return replace_fields(data, pay_rates=rates)


# ---------------------------------------------------------------------------
# Increments
# ---------------------------------------------------------------------------

def increment_for(increment_type: str, **fields: Any) -> Increment:
    """Build an increment, filling the amount from the AEA catalogue when listed."""
    if increment_type in AEA_INCREMENTS:
        fields["amount"] = AEA_INCREMENTS[increment_type]
    return Increment(type=increment_type, **fields)


def increment_errors(increment: Increment) -> FieldErrors:
    errors: FieldErrors = {}
    if not increment.type.strip():
        errors["type"] = "Increment type is required"
    if increment.amount <= 0:
        errors["amount"] = "Amount must be greater than 0"
    return errors


def add_increment(data: OnboardingFormData, increment: Increment) -> EntryResult:
    errors = increment_errors(increment)
    if errors:
        return EntryResult(data, errors)
    return EntryResult(replace_fields(data, increments=[*data.increments, increment]), {})


def remove_increment(data: OnboardingFormData, index: int) -> OnboardingFormData:
    increments = list(data.increments)
    del increments[_entry_index(increments, index, "increment")]
    return replace_fields(data, increments=increments)


# ---------------------------------------------------------------------------
# Allowances
# ---------------------------------------------------------------------------

def allowance_errors(allowance: Allowance) -> FieldErrors:
    errors: FieldErrors = {}
    if not allowance.category.strip():
        errors["category"] = "Category is required"
    if allowance.amount <= 0:
        errors["amount"] = "Amount must be greater than 0"
    return errors


def add_allowance(data: OnboardingFormData, allowance: Allowance) -> EntryResult:
    errors = allowance_errors(allowance)
    if errors:
        return EntryResult(data, errors)
    return EntryResult(replace_fields(data, allowances=[*data.allowances, allowance]), {})


def remove_allowance(data: OnboardingFormData, index: int) -> OnboardingFormData:
    allowances = list(data.allowances)
    del allowances[_entry_index(allowances, index, "allowance")]
    return replace_fields(data, allowances=allowances)


# ---------------------------------------------------------------------------
# 401k and representatives
# ---------------------------------------------------------------------------

def set_401k(data: OnboardingFormData, opt_in: bool, percentage: Decimal | float | int = 0) -> OnboardingFormData:
    if not opt_in:
        return replace_fields(data, opt_in_401k=False, percentage_401k=_ZERO)
    return replace_fields(data, opt_in_401k=True, percentage_401k=clamp_percentage(percentage))


def set_representative(data: OnboardingFormData, role: str, present: bool) -> OnboardingFormData:
    """Toggle the agent or manager; removing one also withdraws its authorization."""
    if role not in ("agent", "manager"):
        raise ValueError(f"Unknown representative {role!r}")
    changes: dict[str, Any] = {f"has_{role}": present}
    if not present:
        changes[f"{role}_authorization"] = False
    return replace_fields(data, **changes)


def set_representative_fees(
    data: OnboardingFormData,
    role: str,
    rehearsal: Decimal | float | int,
    performance: Decimal | float | int,
) -> OnboardingFormData:
    if role not in ("agent", "manager"):
        raise ValueError(f"Unknown representative {role!r}")
    return replace_fields(
        data,
        **{
            f"{role}_fee_rehearsal": clamp_percentage(rehearsal),
            f"{role}_fee_performance": clamp_percentage(performance),
        },
    )


def authorize_representative(data: OnboardingFormData, role: str, authorized: bool) -> OnboardingFormData:
    """Authorized representatives take no fee from payroll."""
    if role not in ("agent", "manager"):
        raise ValueError(f"Unknown representative {role!r}")
    changes: dict[str, Any] = {f"{role}_authorization": authorized}
    if authorized:
        changes[f"{role}_fee_rehearsal"] = _ZERO
        changes[f"{role}_fee_performance"] = _ZERO
    return replace_fields(data, **changes)
