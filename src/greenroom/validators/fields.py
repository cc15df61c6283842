"""Field validators shared by every Greenroom form.

Each validator is a pure predicate over the raw string the user typed and is
paired with the message a form shows when the predicate fails. Empty values are
not judged here; forms decide which fields are required.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_EMAIL = re.compile(
    r'(([^<>()[\]\\.,;:\s@"]+(\.[^<>()[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)
_FEIN = re.compile(r"[0-9]{2}-[0-9]{7}")
_SSN = re.compile(r"[0-9]{3}-[0-9]{2}-[0-9]{4}")
_ZIP = re.compile(r"[0-9]{5}")
_PHONE = re.compile(r"\([0-9]{3}\)-[0-9]{3}-[0-9]{4}")
_ROUTING = re.compile(r"[0-9]{9}")
_NYS_UNEMPLOYMENT = re.compile(r"[0-9]{7}")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)")
_NON_DIGIT = re.compile(r"[^0-9]")

# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email address"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
PASSWORD_LENGTH = "Password must be between 8 and 24 characters"
PASSWORD_CLASSES = (
    "Password must include at least 3 of these: uppercase letters, "
    "lowercase letters, numbers, and special characters"
)
PASSWORD_MISMATCH = "Passwords do not match"
FEIN_INVALID = "FEIN must be in 99-9999999 format"
SSN_INVALID = "SSN must be in 999-99-9999 format"
ZIP_INVALID = "ZIP code must be 5 digits"
PHONE_INVALID = "Phone number must be in (999)-999-9999 format"
ROUTING_REQUIRED = "Routing number is required"
ROUTING_INVALID = "Routing number must be 9 digits"
NYS_UNEMPLOYMENT_INVALID = "NYS Unemployment Number must be 7 digits"
START_DATE_TOO_SOON = "Date must be at least 3 days from today"
START_DATE_WRONG_DAY = "Date must be Monday through Thursday"
CHECK_NUMBER_INVALID = "Must be a positive whole number"

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 24
START_DATE_LEAD_DAYS = 3
# date.weekday(): Monday is 0; Friday, Saturday, Sunday are excluded
_PAYROLL_START_WEEKDAYS = frozenset({0, 1, 2, 3})


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def is_valid_email(raw: str) -> bool:
    return _EMAIL.fullmatch(raw.lower()) is not None


def is_valid_fein(raw: str) -> bool:
    return _FEIN.fullmatch(raw) is not None


def is_valid_ssn(raw: str) -> bool:
    return _SSN.fullmatch(raw) is not None


def is_valid_zip(raw: str) -> bool:
    return _ZIP.fullmatch(raw) is not None


def is_valid_phone(raw: str) -> bool:
    return _PHONE.fullmatch(raw) is not None


def is_valid_routing_number(raw: str) -> bool:
    return _ROUTING.fullmatch(raw) is not None


def is_valid_nys_unemployment_number(raw: str) -> bool:
    return _NYS_UNEMPLOYMENT.fullmatch(raw) is not None


def is_valid_fein_or_ssn(raw: str) -> bool:
    """Vendors may give either identifier on the W-9."""
    return is_valid_fein(raw) or is_valid_ssn(raw)


@dataclass(frozen=True)
class FieldRule:
    """A format predicate and the message shown when it fails."""

    predicate: Callable[[str], bool]
    message: str

    def check(self, raw: str) -> str | None:
        if not raw:
            return None
        return None if self.predicate(raw) else self.message


FIELD_RULES: dict[str, FieldRule] = {
    "email": FieldRule(is_valid_email, EMAIL_INVALID),
    "fein": FieldRule(is_valid_fein, FEIN_INVALID),
    "ssn": FieldRule(is_valid_ssn, SSN_INVALID),
    "zip": FieldRule(is_valid_zip, ZIP_INVALID),
    "phone": FieldRule(is_valid_phone, PHONE_INVALID),
    "routing_number": FieldRule(is_valid_routing_number, ROUTING_INVALID),
    "nys_unemployment_number": FieldRule(
        is_valid_nys_unemployment_number, NYS_UNEMPLOYMENT_INVALID
    ),
}


def check_field(kind: str, raw: str) -> str | None:
    """Return the error message for ``raw`` under rule ``kind``, or None.

    Empty input always passes. Raises KeyError for an unknown kind.
    """
    return FIELD_RULES[kind].check(raw)


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def digits_only(raw: str, limit: int | None = None) -> str:
    digits = _NON_DIGIT.sub("", raw)
    return digits if limit is None else digits[:limit]


def format_phone_number(raw: str) -> str:
    """Progressively format typed digits as (DDD)-DDD-DDDD."""
    digits = digits_only(raw)
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"({digits[:3]})-{digits[3:]}"
    return f"({digits[:3]})-{digits[3:6]}-{digits[6:10]}"


def format_routing_number(raw: str) -> str:
    return digits_only(raw, limit=9)


def mask_account_number(raw: str) -> str:
    return f"****{raw[-4:]}" if raw else ""


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------

_CHARACTER_CLASSES = (
    re.compile(r"[A-Z]"),
    re.compile(r"[a-z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[^A-Za-z0-9]"),
)

_STRENGTH_LABELS: dict[int, tuple[str, str]] = {
    0: ("Too weak", "error"),
    1: ("Weak", "error"),
    2: ("Fair", "warning"),
    3: ("Good", "info"),
    4: ("Strong", "success"),
}


@dataclass(frozen=True)
class PasswordStrength:
    level: int
    label: str
    color: str


def character_class_count(password: str) -> int:
    return sum(1 for pattern in _CHARACTER_CLASSES if pattern.search(password))


def password_strength(password: str) -> PasswordStrength:
    """Score a password 0-4 for the strength meter."""
    level = 0
    if password:
        classes = character_class_count(password)
        level += len(password) >= 8
        level += classes >= 3
        level += len(password) >= 12
        level += classes == 4
    label, color = _STRENGTH_LABELS[level]
    return PasswordStrength(level=level, label=label, color=color)


def password_error(password: str) -> str | None:
    """Return the activation-screen error for ``password``.

    The character-class message wins when both rules fail.
    """
    if character_class_count(password) < 3:
        return PASSWORD_CLASSES
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        return PASSWORD_LENGTH
    return None


# ---------------------------------------------------------------------------
# Payroll start date
# ---------------------------------------------------------------------------

def payroll_start_date_error(
    selected: date, today: date, lead_days: int = START_DATE_LEAD_DAYS
) -> str | None:
    if selected < today + timedelta(days=lead_days):
        return START_DATE_TOO_SOON
    if selected.weekday() not in _PAYROLL_START_WEEKDAYS:
        return START_DATE_WRONG_DAY
    return None


def next_valid_payroll_start_date(today: date, lead_days: int = START_DATE_LEAD_DAYS) -> date:
    candidate = today + timedelta(days=lead_days)
    while candidate.weekday() not in _PAYROLL_START_WEEKDAYS:
        candidate += timedelta(days=1)
    return candidate


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def parse_leading_int(raw: str) -> int | None:
    """Parse the leading integer of ``raw`` the way a lenient form input does."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def parse_leading_number(raw: str) -> float | None:
    match = _LEADING_FLOAT.match(raw)
    return float(match.group(1)) if match else None


def check_number_error(raw: str) -> str | None:
    """Starting check number is optional; when given it must be positive."""
    if not raw:
        return None
    value = parse_leading_int(raw)
    if value is None or value <= 0:
        return CHECK_NUMBER_INVALID
    return None


def round_hours(value: float) -> float:
    """Round to the nearest quarter hour, halves rounding up."""
    return math.floor(value * 4 + 0.5) / 4


def parse_hours(raw: str) -> float:
    """Parse typed hours; non-numeric or negative input counts as zero."""
    value = parse_leading_number(raw)
    if value is None or not math.isfinite(value):
        value = 0.0
    return round_hours(max(0.0, value))


def parse_amount(raw: str) -> Decimal:
    """Parse a typed money amount; non-numeric or negative input counts as zero."""
    value = parse_leading_number(raw)
    if value is None or not math.isfinite(value) or value < 0:
        return Decimal("0")
    return Decimal(str(value))
