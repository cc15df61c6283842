"""Generic form state: current values, field errors and the edit/blur/submit cycle."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, TypeVar

from pydantic import BaseModel

from greenroom.core.exceptions import UnknownFieldError
from greenroom.core.types import FieldErrors, Formatter

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Rules = Callable[[T], FieldErrors]


def replace_fields(model: T, **changes: Any) -> T:
    """Return a validated copy of ``model`` with ``changes`` applied."""
    return type(model).model_validate({**dict(model), **changes})


def _belongs_to(key: str, field: str) -> bool:
    return key == field or key.startswith(f"{field}.")


class FormController(Generic[T]):
    """Holds one screen's values and errors.

    Editing a field clears that field's error, leaving a field re-checks it,
    and ``validate`` rebuilds the whole error map from the rule function.
    """

    def __init__(
        self,
        initial: T,
        rules: Rules[T],
        *,
        formatters: Mapping[str, Formatter] | None = None,
    ) -> None:
        self._initial = initial
        self._values = initial
        self._rules = rules
        self._formatters = dict(formatters or {})
        self._errors: FieldErrors = {}

    @property
    def name(self) -> str:
        return type(self._initial).__name__

    @property
    def values(self) -> T:
        return self._values

    @property
    def errors(self) -> FieldErrors:
        return dict(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def _check_field(self, field: str) -> None:
        if field not in type(self._values).model_fields:
            raise UnknownFieldError(self.name, field)

    def set_field(self, field: str, value: Any) -> T:
        self._check_field(field)
        formatter = self._formatters.get(field)
        if formatter is not None:
            value = formatter(value)
        self._values = replace_fields(self._values, **{field: value})
        self.clear_errors(field)
        return self._values

    def set_fields(self, **changes: Any) -> T:
        for field, value in changes.items():
            self.set_field(field, value)
        return self._values

    def blur(self, field: str) -> str | None:
        """Re-check a single field and return its first error, if any."""
        self._check_field(field)
        found = {k: v for k, v in self._rules(self._values).items() if _belongs_to(k, field)}
        self.clear_errors(field)
        self._errors.update(found)
        return next(iter(found.values()), None)

    def validate(self) -> bool:
        self._errors = dict(self._rules(self._values))
        if self._errors:
            logger.debug("%s rejected", self.name, extra={"fields": sorted(self._errors)})
        return not self._errors

    def set_error(self, field: str, message: str) -> None:
        self._errors[field] = message

    def clear_errors(self, *fields: str) -> None:
        for key in list(self._errors):
            if any(_belongs_to(key, field) for field in fields):
                del self._errors[key]

    def reset(self) -> None:
        self._values = self._initial
        self._errors = {}
