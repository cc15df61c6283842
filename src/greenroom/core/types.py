"""Type aliases used across Greenroom."""

from __future__ import annotations

from typing import Any, Callable

# Field name (or "field.sub_field") -> message
FieldErrors = dict[str, str]
Formatter = Callable[[Any], Any]
