"""Built-in validation rules for wren fields.

Each validator is a callable with the signature::

    def rule(field: Field, data: RequestData) -> str | None:
        '''Return error message, or None if valid.'''

The field supplies the name to look up (``field.values(data)``) and the
display name used in messages. Parameterized validators are factory
functions that return a validator::

    def max_length(n: int) -> Validator:
        def check_length(field: Field, data: RequestData) -> str | None:
            ...
        return check_length

Custom validators follow the same protocol: any callable matching
``(Field, RequestData) -> str | None`` can be attached to a field. Plain
predicates returning ``bool`` work as well (``False`` fails with
``"<label> is not valid"``).
Messages passed to factories may use a ``{label}`` placeholder.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from wren._internal.multimap import RequestData

if TYPE_CHECKING:
    from wren.fields import Field

# Type alias for a validator function
type Validator = Callable[["Field", RequestData], str | bool | None]


def _first(field: Field, data: RequestData) -> str:
    """First submitted value for *field*, or ``""`` when absent."""
    values = field.values(data)
    return values[0] if values else ""


def _message(template: str, field: Field) -> str:
    return template.format(label=field.display_name)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(field: Field, data: RequestData) -> str | None:
    """Field must be present and its first value non-blank."""
    if not _first(field, data).strip():
        return f"{field.display_name} field is required"
    return None


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def matches(pattern: str | re.Pattern[str], message: str | None = None, flags: int = 0) -> Validator:
    """First value must be present and match *pattern* (``re.match`` semantics).

    Anchor the pattern with ``$`` to reject trailing input.
    """
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags)

    def check_pattern(field: Field, data: RequestData) -> str | None:
        values = field.values(data)
        if not values or not compiled.match(values[0]):
            if message is not None:
                return _message(message, field)
            return f"{field.display_name} is not valid"
        return None

    return check_pattern


# Basic email pattern, checks structure not deliverability
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")

email = matches(_EMAIL_RE)


# ---------------------------------------------------------------------------
# Length (blank values pass; pair with ``required``)
# ---------------------------------------------------------------------------


def max_length(n: int) -> Validator:
    """Value must be at most *n* characters."""

    def check_length(field: Field, data: RequestData) -> str | None:
        if len(_first(field, data)) > n:
            return f"{field.display_name} must be at most {n} characters"
        return None

    return check_length


def min_length(n: int) -> Validator:
    """Value must be at least *n* characters."""

    def check_length(field: Field, data: RequestData) -> str | None:
        value = _first(field, data)
        if value and len(value) < n:
            return f"{field.display_name} must be at least {n} characters"
        return None

    return check_length


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Validator:
    """Value must be one of *choices*, or of the field's own options if none given."""
    fixed = frozenset(choices)

    def check_choice(field: Field, data: RequestData) -> str | None:
        value = _first(field, data)
        if not value:
            return None
        allowed = fixed or frozenset(getattr(field, "options", ()))
        if value not in allowed:
            options = ", ".join(sorted(allowed))
            return f"{field.display_name} must be one of: {options}"
        return None

    return check_choice


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def integer(field: Field, data: RequestData) -> str | None:
    """Value must be a valid integer."""
    value = _first(field, data)
    if not value:
        return None
    try:
        int(value)
    except ValueError:
        return f"{field.display_name} must be a whole number"
    return None


def number(field: Field, data: RequestData) -> str | None:
    """Value must be a valid number (int or float)."""
    value = _first(field, data)
    if not value:
        return None
    try:
        float(value)
    except ValueError:
        return f"{field.display_name} must be a number"
    return None


# ---------------------------------------------------------------------------
# Custom predicates
# ---------------------------------------------------------------------------


def check(predicate: Callable[[str], bool], message: str) -> Validator:
    """Adapt a plain ``(value) -> bool`` business rule into a validator.

    Example::

        unregistered = check(lambda v: v not in users, "{label} is already registered")
    """

    def check_predicate(field: Field, data: RequestData) -> str | None:
        value = _first(field, data)
        if value and not predicate(value):
            return _message(message, field)
        return None

    return check_predicate
