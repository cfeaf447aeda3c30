"""Field validation: composable rules, clean results.

Usage::

    from wren.fields import Textbox
    from wren.validation import email, max_length, required

    field = Textbox("email", "Email", validators=[required, email, max_length(200)])
    if not field.validate(data):
        field.errors  # ["Email field is required", "Email is not valid"]

Every attached rule runs, so a field reports all the rules it breaks at
once. Rules return an error message or ``None``; the field collects them.
"""

from wren.validation.result import ValidationResult
from wren.validation.rules import (
    Validator,
    check,
    email,
    integer,
    matches,
    max_length,
    min_length,
    number,
    one_of,
    required,
)

__all__ = [
    "ValidationResult",
    "Validator",
    "check",
    "email",
    "integer",
    "matches",
    "max_length",
    "min_length",
    "number",
    "one_of",
    "required",
]
