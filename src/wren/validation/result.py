"""Validation result: immutable container for a form's cleaned data or errors."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating request data against a form.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = form.check(data)
        if not result:
            return render_form_page(form)

    ``data`` holds the first submitted value for every field that passed.

    ``errors`` maps field names to lists of error messages::

        {"email": ["Email field is required"],
         "age": ["Age must be a whole number"]}
    """

    data: dict[str, str]
    errors: dict[str, list[str]]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid, enabling the ``if not result:`` pattern."""
        return self.is_valid
