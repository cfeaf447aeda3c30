"""Wren exception hierarchy.

Shared across fields, forms, the builder and the request-data parsers so
every module raises and catches the same types.

Validation failures are *not* exceptions: they are messages collected on
the failing field. These types cover misuse of the library itself.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a field, form or builder spec is invalid.

    Typically raised while a form is being assembled (blank or duplicate
    field names, unknown field kinds) so misconfiguration fails at
    startup rather than while rendering a page.
    """
