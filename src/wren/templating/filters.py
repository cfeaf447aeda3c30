"""Template filters for rendering wren forms inside kida templates.

Registered automatically by ``create_environment``. They let a page
template lay out fields itself instead of using ``Form.render()``::

    {% for field in form %}
      <div{{ form.errors | field_errors(field.name) | attr("data-invalid") }}>
        {{ field.get_label() }} {{ field | render_errors }} {{ field.render() }}
      </div>
    {% end %}
"""

import html
from typing import Any

from kida.template import Markup

from wren.fields import Field
from wren.forms import Form


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <form method="post"{{ enctype | attr("enctype") }}>
        → <form method="post" enctype="multipart/form-data">
        → <form method="post">                     (when enctype is "")
    """
    if not value:
        return ""
    if isinstance(value, list):
        value = " ".join(str(v) for v in value)
    return Markup(f' {name}="{html.escape(str(value))}"')


def field_errors(errors: Any, field_name: str) -> list[str]:
    """Extract validation errors for a single field.

    Accepts a ``Form`` or a ``{field: [messages]}`` dict (``form.errors``,
    ``ValidationResult.errors``). Returns an empty list when *errors* is
    None, missing, or the field has no errors.
    """
    if errors is None:
        return []
    if isinstance(errors, Form):
        return list(errors[field_name].errors) if field_name in errors else []
    if isinstance(errors, dict):
        val = errors.get(field_name, [])
        return list(val) if val else []
    return []


def render_errors(field: Field, css_class: str = "errorlist") -> Markup:
    """Render a field's error list. Same as ``field.render_errors()``."""
    return field.render_errors(css_class)


BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "field_errors": field_errors,
    "render_errors": render_errors,
}
