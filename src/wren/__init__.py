"""Wren: HTML form fields with composable server-side validation.

Fields render their own controls and collect the errors their rules
report; a Form renders and validates its fields together.

Basic usage::

    from wren import Form, Textbox, Button
    from wren.validation import required

    form = Form()
    form.add_input(Textbox("email", "Email", validators=[required]))
    form.add_input(Button("send", "Sign Up"))

    form.validate({})   # False
    form.errors         # {"email": ["Email field is required"]}
    form.render()       # <table>...</table>

Data-driven forms::

    from wren import build_form
    form = build_form([{"kind": "textbox", "name": "email", "validators": ["required"]}])
"""

__version__ = "0.1.0"
__all__ = [
    "Button",
    "Checkbox",
    "ConfigurationError",
    "Dropdown",
    "Field",
    "FieldSpec",
    "File",
    "Form",
    "FormConfig",
    "FormData",
    "Hidden",
    "Password",
    "Radio",
    "Textarea",
    "Textbox",
    "ValidationResult",
    "WrenError",
    "build_form",
    "render_form_page",
]

_FIELD_NAMES = (
    "Button",
    "Checkbox",
    "Dropdown",
    "Field",
    "File",
    "Hidden",
    "Password",
    "Radio",
    "Textarea",
    "Textbox",
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Form":
        from wren.forms import Form

        return Form

    if name in _FIELD_NAMES:
        from wren import fields as _fields

        return getattr(_fields, name)

    if name in ("FieldSpec", "build_form"):
        from wren import builder as _builder

        return getattr(_builder, name)

    if name == "FormConfig":
        from wren.config import FormConfig

        return FormConfig

    if name == "FormData":
        from wren.http.forms import FormData

        return FormData

    if name == "ValidationResult":
        from wren.validation.result import ValidationResult

        return ValidationResult

    if name == "render_form_page":
        from wren.templating.integration import render_form_page

        return render_form_page

    if name in ("WrenError", "ConfigurationError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
