"""Form fields: one class per HTML control kind.

Each field knows its request-data key (``name``), its label, the rules
attached to it and the errors collected by the last validation pass.
Kinds differ only in how they render their control and their label::

    from wren.fields import Dropdown, Textbox
    from wren.validation import required

    email = Textbox("email", "Email", validators=[required])
    gender = Dropdown("gender", "Gender", options=("Female", "Male"))

    email.render()     # <input type="text" name="email" id="id_email"/>
    email.get_label()  # <label for="id_email">Email</label>

Rendering is pure: it reads field state and never changes it. Every
interpolated string is HTML-escaped, and results are ``Markup`` so they
drop into autoescaping kida templates unchanged.
"""

import html
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field as dc_field
from typing import ClassVar

from kida.template import Markup

from wren._internal.multimap import RequestData, get_values
from wren.errors import ConfigurationError
from wren.validation.rules import Validator


def _esc(value: str) -> str:
    return html.escape(value, quote=True)


@dataclass(slots=True, eq=False)
class Field:
    """Base for all field kinds. Not rendered directly.

    Args:
        name: Request-data key, unique within a form.
        label: Display text. May be empty.
        validators: Rules run in order by ``validate()``.
        id_prefix: Prefix for the control's ``id`` attribute.
    """

    name: str
    label: str = ""
    validators: Sequence[Validator] = ()
    id_prefix: str = "id_"
    errors: list[str] = dc_field(default_factory=list, init=False)

    kind: ClassVar[str] = "field"

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            msg = f"{type(self).__name__} requires a non-empty name"
            raise ConfigurationError(msg)
        self.validators = tuple(self.validators)

    @property
    def html_id(self) -> str:
        """The control's ``id`` attribute value."""
        return f"{self.id_prefix}{self.name}"

    @property
    def display_name(self) -> str:
        """Name used in error messages: the label, falling back to ``name``."""
        return self.label or self.name

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def render(self) -> Markup:
        """Render the field's control."""
        raise NotImplementedError

    def get_label(self) -> Markup:
        """Render a ``<label>`` bound to the control, or ``""`` without a label."""
        if not self.label:
            return Markup("")
        return Markup(f'<label for="{_esc(self.html_id)}">{_esc(self.label)}</label>')

    def render_errors(self, css_class: str = "errorlist") -> Markup:
        """Render the collected errors as a list, or ``""`` when there are none."""
        if not self.errors:
            return Markup("")
        items = "".join(f"<li>{_esc(error)}</li>" for error in self.errors)
        return Markup(f'<ul class="{_esc(css_class)}">{items}</ul>')

    def values(self, data: RequestData) -> list[str]:
        """All values submitted under this field's name."""
        return get_values(data, self.name)

    def validate(self, data: RequestData) -> bool:
        """Run every validator against *data* and collect the failures.

        All validators run even after one fails, so the caller sees
        every broken rule at once. ``errors`` is rebuilt on each call,
        which makes re-validating the same field safe.

        A validator returns an error message or ``None``. Boolean
        predicates are accepted too: ``True`` passes, and ``False`` fails
        with a generic message unless the predicate appended its own
        message to ``errors``.

        Raises:
            TypeError: If a validator returns anything else.
        """
        self.errors = []
        for validator in self.validators:
            before = len(self.errors)
            result = validator(self, data)
            if result is None or result is True:
                continue
            if result is False:
                if len(self.errors) == before:
                    self.errors.append(f"{self.display_name} is not valid")
                continue
            if not isinstance(result, str):
                name = getattr(validator, "__qualname__", repr(validator))
                msg = (
                    f"Validator {name} for field {self.name!r} returned "
                    f"{type(result).__name__}, expected str, bool or None"
                )
                raise TypeError(msg)
            self.errors.append(result)
        return not self.errors


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


@dataclass(slots=True, eq=False)
class Textbox(Field):
    """Single-line text input."""

    kind: ClassVar[str] = "textbox"

    def render(self) -> Markup:
        return Markup(f'<input type="text" name="{_esc(self.name)}" id="{_esc(self.html_id)}"/>')


@dataclass(slots=True, eq=False)
class Password(Field):
    """Masked text input."""

    kind: ClassVar[str] = "password"

    def render(self) -> Markup:
        return Markup(
            f'<input type="password" name="{_esc(self.name)}" id="{_esc(self.html_id)}"/>'
        )


@dataclass(slots=True, eq=False)
class Textarea(Field):
    kind: ClassVar[str] = "textarea"

    def render(self) -> Markup:
        return Markup(
            f'<textarea name="{_esc(self.name)}" id="{_esc(self.html_id)}"></textarea>'
        )


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


@dataclass(slots=True, eq=False)
class ChoiceField(Field):
    """A field offering a fixed, ordered list of options."""

    options: Sequence[str] = ()

    def __post_init__(self) -> None:
        Field.__post_init__(self)
        self.options = tuple(self.options)


@dataclass(slots=True, eq=False)
class Dropdown(ChoiceField):
    """A ``<select>`` with one ``<option>`` per option, in order."""

    kind: ClassVar[str] = "dropdown"

    def render(self) -> Markup:
        options = "".join(f"<option>{_esc(opt)}</option>" for opt in self.options)
        return Markup(
            f'<select name="{_esc(self.name)}" id="{_esc(self.html_id)}">{options}</select>'
        )


@dataclass(slots=True, eq=False)
class Radio(ChoiceField):
    """One radio button per option, all sharing the field's name.

    A radio group has no single focus target, so its label is plain text
    rather than a ``<label for=...>``. Each button is wrapped in its own
    label instead.
    """

    kind: ClassVar[str] = "radio"

    def render(self) -> Markup:
        name = _esc(self.name)
        return Markup(
            "".join(
                f'<label><input name="{name}" type="radio" value="{_esc(opt)}"/> {_esc(opt)}</label>'
                for opt in self.options
            )
        )

    def get_label(self) -> Markup:
        return Markup(_esc(self.label))


# ---------------------------------------------------------------------------
# Other controls
# ---------------------------------------------------------------------------


@dataclass(slots=True, eq=False)
class Checkbox(Field):
    kind: ClassVar[str] = "checkbox"

    def render(self) -> Markup:
        return Markup(
            f'<input type="checkbox" name="{_esc(self.name)}" id="{_esc(self.html_id)}"/>'
        )


@dataclass(slots=True, eq=False)
class Hidden(Field):
    """Non-interactive value carrier. Never labelled."""

    value: str = ""

    kind: ClassVar[str] = "hidden"

    def render(self) -> Markup:
        value = f' value="{_esc(self.value)}"' if self.value else ""
        return Markup(f'<input type="hidden" name="{_esc(self.name)}"{value}/>')

    def get_label(self) -> Markup:
        return Markup("")


@dataclass(slots=True, eq=False)
class File(Field):
    """File upload control.

    Validates against the uploaded file's name when the request data
    carries uploads (``FormData.files``) and no plain value was sent.
    """

    kind: ClassVar[str] = "file"

    def render(self) -> Markup:
        return Markup(f'<input type="file" name="{_esc(self.name)}" id="{_esc(self.html_id)}"/>')

    def values(self, data: RequestData) -> list[str]:
        values = get_values(data, self.name)
        if values:
            return values
        upload = getattr(data, "files", {}).get(self.name)
        if upload is not None and upload.filename:
            return [upload.filename]
        return []


@dataclass(slots=True, eq=False)
class Button(Field):
    """Submit button. The label is the button text, so no separate label."""

    kind: ClassVar[str] = "button"

    def render(self) -> Markup:
        return Markup(f'<button name="{_esc(self.name)}" type="submit">{_esc(self.label)}</button>')

    def get_label(self) -> Markup:
        return Markup("")
