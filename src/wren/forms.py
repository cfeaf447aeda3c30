"""Form: an ordered collection of fields with aggregate render and validate.

Usage::

    form = Form()
    form.add_input(Textbox("email", "Email", validators=[required, email]))
    form.add_input(Button("send", "Sign Up"))

    if method == "POST" and form.validate(parse_form_data(body, content_type)):
        ...  # proceed
    html = form.render()  # errors show up next to their controls

The form renders table rows only; wrapping them in a ``<form>`` element is
the caller's job (see ``wren.templating.render_form_page``).
"""

import html
import logging
from collections.abc import Iterable, Iterator

from kida.template import Markup

from wren._internal.multimap import RequestData
from wren.config import DEFAULT_CONFIG, FormConfig
from wren.errors import ConfigurationError
from wren.fields import Field, File
from wren.validation.result import ValidationResult

logger = logging.getLogger("wren.forms")


class Form:
    """Ordered fields. Insertion order is render and validation order."""

    __slots__ = ("_by_name", "_fields", "config")

    def __init__(self, fields: Iterable[Field] = (), *, config: FormConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._fields: list[Field] = []
        self._by_name: dict[str, Field] = {}
        for field in fields:
            self.add_input(field)

    # -- Assembly --

    def add_input(self, field: Field) -> None:
        """Append *field*.

        Raises:
            ConfigurationError: If another field already uses the same name.
        """
        if field.name in self._by_name:
            msg = f"Duplicate field name {field.name!r} in form"
            raise ConfigurationError(msg)
        self._fields.append(field)
        self._by_name[field.name] = field

    @property
    def fields(self) -> tuple[Field, ...]:
        return tuple(self._fields)

    @property
    def is_multipart(self) -> bool:
        """True when the form has a file upload and needs multipart encoding."""
        return any(isinstance(field, File) for field in self._fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __getitem__(self, name: str) -> Field:
        return self._by_name[name]

    def __repr__(self) -> str:
        names = ", ".join(repr(field.name) for field in self._fields)
        return f"Form([{names}])"

    # -- Rendering --

    def render(self) -> Markup:
        """Render every field as a table row: label, then errors and control."""
        config = self.config
        table_attr = f' class="{html.escape(config.table_class)}"' if config.table_class else ""
        rows = [self._render_row(field) for field in self._fields]
        body = "".join(f"\n{row}" for row in rows)
        return Markup(f"<table{table_attr}>{body}\n</table>")

    def _render_row(self, field: Field) -> str:
        config = self.config
        row_attr = ""
        if field.errors and config.error_row_class:
            row_attr = f' class="{html.escape(config.error_row_class)}"'
        errors = field.render_errors(config.error_list_class)
        return f"<tr{row_attr}><th>{field.get_label()}</th><td>{errors}{field.render()}</td></tr>"

    # -- Validation --

    def validate(self, data: RequestData) -> bool:
        """Validate every field against *data*.

        Returns True only if all fields pass. Every field is validated
        even after one fails, so all errors are ready for the re-render.
        """
        results = [field.validate(data) for field in self._fields]
        valid = all(results)
        if valid:
            logger.debug("Form with %d fields validated", len(self._fields))
        else:
            logger.debug("Form validation failed for: %s", ", ".join(self.errors))
        return valid

    def check(self, data: RequestData) -> ValidationResult:
        """Validate and return cleaned values alongside the errors."""
        self.validate(data)
        cleaned: dict[str, str] = {}
        for field in self._fields:
            if field.errors:
                continue
            values = field.values(data)
            cleaned[field.name] = values[0] if values else ""
        return ValidationResult(data=cleaned, errors=self.errors)

    @property
    def errors(self) -> dict[str, list[str]]:
        """Error messages from the last validation, by field name."""
        return {field.name: list(field.errors) for field in self._fields if field.errors}

    def clear_errors(self) -> None:
        for field in self._fields:
            field.errors = []
