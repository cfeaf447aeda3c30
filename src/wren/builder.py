"""Configuration-driven form construction.

Describe a form as data instead of wiring it by hand on every request::

    SIGNUP = [
        {"kind": "textbox", "name": "email", "label": "Email",
         "validators": ["required", "email"]},
        {"kind": "dropdown", "name": "gender", "label": "Gender",
         "options": ["Female", "Male"]},
        {"kind": "button", "name": "send", "label": "Sign Up"},
    ]

    form = build_form(SIGNUP)

Specs are plain mappings (as loaded from JSON or TOML) or ``FieldSpec``
values. In a mapping, each validator is a rule name (``"required"``), a
single-key mapping for parameterized rules (``{"max_length": 200}``,
``{"matches": "^[a-z]+$"}``, ``{"one_of": ["a", "b"]}``) or any validator
callable. The spec list is immutable; call ``build_form`` per request to
get a fresh field graph.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from wren.config import DEFAULT_CONFIG, FormConfig
from wren.errors import ConfigurationError
from wren.fields import (
    Button,
    Checkbox,
    ChoiceField,
    Dropdown,
    Field,
    File,
    Hidden,
    Password,
    Radio,
    Textarea,
    Textbox,
)
from wren.forms import Form
from wren.validation import rules
from wren.validation.rules import Validator

logger = logging.getLogger("wren.builder")

FIELD_KINDS: dict[str, type[Field]] = {
    cls.kind: cls
    for cls in (Textbox, Password, Textarea, Dropdown, Radio, Checkbox, Hidden, File, Button)
}

# Plain rules, referenced by name
RULES: dict[str, Validator] = {
    "required": rules.required,
    "email": rules.email,
    "integer": rules.integer,
    "number": rules.number,
}

# Parameterized rules, referenced as {name: argument}
RULE_FACTORIES: dict[str, Callable[..., Validator]] = {
    "matches": rules.matches,
    "max_length": rules.max_length,
    "min_length": rules.min_length,
    "one_of": rules.one_of,
}


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Declarative description of one field."""

    kind: str
    name: str
    label: str = ""
    options: tuple[str, ...] = ()
    validators: tuple[Validator, ...] = ()
    value: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> FieldSpec:
        """Build a spec from a plain mapping, resolving rule references.

        Raises:
            ConfigurationError: On missing keys, unknown keys, wrongly typed
                values or unknown rules.
        """
        unknown = set(raw) - {"kind", "name", "label", "options", "validators", "value"}
        if unknown:
            msg = f"Unknown field spec keys: {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)
        for key in ("kind", "name"):
            if key not in raw:
                msg = f"Field spec is missing {key!r}: {dict(raw)!r}"
                raise ConfigurationError(msg)
        for key in ("kind", "name", "label", "value"):
            if key in raw and not isinstance(raw[key], str):
                msg = f"Field spec {key!r} must be a string, got {raw[key]!r}"
                raise ConfigurationError(msg)
        for key in ("options", "validators"):
            if key in raw and not isinstance(raw[key], (list, tuple)):
                msg = f"Field spec {key!r} must be a list, got {raw[key]!r}"
                raise ConfigurationError(msg)
        if not all(isinstance(opt, str) for opt in raw.get("options", ())):
            msg = f"Field spec options must be strings: {raw['options']!r}"
            raise ConfigurationError(msg)
        return cls(
            kind=raw["kind"].lower(),
            name=raw["name"],
            label=raw.get("label", ""),
            options=tuple(raw.get("options", ())),
            validators=tuple(resolve_rule(ref) for ref in raw.get("validators", ())),
            value=raw.get("value", ""),
        )

    def build(self, config: FormConfig = DEFAULT_CONFIG) -> Field:
        """Construct a fresh field from this spec."""
        cls = FIELD_KINDS.get(self.kind)
        if cls is None:
            known = ", ".join(sorted(FIELD_KINDS))
            msg = f"Unknown field kind {self.kind!r} for {self.name!r} (expected one of: {known})"
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = {
            "label": self.label,
            "validators": self.validators,
            "id_prefix": config.id_prefix,
        }
        if self.options:
            if not issubclass(cls, ChoiceField):
                msg = f"Field {self.name!r} of kind {self.kind!r} does not take options"
                raise ConfigurationError(msg)
            kwargs["options"] = self.options
        if self.value:
            if cls is not Hidden:
                msg = f"Only hidden fields carry a value, not {self.kind!r} ({self.name!r})"
                raise ConfigurationError(msg)
            kwargs["value"] = self.value
        return cls(self.name, **kwargs)


def resolve_rule(ref: Any) -> Validator:
    """Turn a rule reference from a spec into a validator callable."""
    if isinstance(ref, str):
        if ref not in RULES:
            msg = f"Unknown validation rule {ref!r}"
            raise ConfigurationError(msg)
        return RULES[ref]

    if isinstance(ref, Mapping):
        if len(ref) != 1:
            msg = f"Parameterized rule must have exactly one key, got {dict(ref)!r}"
            raise ConfigurationError(msg)
        ((name, arg),) = ref.items()
        factory = RULE_FACTORIES.get(name)
        if factory is None:
            msg = f"Unknown validation rule {name!r}"
            raise ConfigurationError(msg)
        if name == "one_of" and not isinstance(arg, str):
            return factory(*arg)
        return factory(arg)

    if callable(ref):
        return ref

    msg = f"Invalid validation rule reference: {ref!r}"
    raise ConfigurationError(msg)


def build_form(
    specs: Iterable[FieldSpec | Mapping[str, Any]],
    *,
    config: FormConfig | None = None,
) -> Form:
    """Build a form from field specs, in order.

    Raises:
        ConfigurationError: On invalid specs, blank names or duplicate names.
    """
    config = config or DEFAULT_CONFIG
    form = Form(config=config)
    for spec in specs:
        if not isinstance(spec, FieldSpec):
            spec = FieldSpec.from_dict(spec)
        form.add_input(spec.build(config))
    logger.debug("Built %r", form)
    return form
