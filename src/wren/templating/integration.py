"""Kida environment setup and full-page form rendering.

``Form.render()`` produces the table of controls only. This module wraps
it in a ``<form>`` element through kida, so the markup is escaped with
the same rules as the rest of an application's templates.
"""

from typing import Any

from kida import Environment
from kida.template import Markup

from wren.config import DEFAULT_CONFIG, FormConfig
from wren.forms import Form
from wren.templating.filters import BUILTIN_FILTERS

_FORM_PAGE = (
    '<form action="{{ action }}" method="{{ method }}"'
    '{% if enctype %} enctype="{{ enctype }}"{% end %}>'
    "{{ body }}"
    "</form>"
)


def create_environment(config: FormConfig | None = None, loader: Any = None) -> Environment:
    """Create a kida Environment with wren's filters registered.

    Pass a kida loader (``FileSystemLoader``, ``PackageLoader``, ...) to
    render file templates; without one the environment only renders
    inline sources.
    """
    config = config or DEFAULT_CONFIG
    options: dict[str, Any] = {"autoescape": config.autoescape}
    if loader is not None:
        options["loader"] = loader
    env = Environment(**options)
    env.update_filters(BUILTIN_FILTERS)
    return env


def render_form_page(
    form: Form,
    *,
    action: str = "",
    method: str = "post",
    env: Environment | None = None,
) -> Markup:
    """Render *form* inside a ``<form>`` element.

    Adds ``enctype="multipart/form-data"`` when the form has a file field.
    """
    env = env or create_environment(form.config)
    template = env.from_string(_FORM_PAGE)
    html = template.render(
        {
            "action": action,
            "method": method,
            "enctype": "multipart/form-data" if form.is_multipart else "",
            "body": form.render(),
        }
    )
    return Markup(html)
