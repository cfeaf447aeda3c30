"""Signup: a data-driven form with validation and re-rendering.

Demonstrates:
- ``build_form()`` from a list of field specs (every field kind)
- Built-in rules by name plus a custom business rule
- ``parse_form_data()`` for raw request bodies
- ``render_form_page()`` for the GET page and the error re-render

The HTTP server is left to the host framework: ``handle()`` takes the
method, body and content type, and returns the HTML to send.

Run:
    python app.py
"""

import html

from wren import build_form, render_form_page
from wren.http.forms import parse_form_data
from wren.validation import check

# In-memory "database"
_registered: set[str] = {"taken@example.com"}

_unregistered = check(lambda value: value not in _registered, "{label} is already registered")

SIGNUP_FORM = [
    {
        "kind": "textbox",
        "name": "email",
        "label": "Email",
        "validators": ["required", "email", _unregistered],
    },
    {"kind": "password", "name": "password", "label": "Password", "validators": ["required", {"min_length": 8}]},
    {"kind": "textarea", "name": "message", "label": "Message", "validators": [{"max_length": 500}]},
    {"kind": "dropdown", "name": "gender", "label": "Gender", "options": ["Female", "Male"]},
    {"kind": "radio", "name": "gender2", "label": "Gender", "options": ["Female", "Male"]},
    {"kind": "checkbox", "name": "optin", "label": "Send updates?"},
    {"kind": "hidden", "name": "price", "value": "0"},
    {"kind": "file", "name": "icon", "label": "Image upload"},
    {"kind": "button", "name": "send", "label": "Sign Up"},
]


def handle(method: str, body: bytes = b"", content_type: str = "") -> str:
    """Render the signup page, or validate a submission and respond."""
    form = build_form(SIGNUP_FORM)
    if method != "POST":
        return render_form_page(form)

    data = parse_form_data(body, content_type)
    if not form.validate(data):
        return render_form_page(form)

    _registered.add(data["email"])
    return f"<h1>Welcome, {html.escape(data['email'])}!</h1>"


if __name__ == "__main__":
    print(handle("GET"))
