"""Tests for wren.forms: assembly, aggregate validation and table rendering."""

import logging

import pytest

from wren.config import FormConfig
from wren.errors import ConfigurationError
from wren.fields import Button, Dropdown, File, Hidden, Password, Textbox
from wren.forms import Form
from wren.http.forms import FormData, parse_form_data
from wren.validation import email, required


def _email_form() -> Form:
    form = Form()
    form.add_input(Textbox("email", "Email", validators=[required]))
    return form


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


class TestAssembly:
    def test_add_input_preserves_order(self) -> None:
        form = Form()
        form.add_input(Textbox("b"))
        form.add_input(Textbox("a"))
        assert [f.name for f in form] == ["b", "a"]

    def test_constructor_fields(self) -> None:
        form = Form([Textbox("email"), Password("password")])
        assert len(form) == 2
        assert form.fields[1].name == "password"

    def test_duplicate_name_rejected(self) -> None:
        form = _email_form()
        with pytest.raises(ConfigurationError, match="Duplicate field name 'email'"):
            form.add_input(Hidden("email"))

    def test_lookup_by_name(self) -> None:
        form = _email_form()
        assert form["email"].label == "Email"
        assert "email" in form
        assert "missing" not in form

    def test_lookup_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            Form()["missing"]

    def test_is_multipart(self) -> None:
        assert not _email_form().is_multipart
        assert Form([File("icon")]).is_multipart

    def test_repr(self) -> None:
        assert repr(Form([Textbox("a"), Textbox("b")])) == "Form(['a', 'b'])"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidate:
    def test_required_email_missing(self) -> None:
        form = _email_form()
        assert form.validate({}) is False
        assert form["email"].errors == ["Email field is required"]

    def test_required_email_present(self) -> None:
        form = _email_form()
        assert form.validate({"email": ["a@b.com"]}) is True
        assert form["email"].errors == []

    def test_empty_form_is_valid(self) -> None:
        assert Form().validate({}) is True

    def test_no_short_circuit(self) -> None:
        form = Form(
            [
                Textbox("first", "First", validators=[required]),
                Textbox("second", "Second", validators=[required]),
            ]
        )
        assert form.validate({}) is False
        assert form["first"].errors == ["First field is required"]
        assert form["second"].errors == ["Second field is required"]

    def test_exactly_one_failing_field(self) -> None:
        form = Form(
            [
                Textbox("name", "Name", validators=[required]),
                Textbox("email", "Email", validators=[required, email]),
                Password("password", "Password", validators=[required]),
            ]
        )
        data = {"name": ["Ada"], "email": ["nope"], "password": ["s3cret"]}
        assert form.validate(data) is False
        assert form.errors == {"email": ["Email is not valid"]}
        assert form["name"].errors == []
        assert form["password"].errors == []

    def test_aggregate_matches_fields(self) -> None:
        form = Form(
            [
                Textbox("a", validators=[required]),
                Textbox("b", validators=[required]),
            ]
        )
        for data in ({}, {"a": ["1"]}, {"b": ["1"]}, {"a": ["1"], "b": ["2"]}):
            expected = all(field.validate(data) for field in list(form))
            assert form.validate(data) is expected

    def test_form_data_input(self) -> None:
        form = _email_form()
        assert form.validate(FormData({"email": ["a@b.com"]})) is True

    def test_parsed_body_validates_synchronously(self) -> None:
        form = _email_form()
        data = parse_form_data(b"email=a%40b.com", "application/x-www-form-urlencoded")
        assert form.validate(data) is True

    def test_revalidate_does_not_duplicate_errors(self) -> None:
        form = _email_form()
        form.validate({})
        form.validate({})
        assert form.errors == {"email": ["Email field is required"]}

    def test_clear_errors(self) -> None:
        form = _email_form()
        form.validate({})
        form.clear_errors()
        assert form.errors == {}

    def test_logs_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        form = _email_form()
        with caplog.at_level(logging.DEBUG, logger="wren.forms"):
            form.validate({})
        assert "Form validation failed for: email" in caplog.text


class TestCheck:
    def test_valid_data(self) -> None:
        form = Form([Textbox("email", "Email", validators=[required]), Textbox("nick")])
        result = form.check({"email": ["a@b.com"]})
        assert result
        assert result.data == {"email": "a@b.com", "nick": ""}
        assert result.errors == {}

    def test_invalid_data(self) -> None:
        form = Form([Textbox("email", "Email", validators=[required]), Textbox("nick")])
        result = form.check({"nick": ["ada"]})
        assert not result
        assert result.errors == {"email": ["Email field is required"]}
        assert result.data == {"nick": "ada"}

    def test_errors_are_copies(self) -> None:
        form = _email_form()
        result = form.check({})
        result.errors["email"].append("extra")
        assert form["email"].errors == ["Email field is required"]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_empty_form(self) -> None:
        assert Form().render() == "<table>\n</table>"

    def test_single_row(self) -> None:
        form = Form([Textbox("email", "Email")])
        assert form.render() == (
            "<table>\n"
            '<tr><th><label for="id_email">Email</label></th>'
            '<td><input type="text" name="email" id="id_email"/></td></tr>\n'
            "</table>"
        )

    def test_rows_in_insertion_order(self) -> None:
        form = Form([Textbox("b", "B"), Textbox("a", "A")])
        html = form.render()
        assert html.index('name="b"') < html.index('name="a"')
        assert html.count("<tr>") == 2

    def test_errors_precede_control(self) -> None:
        form = _email_form()
        form.validate({})
        html = form.render()
        assert '<tr class="field--error">' in html
        assert (
            '<td><ul class="errorlist"><li>Email field is required</li></ul>'
            '<input type="text" name="email" id="id_email"/></td>'
        ) in html

    def test_no_errors_before_validation(self) -> None:
        html = _email_form().render()
        assert "errorlist" not in html
        assert "field--error" not in html

    def test_dropdown_options_in_order(self) -> None:
        form = Form([Dropdown("gender", "Gender", options=("Female", "Male"))])
        form.validate({"gender": ["Male"]})
        html = form.render()
        assert html.count("<option>") == 2
        assert html.index("<option>Female</option>") < html.index("<option>Male</option>")

    def test_button_row(self) -> None:
        form = Form([Button("send", "Sign Up")])
        assert form["send"].get_label() == ""
        assert '<tr><th></th><td><button name="send" type="submit">Sign Up</button></td></tr>' in (
            form.render()
        )

    def test_does_not_emit_form_tag(self) -> None:
        assert "<form" not in _email_form().render()

    def test_config_classes(self) -> None:
        config = FormConfig(table_class="signup", error_row_class="bad", error_list_class="errs")
        form = Form([Textbox("email", "Email", validators=[required])], config=config)
        form.validate({})
        html = form.render()
        assert html.startswith('<table class="signup">')
        assert '<tr class="bad">' in html
        assert '<ul class="errs">' in html

    def test_no_error_row_class(self) -> None:
        form = Form([Textbox("email", validators=[required])], config=FormConfig(error_row_class=""))
        form.validate({})
        assert "<tr>" in form.render()
