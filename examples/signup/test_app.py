"""Tests for the signup example."""

from app import handle

URLENCODED = "application/x-www-form-urlencoded"


class TestSignup:
    def test_get_renders_every_field(self) -> None:
        html = handle("GET")
        assert html.startswith('<form action="" method="post" enctype="multipart/form-data">')
        for name in ("email", "password", "message", "gender", "gender2", "optin", "price", "icon"):
            assert f'name="{name}"' in html
        assert '<button name="send" type="submit">Sign Up</button>' in html

    def test_empty_submission_shows_errors(self) -> None:
        html = handle("POST", b"", URLENCODED)
        assert "Email field is required" in html
        assert "Password field is required" in html

    def test_registered_email_rejected(self) -> None:
        html = handle("POST", b"email=taken%40example.com&password=longenough", URLENCODED)
        assert "Email is already registered" in html

    def test_valid_submission(self) -> None:
        html = handle("POST", b"email=ada%40example.com&password=longenough", URLENCODED)
        assert html == "<h1>Welcome, ada@example.com!</h1>"
