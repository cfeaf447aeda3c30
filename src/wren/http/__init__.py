"""Request-data types consumed by forms."""

from wren.http.forms import FormData, UploadFile, parse_form_data

__all__ = ["FormData", "UploadFile", "parse_form_data"]
