"""Kida template integration for wren forms."""

from wren.templating.filters import BUILTIN_FILTERS
from wren.templating.integration import create_environment, render_form_page

__all__ = ["BUILTIN_FILTERS", "create_environment", "render_form_page"]
