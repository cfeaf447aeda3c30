"""Form configuration.

FormConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Rendering configuration for a form. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(table_class="signup", error_list_class="errors")
    """

    # Controls
    id_prefix: str = "id_"  # Control id is id_prefix + field name

    # Layout
    table_class: str = ""
    error_row_class: str = "field--error"  # Added to <tr> of fields with errors
    error_list_class: str = "errorlist"

    # Templates
    autoescape: bool = True


DEFAULT_CONFIG = FormConfig()
