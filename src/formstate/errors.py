"""formstate exception hierarchy.

Rendering itself never raises: missing values and missing error lists are
defaulted. Only a malformed field schema is an error, and it surfaces when
the schema is built, not when a form is rendered.
"""


class FormStateError(Exception):
    """Base for all formstate-specific errors."""


class SchemaError(FormStateError):
    """Raised when a field schema is malformed.

    Empty field names, duplicate field names, and unknown field types are
    all caught when a ``FormSchema`` or ``FieldSpec`` is constructed.
    """
