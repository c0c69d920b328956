"""The form package, consisting of the Form class and the Field classes
it renders.  Application code creates a Form, adds fields and a message
table, and calls Form.generate() for each request.
"""

from formapi.form.form import Form  # noqa: F401
from formapi.form.field import (  # noqa: F401
    Field,
    TextField,
    OptionField,
    CheckField,
    RadioField,
    SelectField,
    HiddenField,
)
