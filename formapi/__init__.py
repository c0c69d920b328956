"""formapi

Declarative HTML forms with localized labels.
"""

__version__ = '0.1'

# This is the default charset used by DefaultLogger for log files.
DEFAULT_CHARSET = 'utf-8'

from formapi.form import (  # noqa: F401,E402
    Form,
    Field,
    TextField,
    CheckField,
    RadioField,
    SelectField,
    HiddenField,
)
