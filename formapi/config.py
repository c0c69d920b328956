"""
formapi configuration information.  This module provides both the
default configuration values and the Config class used to carry them
around.  Do not edit the values in this file to configure an
application; pass keyword arguments to Config or keep the settings in a
separate file and load it with Config.read_file().
"""


# Language used by Form.generate() when the caller does not pass one.
DEFAULT_LANGUAGE = "en"

# If true, Form.generate() wraps the form in a complete HTML document
# (html/head/title/body) unless the caller asks for a fragment.
FULL_PAGE = True

# Filename for logging messages; if None, everything will be sent to
# standard error.
ERROR_LOG = None

# Setters on Form ignore invalid values (an unknown mode, a layout
# outside the two defined ones, an empty target).  If true, each ignored
# value is written to the log.
LOG_REJECTED = False

# Default display width and input limit of a TextField.
TEXT_LENGTH = 20
TEXT_MAXLENGTH = 50

# Default number of items per row for CheckField and RadioField grids;
# 0 puts every item in a single row.
CHECK_ITEMS_PER_ROW = 5


# -- End config variables ----------------------------------------------
# (no user serviceable parts after this point)

class Config:
    """Holds all formapi configuration variables -- see above for
    documentation of them.  The naming convention is simple:
    downcase the above variables to get the names of instance
    attributes of this class.
    """

    config_vars = [
        'default_language',
        'full_page',
        'error_log',
        'log_rejected',
        'text_length',
        'text_maxlength',
        'check_items_per_row',
        ]

    def __init__(self, **kwargs):
        self.set_from_dict(globals()) # set defaults
        for name, value in kwargs.items():
            if name not in self.config_vars:
                raise ValueError('unknown config variable %r' % name)
            setattr(self, name, value)

    def set_from_dict(self, config_vars):
        for name, value in config_vars.items():
            if name.isupper():
                name = name.lower()
                if name not in self.config_vars:
                    raise ValueError('unknown config variable %r' % name)
                setattr(self, name, value)

    def read_file(self, filename):
        """Read configuration from a file.  Any variables already
        defined in this Config instance, but not in the file, are
        unchanged, so you can use this to build up a configuration
        by accumulating data from several config files.
        """
        # The config file is Python code.
        config_vars = {}
        with open(filename, 'r') as f:
            exec(f.read(), config_vars)
        self.set_from_dict(config_vars)


_config = None


def get_config():
    """Return the process-wide Config, creating it with the defaults
    on first use.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config):
    """Install 'config' as the process-wide Config (None restores the
    defaults on next use).  A logger created from the previous
    configuration is dropped so that ERROR_LOG takes effect.
    """
    global _config
    from formapi.logger import reset_default_logger
    _config = config
    reset_default_logger()
