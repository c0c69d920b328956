import sys
import os
import time
import formapi


class DefaultLogger:
    """
    The logger used by forms to report what they did instead of failing.
    You may provide your own object (see set_logger()) if you wish to have
    different behavior.

    Whether log_rejected() is called at all is decided by the
    LOG_REJECTED setting of the form making the call.

    Instance attributes:

      error_log : file
        file to which messages are written.  Set to sys.stderr by default.
    """

    DEFAULT_CHARSET = None # defaults to formapi.DEFAULT_CHARSET

    def __init__(self, error_log=None):
        if error_log is None:
            self.error_log = sys.stderr
        else:
            self.error_log = self._open_log(error_log)

    def _open_log(self, filename):
        charset = self.DEFAULT_CHARSET or formapi.DEFAULT_CHARSET
        return open(filename, 'a', encoding=charset, buffering=1,
                    errors='xmlcharrefreplace')

    def log(self, msg):
        """
        Write an message to the error log with a time stamp.
        """
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S",
                                  time.localtime(time.time()))
        self.error_log.write("[%s] %s%s" % (timestamp, msg, os.linesep))

    def log_rejected(self, owner, attr, value):
        """(owner : any, attr : str, value : any)

        Report that 'value' was not accepted for 'attr' of 'owner' and
        that the previous value was kept.
        """
        self.log("%s: ignored invalid %s %r" % (owner, attr, value))


_logger = None
_logger_is_default = False


def get_logger():
    """Return the process-wide logger.  If none was installed with
    set_logger(), one writing to ERROR_LOG of the current configuration
    is created.
    """
    global _logger, _logger_is_default
    if _logger is None:
        from formapi.config import get_config
        _logger = DefaultLogger(error_log=get_config().error_log)
        _logger_is_default = True
    return _logger


def set_logger(logger):
    global _logger, _logger_is_default
    _logger = logger
    _logger_is_default = False


def reset_default_logger():
    """Drop the logger made by get_logger() so that the next call follows
    the current configuration.  A logger installed with set_logger() is
    kept.
    """
    global _logger, _logger_is_default
    if _logger_is_default:
        _logger = None
        _logger_is_default = False
