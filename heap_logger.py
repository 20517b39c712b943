import logging
import sys


class Logger(object):
    """
    Thin wrapper over a standard library logger.
    Messages are built from all positional arguments, joined with spaces like print().
    """
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    fmt = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'

    def __init__(self, name: str, level: int = logging.WARNING):
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(self.fmt))
            self._logger.addHandler(handler)
        self._logger.setLevel(level)

    @property
    def name(self) -> str:
        return self._logger.name

    def set_level(self, level: int):
        self._logger.setLevel(level)

    def is_enabled(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def debug(self, *args):
        self._log(logging.DEBUG, args)

    def info(self, *args):
        self._log(logging.INFO, args)

    def warning(self, *args):
        self._log(logging.WARNING, args)

    def error(self, *args):
        self._log(logging.ERROR, args)

    def assert_true(self, condition, *args):
        """
        Log an error and raise AssertionError when condition does not hold
        :param condition: the value that must be truthy
        :param args: parts of the message
        """
        if condition:
            return
        message = self._join(args) or 'assertion failed'
        self._logger.error(message)
        raise AssertionError(message)

    def _log(self, level: int, args):
        # skip str() of large containers when the level is off
        if self._logger.isEnabledFor(level):
            self._logger.log(level, self._join(args))

    @staticmethod
    def _join(args) -> str:
        return ' '.join(map(str, args))


logger = Logger('heap')
