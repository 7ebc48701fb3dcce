import logging
import os

LOG_LEVEL_ENV = "DISABLER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def level_from_env(default=DEFAULT_LOG_LEVEL):
    """Read the log level from $DISABLER_LOG_LEVEL, by name ("DEBUG") or number ("10")."""
    value = os.environ.get(LOG_LEVEL_ENV)
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return default


def get_logger(level=None, name="disabler"):
    if level is None:
        level = level_from_env()

    if __debug__:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if not logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.NOTSET)
            formatter = logging.Formatter("%(levelname)s %(asctime)s %(filename)s:%(lineno)d] %(message)s")
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        return logger

    class FakeLogger:
        def debug(self, msg, *args, **kwargs):
            pass

        def info(self, msg, *args, **kwargs):
            pass

    return FakeLogger()
