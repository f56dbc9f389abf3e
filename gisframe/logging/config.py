from enum import Enum

import gisframe

from .loglevel import LogLevel
from .logurulogger import LoguruLogger
from .nulllogger import NullLogger
from .pythonlogger import PythonLogger

LOG_FILENAME = "gisframe.log"


class LoggerType(Enum):
    """
    The supported logging backends.
    """

    PYTHON = PythonLogger.__name__
    """
    The standard library logging framework, using the ``gisframe`` logger.
    """
    LOGURU = LoguruLogger.__name__
    """
    The loguru logging framework.
    """
    NULL = NullLogger.__name__
    """
    Discards all messages. This is the default.
    """


def configure(
    logger_type: LoggerType,
    log_level: LogLevel = LogLevel.WARNING,
    add_default_stream_handler: bool = True,
    add_default_file_handler: bool = False,
) -> None:
    """
    Select the logging backend and its log level.

    Parameters
    ----------
    logger_type : LoggerType
        The logging backend to use.
    log_level : LogLevel
        Messages below this level are dropped. WARNING by default.
    add_default_stream_handler : bool
        Write log messages to stdout. True by default.
    add_default_file_handler : bool
        Write log messages to ``gisframe.log`` in the working directory.
        False by default.
    """
    match logger_type:
        case LoggerType.PYTHON:
            gisframe.logging.logger.instance = PythonLogger(
                log_level, add_default_stream_handler, add_default_file_handler
            )
        case LoggerType.LOGURU:
            gisframe.logging.logger.instance = LoguruLogger(
                log_level, add_default_stream_handler, add_default_file_handler
            )
        case _:
            gisframe.logging.logger.instance = NullLogger()
