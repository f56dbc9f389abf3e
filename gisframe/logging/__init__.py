"""
Logging support for gisframe.

By default nothing is logged. The verbs report row counts at DEBUG level,
reading and writing files is reported at INFO level.

Examples
--------

Log to stdout using loguru:

>>> import gisframe
>>> from gisframe.logging import LoggerType, LogLevel
>>>
>>> gisframe.logging.configure(LoggerType.LOGURU, LogLevel.DEBUG)

Log with the python logging framework and also write a ``gisframe.log`` file:

>>> gisframe.logging.configure(LoggerType.PYTHON, add_default_file_handler=True)

Hook into an existing python logging setup, without default handlers:

>>> import logging
>>> gisframe.logging.configure(
>>>     LoggerType.PYTHON,
>>>     LogLevel.INFO,
>>>     add_default_stream_handler=False,
>>>     add_default_file_handler=False,
>>> )
>>> logging.basicConfig(level=logging.INFO, handlers=[logging.StreamHandler()])
"""

from gisframe.logging._loggerholder import _LoggerHolder
from gisframe.logging.config import LoggerType, configure
from gisframe.logging.ilogger import ILogger  # noqa: I001
from gisframe.logging.loglevel import LogLevel

logger = _LoggerHolder()
