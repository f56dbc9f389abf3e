from gisframe.logging.ilogger import ILogger
from gisframe.logging.nulllogger import NullLogger


class _LoggerHolder(ILogger):
    """
    Forwards every call to the logger that is currently configured.

    Modules import :data:`gisframe.logging.logger` once, at import time. The
    holder lets :func:`gisframe.logging.configure` swap the backend afterwards
    without those modules having to import it again.

    >>> from gisframe.logging import logger, configure, LoggerType
    >>> configure(LoggerType.LOGURU)
    >>> logger.info("now handled by loguru")
    """

    def __init__(self) -> None:
        self._instance = NullLogger()

    @property
    def instance(self) -> ILogger:
        """
        The logger that receives the calls.
        """
        return self._instance

    @instance.setter
    def instance(self, value: ILogger) -> None:
        self._instance = value

    def debug(self, message: str, additional_depth: int = 0) -> None:
        self.instance.debug(message, additional_depth)

    def info(self, message: str, additional_depth: int = 0) -> None:
        self.instance.info(message, additional_depth)

    def warning(self, message: str, additional_depth: int = 0) -> None:
        self.instance.warning(message, additional_depth)

    def error(self, message: str, additional_depth: int = 0) -> None:
        self.instance.error(message, additional_depth)

    def critical(self, message: str, additional_depth: int = 0) -> None:
        self.instance.critical(message, additional_depth)
