import sys
from typing import Optional

from loguru import logger

from gisframe.logging.ilogger import ILogger
from gisframe.logging.loglevel import LogLevel


def _depth_level(additional_depth: Optional[int]) -> int:
    """
    Depth pointing at the caller of :data:`gisframe.logging.logger`, so loguru
    reports the right file and line.
    """
    default_depth = 2
    if additional_depth is not None:
        return default_depth + additional_depth
    else:
        return default_depth


class LoguruLogger(ILogger):
    """
    Logs through loguru. Configuring it removes loguru's default handler.
    """

    def __init__(
        self,
        log_level: LogLevel,
        add_default_stream_handler: bool,
        add_default_file_handler: bool,
    ) -> None:
        logger.remove()

        if add_default_stream_handler:
            logger.add(sys.stdout, level=log_level.value)
        if add_default_file_handler:
            from gisframe.logging.config import LOG_FILENAME

            logger.add(LOG_FILENAME, level=log_level.value)

    def debug(self, message: str, additional_depth: Optional[int] = None) -> None:
        logger.opt(depth=_depth_level(additional_depth)).debug(message)

    def info(self, message: str, additional_depth: Optional[int] = None) -> None:
        logger.opt(depth=_depth_level(additional_depth)).info(message)

    def warning(self, message: str, additional_depth: Optional[int] = None) -> None:
        logger.opt(depth=_depth_level(additional_depth)).warning(message)

    def error(self, message: str, additional_depth: Optional[int] = None) -> None:
        logger.opt(depth=_depth_level(additional_depth)).error(message)

    def critical(self, message: str, additional_depth: Optional[int] = None) -> None:
        logger.opt(depth=_depth_level(additional_depth)).critical(message)
