from typing import Optional

from gisframe.logging.ilogger import ILogger


class NullLogger(ILogger):
    """
    Discards every message. This is the logger of
    :data:`gisframe.logging.logger` until :func:`gisframe.logging.configure`
    selects another one, so gisframe is silent by default.
    """

    def debug(self, message: str, additional_depth: Optional[int] = None) -> None:
        pass

    def info(self, message: str, additional_depth: Optional[int] = None) -> None:
        pass

    def warning(self, message: str, additional_depth: Optional[int] = None) -> None:
        pass

    def error(self, message: str, additional_depth: Optional[int] = None) -> None:
        pass

    def critical(self, message: str, additional_depth: Optional[int] = None) -> None:
        pass
