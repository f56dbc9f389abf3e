from abc import abstractmethod

from gisframe.logging.loglevel import LogLevel


class ILogger:
    """
    Interface for the logging backends.

    ``additional_depth`` corrects the reported filename and line number when a
    call passes through extra layers, such as a decorator.
    """

    @abstractmethod
    def debug(self, message: str, additional_depth: int = 0) -> None:
        """Log ``message`` at :attr:`~gisframe.logging.loglevel.LogLevel.DEBUG`."""
        raise NotImplementedError

    @abstractmethod
    def info(self, message: str, additional_depth: int = 0) -> None:
        """Log ``message`` at :attr:`~gisframe.logging.loglevel.LogLevel.INFO`."""
        raise NotImplementedError

    @abstractmethod
    def warning(self, message: str, additional_depth: int = 0) -> None:
        """Log ``message`` at :attr:`~gisframe.logging.loglevel.LogLevel.WARNING`."""
        raise NotImplementedError

    @abstractmethod
    def error(self, message: str, additional_depth: int = 0) -> None:
        """Log ``message`` at :attr:`~gisframe.logging.loglevel.LogLevel.ERROR`."""
        raise NotImplementedError

    @abstractmethod
    def critical(self, message: str, additional_depth: int = 0) -> None:
        """Log ``message`` at :attr:`~gisframe.logging.loglevel.LogLevel.CRITICAL`."""
        raise NotImplementedError

    def log(self, loglevel: LogLevel, message: str, additional_depth: int = 0) -> None:
        """
        Log ``message`` at the given level.
        """
        match loglevel:
            case LogLevel.DEBUG:
                self.debug(message, additional_depth)
            case LogLevel.INFO:
                self.info(message, additional_depth)
            case LogLevel.WARNING:
                self.warning(message, additional_depth)
            case LogLevel.ERROR:
                self.error(message, additional_depth)
            case LogLevel.CRITICAL:
                self.critical(message, additional_depth)
            case _:
                raise ValueError(f"Unknown log level: {loglevel}")
