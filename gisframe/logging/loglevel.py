from enum import Enum


class LogLevel(Enum):
    """
    Log levels, numerically equal to those of the standard library.
    """

    DEBUG = 10
    """
    Row counts going in and out of every verb.
    """
    INFO = 20
    """
    Files being read and written.
    """
    WARNING = 30
    """
    Something unexpected that does not stop the operation, such as replacing
    an existing feature class.
    """
    ERROR = 40
    CRITICAL = 50
