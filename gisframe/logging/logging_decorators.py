import os
from functools import wraps
from time import perf_counter
from typing import Callable, ParamSpec, TypeVar

from gisframe.logging.loglevel import LogLevel

T = TypeVar("T")
P = ParamSpec("P")


def _describe(arg) -> str:
    if isinstance(arg, (str, os.PathLike)):
        return str(arg)
    return type(arg).__name__


def standard_log_decorator(
    start_level: LogLevel = LogLevel.INFO, end_level: LogLevel = LogLevel.DEBUG
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Announce the start and end of the decorated function, with its duration.
    The first positional argument (a path, or an object) names the target.
    """

    def decorator(fun: Callable[P, T]) -> Callable[P, T]:
        @wraps(fun)
        def wrapper(*args: P.args, **kwargs: P.kwargs):
            from gisframe.logging import logger

            target = _describe(args[0]) if args else ""
            name = f"{fun.__module__}.{fun.__name__}"

            start_time = perf_counter()
            logger.log(
                loglevel=start_level,
                message=f"Beginning {name} for {target}...",
                additional_depth=2,
            )

            return_value = fun(*args, **kwargs)

            elapsed = perf_counter() - start_time
            logger.log(
                loglevel=end_level,
                message=f"Finished {name} for {target} in {elapsed:.3f} seconds",
                additional_depth=2,
            )
            return return_value

        return wrapper

    return decorator
