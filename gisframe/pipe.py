"""
Forward-pipe composition.

``pipe(x, f)`` is ``f(x)``, and ``pipe(x, then(f, y))`` is ``f(x, y)``. The
three ways below give the same result:

>>> arrange(select(filter(crime_df, "Equity_Score > 80"), "Neighbourhood", "Thefts"), "Thefts")

>>> crime_1 = filter(crime_df, "Equity_Score > 80")
>>> crime_2 = select(crime_1, "Neighbourhood", "Thefts")
>>> arrange(crime_2, "Thefts")

>>> pipe(
>>>     crime_df,
>>>     then(filter, "Equity_Score > 80"),
>>>     then(select, "Neighbourhood", "Thefts"),
>>>     then(arrange, "Thefts"),
>>> )
"""

from typing import Any, Callable

import toolz


def then(func: Callable, *args, **kwargs) -> Callable[[Any], Any]:
    """
    A pipe step calling ``func(data, *args, **kwargs)``.
    """

    def step(data):
        return func(data, *args, **kwargs)

    step.__name__ = getattr(func, "__name__", "step")
    return step


def pipe(data, *steps: Callable[[Any], Any]):
    """
    Pass ``data`` through ``steps``, from left to right.

    Parameters
    ----------
    data
        The value to start with, usually a table.
    *steps : callable
        Functions of a single argument. Use :func:`then` to supply further
        arguments.
    """
    for step in steps:
        if not callable(step):
            raise TypeError(f"Pipe steps must be callable, got {step!r}")
    return toolz.pipe(data, *steps)
