"""
Collapse a table, or every group of a GroupedFrame, into a single row.
"""

from typing import Any, Callable, Dict, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from gisframe.grouped import GroupedFrame
from gisframe.logging import logger
from gisframe.schemata import check_columns
from gisframe.verbs.common import Table, unwrap


def _first(series: pd.Series, na_rm: bool):
    if na_rm:
        series = series.dropna()
    return series.iloc[0] if len(series) > 0 else np.nan


def _last(series: pd.Series, na_rm: bool):
    if na_rm:
        series = series.dropna()
    return series.iloc[-1] if len(series) > 0 else np.nan


# Every aggregation receives the column and the na_rm flag. With na_rm False,
# a single missing value makes the result missing.
AGGREGATIONS: Dict[str, Callable[[pd.Series, bool], Any]] = {
    "mean": lambda s, na_rm: s.mean(skipna=na_rm),
    "sum": lambda s, na_rm: s.sum(skipna=na_rm),
    "median": lambda s, na_rm: s.median(skipna=na_rm),
    "min": lambda s, na_rm: s.min(skipna=na_rm),
    "max": lambda s, na_rm: s.max(skipna=na_rm),
    "sd": lambda s, na_rm: s.std(skipna=na_rm),
    "var": lambda s, na_rm: s.var(skipna=na_rm),
    "n": lambda s, na_rm: len(s),
    "count": lambda s, na_rm: int(s.count()),
    "n_distinct": lambda s, na_rm: s.nunique(dropna=na_rm),
    "first": _first,
    "last": _last,
}

Aggregation = Tuple[Union[str, None], Union[str, Callable]]


def _parse(name: str, aggregation: Aggregation, df: pd.DataFrame):
    if not (isinstance(aggregation, tuple) and len(aggregation) == 2):
        raise TypeError(
            f"Aggregation {name!r} must be a (column, function) tuple, got {aggregation!r}"
        )
    column, func = aggregation
    if isinstance(func, str):
        if func not in AGGREGATIONS:
            raise ValueError(
                f"Unknown aggregation {func!r} for {name!r}, "
                f"expected one of {list(AGGREGATIONS)} or a callable"
            )
        if column is None and func != "n":
            raise ValueError(f"Aggregation {func!r} for {name!r} requires a column")
    elif not callable(func):
        raise TypeError(f"Aggregation function for {name!r} must be a str or callable")
    if column is not None:
        check_columns(df, [column])
    return column, func


def _aggregate(df: pd.DataFrame, aggregations: Dict[str, tuple], na_rm: bool) -> dict:
    row = {}
    for name, (column, func) in aggregations.items():
        if column is None:
            if isinstance(func, str):
                row[name] = len(df)
            else:
                row[name] = func(df)
            continue

        series = df[column]
        if isinstance(func, str):
            row[name] = AGGREGATIONS[func](series, na_rm)
        else:
            row[name] = func(series.dropna() if na_rm else series)
    return row


def summarize(data: Table, /, na_rm: bool = False, **aggregations: Aggregation):
    """
    Compute summary values, one row per table or one row per group.

    Parameters
    ----------
    data : pandas.DataFrame or GroupedFrame
    na_rm : bool, default False
        Ignore missing values. Otherwise a missing value makes the mean, sum,
        median, min, max, sd and var missing. The row count ``n`` always counts
        every row, ``count`` counts the values that are not missing.
    **aggregations : (column, function) tuples
        The function is the name of an aggregation, one of ``mean, sum,
        median, min, max, sd, var, n, count, n_distinct, first, last``, or a
        callable reducing a Series to a scalar. The column may be None for
        ``n`` and for callables, which then receive the whole (group) frame.

    Returns
    -------
    summary : pandas.DataFrame
        One row, or one row per group in order of first occurrence with the
        grouping columns in front.

    Examples
    --------
    >>> summarize(
    >>>     crime_df,
    >>>     mean_fire=("Fire_Vehicle_Incidents", "mean"),
    >>>     total_assaults=("Assaults", "sum"),
    >>>     na_rm=True,
    >>> )

    Per group:

    >>> summarize(group_by(crime_df, "Arsons"), mean_fire=("Fire_Vehicle_Incidents", "mean"))
    """
    df, keys = unwrap(data)
    parsed = {
        name: _parse(name, aggregation, df) for name, aggregation in aggregations.items()
    }

    if keys is None:
        summary = pd.DataFrame([_aggregate(df, parsed, na_rm)], columns=list(parsed))
        logger.debug(f"summarize: {len(df)} rows to 1 row")
        return summary

    grouped = GroupedFrame(df, keys)
    rows = [_aggregate(frame, parsed, na_rm) for _, frame in grouped.groups()]
    values = pd.DataFrame(rows, columns=list(parsed))
    groupkeys = grouped.data.loc[grouped.first_rows(), keys].reset_index(drop=True)
    summary = pd.concat([pd.DataFrame(groupkeys), values], axis=1)
    logger.debug(f"summarize: {len(df)} rows to {len(summary)} groups")
    return summary


def _function_name(func: Union[str, Callable]) -> str:
    if isinstance(func, str):
        return func
    return getattr(func, "__name__", type(func).__name__)


def summarize_each(
    data: Table,
    functions: Sequence[Union[str, Callable]],
    *columns: str,
    na_rm: bool = False,
):
    """
    Apply every function to every column.

    The output columns are named ``<column>_<function>``, ordered by column
    and then by function. Unlike dplyr, the column is part of the name also
    when a single column is summarized: ``Assaults_mean`` rather than
    ``mean``.

    Examples
    --------
    >>> summarize_each(crime_df, ["mean", "sum"], "Assaults")
    """
    if isinstance(functions, str) or callable(functions):
        functions = [functions]
    aggregations = {
        f"{column}_{_function_name(func)}": (column, func)
        for column in columns
        for func in functions
    }
    return summarize(data, na_rm=na_rm, **aggregations)
